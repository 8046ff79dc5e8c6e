import sys
from pathlib import Path

import pytest


def _ensure_repo_root_on_path():
    """Allow tests to import project modules without installation."""
    repo_root = Path(__file__).resolve().parent.parent
    repo_str = str(repo_root)
    if repo_str not in sys.path:
        sys.path.insert(0, repo_str)


_ensure_repo_root_on_path()

from tests.helpers import sample_airlines, sample_flights  # noqa: E402


@pytest.fixture
def flights():
    return sample_flights()


@pytest.fixture
def airlines():
    return sample_airlines()


@pytest.fixture(autouse=True)
def clear_tidy_env(monkeypatch):
    """Ensure each test starts without walkthrough environment overrides."""
    for name in ("TIDY_FLIGHTS_PATH", "TIDY_AIRLINES_PATH", "TIDY_OUTPUT_DIR", "TIDY_MIN_OBS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
