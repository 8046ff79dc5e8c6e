#!/usr/bin/env python3
"""
Simple helper to guard required CSV inputs for the tidy-data walkthrough.
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.settings import Settings  # noqa: E402


def main() -> None:
    settings = Settings.from_env()
    required = [settings.airlines_path]
    if settings.flights_path is not None:
        required.append(settings.flights_path)
    missing = [str(path) for path in required if not Path(path).exists()]

    if settings.flights_path is None:
        try:
            import nycflights13  # noqa: F401
        except ImportError:
            missing.append("flights data (set TIDY_FLIGHTS_PATH or install nycflights13)")
    if missing:
        raise SystemExit(
            "Missing required data files:\n- " + "\n- ".join(missing)
        )
    print(f"Data check: ok (charts go to {settings.output_dir})")


if __name__ == "__main__":
    main()
