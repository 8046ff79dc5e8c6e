"""
Runtime configuration for the walkthrough, read from the environment.

* TIDY_FLIGHTS_PATH points at a flights CSV/parquet export (optional).
* TIDY_AIRLINES_PATH points at the carrier code -> name lookup CSV.
* TIDY_OUTPUT_DIR is where rendered charts are written.
* TIDY_MIN_OBS is the smallest partition the per-airline models will fit.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

BASE_DIR = Path(__file__).resolve().parents[1]
DEFAULT_AIRLINES_PATH = BASE_DIR / "data" / "airlines.csv"
DEFAULT_OUTPUT_DIR = BASE_DIR / "reports"
DEFAULT_MIN_OBS = 3


def _env_path(name: str) -> Optional[Path]:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    return Path(raw.strip())


@dataclass
class Settings:
    flights_path: Optional[Path] = None
    airlines_path: Path = DEFAULT_AIRLINES_PATH
    output_dir: Path = DEFAULT_OUTPUT_DIR
    min_obs: int = DEFAULT_MIN_OBS

    @classmethod
    def from_env(cls) -> "Settings":
        raw_min_obs = os.environ.get("TIDY_MIN_OBS")
        try:
            min_obs = int(raw_min_obs) if raw_min_obs and raw_min_obs.strip() else DEFAULT_MIN_OBS
            if min_obs <= 0:
                raise ValueError
        except ValueError:
            min_obs = DEFAULT_MIN_OBS
        return cls(
            flights_path=_env_path("TIDY_FLIGHTS_PATH"),
            airlines_path=_env_path("TIDY_AIRLINES_PATH") or DEFAULT_AIRLINES_PATH,
            output_dir=_env_path("TIDY_OUTPUT_DIR") or DEFAULT_OUTPUT_DIR,
            min_obs=min_obs,
        )
