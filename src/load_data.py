from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from data.airlines import normalize_code
from src.settings import DEFAULT_AIRLINES_PATH
from src.tidy import _require_columns

logger = logging.getLogger(__name__)

FLIGHT_COLUMNS = ["year", "month", "day", "carrier", "dep_delay", "arr_delay"]


def _read_frame(path: Path) -> pd.DataFrame:
    if path.suffix.lower() == ".parquet":
        return pd.read_parquet(path)
    return pd.read_csv(path)


def load_airlines(path: str | Path | None = None) -> pd.DataFrame:
    """
    Load the carrier code -> airline name lookup.

    Defaults to the bundled `data/airlines.csv`. Pass a `path` to load another
    CSV with the same `carrier,name` schema.
    """
    data_path = Path(path) if path else DEFAULT_AIRLINES_PATH
    if not data_path.exists():
        raise FileNotFoundError(f"Missing airline lookup file: {data_path}")

    raw = pd.read_csv(data_path, dtype=str)
    _require_columns(raw, ["carrier", "name"])
    df = pd.DataFrame(
        {
            "carrier": raw["carrier"].map(normalize_code),
            "name": raw["name"].astype(str).str.strip().str.strip('"'),
        }
    )
    df = df[df["carrier"] != ""].reset_index(drop=True)
    logger.info("loaded airlines", extra={"step": "load", "rows_out": len(df), "path": str(data_path)})
    return df


def _bundled_flights() -> pd.DataFrame:
    try:
        from nycflights13 import flights
    except ImportError as exc:
        raise FileNotFoundError(
            "No flights file configured and the `nycflights13` package is not installed. "
            "Pass --flights, set TIDY_FLIGHTS_PATH, or `pip install nycflights13`."
        ) from exc
    return flights.copy()


def load_flights(path: str | Path | None = None) -> pd.DataFrame:
    """
    Load flight records.

    Reads a CSV/parquet export when `path` is given; otherwise falls back to the
    flights table bundled with the `nycflights13` package.
    """
    if path:
        data_path = Path(path)
        if not data_path.exists():
            raise FileNotFoundError(f"Missing flights file: {data_path}")
        df = _read_frame(data_path)
        source = str(data_path)
    else:
        df = _bundled_flights()
        source = "nycflights13"

    _require_columns(df, FLIGHT_COLUMNS)
    df["carrier"] = df["carrier"].map(normalize_code)
    for col in ("year", "month", "day"):
        df[col] = pd.to_numeric(df[col], errors="coerce").astype("Int64")
    for col in ("dep_delay", "arr_delay"):
        df[col] = pd.to_numeric(df[col], errors="coerce")
    df = df.dropna(subset=["year", "month", "day"]).reset_index(drop=True)

    logger.info("loaded flights", extra={"step": "load", "rows_out": len(df), "path": source})
    return df


def resolve_flights_path(cli_value: Optional[str], configured: Optional[Path]) -> Optional[Path]:
    if cli_value:
        return Path(cli_value)
    return configured
