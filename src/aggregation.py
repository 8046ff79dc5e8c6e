from __future__ import annotations

import logging
from typing import Optional, Sequence

import pandas as pd

from src.tidy import _require_columns

logger = logging.getLogger(__name__)


def filter_positive(df: pd.DataFrame, column: str) -> pd.DataFrame:
    """Keep rows whose ``column`` is strictly positive; missing values are dropped."""
    _require_columns(df, [column])
    values = pd.to_numeric(df[column], errors="coerce")
    filtered = df.loc[values > 0].copy()
    logger.info(
        "filter_positive",
        extra={"step": "filter", "rows_in": len(df), "rows_out": len(filtered)},
    )
    return filtered


def mean_by(df: pd.DataFrame, keys: Sequence[str], measure: str, out_col: Optional[str] = None) -> pd.DataFrame:
    keys = list(keys)
    _require_columns(df, [*keys, measure])
    out_col = out_col or f"mean_{measure}"
    if df.empty:
        return pd.DataFrame(columns=[*keys, out_col])

    grouped = (
        df.groupby(keys, as_index=False, observed=True)
        .agg(**{out_col: (measure, "mean")})
        .reset_index(drop=True)
    )
    logger.info(
        "mean_by",
        extra={"step": "aggregate", "rows_in": len(df), "rows_out": len(grouped)},
    )
    return grouped


def grouped_mean(df: pd.DataFrame, key: str, measure: str, out_col: Optional[str] = None) -> pd.DataFrame:
    """One row per distinct ``key`` holding the arithmetic mean of ``measure``."""
    return mean_by(df, [key], measure, out_col=out_col)


def summarise_delays(flights: pd.DataFrame, keys: Sequence[str] | str, measure: str = "dep_delay") -> pd.DataFrame:
    """Mean and count of positive delays per key, i.e. late flights only."""
    keys = [keys] if isinstance(keys, str) else list(keys)
    late = filter_positive(flights, measure)
    out_col = f"mean_{measure}"
    if late.empty:
        return pd.DataFrame(columns=[*keys, out_col, "flights"])
    summary = (
        late.groupby(keys, as_index=False, observed=True)
        .agg(**{out_col: (measure, "mean"), "flights": (measure, "size")})
        .reset_index(drop=True)
    )
    return summary
