from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

import pandas as pd

logger = logging.getLogger(__name__)


def _require_columns(df: pd.DataFrame, required: Iterable[str]) -> None:
    missing = sorted(set(required) - set(df.columns), key=str)
    if missing:
        raise ValueError(f"Missing required columns: {', '.join(map(str, missing))}")


def gather_wide(
    df: pd.DataFrame,
    id_col: str,
    value_cols: Optional[Sequence[str]] = None,
    *,
    var_name: str = "year",
    value_name: str = "value",
) -> pd.DataFrame:
    """
    Reshape a wide table into long form.

    Every (row, value column) pair becomes one output row holding the
    identifier, the value column's name and the cell value. Output rows are
    grouped by value column, each group repeating the input row order.
    """
    if value_cols is None:
        value_cols = [col for col in df.columns if col != id_col]
    value_cols = list(value_cols)
    _require_columns(df, [id_col, *value_cols])
    if id_col in value_cols:
        raise ValueError(f"Identifier column {id_col!r} cannot also be a value column.")

    long_df = pd.melt(
        df,
        id_vars=[id_col],
        value_vars=value_cols,
        var_name=var_name,
        value_name=value_name,
    )
    expected = len(df) * len(value_cols)
    if len(long_df) != expected:
        raise RuntimeError(f"Reshape produced {len(long_df)} rows, expected {expected}.")

    logger.info(
        "gather_wide",
        extra={"step": "reshape", "rows_in": len(df), "rows_out": len(long_df)},
    )
    return long_df


def coerce_labels(long_df: pd.DataFrame, column: str, dtype=int) -> pd.DataFrame:
    """Convert category labels (e.g. the string ``"2011"``) to ``dtype``."""
    _require_columns(long_df, [column])
    out = long_df.copy()
    try:
        out[column] = out[column].astype(str).str.strip().astype(dtype)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Column {column!r} has labels that cannot be converted to {dtype.__name__}.") from exc
    return out


def spread_long(long_df: pd.DataFrame, id_col: str, var_name: str, value_name: str) -> pd.DataFrame:
    """Inverse of :func:`gather_wide`: one row per identifier, one column per label."""
    _require_columns(long_df, [id_col, var_name, value_name])
    duplicated = long_df.duplicated(subset=[id_col, var_name], keep=False)
    if duplicated.any():
        pairs = long_df.loc[duplicated, [id_col, var_name]].drop_duplicates()
        first = pairs.iloc[0]
        raise ValueError(
            f"Cannot spread: {len(pairs)} duplicated ({id_col}, {var_name}) pairs, "
            f"e.g. ({first[id_col]}, {first[var_name]})."
        )

    wide = long_df.pivot(index=id_col, columns=var_name, values=value_name)
    wide.columns.name = None
    return wide.reset_index()
