from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import pandas as pd

from src.tidy import _require_columns

logger = logging.getLogger(__name__)


def unmatched_keys(fact: pd.DataFrame, lookup: pd.DataFrame, key: str) -> List:
    """Distinct fact keys with no row in ``lookup``, sorted."""
    _require_columns(fact, [key])
    _require_columns(lookup, [key])
    known = set(lookup[key].dropna())
    missing = {value for value in fact[key].dropna().unique() if value not in known}
    return sorted(missing, key=str)


def left_join_lookup(
    fact: pd.DataFrame,
    lookup: pd.DataFrame,
    key: str,
    columns: Optional[Sequence[str]] = None,
) -> pd.DataFrame:
    """
    Append lookup columns to every fact row matched on ``key``.

    Every fact row is kept; rows whose key has no lookup entry carry NaN in
    the lookup columns. A lookup with duplicated keys raises
    ``pandas.errors.MergeError`` instead of multiplying fact rows.
    """
    _require_columns(fact, [key])
    if columns is None:
        columns = [col for col in lookup.columns if col != key]
    columns = [col for col in columns if col != key]
    _require_columns(lookup, [key, *columns])

    clashes = sorted(set(columns) & (set(fact.columns) - {key}))
    if clashes:
        raise ValueError(f"Lookup columns already present on fact table: {', '.join(clashes)}")

    joined = fact.merge(lookup[[key, *columns]], on=key, how="left", validate="many_to_one")

    missing = unmatched_keys(fact, lookup, key)
    if missing:
        logger.warning(
            "lookup has no entry for %d key(s): %s",
            len(missing),
            ", ".join(map(str, missing)),
            extra={"step": "join", "rows_in": len(fact), "rows_out": len(joined)},
        )
    else:
        logger.info("left_join_lookup", extra={"step": "join", "rows_in": len(fact), "rows_out": len(joined)})
    return joined
