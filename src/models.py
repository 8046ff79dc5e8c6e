"""
Per-group linear models.

One ordinary least squares fit per partition of a table, predicting a
numeric response from a single categorical regressor, followed by a ranking
of the partitions by coefficient of determination.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict

import numpy as np
import pandas as pd
import statsmodels.formula.api as smf

from src.tidy import _require_columns

logger = logging.getLogger(__name__)

WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
SUMMARY_COLUMNS = ["group", "n_obs", "r_squared", "adj_r_squared"]


@dataclass
class GroupFitResult:
    summary: pd.DataFrame
    models: Dict[Any, Any] = field(default_factory=dict)
    skipped: Dict[Any, str] = field(default_factory=dict)

    def ranked(self) -> pd.DataFrame:
        return rank_by_r_squared(self.summary)


def add_weekday(
    flights: pd.DataFrame,
    year_col: str = "year",
    month_col: str = "month",
    day_col: str = "day",
    out_col: str = "wday",
) -> pd.DataFrame:
    """Append an ordered ``Mon``..``Sun`` day-of-week column built from calendar columns."""
    _require_columns(flights, [year_col, month_col, day_col])
    dates = pd.to_datetime(
        pd.DataFrame(
            {
                "year": flights[year_col].astype("int64"),
                "month": flights[month_col].astype("int64"),
                "day": flights[day_col].astype("int64"),
            }
        )
    )
    labels = dates.dt.dayofweek.map(dict(enumerate(WEEKDAYS)))
    out = flights.copy()
    out[out_col] = pd.Categorical(labels, categories=WEEKDAYS, ordered=True)
    return out


def _skip_reason(frame: pd.DataFrame, min_obs: int) -> str | None:
    n_obs = len(frame)
    levels = frame["x"].nunique()
    if n_obs < min_obs:
        return f"{n_obs} observations, need at least {min_obs}"
    # Intercept plus one dummy per extra level must leave a residual degree of freedom.
    if n_obs <= levels:
        return f"{n_obs} observations for {levels} regressor levels"
    if frame["y"].nunique() < 2:
        return "constant response"
    return None


def fit_group_models(
    df: pd.DataFrame,
    group_col: str,
    response: str,
    regressor: str,
    *,
    min_obs: int = 3,
) -> GroupFitResult:
    """
    Fit ``response ~ C(regressor)`` separately for every value of ``group_col``.

    Partitions too small to leave a residual degree of freedom, or whose
    response does not vary, are listed in ``skipped`` with the reason.
    """
    _require_columns(df, [group_col, response, regressor])

    data = pd.DataFrame(
        {
            "group": df[group_col],
            "y": pd.to_numeric(df[response], errors="coerce"),
            "x": df[regressor].astype(object),
        }
    )
    missing_group = int(data["group"].isna().sum())
    if missing_group:
        logger.warning(
            "%d rows have no %s and are excluded from model fits",
            missing_group,
            group_col,
            extra={"step": "fit"},
        )
    data = data.dropna(subset=["group", "y", "x"])
    data["x"] = data["x"].astype(str)

    rows = []
    models: Dict[Any, Any] = {}
    skipped: Dict[Any, str] = {}
    for group, frame in data.groupby("group", sort=True):
        reason = _skip_reason(frame, min_obs)
        if reason is not None:
            skipped[group] = reason
            logger.warning("skipping model fit: %s", reason, extra={"step": "fit", "group": group})
            continue

        model = smf.ols("y ~ C(x)", data=frame).fit()
        models[group] = model
        rows.append(
            {
                "group": group,
                "n_obs": int(model.nobs),
                "r_squared": float(np.clip(model.rsquared, 0.0, 1.0)),
                "adj_r_squared": float(model.rsquared_adj),
            }
        )

    summary = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    logger.info(
        "fit_group_models",
        extra={"step": "fit", "rows_in": len(df), "rows_out": len(summary)},
    )
    return GroupFitResult(summary=summary, models=models, skipped=skipped)


def rank_by_r_squared(summary: pd.DataFrame, ascending: bool = True) -> pd.DataFrame:
    _require_columns(summary, ["group", "r_squared"])
    return summary.sort_values(
        ["r_squared", "group"],
        ascending=[ascending, True],
        kind="mergesort",
    ).reset_index(drop=True)
