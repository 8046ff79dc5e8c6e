"""Chart helpers. Each renders one PNG and returns the path written."""

from __future__ import annotations

import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import statsmodels.api as sm

from src.tidy import _require_columns

logger = logging.getLogger(__name__)


def _save(fig, path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    logger.info("saved chart", extra={"step": "plot", "path": str(path)})
    return path


def plot_lines(long_df: pd.DataFrame, x: str, y: str, group: str, path: str | Path, title: str | None = None) -> Path:
    _require_columns(long_df, [x, y, group])
    fig, ax = plt.subplots(figsize=(8, 5))
    for name, frame in long_df.groupby(group, sort=True):
        frame = frame.sort_values(x, kind="mergesort")
        ax.plot(frame[x], frame[y], marker="o", label=str(name))
    ax.set_xlabel(x)
    ax.set_ylabel(y)
    if title:
        ax.set_title(title)
    ax.legend(title=group)
    return _save(fig, path)


def plot_bars(
    df: pd.DataFrame,
    x: str,
    y: str,
    path: str | Path,
    *,
    horizontal: bool = False,
    title: str | None = None,
) -> Path:
    _require_columns(df, [x, y])
    labels = df[x].astype(str)
    fig, ax = plt.subplots(figsize=(8, max(4, 0.35 * len(df)) if horizontal else 5))
    if horizontal:
        ax.barh(labels, df[y], color="steelblue")
        ax.set_xlabel(y)
        ax.set_ylabel(x)
    else:
        ax.bar(labels, df[y], color="steelblue")
        ax.set_xlabel(x)
        ax.set_ylabel(y)
        ax.tick_params(axis="x", labelrotation=45)
    if title:
        ax.set_title(title)
    return _save(fig, path)


def plot_diagnostics(model, path: str | Path, title: str | None = None) -> Path:
    """
    Default diagnostic grid for a fitted OLS model.

    Residuals vs fitted, normal Q-Q of standardized residuals, scale-location
    and standardized residuals vs leverage.
    """
    influence = model.get_influence()
    fitted = np.asarray(model.fittedvalues)
    residuals = np.asarray(model.resid)
    standardized = np.asarray(influence.resid_studentized_internal)
    leverage = np.asarray(influence.hat_matrix_diag)

    fig, axes = plt.subplots(2, 2, figsize=(10, 8))

    ax = axes[0, 0]
    ax.scatter(fitted, residuals, s=10, alpha=0.5, edgecolor="none")
    ax.axhline(0.0, color="grey", linestyle="--", linewidth=1)
    ax.set_xlabel("Fitted values")
    ax.set_ylabel("Residuals")
    ax.set_title("Residuals vs Fitted")

    ax = axes[0, 1]
    sm.qqplot(standardized, line="45", ax=ax, markersize=3, alpha=0.5)
    ax.set_xlabel("Theoretical quantiles")
    ax.set_ylabel("Standardized residuals")
    ax.set_title("Normal Q-Q")

    ax = axes[1, 0]
    ax.scatter(fitted, np.sqrt(np.abs(standardized)), s=10, alpha=0.5, edgecolor="none")
    ax.set_xlabel("Fitted values")
    ax.set_ylabel("sqrt(|Standardized residuals|)")
    ax.set_title("Scale-Location")

    ax = axes[1, 1]
    ax.scatter(leverage, standardized, s=10, alpha=0.5, edgecolor="none")
    ax.axhline(0.0, color="grey", linestyle="--", linewidth=1)
    ax.set_xlabel("Leverage")
    ax.set_ylabel("Standardized residuals")
    ax.set_title("Residuals vs Leverage")

    if title:
        fig.suptitle(title)
    return _save(fig, path)
