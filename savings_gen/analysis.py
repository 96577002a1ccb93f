"""Descriptive statistics over the merged table."""

from __future__ import annotations

import pandas as pd

CORRELATION_COLUMNS = [
    "age",
    "monthly_salary",
    "cleaned_balance",
    "cleaned_interest",
    "tenure_months",
]

SUMMARY_COLUMNS = ["min", "q1", "median", "q3", "max", "mean", "std", "count", "missing"]


def _q1(values: pd.Series) -> float:
    return values.quantile(0.25)


def _q3(values: pd.Series) -> float:
    return values.quantile(0.75)


def grouped_summary(frame: pd.DataFrame, by: str, target: str) -> pd.DataFrame:
    """Five-number summary, mean, std, count and missing count per group.

    Parameters
    ----------
    frame : pd.DataFrame
        Merged table.
    by : str
        Grouping column, e.g. ``education`` or ``profession``.
    target : str
        Numeric column, e.g. ``monthly_salary`` or ``age``.

    Returns
    -------
    pd.DataFrame
        One row per observed group with ``SUMMARY_COLUMNS``.
    """
    grouped = frame.groupby(by, observed=True, sort=True)[target]
    summary = grouped.agg(
        min="min",
        q1=_q1,
        median="median",
        q3=_q3,
        max="max",
        mean="mean",
        std="std",
        count="count",
    )
    missing = frame[target].isna().groupby(frame[by], observed=True, sort=True).sum()
    summary["missing"] = missing.reindex(summary.index, fill_value=0).astype("int64")
    return summary[SUMMARY_COLUMNS]


def correlation_matrix(
    frame: pd.DataFrame,
    columns: list[str] | None = None,
    decimals: int = 3,
) -> pd.DataFrame:
    """Pairwise Pearson correlation, rounded."""
    columns = columns or CORRELATION_COLUMNS
    return frame[columns].corr(method="pearson").round(decimals)


def missing_summary(frame: pd.DataFrame) -> pd.DataFrame:
    """Missing count and percentage per column."""
    missing = frame.isna().sum()
    return pd.DataFrame(
        {
            "missing": missing.astype("int64"),
            "percent": (missing / len(frame) * 100).round(2) if len(frame) else 0.0,
        }
    )


def frequency_table(frame: pd.DataFrame, column: str) -> pd.DataFrame:
    """Count and share of each category in ``column``."""
    counts = frame[column].value_counts(sort=False)
    return pd.DataFrame(
        {
            "count": counts.astype("int64"),
            "share": (counts / counts.sum()).round(3),
        }
    )
