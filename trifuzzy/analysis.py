"""
Tabulation utilities for trifuzzy.

This module turns collections of TriFuzzyNum values into pandas DataFrames
and small summary dictionaries for inspection and reporting.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from .fuzzy import TriFuzzyNum
from .fuzzy_set import EmptyCollectionError, TriFuzzyNumSet

__all__ = [
    "to_records",
    "to_dataframe",
    "rank_table",
    "summarize",
]

COLUMNS = ["lower", "modal", "upper", "rank_x", "rank_y", "rank_z"]


def _require_pandas():
    try:
        import pandas as pd  # type: ignore
    except ImportError as exc:  # pragma: no cover - import guard
        raise RuntimeError(
            "pandas is required for tabulating fuzzy numbers. Install it with `pip install pandas`."
        ) from exc
    return pd


def to_records(values: Iterable[TriFuzzyNum]) -> List[Dict[str, float]]:
    """One dict per number with its bounds and rank vector, in rank order."""
    records: List[Dict[str, float]] = []
    for num in sorted(values):
        x, y, z = num.rank()
        records.append(
            {
                "lower": num.lower,
                "modal": num.modal,
                "upper": num.upper,
                "rank_x": x,
                "rank_y": y,
                "rank_z": z,
            }
        )
    return records


def to_dataframe(values: Iterable[TriFuzzyNum]) -> "pd.DataFrame":
    """
    Tabulate ``values`` in ascending rank order.
    """
    pd = _require_pandas()
    return pd.DataFrame(to_records(values), columns=COLUMNS)


def rank_table(values: Iterable[TriFuzzyNum]) -> "pd.DataFrame":
    """
    Ranking from best (highest rank vector) to worst, indexed by 1-based position.
    """
    df = to_dataframe(values)
    df = df.iloc[::-1].reset_index(drop=True)
    df.index = df.index + 1
    df.index.name = "position"
    return df


def summarize(fuzzy_set: TriFuzzyNumSet) -> Dict[str, Any]:
    """
    Count, running sums and mean of a set; ``mean`` is None when it is empty.
    """
    try:
        mean = fuzzy_set.arithmetic_mean()
    except EmptyCollectionError:
        mean = None
    return {
        "count": len(fuzzy_set),
        "sums": fuzzy_set.sums,
        "mean": mean,
    }
