"""
Visualization utilities for triangular fuzzy numbers.

This module provides helper functions to plot membership functions of
TriFuzzyNum values and to export collections of them to JSON or CSV.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional, Sequence
import json
import csv

from .analysis import COLUMNS, to_records
from .fuzzy import TriFuzzyNum

__all__ = [
    "plot_membership",
    "export_set_json",
    "export_set_csv",
]


def _require_matplotlib():
    try:
        import matplotlib.pyplot as plt  # type: ignore
    except ImportError as exc:  # pragma: no cover - import guard
        raise RuntimeError(
            "matplotlib is required for visualization utilities. "
            "Install it with `pip install matplotlib`."
        ) from exc
    return plt


def plot_membership(
    values: Iterable[TriFuzzyNum],
    *,
    labels: Optional[Sequence[str]] = None,
    ax=None,
    show: bool = True,
) -> Any:
    """
    Plot the triangular membership function of each number.

    Membership is 0 at ``lower``, 1 at ``modal`` and 0 at ``upper``; a crisp
    number collapses to a vertical spike.
    """
    plt = _require_matplotlib()
    nums = list(values)
    if not nums:
        raise ValueError("No fuzzy numbers given; nothing to plot.")
    if labels is not None and len(labels) != len(nums):
        raise ValueError(f"Expected {len(nums)} labels, got {len(labels)}.")

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 4))
    else:
        fig = ax.figure

    for idx, num in enumerate(nums):
        label = labels[idx] if labels is not None else str(num)
        ax.plot(
            [num.lower, num.modal, num.upper],
            [0.0, 1.0, 0.0],
            marker="o",
            label=label,
        )

    ax.set_xlabel("Value")
    ax.set_ylabel("Membership")
    ax.set_ylim(0.0, 1.05)
    ax.set_title("Triangular membership functions")
    ax.legend(loc="best")
    ax.grid(True, linestyle="--", alpha=0.3)
    fig.tight_layout()

    if show:
        plt.show()
    return ax


def export_set_json(values: Iterable[TriFuzzyNum], path: Path | str) -> Path:
    """
    Export the numbers, with their rank vectors, to a JSON file.
    """
    target = Path(path)
    with target.open("w", encoding="utf-8") as fp:
        json.dump(to_records(values), fp, indent=2)
    return target


def export_set_csv(values: Iterable[TriFuzzyNum], path: Path | str) -> Path:
    """
    Export the numbers, with their rank vectors, to a CSV file.
    """
    target = Path(path)
    with target.open("w", newline="", encoding="utf-8") as fp:
        writer = csv.DictWriter(fp, fieldnames=COLUMNS)
        writer.writeheader()
        for record in to_records(values):
            writer.writerow(record)
    return target
