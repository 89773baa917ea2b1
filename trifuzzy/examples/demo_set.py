"""Demo set helpers for trifuzzy.

Provides the canonical three-element demo set used by the test-suite and a
small printing run over it.
"""

from __future__ import annotations

from typing import List

from ..fuzzy import TriFuzzyNum
from ..fuzzy_set import TriFuzzyNumSet


def demo_values() -> List[TriFuzzyNum]:
    """The numbers (0, 1, 2), (2, 3, 4) and (4, 5, 6), deliberately unsorted."""
    return [
        TriFuzzyNum(1, 2, 0),
        TriFuzzyNum(4, 2, 3),
        TriFuzzyNum(6, 5, 4),
    ]


def build_demo_set(**kwargs) -> TriFuzzyNumSet:
    """Construct the demo set; keyword arguments go to TriFuzzyNumSet."""
    return TriFuzzyNumSet(demo_values(), **kwargs)


def run_demo(*, logging_enabled: bool = False) -> TriFuzzyNum:
    """Print the demo set, its sums and its arithmetic mean."""
    nums = build_demo_set(logging_enabled=logging_enabled, log_level="DEBUG")

    print("Elements in rank order:")
    for num in nums:
        print(f"  {num}  rank={num.rank()}")
    print(f"Sums: {nums.sums}")

    mean = nums.arithmetic_mean()
    print(f"Arithmetic mean: {mean}")
    return mean


if __name__ == "__main__":
    run_demo(logging_enabled=True)
