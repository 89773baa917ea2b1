"""
trifuzzy: triangular fuzzy numbers with a total ranking order.

Main components:
- TriFuzzyNum, an immutable (lower, modal, upper) value with arithmetic and
  a rank-vector ordering
- TriFuzzyNumSet, a duplicate-permitting ordered collection that keeps
  running sums for constant-time arithmetic means
- Optional pandas tabulation and matplotlib plotting helpers

Example usage:
    from trifuzzy import TriFuzzyNum, TriFuzzyNumSet

    nums = TriFuzzyNumSet([TriFuzzyNum(0, 1, 2), TriFuzzyNum(2, 3, 4), TriFuzzyNum(4, 5, 6)])
    print(nums.arithmetic_mean())   # (2, 3, 4)
"""

__version__ = "1.0.0"

# Main exports
from .fuzzy import (
    TriFuzzyNum,
    FuzzyRank,
    fuzzy_rank,
    compare_rank,
    is_order_equivalent,
    crisp_number,
    CRISP_ZERO,
)
from .fuzzy_set import TriFuzzyNumSet, EmptyCollectionError
from .config import LoggingConfig

__all__ = [
    "TriFuzzyNum",
    "FuzzyRank",
    "fuzzy_rank",
    "compare_rank",
    "is_order_equivalent",
    "crisp_number",
    "CRISP_ZERO",
    "TriFuzzyNumSet",
    "EmptyCollectionError",
    "LoggingConfig",
]
