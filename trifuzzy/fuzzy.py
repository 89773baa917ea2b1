"""
Triangular fuzzy number definitions for trifuzzy.

This module contains the TriFuzzyNum value type, its arithmetic and the
rank vector that gives triangular fuzzy numbers a total order.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

import math

FuzzyRank = Tuple[float, float, float]


@dataclass(frozen=True)
class TriFuzzyNum:
    """
    Triangular Fuzzy Number (TFN) with bounds (lower, modal, upper).

    The three constructor arguments may be given in any order; they are
    sorted so that ``lower <= modal <= upper`` always holds:

        >>> TriFuzzyNum(3, 1, 2)
        TriFuzzyNum(lower=1.0, modal=2.0, upper=3.0)

    Arithmetic, bound by bound:
        a + b = (a.l + b.l, a.m + b.m, a.u + b.u)
        a - b = (a.l - b.u, a.m - b.m, a.u - b.l)
        a * b = (a.l * b.l, a.m * b.m, a.u * b.u)

    Every result is passed through the constructor again, so it is sorted
    like any other instance. Products of numbers with negative bounds are
    not the interval product; the componentwise rule is kept as is.

    Equality (``==``) is exact and field-wise. Ordering (``<``, ``>``, ...)
    compares rank vectors, see :meth:`rank`, so ``not a < b and not b < a``
    does not by itself imply ``a == b``.
    """
    lower: float
    modal: float
    upper: float

    def __post_init__(self) -> None:
        lower, modal, upper = sorted((float(self.lower), float(self.modal), float(self.upper)))
        # frozen dataclass: bypass __setattr__ only while normalizing
        object.__setattr__(self, "lower", lower)
        object.__setattr__(self, "modal", modal)
        object.__setattr__(self, "upper", upper)

    def lower_value(self) -> float:
        return self.lower

    def modal_value(self) -> float:
        return self.modal

    def upper_value(self) -> float:
        return self.upper

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.lower, self.modal, self.upper)

    # Named arithmetic; the operators below delegate here
    def add(self, other: TriFuzzyNum) -> TriFuzzyNum:
        return TriFuzzyNum(
            self.lower + other.lower,
            self.modal + other.modal,
            self.upper + other.upper,
        )

    def subtract(self, other: TriFuzzyNum) -> TriFuzzyNum:
        return TriFuzzyNum(
            self.lower - other.upper,
            self.modal - other.modal,
            self.upper - other.lower,
        )

    def multiply(self, other: TriFuzzyNum) -> TriFuzzyNum:
        return TriFuzzyNum(
            self.lower * other.lower,
            self.modal * other.modal,
            self.upper * other.upper,
        )

    def __add__(self, other: TriFuzzyNum) -> TriFuzzyNum:
        if not isinstance(other, TriFuzzyNum):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: TriFuzzyNum) -> TriFuzzyNum:
        if not isinstance(other, TriFuzzyNum):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: TriFuzzyNum) -> TriFuzzyNum:
        if not isinstance(other, TriFuzzyNum):
            return NotImplemented
        return self.multiply(other)

    def rank(self) -> FuzzyRank:
        """
        Rank vector ``(x, y, z)`` used as the sort key.

        With ``d1 = sqrt(1 + (u - m)^2)`` and ``d2 = sqrt(1 + (m - l)^2)``:
            z = (u - l) + d1 + d2
            y = (u - l) / z
            x = ((u - l) * m + d1 * l + d2 * u) / z

        ``x`` is a centroid-like location, ``y`` the relative spread and
        ``z`` the perimeter of the triangle. Since ``d1, d2 >= 1``,
        ``z >= 2`` and the divisions are always defined; a crisp number
        ``v`` ranks as ``(v, 0, 2)``.

        The products in ``x`` scale with the square of the bounds, so the
        rank is finite only while every bound stays below about ``1e154``
        in magnitude (the square root of the largest float). Beyond that,
        or for NaN/infinite bounds, components become inf or NaN and the
        order is no longer total; such numbers are outside the supported
        domain.
        """
        l, m, u = self.lower, self.modal, self.upper
        spread = u - l
        d1 = math.hypot(1.0, u - m)
        d2 = math.hypot(1.0, m - l)
        z = spread + d1 + d2
        y = spread / z
        x = (spread * m + d1 * l + d2 * u) / z
        return (x, y, z)

    def __lt__(self, other: TriFuzzyNum) -> bool:
        if not isinstance(other, TriFuzzyNum):
            return NotImplemented
        return self.rank() < other.rank()

    def __le__(self, other: TriFuzzyNum) -> bool:
        if not isinstance(other, TriFuzzyNum):
            return NotImplemented
        return self.rank() <= other.rank()

    def __gt__(self, other: TriFuzzyNum) -> bool:
        if not isinstance(other, TriFuzzyNum):
            return NotImplemented
        return self.rank() > other.rank()

    def __ge__(self, other: TriFuzzyNum) -> bool:
        if not isinstance(other, TriFuzzyNum):
            return NotImplemented
        return self.rank() >= other.rank()

    def __str__(self) -> str:
        return f"({self.lower:g}, {self.modal:g}, {self.upper:g})"


def fuzzy_rank(num: TriFuzzyNum) -> FuzzyRank:
    """Return the rank vector of ``num``; key function for sorting."""
    return num.rank()


def compare_rank(a: TriFuzzyNum, b: TriFuzzyNum) -> int:
    """
    Three-way comparison of two TFNs by rank vector.

    Returns -1 if ``a`` ranks below ``b``, 1 if above and 0 when they are
    order-equivalent.
    """
    rank_a = a.rank()
    rank_b = b.rank()
    if rank_a < rank_b:
        return -1
    if rank_a > rank_b:
        return 1
    return 0


def is_order_equivalent(a: TriFuzzyNum, b: TriFuzzyNum) -> bool:
    return a.rank() == b.rank()


def crisp_number(value: float) -> TriFuzzyNum:
    """Degenerate TFN ``(value, value, value)`` with no uncertainty."""
    return TriFuzzyNum(value, value, value)


CRISP_ZERO = crisp_number(0.0)
