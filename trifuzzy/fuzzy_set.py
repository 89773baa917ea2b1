"""
Ordered multiset of triangular fuzzy numbers.

TriFuzzyNumSet keeps its elements sorted by rank vector and maintains the
componentwise sum of everything it holds, so the arithmetic mean is
available without scanning the elements.
"""

from __future__ import annotations
from typing import Any, Iterable, Iterator, Optional, Tuple, Union

import logging
import math

from sortedcontainers import SortedKeyList

from .config import LoggingConfig, configure_logger, format_event
from .fuzzy import FuzzyRank, TriFuzzyNum, fuzzy_rank

SUM_DRIFT_TOLERANCE = 1e-9


class EmptyCollectionError(ValueError):
    """Raised when an aggregate is requested from a set with no elements."""


class TriFuzzyNumSet:
    """
    Duplicate-permitting collection of TriFuzzyNum values ordered by rank.

    Elements live in a ``SortedKeyList`` keyed by :meth:`TriFuzzyNum.rank`,
    so insert, remove and lookup are O(log n). A new element goes after
    every order-equivalent element already stored, so equivalents keep
    their insertion order.

    ``sum_lower``, ``sum_modal`` and ``sum_upper`` are updated on every
    insert and remove; they always equal the componentwise sum of the live
    elements up to floating-point rounding of the running accumulation.

    Usage:
        nums = TriFuzzyNumSet([TriFuzzyNum(0, 1, 2), TriFuzzyNum(2, 3, 4)])
        nums.insert(TriFuzzyNum(4, 5, 6))
        nums.remove(TriFuzzyNum(0, 1, 2))
        print(nums.arithmetic_mean())
    """

    def __init__(
        self,
        values: Iterable[TriFuzzyNum] = (),
        *,
        logging_enabled: bool = False,
        log_level: Union[int, str] = "INFO",
        log_file: Optional[str] = None,
        verify_sums: bool = False,
    ) -> None:
        self._items = SortedKeyList(key=fuzzy_rank)
        self._sum_lower = 0.0
        self._sum_modal = 0.0
        self._sum_upper = 0.0
        self._verify_sums = verify_sums

        self._logging_config = LoggingConfig(enabled=logging_enabled, level=log_level, file=log_file)
        self._logger = configure_logger(f"trifuzzy.fuzzy_set.{id(self)}", self._logging_config)

        for value in values:
            self.insert(value)

    def configure_logging(
        self,
        *,
        enabled: bool,
        log_level: Union[int, str] = "INFO",
        log_file: Optional[str] = None,
    ) -> None:
        """
        Reconfigure logging for the current instance.
        """
        self._logging_config = LoggingConfig(enabled=enabled, level=log_level, file=log_file)
        self._logger = configure_logger(self._logger.name, self._logging_config)

    # ---------- Logging helpers ----------
    def _log(self, level: int, message: str, **fields: Any) -> None:
        if not self._logging_config.enabled:
            return
        self._logger.log(level, format_event(message, **fields))

    def _log_debug(self, message: str, **fields: Any) -> None:
        self._log(logging.DEBUG, message, **fields)

    def _log_warning(self, message: str, **fields: Any) -> None:
        self._log(logging.WARNING, message, **fields)

    # ---------- Mutation ----------
    @staticmethod
    def _check_value(value: Any) -> None:
        if not isinstance(value, TriFuzzyNum):
            raise TypeError(
                f"TriFuzzyNumSet holds TriFuzzyNum values, got {type(value).__name__}."
            )

    def insert(self, value: TriFuzzyNum) -> None:
        """Add ``value``; order-equivalent duplicates are stored side by side."""
        self._check_value(value)
        index = self._items.bisect_key_right(value.rank())
        self._items.add(value)

        self._sum_lower += value.lower
        self._sum_modal += value.modal
        self._sum_upper += value.upper

        self._log_debug("insert", value=value, position=index, size=len(self._items))
        self._check_drift()

    def remove(self, value: TriFuzzyNum) -> bool:
        """
        Remove one stored element order-equivalent to ``value``.

        Among several order-equivalent elements, a field-equal one is
        preferred; otherwise the earliest inserted equivalent goes. The sums
        are reduced by the fields of the element actually removed.

        Returns False, leaving the set untouched, when nothing matches.
        """
        self._check_value(value)
        index = self._find(value)
        if index is None:
            self._log_debug("remove_miss", value=value, size=len(self._items))
            return False

        removed = self._items.pop(index)

        if self._items:
            self._sum_lower -= removed.lower
            self._sum_modal -= removed.modal
            self._sum_upper -= removed.upper
        else:
            # the sum over no elements is exactly zero, drop rounding residue
            self._reset_sums()

        self._log_debug("remove", value=removed, position=index, size=len(self._items))
        self._check_drift()
        return True

    def clear(self) -> None:
        self._items.clear()
        self._reset_sums()

    def _reset_sums(self) -> None:
        self._sum_lower = 0.0
        self._sum_modal = 0.0
        self._sum_upper = 0.0

    def _equivalent_range(self, key: FuzzyRank) -> Tuple[int, int]:
        return self._items.bisect_key_left(key), self._items.bisect_key_right(key)

    def _find(self, value: TriFuzzyNum) -> Optional[int]:
        start, stop = self._equivalent_range(value.rank())
        if start == stop:
            return None
        for index in range(start, stop):
            if self._items[index] == value:
                return index
        return start

    # ---------- Queries ----------
    def arithmetic_mean(self) -> TriFuzzyNum:
        """
        Componentwise mean of the stored elements.

        Raises
        ------
        EmptyCollectionError
            If the set holds no elements.
        """
        count = len(self._items)
        if count == 0:
            self._log_warning("arithmetic_mean_empty")
            raise EmptyCollectionError("TriFuzzyNumSet.arithmetic_mean - the set is empty.")

        mean = TriFuzzyNum(
            self._sum_lower / count,
            self._sum_modal / count,
            self._sum_upper / count,
        )
        self._log_debug("arithmetic_mean", mean=mean, size=count)
        return mean

    def count(self, value: TriFuzzyNum) -> int:
        """Number of stored elements order-equivalent to ``value``."""
        self._check_value(value)
        start, stop = self._equivalent_range(value.rank())
        return stop - start

    @property
    def sum_lower(self) -> float:
        return self._sum_lower

    @property
    def sum_modal(self) -> float:
        return self._sum_modal

    @property
    def sum_upper(self) -> float:
        return self._sum_upper

    @property
    def sums(self) -> Tuple[float, float, float]:
        return (self._sum_lower, self._sum_modal, self._sum_upper)

    def recomputed_sums(self) -> Tuple[float, float, float]:
        """Sums re-derived from the stored elements (exactly rounded)."""
        return (
            math.fsum(item.lower for item in self._items),
            math.fsum(item.modal for item in self._items),
            math.fsum(item.upper for item in self._items),
        )

    def sums_drift(self) -> float:
        """Largest absolute gap between the running and recomputed sums."""
        return max(
            abs(running - exact)
            for running, exact in zip(self.sums, self.recomputed_sums())
        )

    def _check_drift(self) -> None:
        if not self._verify_sums:
            return
        drift = self.sums_drift()
        scale = max(1.0, *(abs(total) for total in self.recomputed_sums()))
        if drift > SUM_DRIFT_TOLERANCE * scale:
            self._log_warning("sum_drift_detected", drift=drift, size=len(self._items))

    # ---------- Container protocol ----------
    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TriFuzzyNum]:
        return iter(list(self._items))

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, TriFuzzyNum):
            return False
        start, stop = self._equivalent_range(value.rank())
        return start != stop

    def copy(self) -> TriFuzzyNumSet:
        """Independent copy with the same elements, sums and settings."""
        clone = TriFuzzyNumSet(
            logging_enabled=self._logging_config.enabled,
            log_level=self._logging_config.level,
            log_file=self._logging_config.file,
            verify_sums=self._verify_sums,
        )
        clone._items = self._items.copy()
        clone._sum_lower = self._sum_lower
        clone._sum_modal = self._sum_modal
        clone._sum_upper = self._sum_upper
        return clone

    __copy__ = copy

    def __repr__(self) -> str:
        body = ", ".join(str(item) for item in self._items)
        return f"TriFuzzyNumSet([{body}])"
