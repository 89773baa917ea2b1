"""
pytest configuration and fixtures for trifuzzy tests.
"""

import pytest

from trifuzzy import TriFuzzyNum, TriFuzzyNumSet


@pytest.fixture
def simple_tfn():
    """Create a simple symmetric TFN for testing."""
    return TriFuzzyNum(0, 1, 2)


@pytest.fixture
def demo_values():
    """The three numbers whose mean is (2, 3, 4)."""
    return [TriFuzzyNum(0, 1, 2), TriFuzzyNum(2, 3, 4), TriFuzzyNum(4, 5, 6)]


@pytest.fixture
def demo_set(demo_values):
    """Create a set from the demo values."""
    return TriFuzzyNumSet(demo_values)


@pytest.fixture
def coarse_rank(monkeypatch):
    """
    Rank numbers by rounded modal value only.

    Makes field-distinct numbers order-equivalent, which the real rank
    vector almost never does.
    """
    monkeypatch.setattr(TriFuzzyNum, "rank", lambda self: (float(round(self.modal)), 0.0, 0.0))
