"""Pytest configuration and shared fixtures."""

import pytest
from datetime import date


@pytest.fixture
def dca_lots():
    """Six equal monthly purchases at rising and falling prices."""
    return [
        (1000, 156.23),
        (1000, 156.30),
        (1000, 173.15),
        (1000, 188.72),
        (1000, 204.61),
        (1000, 178.23),
    ]


@pytest.fixture
def one_year():
    """A 365-day window (1999 is not a leap year)."""
    return date(1999, 1, 1), date(2000, 1, 1)


@pytest.fixture
def twenty_years():
    return date(1999, 1, 1), date(2019, 1, 1)
