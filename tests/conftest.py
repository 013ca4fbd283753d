"""
Test Configuration and Fixtures.

Provides shared fixtures for all tests.
"""

from datetime import datetime
from typing import List

import pytest


@pytest.fixture
def christmas_2010() -> List[datetime]:
    """Danish Christmas holidays of 2010 (24-26 December)."""
    return [
        datetime(2010, 12, 24),
        datetime(2010, 12, 25),
        datetime(2010, 12, 26),
    ]


@pytest.fixture
def sample_datetime() -> datetime:
    """A Wednesday afternoon with a sub-second component."""
    return datetime(2010, 10, 27, 14, 30, 45, 123456)


@pytest.fixture
def sample_dates() -> List[datetime]:
    """Dates spread over weekdays, month ends, leap days and year boundaries."""
    return [
        datetime(2004, 2, 29, 8, 15),
        datetime(2005, 1, 1),
        datetime(2005, 1, 2, 23, 59, 59),
        datetime(2008, 12, 29),
        datetime(2010, 1, 3, 12),
        datetime(2010, 10, 27, 14, 30, 45, 123456),
        datetime(2012, 9, 18),
        datetime(2015, 12, 31, 6),
        datetime(2020, 6, 7),
        datetime(2021, 1, 3),
    ]
