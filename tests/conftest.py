"""
pytest configuration and fixtures.
"""

import pytest

from dategetter.config import Settings
from dategetter.core.clock import FixedClock
from dategetter.core.formatter import DateFormatter


NEW_YEAR_2015 = 1420070400


@pytest.fixture
def settings():
    """Settings with the stock defaults, independent of the environment."""
    return Settings(default_pattern="YYYY-MM-DD hh:mm:ss", dialect="tokens", timezone="UTC")


@pytest.fixture
def fixed_clock():
    """A clock pinned to 2015-01-01 00:00:00 UTC."""
    return FixedClock(NEW_YEAR_2015)


@pytest.fixture
def formatter(settings, fixed_clock):
    """A formatter reading time from the fixed clock."""
    return DateFormatter(settings=settings, clock=fixed_clock)
