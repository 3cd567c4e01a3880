"""
Shared test fixtures.
"""

from datetime import datetime, timedelta, UTC

import pytest


class FixedClock:
    """Clock frozen at a given instant; advance() moves it forward."""

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def advance(self, **kwargs) -> None:
        self._instant += timedelta(**kwargs)


# Mid-year, so "current year" is 2024 regardless of when the suite runs
FROZEN_NOW = datetime(2024, 6, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def fixed_clock():
    """A clock frozen at 2024-06-15 12:00 UTC."""
    return FixedClock(FROZEN_NOW)
