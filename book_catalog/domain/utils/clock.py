"""
Time source for the domain layer.

=============================================================================
TEACHING NOTES: Why inject the clock?
=============================================================================

Two domain rules depend on wall-clock time:
- Publication years are valid only up to the *current* UTC year
- created_at / updated_at timestamps are stamped with "now"

Reading datetime.now() directly inside validators would make them
non-deterministic: a test asserting that `current_year + 1` is rejected
could flip on New Year's Eve. Instead, every time-dependent function
accepts a Clock and falls back to SystemClock.

Tests inject a fixed clock; production uses this one.
=============================================================================
"""

from datetime import datetime, UTC
from typing import Protocol


class Clock(Protocol):
    """Port for reading the current instant."""

    def now(self) -> datetime:
        """
        Return the current instant.

        Returns:
            A timezone-aware datetime in UTC
        """
        ...


def utc_now() -> datetime:
    """Current instant as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


class SystemClock:
    """Clock backed by the system wall clock, always in UTC."""

    def now(self) -> datetime:
        return utc_now()
