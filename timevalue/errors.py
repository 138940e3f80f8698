"""Timevalue exception hierarchy.

The public TimeValue API never raises for malformed input; these exceptions
signal conditions between internal layers and are caught at the parsing
boundary, where the documented fallback is applied.
"""

from __future__ import annotations


class TimeValueError(Exception):
    """Base exception for all timevalue errors."""

    pass


class CalendarRangeError(TimeValueError):
    """Instant cannot be represented by the platform calendar.

    Raised by the clock layer when converting between epoch milliseconds
    and local calendar fields fails.

    Examples:
        - Year outside 1-9999 after field overflow
        - Epoch milliseconds beyond what the C library can localize
    """

    pass


__all__ = [
    "TimeValueError",
    "CalendarRangeError",
]
