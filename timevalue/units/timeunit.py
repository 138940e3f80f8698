"""TimeUnit enumeration for fixed-size time units.

This module provides the TimeUnit enum used by TimeValue arithmetic
and by the difference helpers.
"""

from __future__ import annotations

from enum import Enum

from timevalue._internal.constants import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
)


class TimeUnit(Enum):
    """Fixed-size time units, from milliseconds up to days.

    Calendar units (months, years) have no fixed length and are
    deliberately absent.

    Examples:
        >>> TimeUnit.HOUR.millis
        3600000

        >>> TimeUnit.SECOND.count(90_000)
        90.0
    """

    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"

    @property
    def millis(self) -> int:
        """Number of milliseconds in one unit."""
        return _UNIT_MILLIS[self]

    def count(self, millis: int) -> float:
        """Express a millisecond amount in this unit (not truncated)."""
        return millis / self.millis


_UNIT_MILLIS: dict[TimeUnit, int] = {
    TimeUnit.MILLISECOND: 1,
    TimeUnit.SECOND: MS_PER_SECOND,
    TimeUnit.MINUTE: MS_PER_MINUTE,
    TimeUnit.HOUR: MS_PER_HOUR,
    TimeUnit.DAY: MS_PER_DAY,
}


__all__ = ["TimeUnit"]
