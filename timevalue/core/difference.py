"""TimeDifference: a millisecond delta split into days down to milliseconds.

This module provides the TimeDifference record and parse_time_diff,
which produces it.
"""

from __future__ import annotations

from dataclasses import dataclass

from timevalue._internal.coerce import to_int
from timevalue._internal.constants import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
)


@dataclass(frozen=True)
class TimeDifference:
    """A signed span of time split into whole units.

    All unit fields are non-negative; the direction is carried by ``sign``
    alone, so ``sign * total`` reproduces the delta it was built from.

    Attributes:
        days: Whole days.
        hours: Whole hours after the days (0-23).
        minutes: Whole minutes after the hours (0-59).
        seconds: Whole seconds after the minutes (0-59).
        milliseconds: Remaining milliseconds (0-999).
        sign: 1 for a positive delta, -1 for a negative one, 0 for zero.

    Examples:
        >>> d = parse_time_diff(-90_061_001)
        >>> d.days, d.hours, d.minutes, d.seconds, d.milliseconds, d.sign
        (1, 1, 1, 1, 1, -1)
        >>> d.total_milliseconds
        -90061001
    """

    days: int
    hours: int
    minutes: int
    seconds: int
    milliseconds: int
    sign: int

    @property
    def total_milliseconds(self) -> int:
        """The signed delta this difference was built from."""
        magnitude = (
            self.days * MS_PER_DAY
            + self.hours * MS_PER_HOUR
            + self.minutes * MS_PER_MINUTE
            + self.seconds * MS_PER_SECOND
            + self.milliseconds
        )
        return self.sign * magnitude


def parse_time_diff(delta: object) -> TimeDifference:
    """Split a millisecond delta into days, hours, minutes, seconds, ms.

    Args:
        delta: Milliseconds; anything that is not an integer reads as 0
            (strings are read up to their first non-digit, floats are
            truncated).

    Returns:
        The TimeDifference.

    Examples:
        >>> parse_time_diff(3_723_004)
        TimeDifference(days=0, hours=1, minutes=2, seconds=3, milliseconds=4, sign=1)
        >>> parse_time_diff("not a number").sign
        0
    """
    diff = to_int(delta)

    sign = 0
    if diff > 0:
        sign = 1
    elif diff < 0:
        sign = -1
        diff = -diff

    days, diff = divmod(diff, MS_PER_DAY)
    hours, diff = divmod(diff, MS_PER_HOUR)
    minutes, diff = divmod(diff, MS_PER_MINUTE)
    seconds, milliseconds = divmod(diff, MS_PER_SECOND)

    return TimeDifference(
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        milliseconds=milliseconds,
        sign=sign,
    )


__all__ = [
    "TimeDifference",
    "parse_time_diff",
]
