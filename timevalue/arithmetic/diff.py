"""Difference helpers between two time inputs."""

from __future__ import annotations

from typing import Any

from timevalue._internal.constants import DAY_ANCHOR_TIME
from timevalue.core.difference import TimeDifference, parse_time_diff
from timevalue.parse import parse_time
from timevalue.units.timeunit import TimeUnit


def time_diff(start: Any, end: Any) -> int:
    """Return ``end - start`` in milliseconds.

    Both ends are read with parse_time, so an unreadable end is the
    current time.
    """
    return parse_time(end) - parse_time(start)


def sec_diff(start: Any, end: Any) -> float:
    """Return ``end - start`` in seconds (not truncated)."""
    return TimeUnit.SECOND.count(time_diff(start, end))


def min_diff(start: Any, end: Any) -> float:
    """Return ``end - start`` in minutes (not truncated)."""
    return TimeUnit.MINUTE.count(time_diff(start, end))


def hour_diff(start: Any, end: Any) -> float:
    """Return ``end - start`` in hours (not truncated)."""
    return TimeUnit.HOUR.count(time_diff(start, end))


def day_diff(start: Any, end: Any) -> float:
    """Return ``end - start`` in days (not truncated)."""
    return TimeUnit.DAY.count(time_diff(start, end))


def day_diff_without_time(start: Any, end: Any) -> float:
    """Return the number of calendar days from ``start`` to ``end``.

    Both instants are moved to DAY_ANCHOR_TIME on their own local date
    before measuring, so the time of day does not matter. Across a DST
    change the result is off a whole number by the size of the shift.

    Examples:
        >>> day_diff_without_time("2018-10-01 23:59:59", "2018-10-02 00:00:01")
        1.0
    """
    # Import here to avoid circular imports
    from timevalue.core.timevalue import TimeValue

    first = TimeValue(start).at(DAY_ANCHOR_TIME)
    second = TimeValue(end).at(DAY_ANCHOR_TIME)
    return day_diff(first, second)


def time_diff_detail(start: Any, end: Any) -> TimeDifference:
    """Return ``end - start`` split into a TimeDifference."""
    return parse_time_diff(time_diff(start, end))


__all__ = [
    "time_diff",
    "sec_diff",
    "min_diff",
    "hour_diff",
    "day_diff",
    "day_diff_without_time",
    "time_diff_detail",
]
