"""Platform clock and local calendar capability.

Everything timevalue knows about wall-clock time, the local timezone and
calendar <-> epoch conversion goes through this module. It wraps the
standard library ``datetime`` and ``time`` modules, which in turn use the
C library's local time rules (the ``TZ`` environment variable).

Conversions that the platform cannot perform raise CalendarRangeError.

This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _datetime
import time
from dataclasses import dataclass

from timevalue._internal.constants import MS_PER_SECOND
from timevalue.errors import CalendarRangeError

_EPOCH_UTC = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)
_ONE_MS = _datetime.timedelta(milliseconds=1)

# What the C library and the datetime module raise for out-of-range values.
_PLATFORM_ERRORS = (OverflowError, ValueError, OSError)
# A user tzinfo may also return the wrong type from utcoffset().
_CONVERSION_ERRORS = _PLATFORM_ERRORS + (TypeError,)


@dataclass(frozen=True)
class LocalFields:
    """Calendar fields of one instant in the local timezone.

    Attributes:
        year: Calendar year (1-9999).
        month: Month (1-12).
        day: Day of month (1-31).
        hour: Hour (0-23).
        minute: Minute (0-59).
        second: Second (0-59).
        millisecond: Millisecond (0-999).
        fold: 1 for the second pass through a repeated local time, else 0.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int
    fold: int = 0


def now_millis() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def local_fields(millis: int) -> LocalFields:
    """Split epoch milliseconds into local calendar fields.

    Negative values are handled with floor division, so -1 is
    the last millisecond of the second before the epoch.

    Raises:
        CalendarRangeError: If the instant cannot be localized.
    """
    seconds, millisecond = divmod(millis, MS_PER_SECOND)
    try:
        moment = _datetime.datetime.fromtimestamp(seconds)
    except _PLATFORM_ERRORS as exc:
        raise CalendarRangeError(
            f"cannot localize {millis} ms since the epoch"
        ) from exc
    return LocalFields(
        year=moment.year,
        month=moment.month,
        day=moment.day,
        hour=moment.hour,
        minute=moment.minute,
        second=moment.second,
        millisecond=millisecond,
        fold=moment.fold,
    )


def local_millis(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    """Build an instant from local calendar fields.

    Fields may overflow and roll into the next larger unit: month 13 is
    January of the following year, day 0 is the last day of the previous
    month, hour 24 is midnight of the next day.

    Returns:
        Epoch milliseconds of the local instant.

    Raises:
        CalendarRangeError: If the result lies outside the calendar range.

    Examples:
        >>> local_millis(2018, 13, 1) == local_millis(2019, 1, 1)
        True
    """
    years, month_index = divmod(month - 1, 12)
    try:
        first_of_month = _datetime.datetime(year + years, month_index + 1, 1)
        moment = first_of_month + _datetime.timedelta(
            days=day - 1,
            hours=hour,
            minutes=minute,
            seconds=second,
            milliseconds=millisecond,
        )
        seconds = int(moment.replace(microsecond=0).timestamp())
    except _PLATFORM_ERRORS as exc:
        raise CalendarRangeError(
            f"cannot build local instant {year}-{month}-{day} "
            f"{hour}:{minute}:{second}"
        ) from exc
    return seconds * MS_PER_SECOND + moment.microsecond // 1000


def native_millis(value: _datetime.date) -> int:
    """Convert a ``datetime.datetime`` or ``datetime.date`` to epoch milliseconds.

    Naive datetimes and plain dates are read as local time (a date means
    local midnight); aware datetimes honour their UTC offset. Sub-millisecond
    precision is dropped.

    Raises:
        CalendarRangeError: If the platform cannot convert the value.
    """
    if not isinstance(value, _datetime.datetime):
        return local_millis(value.year, value.month, value.day)

    try:
        if value.utcoffset() is not None:
            return (value - _EPOCH_UTC) // _ONE_MS
        seconds = int(value.replace(microsecond=0).timestamp())
    except _CONVERSION_ERRORS as exc:
        raise CalendarRangeError(f"cannot convert {value!r} to an instant") from exc
    return seconds * MS_PER_SECOND + value.microsecond // 1000


def is_representable(millis: int) -> bool:
    """Check whether the local calendar can represent an instant."""
    try:
        local_fields(millis)
    except CalendarRangeError:
        return False
    return True


__all__ = [
    "LocalFields",
    "now_millis",
    "local_fields",
    "local_millis",
    "native_millis",
    "is_representable",
]
