"""Parsing of time inputs into epoch milliseconds.

This module turns any of the inputs a TimeValue accepts into a single
epoch-millisecond integer. Parsing never raises: input that cannot be
read degrades to a defined default.

Public API:
    parse_time: Convert a time input to epoch milliseconds.
    parse_time_of_day: Read hour/minute/second from an "h[:m[:s]]" value.
    classify: Decide which InputKind a value is.
    InputKind: The kinds of input parse_time accepts.

Accepted inputs:
    - None, booleans, anything unsupported: the current time
    - int / float: epoch milliseconds (floats truncated, NaN -> current time)
    - TimeValue: its epoch milliseconds
    - datetime.datetime / datetime.date: converted (failure -> 0)
    - str: "1538368200000" (epoch milliseconds) or
      "2018-10-01 12:30:00", "2018/10/1 12:30:0", "2018-10-01" (local time)

Examples:
    >>> from timevalue.parse import parse_time
    >>> parse_time(1538368200000)
    1538368200000
    >>> parse_time("1538368200000")
    1538368200000
    >>> parse_time("2018-10-01 12:30:00") == parse_time("2018/10/1 12:30:0")
    True
"""

from __future__ import annotations

import datetime as _datetime
import logging
import numbers
from enum import Enum
from typing import TYPE_CHECKING

from timevalue._internal import clock
from timevalue._internal.coerce import parse_int
from timevalue.errors import CalendarRangeError
from timevalue.parse._tokens import (
    is_digit_string,
    tokenize_datetime,
    tokenize_time_of_day,
)

if TYPE_CHECKING:
    from timevalue.core.timevalue import TimeValue

logger = logging.getLogger(__name__)

# Upper bounds for hour, minute, second in a time-of-day string
_TIME_OF_DAY_LIMITS = (23, 59, 59)


class InputKind(Enum):
    """The kinds of input parse_time accepts.

    Values:
        ABSENT: None, booleans and unsupported objects
        NUMBER: Real numbers (epoch milliseconds)
        TEXT: Strings (numeric or date-time)
        NATIVE_DATE: datetime.datetime and datetime.date
        TIME_VALUE: TimeValue instances
    """

    ABSENT = "absent"
    NUMBER = "number"
    TEXT = "text"
    NATIVE_DATE = "native_date"
    TIME_VALUE = "time_value"


def classify(value: object) -> InputKind:
    """Decide which InputKind a value is.

    Examples:
        >>> classify(None)
        <InputKind.ABSENT: 'absent'>
        >>> classify(False)
        <InputKind.ABSENT: 'absent'>
        >>> classify(1.5)
        <InputKind.NUMBER: 'number'>
    """
    # Import here to avoid circular imports
    from timevalue.core.timevalue import TimeValue

    if value is None or isinstance(value, bool):
        return InputKind.ABSENT
    if isinstance(value, TimeValue):
        return InputKind.TIME_VALUE
    if isinstance(value, numbers.Real):
        return InputKind.NUMBER
    if isinstance(value, str):
        return InputKind.TEXT
    if isinstance(value, _datetime.date):
        return InputKind.NATIVE_DATE
    return InputKind.ABSENT


def parse_time(
    value: str | float | _datetime.date | TimeValue | None = None,
) -> int:
    """Convert a time input to epoch milliseconds.

    Args:
        value: A string, number, datetime/date, TimeValue, or None.

    Returns:
        Epoch milliseconds. The current time when the input is absent,
        unreadable, NaN, or outside what the local calendar can represent.

    Examples:
        >>> parse_time(0)
        0
        >>> parse_time("  42  ")
        42
    """
    kind = classify(value)

    millis: int | None
    if kind is InputKind.TEXT:
        millis = _parse_text(value)  # type: ignore[arg-type]
    elif kind is InputKind.NUMBER:
        millis = parse_int(value)
    elif kind is InputKind.NATIVE_DATE:
        millis = _parse_native(value)  # type: ignore[arg-type]
    elif kind is InputKind.TIME_VALUE:
        millis = value.epoch_millis  # type: ignore[union-attr]
    else:
        millis = None

    if millis is None or not clock.is_representable(millis):
        logger.debug("no usable instant in %r, using the current time", value)
        return clock.now_millis()
    return millis


def _parse_text(text: str) -> int | None:
    """Parse a numeric or date-time string; None if no instant results."""
    text = text.strip()
    if is_digit_string(text):
        return int(text)

    fields = tokenize_datetime(text)
    try:
        # Unspecified date fields keep the local date of the epoch instant
        epoch = clock.local_fields(0)
        return clock.local_millis(
            epoch.year if fields.year is None else fields.year,
            epoch.month if fields.month is None else fields.month,
            epoch.day if fields.day is None else fields.day,
            fields.hour or 0,
            fields.minute or 0,
            fields.second or 0,
        )
    except CalendarRangeError as exc:
        logger.debug("%s", exc)
        return None


def _parse_native(value: _datetime.date) -> int:
    try:
        return clock.native_millis(value)
    except CalendarRangeError as exc:
        logger.debug("%s, using 0", exc)
        return 0


def parse_time_of_day(value: object) -> tuple[int | None, int | None, int | None]:
    """Read hour, minute and second from an ``h[:m[:s]]`` value.

    A falsy value reads as "0". A bare number is the hour. Fields that are
    missing, unreadable or out of range come back as None.

    Examples:
        >>> parse_time_of_day("12:30:59")
        (12, 30, 59)
        >>> parse_time_of_day(9)
        (9, None, None)
        >>> parse_time_of_day("25:61")
        (None, None, None)
    """
    text = str(value or 0).strip()
    fields = tokenize_time_of_day(text)
    return tuple(  # type: ignore[return-value]
        field if field is not None and 0 <= field <= limit else None
        for field, limit in zip(fields, _TIME_OF_DAY_LIMITS)
    )


__all__ = [
    "InputKind",
    "classify",
    "parse_time",
    "parse_time_of_day",
]
