"""Tokenizers for date-time and time-of-day strings.

Both tokenizers are lenient: a fragment that does not start with an
integer becomes None and the caller keeps its default for that field.

Internal module - use parse_time() from timevalue.parse instead.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from timevalue._internal.coerce import parse_int

# "2018 - 10 / 01 12 : 30" -> "2018-10/01 12:30"
_SEPARATOR_PADDING = re.compile(r"\s*([-/:])\s*")
_FIELD_BOUNDARY = re.compile(r"\s+|[-/:]")
_DIGITS = re.compile(r"[0-9]+")

_DATETIME_FIELDS = 6
_TIME_OF_DAY_FIELDS = 3


@dataclass(frozen=True)
class DateTimeFields:
    """Fields read from a date-time string, in string order.

    A field is None when it was missing or did not parse as an integer.

    Attributes:
        year: Calendar year.
        month: Month, 1-based.
        day: Day of month.
        hour: Hour.
        minute: Minute.
        second: Second.
    """

    year: int | None = None
    month: int | None = None
    day: int | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None


def is_digit_string(text: str) -> bool:
    """Check whether text is a non-empty run of ASCII digits."""
    return _DIGITS.fullmatch(text) is not None


def split_fields(text: str) -> list[str]:
    """Split a date-time string on whitespace and the - / : separators.

    Examples:
        >>> split_fields("2018/10/1 12 : 30:0")
        ['2018', '10', '1', '12', '30', '0']
    """
    text = _SEPARATOR_PADDING.sub(r"\1", text)
    return _FIELD_BOUNDARY.split(text)


def tokenize_datetime(text: str) -> DateTimeFields:
    """Read up to six integer fields from a date-time string.

    Examples:
        >>> tokenize_datetime("2018-10-01")
        DateTimeFields(year=2018, month=10, day=1, hour=None, minute=None, second=None)

        >>> tokenize_datetime("2018-xx-01 12").month is None
        True
    """
    parts = split_fields(text)[:_DATETIME_FIELDS]
    values = [parse_int(part) for part in parts]
    values.extend([None] * (_DATETIME_FIELDS - len(values)))
    return DateTimeFields(*values)


def tokenize_time_of_day(text: str) -> tuple[int | None, int | None, int | None]:
    """Read hour, minute and second from an ``h[:m[:s]]`` string.

    Examples:
        >>> tokenize_time_of_day("12:30")
        (12, 30, None)
    """
    parts = text.split(":")[:_TIME_OF_DAY_FIELDS]
    values = [parse_int(part) for part in parts]
    values.extend([None] * (_TIME_OF_DAY_FIELDS - len(values)))
    hour, minute, second = values
    return hour, minute, second


__all__ = [
    "DateTimeFields",
    "is_digit_string",
    "split_fields",
    "tokenize_datetime",
    "tokenize_time_of_day",
]
