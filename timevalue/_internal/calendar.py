"""Calendar utilities for timevalue.

Strict leap-year and month-length helpers. Callers coerce their input
first; see TimeValue.is_leap_year and TimeValue.last_day_in_month for
the lenient public versions.

This module is not part of the public API.
"""

from __future__ import annotations

from timevalue._internal.constants import DAYS_IN_MONTH


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4 and NOT divisible by 100, or
    - Divisible by 400

    Args:
        year: The year to check (can be 0 or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2004)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2001)  # Not divisible by 4
        False
    """
    return (year % 100 != 0 and year % 4 == 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the length of ``month`` in ``year``.

    Raises:
        ValueError: If month is not in 1-12.

    Examples:
        >>> days_in_month(2000, 2), days_in_month(1900, 2)
        (29, 28)
    """
    if not 1 <= month <= 12:
        raise ValueError(f"no month {month} in a 12-month year")
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


__all__ = [
    "is_leap_year",
    "days_in_month",
]
