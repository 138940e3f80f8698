"""Timevalue: a small immutable instant-in-time value type.

A TimeValue wraps milliseconds since the Unix epoch. It can be built from
almost anything that names an instant, never raises on bad input, and
offers immutable arithmetic, pattern formatting and difference helpers
without pulling in a calendar or timezone library.

Core Types:
    TimeValue: An instant in epoch milliseconds
    TimeDifference: A delta split into days, hours, minutes, seconds, ms
    ComponentMap: String forms of the calendar fields of an instant

Units:
    TimeUnit: Fixed-size units (MILLISECOND ... DAY)

Functions:
    parse_time: Convert any supported input to epoch milliseconds
    parse_time_diff: Split a millisecond delta into a TimeDifference
    format_pattern: Substitute pattern tokens from a ComponentMap

Exceptions:
    TimeValueError: Base exception
    CalendarRangeError: Instant outside the platform calendar

Example:
    >>> from timevalue import TimeValue
    >>> start = TimeValue("2018-10-01 12:30:00")
    >>> start.add_hour(2).format("hh:mm")
    '14:30'
    >>> TimeValue.time_diff_detail(start, start.add_min(90)).hours
    1
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from timevalue.core.difference import TimeDifference, parse_time_diff
from timevalue.core.timevalue import TimeValue
from timevalue.format import ComponentMap, format_pattern
from timevalue.parse import InputKind, parse_time

# Units
from timevalue.units.timeunit import TimeUnit

# Exceptions
from timevalue.errors import CalendarRangeError, TimeValueError

# Defaults
from timevalue._internal.constants import DEFAULT_FORMAT

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "TimeValue",
    "TimeDifference",
    "ComponentMap",
    "InputKind",
    # Units
    "TimeUnit",
    # Exceptions
    "TimeValueError",
    "CalendarRangeError",
    # Functions
    "parse_time",
    "parse_time_diff",
    "format_pattern",
    "DEFAULT_FORMAT",
]
