"""TimeValue class representing a single instant in time.

This module provides the TimeValue class: an immutable wrapper around a
signed count of epoch milliseconds, with lenient construction, immutable
arithmetic, pattern formatting and difference helpers.
"""

from __future__ import annotations

import datetime as _datetime
import logging
from typing import Any

from timevalue._internal import clock
from timevalue._internal.calendar import days_in_month
from timevalue._internal.calendar import is_leap_year as _is_leap_year
from timevalue._internal.coerce import parse_int, to_int
from timevalue._internal.decorators import hybridmethod
from timevalue.arithmetic import diff as _diff
from timevalue.core.difference import TimeDifference
from timevalue.core.difference import parse_time_diff as _parse_time_diff
from timevalue.errors import CalendarRangeError
from timevalue.format.components import ComponentMap, build_component_map
from timevalue.format.pattern import format_pattern
from timevalue.parse import parse_time as _parse_time
from timevalue.parse import parse_time_of_day
from timevalue.units.timeunit import TimeUnit

logger = logging.getLogger(__name__)


class TimeValue:
    """An immutable instant in time.

    TimeValue stores milliseconds since 1970-01-01T00:00:00Z and never
    changes them; every transformation returns a new instance. Calendar
    views (``map``, ``format``, ``at``, ``clear_ms``) use the local
    timezone of the process.

    Construction never fails. The input may be:
        - None (or omitted): the current time
        - an int or float: epoch milliseconds
        - a str: epoch milliseconds ("1538368200000") or a local date-time
          ("2018-10-01 12:30:00", "2018/10/1 12:30:0", "2018-10-01")
        - a datetime.datetime or datetime.date
        - another TimeValue

    Anything unreadable is the current time.

    Examples:
        >>> t = TimeValue("2018-10-01 12:30:00")
        >>> t.format()
        '2018-10-01 12:30:00'
        >>> t.add_day(1).format("YYYY/MM/DD")
        '2018/10/02'
        >>> t.at("08:00").format("hh:mm:ss")
        '08:00:00'

        >>> TimeValue(1538368200000).get_time()
        1538368200000
    """

    __slots__ = ("_millis",)

    def __init__(self, value: Any = None) -> None:
        """Create a TimeValue from any supported input.

        Args:
            value: A str, int, float, datetime, date, TimeValue, or None.
        """
        self._millis: int = _parse_time(value)

    # Construction

    @classmethod
    def create(cls, value: Any = None) -> TimeValue:
        """Create a TimeValue; same as calling the class."""
        return cls(value)

    @classmethod
    def parse(cls, value: Any = None) -> TimeValue:
        """Alias of create."""
        return cls(value)

    @staticmethod
    def now() -> int:
        """Return the current time in epoch milliseconds."""
        return clock.now_millis()

    @staticmethod
    def parse_time(value: Any = None) -> int:
        """Convert any supported input to epoch milliseconds.

        See timevalue.parse.parse_time.
        """
        return _parse_time(value)

    # Accessors

    @property
    def epoch_millis(self) -> int:
        """Milliseconds since 1970-01-01T00:00:00Z."""
        return self._millis

    def get_time(self) -> int:
        """Return the epoch milliseconds."""
        return self._millis

    def get_date(self) -> _datetime.datetime:
        """Return the instant as a naive local ``datetime.datetime``."""
        local = clock.local_fields(self._millis)
        # fold picks the later of two repeated wall times when DST ends
        return _datetime.datetime(
            local.year,
            local.month,
            local.day,
            local.hour,
            local.minute,
            local.second,
            local.millisecond * 1000,
            fold=local.fold,
        )

    def clone(self) -> TimeValue:
        """Return a new TimeValue for the same instant."""
        return TimeValue(self._millis)

    def copy(self) -> TimeValue:
        """Alias of clone."""
        return self.clone()

    # Transformations

    def clear_ms(self) -> TimeValue:
        """Return the same instant with the millisecond field set to 0."""
        return TimeValue(self._millis - self._millis % 1000)

    def add(self, amount: Any, unit: TimeUnit = TimeUnit.MILLISECOND) -> TimeValue:
        """Return this instant moved by ``amount`` units.

        Args:
            amount: Number of units, may be negative. Anything that is not an
                integer reads as 0.
            unit: The TimeUnit of ``amount``.

        Examples:
            >>> t = TimeValue(0)
            >>> t.add(2, TimeUnit.MINUTE).get_time()
            120000
            >>> t.add("oops", TimeUnit.DAY).get_time()
            0
        """
        return TimeValue(self._millis + to_int(amount) * unit.millis)

    def add_ms(self, ms: Any) -> TimeValue:
        return self.add(ms, TimeUnit.MILLISECOND)

    def add_sec(self, sec: Any) -> TimeValue:
        return self.add(sec, TimeUnit.SECOND)

    def add_min(self, minutes: Any) -> TimeValue:
        return self.add(minutes, TimeUnit.MINUTE)

    def add_hour(self, hours: Any) -> TimeValue:
        return self.add(hours, TimeUnit.HOUR)

    def add_day(self, days: Any) -> TimeValue:
        return self.add(days, TimeUnit.DAY)

    def next_day(self) -> TimeValue:
        """Return this instant one day (86 400 000 ms) later."""
        return self.add_day(1)

    def prev_day(self) -> TimeValue:
        """Return this instant one day (86 400 000 ms) earlier."""
        return self.add_day(-1)

    @hybridmethod
    def at(self_or_cls, time_of_day: Any = None) -> TimeValue:
        """Return the same local date at the given time of day.

        Called on the class, the date is today: ``TimeValue.at("12:00")``.

        Args:
            time_of_day: "h", "h:m" or "h:m:s", or a number taken as the
                hour. Missing, unreadable and out-of-range fields are 0.

        Returns:
            A TimeValue with the given hour, minute and second and a
            millisecond of 0.

        Examples:
            >>> t = TimeValue("2018-10-01 17:45:12")
            >>> t.at("12:30").format()
            '2018-10-01 12:30:00'
            >>> t.at(9).format()
            '2018-10-01 09:00:00'
            >>> t.at("99:xx:30").format()
            '2018-10-01 00:00:30'
        """
        if isinstance(self_or_cls, type):
            return self_or_cls.create().at(time_of_day)

        cls = type(self_or_cls)
        hour, minute, second = parse_time_of_day(time_of_day)
        try:
            local = clock.local_fields(self_or_cls._millis)
            millis = clock.local_millis(
                local.year,
                local.month,
                local.day,
                hour or 0,
                minute or 0,
                second or 0,
            )
        except CalendarRangeError as exc:
            logger.debug("%s, using the current time", exc)
            return cls()
        return cls(millis)

    # Formatting

    def map(self) -> ComponentMap:
        """Return the ComponentMap of this instant in local time.

        Examples:
            >>> TimeValue("2018-03-04 05:06:07").map()["MM"]
            '03'
        """
        return build_component_map(self._millis)

    def format(self, pattern: Any = None) -> str:
        """Format this instant with a token pattern.

        Args:
            pattern: The pattern (see timevalue.format); anything other than
                a str means "YYYY-MM-DD hh:mm:ss".

        Examples:
            >>> TimeValue("2018-10-01 12:30:00").format("DD.MM.YY hh:mm")
            '01.10.18 12:30'
        """
        return format_pattern(self.map(), pattern)

    def to_string(self, pattern: Any = None) -> str:
        """Alias of format."""
        return self.format(pattern)

    # Differences and calendar facts

    @staticmethod
    def time_diff(start: Any, end: Any) -> int:
        """Return ``end - start`` in milliseconds."""
        return _diff.time_diff(start, end)

    @staticmethod
    def sec_diff(start: Any, end: Any) -> float:
        return _diff.sec_diff(start, end)

    @staticmethod
    def min_diff(start: Any, end: Any) -> float:
        return _diff.min_diff(start, end)

    @staticmethod
    def hour_diff(start: Any, end: Any) -> float:
        return _diff.hour_diff(start, end)

    @staticmethod
    def day_diff(start: Any, end: Any) -> float:
        return _diff.day_diff(start, end)

    @staticmethod
    def day_diff_without_time(start: Any, end: Any) -> float:
        """Return the day difference with both times of day ignored."""
        return _diff.day_diff_without_time(start, end)

    @staticmethod
    def time_diff_detail(start: Any, end: Any) -> TimeDifference:
        """Return ``end - start`` as a TimeDifference."""
        return _diff.time_diff_detail(start, end)

    @staticmethod
    def parse_time_diff(delta: Any) -> TimeDifference:
        """Split a millisecond delta into a TimeDifference."""
        return _parse_time_diff(delta)

    @staticmethod
    def is_leap_year(year: Any) -> bool:
        """Check whether ``year`` is a leap year.

        Non-numeric input reads as year 0, which is a leap year.

        Examples:
            >>> TimeValue.is_leap_year(2000), TimeValue.is_leap_year(1900)
            (True, False)
        """
        return _is_leap_year(to_int(year))

    @staticmethod
    def last_day_in_month(year: Any, month: Any) -> int | None:
        """Return the number of days in a month.

        Args:
            year: The year; non-numeric reads as 0.
            month: The month, 1-12; non-numeric reads as January.

        Returns:
            28-31, or None when ``month`` is outside 1-12.

        Examples:
            >>> TimeValue.last_day_in_month(2000, 2)
            29
            >>> TimeValue.last_day_in_month(2018, "x")
            31
        """
        month_number = parse_int(month)
        try:
            return days_in_month(to_int(year), 1 if month_number is None else month_number)
        except ValueError:
            return None

    # Operators

    def __add__(self, other: object) -> TimeValue:
        """Add a number of milliseconds."""
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.add_ms(other)

    def __radd__(self, other: object) -> TimeValue:
        return self.__add__(other)

    def __sub__(self, other: object) -> TimeValue | int:
        """Subtract milliseconds, or another TimeValue to get a delta in ms."""
        if isinstance(other, TimeValue):
            return self._millis - other._millis
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.add_ms(-other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeValue):
            return NotImplemented
        return self._millis == other._millis

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimeValue):
            return NotImplemented
        return self._millis < other._millis

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TimeValue):
            return NotImplemented
        return self._millis <= other._millis

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TimeValue):
            return NotImplemented
        return self._millis > other._millis

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TimeValue):
            return NotImplemented
        return self._millis >= other._millis

    def __hash__(self) -> int:
        return hash(self._millis)

    def __repr__(self) -> str:
        return f"TimeValue({self._millis})"

    def __str__(self) -> str:
        """Return the default format, "YYYY-MM-DD hh:mm:ss"."""
        return self.format()


__all__ = ["TimeValue"]
