"""Tests for leap years and month lengths."""

from __future__ import annotations

import pytest

from timevalue import TimeValue
from timevalue._internal.calendar import days_in_month, is_leap_year


class TestIsLeapYear:
    """Tests for TimeValue.is_leap_year."""

    def test_century_rules(self) -> None:
        """Divisible by 400 is leap, by 100 only is not."""
        assert TimeValue.is_leap_year(2000) is True
        assert TimeValue.is_leap_year(1900) is False

    def test_four_year_rule(self) -> None:
        """Divisible by 4 is leap."""
        assert TimeValue.is_leap_year(2004) is True
        assert TimeValue.is_leap_year(2001) is False

    def test_numeric_string(self) -> None:
        """Numeric strings are read as years."""
        assert TimeValue.is_leap_year("2024") is True

    def test_non_numeric_is_year_zero(self) -> None:
        """Unreadable input is year 0, a leap year."""
        assert TimeValue.is_leap_year("abc") is True
        assert TimeValue.is_leap_year(None) is True

    def test_negative_years(self) -> None:
        """Negative years follow the same rules."""
        assert TimeValue.is_leap_year(-4) is True
        assert TimeValue.is_leap_year(-1) is False


class TestLastDayInMonth:
    """Tests for TimeValue.last_day_in_month."""

    def test_february(self) -> None:
        """February has 29 days in leap years only."""
        assert TimeValue.last_day_in_month(2000, 2) == 29
        assert TimeValue.last_day_in_month(1900, 2) == 28

    @pytest.mark.parametrize(
        ("month", "days"),
        [(1, 31), (3, 31), (4, 30), (5, 31), (6, 30), (7, 31), (8, 31), (9, 30), (10, 31), (11, 30), (12, 31)],
    )
    def test_fixed_months(self, month: int, days: int) -> None:
        """Other months have a fixed length."""
        assert TimeValue.last_day_in_month(2018, month) == days

    def test_non_numeric_month_is_january(self) -> None:
        """An unreadable month is January."""
        assert TimeValue.last_day_in_month(2018, "x") == 31

    def test_non_numeric_year_is_zero(self) -> None:
        """An unreadable year is year 0, a leap year."""
        assert TimeValue.last_day_in_month("x", 2) == 29

    def test_month_out_of_range(self) -> None:
        """Months outside 1-12 have no last day."""
        assert TimeValue.last_day_in_month(2018, 0) is None
        assert TimeValue.last_day_in_month(2018, 13) is None
        assert TimeValue.last_day_in_month(2018, "-3") is None


class TestStrictCalendar:
    """Tests for the strict internal helpers."""

    def test_is_leap_year(self) -> None:
        """The strict helper takes ints only."""
        assert is_leap_year(2024)
        assert not is_leap_year(2023)

    def test_days_in_month(self) -> None:
        """February depends on the year."""
        assert days_in_month(2000, 2) == 29
        assert days_in_month(1900, 2) == 28
        assert days_in_month(2018, 4) == 30

    def test_days_in_month_rejects_bad_month(self) -> None:
        """Months outside 1-12 raise ValueError."""
        with pytest.raises(ValueError):
            days_in_month(2018, 13)
