"""Tests for time differences and TimeDifference."""

from __future__ import annotations

import pytest

from timevalue import TimeDifference, TimeValue, parse_time_diff
from timevalue.arithmetic import (
    day_diff,
    day_diff_without_time,
    hour_diff,
    min_diff,
    sec_diff,
    time_diff,
    time_diff_detail,
)


class TestTimeDiff:
    """Tests for time_diff and the unit helpers."""

    def test_time_diff_is_end_minus_start(self) -> None:
        """time_diff is signed end - start."""
        assert time_diff(1000, 4000) == 3000
        assert time_diff(4000, 1000) == -3000

    def test_accepts_any_input(self) -> None:
        """Both ends accept any TimeValue input."""
        assert time_diff(TimeValue(1000), "4000") == 3000

    def test_unit_helpers_are_not_truncated(self) -> None:
        """Unit differences are real numbers."""
        assert sec_diff(0, 1500) == 1.5
        assert min_diff(0, 90_000) == 1.5
        assert hour_diff(0, 5_400_000) == 1.5
        assert day_diff(0, 43_200_000) == 0.5

    def test_static_methods_delegate(self) -> None:
        """The TimeValue static methods give the same results."""
        assert TimeValue.time_diff(0, 1500) == 1500
        assert TimeValue.sec_diff(0, 1500) == 1.5
        assert TimeValue.min_diff(0, 30_000) == 0.5
        assert TimeValue.hour_diff(0, 1_800_000) == 0.5
        assert TimeValue.day_diff(0, -86_400_000) == -1.0

    @pytest.mark.usefixtures("utc8")
    def test_between_strings(self) -> None:
        """Strings are parsed as local date-times."""
        assert hour_diff("2018-10-01 12:00:00", "2018-10-01 13:30:00") == 1.5


class TestDayDiffWithoutTime:
    """Tests for day_diff_without_time."""

    @pytest.mark.usefixtures("utc8")
    def test_ignores_time_of_day(self) -> None:
        """Two seconds apart across midnight is one day."""
        assert day_diff_without_time("2018-10-01 23:59:59", "2018-10-02 00:00:01") == 1
        assert TimeValue.day_diff_without_time("2018-10-01 23:59:59", "2018-10-02 00:00:01") == 1

    @pytest.mark.usefixtures("utc8")
    def test_same_day(self) -> None:
        """The same date is zero days apart."""
        assert day_diff_without_time("2018-10-01 00:00:00", "2018-10-01 23:59:59") == 0

    @pytest.mark.usefixtures("utc8")
    def test_backwards(self) -> None:
        """An earlier end date gives a negative count."""
        assert day_diff_without_time("2018-10-02 00:00:01", "2018-09-30 23:59:59") == -2

    def test_across_dst_change(self, local_timezone) -> None:
        """Across a DST change the count is off by the shift."""
        local_timezone("EST5EDT,M3.2.0,M11.1.0")
        result = day_diff_without_time("2018-03-10 12:00:00", "2018-03-12 12:00:00")
        assert result == pytest.approx(47 / 24)


class TestParseTimeDiff:
    """Tests for parse_time_diff."""

    def test_positive(self) -> None:
        """A positive delta splits greedily."""
        d = parse_time_diff(90_061_001)
        assert d == TimeDifference(days=1, hours=1, minutes=1, seconds=1, milliseconds=1, sign=1)

    def test_negative(self) -> None:
        """A negative delta keeps fields non-negative."""
        d = parse_time_diff(-3_723_004)
        assert (d.days, d.hours, d.minutes, d.seconds, d.milliseconds) == (0, 1, 2, 3, 4)
        assert d.sign == -1

    def test_zero(self) -> None:
        """Zero has sign 0."""
        assert parse_time_diff(0) == TimeDifference(0, 0, 0, 0, 0, 0)

    def test_non_numeric_is_zero(self) -> None:
        """Unreadable input is a zero delta."""
        assert parse_time_diff("abc").sign == 0
        assert parse_time_diff(None).sign == 0

    def test_lenient_integer_input(self) -> None:
        """Strings are read up to the first non-digit; floats truncate."""
        assert parse_time_diff("1500ms").seconds == 1
        assert parse_time_diff(1999.9).milliseconds == 999

    @pytest.mark.parametrize(
        "delta",
        [0, 1, -1, 999, 1000, 59_999, 86_399_999, 86_400_000, -90_061_001, 123_456_789_012],
    )
    def test_total_reconstructs_delta(self, delta: int) -> None:
        """sign * (days, hours, ...) adds back up to the delta."""
        d = parse_time_diff(delta)
        rebuilt = d.sign * (
            d.days * 86_400_000
            + d.hours * 3_600_000
            + d.minutes * 60_000
            + d.seconds * 1000
            + d.milliseconds
        )
        assert rebuilt == delta
        assert d.total_milliseconds == delta

    def test_field_ranges(self) -> None:
        """Fields below days stay within their unit."""
        d = parse_time_diff(86_399_999)
        assert (d.days, d.hours, d.minutes, d.seconds, d.milliseconds) == (0, 23, 59, 59, 999)

    def test_is_frozen(self) -> None:
        """TimeDifference cannot be changed."""
        d = parse_time_diff(1)
        with pytest.raises(AttributeError):
            d.sign = -1  # type: ignore[misc]


class TestTimeDiffDetail:
    """Tests for time_diff_detail."""

    def test_detail(self) -> None:
        """time_diff_detail splits end - start."""
        d = time_diff_detail(0, 90_061_001)
        assert (d.days, d.hours, d.minutes, d.seconds, d.milliseconds, d.sign) == (1, 1, 1, 1, 1, 1)

    def test_static_method(self) -> None:
        """TimeValue.time_diff_detail and parse_time_diff are exposed."""
        assert TimeValue.time_diff_detail(5000, 0).sign == -1
        assert TimeValue.parse_time_diff(5000).seconds == 5
