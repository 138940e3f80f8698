"""Differences between two time inputs.

Every function accepts the same inputs as TimeValue (strings, numbers,
datetimes, TimeValues, None) for both ends and measures ``end - start``.

Functions:
    time_diff: Signed difference in milliseconds.
    sec_diff, min_diff, hour_diff, day_diff: The same in other units.
    day_diff_without_time: Day difference ignoring the time of day.
    time_diff_detail: The difference as a TimeDifference.

Examples:
    >>> from timevalue.arithmetic import time_diff, hour_diff
    >>> time_diff(1000, 4000)
    3000
    >>> hour_diff("2018-10-01 12:00:00", "2018-10-01 13:30:00")
    1.5
"""

from __future__ import annotations

from timevalue.arithmetic.diff import (
    day_diff,
    day_diff_without_time,
    hour_diff,
    min_diff,
    sec_diff,
    time_diff,
    time_diff_detail,
)

__all__: list[str] = [
    "time_diff",
    "sec_diff",
    "min_diff",
    "hour_diff",
    "day_diff",
    "day_diff_without_time",
    "time_diff_detail",
]
