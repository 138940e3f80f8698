"""Core value types for timevalue.

This module provides:
    - TimeValue: An immutable instant in epoch milliseconds
    - TimeDifference: A millisecond delta split into whole units
"""

from __future__ import annotations

from timevalue.core.difference import TimeDifference, parse_time_diff
from timevalue.core.timevalue import TimeValue

__all__: list[str] = [
    "TimeDifference",
    "TimeValue",
    "parse_time_diff",
]
