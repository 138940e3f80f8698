"""Unit types for timevalue.

This module provides:
    - TimeUnit: Fixed-size time units from milliseconds to days
"""

from __future__ import annotations

from timevalue.units.timeunit import TimeUnit

__all__: list[str] = [
    "TimeUnit",
]
