"""Internal constants for timevalue.

These constants define the unit sizes and library defaults used
throughout the package. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
MS_PER_SECOND: int = 1_000
MS_PER_MINUTE: int = 60 * MS_PER_SECOND
MS_PER_HOUR: int = 60 * MS_PER_MINUTE
MS_PER_DAY: int = 24 * MS_PER_HOUR  # 86_400_000

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Formatting
DEFAULT_FORMAT: str = "YYYY-MM-DD hh:mm:ss"

# Longer tokens first so "YYYY" is consumed before "YY", "MM" before "M", ...
FORMAT_TOKENS: tuple[str, ...] = (
    "YYYY",
    "YY",
    "MM",
    "M",
    "DD",
    "D",
    "hh",
    "h",
    "mm",
    "m",
    "ss",
    "s",
)

# Time of day both ends are moved to before counting whole days.
# Away from midnight so DST shifts cannot move an instant to another date.
DAY_ANCHOR_TIME: str = "08:00:00"


__all__ = [
    "MS_PER_SECOND",
    "MS_PER_MINUTE",
    "MS_PER_HOUR",
    "MS_PER_DAY",
    "DAYS_IN_MONTH",
    "DEFAULT_FORMAT",
    "FORMAT_TOKENS",
    "DAY_ANCHOR_TIME",
]
