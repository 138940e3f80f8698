"""Pattern formatting for TimeValue.

Functions:
    build_component_map: Derive the ComponentMap of an instant.
    format_pattern: Substitute tokens of a pattern from a ComponentMap.

Tokens:
    YYYY - 4-digit year          YY - last two digits of the year
    MM   - month, zero-padded    M  - month (1-12)
    DD   - day, zero-padded      D  - day (1-31)
    hh   - hour, zero-padded     h  - hour (0-23)
    mm   - minute, zero-padded   m  - minute (0-59)
    ss   - second, zero-padded   s  - second (0-59)

Examples:
    >>> from timevalue import TimeValue
    >>> TimeValue("2018-10-01 09:05:00").format("YYYY/M/D h:mm")
    '2018/10/1 9:05'
"""

from __future__ import annotations

from timevalue.format.components import ComponentMap, build_component_map
from timevalue.format.pattern import format_pattern

__all__: list[str] = [
    "ComponentMap",
    "build_component_map",
    "format_pattern",
]
