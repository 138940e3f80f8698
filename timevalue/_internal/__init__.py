"""Internal utilities for timevalue.

This module contains private implementation details:
    - Constants (unit sizes, month table, format defaults)
    - Strict calendar helpers
    - The platform clock/calendar capability
    - Lenient integer coercion
    - The @hybridmethod descriptor

Note: This module is not part of the public API.
"""

from __future__ import annotations

from timevalue._internal.coerce import parse_int, to_int
from timevalue._internal.decorators import hybridmethod

__all__: list[str] = [
    "hybridmethod",
    "parse_int",
    "to_int",
]
