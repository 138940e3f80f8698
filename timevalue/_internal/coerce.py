"""Lenient integer coercion.

Every numeric argument of the public API goes through these helpers, so a
value that is not a number degrades to a default instead of raising.

This module is not part of the public API.
"""

from __future__ import annotations

import math
import numbers
import re

# Optional leading whitespace and sign, then the longest run of ASCII digits.
# Anything after the digits is ignored: "12abc" -> 12, "1e3" -> 1.
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int(value: object) -> int | None:
    """Read a base-10 integer from a loosely typed value.

    Args:
        value: An int, a real number, or a string starting with an integer.

    Returns:
        The integer, or None when the value holds no integer. Real numbers
        are truncated toward zero; booleans, NaN and infinities give None.

    Examples:
        >>> parse_int("08")
        8
        >>> parse_int(" -12 apples")
        -12
        >>> parse_int(2.9)
        2
        >>> parse_int("abc") is None
        True
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    return None


def to_int(value: object, default: int = 0) -> int:
    """Like parse_int, but fall back to ``default`` instead of None."""
    result = parse_int(value)
    return default if result is None else result


__all__ = [
    "parse_int",
    "to_int",
]
