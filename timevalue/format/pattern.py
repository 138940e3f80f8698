"""Token substitution for format patterns."""

from __future__ import annotations

from timevalue._internal.constants import DEFAULT_FORMAT, FORMAT_TOKENS
from timevalue.format.components import ComponentMap


def format_pattern(components: ComponentMap, pattern: object = None) -> str:
    """Replace every token of ``pattern`` with its value from ``components``.

    Tokens are replaced globally, one token at a time, longest first
    (YYYY, YY, MM, M, DD, D, hh, h, mm, m, ss, s). Values are digits only,
    so an earlier substitution is never picked up by a later token. Letters
    in the literal text of the pattern are substituted too: "Month" loses
    its "M". Millisecond tokens are not substituted.

    Args:
        components: The ComponentMap of the instant.
        pattern: The pattern; anything other than a str means DEFAULT_FORMAT.

    Returns:
        The formatted string.

    Examples:
        >>> from timevalue import TimeValue
        >>> format_pattern(TimeValue("2018-10-01 12:30:00").map())
        '2018-10-01 12:30:00'
        >>> format_pattern(TimeValue("2018-10-01").map(), "YY/M/D")
        '18/10/1'
    """
    if not isinstance(pattern, str):
        pattern = DEFAULT_FORMAT

    result = pattern
    for token in FORMAT_TOKENS:
        result = result.replace(token, components[token])
    return result


__all__ = ["format_pattern"]
