"""Component map of one instant, the input to pattern formatting."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from timevalue._internal import clock

# Pattern token -> ComponentMap attribute
_TOKEN_FIELDS: dict[str, str] = {
    "YYYY": "year",
    "YY": "short_year",
    "M": "month",
    "MM": "padded_month",
    "D": "day",
    "DD": "padded_day",
    "h": "hour",
    "hh": "padded_hour",
    "m": "minute",
    "mm": "padded_minute",
    "s": "second",
    "ss": "padded_second",
    "S": "millisecond",
    "SS": "padded_millisecond",
    "SSS": "long_millisecond",
}


@dataclass(frozen=True)
class ComponentMap:
    """String forms of the local calendar fields of one instant.

    Values are accessible by attribute or by pattern token:

        >>> from timevalue import TimeValue
        >>> components = TimeValue("2018-10-01 09:05:00").map()
        >>> components.padded_hour, components["hh"]
        ('09', '09')

    The two padded millisecond forms keep their historical output:
    ``padded_millisecond`` (SS) pads single digits only, so 5 -> "05" but
    50 -> "50"; ``long_millisecond`` (SSS) prefixes "0" below 100, so
    5 -> "005" and 50 -> "050".
    """

    year: str
    short_year: str
    month: str
    padded_month: str
    day: str
    padded_day: str
    hour: str
    padded_hour: str
    minute: str
    padded_minute: str
    second: str
    padded_second: str
    millisecond: str
    padded_millisecond: str
    long_millisecond: str

    def __getitem__(self, token: str) -> str:
        try:
            return getattr(self, _TOKEN_FIELDS[token])
        except KeyError:
            raise KeyError(token) from None

    def __contains__(self, token: object) -> bool:
        return token in _TOKEN_FIELDS

    @staticmethod
    def tokens() -> tuple[str, ...]:
        """All pattern tokens, in declaration order."""
        return tuple(_TOKEN_FIELDS)

    def as_dict(self) -> dict[str, str]:
        """Return a token -> string mapping."""
        values = asdict(self)
        return {token: values[name] for token, name in _TOKEN_FIELDS.items()}


def _pad2(value: int) -> str:
    return f"0{value}" if value < 10 else str(value)


def build_component_map(millis: int) -> ComponentMap:
    """Derive the ComponentMap of an instant in local time.

    Args:
        millis: Epoch milliseconds of a representable instant.

    Returns:
        The ComponentMap.

    Raises:
        CalendarRangeError: If the instant cannot be localized.
    """
    local = clock.local_fields(millis)
    padded_millisecond = _pad2(local.millisecond)
    if local.millisecond < 100:
        long_millisecond = f"0{padded_millisecond}"
    else:
        long_millisecond = str(local.millisecond)

    return ComponentMap(
        year=str(local.year),
        short_year=str(local.year)[-2:],
        month=str(local.month),
        padded_month=_pad2(local.month),
        day=str(local.day),
        padded_day=_pad2(local.day),
        hour=str(local.hour),
        padded_hour=_pad2(local.hour),
        minute=str(local.minute),
        padded_minute=_pad2(local.minute),
        second=str(local.second),
        padded_second=_pad2(local.second),
        millisecond=str(local.millisecond),
        padded_millisecond=padded_millisecond,
        long_millisecond=long_millisecond,
    )


__all__ = [
    "ComponentMap",
    "build_component_map",
]
