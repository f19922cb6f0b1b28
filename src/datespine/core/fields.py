"""
Field-code table: symbolic codes for calendar and clock components.

Modify patterns (``"Y+1:ms=7"``) and component lookups (``"M"``) name fields
with short codes. This module is the single static table behind both:
each ``FieldCode`` member knows its code, its unit, its valid range and
whether it lives on the date or the time side of a value.

Lookup is a longest-match scan over a fixed table ordered by code length.
Two-letter codes (``ms``, ``mc``, ``ns``) must win over their single-letter
prefixes (``m``, ``s``); ``match_field_code("ms=5")`` is millisecond, never
minute followed by ``"s=5"``.

Examples:
    >>> FieldCode.from_code("ms")
    <FieldCode.MILLISECOND: 'ms'>
    >>> match_field_code("mc+10")
    (<FieldCode.MICROSECOND: 'mc'>, 2)

Tags:
    temporal, field-code, lookup-table, date-spine
"""

from __future__ import annotations

from datetime import date, datetime, time
from enum import Enum

from .errors import UnknownFieldCodeError, UnsupportedFieldError


class FieldCode(str, Enum):
    """Symbolic calendar/clock field codes."""

    YEAR = "Y"
    MONTH = "M"
    DAY = "D"
    HOUR = "h"
    MINUTE = "m"
    SECOND = "s"
    MILLISECOND = "ms"
    MICROSECOND = "mc"
    NANOSECOND = "ns"

    @property
    def code(self) -> str:
        return self.value

    @property
    def unit(self) -> str:
        return _UNITS[self]

    @property
    def is_date_field(self) -> bool:
        return self in (FieldCode.YEAR, FieldCode.MONTH, FieldCode.DAY)

    @property
    def is_time_field(self) -> bool:
        return not self.is_date_field

    @property
    def valid_range(self) -> tuple[int, int]:
        """Inclusive (min, max) of the field. DAY's max depends on the month."""
        return _RANGES[self]

    @classmethod
    def from_code(cls, code: str) -> "FieldCode":
        """Resolve an exact code string (``"ms"``), raising on unknown codes."""
        if isinstance(code, FieldCode):
            return code
        field = _BY_CODE.get(code)
        if field is None:
            raise UnknownFieldCodeError(
                f"Unknown field code {code!r}; expected one of {', '.join(_BY_CODE)}",
                field=code,
            )
        return field


_UNITS: dict[FieldCode, str] = {
    FieldCode.YEAR: "year",
    FieldCode.MONTH: "month",
    FieldCode.DAY: "day",
    FieldCode.HOUR: "hour",
    FieldCode.MINUTE: "minute",
    FieldCode.SECOND: "second",
    FieldCode.MILLISECOND: "millisecond",
    FieldCode.MICROSECOND: "microsecond",
    FieldCode.NANOSECOND: "nanosecond",
}

_RANGES: dict[FieldCode, tuple[int, int]] = {
    FieldCode.YEAR: (1, 9999),
    FieldCode.MONTH: (1, 12),
    FieldCode.DAY: (1, 31),
    FieldCode.HOUR: (0, 23),
    FieldCode.MINUTE: (0, 59),
    FieldCode.SECOND: (0, 59),
    FieldCode.MILLISECOND: (0, 999),
    FieldCode.MICROSECOND: (0, 999_999),
    FieldCode.NANOSECOND: (0, 999_999_999),
}

_BY_CODE: dict[str, FieldCode] = {field.value: field for field in FieldCode}

# Longest codes first so that "ms" is tried before "m".
_MATCH_ORDER: tuple[FieldCode, ...] = tuple(
    sorted(FieldCode, key=lambda field: len(field.value), reverse=True)
)

DATE_FIELDS = frozenset(field for field in FieldCode if field.is_date_field)
TIME_FIELDS = frozenset(field for field in FieldCode if field.is_time_field)


def require_field(value: date | time, field: FieldCode) -> None:
    """Raise UnsupportedFieldError unless ``field`` exists on ``value``.

    ``datetime`` carries every field, ``date`` only Y/M/D and ``time`` only
    the clock fields.
    """
    if isinstance(value, datetime):
        return
    if isinstance(value, date):
        supported = DATE_FIELDS
    elif isinstance(value, time):
        supported = TIME_FIELDS
    else:
        supported = frozenset()
    if field not in supported:
        raise UnsupportedFieldError(
            f"Field {field.code!r} ({field.unit}) is not supported on "
            f"{type(value).__name__} value {value!r}",
            field=field.code,
            value=value,
        )


def match_field_code(text: str, start: int = 0) -> tuple[FieldCode, int] | None:
    """
    Match the longest field code at ``text[start:]``.

    Returns:
        ``(field, length)`` of the matched code, or None if no code matches.
    """
    for field in _MATCH_ORDER:
        if text.startswith(field.value, start):
            return field, len(field.value)
    return None


__all__ = [
    "FieldCode",
    "DATE_FIELDS",
    "TIME_FIELDS",
    "match_field_code",
    "require_field",
]
