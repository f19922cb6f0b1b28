"""
Component extraction and whole-unit differences by field code.

``extract_component(value, "M")`` reads a single field in its natural unit.
``diff_components(a, b, "M")`` counts whole units elapsed from ``b`` to
``a``, truncating toward zero, so ``diff(a, b, f) == -diff(b, a, f)``.

Month and year differences are calendar differences: a month is complete
once the later value's day-of-month and time-of-day reach the earlier
value's. Jan 31 to Feb 28 is zero months; Jan 31 to Mar 1 is one. Every
other field divides the exact elapsed duration by the unit length.

Examples:
    >>> from datetime import datetime
    >>> extract_component(datetime(2018, 8, 15, 14, 35, 48, 456000), "ms")
    456
    >>> diff_components(datetime(2020, 3, 1), datetime(2020, 1, 31), "M")
    1
    >>> diff_components(datetime(2020, 1, 31), datetime(2020, 3, 1), "M")
    -1

Tags:
    temporal, components, difference, calendar-arithmetic, date-spine
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Union

from .errors import UnsupportedFieldError, ValidationError
from .fields import FieldCode, require_field

Temporal = Union[date, time, datetime]

_MICROS_PER_UNIT: dict[FieldCode, int] = {
    FieldCode.DAY: 86_400_000_000,
    FieldCode.HOUR: 3_600_000_000,
    FieldCode.MINUTE: 60_000_000,
    FieldCode.SECOND: 1_000_000,
    FieldCode.MILLISECOND: 1_000,
    FieldCode.MICROSECOND: 1,
}


def extract_component(value: Temporal, field: FieldCode | str) -> int:
    """
    Current value of ``field`` on ``value`` in its natural unit.

    ``ms``/``mc``/``ns`` are the millisecond/microsecond/nanosecond of the
    second.

    Raises:
        UnknownFieldCodeError: ``field`` is not a known code.
        UnsupportedFieldError: The value has no such field.
    """
    field = FieldCode.from_code(field)
    require_field(value, field)
    if field is FieldCode.YEAR:
        return value.year
    if field is FieldCode.MONTH:
        return value.month
    if field is FieldCode.DAY:
        return value.day
    if field is FieldCode.HOUR:
        return value.hour
    if field is FieldCode.MINUTE:
        return value.minute
    if field is FieldCode.SECOND:
        return value.second
    if field is FieldCode.MILLISECOND:
        return value.microsecond // 1000
    if field is FieldCode.MICROSECOND:
        return value.microsecond
    return value.microsecond * 1000


def diff_components(minuend: Temporal, subtrahend: Temporal, field: FieldCode | str) -> int:
    """
    Signed whole ``field`` units from ``subtrahend`` to ``minuend``.

    Positive when ``minuend`` is later. Both values must be the same kind
    (date, time or datetime); aware datetimes are compared in UTC.

    Raises:
        UnknownFieldCodeError: ``field`` is not a known code.
        UnsupportedFieldError: The values have no such field (hours between dates).
        ValidationError: The values are of different kinds, or one datetime is
            naive and the other aware.
    """
    field = FieldCode.from_code(field)
    minuend, subtrahend = _normalize_pair(minuend, subtrahend)
    require_field(minuend, field)

    if field is FieldCode.YEAR:
        return _truncate(_months_between(minuend, subtrahend), 12)
    if field is FieldCode.MONTH:
        return _months_between(minuend, subtrahend)

    elapsed = _elapsed_micros(minuend, subtrahend)
    if field is FieldCode.NANOSECOND:
        return elapsed * 1000
    return _truncate(elapsed, _MICROS_PER_UNIT[field])


def _normalize_pair(a: Temporal, b: Temporal) -> tuple[Temporal, Temporal]:
    if _kind(a) != _kind(b):
        raise ValidationError(
            f"Cannot diff {type(a).__name__} and {type(b).__name__}",
            value=(a, b),
        )
    if isinstance(a, datetime):
        if (a.utcoffset() is None) != (b.utcoffset() is None):
            raise ValidationError(
                "Cannot diff a naive datetime against an aware one",
                value=(a, b),
            )
        if a.utcoffset() is not None:
            a = a.astimezone(timezone.utc).replace(tzinfo=None)
            b = b.astimezone(timezone.utc).replace(tzinfo=None)
    elif isinstance(a, time):
        # zone offsets on times are dropped
        a = a.replace(tzinfo=None)
        b = b.replace(tzinfo=None)
    return a, b


def _kind(value: Temporal) -> type:
    for kind in (datetime, date, time):
        if isinstance(value, kind):
            return kind
    raise UnsupportedFieldError(
        f"Expected date, time or datetime, got {type(value).__name__}",
        value=value,
    )


def _months_between(minuend: date, subtrahend: date) -> int:
    months = (minuend.year - subtrahend.year) * 12 + (minuend.month - subtrahend.month)
    later_rest = _rest_of_month(minuend)
    earlier_rest = _rest_of_month(subtrahend)
    if months > 0 and later_rest < earlier_rest:
        months -= 1
    elif months < 0 and later_rest > earlier_rest:
        months += 1
    return months


def _rest_of_month(value: date) -> tuple:
    if isinstance(value, datetime):
        return (value.day, value.time())
    return (value.day, time())


def _elapsed_micros(minuend: Temporal, subtrahend: Temporal) -> int:
    if isinstance(minuend, time):
        return _micro_of_day(minuend) - _micro_of_day(subtrahend)
    delta = minuend - subtrahend
    return (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds


def _micro_of_day(value: time) -> int:
    return (value.hour * 3600 + value.minute * 60 + value.second) * 1_000_000 + value.microsecond


def _truncate(amount: int, unit: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(amount) // unit
    return quotient if amount >= 0 else -quotient


__all__ = [
    "extract_component",
    "diff_components",
]
