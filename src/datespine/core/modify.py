"""
Modify patterns: parse ``"Y+1:M-2:D=3"`` into field operations and apply them.

A modify pattern is a colon-separated list of segments. Each segment names a
field code, an operator and an unsigned amount::

    pattern  = segment (":" segment)*
    segment  = field operator amount
    field    = Y | M | D | h | m | s | ms | mc | ns   (longest match first)
    operator = "+" | "-" | "="
    amount   = digit+

Segments apply left to right, each one seeing the result of the previous, so
order matters: ``"D+1:M=2"`` and ``"M=2:D+1"`` are different edits.

Manifesto:
    Test scripts need relative timestamps ("yesterday at 09:30", "first of
    next month") without writing date arithmetic inline. A compact pattern
    keeps the script readable and the arithmetic in one tested place.

    - **All-or-nothing:** The whole pattern parses before anything applies
    - **Immutable:** Every operation returns a new value
    - **Calendar-aware:** Month/year arithmetic clamps the day of month
    - **Carrying:** Out-of-range amounts roll into the next larger field

Architecture:
    ::

        "Y+1:M-2:D=3:h+4:m-5:s=6:ms=7"
                    │
                    ▼  parse_modify_pattern()
        (ModifyOp(Y, +, 1), ModifyOp(M, -, 2), ModifyOp(D, =, 3), ...)
                    │
                    ▼  apply_modifications(value, ops)
        2017-05-30T14:00:23.439  ──►  2018-03-03T17:55:06.007

Examples:
    >>> from datetime import datetime
    >>> modify_temporal(datetime(2017, 5, 30, 14, 0, 23, 439000),
    ...                 "Y+1:M-2:D=3:h+4:m-5:s=6:ms=7")
    datetime.datetime(2018, 3, 3, 17, 55, 6, 7000)

    >>> parse_modify_pattern("ms=5")
    (ModifyOp(field=<FieldCode.MILLISECOND: 'ms'>, operator=<ModifyOperator.SET: '='>, amount=5),)

Guardrails:
    ❌ DON'T: Pass signed amounts ("D+-1")
    ✅ DO: Pick the operator for direction ("D-1")

    ❌ DON'T: Expect nanosecond precision from ``ns``
    ✅ DO: Treat ``ns`` amounts as truncated to whole microseconds

Tags:
    temporal, modify-pattern, parser, calendar-arithmetic, date-spine

Doc-Types:
    - API Reference
    - Modify Pattern Guide
"""

from __future__ import annotations

import calendar
import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import Enum
from functools import lru_cache
from typing import TypeVar

from .errors import MalformedPatternError, TemporalRangeError, UnknownFieldCodeError
from .fields import FieldCode, match_field_code, require_field
from .logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T", date, time, datetime)

SEGMENT_SEPARATOR = ":"

# Amounts must fit a signed 64-bit integer.
MAX_AMOUNT = 2**63 - 1

_DIGITS = re.compile(r"[0-9]+")
_LEADING_LETTERS = re.compile(r"[A-Za-z]+")

_MICROS_PER_DAY = 86_400_000_000

# Microseconds in one unit of each clock field. NANOSECOND is handled apart.
_UNIT_MICROS: dict[FieldCode, int] = {
    FieldCode.HOUR: 3_600_000_000,
    FieldCode.MINUTE: 60_000_000,
    FieldCode.SECOND: 1_000_000,
    FieldCode.MILLISECOND: 1_000,
    FieldCode.MICROSECOND: 1,
}


class ModifyOperator(str, Enum):
    """Operator of a modify segment."""

    ADD = "+"
    SUBTRACT = "-"
    SET = "="


@dataclass(frozen=True, slots=True)
class ModifyOp:
    """
    One parsed segment: ``field``, ``operator`` and a non-negative ``amount``.

    Direction comes from the operator, never from the sign of the amount.
    """

    field: FieldCode
    operator: ModifyOperator
    amount: int

    def __post_init__(self):
        if self.amount < 0:
            raise ValueError(f"ModifyOp amount must be non-negative, got {self.amount}")

    @property
    def signed_amount(self) -> int:
        """Amount with the operator's sign (SET is treated as positive)."""
        return -self.amount if self.operator is ModifyOperator.SUBTRACT else self.amount

    def __str__(self) -> str:
        return f"{self.field.code}{self.operator.value}{self.amount}"


# =============================================================================
# PARSER
# =============================================================================


def parse_modify_pattern(pattern: str) -> tuple[ModifyOp, ...]:
    """
    Parse a modify pattern into an ordered tuple of ModifyOp.

    A blank pattern means "no modification" and parses to ``()``.

    Raises:
        MalformedPatternError: A segment is not ``<field><operator><digits>``
            or its amount overflows.
        UnknownFieldCodeError: A segment names an unknown field.
    """
    if not isinstance(pattern, str):
        raise MalformedPatternError(
            f"Modify pattern must be a string, got {type(pattern).__name__}"
        )
    if not pattern.strip():
        return ()
    return _parse_pattern(pattern)


@lru_cache(maxsize=512)
def _parse_pattern(pattern: str) -> tuple[ModifyOp, ...]:
    ops = []
    for segment in pattern.split(SEGMENT_SEPARATOR):
        try:
            ops.append(_parse_segment(segment.strip()))
        except (MalformedPatternError, UnknownFieldCodeError) as exc:
            raise exc.with_context(pattern=pattern)
    return tuple(ops)


def _parse_segment(segment: str) -> ModifyOp:
    if not segment:
        raise MalformedPatternError("Empty segment in modify pattern", segment=segment)

    matched = match_field_code(segment)
    if matched is None:
        raise _bad_field(segment)
    field, length = matched

    if length >= len(segment):
        raise MalformedPatternError(
            f"Segment {segment!r} has no operator; expected one of + - =",
            segment=segment,
            field=field.code,
        )

    symbol = segment[length]
    if symbol.isalpha():
        # "mx+1" matched "m" but the field is really "mx"
        raise _bad_field(segment)
    try:
        operator = ModifyOperator(symbol)
    except ValueError:
        raise MalformedPatternError(
            f"Segment {segment!r} has invalid operator {symbol!r}; expected one of + - =",
            segment=segment,
            field=field.code,
        ) from None

    digits = segment[length + 1 :]
    if not _DIGITS.fullmatch(digits):
        raise MalformedPatternError(
            f"Segment {segment!r} amount {digits!r} is not an unsigned integer",
            segment=segment,
            field=field.code,
        )
    amount = int(digits)
    if amount > MAX_AMOUNT:
        raise MalformedPatternError(
            f"Segment {segment!r} amount overflows ({digits} > {MAX_AMOUNT})",
            segment=segment,
            field=field.code,
        )
    return ModifyOp(field, operator, amount)


def _bad_field(segment: str) -> Exception:
    letters = _LEADING_LETTERS.match(segment)
    if letters is None:
        return MalformedPatternError(
            f"Segment {segment!r} does not start with a field code",
            segment=segment,
        )
    return UnknownFieldCodeError(
        f"Unknown field code {letters.group()!r} in segment {segment!r}",
        segment=segment,
        field=letters.group(),
    )


# =============================================================================
# APPLIER
# =============================================================================


def apply_modifications(value: T, ops: Iterable[ModifyOp]) -> T:
    """
    Fold ``ops`` over ``value`` left to right and return the new value.

    Raises:
        UnsupportedFieldError: An op names a field the value does not have.
        TemporalRangeError: The result leaves years 1..9999.
    """
    for op in ops:
        value = apply_modification(value, op)
    return value


def apply_modification(value: T, op: ModifyOp) -> T:
    """Apply a single ModifyOp."""
    require_field(value, op.field)
    try:
        if op.operator is ModifyOperator.SET:
            return _set_field(value, op.field, op.amount)
        return _add_to_field(value, op.field, op.signed_amount)
    except (OverflowError, ValueError) as exc:
        raise TemporalRangeError(
            f"Applying {op} to {value!r} leaves the supported date range",
            field=op.field.code,
            value=value,
            cause=exc,
        ) from exc


def modify_temporal(value: T, pattern: str) -> T:
    """Parse ``pattern`` and apply it to ``value``."""
    ops = parse_modify_pattern(pattern)
    result = apply_modifications(value, ops)
    if ops:
        logger.debug("modify_applied", pattern=pattern, ops=len(ops), before=str(value), after=str(result))
    return result


def _add_to_field(value: T, field: FieldCode, amount: int) -> T:
    if field is FieldCode.YEAR:
        return add_months(value, amount * 12)
    if field is FieldCode.MONTH:
        return add_months(value, amount)
    if field is FieldCode.DAY:
        return value + timedelta(days=amount)
    return _add_micros(value, _to_micros(field, amount))


def _set_field(value: T, field: FieldCode, amount: int) -> T:
    if field is FieldCode.YEAR:
        low, high = field.valid_range
        if not low <= amount <= high:
            raise ValueError(f"year {amount} is out of range {low}..{high}")
        return _replace_clamped(value, amount, value.month)
    if field is FieldCode.MONTH:
        # January has 31 days, so resetting the month never clamps.
        return add_months(value.replace(month=1), amount - 1)
    if field is FieldCode.DAY:
        # days 29..31 clamp to the month like Y/M do; only amounts past 31 carry
        if 1 <= amount <= field.valid_range[1]:
            return value.replace(day=min(amount, calendar.monthrange(value.year, value.month)[1]))
        return value.replace(day=1) + timedelta(days=amount - 1)
    return _add_micros(_zero_clock_field(value, field), _to_micros(field, amount))


def _to_micros(field: FieldCode, amount: int) -> int:
    if field is FieldCode.NANOSECOND:
        # truncate toward zero to the host's microsecond resolution
        return -(-amount // 1000) if amount < 0 else amount // 1000
    return amount * _UNIT_MICROS[field]


def _zero_clock_field(value: T, field: FieldCode) -> T:
    if field is FieldCode.HOUR:
        return value.replace(hour=0)
    if field is FieldCode.MINUTE:
        return value.replace(minute=0)
    if field is FieldCode.SECOND:
        return value.replace(second=0)
    return value.replace(microsecond=0)


def _add_micros(value: T, micros: int) -> T:
    if isinstance(value, datetime):
        return value + timedelta(microseconds=micros)
    # time of day wraps around midnight
    of_day = (
        (value.hour * 3600 + value.minute * 60 + value.second) * 1_000_000
        + value.microsecond
        + micros
    ) % _MICROS_PER_DAY
    seconds, microsecond = divmod(of_day, 1_000_000)
    minutes, second = divmod(seconds, 60)
    hour, minute = divmod(minutes, 60)
    return value.replace(hour=hour, minute=minute, second=second, microsecond=microsecond)


def add_months(value: T, months: int) -> T:
    """
    Add calendar months, clamping the day to the target month's length.

    >>> add_months(date(2020, 1, 31), 1)
    datetime.date(2020, 2, 29)
    """
    total = value.year * 12 + (value.month - 1) + months
    year, month_index = divmod(total, 12)
    return _replace_clamped(value, year, month_index + 1)


def _replace_clamped(value: T, year: int, month: int) -> T:
    if not 1 <= year <= 9999:
        raise OverflowError(f"year {year} is out of range")
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


__all__ = [
    "ModifyOperator",
    "ModifyOp",
    "MAX_AMOUNT",
    "parse_modify_pattern",
    "apply_modifications",
    "apply_modification",
    "modify_temporal",
    "add_months",
]
