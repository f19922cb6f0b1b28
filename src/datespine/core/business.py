"""
Business-day adjustment: skip weekend days crossed by a modification.

After a modify pattern moves a timestamp, the business-day walker re-walks
the path from the original to the modified value one calendar day at a
time. Every weekend day it passes pushes the result one more day in the
direction of travel, so a shift across two weekends gains four days, not
two, and a result landing on Saturday rolls to Monday (forward) or Friday
(backward).

Weekend configuration is explicit: callers pass a ``WeekendSet`` (or day
names through ``parse_weekends``); there is no process-wide default beyond
the immutable ``DEFAULT_WEEKENDS``.

Calculation Contracts:
- adjust_to_business_day: Path walk, one push per weekend day crossed
- shift_off_weekend: Landing-day rule, only the final day is checked
- is_business_day: Weekday not in the weekend set
- parse_weekends / validate_weekends: Build and check a WeekendSet
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, timedelta
from enum import IntEnum
from typing import TypeVar

from .errors import InvalidWeekendSetError
from .logging import get_logger

logger = get_logger(__name__)

D = TypeVar("D", date, datetime)


# =============================================================================
# DATA STRUCTURES
# =============================================================================


class Weekday(IntEnum):
    """Day of week, numbered like ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def of(cls, value: date) -> "Weekday":
        return cls(value.weekday())


WeekendSet = frozenset[Weekday]

DEFAULT_WEEKENDS: WeekendSet = frozenset({Weekday.SATURDAY, Weekday.SUNDAY})


def parse_weekends(names: Iterable[str | Weekday] | None = None) -> WeekendSet:
    """
    Build a WeekendSet from day names such as ``"SUNDAY"`` (case-insensitive).

    No names (None or empty) gives DEFAULT_WEEKENDS.

    Raises:
        InvalidWeekendSetError: A name is not a day of the week, or the
            set covers all seven days.
    """
    if names is None:
        return DEFAULT_WEEKENDS
    if isinstance(names, (str, Weekday)):
        names = [names]
    names = list(names)
    if not names:
        return DEFAULT_WEEKENDS

    days = set()
    for name in names:
        if isinstance(name, Weekday):
            days.add(name)
            continue
        key = str(name).strip().upper()
        try:
            days.add(Weekday[key])
        except KeyError:
            raise InvalidWeekendSetError(
                f"Unknown day of week {name!r}; expected one of "
                f"{', '.join(day.name for day in Weekday)}",
                field="weekends",
                value=name,
            ) from None
    return validate_weekends(frozenset(days))


def validate_weekends(weekends: Iterable[Weekday]) -> WeekendSet:
    """
    Return ``weekends`` as a WeekendSet, rejecting a set with no business day.

    A walk over a calendar where every day is a weekend never ends, so the
    seven-day set is refused up front.
    """
    weekend_set = frozenset(Weekday(day) for day in weekends)
    if len(weekend_set) == len(Weekday):
        raise InvalidWeekendSetError(
            "Weekend set covers every day of the week; no business day is reachable",
            field="weekends",
            value=sorted(day.name for day in weekend_set),
        )
    return weekend_set


# =============================================================================
# CORE CALCULATIONS
# =============================================================================


def is_business_day(value: date, weekends: WeekendSet = DEFAULT_WEEKENDS) -> bool:
    """Check if the value's weekday is outside the weekend set."""
    return Weekday.of(value) not in weekends


def adjust_to_business_day(
    original: D,
    modified: D,
    weekends: Iterable[Weekday] = DEFAULT_WEEKENDS,
) -> D:
    """
    Push ``modified`` past every weekend day on the path from ``original``.

    Walks a cursor one day at a time from ``original`` toward ``modified``
    (inclusive, dates only). Each cursor day in ``weekends`` moves
    ``modified`` one more day in the walk direction, which also extends the
    walk. The time of day of ``modified`` is preserved.

    Args:
        original: Value before modification
        modified: Value after modification
        weekends: Weekend days (default Saturday and Sunday)

    Returns:
        ``modified`` shifted by the number of weekend days crossed

    Raises:
        InvalidWeekendSetError: ``weekends`` covers all seven days.
    """
    weekends = validate_weekends(weekends)
    backwards = modified < original
    step = timedelta(days=-1 if backwards else 1)

    cursor = original
    result = modified
    while _within(_day(cursor), _day(result), backwards):
        if Weekday.of(cursor) in weekends:
            result = result + step
            logger.debug(
                "weekend_day_crossed",
                cursor=str(_day(cursor)),
                result=str(result),
                direction=step.days,
            )
        cursor = cursor + step
    return result


def shift_off_weekend(
    original: D,
    modified: D,
    weekends: Iterable[Weekday] = DEFAULT_WEEKENDS,
) -> D:
    """
    Move ``modified`` off a weekend day in the direction of modification.

    Only the landing day is checked: with the default weekend a Saturday
    result moves +2 days (or -1 when the modification went backwards) and a
    Sunday result +1 (or -2).
    """
    weekends = validate_weekends(weekends)
    step = timedelta(days=1 if modified >= original else -1)
    result = modified
    while Weekday.of(result) in weekends:
        result = result + step
    return result


def _day(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


def _within(cursor: date, end: date, backwards: bool) -> bool:
    return cursor >= end if backwards else cursor <= end


__all__ = [
    "Weekday",
    "WeekendSet",
    "DEFAULT_WEEKENDS",
    "parse_weekends",
    "validate_weekends",
    "is_business_day",
    "adjust_to_business_day",
    "shift_off_weekend",
]
