"""
Time zone resolution and UTC <-> local wall-clock conversion.

Zone ids are either IANA region ids (``"Europe/London"``), resolved through
``zoneinfo`` and therefore DST-aware, or fixed offsets::

    Z  UTC  GMT  +h  +hh  +hh:mm  -hh:mm  +hhmm  -hhmm
    +hh:mm:ss  -hh:mm:ss  +hhmmss  -hhmmss
    GMT+2  UTC+03:00  UT-0130      (UTC alias followed by an offset)

Offsets are limited to -18:00..+18:00 inclusive.

Values passed around by the toolkit are naive datetimes in UTC; these
helpers turn them into local wall-clock time for a zone and back.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import InvalidTimeZoneError

_UTC_ALIASES = frozenset({"Z", "UTC", "GMT", "UT"})

_OFFSET = re.compile(
    r"(?P<sign>[+-])(?P<hours>\d{1,2})"
    r"(?::?(?P<minutes>\d{2})(?::?(?P<seconds>\d{2}))?)?"
)

_PREFIXED_OFFSET = re.compile(r"(?:UTC|GMT|UT)(?P<offset>[+-].+)")

MAX_OFFSET = timedelta(hours=18)


def resolve_zone(zone_id: str) -> tzinfo:
    """
    Resolve a zone id or offset string to a tzinfo.

    Raises:
        InvalidTimeZoneError: Unknown region, malformed or out-of-range offset.
    """
    if not isinstance(zone_id, str) or not zone_id.strip():
        raise InvalidTimeZoneError(f"Invalid time zone id {zone_id!r}", zone_id=str(zone_id))
    return _resolve(zone_id.strip())


@lru_cache(maxsize=128)
def _resolve(zone_id: str) -> tzinfo:
    if zone_id.upper() in _UTC_ALIASES:
        return timezone.utc
    if zone_id[0] in "+-":
        return parse_offset(zone_id)
    prefixed = _PREFIXED_OFFSET.fullmatch(zone_id)
    if prefixed is not None:
        # "GMT+2", "UTC+03:00": a UTC alias followed by an offset
        return parse_offset(prefixed["offset"], zone_id)

    try:
        return ZoneInfo(zone_id)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidTimeZoneError(
            f"Unknown time zone id {zone_id!r}",
            zone_id=zone_id,
            cause=exc,
        ) from exc


def parse_offset(text: str, zone_id: str | None = None) -> timezone:
    """Parse ``+hh:mm`` style offsets into a fixed-offset timezone.

    ``zone_id`` is the full id the offset came from (``"GMT+2"``), used in errors.
    """
    zone_id = zone_id or text
    match = _OFFSET.fullmatch(text)
    if match is None:
        raise InvalidTimeZoneError(f"Invalid zone offset {zone_id!r}", zone_id=zone_id)

    hours = int(match["hours"])
    minutes = int(match["minutes"] or 0)
    seconds = int(match["seconds"] or 0)
    if minutes > 59 or seconds > 59:
        raise InvalidTimeZoneError(f"Invalid zone offset {zone_id!r}", zone_id=zone_id)

    offset = timedelta(hours=hours, minutes=minutes, seconds=seconds)
    if offset > MAX_OFFSET:
        raise InvalidTimeZoneError(
            f"Zone offset {zone_id!r} is outside -18:00..+18:00",
            zone_id=zone_id,
        )
    if match["sign"] == "-":
        offset = -offset
    return timezone(offset)


def utc_to_zone(value: datetime, zone: tzinfo) -> datetime:
    """Naive UTC datetime -> naive wall-clock datetime in ``zone``."""
    return value.replace(tzinfo=timezone.utc).astimezone(zone).replace(tzinfo=None)


def zone_to_utc(value: datetime, zone: tzinfo) -> datetime:
    """
    Naive wall-clock datetime in ``zone`` -> naive UTC datetime.

    Ambiguous wall times (DST fall-back) resolve to the earlier instant.
    """
    return value.replace(tzinfo=zone, fold=0).astimezone(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    """Drop the zone from an aware datetime after converting it to UTC."""
    if value.utcoffset() is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


__all__ = [
    "resolve_zone",
    "parse_offset",
    "utc_to_zone",
    "zone_to_utc",
    "to_naive_utc",
]
