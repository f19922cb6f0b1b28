"""
DateToolkit: the named date/time functions exposed to scripts.

Each entry point combines the core primitives along three axes:

- **source:** the current time, a string (auto-detected or with a format
  pattern), epoch milliseconds, or an existing date/time value
- **modification:** an optional modify pattern, optionally followed by a
  weekend skip (landing-day rule) or a business-day walk
- **zone:** optional ``_by_zone_id`` variants that move the value to a zone's
  wall clock, modify it there (DST-aware) and convert the result back

All values returned as datetimes are naive UTC. The clock and the defaults
(weekend days, zone) come from the constructor, never from globals, so a
toolkit with a fixed clock is fully deterministic.

Architecture:
    ::

        source ──► to_date_time() ──► modify_temporal() ──┬─► result (UTC)
                                                          │
                             skip_weekends ─► shift_off_weekend()
                             business      ─► adjust_to_business_day()
                                                          │
                             zone_id ─► utc_to_zone() … zone_to_utc()
                                                          │
                                        format_temporal() ─► str

Examples:
    >>> from datetime import datetime
    >>> toolkit = DateToolkit(clock=lambda: datetime(2017, 5, 30, 14, 0))
    >>> toolkit.get_date_time("D+4", skip_weekends=True)
    datetime.datetime(2017, 6, 5, 14, 0)
    >>> toolkit.format_date_time(datetime(2017, 5, 30, 14, 5, 13, 801000), "yyyyMMdd-HH:mm:ss")
    '20170530-14:05:13'

Tags:
    facade, scripting, date-spine, timezone, business-days

Doc-Types:
    - API Reference
    - Scripting Guide
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import date, datetime, time, timezone
from typing import Union

from datespine.core.business import (
    WeekendSet,
    adjust_to_business_day,
    parse_weekends,
    shift_off_weekend,
)
from datespine.core.components import diff_components, extract_component
from datespine.core.errors import ParseError
from datespine.core.fields import FieldCode
from datespine.core.formats import parse_auto
from datespine.core.logging import configure_logging, get_logger
from datespine.core.modify import modify_temporal
from datespine.core.patterns import format_temporal, parse_temporal
from datespine.core.settings import DateSpineSettings
from datespine.core.timestamps import EPOCH, from_epoch_millis, naive_utc_now, to_epoch_millis
from datespine.core.zones import resolve_zone, to_naive_utc, utc_to_zone, zone_to_utc

logger = get_logger(__name__)

Source = Union[int, str, date, time, datetime]

_ISO_ZONE_SUFFIX = re.compile(r"^(?P<body>.+?)(?:\[(?P<zone>[^\]]+)\])?$")


class DateToolkit:
    """
    Date/time functions for scripts, bound to a clock and settings.

    Args:
        settings: Defaults for weekend days and zone (read from the
            environment when omitted)
        clock: Callable returning the current naive UTC datetime
    """

    def __init__(
        self,
        settings: DateSpineSettings | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.settings = settings or DateSpineSettings()
        self._clock = clock or naive_utc_now

    @classmethod
    def from_environment(
        cls,
        settings: DateSpineSettings | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> DateToolkit:
        """Toolkit for a script: read settings, configure logging from them."""
        settings = settings or DateSpineSettings()
        configure_logging(settings)
        return cls(settings=settings, clock=clock)

    # ── Clock ────────────────────────────────────────────────────

    def now(self) -> datetime:
        """Current naive UTC datetime."""
        return self._clock()

    def get_date_time(self, modify_pattern: str = "", skip_weekends: bool = False) -> datetime:
        return self.modify_date_time(self.now(), modify_pattern, skip_weekends)

    def get_date(self, modify_pattern: str = "") -> date:
        return self.get_date_time(modify_pattern).date()

    def get_time(self, modify_pattern: str = "") -> time:
        return self.get_date_time(modify_pattern).time()

    def get_date_time_by_zone_id(
        self,
        modify_pattern: str,
        zone_id: str,
        skip_weekends: bool = False,
    ) -> datetime:
        """Modify the current time on ``zone_id``'s wall clock; return UTC."""
        return self._in_zone(
            self.now(),
            zone_id,
            lambda local: self.modify_date_time(local, modify_pattern, skip_weekends),
        )

    def get_date_by_zone_id(self, modify_pattern: str, zone_id: str) -> date:
        return self.get_date_time_by_zone_id(modify_pattern, zone_id).date()

    def get_time_by_zone_id(self, modify_pattern: str, zone_id: str) -> time:
        return self.get_date_time_by_zone_id(modify_pattern, zone_id).time()

    def get_business_date_time(self, modify_pattern: str, *weekends: str) -> datetime:
        """Current time modified with weekend days crossed skipped."""
        return self.modify_business_date_time(self.now(), modify_pattern, *weekends)

    def get_business_date_time_by_zone_id(
        self, modify_pattern: str, zone_id: str, *weekends: str
    ) -> datetime:
        return self.modify_business_date_time_by_zone_id(
            self.now(), modify_pattern, zone_id, *weekends
        )

    def get_utc_time_nanosecond(self) -> int:
        """Current time as nanoseconds since the epoch."""
        delta = self.now() - EPOCH
        return ((delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds) * 1000

    # ── Conversion ───────────────────────────────────────────────

    def to_date_time(
        self,
        source: Source,
        format_pattern: str | None = None,
        modify_pattern: str = "",
    ) -> datetime:
        """
        Convert ``source`` to a naive UTC datetime, then modify it.

        ``source`` may be epoch milliseconds, a string (parsed with
        ``format_pattern`` or auto-detected by length), a datetime, a date
        (midnight) or a time (on 1970-01-01).

        Raises:
            UnrecognizedFormatError: Auto-detection found no pattern.
            ParseError: The string does not match the pattern.
        """
        return modify_temporal(self._as_datetime(source, format_pattern), modify_pattern)

    def to_date_time_by_zone_id(
        self,
        source: Source,
        modify_pattern: str,
        zone_id: str,
        format_pattern: str | None = None,
    ) -> datetime:
        return self.modify_date_time_by_zone_id(
            self._as_datetime(source, format_pattern), modify_pattern, zone_id
        )

    def to_date(
        self,
        source: Source,
        format_pattern: str | None = None,
        modify_pattern: str = "",
    ) -> date:
        return self.to_date_time(source, format_pattern, modify_pattern).date()

    def to_date_by_zone_id(
        self,
        source: Source,
        modify_pattern: str,
        zone_id: str,
        format_pattern: str | None = None,
    ) -> date:
        return self.to_date_time_by_zone_id(source, modify_pattern, zone_id, format_pattern).date()

    def to_time(
        self,
        source: Source,
        format_pattern: str | None = None,
        modify_pattern: str = "",
    ) -> time:
        return self.to_date_time(source, format_pattern, modify_pattern).time()

    def to_time_by_zone_id(
        self,
        source: Source,
        modify_pattern: str,
        zone_id: str,
        format_pattern: str | None = None,
    ) -> time:
        return self.to_date_time_by_zone_id(source, modify_pattern, zone_id, format_pattern).time()

    def get_milliseconds(self, value: datetime) -> int:
        """Naive UTC datetime -> epoch milliseconds."""
        return to_epoch_millis(to_naive_utc(value))

    def _as_datetime(self, source: Source, format_pattern: str | None = None) -> datetime:
        if isinstance(source, bool):
            raise TypeError("Expected epoch milliseconds, string, date or time, got bool")
        if isinstance(source, int):
            return from_epoch_millis(source)
        if isinstance(source, str):
            if format_pattern is None:
                return parse_auto(source)
            return to_naive_utc(parse_temporal(source, format_pattern).to_datetime())
        if isinstance(source, datetime):
            return to_naive_utc(source)
        if isinstance(source, date):
            return datetime.combine(source, time())
        if isinstance(source, time):
            return datetime.combine(EPOCH.date(), source.replace(tzinfo=None))
        raise TypeError(
            f"Expected epoch milliseconds, string, date, time or datetime, got {type(source).__name__}"
        )

    # ── Modification ─────────────────────────────────────────────

    def modify_date_time(
        self,
        value: datetime,
        modify_pattern: str,
        skip_weekends: bool = False,
    ) -> datetime:
        """
        Apply ``modify_pattern``; with ``skip_weekends`` a result landing on
        a weekend day moves to the nearest business day in the direction of
        the modification.
        """
        modified = modify_temporal(value, modify_pattern)
        if skip_weekends:
            return shift_off_weekend(value, modified, self.settings.weekend_set)
        return modified

    def modify_date(self, value: date, modify_pattern: str) -> date:
        """Modify a date; clock fields carry into the day (``h+24`` is a day)."""
        return self.to_date_time(value, modify_pattern=modify_pattern).date()

    def modify_time(self, value: time, modify_pattern: str) -> time:
        return self.to_date_time(value, modify_pattern=modify_pattern).time()

    def modify_date_time_by_zone_id(
        self, value: datetime, modify_pattern: str, zone_id: str
    ) -> datetime:
        """Modify ``value`` (UTC) on ``zone_id``'s wall clock; return UTC."""
        return self._in_zone(
            value, zone_id, lambda local: modify_temporal(local, modify_pattern)
        )

    def modify_date_by_zone_id(self, value: date, modify_pattern: str, zone_id: str) -> date:
        return self.modify_date_time_by_zone_id(
            self._as_datetime(value), modify_pattern, zone_id
        ).date()

    def modify_time_by_zone_id(self, value: time, modify_pattern: str, zone_id: str) -> time:
        return self.modify_date_time_by_zone_id(
            self._as_datetime(value), modify_pattern, zone_id
        ).time()

    def modify_business_date_time(
        self, value: datetime, modify_pattern: str, *weekends: str
    ) -> datetime:
        """
        Modify ``value`` and push the result past every weekend day crossed.

        ``weekends`` are day names (``"SUNDAY"``); none means the configured
        default.
        """
        return adjust_to_business_day(
            value, modify_temporal(value, modify_pattern), self._weekends(weekends)
        )

    def modify_business_date_time_by_zone_id(
        self, value: datetime, modify_pattern: str, zone_id: str, *weekends: str
    ) -> datetime:
        weekend_set = self._weekends(weekends)
        return self._in_zone(
            value,
            zone_id,
            lambda local: adjust_to_business_day(
                local, modify_temporal(local, modify_pattern), weekend_set
            ),
        )

    def modify_string(self, source: str, format_pattern: str, modify_pattern: str) -> str:
        """Parse ``source``, modify it and render it back with the same pattern."""
        value = parse_temporal(source, format_pattern).to_datetime()
        return format_temporal(modify_temporal(value, modify_pattern), format_pattern)

    def modify_string_by_zone_id(
        self, source: str, format_pattern: str, modify_pattern: str, zone_id: str
    ) -> str:
        """Auto-detect ``source`` (UTC), modify it in ``zone_id`` and render it there."""
        return self.format_date_time_by_zone_id(
            parse_auto(source), format_pattern, modify_pattern, zone_id
        )

    def _weekends(self, names: tuple[str, ...]) -> WeekendSet:
        if not names:
            return self.settings.weekend_set
        return parse_weekends(names)

    def _in_zone(
        self,
        value: datetime,
        zone_id: str,
        modify: Callable[[datetime], datetime],
    ) -> datetime:
        zone = resolve_zone(zone_id)
        local = utc_to_zone(to_naive_utc(value), zone)
        result = zone_to_utc(modify(local), zone)
        logger.debug("zone_modified", zone_id=zone_id, utc=str(value), local=str(local), result=str(result))
        return result

    # ── Formatting ───────────────────────────────────────────────

    def format_date_time(
        self, value: datetime, format_pattern: str, modify_pattern: str = ""
    ) -> str:
        return format_temporal(modify_temporal(value, modify_pattern), format_pattern)

    def format_date(self, value: date, format_pattern: str, modify_pattern: str = "") -> str:
        return self.format_date_time(self._as_datetime(value), format_pattern, modify_pattern)

    def format_time(self, value: time, format_pattern: str, modify_pattern: str = "") -> str:
        return self.format_date_time(self._as_datetime(value), format_pattern, modify_pattern)

    def format_date_time_by_zone_id(
        self,
        value: datetime,
        format_pattern: str,
        modify_pattern: str,
        zone_id: str,
    ) -> str:
        """Modify ``value`` (UTC) in ``zone_id`` and render it on that zone's clock."""
        modified = self.modify_date_time_by_zone_id(value, modify_pattern, zone_id)
        local = modified.replace(tzinfo=timezone.utc).astimezone(resolve_zone(zone_id))
        return format_temporal(local, format_pattern)

    def format_date_by_zone_id(
        self, value: date, format_pattern: str, modify_pattern: str, zone_id: str
    ) -> str:
        return self.format_date_time_by_zone_id(
            self._as_datetime(value), format_pattern, modify_pattern, zone_id
        )

    def format_time_by_zone_id(
        self, value: time, format_pattern: str, modify_pattern: str, zone_id: str
    ) -> str:
        return self.format_date_time_by_zone_id(
            self._as_datetime(value), format_pattern, modify_pattern, zone_id
        )

    def now_formatted(self, format_pattern: str, modify_pattern: str = "") -> str:
        return self.format_date_time(self.now(), format_pattern, modify_pattern)

    def now_formatted_by_zone_id(
        self, format_pattern: str, modify_pattern: str, zone_id: str
    ) -> str:
        return self.format_date_time_by_zone_id(self.now(), format_pattern, modify_pattern, zone_id)

    # ── Merge ────────────────────────────────────────────────────

    def merge_date_time(
        self,
        date_part: date,
        time_part: time | datetime,
        modify_pattern: str = "",
    ) -> datetime:
        """Date of ``date_part`` combined with the time of ``time_part``."""
        day = date_part.date() if isinstance(date_part, datetime) else date_part
        clock = time_part.time() if isinstance(time_part, datetime) else time_part
        return modify_temporal(datetime.combine(day, clock.replace(tzinfo=None)), modify_pattern)

    def merge_date_time_by_zone_id(
        self,
        date_part: date,
        time_part: time | datetime,
        modify_pattern: str,
        zone_id: str,
    ) -> datetime:
        return self.modify_date_time_by_zone_id(
            self.merge_date_time(date_part, time_part), modify_pattern, zone_id
        )

    # ── Components ───────────────────────────────────────────────

    def get_component(self, value: date | time, code: str) -> int:
        """Value of field ``code`` (``"M"``, ``"ms"``, …) on ``value``."""
        return extract_component(value, code)

    def diff_date_time(self, minuend: datetime, subtrahend: datetime, code: str) -> int:
        """Whole ``code`` units from ``subtrahend`` to ``minuend`` (truncated)."""
        return diff_components(minuend, subtrahend, FieldCode.from_code(code))

    def diff_date_time_iso(self, minuend: str, subtrahend: str, code: str) -> int:
        """
        Like diff_date_time for ISO-8601 strings such as
        ``2007-12-03T10:15:30+01:00[Europe/Paris]``; both compared in UTC.
        """
        return diff_components(_parse_iso(minuend), _parse_iso(subtrahend), code)


def _parse_iso(text: str) -> datetime:
    """ISO-8601 text with optional ``[Zone/Id]`` suffix -> naive UTC datetime.

    Text without an offset or zone is taken as UTC.
    """
    if not isinstance(text, str):
        raise ParseError(f"Expected ISO-8601 text, got {type(text).__name__}")
    match = _ISO_ZONE_SUFFIX.match(text.strip())
    try:
        value = datetime.fromisoformat(match["body"]) if match else None
    except ValueError as exc:
        raise ParseError(f"Text {text!r} is not ISO-8601", cause=exc).with_context(source=text) from exc
    if value is None:
        raise ParseError(f"Text {text!r} is not ISO-8601").with_context(source=text)
    if match["zone"]:
        zone = resolve_zone(match["zone"])
        if value.utcoffset() is None:
            value = value.replace(tzinfo=zone)
    return to_naive_utc(value)


__all__ = ["DateToolkit"]
