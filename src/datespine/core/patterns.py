"""
Format patterns: render and parse values with ``yyyy-MM-dd HH:mm:ss.SSS``.

Scripts describe formats with the letter-run pattern language common to
most date libraries rather than ``strftime`` directives. A pattern is
tokenized once into literals, field runs and optional sections (cached),
then used both to render values and to build an exact-match regex for
parsing.

Supported symbols::

    Symbol  Meaning                   Examples
    G       era                       AD; Anno Domini; A
    y       year                      2004; 04 (yy, base 2000)
    Y       week-based year           1996; 96
    Q       quarter-of-year           3; 03; Q3; 3rd quarter
    M       month-of-year             7; 07; Jul; July
    w       week-of-week-based-year   27 (ISO weeks)
    d       day-of-month              10
    D       day-of-year               189
    E       day-of-week               Tue; Tuesday
    a       am-pm-of-day              PM
    H       hour-of-day (0-23)        0
    h       clock-hour-of-am-pm       12
    K       hour-of-am-pm (0-11)      0
    k       clock-hour-of-day (1-24)  24
    m       minute-of-hour            30
    s       second-of-minute          55
    S       fraction-of-second        978
    A       milli-of-day              1234
    n       nano-of-second            987654321
    N       nano-of-day               1234000000
    Z       zone-offset               +0000; -08:00 (ZZZZZ)
    X       zone-offset 'Z' for zero  Z; -08; -0830; -08:30
    x       zone-offset               +00; -0830; -08:30
    VV      time-zone id              America/Los_Angeles
    '       escape for text
    ''      single quote
    [ ]     optional section

An optional section is parsed when present and skipped when absent. When
formatting it is rendered unless the value lacks one of its fields, so
``yyyy-MM-dd[ HH:mm]`` prints a date alone and a datetime in full.

Any other ASCII letter is reserved and rejected. Names are English and
locale-independent.

Examples:
    >>> from datetime import datetime
    >>> format_temporal(datetime(2017, 5, 30, 14, 5, 13, 801000), "yyyyMMdd-HH:mm:ss")
    '20170530-14:05:13'
    >>> parse_temporal("2017-05-30 14:05:13.801", "yyyy-MM-dd HH:mm:ss.SSS").to_datetime()
    datetime.datetime(2017, 5, 30, 14, 5, 13, 801000)
    >>> parse_temporal("2017-05-30", "yyyy-MM-dd[ HH:mm]").to_datetime()
    datetime.datetime(2017, 5, 30, 0, 0)

Tags:
    temporal, format-pattern, formatter, parser, date-spine
"""

from __future__ import annotations

import itertools
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Union

from .errors import MalformedPatternError, ParseError, UnsupportedFieldError
from .zones import resolve_zone

Temporal = Union[date, time, datetime]

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
QUARTER_NAMES = ("1st quarter", "2nd quarter", "3rd quarter", "4th quarter")

_DATE_LETTERS = frozenset("GyYQMwdDE")
_TIME_LETTERS = frozenset("aHhKkmsSAnN")

# letter -> highest supported run length
_MAX_COUNT = {
    "G": 5, "y": 9, "Y": 9, "Q": 4, "M": 4, "w": 2, "d": 2, "D": 3, "E": 4,
    "a": 1, "H": 2, "h": 2, "K": 2, "k": 2, "m": 2, "s": 2,
    "S": 9, "A": 19, "n": 9, "N": 19, "Z": 5, "X": 3, "x": 3, "V": 2,
}

_NANOS_PER_DAY = 86_400 * 1_000_000_000


@dataclass(frozen=True, slots=True)
class Literal:
    text: str


@dataclass(frozen=True, slots=True)
class FieldRun:
    letter: str
    count: int


@dataclass(frozen=True, slots=True)
class OptionalSection:
    """Tokens between ``[`` and ``]``."""

    tokens: tuple


Token = Union[Literal, FieldRun, OptionalSection]


@dataclass(frozen=True)
class CompiledPattern:
    """
    A tokenized format pattern with its parse regex.

    ``groups`` pairs each named regex group with the field run it captures,
    in pattern order (optional sections included).
    """

    pattern: str
    tokens: tuple[Token, ...]
    regex: re.Pattern
    groups: tuple[tuple[str, FieldRun], ...]


def compile_pattern(pattern: str) -> CompiledPattern:
    """
    Tokenize ``pattern``.

    Raises:
        MalformedPatternError: Reserved letter, unsupported run length, an
            unterminated quote or unbalanced ``[ ]``.
    """
    if not isinstance(pattern, str) or not pattern:
        raise MalformedPatternError(f"Format pattern must be a non-empty string, got {pattern!r}")
    return _compile(pattern)


@lru_cache(maxsize=256)
def _compile(pattern: str) -> CompiledPattern:
    tokens, _ = _tokenize(pattern, 0, depth=0)
    groups: list[tuple[str, FieldRun]] = []
    regex = _sequence_regex(tokens, itertools.count(), groups)
    return CompiledPattern(pattern, tokens, re.compile(regex), tuple(groups))


def _tokenize(pattern: str, start: int, depth: int) -> tuple[tuple[Token, ...], int]:
    tokens: list[Token] = []
    i = start
    while i < len(pattern):
        char = pattern[i]
        if char == "'":
            text, i = _read_quoted(pattern, i)
            tokens.append(Literal(text))
        elif char == "[":
            section, i = _tokenize(pattern, i + 1, depth + 1)
            tokens.append(OptionalSection(section))
        elif char == "]":
            if depth == 0:
                raise MalformedPatternError(f"Unmatched ']' in format pattern {pattern!r}", segment=pattern[i:])
            return _merge_literals(tokens), i + 1
        elif "a" <= char <= "z" or "A" <= char <= "Z":
            run = i
            while run < len(pattern) and pattern[run] == char:
                run += 1
            tokens.append(_field_run(pattern, char, run - i))
            i = run
        else:
            tokens.append(Literal(char))
            i += 1
    if depth:
        raise MalformedPatternError(f"Unclosed '[' in format pattern {pattern!r}", segment=pattern[start:])
    return _merge_literals(tokens), i


def _read_quoted(pattern: str, start: int) -> tuple[str, int]:
    if pattern.startswith("''", start):
        return "'", start + 2
    text = []
    i = start + 1
    while i < len(pattern):
        if pattern[i] == "'":
            if pattern.startswith("''", i):
                text.append("'")
                i += 2
                continue
            return "".join(text), i + 1
        text.append(pattern[i])
        i += 1
    raise MalformedPatternError(f"Unterminated quote in format pattern {pattern!r}", segment=pattern[start:])


def _field_run(pattern: str, letter: str, count: int) -> FieldRun:
    limit = _MAX_COUNT.get(letter)
    if limit is None:
        raise MalformedPatternError(
            f"Unsupported pattern letter {letter!r} in {pattern!r}",
            field=letter,
        )
    if count > limit or (letter == "V" and count != 2) or (letter == "Z" and count == 4):
        raise MalformedPatternError(
            f"Too many pattern letters {letter * count!r} in {pattern!r}",
            field=letter,
        )
    return FieldRun(letter, count)


def _merge_literals(tokens: list[Token]) -> tuple[Token, ...]:
    merged: list[Token] = []
    for token in tokens:
        if isinstance(token, Literal) and merged and isinstance(merged[-1], Literal):
            merged[-1] = Literal(merged[-1].text + token.text)
        else:
            merged.append(token)
    return tuple(merged)


# =============================================================================
# FORMATTING
# =============================================================================


def format_temporal(value: Temporal, pattern: str) -> str:
    """
    Render ``value`` with ``pattern``.

    Raises:
        MalformedPatternError: The pattern is invalid.
        UnsupportedFieldError: The pattern asks for a field the value lacks
            (hours of a date, the offset of a naive datetime) outside an
            optional section.
    """
    return _render(value, compile_pattern(pattern).tokens)


def _render(value: Temporal, tokens: tuple[Token, ...]) -> str:
    parts = []
    for token in tokens:
        if isinstance(token, Literal):
            parts.append(token.text)
        elif isinstance(token, OptionalSection):
            try:
                parts.append(_render(value, token.tokens))
            except UnsupportedFieldError:
                # the value lacks a field of this section: leave it out
                continue
        else:
            parts.append(_format_run(value, token))
    return "".join(parts)


def _require(value: Temporal, token: FieldRun) -> None:
    if isinstance(value, datetime):
        has_date = has_time = True
    else:
        has_date = isinstance(value, date)
        has_time = isinstance(value, time)
    if (token.letter in _DATE_LETTERS and not has_date) or (
        token.letter in _TIME_LETTERS and not has_time
    ):
        raise UnsupportedFieldError(
            f"Pattern letter {token.letter!r} is not supported on {type(value).__name__} {value!r}",
            field=token.letter,
            value=value,
        )


def _format_run(value: Temporal, token: FieldRun) -> str:
    _require(value, token)
    letter, count = token.letter, token.count

    if letter == "G":
        return {4: "Anno Domini", 5: "A"}.get(count, "AD")
    if letter in "yY":
        year = value.year if letter == "y" else value.isocalendar()[0]
        if count == 2:
            return f"{year % 100:02d}"
        return f"{year:0{count}d}"
    if letter == "Q":
        quarter = (value.month - 1) // 3 + 1
        if count == 3:
            return f"Q{quarter}"
        if count == 4:
            return QUARTER_NAMES[quarter - 1]
        return f"{quarter:0{count}d}"
    if letter == "M":
        if count == 3:
            return MONTH_NAMES[value.month - 1][:3]
        if count == 4:
            return MONTH_NAMES[value.month - 1]
        return f"{value.month:0{count}d}"
    if letter == "w":
        return f"{value.isocalendar()[1]:0{count}d}"
    if letter == "d":
        return f"{value.day:0{count}d}"
    if letter == "D":
        return f"{value.timetuple().tm_yday:0{count}d}"
    if letter == "E":
        name = DAY_NAMES[value.weekday()]
        return name if count == 4 else name[:3]
    if letter == "a":
        return "AM" if value.hour < 12 else "PM"
    if letter == "H":
        return f"{value.hour:0{count}d}"
    if letter == "h":
        return f"{(value.hour % 12) or 12:0{count}d}"
    if letter == "K":
        return f"{value.hour % 12:0{count}d}"
    if letter == "k":
        return f"{value.hour or 24:0{count}d}"
    if letter == "m":
        return f"{value.minute:0{count}d}"
    if letter == "s":
        return f"{value.second:0{count}d}"
    if letter == "S":
        return f"{value.microsecond * 1000:09d}"[:count]
    if letter == "A":
        return f"{_nano_of_day(value) // 1_000_000:0{count}d}"
    if letter == "n":
        return f"{value.microsecond * 1000:0{count}d}"
    if letter == "N":
        return f"{_nano_of_day(value):0{count}d}"
    return _format_zone(value, token)


def _nano_of_day(value: Temporal) -> int:
    seconds = value.hour * 3600 + value.minute * 60 + value.second
    return (seconds * 1_000_000 + value.microsecond) * 1000


def _format_zone(value: Temporal, token: FieldRun) -> str:
    offset = value.utcoffset() if isinstance(value, (datetime, time)) else None
    if offset is None:
        raise UnsupportedFieldError(
            f"Pattern letter {token.letter!r} needs a zone, but {value!r} has none",
            field=token.letter,
            value=value,
        )
    letter, count = token.letter, token.count
    if letter == "V":
        zone = value.tzinfo
        return getattr(zone, "key", None) or format_offset(offset, colon=True, zero_as_z=True)
    if letter == "Z":
        return format_offset(offset, colon=count == 5, zero_as_z=count == 5)
    zero_as_z = letter == "X"
    if count == 1:
        return format_offset(offset, colon=False, zero_as_z=zero_as_z, minutes_optional=True)
    return format_offset(offset, colon=count == 3, zero_as_z=zero_as_z)


def format_offset(
    offset: timedelta,
    colon: bool = False,
    zero_as_z: bool = False,
    minutes_optional: bool = False,
) -> str:
    """Render a UTC offset as ``+HHMM`` / ``+HH:MM`` (seconds appended when non-zero)."""
    if zero_as_z and not offset:
        return "Z"
    sign = "-" if offset < timedelta(0) else "+"
    total = abs(int(offset.total_seconds()))
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    separator = ":" if colon else ""
    text = f"{sign}{hours:02d}"
    if not (minutes_optional and minutes == 0 and seconds == 0):
        text += f"{separator}{minutes:02d}"
    if seconds:
        text += f"{separator}{seconds:02d}"
    return text


# =============================================================================
# PARSING
# =============================================================================

_NAME_ALTERNATION = {
    "MMM": "|".join(name[:3] for name in MONTH_NAMES),
    "MMMM": "|".join(MONTH_NAMES),
    "E": "|".join(name[:3] for name in DAY_NAMES),
    "EEEE": "|".join(DAY_NAMES),
    "QQQQ": "|".join(QUARTER_NAMES),
}

_ERA_NAMES = {"AD": "AD", "ANNO DOMINI": "AD", "A": "AD", "BC": "BC", "BEFORE CHRIST": "BC", "B": "BC"}


def _sequence_regex(tokens: tuple[Token, ...], counter, groups: list) -> str:
    parts = []
    for token in tokens:
        if isinstance(token, Literal):
            parts.append(re.escape(token.text))
        elif isinstance(token, OptionalSection):
            parts.append(f"(?:{_sequence_regex(token.tokens, counter, groups)})?")
        else:
            name = f"g{next(counter)}"
            groups.append((name, token))
            parts.append(f"(?P<{name}>{_run_regex(token)})")
    return "".join(parts)


def _run_regex(token: FieldRun) -> str:
    letter, count = token.letter, token.count
    if letter == "G":
        return {4: r"(?i:Anno Domini|Before Christ)", 5: r"(?i:A|B)"}.get(count, r"(?i:AD|BC)")
    if letter in "yY":
        return r"\d{2}" if count == 2 else (r"\d+" if count == 1 else rf"\d{{{count},9}}")
    if letter == "Q":
        if count == 3:
            return r"(?i:Q[1-4])"
        if count == 4:
            return rf"(?i:{_NAME_ALTERNATION['QQQQ']})"
        return r"\d" if count == 1 else r"\d{2}"
    if letter == "M" and count >= 3:
        return rf"(?i:{_NAME_ALTERNATION['M' * count]})"
    if letter == "E":
        return rf"(?i:{_NAME_ALTERNATION['EEEE' if count == 4 else 'E']})"
    if letter == "a":
        return r"(?i:AM|PM)"
    if letter in "MwdHhKkms":
        return r"\d{1,2}" if count == 1 else r"\d{2}"
    if letter == "D":
        return rf"\d{{{count},3}}"
    if letter == "S":
        return rf"\d{{{count}}}"
    if letter == "n":
        return rf"\d{{{count},9}}"
    if letter in "AN":
        return rf"\d{{{count},19}}"
    if letter == "Z":
        return r"Z|[+-]\d{2}:\d{2}" if count == 5 else r"[+-]\d{4}"
    if letter == "X":
        return r"Z|[+-]\d{2}(?::?\d{2})?"
    if letter == "x":
        return r"[+-]\d{2}(?::?\d{2})?"
    return r"[A-Za-z][A-Za-z0-9_+\-/]*"


@dataclass
class ParsedTemporal:
    """
    Fields read from a string; absent fields stay None.

    ``to_datetime()`` / ``to_date()`` / ``to_time()`` fill missing fields
    with their minimum (month 1, day 1, midnight). A quarter without a month
    means the quarter's first month; a week without month or day resolves
    through ISO week dates. Redundant fields (weekday, quarter, week,
    milli-of-day) are cross-checked against the resolved value.
    """

    source: str
    pattern: str
    era: str | None = None
    year: int | None = None
    week_based_year: int | None = None
    quarter: int | None = None
    month: int | None = None
    week: int | None = None
    day: int | None = None
    day_of_year: int | None = None
    weekday: int | None = None
    hour: int | None = None
    hour_of_ampm: int | None = None
    pm: bool | None = None
    minute: int | None = None
    second: int | None = None
    nanosecond: int | None = None
    milli_of_day: int | None = None
    nano_of_day: int | None = None
    zone: tzinfo | None = None

    def _set(self, name: str, value) -> None:
        current = getattr(self, name)
        if current is not None and current != value:
            raise ParseError(
                f"Conflicting {name} values {current!r} and {value!r} in {self.source!r}"
            ).with_context(source=self.source, pattern=self.pattern)
        setattr(self, name, value)

    def _resolve_date(self) -> date:
        if self.era == "BC":
            raise ValueError("years before the common era are not supported")
        year = self.year if self.year is not None else 1970
        if self.week is not None and self.month is None and self.day is None and self.day_of_year is None:
            week_year = self.week_based_year if self.week_based_year is not None else year
            resolved = date.fromisocalendar(week_year, self.week, (self.weekday or 0) + 1)
        elif self.day_of_year is not None and self.month is None and self.day is None:
            resolved = date(year, 1, 1) + timedelta(days=self.day_of_year - 1)
            if resolved.year != year:
                raise ValueError(f"day-of-year {self.day_of_year} is out of range for {year}")
        else:
            month = self.month
            if month is None:
                month = (self.quarter - 1) * 3 + 1 if self.quarter is not None else 1
            resolved = date(year, month, self.day or 1)
            if self.day_of_year is not None and resolved.timetuple().tm_yday != self.day_of_year:
                raise ValueError(f"day-of-year {self.day_of_year} does not match {resolved}")

        if self.quarter is not None and (resolved.month - 1) // 3 + 1 != self.quarter:
            raise ValueError(f"{resolved} is not in quarter {self.quarter}")
        week_year, week, _ = resolved.isocalendar()
        if self.week is not None and week != self.week:
            raise ValueError(f"{resolved} is in week {week}, not {self.week}")
        if self.week_based_year is not None and week_year != self.week_based_year:
            raise ValueError(f"{resolved} is in week-based year {week_year}, not {self.week_based_year}")
        if self.weekday is not None and resolved.weekday() != self.weekday:
            raise ValueError(f"{resolved} is a {DAY_NAMES[resolved.weekday()]}, not {DAY_NAMES[self.weekday]}")
        return resolved

    def _resolve_time(self) -> time:
        hour = self.hour
        if self.hour_of_ampm is not None:
            if self.pm is None:
                if hour is None:
                    raise ValueError(f"hour {self.hour_of_ampm} of AM/PM needs an AM/PM marker")
                if hour % 12 != self.hour_of_ampm:
                    raise ValueError(f"hour {hour} does not match hour of AM/PM {self.hour_of_ampm}")
            else:
                from_ampm = self.hour_of_ampm + (12 if self.pm else 0)
                if hour is not None and hour != from_ampm:
                    raise ValueError(f"hour {hour} does not match {self.hour_of_ampm} {'PM' if self.pm else 'AM'}")
                hour = from_ampm
        elif hour is not None and self.pm is not None and (hour >= 12) != self.pm:
            raise ValueError(f"hour {hour} does not match {'PM' if self.pm else 'AM'}")

        minute, second, nanosecond = self.minute, self.second, self.nanosecond
        of_day = self._of_day()
        if of_day is not None:
            seconds, nanos = divmod(of_day, 1_000_000_000)
            minutes, day_second = divmod(seconds, 60)
            day_hour, day_minute = divmod(minutes, 60)
            for name, parsed, derived in (
                ("hour", hour, day_hour),
                ("minute", minute, day_minute),
                ("second", second, day_second),
            ):
                if parsed is not None and parsed != derived:
                    raise ValueError(f"{name} {parsed} does not match time of day {of_day}ns")
            # milli-of-day only fixes the second's fraction to the millisecond
            precision = 1 if self.nano_of_day is not None else 1_000_000
            if nanosecond is not None and nanosecond // precision != nanos // precision:
                raise ValueError(f"fraction {nanosecond}ns does not match time of day {of_day}ns")
            hour, minute, second = day_hour, day_minute, day_second
            if nanosecond is None:
                nanosecond = nanos

        return time(
            hour or 0,
            minute or 0,
            second or 0,
            (nanosecond or 0) // 1000,
            tzinfo=self.zone,
        )

    def _of_day(self) -> int | None:
        if self.nano_of_day is not None:
            if self.milli_of_day is not None and self.milli_of_day != self.nano_of_day // 1_000_000:
                raise ValueError(f"milli-of-day {self.milli_of_day} does not match nano-of-day {self.nano_of_day}")
            of_day = self.nano_of_day
        elif self.milli_of_day is not None:
            of_day = self.milli_of_day * 1_000_000
        else:
            return None
        if of_day >= _NANOS_PER_DAY:
            raise ValueError(f"time of day {of_day}ns is past midnight")
        return of_day

    def _build(self, builder):
        try:
            return builder()
        except (ValueError, OverflowError) as exc:
            raise ParseError(
                f"Text {self.source!r} has invalid values for pattern {self.pattern!r}: {exc}",
                cause=exc,
            ).with_context(source=self.source, pattern=self.pattern) from exc

    def to_datetime(self) -> datetime:
        """Datetime, aware when the pattern carried a zone."""
        return self._build(lambda: datetime.combine(self._resolve_date(), self._resolve_time()))

    def to_date(self) -> date:
        return self._build(self._resolve_date)

    def to_time(self) -> time:
        return self._build(self._resolve_time)


def parse_temporal(source: str, pattern: str) -> ParsedTemporal:
    """
    Parse ``source`` against ``pattern``; the whole string must match.

    Fields inside an optional section that is absent from ``source`` stay
    unset.

    Raises:
        MalformedPatternError: The pattern is invalid.
        ParseError: The text does not match the pattern.
        InvalidTimeZoneError: A ``VV`` zone id is unknown.
    """
    compiled = compile_pattern(pattern)
    if not isinstance(source, str):
        raise ParseError(f"Expected text to parse, got {type(source).__name__}")
    match = compiled.regex.fullmatch(source)
    if match is None:
        raise ParseError(
            f"Text {source!r} could not be parsed with pattern {pattern!r}"
        ).with_context(source=source, pattern=pattern)

    parsed = ParsedTemporal(source, pattern)
    for name, token in compiled.groups:
        text = match.group(name)
        if text is not None:
            _assign(parsed, token, text)
    return parsed


def _assign(parsed: ParsedTemporal, token: FieldRun, text: str) -> None:
    letter, count = token.letter, token.count
    if letter == "G":
        parsed._set("era", _ERA_NAMES[text.upper()])
    elif letter in "yY":
        year = 2000 + int(text) if count == 2 else int(text)
        parsed._set("year" if letter == "y" else "week_based_year", year)
    elif letter == "Q":
        parsed._set("quarter", int(re.search(r"\d", text).group()))
    elif letter == "M":
        if count >= 3:
            names = [name[:3] if count == 3 else name for name in MONTH_NAMES]
            parsed._set("month", [n.lower() for n in names].index(text.lower()) + 1)
        else:
            parsed._set("month", int(text))
    elif letter == "w":
        parsed._set("week", int(text))
    elif letter == "d":
        parsed._set("day", int(text))
    elif letter == "D":
        parsed._set("day_of_year", int(text))
    elif letter == "E":
        names = [name if count == 4 else name[:3] for name in DAY_NAMES]
        parsed._set("weekday", [n.lower() for n in names].index(text.lower()))
    elif letter == "a":
        parsed._set("pm", text.upper() == "PM")
    elif letter == "H":
        parsed._set("hour", int(text))
    elif letter == "k":
        parsed._set("hour", int(text) % 24)
    elif letter == "h":
        parsed._set("hour_of_ampm", int(text) % 12)
    elif letter == "K":
        parsed._set("hour_of_ampm", int(text))
    elif letter == "m":
        parsed._set("minute", int(text))
    elif letter == "s":
        parsed._set("second", int(text))
    elif letter == "S":
        parsed._set("nanosecond", int(text.ljust(9, "0")))
    elif letter == "A":
        parsed._set("milli_of_day", int(text))
    elif letter == "n":
        parsed._set("nanosecond", int(text))
    elif letter == "N":
        parsed._set("nano_of_day", int(text))
    elif letter == "V":
        parsed._set("zone", resolve_zone(text))
    else:
        parsed._set("zone", _parse_offset_text(text))


def _parse_offset_text(text: str) -> tzinfo:
    if text.upper() == "Z":
        return timezone.utc
    return resolve_zone(text)


__all__ = [
    "MONTH_NAMES",
    "DAY_NAMES",
    "QUARTER_NAMES",
    "CompiledPattern",
    "ParsedTemporal",
    "compile_pattern",
    "format_temporal",
    "format_offset",
    "parse_temporal",
]
