"""
Auto-format detection for ISO-like date strings.

Scripts often pass dates as plain strings without saying how they are laid
out. The detector picks the pattern purely from the string's length using
a closed table; nothing is guessed beyond it::

    length  pattern                        example
    4       yyyy                           2000
    7       yyyy-MM                        2000-01
    10      yyyy-MM-dd                     2000-01-01
    13      yyyy-MM-dd HH                  2000-01-01 00
    16      yyyy-MM-dd HH:mm               2000-01-01 00:00
    19      yyyy-MM-dd HH:mm:ss            2000-01-01 00:00:00
    23      yyyy-MM-dd HH:mm:ss.SSS        2000-01-01 00:00:00.000
    29      yyyy-MM-dd HH:mm:ss.SSS Z      2000-01-01 00:00:00.000 -0700

Examples:
    >>> detect_format("2000-01-01")
    'yyyy-MM-dd'
    >>> parse_auto("2000-01-01 12:30")
    datetime.datetime(2000, 1, 1, 12, 30)
"""

from __future__ import annotations

from datetime import datetime
from types import MappingProxyType

from .errors import UnrecognizedFormatError
from .patterns import parse_temporal
from .zones import to_naive_utc

AUTO_FORMATS = MappingProxyType({
    4: "yyyy",
    7: "yyyy-MM",
    10: "yyyy-MM-dd",
    13: "yyyy-MM-dd HH",
    16: "yyyy-MM-dd HH:mm",
    19: "yyyy-MM-dd HH:mm:ss",
    23: "yyyy-MM-dd HH:mm:ss.SSS",
    29: "yyyy-MM-dd HH:mm:ss.SSS Z",
})


def detect_format(source: str) -> str:
    """
    Format pattern for ``source``, chosen by its length.

    Raises:
        UnrecognizedFormatError: No pattern is defined for this length.
    """
    if source is None:
        raise UnrecognizedFormatError("Date argument is None")
    pattern = AUTO_FORMATS.get(len(source))
    if pattern is None:
        raise UnrecognizedFormatError(
            f"Unsupported date format {source!r} (length {len(source)}); "
            f"supported lengths are {', '.join(str(n) for n in AUTO_FORMATS)}"
        ).with_context(source=source)
    return pattern


def parse_auto(source: str) -> datetime:
    """
    Parse ``source`` with its detected pattern into a naive datetime.

    Missing fields default to their minimum; a zone offset converts the
    value to UTC.

    Raises:
        UnrecognizedFormatError: The length is not in the table.
        ParseError: The text does not match the detected pattern.
    """
    return to_naive_utc(parse_temporal(source, detect_format(source)).to_datetime())


__all__ = [
    "AUTO_FORMATS",
    "detect_format",
    "parse_auto",
]
