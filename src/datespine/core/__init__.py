"""date-spine core -- calendar arithmetic primitives.

Manifesto:
    Scripts that drive tests need timestamps relative to "now" or to a
    reference value: a trade date two business days out, the first of next
    month, yesterday at market open in New York. ``datespine.core`` keeps
    that arithmetic in small, pure, separately tested modules so the
    scripting facade stays a thin combination of them.

    - **Pure functions:** Only the toolkit reads the clock
    - **Immutable values:** Standard-library date/time types, never mutated
    - **Static tables:** Field codes and auto-formats are fixed lookups
    - **Typed errors:** Every bad input raises a DateSpineError subclass

Architecture::

    Layer 1 -- Type System & Errors
        errors.py          Error hierarchy (PatternError, ParseError, ...)
        fields.py          Field-code table (Y, M, D, h, m, s, ms, mc, ns)
        timestamps.py      Clock and epoch helpers (stdlib-only)

    Layer 2 -- Arithmetic
        modify.py          Modify-pattern parser and applier
        components.py      Field extraction and whole-unit differences
        business.py        Weekend sets and the business-day walker

    Layer 3 -- Text and Zones
        patterns.py        yyyy-MM-dd style formatter and parser
        formats.py         Auto-format detection by length
        zones.py           Zone ids, offsets, UTC <-> wall clock

    Layer 4 -- Ambient
        logging.py         structlog configuration
        settings.py        pydantic-settings configuration

Tags:
    date-spine, temporal, calendar-arithmetic
"""

from datespine.core.business import (
    DEFAULT_WEEKENDS,
    Weekday,
    WeekendSet,
    adjust_to_business_day,
    is_business_day,
    parse_weekends,
    shift_off_weekend,
    validate_weekends,
)
from datespine.core.components import diff_components, extract_component
from datespine.core.errors import (
    ConfigError,
    DateSpineError,
    ErrorCategory,
    ErrorContext,
    InvalidTimeZoneError,
    InvalidWeekendSetError,
    MalformedPatternError,
    ParseError,
    PatternError,
    TemporalRangeError,
    UnknownFieldCodeError,
    UnrecognizedFormatError,
    UnsupportedFieldError,
    ValidationError,
)
from datespine.core.fields import FieldCode, match_field_code
from datespine.core.formats import AUTO_FORMATS, detect_format, parse_auto
from datespine.core.modify import (
    ModifyOp,
    ModifyOperator,
    add_months,
    apply_modifications,
    modify_temporal,
    parse_modify_pattern,
)
from datespine.core.patterns import ParsedTemporal, compile_pattern, format_temporal, parse_temporal
from datespine.core.zones import resolve_zone, utc_to_zone, zone_to_utc

__all__ = [
    # business
    "DEFAULT_WEEKENDS",
    "Weekday",
    "WeekendSet",
    "adjust_to_business_day",
    "is_business_day",
    "parse_weekends",
    "shift_off_weekend",
    "validate_weekends",
    # components
    "diff_components",
    "extract_component",
    # errors
    "ConfigError",
    "DateSpineError",
    "ErrorCategory",
    "ErrorContext",
    "InvalidTimeZoneError",
    "InvalidWeekendSetError",
    "MalformedPatternError",
    "ParseError",
    "PatternError",
    "TemporalRangeError",
    "UnknownFieldCodeError",
    "UnrecognizedFormatError",
    "UnsupportedFieldError",
    "ValidationError",
    # fields
    "FieldCode",
    "match_field_code",
    # formats
    "AUTO_FORMATS",
    "detect_format",
    "parse_auto",
    # modify
    "ModifyOp",
    "ModifyOperator",
    "add_months",
    "apply_modifications",
    "modify_temporal",
    "parse_modify_pattern",
    # patterns
    "ParsedTemporal",
    "compile_pattern",
    "format_temporal",
    "parse_temporal",
    # zones
    "resolve_zone",
    "utc_to_zone",
    "zone_to_utc",
]
