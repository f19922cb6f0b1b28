"""
Structured error types for date-spine.

Every failure in date-spine is a caller-input error: a pattern that does not
parse, a field that does not exist on the value it was applied to, a string
that does not match its format, or an unknown time zone. None of them are
transient, so nothing here carries retry semantics. What they do carry is a
category for routing and a context for structured logs.

Manifesto:
    - **Typed Error Hierarchy:** One class per kind of bad input
    - **Rich Context:** Errors carry the pattern, field code or zone id involved
    - **Error Chaining:** Standard-library failures are kept as ``cause``
    - **Fail Fast:** Errors surface from the triggering call, never deferred

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────────┐
        │                       DateSpineError                          │
        │               (category, context, cause)                      │
        ├──────────────────────────────────────────────────────────────┤
        │                                                               │
        │  PatternError (PARSE)       ParseError (PARSE)                │
        │     │                       UnrecognizedFormatError (PARSE)   │
        │  MalformedPatternError                                        │
        │  UnknownFieldCodeError                                        │
        │                                                               │
        │  ValidationError (VALIDATION)   ConfigError (CONFIG)          │
        │     │                              │                          │
        │  UnsupportedFieldError          InvalidTimeZoneError          │
        │  TemporalRangeError                                           │
        │  InvalidWeekendSetError                                       │
        └──────────────────────────────────────────────────────────────┘

Examples:
    >>> error = UnknownFieldCodeError("Unknown field code 'q'", field="q")
    >>> error.category
    <ErrorCategory.PARSE: 'PARSE'>
    >>> error.with_context(pattern="q+1").context.pattern
    'q+1'

Tags:
    error-handling, exception-hierarchy, error-context, date-spine

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Error categories for classification.

    Attributes:
        PARSE: Pattern or input string could not be parsed
        VALIDATION: Parsed input is not valid for the value it targets
        CONFIG: Zone ids, weekend configuration, settings
        INTERNAL: Bugs, unexpected state
    """

    PARSE = "PARSE"
    VALIDATION = "VALIDATION"
    CONFIG = "CONFIG"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Only fields that are set appear in ``to_dict()``. Anything that does not
    have a dedicated slot goes into ``metadata``.

    Attributes:
        pattern: Modify or format pattern being processed
        source: Input string being parsed
        zone_id: Time zone identifier involved
        operation: Facade operation that raised
        metadata: Additional key-value pairs
    """

    pattern: str | None = None
    source: str | None = None
    zone_id: str | None = None
    operation: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["pattern", "source", "zone_id", "operation"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class DateSpineError(Exception):
    """
    Base exception for all date-spine errors.

    Subclasses set ``default_category``. Every instance carries:

    - **category:** ErrorCategory for classification
    - **context:** ErrorContext with the pattern/source/zone involved
    - **cause:** Optional underlying exception, also set as ``__cause__``

    Examples:
        >>> error = DateSpineError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.to_dict()["error_type"]
        'DateSpineError'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> DateSpineError:
        """
        Add context to this error (fluent API).

        Usage:
            raise MalformedPatternError("Bad segment").with_context(pattern="Y+")
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# PATTERN ERRORS
# =============================================================================


class PatternError(DateSpineError):
    """Error in a modify pattern or format pattern."""

    default_category = ErrorCategory.PARSE

    def __init__(
        self,
        message: str,
        *,
        segment: str | None = None,
        field: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.segment = segment
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.segment is not None:
            result["segment"] = self.segment
        if self.field is not None:
            result["field"] = self.field
        return result


class MalformedPatternError(PatternError):
    """A segment does not match ``<field><operator><digits>``."""

    pass


class UnknownFieldCodeError(PatternError):
    """The field code is not one of the known symbolic codes."""

    pass


# =============================================================================
# INPUT PARSE ERRORS
# =============================================================================


class ParseError(DateSpineError):
    """A string does not match the format pattern it was parsed against."""

    default_category = ErrorCategory.PARSE


class UnrecognizedFormatError(DateSpineError):
    """No format pattern is known for a string of this length."""

    default_category = ErrorCategory.PARSE


# =============================================================================
# VALIDATION ERRORS
# =============================================================================


class ValidationError(DateSpineError):
    """
    Input parsed fine but is not valid for the value it targets.
    """

    default_category = ErrorCategory.VALIDATION

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        if self.value is not None:
            result["value"] = repr(self.value)
        return result


class UnsupportedFieldError(ValidationError):
    """The field does not exist on this kind of value (hour on a date)."""

    pass


class TemporalRangeError(ValidationError):
    """The result falls outside the range the host date type supports."""

    pass


class InvalidWeekendSetError(ValidationError):
    """Weekend days are unknown or leave no business day."""

    default_category = ErrorCategory.CONFIG


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(DateSpineError):
    """Configuration error."""

    default_category = ErrorCategory.CONFIG


class InvalidTimeZoneError(ConfigError):
    """The zone id is neither a known region nor a valid offset."""

    def __init__(self, message: str, *, zone_id: str | None = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.zone_id = zone_id
        if zone_id is not None:
            self.context.zone_id = zone_id


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def categorize_error(error: Exception) -> ErrorCategory:
    """Get the category of an error."""
    if isinstance(error, DateSpineError):
        return error.category
    if isinstance(error, (ValueError, OverflowError)):
        return ErrorCategory.VALIDATION
    return ErrorCategory.INTERNAL


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "DateSpineError",
    # Pattern
    "PatternError",
    "MalformedPatternError",
    "UnknownFieldCodeError",
    # Input
    "ParseError",
    "UnrecognizedFormatError",
    # Validation
    "ValidationError",
    "UnsupportedFieldError",
    "TemporalRangeError",
    "InvalidWeekendSetError",
    # Config
    "ConfigError",
    "InvalidTimeZoneError",
    # Utilities
    "categorize_error",
]
