"""
Structured logging for date-spine.

Core modules only call ``get_logger(__name__)`` and log at DEBUG. Output
format, level and service name are decided once, from
:class:`~datespine.core.settings.DateSpineSettings`, by
``configure_logging``. ``DateToolkit.from_environment()`` does that for
scripts; embedding applications may call it themselves or configure
structlog their own way.

Manifesto:
    A business-day walk that pushed one day too far looks like any other
    date afterwards. Logging each step as a structured event (cursor,
    modified, direction) lets a run be replayed from its logs.

Examples:
    >>> from datespine.core.settings import DateSpineSettings
    >>> configure_logging(DateSpineSettings(log_level="DEBUG", json_logs=False))
    >>> get_logger(__name__).debug("modify_applied", pattern="D+1", ops=1)

Tags:
    logging, structlog, observability, date-spine
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from .errors import ConfigError

if TYPE_CHECKING:
    from .settings import DateSpineSettings

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def service_metadata(service: str) -> Processor:
    """Processor stamping ``service.name`` on every event that lacks one."""

    def add_service(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service.name", service)
        return event_dict

    return add_service


def ecs_field_names(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Rename ``timestamp``/``level`` to their ECS names for JSON output."""
    if "timestamp" in event_dict:
        event_dict["@timestamp"] = event_dict.pop("timestamp")
    if "level" in event_dict:
        event_dict["log.level"] = event_dict.pop("level")
    return event_dict


def log_level_number(level: str) -> int:
    """``"debug"`` -> ``logging.DEBUG``; unknown names raise ConfigError."""
    name = str(level).strip().upper()
    if name not in LEVELS:
        raise ConfigError(f"Unknown log level {level!r}; expected one of {', '.join(LEVELS)}")
    return getattr(logging, name)


def build_processors(service: str, json_format: bool, add_timestamp: bool = True) -> list[Processor]:
    """Processor chain ending in a JSON or console renderer."""
    processors: list[Processor] = []
    if add_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    processors += [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        service_metadata(service),
    ]
    if json_format:
        processors += [ecs_field_names, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))
    return processors


def configure_logging(
    settings: DateSpineSettings | None = None,
    *,
    level: str | None = None,
    json_format: bool | None = None,
    service: str | None = None,
    add_timestamp: bool = True,
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        settings: Source of ``log_level``, ``json_logs`` and ``service_name``
            (read from the environment when omitted)
        level: Overrides ``settings.log_level``
        json_format: Overrides ``settings.json_logs``; when both are None,
            JSON is used unless stdout is a terminal
        service: Overrides ``settings.service_name``
        add_timestamp: Include an ISO timestamp in each event
    """
    if settings is None:
        from .settings import DateSpineSettings

        settings = DateSpineSettings()

    level_number = log_level_number(level or settings.log_level)
    if json_format is None:
        json_format = settings.json_logs
    if json_format is None:
        json_format = not sys.stdout.isatty()

    structlog.configure(
        processors=build_processors(service or settings.service_name, json_format, add_timestamp),
        wrapper_class=structlog.make_filtering_bound_logger(level_number),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level_number)


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger (usually ``get_logger(__name__)``)."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


class LogContext:
    """Bind logging context for the duration of a ``with`` block.

    Example:
        with LogContext(script="settlement_dates", step=3):
            toolkit.modify_business_date_time(value, "D+2")
    """

    def __init__(self, **kwargs: Any):
        self._context = kwargs

    def __enter__(self) -> LogContext:
        bind_context(**self._context)
        return self

    def __exit__(self, *args) -> None:
        unbind_context(*self._context.keys())


__all__ = [
    "LEVELS",
    "configure_logging",
    "build_processors",
    "service_metadata",
    "get_logger",
    "bind_context",
    "unbind_context",
    "clear_context",
    "LogContext",
]
