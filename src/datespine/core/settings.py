"""Settings for date-spine.

Defaults that used to be process-wide state (the weekend days, the zone
used by the toolkit, logging) are a validated settings object instead. The
toolkit takes it as a constructor argument; core functions never read it.

Features:
    - **DateSpineSettings:** weekend days, default zone, log level, JSON logs, service name
    - **env_prefix:** ``DATESPINE_`` environment variables
    - **.env file support:** Automatic loading via pydantic-settings
    - **Validated at startup:** Bad day names or zone ids fail on construction

Examples:
    >>> settings = DateSpineSettings(default_weekends="friday, saturday")
    >>> sorted(day.name for day in settings.weekend_set)
    ['FRIDAY', 'SATURDAY']

Tags:
    settings, configuration, pydantic, environment, date-spine
"""

from __future__ import annotations

from datetime import tzinfo

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .business import WeekendSet, parse_weekends
from .errors import ConfigError, InvalidTimeZoneError, InvalidWeekendSetError
from .logging import log_level_number
from .zones import resolve_zone


class DateSpineSettings(BaseSettings):
    """date-spine configuration.

    Fields
    ──────
    default_weekends : Day names treated as weekend by business-day helpers
    default_zone     : Zone id used by the toolkit when none is given
    log_level        : Structlog log level (DEBUG..CRITICAL)
    json_logs        : JSON log lines (True), console (False), auto (None)
    service_name     : ``service.name`` stamped on every log event
    """

    model_config = SettingsConfigDict(
        env_prefix="DATESPINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Calendar ─────────────────────────────────────────────────
    default_weekends: str = Field(
        default="SATURDAY,SUNDAY",
        description="Comma-separated weekend day names (SUNDAY..SATURDAY)",
    )
    default_zone: str = Field(default="UTC", description="Zone id or offset")

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    json_logs: bool | None = None
    service_name: str = "date-spine"

    @field_validator("default_weekends")
    @classmethod
    def check_weekends(cls, value: str) -> str:
        names = [name.strip().upper() for name in value.split(",") if name.strip()]
        try:
            parse_weekends(names)
        except InvalidWeekendSetError as exc:
            raise ValueError(exc.message) from exc
        return ",".join(names)

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        try:
            log_level_number(value)
        except ConfigError as exc:
            raise ValueError(exc.message) from exc
        return value.strip().upper()

    @field_validator("default_zone")
    @classmethod
    def check_zone(cls, value: str) -> str:
        try:
            resolve_zone(value)
        except InvalidTimeZoneError as exc:
            raise ValueError(exc.message) from exc
        return value

    @property
    def weekend_set(self) -> WeekendSet:
        return parse_weekends(self.weekend_names)

    @property
    def weekend_names(self) -> list[str]:
        return [name for name in self.default_weekends.split(",") if name]

    @property
    def zone(self) -> tzinfo:
        return resolve_zone(self.default_zone)
