"""Application configuration via environment variables."""

from __future__ import annotations

import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic_settings import BaseSettings

from rentalops.models.task import UrgencyTier

log = logging.getLogger("rentalops.config")


class Settings(BaseSettings):
    # Scheduling
    calendar_timezone: str = "America/Chicago"  # property-local "today"
    default_urgency: UrgencyTier = UrgencyTier.MEDIUM  # applied when a task has none

    # Server
    host: str = "127.0.0.1"
    port: int = 8080
    debug: bool = False
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def validate_startup(self) -> list[str]:
        """Validate configuration at startup. Returns warnings, raises on errors."""
        warnings: list[str] = []

        try:
            ZoneInfo(self.calendar_timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(
                f"CALENDAR_TIMEZONE {self.calendar_timezone!r} is not a known "
                "IANA timezone."
            ) from e

        if self.calendar_timezone == "UTC":
            warnings.append(
                "CALENDAR_TIMEZONE is UTC. Cutoffs like 22:00 will be read in "
                "UTC, not property-local time."
            )

        if self.debug and self.host not in ("127.0.0.1", "localhost"):
            warnings.append(f"DEBUG=true while binding to {self.host}.")

        return warnings


settings = Settings()
