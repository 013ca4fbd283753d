"""
Library configuration.

Centralizes environment variables and defaults
using dataclasses for type safety and immutability.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from business_dates.core.business_days import RANGE_SLACK_DAYS


def _optional_env(name: str) -> Optional[str]:
    value = os.environ.get(name, "").strip().lower()
    return value or None


@dataclass(frozen=True)
class LoggingSettings:
    """Logging settings."""

    level: str = field(
        default_factory=lambda: os.environ.get("BUSINESS_DATES_LOG_LEVEL", "WARNING").upper()
    )

    def __post_init__(self) -> None:
        # Unknown level names fall back to WARNING.
        level = str(self.level).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            level = "WARNING"
        object.__setattr__(self, "level", level)


@dataclass(frozen=True)
class WorkDaySettings:
    """Work-day arithmetic settings."""

    # Extra calendar days searched when adding work days
    range_slack_days: int = RANGE_SLACK_DAYS

    # Holiday table used when a call passes no options ("danish" or unset)
    default_holiday_table: Optional[str] = field(
        default_factory=lambda: _optional_env("BUSINESS_DATES_DEFAULT_HOLIDAYS")
    )


@dataclass(frozen=True)
class Settings:
    """Main library settings."""

    logging: LoggingSettings = field(default_factory=LoggingSettings)
    workdays: WorkDaySettings = field(default_factory=WorkDaySettings)


# Singleton settings instance
settings = Settings()
