"""Configuration package."""

from business_dates.config.settings import (
    LoggingSettings,
    Settings,
    WorkDaySettings,
    settings,
)

__all__ = [
    "LoggingSettings",
    "Settings",
    "WorkDaySettings",
    "settings",
]
