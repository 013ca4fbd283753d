"""API Layer - validated entry points over the core."""

from business_dates.api.validation import DANISH_HOLIDAYS, WorkDayOptions
from business_dates.api.workdays import add_work_days, parse_options, resolve_holidays

__all__ = [
    "DANISH_HOLIDAYS",
    "WorkDayOptions",
    "add_work_days",
    "parse_options",
    "resolve_holidays",
]
