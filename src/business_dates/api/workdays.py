"""
Work-day arithmetic entry point.

A single ``add_work_days`` taking an explicit options object replaces the
separate no-holidays, holiday-list and holiday-table variants.
"""

from datetime import datetime
from typing import Any, Dict, Sequence, Union

from pydantic import ValidationError as PydanticValidationError

from business_dates.api.validation import WorkDayOptions
from business_dates.config import settings
from business_dates.core import business_days
from business_dates.core.exceptions import InvalidArgumentError
from business_dates.core.holidays import get_danish_holidays
from business_dates.core.periods import DateLike
from business_dates.infrastructure.logging import get_logger, log_duration


logger = get_logger(__name__)

OptionsLike = Union[WorkDayOptions, Dict[str, Any], None]


def parse_options(options: OptionsLike = None) -> WorkDayOptions:
    """
    Validate work-day options.

    Without options, the configured default holiday table is used.

    Raises:
        InvalidArgumentError: If the options do not validate.
    """
    if isinstance(options, WorkDayOptions):
        return options
    if options is None:
        options = {"holidays": settings.workdays.default_holiday_table}
    try:
        return WorkDayOptions.model_validate(options)
    except PydanticValidationError as e:
        raise InvalidArgumentError("options", str(e)) from e


def resolve_holidays(options: WorkDayOptions, start_date: DateLike) -> Sequence[DateLike]:
    """Get the dates to exclude for a calculation starting at start_date."""
    if options.uses_default_table:
        # The table is taken for the start year only.
        return list(get_danish_holidays(start_date.year).values())
    return options.explicit_holidays or []


@log_duration("add_work_days")
def add_work_days(
    start_date: DateLike,
    work_days: int,
    options: OptionsLike = None,
) -> datetime:
    """
    Add a number of work days to a date.

    Args:
        start_date: The starting date.
        work_days: Number of work days to add; must be positive.
        options: WorkDayOptions, or a dict such as ``{"holidays": "danish"}``
            or ``{"holidays": [date(2010, 12, 24)]}``.

    Returns:
        Midnight of the resulting work day.

    Raises:
        InvalidArgumentError: If work_days is not positive or options are invalid.
        InternalInvariantError: If the searched range held too few work days.
    """
    parsed = parse_options(options)
    holidays = resolve_holidays(parsed, start_date)

    logger.debug(
        "Adding work days",
        extra={"extra_fields": {
            "start_date": start_date,
            "work_days": work_days,
            "holiday_count": len(holidays),
        }}
    )

    return business_days.add_work_days(
        start_date,
        work_days,
        holidays,
        slack_days=settings.workdays.range_slack_days,
    )
