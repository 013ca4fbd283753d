"""Core package - Pure calendar logic with no external dependencies."""

from business_dates.core.business_days import (
    add_work_days,
    count_work_days,
    get_work_days_in_range,
    is_work_day,
)
from business_dates.core.exceptions import (
    BusinessDatesError,
    InternalInvariantError,
    InvalidArgumentError,
    OrderingError,
    OutOfRangeError,
    ValidationError,
)
from business_dates.core.holidays import (
    EASTER_RELATIVE_HOLIDAYS,
    FIXED_HOLIDAYS,
    MonthDay,
    get_danish_holidays,
    get_easter,
    get_easter_dependent_holidays,
    get_fixed_holidays,
    get_holiday_name,
    is_danish_holiday,
)
from business_dates.core.periods import (
    WORK_WEEK,
    DayOfWeek,
    get_end_of_day,
    get_end_of_day_for,
    get_end_of_minute,
    get_end_of_month,
    get_end_of_month_for,
    get_end_of_week,
    get_end_of_week_iso,
    get_end_of_year,
    get_end_of_year_for,
    get_start_of_day,
    get_start_of_day_for,
    get_start_of_minute,
    get_start_of_month,
    get_start_of_month_for,
    get_start_of_week,
    get_start_of_week_iso,
    get_start_of_year,
    get_start_of_year_for,
    now,
)
from business_dates.core.ranges import get_day_of_week_in_range
from business_dates.core.weeks import (
    get_iso_week_in_year,
    get_iso_weeks_in_year,
    get_start_of_iso_week_in_year,
    get_week_in_year,
)

__all__ = [
    # Periods
    "DayOfWeek",
    "WORK_WEEK",
    "get_end_of_day",
    "get_end_of_day_for",
    "get_end_of_minute",
    "get_end_of_month",
    "get_end_of_month_for",
    "get_end_of_week",
    "get_end_of_week_iso",
    "get_end_of_year",
    "get_end_of_year_for",
    "get_start_of_day",
    "get_start_of_day_for",
    "get_start_of_minute",
    "get_start_of_month",
    "get_start_of_month_for",
    "get_start_of_week",
    "get_start_of_week_iso",
    "get_start_of_year",
    "get_start_of_year_for",
    "now",
    # Weeks
    "get_iso_week_in_year",
    "get_iso_weeks_in_year",
    "get_start_of_iso_week_in_year",
    "get_week_in_year",
    # Ranges
    "get_day_of_week_in_range",
    # Business days
    "add_work_days",
    "count_work_days",
    "get_work_days_in_range",
    "is_work_day",
    # Holidays
    "EASTER_RELATIVE_HOLIDAYS",
    "FIXED_HOLIDAYS",
    "MonthDay",
    "get_danish_holidays",
    "get_easter",
    "get_easter_dependent_holidays",
    "get_fixed_holidays",
    "get_holiday_name",
    "is_danish_holiday",
    # Exceptions
    "BusinessDatesError",
    "InternalInvariantError",
    "InvalidArgumentError",
    "OrderingError",
    "OutOfRangeError",
    "ValidationError",
]
