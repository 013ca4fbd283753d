"""
Business dates.

Pure calendar functions: period boundaries, ISO week numbers,
work-day arithmetic and Danish holidays derived from Easter.

Basic usage::

    from datetime import datetime
    from business_dates import add_work_days, get_iso_week_in_year

    get_iso_week_in_year(datetime(2010, 10, 27))                       # 43
    add_work_days(datetime(2010, 12, 20), 6, {"holidays": "danish"})   # 2010-12-29
"""

from business_dates.api import WorkDayOptions, add_work_days
from business_dates.core import (
    EASTER_RELATIVE_HOLIDAYS,
    FIXED_HOLIDAYS,
    WORK_WEEK,
    BusinessDatesError,
    DayOfWeek,
    InternalInvariantError,
    InvalidArgumentError,
    MonthDay,
    OrderingError,
    OutOfRangeError,
    ValidationError,
    count_work_days,
    get_danish_holidays,
    get_day_of_week_in_range,
    get_easter,
    get_easter_dependent_holidays,
    get_end_of_day,
    get_end_of_day_for,
    get_end_of_minute,
    get_end_of_month,
    get_end_of_month_for,
    get_end_of_week,
    get_end_of_week_iso,
    get_end_of_year,
    get_end_of_year_for,
    get_fixed_holidays,
    get_holiday_name,
    get_iso_week_in_year,
    get_iso_weeks_in_year,
    get_start_of_day,
    get_start_of_day_for,
    get_start_of_iso_week_in_year,
    get_start_of_minute,
    get_start_of_month,
    get_start_of_month_for,
    get_start_of_week,
    get_start_of_week_iso,
    get_start_of_year,
    get_start_of_year_for,
    get_week_in_year,
    get_work_days_in_range,
    is_danish_holiday,
    is_work_day,
)

__version__ = "1.0.0"

__all__ = [
    "EASTER_RELATIVE_HOLIDAYS",
    "FIXED_HOLIDAYS",
    "WORK_WEEK",
    "BusinessDatesError",
    "DayOfWeek",
    "InternalInvariantError",
    "InvalidArgumentError",
    "MonthDay",
    "OrderingError",
    "OutOfRangeError",
    "ValidationError",
    "WorkDayOptions",
    "add_work_days",
    "count_work_days",
    "get_danish_holidays",
    "get_day_of_week_in_range",
    "get_easter",
    "get_easter_dependent_holidays",
    "get_end_of_day",
    "get_end_of_day_for",
    "get_end_of_minute",
    "get_end_of_month",
    "get_end_of_month_for",
    "get_end_of_week",
    "get_end_of_week_iso",
    "get_end_of_year",
    "get_end_of_year_for",
    "get_fixed_holidays",
    "get_holiday_name",
    "get_iso_week_in_year",
    "get_iso_weeks_in_year",
    "get_start_of_day",
    "get_start_of_day_for",
    "get_start_of_iso_week_in_year",
    "get_start_of_minute",
    "get_start_of_month",
    "get_start_of_month_for",
    "get_start_of_week",
    "get_start_of_week_iso",
    "get_start_of_year",
    "get_start_of_year_for",
    "get_week_in_year",
    "get_work_days_in_range",
    "is_danish_holiday",
    "is_work_day",
]
