"""
Business days calculation module.

Work days are Monday to Friday, minus an optional set of holidays.
Pure business logic with no external dependencies.
"""

from datetime import datetime, timedelta
from typing import FrozenSet, Iterable, List, Optional, Sequence

from business_dates.core.exceptions import InternalInvariantError, InvalidArgumentError
from business_dates.core.periods import (
    WORK_WEEK,
    DateLike,
    DayOfWeek,
    get_start_of_day,
)
from business_dates.core.ranges import get_day_of_week_in_range


# Extra calendar days searched by add_work_days beyond its estimate.
RANGE_SLACK_DAYS = 5


def _normalize_holidays(holidays: Optional[Iterable[DateLike]]) -> FrozenSet[datetime]:
    return frozenset(get_start_of_day(holiday) for holiday in holidays or ())


def is_work_day(check_date: DateLike, holidays: Optional[Iterable[DateLike]] = None) -> bool:
    """
    Check if a date is a work day (not weekend, not in holidays).

    Args:
        check_date: The date to check.
        holidays: Dates to treat as non-working.

    Returns:
        True if the date is a work day.
    """
    if DayOfWeek.of(check_date) not in WORK_WEEK:
        return False
    return get_start_of_day(check_date) not in _normalize_holidays(holidays)


def get_work_days_in_range(
    start: DateLike,
    end: DateLike,
    holidays: Optional[Iterable[DateLike]] = None,
) -> List[datetime]:
    """
    Get all work days between two dates, excluding holidays.

    Args:
        start: First day of the range.
        end: Last day of the range; must be strictly after start.
        holidays: Dates to skip. Compared by day, the time is ignored.

    Returns:
        Work days at midnight, in ascending order.

    Raises:
        OrderingError: If start is not before end.
    """
    excluded = _normalize_holidays(holidays)
    return [
        day for day in get_day_of_week_in_range(start, end, WORK_WEEK)
        if day not in excluded
    ]


def count_work_days(
    start: DateLike,
    end: DateLike,
    holidays: Optional[Iterable[DateLike]] = None,
) -> int:
    """Count the work days between two dates, both inclusive."""
    return len(get_work_days_in_range(start, end, holidays))


def add_work_days(
    start_date: DateLike,
    work_days: int,
    holidays: Optional[Iterable[DateLike]] = None,
    slack_days: int = RANGE_SLACK_DAYS,
) -> datetime:
    """
    Add a number of work days to a date.

    Only forward counting is supported. When start_date is itself a work
    day it is not counted; otherwise the first work day after it is.

    Args:
        start_date: The starting date. Its time is dropped.
        work_days: Number of work days to add; must be positive.
        holidays: Dates to skip.
        slack_days: Extra days searched beyond the estimated range.

    Returns:
        Midnight of the resulting work day.

    Raises:
        InvalidArgumentError: If work_days is not positive.
        InternalInvariantError: If the searched range held too few work days.
    """
    if work_days <= 0:
        raise InvalidArgumentError("work_days", f"must be greater than 0, got {work_days}")

    holiday_list: Sequence[DateLike] = list(holidays or ())

    start = get_start_of_day(start_date)
    # Two weekend days per five work days, plus one per holiday.
    span = work_days + (2 * work_days) // 5 + len(holiday_list) + slack_days
    end = start + timedelta(days=span)
    days = get_work_days_in_range(start, end, holiday_list)

    index = work_days if days and days[0] == start else work_days - 1
    if index >= len(days):
        raise InternalInvariantError(
            f"Found {len(days)} work days in {span} days, needed {index + 1}",
            {"start": start, "end": end, "work_days": work_days},
        )
    return days[index]
