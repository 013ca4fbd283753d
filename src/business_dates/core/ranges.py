"""
Range enumeration module.

Lists the days of a date range that fall on given days of the week.
"""

from datetime import datetime, timedelta
from typing import AbstractSet, Iterable, List, Union

from business_dates.core.exceptions import InvalidArgumentError, OrderingError
from business_dates.core.periods import (
    DateLike,
    DayOfWeek,
    get_start_of_day,
    to_datetime,
)


ONE_DAY = timedelta(days=1)


def _as_weekday_set(
    weekdays: Union[DayOfWeek, Iterable[DayOfWeek]],
) -> AbstractSet[DayOfWeek]:
    if isinstance(weekdays, int):
        return frozenset({DayOfWeek(weekdays)})
    return frozenset(DayOfWeek(day) for day in weekdays)


def get_day_of_week_in_range(
    start: DateLike,
    end: DateLike,
    weekdays: Union[DayOfWeek, Iterable[DayOfWeek]],
) -> List[datetime]:
    """
    Get all days between two dates that fall on one of the given weekdays.

    Both bounds are truncated to midnight and are inclusive.

    Args:
        start: First day of the range.
        end: Last day of the range; must be strictly after start.
        weekdays: A DayOfWeek or a collection of them.

    Returns:
        Matching days at midnight, in ascending order.

    Raises:
        InvalidArgumentError: If weekdays is empty.
        OrderingError: If start is not before end.
    """
    days = _as_weekday_set(weekdays)
    if not days:
        raise InvalidArgumentError("weekdays", "at least one day of the week is required")

    start, end = to_datetime(start), to_datetime(end)
    if not start < end:
        raise OrderingError(start, end)

    current = get_start_of_day(start)
    last = get_start_of_day(end)
    matches: List[datetime] = []
    while current <= last:
        if DayOfWeek.of(current) in days:
            matches.append(current)
        current += ONE_DAY
    return matches
