"""
Period boundaries module.

Start and end of minute, day, week, ISO week, month and year.
Every function returns a new naive datetime; inputs are never modified.
A plain ``date`` is accepted wherever a datetime is and is read as midnight.
"""

import calendar
from datetime import date, datetime, time, timedelta
from enum import IntEnum
from typing import Union

from business_dates.core.exceptions import OutOfRangeError


DateLike = Union[date, datetime]

MIN_YEAR = 1
MAX_YEAR = 9999

# Upper bound for any day number, independent of the month.
MAX_DAY = 366


class DayOfWeek(IntEnum):
    """Day of the week, numbered from Sunday = 0."""
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def of(cls, value: DateLike) -> "DayOfWeek":
        """Get the day of the week of a date."""
        return cls((value.weekday() + 1) % 7)

    @property
    def iso_number(self) -> int:
        """ISO-8601 number: Monday = 1 ... Sunday = 7."""
        return 7 if self is DayOfWeek.SUNDAY else int(self)


WORK_WEEK = frozenset({
    DayOfWeek.MONDAY,
    DayOfWeek.TUESDAY,
    DayOfWeek.WEDNESDAY,
    DayOfWeek.THURSDAY,
    DayOfWeek.FRIDAY,
})


def now() -> datetime:
    """Get the current local datetime (naive)."""
    return datetime.now()


def to_datetime(value: DateLike) -> datetime:
    """Promote a date to a datetime at midnight; datetimes pass through."""
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def require_in_range(field: str, value: int, low: int, high: int) -> None:
    """
    Check an integer component against inclusive bounds.

    Raises:
        OutOfRangeError: If value is outside [low, high].
    """
    if not low <= value <= high:
        raise OutOfRangeError(field, value, low, high)


# =============================================================================
# Minute / Day
# =============================================================================

def get_start_of_minute(value: DateLike) -> datetime:
    """Zero the seconds and microseconds of a datetime."""
    return to_datetime(value).replace(second=0, microsecond=0)


def get_end_of_minute(value: DateLike) -> datetime:
    """Maximize the seconds and microseconds of a datetime."""
    return to_datetime(value).replace(second=59, microsecond=999999)


def get_start_of_day(value: DateLike) -> datetime:
    """Get midnight of the day represented by value."""
    return datetime.combine(to_datetime(value).date(), time.min)


def get_start_of_day_for(year: int, month: int, day: int) -> datetime:
    """
    Get midnight of the day given by its components.

    The day is only checked against 1..366; a day that does not exist in
    the month (e.g. 30 February) fails in the datetime constructor.

    Raises:
        OutOfRangeError: If year, month or day is out of bounds.
        ValueError: If the components do not form a calendar date.
    """
    _require_components(year, month, day)
    return datetime(year, month, day)


def get_end_of_day(value: DateLike) -> datetime:
    """Get the last instant of the day represented by value."""
    return datetime.combine(to_datetime(value).date(), time.max)


def get_end_of_day_for(year: int, month: int, day: int) -> datetime:
    """
    Get the last instant of the day given by its components.

    Raises:
        OutOfRangeError: If year, month or day is out of bounds.
        ValueError: If the components do not form a calendar date.
    """
    _require_components(year, month, day)
    return datetime.combine(date(year, month, day), time.max)


def _require_components(year: int, month: int, day: int) -> None:
    require_in_range("year", year, MIN_YEAR, MAX_YEAR)
    require_in_range("month", month, 1, 12)
    require_in_range("day", day, 1, MAX_DAY)


# =============================================================================
# Week
# =============================================================================

def get_start_of_week(value: DateLike) -> datetime:
    """Get the Sunday on or before value, at midnight."""
    start = get_start_of_day(value)
    return start - timedelta(days=int(DayOfWeek.of(start)))


def get_end_of_week(value: DateLike) -> datetime:
    """Get the end of the Saturday closing the Sunday-start week of value."""
    return get_end_of_day(get_start_of_week(value) + timedelta(days=6))


def get_start_of_week_iso(value: DateLike) -> datetime:
    """Get the Monday on or before value, at midnight."""
    start = get_start_of_day(value)
    return start - timedelta(days=DayOfWeek.of(start).iso_number - 1)


def get_end_of_week_iso(value: DateLike) -> datetime:
    """Get the end of the Sunday closing the ISO week of value."""
    return get_end_of_day(get_start_of_week_iso(value) + timedelta(days=6))


# =============================================================================
# Month
# =============================================================================

def get_start_of_month(value: DateLike) -> datetime:
    """Get midnight of the first day of the month of value."""
    return datetime(value.year, value.month, 1)


def get_start_of_month_for(year: int, month: int) -> datetime:
    """
    Get midnight of the first day of a month.

    Raises:
        OutOfRangeError: If year or month is out of bounds.
    """
    require_in_range("year", year, MIN_YEAR, MAX_YEAR)
    require_in_range("month", month, 1, 12)
    return datetime(year, month, 1)


def get_end_of_month(value: DateLike) -> datetime:
    """Get the last instant of the month of value (leap-year aware)."""
    return get_end_of_month_for(value.year, value.month)


def get_end_of_month_for(year: int, month: int) -> datetime:
    """
    Get the last instant of a month.

    Raises:
        OutOfRangeError: If year or month is out of bounds.
    """
    require_in_range("year", year, MIN_YEAR, MAX_YEAR)
    require_in_range("month", month, 1, 12)
    days_in_month = calendar.monthrange(year, month)[1]
    return datetime.combine(date(year, month, days_in_month), time.max)


# =============================================================================
# Year
# =============================================================================

def get_start_of_year(value: DateLike) -> datetime:
    """Get midnight of 1 January of the year of value."""
    return datetime(value.year, 1, 1)


def get_start_of_year_for(year: int) -> datetime:
    """Get midnight of 1 January of a year."""
    require_in_range("year", year, MIN_YEAR, MAX_YEAR)
    return datetime(year, 1, 1)


def get_end_of_year(value: DateLike) -> datetime:
    """Get the last instant of 31 December of the year of value."""
    return get_end_of_year_for(value.year)


def get_end_of_year_for(year: int) -> datetime:
    """Get the last instant of 31 December of a year."""
    require_in_range("year", year, MIN_YEAR, MAX_YEAR)
    return datetime.combine(date(year, 12, 31), time.max)
