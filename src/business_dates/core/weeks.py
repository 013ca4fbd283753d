"""
Week numbering module.

Sunday-start week numbers and ISO-8601 week numbers. Both walk forward
one week at a time from the first week of the year; a year has at most
53 weeks so the walk is short.
"""

from datetime import datetime, timedelta

from business_dates.core.periods import (
    MAX_YEAR,
    MIN_YEAR,
    DateLike,
    get_end_of_week,
    get_end_of_week_iso,
    get_start_of_week,
    get_start_of_week_iso,
    get_start_of_year,
    require_in_range,
    to_datetime,
)


ONE_WEEK = timedelta(days=7)


def get_week_in_year(value: DateLike) -> int:
    """
    Get the Sunday-start week number of a date.

    Week 1 begins on the Sunday on or before 1 January.

    Args:
        value: A date in the week.

    Returns:
        1-based week number.
    """
    value = to_datetime(value)
    end_of_week = get_end_of_week(get_start_of_week(get_start_of_year(value)))
    week = 1
    while value > end_of_week:
        end_of_week += ONE_WEEK
        week += 1
    return week


def _first_iso_monday(year: int) -> datetime:
    # The week holding 4 January is always ISO week 1.
    return get_start_of_week_iso(datetime(year, 1, 4))


def get_iso_week_in_year(value: DateLike) -> int:
    """
    Get the ISO-8601 week number of a date.

    Dates before the Monday of ISO week 1 (e.g. 1-2 January 2005) belong
    to the last ISO week of the previous year. Dates in the last days of
    December that ISO assigns to week 1 of the next year are counted as
    week 53 of their own year.

    Args:
        value: A date in the week.

    Returns:
        1-based ISO week number.
    """
    value = to_datetime(value)
    start_of_week = _first_iso_monday(value.year)

    if value < start_of_week:
        return get_iso_week_in_year(datetime(value.year - 1, 12, 31))

    end_of_week = get_end_of_week_iso(start_of_week)
    week = 1
    while value > end_of_week:
        end_of_week += ONE_WEEK
        week += 1
    return week


def get_start_of_iso_week_in_year(week: int, year: int) -> datetime:
    """
    Get the Monday starting an ISO week.

    Args:
        week: ISO week number, 1..53.
        year: Calendar year, 1..9999.

    Returns:
        Midnight of the Monday of that week.

    Raises:
        OutOfRangeError: If week or year is out of bounds.
    """
    require_in_range("week", week, 1, 53)
    require_in_range("year", year, MIN_YEAR, MAX_YEAR)
    return _first_iso_monday(year) + (week - 1) * ONE_WEEK


def get_iso_weeks_in_year(year: int) -> int:
    """Number of ISO weeks in a year (52 or 53)."""
    require_in_range("year", year, MIN_YEAR, MAX_YEAR)
    # 28 December always falls in the last ISO week of its year.
    return get_iso_week_in_year(datetime(year, 12, 28))
