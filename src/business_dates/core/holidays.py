"""
Holidays calculation module.

Handles Danish public holidays: Easter (Meeus/Jones/Butcher algorithm),
holidays at a fixed offset from Easter Sunday, and holidays on a fixed
month and day.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from business_dates.core.periods import DateLike, get_start_of_day, now, require_in_range


@dataclass(frozen=True)
class MonthDay:
    """A month and day that recur every year."""
    month: int
    day: int

    def __post_init__(self) -> None:
        require_in_range("month", self.month, 1, 12)
        require_in_range("day", self.day, 1, 31)

    def in_year(self, year: int) -> datetime:
        """
        Get this month and day in a given year, at midnight.

        Raises:
            ValueError: If the day does not exist in that year (29 February).
        """
        return datetime(year, self.month, self.day)


# Days relative to Easter Sunday.
EASTER_RELATIVE_HOLIDAYS: Mapping[str, int] = MappingProxyType({
    "Fastelavn": -49,
    "Palmesøndag": -7,
    "Skærtorsdag": -3,
    "Langfredag": -2,
    "Påskedag": 0,
    "2. påskedag": 1,
    "Store Bededag": 26,
    "Kristi Himmelfart": 39,
    "Pinsedag": 49,
    "2. pinsedag": 50,
})

FIXED_HOLIDAYS: Mapping[str, MonthDay] = MappingProxyType({
    "Juleaften": MonthDay(12, 24),
    "1. juledag": MonthDay(12, 25),
    "2. juledag": MonthDay(12, 26),
    "Nytårsaftensdag": MonthDay(1, 1),
    "Grundlovsdag": MonthDay(6, 5),
})


@lru_cache(maxsize=32)
def get_easter(year: int) -> datetime:
    """
    Calculate Easter Sunday using the Meeus/Jones/Butcher algorithm.

    Args:
        year: The Gregorian calendar year.

    Returns:
        Midnight of Easter Sunday.
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1

    return datetime(year, month, day)


def get_easter_dependent_holidays(year: int) -> Dict[str, datetime]:
    """Get the holidays defined as an offset from Easter Sunday."""
    easter = get_easter(year)
    return {
        name: easter + timedelta(days=offset)
        for name, offset in EASTER_RELATIVE_HOLIDAYS.items()
    }


def get_fixed_holidays(year: int) -> Dict[str, datetime]:
    """Get the holidays that fall on the same month and day every year."""
    return {name: month_day.in_year(year) for name, month_day in FIXED_HOLIDAYS.items()}


def get_danish_holidays(year: Optional[int] = None) -> Dict[str, datetime]:
    """
    Get all Danish holidays of a year, keyed by name.

    The two source tables share no names. Should they ever do, which entry
    wins is undefined.

    Args:
        year: The calendar year. Defaults to the current year.

    Returns:
        New dict of holiday name to midnight of the holiday.
    """
    if year is None:
        year = now().year

    holidays = get_easter_dependent_holidays(year)
    holidays.update(get_fixed_holidays(year))
    return holidays


def get_holiday_name(value: DateLike) -> Optional[str]:
    """Get the name of the Danish holiday on a date, or None."""
    day = get_start_of_day(value)
    for name, holiday in get_danish_holidays(day.year).items():
        if holiday == day:
            return name
    return None


def is_danish_holiday(value: DateLike) -> bool:
    """Check if a date is a Danish holiday."""
    return get_holiday_name(value) is not None
