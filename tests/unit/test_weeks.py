"""
Tests for Week Numbering.

Tests Sunday-start and ISO-8601 week numbers.
"""

from datetime import date, datetime, timedelta

import pytest

from business_dates.core.exceptions import OutOfRangeError
from business_dates.core.weeks import (
    get_iso_week_in_year,
    get_iso_weeks_in_year,
    get_start_of_iso_week_in_year,
    get_week_in_year,
)


def _days(first: date, last: date):
    current = first
    while current <= last:
        yield current
        current += timedelta(days=1)


class TestGetIsoWeekInYear:
    """Tests for get_iso_week_in_year function."""

    def test_week_43_of_2010(self):
        assert get_iso_week_in_year(datetime(2010, 10, 27)) == 43

    def test_week_38_of_2012(self):
        assert get_iso_week_in_year(datetime(2012, 9, 18)) == 38

    def test_first_day_of_week_one(self):
        # 4 January 2010 is a Monday
        assert get_iso_week_in_year(datetime(2010, 1, 4)) == 1
        assert get_iso_week_in_year(datetime(2010, 1, 3, 23, 59)) == 53

    def test_early_january_belongs_to_previous_year(self):
        """1-2 January 2005 are in the last ISO week of 2004."""
        assert get_iso_week_in_year(date(2005, 1, 1)) == 53
        assert get_iso_week_in_year(date(2005, 1, 2)) == 53
        assert get_iso_week_in_year(date(2005, 1, 3)) == 1

    def test_late_december_counted_in_own_year(self):
        """29 December 2008 is ISO 2009-W01 but is numbered within 2008."""
        assert get_iso_week_in_year(date(2008, 12, 29)) == 53

    def test_time_of_day_does_not_change_week(self):
        assert get_iso_week_in_year(datetime(2010, 10, 31, 23, 59, 59, 999999)) == 43

    def test_matches_isocalendar_within_own_or_previous_year(self):
        for day in _days(date(2000, 1, 1), date(2030, 12, 31)):
            iso_year, iso_week, _ = day.isocalendar()
            if iso_year <= day.year:
                assert get_iso_week_in_year(day) == iso_week, day


class TestGetStartOfIsoWeekInYear:
    """Tests for get_start_of_iso_week_in_year function."""

    def test_week_31_of_2010_starts_2_august(self):
        assert get_start_of_iso_week_in_year(31, 2010) == datetime(2010, 8, 2)

    def test_week_one_may_start_in_previous_year(self):
        assert get_start_of_iso_week_in_year(1, 2004) == datetime(2003, 12, 29)

    @pytest.mark.parametrize("week, year", [
        (0, 2010),
        (54, 2010),
        (1, 0),
        (1, 10000),
    ])
    def test_out_of_range(self, week, year):
        with pytest.raises(OutOfRangeError):
            get_start_of_iso_week_in_year(week, year)

    def test_round_trip(self, sample_dates):
        for value in sample_dates:
            if value.isocalendar()[0] != value.year:
                continue
            start = get_start_of_iso_week_in_year(get_iso_week_in_year(value), value.year)
            assert start <= value < start + timedelta(days=7)


class TestGetIsoWeeksInYear:
    """Tests for get_iso_weeks_in_year function."""

    @pytest.mark.parametrize("year, weeks", [
        (2004, 53),
        (2009, 53),
        (2010, 52),
        (2015, 53),
        (2020, 53),
        (2021, 52),
    ])
    def test_weeks_in_year(self, year, weeks):
        assert get_iso_weeks_in_year(year) == weeks


class TestGetWeekInYear:
    """Tests for get_week_in_year function."""

    def test_first_of_january_is_week_one(self):
        assert get_week_in_year(date(2010, 1, 1)) == 1

    def test_first_sunday_starts_week_two(self):
        # 1 January 2010 is a Friday, 3 January a Sunday
        assert get_week_in_year(date(2010, 1, 2)) == 1
        assert get_week_in_year(date(2010, 1, 3)) == 2

    def test_week_44_of_2010(self):
        assert get_week_in_year(datetime(2010, 10, 27, 12)) == 44

    @pytest.mark.parametrize("year", [2010, 2012, 2017, 2023])
    def test_matches_strftime_sunday_weeks(self, year):
        # %U counts days before the first Sunday as week 0
        offset = 0 if date(year, 1, 1).weekday() == 6 else 1
        for day in _days(date(year, 1, 1), date(year, 12, 31)):
            assert get_week_in_year(day) == int(day.strftime("%U")) + offset, day
