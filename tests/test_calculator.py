"""Tests for week classification and week start reconstruction."""

from datetime import date, timedelta

import pytest

from customweek.calculator import (
    WeekYearWeek,
    anchor_date,
    date_of,
    first_day_of_week_year,
    last_day_of_week_year,
    num_weeks,
    week_from,
    week_of,
    week_start,
)
from customweek.errors import OutOfRange
from customweek.specification import Weekday, WeekSpecification


class TestWeekOf:
    """Tests for week_of on known dates."""

    def test_iso_first_monday_of_2017(self, iso):
        week = week_of(date(2017, 1, 2), iso)
        assert (week.week_year, week.week_number) == (2017, 1)
        assert week.week_start == date(2017, 1, 2)

    def test_iso_new_year_day_in_previous_week_year(self, iso):
        week = week_of(date(2017, 1, 1), iso)
        assert (week.week_year, week.week_number) == (2016, 52)

    def test_iso_late_december_in_next_week_year(self, iso):
        week = week_of(date(2019, 12, 30), iso)
        assert (week.week_year, week.week_number) == (2020, 1)

    def test_theater_early_january_in_week_53(self, theater):
        week = week_of(date(2017, 1, 3), theater)
        assert week.week_year == 2016
        assert week.week_number == 53
        assert week.week0 == 52
        assert week.week_start == date(2016, 12, 28)
        assert week.specification == theater

    def test_sunday_start_week_containing_new_year(self):
        spec = WeekSpecification.sunday_start()
        week = week_of(date(2022, 1, 1), spec)
        assert (week.week_year, week.week_number) == (2022, 1)
        assert week.week_start == date(2021, 12, 26)

    def test_full_first_week_rule(self):
        spec = WeekSpecification(Weekday.MONDAY, 7)
        week = week_of(date(2017, 1, 1), spec)
        assert (week.week_year, week.week_number) == (2016, 52)
        assert week_of(date(2017, 1, 2), spec).week_number == 1

    def test_anchor_date(self, iso, theater):
        # Thursday of an ISO week
        assert anchor_date(date(2016, 12, 26), iso) == date(2016, 12, 29)
        assert anchor_date(date(2016, 12, 28), theater) == date(2016, 12, 31)
        assert anchor_date(date(2021, 12, 26), WeekSpecification.sunday_start()) == date(2022, 1, 1)

    def test_week_start(self, theater):
        assert week_start(date(2017, 1, 3), theater) == date(2016, 12, 28)
        assert week_start(date(2016, 12, 28), theater) == date(2016, 12, 28)


class TestWeekYearBoundaries:
    """Tests for the first/last day and length of week-years."""

    def test_first_day(self, iso, theater):
        assert first_day_of_week_year(2019, iso) == date(2018, 12, 31)
        assert first_day_of_week_year(2019, theater) == date(2019, 1, 2)
        assert first_day_of_week_year(2016, theater) == date(2015, 12, 30)

    def test_last_day(self, iso, theater):
        assert last_day_of_week_year(2019, iso) == date(2019, 12, 29)
        assert last_day_of_week_year(2019, theater) == date(2019, 12, 31)

    def test_num_weeks(self, iso, theater):
        assert num_weeks(2019, iso) == 52
        assert num_weeks(2020, iso) == 53
        assert num_weeks(2019, theater) == 52
        assert num_weeks(2016, theater) == 53


class TestDateOf:
    """Tests for date_of and week_from."""

    def test_theater_first_weeks(self, theater):
        assert date_of(2019, 1, theater) == date(2019, 1, 2)
        assert date_of(2016, 1, theater) == date(2015, 12, 30)

    def test_last_week(self, iso, theater):
        assert date_of(2020, 53, iso) == date(2020, 12, 28)
        assert date_of(2016, 53, theater) == date(2016, 12, 28)

    @pytest.mark.parametrize("week_number", [0, -1, 53, 54])
    def test_rejects_missing_weeks(self, iso, week_number):
        with pytest.raises(OutOfRange) as exc_info:
            date_of(2019, week_number, iso)
        assert exc_info.value.value == week_number
        assert (exc_info.value.min, exc_info.value.max) == (1, 52)

    def test_week_from(self, theater):
        week = week_from(2016, 53, theater)
        assert week == week_of(date(2017, 1, 3), theater)

    def test_round_trip(self, theater):
        day = date(2017, 1, 3)
        week = week_of(day, theater)
        assert date_of(week.week_year, week.week_number, theater) == week_start(day, theater)


class TestDateRangeLimits:
    """Computations leaving Python's date range."""

    def test_week_start_before_year_one(self):
        spec = WeekSpecification(Weekday.TUESDAY, 4)
        with pytest.raises(OutOfRange):
            week_of(date(1, 1, 1), spec)

    def test_year_one_monday(self, iso):
        assert week_of(date(1, 1, 1), iso).week_year == 1

    def test_last_representable_day(self, iso):
        week = week_of(date(9999, 12, 31), iso)
        assert week.week_year == 9999

    def test_weeks_of_last_year(self, iso):
        assert num_weeks(9999, iso) == 52
        assert date_of(9999, 1, iso) == date(9999, 1, 4)
        assert date_of(9999, 52, iso) == date(9999, 12, 27)

    def test_last_day_of_last_year_leaves_range(self, iso):
        with pytest.raises(OutOfRange):
            last_day_of_week_year(9999, iso)
        with pytest.raises(OutOfRange):
            last_day_of_week_year(10000, iso)

    def test_week_owned_by_year_after_9999(self):
        spec = WeekSpecification(Weekday.MONDAY, 1)
        week = week_of(date(9999, 12, 31), spec)
        assert (week.week_year, week.week_number) == (10000, 1)
        assert week.week_start == date(9999, 12, 27)
        assert num_weeks(9999, spec) == 52


class TestWeekYearWeek:
    """Tests for succ, pred, contains and formatting."""

    def test_succ_crosses_week_year(self, theater):
        week = week_of(date(2017, 1, 3), theater)
        nxt = week.succ()
        assert (nxt.week_year, nxt.week_number) == (2017, 1)
        assert nxt.week_start == date(2017, 1, 4)
        assert nxt.pred() == week

    def test_contains(self, theater):
        week = week_of(date(2017, 1, 3), theater)
        assert week.contains(date(2016, 12, 28))
        assert week.contains(date(2017, 1, 3))
        assert not week.contains(date(2016, 12, 27))
        assert not week.contains(date(2017, 1, 4))

    def test_days_and_end(self, theater):
        week = week_of(date(2017, 1, 3), theater)
        assert week.days() == [date(2016, 12, 28) + timedelta(days=i) for i in range(7)]
        assert week.week_end == date(2017, 1, 3)

    def test_format(self, theater):
        week = week_of(date(2017, 1, 3), theater)
        assert week.format("Year %Y") == "Year 2016"
        assert week.format("Year %C%y") == "Year 2016"
        assert week.format("Week %W") == "Week 53"
        assert week.format("S%y%W") == "S1653"
        assert str(week) == "2016-W53"

    def test_format_pads(self, iso):
        week = week_of(date(2009, 1, 1), iso)
        assert week.format("%y/%W") == "09/01"

    def test_is_a_value(self, iso):
        assert week_of(date(2017, 1, 2), iso) == week_of(date(2017, 1, 8), iso)
        assert week_of(date(2017, 1, 2), iso) == WeekYearWeek(2017, 1, date(2017, 1, 2), iso)
        assert week_of(date(2017, 1, 2), iso) != week_of(date(2017, 1, 9), iso)
