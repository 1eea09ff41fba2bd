"""Week-year / week-number arithmetic for any :class:`WeekSpecification`.

Every function here is pure: the specification is passed explicitly and the
result depends on nothing else.

A week belongs to the year holding at least ``min_days_in_first_week`` of its
days. That year is the calendar year of the week's *anchor date*, the day
``7 - min_days_in_first_week`` days after the week start (the Thursday of an
ISO week). Week 1 of a year is the week whose anchor falls in January 1..7,
which is always the week containing January ``min_days_in_first_week``, so
locating it takes a single step.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, timedelta
from typing import List

from .errors import OutOfRange
from .specification import Weekday, WeekSpecification
from .utils_time import daterange


def _shift(day: date, days: int) -> date:
    try:
        return day + timedelta(days=days)
    except OverflowError:
        raise OutOfRange(
            day, message=f"{day} shifted by {days} days leaves the supported date range"
        ) from None


def _calendar_day(year: int, month: int, day: int) -> date:
    if not MINYEAR <= year <= MAXYEAR:
        raise OutOfRange(year, MINYEAR, MAXYEAR)
    return date(year, month, day)


def week_start(day: date, spec: WeekSpecification) -> date:
    """First day of the week containing ``day``."""
    return _shift(day, -spec.num_days_from_first_day(Weekday.of(day)))


def anchor_date(start: date, spec: WeekSpecification) -> date:
    """The day whose calendar year owns the week beginning on ``start``."""
    return _shift(start, 7 - spec.min_days_in_first_week)


def first_day_of_week_year(year: int, spec: WeekSpecification) -> date:
    """Start of week 1 of ``year``.

    >>> first_day_of_week_year(2019, WeekSpecification.iso())
    datetime.date(2018, 12, 31)
    >>> first_day_of_week_year(2019, WeekSpecification.regional_theater_week())
    datetime.date(2019, 1, 2)
    """
    return week_start(_calendar_day(year, 1, spec.min_days_in_first_week), spec)


def _anchor_year(start: date, spec: WeekSpecification) -> int:
    try:
        return anchor_date(start, spec).year
    except OutOfRange:
        # the anchor lies past 9999-12-31, within the first days of year 10000
        return start.year + 1


def _last_week_start(year: int, spec: WeekSpecification) -> date:
    # the final week of ``year`` is the one holding December 31st, unless that
    # week already belongs to the next year
    start = week_start(_calendar_day(year, 12, 31), spec)
    if _anchor_year(start, spec) != year:
        start = _shift(start, -7)
    return start


def last_day_of_week_year(year: int, spec: WeekSpecification) -> date:
    """Last day of the final week of ``year``."""
    return _shift(_last_week_start(year, spec), 6)


def num_weeks(year: int, spec: WeekSpecification) -> int:
    """Number of weeks (52 or 53) in week-year ``year``.

    >>> num_weeks(2016, WeekSpecification.regional_theater_week())
    53
    """
    first = first_day_of_week_year(year, spec)
    return (_last_week_start(year, spec) - first).days // 7 + 1


def week_of(day: date, spec: WeekSpecification) -> "WeekYearWeek":
    """Classify ``day`` into its (week-year, week-number)."""
    start = week_start(day, spec)
    year = _anchor_year(start, spec)
    if year > MAXYEAR:
        # week 1 of year 10000, whose January cannot be represented
        number = 1
    else:
        number = (start - first_day_of_week_year(year, spec)).days // 7 + 1
    return WeekYearWeek(
        week_year=year,
        week_number=number,
        week_start=start,
        specification=spec,
    )


def date_of(week_year: int, week_number: int, spec: WeekSpecification) -> date:
    """First day of week ``week_number`` of ``week_year``.

    Raises :class:`OutOfRange` when the week does not exist in that week-year.
    """
    last = num_weeks(week_year, spec)
    if not 1 <= week_number <= last:
        raise OutOfRange(week_number, 1, last)
    return _shift(first_day_of_week_year(week_year, spec), 7 * (week_number - 1))


def week_from(week_year: int, week_number: int, spec: WeekSpecification) -> "WeekYearWeek":
    return week_of(date_of(week_year, week_number, spec), spec)


@dataclass(frozen=True)
class WeekYearWeek:
    """A week located by its week-year and number under a specification.

    Weeks are not ordered: weeks of different specifications have no natural
    order. ``week_start`` can be recomputed from the other fields; it is kept
    for ``succ``, ``pred`` and ``contains``.
    """

    week_year: int
    week_number: int
    week_start: date
    specification: WeekSpecification

    @property
    def week0(self) -> int:
        """Week number counted from 0."""
        return self.week_number - 1

    @property
    def week_end(self) -> date:
        return self.week_start + timedelta(days=6)

    def days(self) -> List[date]:
        return list(daterange(self.week_start, self.week_end))

    def succ(self) -> "WeekYearWeek":
        """The next week under the same specification."""
        return week_of(_shift(self.week_start, 7), self.specification)

    def pred(self) -> "WeekYearWeek":
        """The previous week under the same specification."""
        return week_of(_shift(self.week_start, -7), self.specification)

    def contains(self, day: date) -> bool:
        return self.week_start <= day < self.week_start + timedelta(days=7)

    def format(self, fmt: str) -> str:
        """Very naive week formatting, after ``strftime``.

        | Spec. | Example | Description                                      |
        |-------|---------|--------------------------------------------------|
        | ``%Y``| ``2001``| The week-year, zero-padded to 4 digits.          |
        | ``%C``| ``20``  | The week-year divided by 100, zero-padded to 2.  |
        | ``%y``| ``01``  | The week-year modulo 100, zero-padded to 2.      |
        | ``%W``| ``27``  | Week number, zero-padded to 2 digits.            |
        """
        return (
            fmt.replace("%Y", f"{self.week_year:04d}")
            .replace("%C", f"{self.week_year // 100:02d}")
            .replace("%y", f"{self.week_year % 100:02d}")
            .replace("%W", f"{self.week_number:02d}")
        )

    def __str__(self) -> str:
        return self.format("%Y-W%W")
