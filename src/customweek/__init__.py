"""Week numbers under configurable week rules.

A :class:`WeekSpecification` names the first day of the week and the minimum
number of days the first week of a year must hold. The functions in
:mod:`customweek.calculator` classify dates into (week-year, week-number) and
back. See :mod:`customweek.frames` for pandas helpers.
"""

from .calculator import (
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
from .errors import CustomWeekError, InvalidSpecification, OutOfRange
from .specification import PRESETS, Weekday, WeekSpecification

__all__ = [
    "CustomWeekError",
    "InvalidSpecification",
    "OutOfRange",
    "PRESETS",
    "Weekday",
    "WeekSpecification",
    "WeekYearWeek",
    "anchor_date",
    "date_of",
    "first_day_of_week_year",
    "last_day_of_week_year",
    "num_weeks",
    "week_from",
    "week_of",
    "week_start",
]
