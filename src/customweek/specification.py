"""Week definitions: which weekday starts a week and how long week 1 must be."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, Dict, Union

from .errors import InvalidSpecification


class Weekday(str, Enum):
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @property
    def num_days_from_monday(self) -> int:
        return _ORDER.index(self)

    @classmethod
    def of(cls, day: date) -> "Weekday":
        """Weekday of a calendar date."""
        return _ORDER[day.weekday()]

    @classmethod
    def parse(cls, value: Union[str, "Weekday"]) -> "Weekday":
        """Accept a member, a full day name or a three letter abbreviation (any case)."""
        if isinstance(value, Weekday):
            return value
        if not isinstance(value, str):
            raise InvalidSpecification(value, message=f"Not a weekday: {value!r}")
        key = value.strip().lower()
        for member in _ORDER:
            if key == member.value or (len(key) == 3 and member.value.startswith(key)):
                return member
        raise InvalidSpecification(value, message=f"Not a weekday: {value!r}")


_ORDER = tuple(Weekday)

MIN_DAYS = 1
MAX_DAYS = 7


@dataclass(frozen=True)
class WeekSpecification:
    """A week rule.

    ``first_day`` is the weekday a week starts on. ``min_days_in_first_week`` is
    how many days of a year the first week of that year has to contain; the
    week-year of any week is therefore the calendar year of its
    ``min_days_in_first_week``-th day.
    """

    first_day: Weekday
    min_days_in_first_week: int

    def __post_init__(self) -> None:
        if not isinstance(self.first_day, Weekday):
            raise InvalidSpecification(
                self.first_day, message=f"first_day must be a Weekday, got {self.first_day!r}"
            )
        days = self.min_days_in_first_week
        if isinstance(days, bool) or not isinstance(days, int):
            raise InvalidSpecification(
                days, message=f"min_days_in_first_week must be an int, got {days!r}"
            )
        if not MIN_DAYS <= days <= MAX_DAYS:
            raise InvalidSpecification(days, MIN_DAYS, MAX_DAYS)

    # --- Presets ---

    @classmethod
    def iso(cls) -> "WeekSpecification":
        """ISO-8601 weeks: Monday start, the first week holds January 4th."""
        return cls(Weekday.MONDAY, 4)

    @classmethod
    def regional_theater_week(cls) -> "WeekSpecification":
        """Cinema release weeks, running Wednesday to Tuesday."""
        return cls(Weekday.WEDNESDAY, 4)

    @classmethod
    def sunday_start(cls) -> "WeekSpecification":
        """Sunday start, the first week holds January 1st."""
        return cls(Weekday.SUNDAY, 1)

    @classmethod
    def from_preset(cls, name: str) -> "WeekSpecification":
        try:
            factory = PRESETS[name.strip().lower()]
        except KeyError:
            raise InvalidSpecification(
                name, message=f"Unknown preset {name!r} (expected one of {', '.join(PRESETS)})"
            ) from None
        return factory()

    # --- Position of a weekday inside the week ---

    def num_days_from_first_day(self, weekday: Weekday) -> int:
        """0-based position of ``weekday`` in this week (0 for ``first_day``)."""
        return (weekday.num_days_from_monday - self.first_day.num_days_from_monday) % 7

    def number_from_first_day(self, weekday: Weekday) -> int:
        """1-based position of ``weekday`` in this week."""
        return 1 + self.num_days_from_first_day(weekday)

    def __str__(self) -> str:
        return f"{self.first_day.value}/{self.min_days_in_first_week}"


PRESETS: Dict[str, Callable[[], WeekSpecification]] = {
    "iso": WeekSpecification.iso,
    "theater": WeekSpecification.regional_theater_week,
    "sunday": WeekSpecification.sunday_start,
}
