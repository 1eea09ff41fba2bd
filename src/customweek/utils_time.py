from datetime import date, datetime, timedelta
from typing import Iterator, Union


def parse_date(value: Union[str, date, datetime]) -> date:
    """Accept a date, a datetime (time of day is dropped) or an ISO ``YYYY-MM-DD`` string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip())


def daterange(start: date, end: date) -> Iterator[date]:
    """Every day from ``start`` to ``end``, both included."""
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)
