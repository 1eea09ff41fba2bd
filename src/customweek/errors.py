"""Exceptions raised by the week calculations."""

from typing import Optional


class CustomWeekError(Exception):
    """Base class for every error raised by customweek."""


class _RangeError(CustomWeekError, ValueError):
    def __init__(
        self,
        value: object,
        min: Optional[int] = None,
        max: Optional[int] = None,
        message: Optional[str] = None,
    ) -> None:
        self.value = value
        self.min = min
        self.max = max
        if message is None:
            message = f"{value} value is out of range (min: {min} - max: {max})"
        super().__init__(message)


class InvalidSpecification(_RangeError):
    """A week specification was built from invalid parameters."""


class OutOfRange(_RangeError):
    """A requested week (or an intermediate date) does not exist."""
