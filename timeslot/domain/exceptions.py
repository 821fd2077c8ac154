"""
Domain-specific exception hierarchy for the timeslot package.
"""


class TimeslotError(Exception):
    """Base class for all timeslot errors."""


class InvalidInstantError(TimeslotError, ValueError):
    """Raised when a value cannot be turned into an instant."""

    requirement = "The instant must be an instance of datetime or a valid datetime string"

    def __init__(self, value: object) -> None:
        super().__init__(f"{self.requirement}, got {type(value).__name__}.")
        self.value = value


class InvalidStartError(InvalidInstantError):
    """Raised when the start of a timeslot is not a recognised instant."""

    requirement = "The start time must be an instance of datetime or a valid datetime string"


class InvalidDurationError(TimeslotError, ValueError):
    """Raised when hours or minutes are not non-negative integers."""
