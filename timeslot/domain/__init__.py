"""
Domain layer - The Timeslot value type and its errors, free of I/O.
"""

from .exceptions import (
    InvalidDurationError,
    InvalidInstantError,
    InvalidStartError,
    TimeslotError,
)
from .timeslot import Timeslot, TimeslotLike, resolve_instant

__all__ = [
    "InvalidDurationError",
    "InvalidInstantError",
    "InvalidStartError",
    "Timeslot",
    "TimeslotError",
    "TimeslotLike",
    "resolve_instant",
]
