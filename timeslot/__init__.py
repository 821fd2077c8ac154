"""
Timeslot - fixed-duration intervals of calendar time.
"""

from .domain import (
    InvalidDurationError,
    InvalidInstantError,
    InvalidStartError,
    Timeslot,
    TimeslotError,
)

__version__ = "1.0.0"

__all__ = [
    "InvalidDurationError",
    "InvalidInstantError",
    "InvalidStartError",
    "Timeslot",
    "TimeslotError",
    "__version__",
]
