"""
The Timeslot value type.

A timeslot pairs a start instant with a duration expressed in hours and
minutes. Its end is derived and always lies one second before the next
boundary, so a slot and the slot after it never overlap:

    10:00:00 - 10:59:59 | 11:00:00 - 11:59:59 | 12:00:00 - 12:59:59

Slots are frozen. ``round``, ``after`` and ``before`` all return new
instances, and pendulum instants are immutable, so slots can be shared
freely between readers.
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from datetime import datetime, tzinfo
from typing import Dict, Optional, Protocol, Union

import pendulum
from pendulum import DateTime, Duration

from .exceptions import InvalidDurationError, InvalidInstantError, InvalidStartError

StartInput = Union[datetime, str, None]
TimezoneInput = Union[str, tzinfo, None]


class TimeslotLike(Protocol):
    """Anything exposing a start instant and an hours/minutes duration."""

    start: DateTime
    hours: int
    minutes: int


def resolve_instant(value: StartInput, tz: TimezoneInput = None) -> DateTime:
    """
    Turn a start argument into a pendulum DateTime.

    Args:
        value: ``None`` for the current instant, a datetime, or a string
            pendulum can parse.
        tz: Timezone used for ``now``, for parsing and for naive datetimes.
            Defaults to the local timezone. Aware datetimes keep their own.

    Raises:
        InvalidStartError: If the value is of any other type, or a string
            that does not describe a point in time.
        pendulum.parsing.exceptions.ParserError: If the string is not parseable.
    """
    zone = pendulum.local_timezone() if tz is None else tz

    if value is None:
        return pendulum.now(zone)

    if isinstance(value, datetime):
        return pendulum.instance(value, tz=zone)

    if isinstance(value, str):
        parsed = pendulum.parse(value, tz=zone)
        # Durations and intervals are valid ISO 8601 too
        if isinstance(parsed, DateTime):
            return parsed

    raise InvalidStartError(value)


def _check_duration(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidDurationError(f"{name} must be a non-negative integer, got {value!r}")


@dataclass(frozen=True)
class Timeslot:
    """
    An interval of calendar time with a fixed duration.

    If no start is given the slot begins at the current minute. The
    seconds of the start are always zeroed, and ``end`` is
    ``start + hours + minutes - 1 second``.

    Examples:
        >>> slot = Timeslot("2024-01-01 10:15:30", hours=2, minutes=30)
        >>> str(slot)
        '2024-01-01 10:15:00 - 2024-01-01 12:44:59'
    """

    # Resolved to a DateTime in __post_init__
    start: DateTime = None  # type: ignore[assignment]
    hours: int = 1
    minutes: int = 0
    tz: InitVar[TimezoneInput] = None
    end: DateTime = field(init=False, compare=False)

    def __post_init__(self, tz: TimezoneInput) -> None:
        start = resolve_instant(self.start, tz).set(second=0, microsecond=0)
        _check_duration("hours", self.hours)
        _check_duration("minutes", self.minutes)

        object.__setattr__(self, "start", start)
        object.__setattr__(
            self,
            "end",
            start.add(hours=self.hours, minutes=self.minutes).subtract(seconds=1),
        )

    @classmethod
    def create(
        cls,
        start: StartInput = None,
        hours: int = 1,
        minutes: int = 0,
        tz: TimezoneInput = None,
    ) -> "Timeslot":
        """Alternative constructor that reads well in fluent chains."""
        return cls(start, hours, minutes, tz)

    @classmethod
    def now(cls, tz: TimezoneInput = None) -> "Timeslot":
        """Return the one-hour slot covering the current clock hour."""
        return cls.create(None, tz=tz).round()

    @classmethod
    def after(cls, timeslot: TimeslotLike) -> "Timeslot":
        """
        Return a slot of the same duration starting right where ``timeslot`` ends.

        Only the public ``start``, ``hours`` and ``minutes`` of the argument
        are read.
        """
        hours, minutes = timeslot.hours, timeslot.minutes
        start = timeslot.start.add(hours=hours).add(minutes=minutes)
        return cls(start, hours, minutes)

    @classmethod
    def before(cls, timeslot: TimeslotLike) -> "Timeslot":
        """Return a slot of the same duration ending right where ``timeslot`` starts."""
        hours, minutes = timeslot.hours, timeslot.minutes
        start = timeslot.start.subtract(hours=hours).subtract(minutes=minutes)
        return cls(start, hours, minutes)

    def round(self) -> "Timeslot":
        """
        Align the slot to the start of its current clock hour.

        Only the minutes are zeroed; the duration is kept, so a 2h30m slot
        starting at 10:15 becomes 10:00:00 - 12:29:59.
        """
        return type(self)(self.start.set(minute=0), self.hours, self.minutes)

    @property
    def duration(self) -> Duration:
        return pendulum.duration(hours=self.hours, minutes=self.minutes)

    def has(self, instant: Union[datetime, str]) -> bool:
        """
        Check whether an instant falls within the slot.

        Both ``start`` and ``end`` count as inside. Naive datetimes and
        strings without an offset are read in the slot's own timezone.
        """
        if not isinstance(instant, (datetime, str)):
            raise InvalidInstantError(instant)

        moment = resolve_instant(instant, self.start.tzinfo)
        return self.start <= moment <= self.end

    def __contains__(self, instant: Union[datetime, str]) -> bool:
        return self.has(instant)

    def to_dict(self) -> Dict[str, DateTime]:
        """Return the start and end instants as a mapping."""
        return {
            "start": self.start,
            "end": self.end,
        }

    def format_display(
        self,
        datetime_format: str = "DD.MM.YYYY HH:mm",
        locale: Optional[str] = None,
    ) -> str:
        """
        Format the slot for display.
        Format: Weekday, <start> - <end> (Xh YYm)
        """
        weekday = self.start.format("dddd", locale=locale)
        start_str = self.start.format(datetime_format, locale=locale)
        end_str = self.end.format(datetime_format, locale=locale)

        return f"{weekday}, {start_str} - {end_str} ({self.hours}h {self.minutes:02d}m)"

    def __str__(self) -> str:
        return f"{self.start.to_datetime_string()} - {self.end.to_datetime_string()}"
