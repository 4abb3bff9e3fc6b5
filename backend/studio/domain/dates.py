"""Calendar-date arithmetic for event windows.

All comparisons happen on :class:`datetime.date` values. Anything carrying a
time of day is normalized to a calendar date first, in the studio timezone
when the value is timezone-aware.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Protocol, Self

import pytz

logger = logging.getLogger(__name__)

DateLike = date | datetime | str


class HasSchedule(Protocol):
    start_date: date
    end_date: date | None
    total_days: int | None


def to_calendar_date(value: DateLike, tz: str | None = None) -> date:
    """Return the calendar date of ``value``.

    Example:
        >>> to_calendar_date("2024-01-10T23:30:00+00:00", tz="Asia/Kolkata")
        datetime.date(2024, 1, 11)
    """
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            value = datetime.fromisoformat(text.replace("Z", "+00:00"))
    if isinstance(value, datetime):
        if value.tzinfo is not None and tz:
            value = value.astimezone(pytz.timezone(tz))
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected a date, datetime or ISO string, got {value!r}")


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar dates.

    Example:
        >>> DateRange(start=date(2024, 1, 10), end=date(2024, 1, 12))
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError("DateRange end cannot be before start")

    @classmethod
    def from_values(
        cls,
        start: DateLike,
        end: DateLike | None = None,
        total_days: int | None = 1,
        tz: str | None = None,
    ) -> Self:
        """Build a range from raw request values, deriving a missing end."""
        return derive_range(
            _Schedule(
                start_date=to_calendar_date(start, tz),
                end_date=to_calendar_date(end, tz) if end else None,
                total_days=total_days,
            )
        )

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    def overlaps(self, other: DateRange) -> bool:
        return overlaps(self, other)

    def __str__(self) -> str:
        return f"{self.start.isoformat()}..{self.end.isoformat()}"


@dataclass(frozen=True)
class _Schedule:
    start_date: date
    end_date: date | None
    total_days: int | None


def overlaps(a: DateRange, b: DateRange) -> bool:
    """True when two inclusive ranges share at least one day."""
    return a.start <= b.end and b.start <= a.end


def derive_range(schedule: HasSchedule) -> DateRange:
    """Derive the effective range of an event from its date fields.

    An explicit end date wins over ``total_days``. A missing or non-positive
    ``total_days`` counts as a single day.
    """
    start = schedule.start_date
    total_days = schedule.total_days if schedule.total_days and schedule.total_days > 0 else 1
    if schedule.end_date is not None:
        end = schedule.end_date
        if end < start:
            logger.debug("End date %s precedes start %s; clamping", end, start)
            end = start
    else:
        end = start + timedelta(days=total_days - 1)
    return DateRange(start=start, end=end)
