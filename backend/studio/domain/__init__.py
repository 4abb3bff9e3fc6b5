from studio.domain.dates import DateRange, derive_range, overlaps, to_calendar_date
from studio.domain.models import (
    Assignment,
    BookedAssignment,
    ConflictingBooking,
    ConflictReport,
    CrewShortfall,
    DayDraft,
    DayRequirement,
    Event,
    EventExclusion,
    EventSchedule,
    Person,
    PersonAvailability,
    PersonSource,
    Role,
)

__all__ = [
    "Assignment",
    "BookedAssignment",
    "ConflictingBooking",
    "ConflictReport",
    "CrewShortfall",
    "DateRange",
    "DayDraft",
    "DayRequirement",
    "Event",
    "EventExclusion",
    "EventSchedule",
    "Person",
    "PersonAvailability",
    "PersonSource",
    "Role",
    "derive_range",
    "overlaps",
    "to_calendar_date",
]
