"""Core domain entities represented as immutable dataclasses.

Each model is intentionally lightweight and independent of any
persistence concerns. Stores build them from rows; the services only read
them.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Self

from studio.domain.dates import DateRange, derive_range


class Role(str, Enum):
    """Crew roles as stored on assignments."""

    PHOTOGRAPHER = "Photographer"
    CINEMATOGRAPHER = "Cinematographer"
    EDITOR = "Editor"
    DRONE_PILOT = "Drone Pilot"
    SAME_DAY_EDITOR = "Same Day Editor"


class PersonSource(str, Enum):
    STAFF = "staff"
    FREELANCER = "freelancer"


@dataclass(frozen=True)
class EventSchedule:
    """Date fields of an event.

    Example:
        >>> EventSchedule(start_date=date(2024, 1, 10), total_days=3)
    """

    start_date: date
    end_date: date | None = None
    total_days: int | None = 1

    @property
    def date_range(self) -> DateRange:
        return derive_range(self)


@dataclass(frozen=True)
class Event:
    """A scheduled booking for a firm.

    Example:
        >>> Event(
        ...     id="evt_1",
        ...     firm_id="firm_1",
        ...     title="Sharma Wedding",
        ...     start_date=date(2024, 1, 10),
        ...     total_days=3,
        ... )
    """

    id: str
    firm_id: str
    title: str
    start_date: date
    end_date: date | None = None
    total_days: int | None = 1

    @property
    def schedule(self) -> EventSchedule:
        return EventSchedule(
            start_date=self.start_date,
            end_date=self.end_date,
            total_days=self.total_days,
        )

    @property
    def date_range(self) -> DateRange:
        return derive_range(self)


@dataclass(frozen=True)
class Assignment:
    """One person bound to one event, role and day.

    Exactly one of ``staff_id`` and ``freelancer_id`` is set.

    Example:
        >>> Assignment(
        ...     event_id="evt_1",
        ...     role=Role.PHOTOGRAPHER,
        ...     day_number=1,
        ...     day_date=date(2024, 1, 10),
        ...     staff_id="stf_1",
        ... )
    """

    event_id: str
    role: str
    day_number: int | None = None
    day_date: date | None = None
    staff_id: str | None = None
    freelancer_id: str | None = None

    def __post_init__(self) -> None:
        if bool(self.staff_id) == bool(self.freelancer_id):
            raise ValueError(
                "Assignment needs exactly one of staff_id or freelancer_id"
            )
        if isinstance(self.role, Role):
            object.__setattr__(self, "role", self.role.value)

    @property
    def person_id(self) -> str:
        return self.staff_id or self.freelancer_id  # type: ignore[return-value]

    def references(self, person_id: str) -> bool:
        return person_id in (self.staff_id, self.freelancer_id)


@dataclass(frozen=True)
class BookedAssignment:
    """An assignment joined with the schedule of its parent event."""

    assignment: Assignment
    schedule: EventSchedule

    @property
    def date_range(self) -> DateRange:
        return self.schedule.date_range


@dataclass(frozen=True)
class Person:
    """Staff member or freelancer who can be put on an event.

    Example:
        >>> Person(
        ...     id="stf_1",
        ...     name="Asha",
        ...     role="Photographer",
        ...     firm_id="firm_1",
        ... )
    """

    id: str
    name: str
    role: str
    firm_id: str
    source: PersonSource = PersonSource.STAFF
    mobile_number: str | None = None


@dataclass(frozen=True)
class EventExclusion:
    """Events whose assignments must not count as conflicts.

    Used while editing an event so its own saved assignments are ignored.
    """

    event_ids: frozenset[str] = frozenset()
    predicate: Callable[[str], bool] | None = field(default=None, compare=False)

    @classmethod
    def of(cls, *event_ids: str | None) -> Self:
        return cls(event_ids=frozenset(e for e in event_ids if e))

    @classmethod
    def coerce(cls, value: EventExclusion | str | Iterable[str] | None) -> EventExclusion:
        if value is None:
            return cls()
        if isinstance(value, EventExclusion):
            return value
        if isinstance(value, str):
            return cls.of(value)
        return cls.of(*value)

    def __bool__(self) -> bool:
        return bool(self.event_ids) or self.predicate is not None

    def excludes(self, event_id: str) -> bool:
        if event_id in self.event_ids:
            return True
        return bool(self.predicate and self.predicate(event_id))


@dataclass(frozen=True)
class ConflictingBooking:
    """An overlapping booking that makes a person unavailable."""

    event_id: str
    event_title: str | None
    role: str
    date_range: DateRange


@dataclass(frozen=True)
class ConflictReport:
    has_conflict: bool = False
    conflicts: tuple[ConflictingBooking, ...] = ()

    @classmethod
    def from_conflicts(cls, conflicts: Iterable[ConflictingBooking]) -> Self:
        items = tuple(conflicts)
        return cls(has_conflict=bool(items), conflicts=items)


@dataclass(frozen=True)
class PersonAvailability:
    person: Person
    is_available: bool
    conflicts: ConflictReport | None = None


@dataclass(frozen=True)
class DayRequirement:
    """Crew a quotation asks for on one day."""

    photographers: int = 0
    cinematographers: int = 0
    drone: int = 0
    same_day_editors: int = 0


@dataclass(frozen=True)
class CrewShortfall:
    """A role on a day with fewer people assigned than required."""

    day_number: int
    role: Role
    required: int
    assigned: int

    @property
    def missing(self) -> int:
        return self.required - self.assigned


@dataclass(frozen=True)
class DayDraft:
    """Unsaved per-day crew selection from the event form."""

    day: int
    photographer_ids: tuple[str, ...] = ()
    cinematographer_ids: tuple[str, ...] = ()
    drone_pilot_id: str = ""
    same_day_editor_ids: tuple[str, ...] = ()
