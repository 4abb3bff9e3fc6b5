"""Pydantic models used for request and response bodies.

These data transfer objects (DTOs) mirror the domain models but add
validation and serialization helpers for the API layer.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, model_validator

from studio.domain import models
from studio.domain.dates import DateRange


class PersonSchema(BaseModel):
    """Staff member or freelancer offered for a slot.

    Example:
        >>> PersonSchema(id="stf_1", name="Asha", role="Photographer")
    """

    id: str
    name: str
    role: str
    source: models.PersonSource = models.PersonSource.STAFF
    mobile_number: Optional[str] = None

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": "stf_1",
                "name": "Asha",
                "role": "Photographer",
                "source": "staff",
            }
        }

    def to_domain(self, firm_id: str) -> models.Person:
        return models.Person(
            id=self.id,
            name=self.name,
            role=self.role,
            firm_id=firm_id,
            source=self.source,
            mobile_number=self.mobile_number,
        )

    @classmethod
    def from_domain(cls, person: models.Person) -> "PersonSchema":
        return cls(
            id=person.id,
            name=person.name,
            role=person.role,
            source=person.source,
            mobile_number=person.mobile_number,
        )


class DateWindow(BaseModel):
    """Event dates to check, plus events to leave out of the check.

    Example:
        >>> DateWindow(start_date=date(2024, 1, 10), total_days=3)
    """

    start_date: Union[date, datetime]
    end_date: Optional[Union[date, datetime]] = None
    total_days: int = 1
    exclude_event_ids: List[str] = Field(default_factory=list)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "start_date": "2024-01-10",
                "total_days": 3,
                "exclude_event_ids": ["evt_1"],
            }
        }

    def to_range(self, tz: Optional[str] = None) -> DateRange:
        return DateRange.from_values(
            self.start_date, self.end_date, self.total_days, tz=tz
        )

    def exclusion(self) -> models.EventExclusion:
        return models.EventExclusion.of(*self.exclude_event_ids)


class FilterRequest(DateWindow):
    """Candidates to filter for a date window.

    Example:
        >>> FilterRequest(
        ...     start_date=date(2024, 1, 10),
        ...     people=[PersonSchema(id="stf_1", name="Asha", role="Photographer")],
        ...     current_selection="stf_1",
        ... )
    """

    people: List[PersonSchema] = Field(default_factory=list)
    current_selection: Optional[str] = None


class AssignmentSchema(BaseModel):
    """Assignment of one person to an event day."""

    event_id: str
    role: str
    day_number: Optional[int] = None
    day_date: Optional[date] = None
    staff_id: Optional[str] = None
    freelancer_id: Optional[str] = None

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "event_id": "evt_1",
                "role": "Photographer",
                "day_number": 1,
                "day_date": "2024-01-10",
                "staff_id": "stf_1",
            }
        }

    @model_validator(mode="after")
    def _one_person(self) -> "AssignmentSchema":
        if bool(self.staff_id) == bool(self.freelancer_id):
            raise ValueError("exactly one of staff_id or freelancer_id is required")
        return self

    def to_domain(self) -> models.Assignment:
        return models.Assignment(**self.model_dump())

    @classmethod
    def from_domain(cls, assignment: models.Assignment) -> "AssignmentSchema":
        return cls(
            event_id=assignment.event_id,
            role=assignment.role,
            day_number=assignment.day_number,
            day_date=assignment.day_date,
            staff_id=assignment.staff_id,
            freelancer_id=assignment.freelancer_id,
        )


class ConflictingBookingSchema(BaseModel):
    event_id: str
    event_title: Optional[str] = None
    role: str
    start_date: date
    end_date: date

    @classmethod
    def from_domain(cls, booking: models.ConflictingBooking) -> "ConflictingBookingSchema":
        return cls(
            event_id=booking.event_id,
            event_title=booking.event_title,
            role=booking.role,
            start_date=booking.date_range.start,
            end_date=booking.date_range.end,
        )


class ConflictReportSchema(BaseModel):
    """Why a person is unavailable.

    Example:
        >>> ConflictReportSchema(has_conflict=False, conflicts=[])
    """

    has_conflict: bool
    conflicts: List[ConflictingBookingSchema]

    @classmethod
    def from_domain(cls, report: models.ConflictReport) -> "ConflictReportSchema":
        return cls(
            has_conflict=report.has_conflict,
            conflicts=[ConflictingBookingSchema.from_domain(c) for c in report.conflicts],
        )


class AvailabilitySchema(BaseModel):
    person_id: str
    is_available: bool


class PersonAvailabilitySchema(BaseModel):
    person: PersonSchema
    is_available: bool
    conflicts: Optional[ConflictReportSchema] = None

    @classmethod
    def from_domain(cls, item: models.PersonAvailability) -> "PersonAvailabilitySchema":
        return cls(
            person=PersonSchema.from_domain(item.person),
            is_available=item.is_available,
            conflicts=(
                ConflictReportSchema.from_domain(item.conflicts)
                if item.conflicts is not None
                else None
            ),
        )


class CrewCheckRequest(BaseModel):
    """Saved assignments of an event and the quotation it came from.

    Example:
        >>> CrewCheckRequest(
        ...     total_days=1,
        ...     quotation_details={"days": [{"photographers": 2}]},
        ...     assignments=[],
        ... )
    """

    total_days: int = 1
    quotation_details: Optional[Dict[str, Any]] = None
    has_quotation_source: bool = False
    assignments: List[AssignmentSchema] = Field(default_factory=list)


class CrewShortfallSchema(BaseModel):
    day_number: int
    role: models.Role
    required: int
    assigned: int


class CrewCheckResponse(BaseModel):
    incomplete: bool
    shortfalls: List[CrewShortfallSchema]


class ErrorResponse(BaseModel):
    code: str
    message: str
