"""Availability endpoints for crew selection."""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from studio.api.deps import firm_scope, get_availability_service, get_timezone
from studio.domain import DateRange, EventExclusion
from studio.domain.schemas import (
    AssignmentSchema,
    AvailabilitySchema,
    ConflictReportSchema,
    DateWindow,
    FilterRequest,
    PersonAvailabilitySchema,
    PersonSchema,
)
from studio.services.availability import AvailabilityService

router = APIRouter(prefix="/firms/{firm_id}", tags=["availability"])


class WindowQuery:
    """Date window passed as query parameters."""

    def __init__(
        self,
        start_date: date,
        end_date: Optional[date] = None,
        total_days: int = 1,
        exclude_event_id: List[str] = Query([]),
    ) -> None:
        self.date_range = DateRange.from_values(start_date, end_date, total_days)
        self.exclusion = EventExclusion.of(*exclude_event_id)


@router.post("/availability/conflicts", response_model=List[AssignmentSchema])
def conflicting_assignments(
    window: DateWindow,
    firm_id: str = Depends(firm_scope),
    service: AvailabilityService = Depends(get_availability_service),
    tz: str = Depends(get_timezone),
) -> List[AssignmentSchema]:
    """Return every assignment of the firm that overlaps the window."""
    conflicts = service.find_conflicting_assignments(
        firm_id, window.to_range(tz), window.exclusion()
    )
    return [AssignmentSchema.from_domain(a) for a in conflicts]


@router.post("/availability/filter", response_model=List[PersonSchema])
def filter_available(
    body: FilterRequest,
    firm_id: str = Depends(firm_scope),
    service: AvailabilityService = Depends(get_availability_service),
    tz: str = Depends(get_timezone),
) -> List[PersonSchema]:
    """Return the free candidates, keeping the current selection listed."""
    people = [p.to_domain(firm_id) for p in body.people]
    available = service.available_for_role(
        firm_id,
        people,
        body.to_range(tz),
        current_selection=body.current_selection,
        exclude=body.exclusion(),
    )
    return [PersonSchema.from_domain(p) for p in available]


@router.post("/availability/annotate", response_model=List[PersonAvailabilitySchema])
def annotate_availability(
    body: FilterRequest,
    firm_id: str = Depends(firm_scope),
    service: AvailabilityService = Depends(get_availability_service),
    tz: str = Depends(get_timezone),
) -> List[PersonAvailabilitySchema]:
    people = [p.to_domain(firm_id) for p in body.people]
    annotated = service.annotate_availability(
        firm_id, people, body.to_range(tz), body.exclusion()
    )
    return [PersonAvailabilitySchema.from_domain(item) for item in annotated]


@router.get("/people/{person_id}/availability", response_model=AvailabilitySchema)
def person_availability(
    person_id: str,
    window: WindowQuery = Depends(),
    firm_id: str = Depends(firm_scope),
    service: AvailabilityService = Depends(get_availability_service),
) -> AvailabilitySchema:
    available = service.is_available(
        firm_id, person_id, window.date_range, window.exclusion
    )
    return AvailabilitySchema(person_id=person_id, is_available=available)


@router.get("/people/{person_id}/conflicts", response_model=ConflictReportSchema)
def person_conflicts(
    person_id: str,
    window: WindowQuery = Depends(),
    firm_id: str = Depends(firm_scope),
    service: AvailabilityService = Depends(get_availability_service),
) -> ConflictReportSchema:
    """Explain which bookings keep a person busy."""
    report = service.conflict_details(
        firm_id, person_id, window.date_range, window.exclusion
    )
    return ConflictReportSchema.from_domain(report)
