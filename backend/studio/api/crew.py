"""Crew completeness endpoint."""

from fastapi import APIRouter, Depends

from studio.api.deps import firm_scope
from studio.domain.schemas import CrewCheckRequest, CrewCheckResponse, CrewShortfallSchema
from studio.services import crew

router = APIRouter(prefix="/firms/{firm_id}", tags=["crew"])


@router.post("/events/crew-check", response_model=CrewCheckResponse)
def crew_check(
    body: CrewCheckRequest,
    firm_id: str = Depends(firm_scope),
) -> CrewCheckResponse:
    """Compare an event's saved crew with what its quotation asks for."""
    incomplete, shortfalls = crew.check_crew(
        [a.to_domain() for a in body.assignments],
        body.total_days,
        body.quotation_details,
        body.has_quotation_source,
    )
    return CrewCheckResponse(
        incomplete=incomplete,
        shortfalls=[
            CrewShortfallSchema(
                day_number=s.day_number,
                role=s.role,
                required=s.required,
                assigned=s.assigned,
            )
            for s in shortfalls
        ],
    )
