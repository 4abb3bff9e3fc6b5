"""Smoke tests for domain models and schemas."""

from datetime import date

import pytest

from studio.domain import models, schemas


def test_models_and_schemas_compile() -> None:
    """Instantiate domain models and pydantic schemas."""

    event = models.Event(
        id="evt_1",
        firm_id="firm_1",
        title="Sharma Wedding",
        start_date=date(2024, 1, 10),
        total_days=3,
    )
    assignment = models.Assignment(
        event_id=event.id,
        role=models.Role.PHOTOGRAPHER,
        day_number=1,
        day_date=date(2024, 1, 10),
        staff_id="stf_1",
    )
    person = models.Person(
        id="fl_1",
        name="Bharat",
        role="Cinematographer",
        firm_id="firm_1",
        source=models.PersonSource.FREELANCER,
    )
    booked = models.BookedAssignment(assignment=assignment, schedule=event.schedule)

    schema_person = schemas.PersonSchema.from_domain(person)
    schema_assignment = schemas.AssignmentSchema.from_domain(assignment)
    window = schemas.DateWindow(start_date=date(2024, 1, 10), total_days=3)

    assert event.date_range == booked.date_range == window.to_range()
    assert assignment.role == "Photographer"
    assert assignment.person_id == "stf_1"
    assert schema_person.to_domain("firm_1") == person
    assert schema_assignment.to_domain() == assignment


@pytest.mark.parametrize(
    "ids",
    [
        {},
        {"staff_id": "stf_1", "freelancer_id": "fl_1"},
    ],
)
def test_assignment_needs_exactly_one_person(ids) -> None:
    with pytest.raises(ValueError):
        models.Assignment(event_id="evt_1", role="Editor", **ids)


def test_exclusion_coercion() -> None:
    assert not models.EventExclusion.coerce(None)
    assert models.EventExclusion.coerce("evt_1").excludes("evt_1")
    assert models.EventExclusion.coerce(["evt_1", "evt_2"]).event_ids == {"evt_1", "evt_2"}
    assert not models.EventExclusion.of(None, "").excludes("")
