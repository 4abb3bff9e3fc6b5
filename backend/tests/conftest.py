"""Pytest configuration and shared fixtures."""

from datetime import date
from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))
from studio.domain import Assignment, Event, Person, PersonSource, Role  # noqa: E402
from studio.services.availability import AvailabilityService  # noqa: E402
from studio.stores.memory import InMemoryAssignmentStore  # noqa: E402

FIRM_A = "firm_a"
FIRM_B = "firm_b"


@pytest.fixture
def store() -> InMemoryAssignmentStore:
    """Two firms with overlapping January bookings.

    firm_a: evt_1 Jan 10-12 (stf_1 photographer),
            evt_2 Jan 12-14 (fl_2 cinematographer).
    firm_b: evt_9 Jan 11 (fl_9 drone pilot, also freelances for firm_a).
    """
    store = InMemoryAssignmentStore()
    store.add_event(
        Event(
            id="evt_1",
            firm_id=FIRM_A,
            title="Sharma Wedding",
            start_date=date(2024, 1, 10),
            total_days=3,
        )
    )
    store.add_event(
        Event(
            id="evt_2",
            firm_id=FIRM_A,
            title="Kapoor Reception",
            start_date=date(2024, 1, 12),
            end_date=date(2024, 1, 14),
            total_days=1,
        )
    )
    store.add_event(
        Event(
            id="evt_9",
            firm_id=FIRM_B,
            title="Other Studio Shoot",
            start_date=date(2024, 1, 11),
        )
    )
    store.add_assignment(
        Assignment(
            event_id="evt_1",
            role=Role.PHOTOGRAPHER,
            day_number=1,
            day_date=date(2024, 1, 10),
            staff_id="stf_1",
        )
    )
    store.add_assignment(
        Assignment(
            event_id="evt_2",
            role=Role.CINEMATOGRAPHER,
            day_number=1,
            day_date=date(2024, 1, 12),
            freelancer_id="fl_2",
        )
    )
    store.add_assignment(
        Assignment(
            event_id="evt_9",
            role=Role.DRONE_PILOT,
            day_number=1,
            day_date=date(2024, 1, 11),
            freelancer_id="fl_9",
        )
    )
    return store


@pytest.fixture
def service(store: InMemoryAssignmentStore) -> AvailabilityService:
    return AvailabilityService(store)


@pytest.fixture
def people() -> list[Person]:
    return [
        Person(id="stf_1", name="Asha", role="Photographer", firm_id=FIRM_A),
        Person(
            id="fl_2",
            name="Bharat",
            role="Cinematographer",
            firm_id=FIRM_A,
            source=PersonSource.FREELANCER,
        ),
        Person(id="stf_3", name="Chloe", role="Photographer", firm_id=FIRM_A),
        Person(
            id="fl_9",
            name="Diego",
            role="Drone Pilot",
            firm_id=FIRM_A,
            source=PersonSource.FREELANCER,
        ),
    ]
