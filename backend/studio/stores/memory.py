"""In-process implementation of the AssignmentStore."""

from __future__ import annotations

import threading

from studio.domain import Assignment, BookedAssignment, Event, EventExclusion
from studio.stores.interfaces import AssignmentStore, require_firm


class InMemoryAssignmentStore(AssignmentStore):
    """Dict-backed store, used for local runs and tests."""

    def __init__(self) -> None:
        self._events: dict[str, Event] = {}
        self._assignments: dict[str, list[Assignment]] = {}
        self._lock = threading.Lock()

    def add_event(self, event: Event) -> Event:
        with self._lock:
            self._events[event.id] = event
            self._assignments.setdefault(event.id, [])
        return event

    def add_assignment(self, assignment: Assignment) -> Assignment:
        with self._lock:
            if assignment.event_id not in self._events:
                raise KeyError(f"Unknown event {assignment.event_id}")
            self._assignments[assignment.event_id].append(assignment)
        return assignment

    def remove_event(self, event_id: str) -> None:
        with self._lock:
            self._events.pop(event_id, None)
            self._assignments.pop(event_id, None)

    def list_booked_assignments(
        self, firm_id: str, exclusion: EventExclusion
    ) -> list[BookedAssignment]:
        return self._booked(firm_id, exclusion)

    def list_person_assignments(
        self, firm_id: str, person_id: str, exclusion: EventExclusion
    ) -> list[BookedAssignment]:
        return [
            booked
            for booked in self._booked(firm_id, exclusion)
            if booked.assignment.references(person_id)
        ]

    def get_event_title(self, firm_id: str, event_id: str) -> str | None:
        require_firm(firm_id)
        event = self._events.get(event_id)
        if event is None or event.firm_id != firm_id:
            return None
        return event.title

    def _booked(self, firm_id: str, exclusion: EventExclusion) -> list[BookedAssignment]:
        require_firm(firm_id)
        with self._lock:
            snapshot = [
                (event, list(self._assignments.get(event.id, ())))
                for event in self._events.values()
                if event.firm_id == firm_id
            ]
        return [
            BookedAssignment(assignment=assignment, schedule=event.schedule)
            for event, assignments in snapshot
            if not exclusion.excludes(event.id)
            for assignment in assignments
        ]
