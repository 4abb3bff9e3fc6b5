"""Availability service - who on a crew list is free for an event window.

Services:
- Depend only on interfaces (stores)
- Scope every query by firm
- Fail open: a store outage reports people as available

Results are advisory. Nothing here reserves a person, so two sessions can
still book the same person; the form re-checks before saving.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TypeVar

from studio.domain import (
    Assignment,
    ConflictingBooking,
    ConflictReport,
    DateRange,
    EventExclusion,
    Person,
    PersonAvailability,
)
from studio.domain.errors import StoreUnavailableError
from studio.stores.interfaces import AssignmentStore

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Person)

ExcludeArg = EventExclusion | str | Iterable[str] | None


class AvailabilityService:
    """Service for staff and freelancer availability queries."""

    def __init__(self, store: AssignmentStore) -> None:
        self._store = store

    def find_conflicting_assignments(
        self, firm_id: str, date_range: DateRange, exclude: ExcludeArg = None
    ) -> list[Assignment]:
        """Return the firm's assignments whose event overlaps ``date_range``.

        Assignments of excluded events are left out. Order is not defined.
        """
        exclusion = EventExclusion.coerce(exclude)
        try:
            booked = self._store.list_booked_assignments(firm_id, exclusion)
        except StoreUnavailableError as exc:
            logger.warning(
                "Conflict lookup failed for %s, treating everyone as available: %s",
                date_range,
                exc.detail,
            )
            return []
        return [b.assignment for b in booked if b.date_range.overlaps(date_range)]

    def is_available(
        self,
        firm_id: str,
        person_id: str,
        date_range: DateRange,
        exclude: ExcludeArg = None,
    ) -> bool:
        if not person_id:
            return True
        conflicts = self.find_conflicting_assignments(firm_id, date_range, exclude)
        return not any(a.references(person_id) for a in conflicts)

    def filter_available(
        self,
        firm_id: str,
        people: Sequence[P],
        date_range: DateRange,
        exclude: ExcludeArg = None,
    ) -> list[P]:
        """Return the people with no overlapping booking, in input order."""
        if not people:
            return []
        busy = self._busy_ids(firm_id, date_range, exclude)
        return [person for person in people if person.id not in busy]

    def available_for_role(
        self,
        firm_id: str,
        people: Sequence[P],
        date_range: DateRange,
        current_selection: str | None = None,
        exclude: ExcludeArg = None,
    ) -> list[P]:
        """Like :meth:`filter_available`, but never drops the current pick.

        A person already selected in the slot being edited is put back at the
        front of the list even if they are booked elsewhere.
        """
        available = self.filter_available(firm_id, people, date_range, exclude)
        if current_selection and not any(p.id == current_selection for p in available):
            current = next((p for p in people if p.id == current_selection), None)
            if current is not None:
                return [current, *available]
        return available

    def conflict_details(
        self,
        firm_id: str,
        person_id: str,
        date_range: DateRange,
        exclude: ExcludeArg = None,
    ) -> ConflictReport:
        """Explain why a person is unavailable for ``date_range``."""
        if not person_id:
            return ConflictReport()
        exclusion = EventExclusion.coerce(exclude)
        try:
            booked = self._store.list_person_assignments(firm_id, person_id, exclusion)
            titles: dict[str, str | None] = {}
            conflicts = []
            for item in booked:
                other_range = item.date_range
                if not other_range.overlaps(date_range):
                    continue
                event_id = item.assignment.event_id
                if event_id not in titles:
                    titles[event_id] = self._store.get_event_title(firm_id, event_id)
                conflicts.append(
                    ConflictingBooking(
                        event_id=event_id,
                        event_title=titles[event_id],
                        role=item.assignment.role,
                        date_range=other_range,
                    )
                )
        except StoreUnavailableError as exc:
            logger.warning(
                "Conflict details for %s failed, reporting none: %s",
                person_id,
                exc.detail,
            )
            return ConflictReport()
        return ConflictReport.from_conflicts(conflicts)

    def annotate_availability(
        self,
        firm_id: str,
        people: Sequence[P],
        date_range: DateRange,
        exclude: ExcludeArg = None,
    ) -> list[PersonAvailability]:
        """Flag every person as available or not, with conflicts for the busy ones."""
        if not people:
            return []
        exclusion = EventExclusion.coerce(exclude)
        busy = self._busy_ids(firm_id, date_range, exclusion)
        return [
            PersonAvailability(person=person, is_available=True)
            if person.id not in busy
            else PersonAvailability(
                person=person,
                is_available=False,
                conflicts=self.conflict_details(firm_id, person.id, date_range, exclusion),
            )
            for person in people
        ]

    def _busy_ids(
        self, firm_id: str, date_range: DateRange, exclude: ExcludeArg
    ) -> set[str]:
        return {
            a.person_id
            for a in self.find_conflicting_assignments(firm_id, date_range, exclude)
        }
