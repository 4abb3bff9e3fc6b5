"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Every method takes the
firm ID first and implementations refuse to run without it, so no caller can
issue an unscoped query.
"""

from abc import ABC, abstractmethod

from studio.domain import BookedAssignment, EventExclusion
from studio.domain.errors import InvalidFirmIdError


class AssignmentStore(ABC):
    """Interface for reading crew assignments with their event schedules."""

    @abstractmethod
    def list_booked_assignments(
        self, firm_id: str, exclusion: EventExclusion
    ) -> list[BookedAssignment]:
        """Return every assignment of the firm's events, minus excluded events.

        Raises:
            InvalidFirmIdError: If ``firm_id`` is empty.
            StoreUnavailableError: If the backing store cannot be queried.
        """
        ...

    @abstractmethod
    def list_person_assignments(
        self, firm_id: str, person_id: str, exclusion: EventExclusion
    ) -> list[BookedAssignment]:
        """Return the firm's assignments that reference ``person_id``."""
        ...

    @abstractmethod
    def get_event_title(self, firm_id: str, event_id: str) -> str | None:
        """Return the title of a firm's event, or None if not found."""
        ...


def require_firm(firm_id: str) -> str:
    if not firm_id or not firm_id.strip():
        raise InvalidFirmIdError()
    return firm_id
