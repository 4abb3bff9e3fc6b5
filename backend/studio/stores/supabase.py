"""Supabase (PostgREST) implementation of the AssignmentStore."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from studio.domain import (
    Assignment,
    BookedAssignment,
    EventExclusion,
    EventSchedule,
    to_calendar_date,
)
from studio.domain.errors import StoreUnavailableError
from studio.stores.interfaces import AssignmentStore, require_firm

logger = logging.getLogger(__name__)

ASSIGNMENT_COLUMNS = "staff_id,freelancer_id,role,day_number,day_date,event_id"
EVENT_COLUMNS = "event_date,event_end_date,total_days,firm_id"


def quote_value(value: str) -> str:
    """Quote a value for a PostgREST list or logic filter.

    Example:
        >>> quote_value("evt,1")
        '"evt,1"'
    """
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class SupabaseAssignmentStore(AssignmentStore):
    """Reads ``event_staff_assignments`` joined with ``events`` over REST."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 10.0,
        tz: str | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.tz = tz
        self._client = client or httpx.Client(
            base_url=f"{base_url.rstrip('/')}/rest/v1",
            headers={
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
                "Accept": "application/json",
            },
            timeout=timeout,
        )

    def close(self) -> None:
        self._client.close()

    def list_booked_assignments(
        self, firm_id: str, exclusion: EventExclusion
    ) -> list[BookedAssignment]:
        params = self._assignment_params(firm_id, exclusion)
        return self._to_booked(self._get("/event_staff_assignments", params), exclusion)

    def list_person_assignments(
        self, firm_id: str, person_id: str, exclusion: EventExclusion
    ) -> list[BookedAssignment]:
        params = self._assignment_params(firm_id, exclusion)
        quoted = quote_value(person_id)
        params.append(("or", f"(staff_id.eq.{quoted},freelancer_id.eq.{quoted})"))
        return self._to_booked(self._get("/event_staff_assignments", params), exclusion)

    def get_event_title(self, firm_id: str, event_id: str) -> str | None:
        require_firm(firm_id)
        rows = self._get(
            "/events",
            [
                ("select", "title"),
                ("id", f"eq.{event_id}"),
                ("firm_id", f"eq.{firm_id}"),
                ("limit", "1"),
            ],
        )
        if not rows:
            return None
        return rows[0].get("title")

    def _assignment_params(
        self, firm_id: str, exclusion: EventExclusion
    ) -> list[tuple[str, str]]:
        require_firm(firm_id)
        params = [
            ("select", f"{ASSIGNMENT_COLUMNS},events!inner({EVENT_COLUMNS})"),
            ("events.firm_id", f"eq.{firm_id}"),
        ]
        if exclusion.event_ids:
            ids = ",".join(quote_value(i) for i in sorted(exclusion.event_ids))
            params.append(("event_id", f"not.in.({ids})"))
        return params

    def _get(self, path: str, params: list[tuple[str, str]]) -> list[dict[str, Any]]:
        try:
            response = self._client.get(path, params=params)
            response.raise_for_status()
            rows = response.json() or []
        except httpx.HTTPStatusError as exc:
            raise StoreUnavailableError(
                f"{path} returned {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise StoreUnavailableError(f"{path} request failed: {exc}") from exc
        except ValueError as exc:
            raise StoreUnavailableError(f"{path} returned invalid JSON") from exc
        if not isinstance(rows, list):
            raise StoreUnavailableError(f"{path} returned {type(rows).__name__}, not rows")
        return rows

    def _to_booked(
        self, rows: list[dict[str, Any]], exclusion: EventExclusion
    ) -> list[BookedAssignment]:
        booked: list[BookedAssignment] = []
        for row in rows:
            try:
                if exclusion.excludes(row["event_id"]):
                    continue
                booked.append(self._parse_row(row))
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning(
                    "Skipping malformed assignment row for event %s: %s",
                    row.get("event_id"),
                    exc,
                )
        return booked

    def _parse_row(self, row: dict[str, Any]) -> BookedAssignment:
        event = row["events"]
        assignment = Assignment(
            event_id=row["event_id"],
            role=row["role"],
            day_number=row.get("day_number"),
            day_date=(
                to_calendar_date(row["day_date"], self.tz)
                if row.get("day_date")
                else None
            ),
            staff_id=row.get("staff_id"),
            freelancer_id=row.get("freelancer_id"),
        )
        schedule = EventSchedule(
            start_date=to_calendar_date(event["event_date"], self.tz),
            end_date=(
                to_calendar_date(event["event_end_date"], self.tz)
                if event.get("event_end_date")
                else None
            ),
            total_days=int(event.get("total_days") or 1),
        )
        return BookedAssignment(assignment=assignment, schedule=schedule)
