"""Crew planning checks against quotation requirements.

A quotation stores its crew needs as JSON, one entry per event day::

    {"sameDayEditing": true,
     "days": [{"photographers": 2, "cinematographers": 1, "drone": 1}, ...]}
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from studio.domain import Assignment, CrewShortfall, DayDraft, DayRequirement, Person, Role

SAME_DAY_EDITOR_SKILLS = (Role.EDITOR.value, Role.SAME_DAY_EDITOR.value)


def _count(value: Any) -> int:
    try:
        return max(int(value or 0), 0)
    except (TypeError, ValueError):
        return 0


def requirements_from_quotation(
    details: Mapping[str, Any] | None,
) -> list[DayRequirement] | None:
    """Parse per-day crew requirements, or None when the quotation has none."""
    if not details or not isinstance(details.get("days"), list):
        return None
    default_sde = 1 if details.get("sameDayEditing") else 0
    requirements = []
    for day in details["days"]:
        day = day if isinstance(day, Mapping) else {}
        requirements.append(
            DayRequirement(
                photographers=_count(day.get("photographers")),
                cinematographers=_count(day.get("cinematographers")),
                drone=_count(day.get("drone")),
                same_day_editors=_count(day.get("sameDayEditors")) or default_sde,
            )
        )
    return requirements


def find_crew_shortfalls(
    assignments: Iterable[Assignment],
    total_days: int | None,
    requirements: Sequence[DayRequirement],
) -> list[CrewShortfall]:
    """Compare assigned role counts with the requirement of each day."""
    total_days = total_days if total_days and total_days > 0 else 1
    per_day: dict[int, Counter] = {}
    for assignment in assignments:
        day = assignment.day_number
        if not day:
            # Assignments saved before multi-day support carry no day number.
            if total_days != 1:
                continue
            day = 1
        per_day.setdefault(day, Counter())[assignment.role] += 1

    shortfalls = []
    for day in range(1, total_days + 1):
        if day > len(requirements):
            continue
        need = requirements[day - 1]
        counts = per_day.get(day, Counter())
        for role, required in (
            (Role.PHOTOGRAPHER, need.photographers),
            (Role.CINEMATOGRAPHER, need.cinematographers),
            (Role.DRONE_PILOT, need.drone),
            (Role.SAME_DAY_EDITOR, need.same_day_editors),
        ):
            assigned = counts[role.value]
            if assigned < required:
                shortfalls.append(
                    CrewShortfall(
                        day_number=day, role=role, required=required, assigned=assigned
                    )
                )
    return shortfalls


def check_crew(
    assignments: Iterable[Assignment],
    total_days: int | None,
    quotation_details: Mapping[str, Any] | None,
    has_quotation_source: bool = False,
) -> tuple[bool, list[CrewShortfall]]:
    """Return whether the crew is incomplete, and the shortfalls behind it."""
    requirements = requirements_from_quotation(quotation_details)
    if requirements is None:
        # Linked to a quotation whose details never loaded: flag it for review.
        return has_quotation_source, []
    shortfalls = find_crew_shortfalls(assignments, total_days, requirements)
    return bool(shortfalls), shortfalls


def is_crew_incomplete(
    assignments: Iterable[Assignment],
    total_days: int | None,
    quotation_details: Mapping[str, Any] | None,
    has_quotation_source: bool = False,
) -> bool:
    incomplete, _ = check_crew(
        assignments, total_days, quotation_details, has_quotation_source
    )
    return incomplete


def _draft_slots(draft: DayDraft) -> list[tuple[Role, int, str]]:
    slots = [(Role.PHOTOGRAPHER, i, pid) for i, pid in enumerate(draft.photographer_ids)]
    slots += [(Role.CINEMATOGRAPHER, i, pid) for i, pid in enumerate(draft.cinematographer_ids)]
    if draft.drone_pilot_id:
        slots.append((Role.DRONE_PILOT, 0, draft.drone_pilot_id))
    slots += [(Role.SAME_DAY_EDITOR, i, pid) for i, pid in enumerate(draft.same_day_editor_ids)]
    return slots


def is_free_in_draft(
    person_id: str,
    drafts: Sequence[DayDraft],
    day_index: int,
    role: Role,
    slot_index: int | None = None,
    legacy_same_day_editors: Iterable[str] = (),
) -> bool:
    """True when ``person_id`` is not already picked elsewhere in the form.

    The slot being edited (``day_index``, ``role``, ``slot_index``) is
    ignored. A drone pilot occupies slot 0 of its day.
    """
    if not person_id:
        return True
    for index, draft in enumerate(drafts):
        for slot_role, slot, picked in _draft_slots(draft):
            if index == day_index and slot_role == role and slot == slot_index:
                continue
            if picked == person_id:
                return False
    return person_id not in set(legacy_same_day_editors)


def same_day_editor_pool(editors: Iterable[Person]) -> list[Person]:
    """Editors who can also be sent to the venue as same-day editors."""
    return [e for e in editors if e.role in SAME_DAY_EDITOR_SKILLS]


def needs_drone_pilot(
    day_index: int,
    quotation_details: Mapping[str, Any] | None,
    has_quotation: bool,
) -> bool:
    requirements = requirements_from_quotation(quotation_details)
    if requirements is not None:
        return day_index < len(requirements) and requirements[day_index].drone > 0
    return not has_quotation
