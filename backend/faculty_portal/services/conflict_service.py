from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from faculty_portal.services.occurrences import Occurrence

ConflictKind = Literal["room_conflict", "faculty_conflict"]

RESOLUTION_HINTS: dict[str, str] = {
    "room_conflict": "Consider rescheduling to avoid room conflict",
    "faculty_conflict": "Consider rescheduling to avoid faculty conflict",
}


@dataclass(frozen=True)
class ConflictRecord:
    kind: ConflictKind
    first: Occurrence
    second: Occurrence
    first_index: int
    second_index: int

    @property
    def description(self) -> str:
        label = "Room" if self.kind == "room_conflict" else "Faculty"
        return f"{label} conflict: {self.first.subject} and {self.second.subject}"

    @property
    def resolution_hint(self) -> str:
        return RESOLUTION_HINTS[self.kind]


def _same_room(first: Occurrence, second: Occurrence) -> bool:
    # Rooms left blank are a data gap, not a booking.
    if not first.room.strip() or not second.room.strip():
        return False
    return first.room == second.room


def _same_faculty(first: Occurrence, second: Occurrence) -> bool:
    if first.faculty_id and second.faculty_id:
        return first.faculty_id == second.faculty_id
    first_email = first.faculty_email.strip().lower()
    if not first_email:
        return False
    return first_email == second.faculty_email.strip().lower()


def find_conflicts(occurrences: Sequence[Occurrence]) -> list[ConflictRecord]:
    """Report room and faculty double bookings between occurrences.

    Only occurrences sharing both date and time are compared, so they are
    bucketed on that pair first. A pair clashing on room and faculty at once
    yields two records. Records come back ordered by the pair's positions in
    ``occurrences``, room conflicts before faculty conflicts.
    """
    buckets: dict[tuple, list[int]] = defaultdict(list)
    for index, occurrence in enumerate(occurrences):
        buckets[(occurrence.date, occurrence.time)].append(index)

    conflicts: list[ConflictRecord] = []
    for indices in buckets.values():
        if len(indices) < 2:
            continue
        for position, i in enumerate(indices):
            first = occurrences[i]
            for j in indices[position + 1:]:
                second = occurrences[j]
                if _same_room(first, second):
                    conflicts.append(ConflictRecord("room_conflict", first, second, i, j))
                if _same_faculty(first, second):
                    conflicts.append(ConflictRecord("faculty_conflict", first, second, i, j))

    conflicts.sort(key=lambda record: (record.first_index, record.second_index, record.kind != "room_conflict"))
    return conflicts


def conflicted_indices(conflicts: Sequence[ConflictRecord]) -> set[int]:
    indices: set[int] = set()
    for record in conflicts:
        indices.add(record.first_index)
        indices.add(record.second_index)
    return indices
