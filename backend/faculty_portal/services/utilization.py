from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass

from faculty_portal.services.occurrences import Occurrence

UNKNOWN_KEY = "Unknown"


@dataclass(frozen=True)
class UtilizationSuggestion:
    room: str
    usage: int
    share_percent: float
    potential_improvement: float

    @property
    def description(self) -> str:
        return f"Low utilization in room {self.room} ({self.share_percent}%)"

    @property
    def suggestion(self) -> str:
        return f"Consider moving more lectures to {self.room} to improve utilization"


def aggregate_by_key(occurrences: Iterable[Occurrence], key_fn: Callable[[Occurrence], str | None]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for occurrence in occurrences:
        key = key_fn(occurrence)
        if not key or not key.strip():
            key = UNKNOWN_KEY
        counts[key] = counts.get(key, 0) + 1
    return counts


def utilization_by_room(occurrences: Iterable[Occurrence]) -> dict[str, int]:
    return aggregate_by_key(occurrences, lambda item: item.room)


def workload_by_faculty(occurrences: Iterable[Occurrence]) -> dict[str, int]:
    # Templates entered through the admin form often lack a faculty code.
    return aggregate_by_key(occurrences, lambda item: item.faculty_id or item.faculty_email)


def share_percent(count: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return round(count / total * 100, 1)


def low_utilization_suggestions(
    utilization: Mapping[str, int],
    *,
    threshold_percent: float = 30.0,
) -> list[UtilizationSuggestion]:
    total = sum(utilization.values())
    if total == 0:
        return []
    suggestions: list[UtilizationSuggestion] = []
    for room, usage in utilization.items():
        share = share_percent(usage, total)
        if share < threshold_percent:
            suggestions.append(
                UtilizationSuggestion(
                    room=room,
                    usage=usage,
                    share_percent=share,
                    potential_improvement=round(threshold_percent - share, 1),
                )
            )
    return suggestions
