"""Expansion of weekly lecture templates into dated occurrences.

A template says "every Monday at 09:00, this faculty teaches this subject in
this room". Views need concrete dates, so each request expands the current
template snapshot over a window of calendar days and works on the result.
Everything here is pure: no I/O, no shared state, and the caller supplies
the window start (``None`` means today).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import asdict, dataclass
from datetime import date, datetime, timedelta
from typing import Any

from faculty_portal.core.exceptions import InvalidWindowError

logger = logging.getLogger(__name__)

MAX_WINDOW_DAYS = 366

# Indexed by date.weekday().
WEEKDAY_FULL_NAMES = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
WEEKDAY_SHORT_NAMES = tuple(name[:3] for name in WEEKDAY_FULL_NAMES)

TEMPLATE_FIELDS = ("day", "time", "faculty_id", "faculty_email", "subject", "room", "name")


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class LectureTemplate:
    """One weekly recurring lecture. Missing fields default to ``""``."""

    day: str = ""
    time: str = ""
    faculty_id: str = ""
    faculty_email: str = ""
    subject: str = ""
    room: str = ""
    name: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> LectureTemplate:
        return cls(**{field: _text(data.get(field)) for field in TEMPLATE_FIELDS})


@dataclass(frozen=True)
class WindowDay:
    date: date
    day_full: str
    day_short: str


@dataclass(frozen=True)
class Occurrence:
    date: date
    time: str = ""
    faculty_id: str = ""
    faculty_email: str = ""
    subject: str = ""
    room: str = ""
    name: str = ""

    @property
    def date_str(self) -> str:
        return self.date.isoformat()

    def as_dict(self) -> dict[str, str]:
        data = asdict(self)
        data["date"] = self.date_str
        return data


def generate_window(start: date | None, num_days: int) -> list[WindowDay]:
    """Return every date from ``start`` to ``start + num_days`` inclusive.

    ``num_days=0`` yields the start date alone; negative or oversized windows
    raise :class:`InvalidWindowError`.
    """
    if num_days < 0 or num_days > MAX_WINDOW_DAYS:
        raise InvalidWindowError(num_days, MAX_WINDOW_DAYS)
    if start is None:
        start = date.today()
    elif isinstance(start, datetime):
        start = start.date()

    window: list[WindowDay] = []
    for offset in range(num_days + 1):
        current = start + timedelta(days=offset)
        weekday = current.weekday()
        window.append(WindowDay(current, WEEKDAY_FULL_NAMES[weekday], WEEKDAY_SHORT_NAMES[weekday]))
    return window


def day_matches(day: str | None, day_full: str, day_short: str) -> bool:
    normalized = (day or "").strip().lower()
    if not normalized:
        return False
    return normalized == day_full or normalized == day_short


def coerce_templates(
    templates: Iterable[LectureTemplate | Mapping[str, Any]] | Mapping[str, Any],
) -> list[LectureTemplate]:
    """Accept a store snapshot (``{id: record}``) or a plain list of records."""
    if isinstance(templates, Mapping):
        templates = templates.values()
    coerced: list[LectureTemplate] = []
    for item in templates:
        if isinstance(item, LectureTemplate):
            coerced.append(item)
        elif isinstance(item, Mapping):
            coerced.append(LectureTemplate.from_mapping(item))
    return coerced


def expand(templates: Iterable[LectureTemplate], window: Sequence[WindowDay]) -> list[Occurrence]:
    """Emit one occurrence per (window day, matching template) pair.

    Identical templates are not merged. Output order is unspecified; use
    :func:`sort_occurrences` before presenting it.
    """
    template_list = list(templates)
    occurrences: list[Occurrence] = []
    for window_day in window:
        for template in template_list:
            if not day_matches(template.day, window_day.day_full, window_day.day_short):
                continue
            occurrences.append(
                Occurrence(
                    date=window_day.date,
                    time=template.time,
                    faculty_id=template.faculty_id,
                    faculty_email=template.faculty_email,
                    subject=template.subject,
                    room=template.room,
                    name=template.name,
                )
            )
    return occurrences


def sort_occurrences(occurrences: Iterable[Occurrence]) -> list[Occurrence]:
    # Plain string comparison on time: "" sorts first, "9:00" after "10:00".
    return sorted(occurrences, key=lambda item: (item.date, item.time))


def filter_by_faculty(occurrences: Iterable[Occurrence], faculty_email: str) -> list[Occurrence]:
    needle = (faculty_email or "").lower()
    return [item for item in occurrences if item.faculty_email.lower() == needle]


def expand_and_sort(
    templates: Iterable[LectureTemplate | Mapping[str, Any]] | Mapping[str, Any],
    window_start: date | None,
    window_days: int,
) -> list[Occurrence]:
    window = generate_window(window_start, window_days)
    occurrences = sort_occurrences(expand(coerce_templates(templates), window))
    logger.debug(
        "Expanded templates over %d day(s) from %s into %d occurrence(s)",
        len(window),
        window[0].date.isoformat(),
        len(occurrences),
    )
    return occurrences


def occurrences_for_faculty(
    templates: Iterable[LectureTemplate | Mapping[str, Any]] | Mapping[str, Any],
    window_start: date | None,
    window_days: int,
    faculty_email: str,
) -> list[Occurrence]:
    return filter_by_faculty(expand_and_sort(templates, window_start, window_days), faculty_email)
