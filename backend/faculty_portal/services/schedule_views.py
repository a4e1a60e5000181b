from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from faculty_portal.models.faculty import Faculty
from faculty_portal.models.invigilation import InvigilationDuty
from faculty_portal.models.leave_entry import LeaveEntry
from faculty_portal.services.conflict_service import ConflictRecord, conflicted_indices, find_conflicts
from faculty_portal.services.occurrences import (
    Occurrence,
    expand_and_sort,
    generate_window,
    occurrences_for_faculty,
)
from faculty_portal.services.template_store import (
    FACULTY_LEAVE_MASTER,
    INVIGILATION,
    LEAVE_LEDGER,
    TemplateStore,
)
from faculty_portal.services.utilization import (
    UtilizationSuggestion,
    low_utilization_suggestions,
    utilization_by_room,
    workload_by_faculty,
)

logger = logging.getLogger(__name__)


@dataclass
class ScheduleWindow:
    start: date
    end: date
    days: int


@dataclass
class OccurrenceStatus:
    occurrence: Occurrence
    conflict_status: str
    suggestion: str | None


@dataclass
class AdminDashboard:
    window: ScheduleWindow
    occurrences: list[OccurrenceStatus]
    conflicts: list[ConflictRecord]
    room_utilization: dict[str, int]
    faculty_workload: dict[str, int]
    suggestions: list[UtilizationSuggestion]


@dataclass
class Activity:
    type: str
    id: str | None
    date: date
    time: str
    title: str
    location: str
    details: dict


@dataclass
class FacultySchedule:
    faculty_email: str
    window: ScheduleWindow
    lectures: list[Occurrence]
    invigilation: list[InvigilationDuty]
    leave_entries: list[LeaveEntry]
    activities: list[Activity]


@dataclass
class FacultySummary:
    faculty_email: str
    faculty_name: str | None
    department: str | None
    total_lectures: int
    this_month_lectures: int
    total_invigilation: int
    this_month_invigilation: int
    total_leave_days: float


def resolve_window(window_start: date | None, window_days: int) -> ScheduleWindow:
    window = generate_window(window_start, window_days)
    return ScheduleWindow(start=window[0].date, end=window[-1].date, days=len(window))


def _same_email(value: str | None, email: str) -> bool:
    return (value or "").lower() == email.lower()


def _conflict_suggestion(index: int, conflicts: list[ConflictRecord]) -> str | None:
    # The last clash involving an occurrence wins, faculty over room on ties.
    suggestion = None
    for record in conflicts:
        if index in (record.first_index, record.second_index):
            suggestion = record.resolution_hint
    return suggestion


def build_admin_dashboard(
    store: TemplateStore,
    *,
    window_start: date | None,
    window_days: int,
    low_utilization_threshold: float = 30.0,
) -> AdminDashboard:
    window = resolve_window(window_start, window_days)
    occurrences = expand_and_sort(store.lecture_templates(), window.start, window_days)
    conflicts = find_conflicts(occurrences)
    flagged = conflicted_indices(conflicts)

    statuses = [
        OccurrenceStatus(
            occurrence=occurrence,
            conflict_status="conflict" if index in flagged else "clear",
            suggestion=_conflict_suggestion(index, conflicts) if index in flagged else None,
        )
        for index, occurrence in enumerate(occurrences)
    ]
    rooms = utilization_by_room(occurrences)
    if conflicts:
        logger.info("Detected %d scheduling conflict(s) between %s and %s", len(conflicts), window.start, window.end)
    return AdminDashboard(
        window=window,
        occurrences=statuses,
        conflicts=conflicts,
        room_utilization=rooms,
        faculty_workload=workload_by_faculty(occurrences),
        suggestions=low_utilization_suggestions(rooms, threshold_percent=low_utilization_threshold),
    )


def build_faculty_schedule(
    store: TemplateStore,
    faculty_email: str,
    *,
    window_start: date | None,
    window_days: int,
) -> FacultySchedule:
    window = resolve_window(window_start, window_days)
    lectures = occurrences_for_faculty(store.lecture_templates(), window.start, window_days, faculty_email)
    duties = [
        duty for duty in store.get_all(INVIGILATION).values() if _same_email(duty.faculty_email, faculty_email)
    ]
    leaves = [
        entry for entry in store.get_all(LEAVE_LEDGER).values() if _same_email(entry.faculty_email, faculty_email)
    ]

    activities: list[Activity] = [
        Activity(
            type="lecture",
            id=None,
            date=lecture.date,
            time=lecture.time,
            title=lecture.subject,
            location=lecture.room,
            details={"name": lecture.name, "faculty_id": lecture.faculty_id},
        )
        for lecture in lectures
    ]
    activities.extend(
        Activity(
            type="invigilation",
            id=duty.id,
            date=duty.exam_date,
            time=duty.time or "",
            title=duty.exam_name,
            location=duty.venue or "",
            details={"subject": duty.subject},
        )
        for duty in duties
    )
    activities.extend(
        Activity(
            type="leave",
            id=entry.id,
            date=entry.leave_date,
            time="",
            title=f"{entry.leave_type.value} leave",
            location="",
            details={"days": float(entry.days or 0), "session": entry.session, "reason": entry.reason},
        )
        for entry in leaves
    )
    activities.sort(key=lambda item: (item.date, item.time))

    return FacultySchedule(
        faculty_email=faculty_email,
        window=window,
        lectures=lectures,
        invigilation=duties,
        leave_entries=leaves,
        activities=activities,
    )


def build_faculty_summary(
    store: TemplateStore,
    faculty_email: str,
    *,
    window_start: date | None,
    window_days: int,
) -> FacultySummary:
    schedule = build_faculty_schedule(store, faculty_email, window_start=window_start, window_days=window_days)
    month_start = schedule.window.start.replace(day=1)

    profile: Faculty | None = None
    for faculty in store.get_all(FACULTY_LEAVE_MASTER).values():
        if _same_email(faculty.faculty_email, faculty_email):
            profile = faculty
            break

    return FacultySummary(
        faculty_email=faculty_email,
        faculty_name=profile.name if profile else None,
        department=profile.department if profile else None,
        total_lectures=len(schedule.lectures),
        this_month_lectures=sum(1 for item in schedule.lectures if item.date >= month_start),
        total_invigilation=len(schedule.invigilation),
        this_month_invigilation=sum(1 for item in schedule.invigilation if item.exam_date >= month_start),
        total_leave_days=sum(float(entry.days or 0) for entry in schedule.leave_entries),
    )
