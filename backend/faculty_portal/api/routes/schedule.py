from datetime import date

from fastapi import APIRouter, Depends, Query

from faculty_portal.api.deps import get_current_user, get_store, require_roles
from faculty_portal.core.config import get_settings
from faculty_portal.core.security import CurrentUser, UserRole
from faculty_portal.schemas.schedule import (
    ActivityOut,
    AdminDashboardOut,
    ConflictOut,
    FacultyScheduleOut,
    FacultySummaryOut,
    OccurrenceOut,
    OccurrenceStatusOut,
    ScheduleWindowOut,
    UtilizationSuggestionOut,
)
from faculty_portal.services.occurrences import expand_and_sort, filter_by_faculty
from faculty_portal.services.schedule_views import (
    ScheduleWindow,
    build_admin_dashboard,
    build_faculty_schedule,
    build_faculty_summary,
)
from faculty_portal.services.template_store import TemplateStore

router = APIRouter()
settings = get_settings()


def _window_out(window: ScheduleWindow) -> ScheduleWindowOut:
    return ScheduleWindowOut(start=window.start, end=window.end, days=window.days)


@router.get("/schedule/occurrences", response_model=list[OccurrenceOut])
def list_occurrences(
    days: int | None = Query(default=None),
    start: date | None = Query(default=None),
    faculty_email: str | None = Query(default=None),
    current_user: CurrentUser = Depends(require_roles(UserRole.admin)),
    store: TemplateStore = Depends(get_store),
) -> list[OccurrenceOut]:
    window_days = settings.dashboard_window_days if days is None else days
    occurrences = expand_and_sort(store.lecture_templates(), start, window_days)
    if faculty_email:
        occurrences = filter_by_faculty(occurrences, faculty_email)
    return [OccurrenceOut.model_validate(item) for item in occurrences]


@router.get("/schedule/dashboard", response_model=AdminDashboardOut)
def admin_dashboard(
    days: int | None = Query(default=None),
    start: date | None = Query(default=None),
    current_user: CurrentUser = Depends(require_roles(UserRole.admin)),
    store: TemplateStore = Depends(get_store),
) -> AdminDashboardOut:
    dashboard = build_admin_dashboard(
        store,
        window_start=start,
        window_days=settings.dashboard_window_days if days is None else days,
        low_utilization_threshold=settings.low_utilization_threshold_percent,
    )
    occurrences = [
        OccurrenceStatusOut(
            **OccurrenceOut.model_validate(item.occurrence).model_dump(),
            conflict_status=item.conflict_status,
            suggestion=item.suggestion,
        )
        for item in dashboard.occurrences
    ]
    return AdminDashboardOut(
        window=_window_out(dashboard.window),
        total_occurrences=len(occurrences),
        occurrences=occurrences,
        conflicts=[ConflictOut.model_validate(record) for record in dashboard.conflicts],
        room_conflicts=sum(1 for record in dashboard.conflicts if record.kind == "room_conflict"),
        faculty_conflicts=sum(1 for record in dashboard.conflicts if record.kind == "faculty_conflict"),
        room_utilization=dashboard.room_utilization,
        faculty_workload=dashboard.faculty_workload,
        suggestions=[UtilizationSuggestionOut.model_validate(item) for item in dashboard.suggestions],
    )


@router.get("/schedule/me", response_model=FacultyScheduleOut)
def my_schedule(
    days: int | None = Query(default=None),
    start: date | None = Query(default=None),
    current_user: CurrentUser = Depends(get_current_user),
    store: TemplateStore = Depends(get_store),
) -> FacultyScheduleOut:
    schedule = build_faculty_schedule(
        store,
        current_user.email,
        window_start=start,
        window_days=settings.faculty_window_days if days is None else days,
    )
    return FacultyScheduleOut(
        faculty_email=schedule.faculty_email,
        window=_window_out(schedule.window),
        lectures=len(schedule.lectures),
        invigilation=len(schedule.invigilation),
        leave_entries=len(schedule.leave_entries),
        activities=[
            ActivityOut(
                type=item.type,
                id=item.id,
                date=item.date,
                time=item.time,
                title=item.title,
                location=item.location,
                details=item.details,
            )
            for item in schedule.activities
        ],
    )


@router.get("/schedule/me/summary", response_model=FacultySummaryOut)
def my_schedule_summary(
    days: int | None = Query(default=None),
    start: date | None = Query(default=None),
    current_user: CurrentUser = Depends(get_current_user),
    store: TemplateStore = Depends(get_store),
) -> FacultySummaryOut:
    summary = build_faculty_summary(
        store,
        current_user.email,
        window_start=start,
        window_days=settings.faculty_window_days if days is None else days,
    )
    return FacultySummaryOut(
        faculty_email=summary.faculty_email,
        faculty_name=summary.faculty_name,
        department=summary.department,
        total_lectures=summary.total_lectures,
        this_month_lectures=summary.this_month_lectures,
        total_invigilation=summary.total_invigilation,
        this_month_invigilation=summary.this_month_invigilation,
        total_leave_days=summary.total_leave_days,
    )
