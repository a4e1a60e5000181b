import datetime
from typing import Literal

from pydantic import BaseModel


class OccurrenceOut(BaseModel):
    date: datetime.date
    time: str
    faculty_id: str
    faculty_email: str
    subject: str
    room: str
    name: str

    model_config = {"from_attributes": True}


class OccurrenceStatusOut(OccurrenceOut):
    conflict_status: Literal["conflict", "clear"]
    suggestion: str | None = None


class ConflictOut(BaseModel):
    kind: Literal["room_conflict", "faculty_conflict"]
    description: str
    resolution_hint: str
    first: OccurrenceOut
    second: OccurrenceOut

    model_config = {"from_attributes": True}


class UtilizationSuggestionOut(BaseModel):
    room: str
    usage: int
    share_percent: float
    potential_improvement: float
    description: str
    suggestion: str

    model_config = {"from_attributes": True}


class ScheduleWindowOut(BaseModel):
    start: datetime.date
    end: datetime.date
    days: int


class AdminDashboardOut(BaseModel):
    window: ScheduleWindowOut
    total_occurrences: int
    occurrences: list[OccurrenceStatusOut]
    conflicts: list[ConflictOut]
    room_conflicts: int
    faculty_conflicts: int
    room_utilization: dict[str, int]
    faculty_workload: dict[str, int]
    suggestions: list[UtilizationSuggestionOut]


class ActivityOut(BaseModel):
    type: Literal["lecture", "invigilation", "leave"]
    id: str | None = None
    date: datetime.date
    time: str = ""
    title: str
    location: str = ""
    details: dict[str, str | float | None] = {}


class FacultyScheduleOut(BaseModel):
    faculty_email: str
    window: ScheduleWindowOut
    lectures: int
    invigilation: int
    leave_entries: int
    activities: list[ActivityOut]


class FacultySummaryOut(BaseModel):
    faculty_email: str
    faculty_name: str | None = None
    department: str | None = None
    total_lectures: int
    this_month_lectures: int
    total_invigilation: int
    this_month_invigilation: int
    total_leave_days: float
