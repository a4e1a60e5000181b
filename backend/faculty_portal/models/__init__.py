from faculty_portal.models.activity_log import ActivityLog  # noqa: F401
from faculty_portal.models.faculty import Faculty  # noqa: F401
from faculty_portal.models.invigilation import InvigilationDuty  # noqa: F401
from faculty_portal.models.leave_entry import LeaveEntry, LeaveType  # noqa: F401
from faculty_portal.models.lecture_template import LectureTemplateRow  # noqa: F401
