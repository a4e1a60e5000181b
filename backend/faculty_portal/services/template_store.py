from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from faculty_portal.core.exceptions import DataUnavailableError
from faculty_portal.db.base import Base
from faculty_portal.models.faculty import Faculty
from faculty_portal.models.invigilation import InvigilationDuty
from faculty_portal.models.leave_entry import LeaveEntry
from faculty_portal.models.lecture_template import LectureTemplateRow
from faculty_portal.services.occurrences import LectureTemplate

logger = logging.getLogger(__name__)

LECTURE_TEMPLATES = "lecture_templates"
INVIGILATION = "invigilation"
FACULTY_LEAVE_MASTER = "faculty_leave_master"
LEAVE_LEDGER = "leave_ledger"

COLLECTIONS: dict[str, type[Base]] = {
    LECTURE_TEMPLATES: LectureTemplateRow,
    INVIGILATION: InvigilationDuty,
    FACULTY_LEAVE_MASTER: Faculty,
    LEAVE_LEDGER: LeaveEntry,
}


def template_from_row(row: LectureTemplateRow) -> LectureTemplate:
    return LectureTemplate(
        day=row.day or "",
        time=row.time or "",
        faculty_id=row.faculty_id or "",
        faculty_email=row.faculty_email or "",
        subject=row.subject or "",
        room=row.room or "",
        name=row.name or "",
    )


class TemplateStore:
    """Read-only snapshot access to the portal's collections.

    Each collection is returned whole as ``{id: record}``, fetched once per
    request. Store failures surface as :class:`DataUnavailableError`.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_all(self, path: str) -> dict[str, Base]:
        model = COLLECTIONS.get(path)
        if model is None:
            raise ValueError(f"Unknown collection path: {path}")
        try:
            rows = self.db.execute(select(model)).scalars().all()
        except SQLAlchemyError as exc:
            logger.warning("Failed to read collection %s", path, exc_info=True)
            raise DataUnavailableError(path, str(exc)) from exc
        return {row.id: row for row in rows}

    def lecture_templates(self) -> dict[str, LectureTemplate]:
        rows = self.get_all(LECTURE_TEMPLATES)
        return {template_id: template_from_row(row) for template_id, row in rows.items()}
