import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from faculty_portal.api.deps import get_current_user, get_db, require_roles
from faculty_portal.core.security import CurrentUser, UserRole
from faculty_portal.models.faculty import Faculty
from faculty_portal.models.lecture_template import LectureTemplateRow
from faculty_portal.schemas.common import DAY_ORDER, UNKNOWN_DAY_ORDER
from faculty_portal.schemas.lecture_template import (
    LectureTemplateCreate,
    LectureTemplateOut,
    LectureTemplateUpdate,
)
from faculty_portal.services.audit import log_activity

router = APIRouter()
logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = {"day", "time", "faculty_email", "subject"}
_BLANK_WHEN_NULL = {"name", "room"}


def _fill_from_directory(db: Session, template: LectureTemplateRow) -> None:
    if template.name and template.faculty_id:
        return
    faculty = db.execute(
        select(Faculty).where(Faculty.faculty_email == template.faculty_email.strip().lower())
    ).scalar_one_or_none()
    if faculty is None:
        return
    if not template.name:
        template.name = faculty.name
    if not template.faculty_id and faculty.employee_id:
        template.faculty_id = faculty.employee_id


def _get_template_or_404(db: Session, template_id: str) -> LectureTemplateRow:
    template = db.get(LectureTemplateRow, template_id)
    if template is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Lecture template not found")
    return template


@router.get("/", response_model=list[LectureTemplateOut])
def list_lecture_templates(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[LectureTemplateOut]:
    templates = list(db.execute(select(LectureTemplateRow)).scalars())
    templates.sort(key=lambda item: (DAY_ORDER.get(item.day, UNKNOWN_DAY_ORDER), item.time or ""))
    return templates


@router.get("/{template_id}", response_model=LectureTemplateOut)
def get_lecture_template(
    template_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> LectureTemplateOut:
    return _get_template_or_404(db, template_id)


@router.post("/", response_model=LectureTemplateOut, status_code=status.HTTP_201_CREATED)
def create_lecture_template(
    payload: LectureTemplateCreate,
    current_user: CurrentUser = Depends(require_roles(UserRole.admin)),
    db: Session = Depends(get_db),
) -> LectureTemplateOut:
    template = LectureTemplateRow(**payload.model_dump(), created_by=current_user.email)
    _fill_from_directory(db, template)
    db.add(template)
    db.flush()
    log_activity(
        db,
        user=current_user,
        action="lecture_template.created",
        entity_type="lecture_template",
        entity_id=template.id,
        details={"day": template.day, "time": template.time, "subject": template.subject},
    )
    db.commit()
    db.refresh(template)
    return template


@router.put("/{template_id}", response_model=LectureTemplateOut)
def update_lecture_template(
    template_id: str,
    payload: LectureTemplateUpdate,
    current_user: CurrentUser = Depends(require_roles(UserRole.admin)),
    db: Session = Depends(get_db),
) -> LectureTemplateOut:
    template = _get_template_or_404(db, template_id)
    data = payload.model_dump(exclude_unset=True)
    previous_email = template.faculty_email.strip().lower()
    for key, value in data.items():
        if value is None and key in _REQUIRED_FIELDS:
            continue
        if value is None and key in _BLANK_WHEN_NULL:
            value = ""
        setattr(template, key, value)
    if template.faculty_email.strip().lower() != previous_email:
        # The denormalized name and code belong to the previous faculty.
        if "name" not in data:
            template.name = ""
        if "faculty_id" not in data:
            template.faculty_id = None
    _fill_from_directory(db, template)
    if data:
        log_activity(
            db,
            user=current_user,
            action="lecture_template.updated",
            entity_type="lecture_template",
            entity_id=template.id,
            details={"fields": sorted(data)},
        )
    db.commit()
    db.refresh(template)
    return template


@router.delete("/{template_id}")
def delete_lecture_template(
    template_id: str,
    current_user: CurrentUser = Depends(require_roles(UserRole.admin)),
    db: Session = Depends(get_db),
) -> dict:
    template = _get_template_or_404(db, template_id)
    log_activity(
        db,
        user=current_user,
        action="lecture_template.deleted",
        entity_type="lecture_template",
        entity_id=template.id,
        details={"day": template.day, "time": template.time, "subject": template.subject},
    )
    db.delete(template)
    db.commit()
    return {"success": True}
