from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from faculty_portal.api.deps import get_current_user, get_db, require_roles
from faculty_portal.core.keys import email_from_faculty_key
from faculty_portal.core.security import CurrentUser, UserRole
from faculty_portal.models.faculty import Faculty
from faculty_portal.schemas.faculty import FacultyCreate, FacultyOut, FacultyUpdate
from faculty_portal.services.audit import log_activity

router = APIRouter()

_NON_NULLABLE_FIELDS = {"name", "faculty_email", "cl", "el", "hpl", "od", "ccl", "lop"}


def _find_by_email(db: Session, email: str) -> Faculty | None:
    return db.execute(select(Faculty).where(Faculty.faculty_email == email.strip().lower())).scalar_one_or_none()


@router.get("/", response_model=list[FacultyOut])
def list_faculty(
    current_user: CurrentUser = Depends(require_roles(UserRole.admin)),
    db: Session = Depends(get_db),
) -> list[FacultyOut]:
    return list(db.execute(select(Faculty).order_by(Faculty.faculty_email)).scalars())


@router.get("/me", response_model=FacultyOut)
def get_my_faculty_profile(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> FacultyOut:
    faculty = _find_by_email(db, current_user.email)
    if faculty is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Faculty profile not found")
    return faculty


@router.get("/by-key/{faculty_key}", response_model=FacultyOut)
def get_faculty_by_key(
    faculty_key: str,
    current_user: CurrentUser = Depends(require_roles(UserRole.admin)),
    db: Session = Depends(get_db),
) -> FacultyOut:
    email = email_from_faculty_key(faculty_key)
    faculty = _find_by_email(db, email) if email else None
    if faculty is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Faculty not found")
    return faculty


@router.post("/", response_model=FacultyOut, status_code=status.HTTP_201_CREATED)
def create_faculty(
    payload: FacultyCreate,
    current_user: CurrentUser = Depends(require_roles(UserRole.admin)),
    db: Session = Depends(get_db),
) -> FacultyOut:
    data = payload.model_dump()
    data["faculty_email"] = data["faculty_email"].strip().lower()
    if _find_by_email(db, data["faculty_email"]) is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Faculty email already exists")
    faculty = Faculty(**data)
    db.add(faculty)
    db.flush()
    log_activity(
        db,
        user=current_user,
        action="faculty.created",
        entity_type="faculty",
        entity_id=faculty.id,
        details={"email": faculty.faculty_email},
    )
    db.commit()
    db.refresh(faculty)
    return faculty


@router.put("/{faculty_id}", response_model=FacultyOut)
def update_faculty(
    faculty_id: str,
    payload: FacultyUpdate,
    current_user: CurrentUser = Depends(require_roles(UserRole.admin)),
    db: Session = Depends(get_db),
) -> FacultyOut:
    faculty = db.get(Faculty, faculty_id)
    if faculty is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Faculty not found")

    data = payload.model_dump(exclude_unset=True)
    if data.get("faculty_email"):
        data["faculty_email"] = data["faculty_email"].strip().lower()
        existing = _find_by_email(db, data["faculty_email"])
        if existing is not None and existing.id != faculty_id:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Faculty email already exists")

    for key, value in data.items():
        if value is None and key in _NON_NULLABLE_FIELDS:
            continue
        setattr(faculty, key, value)
    if data:
        log_activity(
            db,
            user=current_user,
            action="faculty.updated",
            entity_type="faculty",
            entity_id=faculty.id,
            details={"fields": sorted(data)},
        )
    db.commit()
    db.refresh(faculty)
    return faculty


@router.delete("/{faculty_id}")
def delete_faculty(
    faculty_id: str,
    current_user: CurrentUser = Depends(require_roles(UserRole.admin)),
    db: Session = Depends(get_db),
) -> dict:
    faculty = db.get(Faculty, faculty_id)
    if faculty is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Faculty not found")
    log_activity(
        db,
        user=current_user,
        action="faculty.deleted",
        entity_type="faculty",
        entity_id=faculty.id,
        details={"email": faculty.faculty_email},
    )
    db.delete(faculty)
    db.commit()
    return {"success": True}
