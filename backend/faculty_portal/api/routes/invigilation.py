from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from faculty_portal.api.deps import get_current_user, get_db, require_roles
from faculty_portal.core.security import CurrentUser, UserRole
from faculty_portal.models.invigilation import InvigilationDuty
from faculty_portal.schemas.invigilation import InvigilationCreate, InvigilationOut, InvigilationUpdate
from faculty_portal.services.audit import log_activity

router = APIRouter()

_REQUIRED_FIELDS = {"exam_name", "date", "time", "faculty_email", "subject"}


def _get_duty_or_404(db: Session, duty_id: str) -> InvigilationDuty:
    duty = db.get(InvigilationDuty, duty_id)
    if duty is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invigilation duty not found")
    return duty


@router.get("/", response_model=list[InvigilationOut])
def list_invigilation(
    current_user: CurrentUser = Depends(require_roles(UserRole.admin)),
    db: Session = Depends(get_db),
) -> list[InvigilationOut]:
    query = select(InvigilationDuty).order_by(InvigilationDuty.exam_date, InvigilationDuty.time)
    return list(db.execute(query).scalars())


@router.get("/me", response_model=list[InvigilationOut])
def list_my_invigilation(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[InvigilationOut]:
    query = (
        select(InvigilationDuty)
        .where(func.lower(InvigilationDuty.faculty_email) == current_user.email.lower())
        .order_by(InvigilationDuty.exam_date, InvigilationDuty.time)
    )
    return list(db.execute(query).scalars())


@router.post("/", response_model=InvigilationOut, status_code=status.HTTP_201_CREATED)
def create_invigilation(
    payload: InvigilationCreate,
    current_user: CurrentUser = Depends(require_roles(UserRole.admin)),
    db: Session = Depends(get_db),
) -> InvigilationOut:
    data = payload.model_dump()
    duty = InvigilationDuty(
        exam_name=data["exam_name"],
        exam_date=data["date"],
        time=data["time"],
        venue=data["venue"],
        faculty_email=data["faculty_email"],
        subject=data["subject"],
        created_by=current_user.email,
    )
    db.add(duty)
    db.flush()
    log_activity(
        db,
        user=current_user,
        action="invigilation.created",
        entity_type="invigilation",
        entity_id=duty.id,
        details={"exam_name": duty.exam_name, "date": duty.exam_date.isoformat()},
    )
    db.commit()
    db.refresh(duty)
    return duty


@router.put("/{duty_id}", response_model=InvigilationOut)
def update_invigilation(
    duty_id: str,
    payload: InvigilationUpdate,
    current_user: CurrentUser = Depends(require_roles(UserRole.admin)),
    db: Session = Depends(get_db),
) -> InvigilationOut:
    duty = _get_duty_or_404(db, duty_id)
    data = payload.model_dump(exclude_unset=True)
    for key, value in data.items():
        if value is None and key in _REQUIRED_FIELDS:
            continue
        if value is None and key == "venue":
            value = ""
        setattr(duty, "exam_date" if key == "date" else key, value)
    if data:
        log_activity(
            db,
            user=current_user,
            action="invigilation.updated",
            entity_type="invigilation",
            entity_id=duty.id,
            details={"fields": sorted(data)},
        )
    db.commit()
    db.refresh(duty)
    return duty


@router.delete("/{duty_id}")
def delete_invigilation(
    duty_id: str,
    current_user: CurrentUser = Depends(require_roles(UserRole.admin)),
    db: Session = Depends(get_db),
) -> dict:
    duty = _get_duty_or_404(db, duty_id)
    log_activity(
        db,
        user=current_user,
        action="invigilation.deleted",
        entity_type="invigilation",
        entity_id=duty.id,
        details={"exam_name": duty.exam_name},
    )
    db.delete(duty)
    db.commit()
    return {"success": True}
