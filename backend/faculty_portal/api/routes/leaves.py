from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from faculty_portal.api.deps import get_current_user, get_db, get_store, require_roles
from faculty_portal.core.security import CurrentUser, UserRole
from faculty_portal.models.leave_entry import LeaveEntry
from faculty_portal.schemas.leave import LeaveBalanceRowOut, LeaveEntryCreate, LeaveEntryOut, LeaveEntryUpdate
from faculty_portal.services.audit import log_activity
from faculty_portal.services.leave_balance import build_balance_report
from faculty_portal.services.template_store import FACULTY_LEAVE_MASTER, LEAVE_LEDGER, TemplateStore

router = APIRouter()

_REQUIRED_FIELDS = {"faculty_email", "date", "leave_type", "days"}
_COLUMN_FOR_FIELD = {"date": "leave_date"}


@router.get("/leaves", response_model=list[LeaveEntryOut])
def list_leave_entries(
    faculty_email: str | None = Query(default=None),
    current_user: CurrentUser = Depends(require_roles(UserRole.admin)),
    db: Session = Depends(get_db),
) -> list[LeaveEntryOut]:
    query = select(LeaveEntry).order_by(LeaveEntry.leave_date.desc())
    if faculty_email:
        query = query.where(func.lower(LeaveEntry.faculty_email) == faculty_email.strip().lower())
    return list(db.execute(query).scalars())


@router.get("/leaves/me", response_model=list[LeaveEntryOut])
def list_my_leave_entries(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[LeaveEntryOut]:
    query = (
        select(LeaveEntry)
        .where(func.lower(LeaveEntry.faculty_email) == current_user.email.lower())
        .order_by(LeaveEntry.leave_date.desc())
    )
    return list(db.execute(query).scalars())


@router.get("/leaves/balance", response_model=list[LeaveBalanceRowOut])
def leave_balance_report(
    department: str | None = Query(default=None),
    email: str | None = Query(default=None),
    current_user: CurrentUser = Depends(require_roles(UserRole.admin)),
    store: TemplateStore = Depends(get_store),
) -> list[LeaveBalanceRowOut]:
    master = store.get_all(FACULTY_LEAVE_MASTER).values()
    ledger = store.get_all(LEAVE_LEDGER).values()
    return build_balance_report(master, ledger, department=department, email=email)


@router.post("/leaves", response_model=LeaveEntryOut, status_code=status.HTTP_201_CREATED)
def create_leave_entry(
    payload: LeaveEntryCreate,
    current_user: CurrentUser = Depends(require_roles(UserRole.admin)),
    db: Session = Depends(get_db),
) -> LeaveEntryOut:
    entry = LeaveEntry(
        faculty_email=payload.faculty_email.strip().lower(),
        leave_date=payload.date,
        leave_type=payload.leave_type,
        days=payload.days,
        session=payload.session,
        reason=payload.reason,
        created_by=current_user.email,
    )
    db.add(entry)
    db.flush()
    log_activity(
        db,
        user=current_user,
        action="leave.recorded",
        entity_type="leave_entry",
        entity_id=entry.id,
        details={"faculty_email": entry.faculty_email, "leave_type": entry.leave_type.value, "days": entry.days},
    )
    db.commit()
    db.refresh(entry)
    return entry


@router.put("/leaves/{entry_id}", response_model=LeaveEntryOut)
def update_leave_entry(
    entry_id: str,
    payload: LeaveEntryUpdate,
    current_user: CurrentUser = Depends(require_roles(UserRole.admin)),
    db: Session = Depends(get_db),
) -> LeaveEntryOut:
    entry = db.get(LeaveEntry, entry_id)
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Leave entry not found")

    data = payload.model_dump(exclude_unset=True)
    if data.get("faculty_email"):
        data["faculty_email"] = data["faculty_email"].strip().lower()
    for key, value in data.items():
        if value is None and key in _REQUIRED_FIELDS:
            continue
        setattr(entry, _COLUMN_FOR_FIELD.get(key, key), value)
    if data:
        log_activity(
            db,
            user=current_user,
            action="leave.updated",
            entity_type="leave_entry",
            entity_id=entry.id,
            details={"fields": sorted(data)},
        )
    db.commit()
    db.refresh(entry)
    return entry


@router.delete("/leaves/{entry_id}")
def delete_leave_entry(
    entry_id: str,
    current_user: CurrentUser = Depends(require_roles(UserRole.admin)),
    db: Session = Depends(get_db),
) -> dict:
    entry = db.get(LeaveEntry, entry_id)
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Leave entry not found")
    log_activity(
        db,
        user=current_user,
        action="leave.deleted",
        entity_type="leave_entry",
        entity_id=entry.id,
        details={"faculty_email": entry.faculty_email},
    )
    db.delete(entry)
    db.commit()
    return {"success": True}
