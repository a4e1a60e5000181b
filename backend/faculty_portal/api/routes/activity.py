from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.orm import Session

from faculty_portal.api.deps import get_db, require_roles
from faculty_portal.core.security import CurrentUser, UserRole
from faculty_portal.models.activity_log import ActivityLog
from faculty_portal.schemas.activity import ActivityLogOut

router = APIRouter()


@router.get("/activity/logs", response_model=list[ActivityLogOut])
def list_activity_logs(
    current_user: CurrentUser = Depends(require_roles(UserRole.admin)),
    db: Session = Depends(get_db),
) -> list[ActivityLogOut]:
    query = select(ActivityLog).order_by(ActivityLog.created_at.desc()).limit(500)
    return list(db.execute(query).scalars())
