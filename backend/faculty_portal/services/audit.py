from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from faculty_portal.core.security import CurrentUser
from faculty_portal.models.activity_log import ActivityLog

logger = logging.getLogger(__name__)


def log_activity(
    db: Session,
    *,
    user: CurrentUser | None,
    action: str,
    entity_type: str | None = None,
    entity_id: str | None = None,
    details: dict | None = None,
) -> None:
    record = ActivityLog(
        actor_email=user.email if user is not None else None,
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        details=details or {},
    )
    db.add(record)
    logger.info("%s by %s on %s %s", action, record.actor_email or "system", entity_type or "-", entity_id or "-")
