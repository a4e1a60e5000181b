from datetime import datetime

from pydantic import BaseModel


class ActivityLogOut(BaseModel):
    id: str
    actor_email: str | None = None
    action: str
    entity_type: str | None = None
    entity_id: str | None = None
    details: dict
    created_at: datetime

    model_config = {"from_attributes": True}
