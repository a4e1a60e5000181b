import uuid
from datetime import date, datetime
from enum import Enum

from sqlalchemy import Date, DateTime, Enum as SAEnum, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from faculty_portal.db.base import Base


class LeaveType(str, Enum):
    CL = "CL"
    EL = "EL"
    HPL = "HPL"
    OD = "OD"
    CCL = "CCL"
    LOP = "LOP"


class LeaveEntry(Base):
    __tablename__ = "leave_ledger"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    faculty_email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    leave_date: Mapped[date] = mapped_column("date", Date, nullable=False)
    leave_type: Mapped[LeaveType] = mapped_column(SAEnum(LeaveType, name="leave_type"), nullable=False)
    days: Mapped[float] = mapped_column(Float, nullable=False, default=1)
    session: Mapped[str | None] = mapped_column(String(20), nullable=True)
    reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
