import uuid
from datetime import datetime

from sqlalchemy import DateTime, Float, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from faculty_portal.core.keys import faculty_key_from_email
from faculty_portal.db.base import Base


class Faculty(Base):
    __tablename__ = "faculty_leave_master"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    faculty_email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    employee_id: Mapped[str | None] = mapped_column(String(50), nullable=True)
    department: Mapped[str | None] = mapped_column(String(200), nullable=True)
    cl: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    el: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    hpl: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    od: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    ccl: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    lop: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), onupdate=func.now())

    @property
    def faculty_key(self) -> str:
        return faculty_key_from_email(self.faculty_email)
