import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from faculty_portal.models.leave_entry import LeaveType


class LeaveEntryCreate(BaseModel):
    faculty_email: EmailStr
    date: datetime.date
    leave_type: LeaveType
    days: float = Field(default=1, gt=0, le=365)
    session: str | None = Field(default=None, max_length=20)
    reason: str | None = Field(default=None, max_length=1000)

    @field_validator("leave_type", mode="before")
    @classmethod
    def upper_leave_type(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


class LeaveEntryUpdate(BaseModel):
    faculty_email: EmailStr | None = None
    date: datetime.date | None = None
    leave_type: LeaveType | None = None
    days: float | None = Field(default=None, gt=0, le=365)
    session: str | None = Field(default=None, max_length=20)
    reason: str | None = Field(default=None, max_length=1000)

    @field_validator("leave_type", mode="before")
    @classmethod
    def upper_leave_type(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


class LeaveEntryOut(BaseModel):
    id: str
    faculty_email: str
    date: datetime.date = Field(validation_alias="leave_date")
    leave_type: LeaveType
    days: float
    session: str | None = None
    reason: str | None = None
    created_by: str | None = None
    created_at: datetime.datetime | None = None

    model_config = {"from_attributes": True, "populate_by_name": True}


class LeaveHistoryOut(BaseModel):
    id: str
    date: datetime.date
    leave_type: str
    days: float
    session: str | None = None
    reason: str | None = None

    model_config = {"from_attributes": True}


class LeaveBalanceRowOut(BaseModel):
    faculty_id: str
    name: str
    email: str
    employee_id: str | None = None
    department: str | None = None
    entitlement: dict[str, float]
    availed: dict[str, float]
    balance: dict[str, float]
    history: list[LeaveHistoryOut]

    model_config = {"from_attributes": True}
