import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from faculty_portal.schemas.common import validate_time


class InvigilationCreate(BaseModel):
    exam_name: str = Field(min_length=1, max_length=200)
    date: datetime.date
    time: str
    venue: str = Field(default="", max_length=100)
    faculty_email: EmailStr
    subject: str = Field(min_length=1, max_length=200)

    @field_validator("time")
    @classmethod
    def validate_time_format(cls, value: str) -> str:
        return validate_time(value)


class InvigilationUpdate(BaseModel):
    exam_name: str | None = Field(default=None, min_length=1, max_length=200)
    date: datetime.date | None = None
    time: str | None = None
    venue: str | None = Field(default=None, max_length=100)
    faculty_email: EmailStr | None = None
    subject: str | None = Field(default=None, min_length=1, max_length=200)

    @field_validator("time")
    @classmethod
    def validate_time_format(cls, value: str | None) -> str | None:
        return validate_time(value) if value is not None else None


class InvigilationOut(BaseModel):
    id: str
    exam_name: str
    date: datetime.date = Field(validation_alias="exam_date")
    time: str
    venue: str
    faculty_email: str
    subject: str
    created_by: str | None = None
    created_at: datetime.datetime | None = None

    model_config = {"from_attributes": True, "populate_by_name": True}
