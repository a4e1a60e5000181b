from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from faculty_portal.schemas.common import canonical_day, validate_time


class LectureTemplateBase(BaseModel):
    day: str
    time: str
    name: str = Field(default="", max_length=200)
    faculty_id: str | None = Field(default=None, max_length=100)
    faculty_email: EmailStr
    subject: str = Field(min_length=1, max_length=200)
    room: str = Field(default="", max_length=100)

    @field_validator("day")
    @classmethod
    def validate_day(cls, value: str) -> str:
        return canonical_day(value)

    @field_validator("time")
    @classmethod
    def validate_time_format(cls, value: str) -> str:
        return validate_time(value)


class LectureTemplateCreate(LectureTemplateBase):
    pass


class LectureTemplateUpdate(BaseModel):
    day: str | None = None
    time: str | None = None
    name: str | None = Field(default=None, max_length=200)
    faculty_id: str | None = Field(default=None, max_length=100)
    faculty_email: EmailStr | None = None
    subject: str | None = Field(default=None, min_length=1, max_length=200)
    room: str | None = Field(default=None, max_length=100)

    @field_validator("day")
    @classmethod
    def validate_day(cls, value: str | None) -> str | None:
        return canonical_day(value) if value is not None else None

    @field_validator("time")
    @classmethod
    def validate_time_format(cls, value: str | None) -> str | None:
        return validate_time(value) if value is not None else None


class LectureTemplateOut(BaseModel):
    id: str
    day: str
    time: str
    name: str
    faculty_id: str | None = None
    faculty_email: str
    subject: str
    room: str | None = None
    created_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}
