from datetime import datetime

from pydantic import BaseModel, EmailStr, Field


class FacultyBase(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    faculty_email: EmailStr
    employee_id: str | None = Field(default=None, max_length=50)
    department: str | None = Field(default=None, max_length=200)
    cl: float = Field(default=0, ge=0, le=365)
    el: float = Field(default=0, ge=0, le=365)
    hpl: float = Field(default=0, ge=0, le=365)
    od: float = Field(default=0, ge=0, le=365)
    ccl: float = Field(default=0, ge=0, le=365)
    lop: float = Field(default=0, ge=0, le=365)


class FacultyCreate(FacultyBase):
    pass


class FacultyUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    faculty_email: EmailStr | None = None
    employee_id: str | None = Field(default=None, max_length=50)
    department: str | None = Field(default=None, max_length=200)
    cl: float | None = Field(default=None, ge=0, le=365)
    el: float | None = Field(default=None, ge=0, le=365)
    hpl: float | None = Field(default=None, ge=0, le=365)
    od: float | None = Field(default=None, ge=0, le=365)
    ccl: float | None = Field(default=None, ge=0, le=365)
    lop: float | None = Field(default=None, ge=0, le=365)


class FacultyOut(FacultyBase):
    id: str
    faculty_key: str
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
