"""Seed a small faculty directory, weekly lecture templates and demo bearer tokens.

Run:
  PYTHONPATH=backend python scripts/seed_demo_timetable.py
"""

from __future__ import annotations

import os
from datetime import date, timedelta

from sqlalchemy import select

from faculty_portal.core.security import UserRole, create_access_token
from faculty_portal.db.bootstrap import ensure_runtime_schema
from faculty_portal.db.session import SessionLocal
from faculty_portal.models.faculty import Faculty
from faculty_portal.models.invigilation import InvigilationDuty
from faculty_portal.models.leave_entry import LeaveEntry, LeaveType
from faculty_portal.models.lecture_template import LectureTemplateRow

DEPARTMENT = os.getenv("DEMO_DEPARTMENT", "CSE").strip() or "CSE"
ADMIN_EMAIL = os.getenv("DEMO_ADMIN_EMAIL", "admin.demo@college.edu").strip().lower()
SEED_BY = "seed_demo_timetable"

DEMO_FACULTY = [
    {"name": "Asha Rao", "email": "asha.rao@college.edu", "employee_id": "CSE-101"},
    {"name": "Vikram Shah", "email": "vikram.shah@college.edu", "employee_id": "CSE-102"},
    {"name": "Meera Iyer", "email": "meera.iyer@college.edu", "employee_id": "CSE-103"},
]

# (day, time, faculty email, subject, room). The two Wednesday 10:00 rows share
# Lab 1 so the admin dashboard has a room conflict to show.
DEMO_TEMPLATES = [
    ("Monday", "09:00", "asha.rao@college.edu", "Data Structures", "R101"),
    ("Monday", "11:00", "vikram.shah@college.edu", "Operating Systems", "R102"),
    ("Tuesday", "09:00", "meera.iyer@college.edu", "Discrete Mathematics", "R101"),
    ("Wednesday", "10:00", "asha.rao@college.edu", "Data Structures Lab", "Lab 1"),
    ("Wednesday", "10:00", "vikram.shah@college.edu", "Systems Lab", "Lab 1"),
    ("Thursday", "14:00", "meera.iyer@college.edu", "Automata Theory", "R103"),
    ("Friday", "09:00", "asha.rao@college.edu", "Algorithms", "R101"),
]

DEFAULT_ENTITLEMENT = {"cl": 12, "el": 30, "hpl": 20, "od": 10, "ccl": 0, "lop": 0}


def _upsert_faculty(db, *, name: str, email: str, employee_id: str) -> Faculty:
    faculty = db.execute(select(Faculty).where(Faculty.faculty_email == email)).scalar_one_or_none()
    if faculty is None:
        faculty = Faculty(name=name, faculty_email=email, **DEFAULT_ENTITLEMENT)
        db.add(faculty)
    faculty.name = name
    faculty.employee_id = employee_id
    faculty.department = DEPARTMENT
    return faculty


def _replace_templates(db, directory: dict[str, Faculty]) -> int:
    for row in db.execute(select(LectureTemplateRow).where(LectureTemplateRow.created_by == SEED_BY)).scalars():
        db.delete(row)
    for day, time, email, subject, room in DEMO_TEMPLATES:
        faculty = directory[email]
        db.add(
            LectureTemplateRow(
                day=day,
                time=time,
                name=faculty.name,
                faculty_id=faculty.employee_id,
                faculty_email=email,
                subject=subject,
                room=room,
                created_by=SEED_BY,
            )
        )
    return len(DEMO_TEMPLATES)


def _replace_duties_and_leave(db) -> None:
    for model in (InvigilationDuty, LeaveEntry):
        for row in db.execute(select(model).where(model.created_by == SEED_BY)).scalars():
            db.delete(row)

    today = date.today()
    db.add(
        InvigilationDuty(
            exam_name="Mid-term Examination",
            exam_date=today + timedelta(days=3),
            time="09:30",
            venue="Exam Hall A",
            faculty_email="meera.iyer@college.edu",
            subject="Data Structures",
            created_by=SEED_BY,
        )
    )
    db.add(
        LeaveEntry(
            faculty_email="vikram.shah@college.edu",
            leave_date=today + timedelta(days=5),
            leave_type=LeaveType.CL,
            days=1,
            reason="Personal work",
            created_by=SEED_BY,
        )
    )


def _print_tokens() -> None:
    print("\nDemo bearer tokens:")
    print(f"  - admin: {ADMIN_EMAIL}\n    {create_access_token(ADMIN_EMAIL, role=UserRole.admin.value)}")
    for item in DEMO_FACULTY:
        token = create_access_token(item["email"], role=UserRole.faculty.value, extra_claims={"name": item["name"]})
        print(f"  - faculty: {item['email']}\n    {token}")


def main() -> None:
    ensure_runtime_schema()
    with SessionLocal() as db:
        directory = {
            item["email"]: _upsert_faculty(db, name=item["name"], email=item["email"], employee_id=item["employee_id"])
            for item in DEMO_FACULTY
        }
        db.flush()
        template_count = _replace_templates(db, directory)
        _replace_duties_and_leave(db)
        db.commit()

    print(f"Seeded {len(DEMO_FACULTY)} faculty and {template_count} lecture templates in {DEPARTMENT}.")
    _print_tokens()


if __name__ == "__main__":
    main()
