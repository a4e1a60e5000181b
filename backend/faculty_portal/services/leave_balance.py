from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from faculty_portal.core.keys import faculty_key_from_email
from faculty_portal.models.faculty import Faculty
from faculty_portal.models.leave_entry import LeaveEntry, LeaveType

LEAVE_CODES: tuple[str, ...] = tuple(item.value for item in LeaveType)


def empty_leave_totals() -> dict[str, float]:
    return {code: 0.0 for code in LEAVE_CODES}


def entitlements_for(faculty: Faculty) -> dict[str, float]:
    return {code: float(getattr(faculty, code.lower()) or 0) for code in LEAVE_CODES}


def availed_by_faculty(entries: Iterable[LeaveEntry]) -> dict[str, dict[str, float]]:
    """Sum ledger days per faculty key and leave type."""
    availed: dict[str, dict[str, float]] = {}
    for entry in entries:
        if not entry.faculty_email:
            continue
        code = entry.leave_type.value if isinstance(entry.leave_type, LeaveType) else str(entry.leave_type).upper()
        if code not in LEAVE_CODES:
            continue
        key = faculty_key_from_email(entry.faculty_email)
        totals = availed.setdefault(key, empty_leave_totals())
        totals[code] += float(entry.days or 0)
    return availed


@dataclass
class LeaveHistoryItem:
    id: str
    date: date
    leave_type: str
    days: float
    session: str | None
    reason: str | None


@dataclass
class LeaveBalanceRow:
    faculty_id: str
    name: str
    email: str
    employee_id: str | None
    department: str | None
    entitlement: dict[str, float]
    availed: dict[str, float]
    balance: dict[str, float]
    history: list[LeaveHistoryItem] = field(default_factory=list)


def build_balance_report(
    master: Iterable[Faculty],
    ledger: Iterable[LeaveEntry],
    *,
    department: str | None = None,
    email: str | None = None,
) -> list[LeaveBalanceRow]:
    ledger_entries = list(ledger)
    availed = availed_by_faculty(ledger_entries)
    department_filter = (department or "").strip().lower()
    email_filter = (email or "").strip().lower()

    rows: list[LeaveBalanceRow] = []
    for faculty in master:
        faculty_email = faculty.faculty_email or ""
        email_norm = faculty_email.lower()
        faculty_key = faculty_key_from_email(faculty_email)
        if department_filter and (faculty.department or "").strip().lower() != department_filter:
            continue
        if email_filter and email_filter not in email_norm:
            continue

        entitlement = entitlements_for(faculty)
        taken = availed.get(faculty_key, empty_leave_totals())
        balance = {code: entitlement[code] - taken[code] for code in LEAVE_CODES}

        history = [
            LeaveHistoryItem(
                id=entry.id,
                date=entry.leave_date,
                leave_type=entry.leave_type.value if isinstance(entry.leave_type, LeaveType) else str(entry.leave_type),
                days=float(entry.days or 0),
                session=entry.session,
                reason=entry.reason,
            )
            for entry in ledger_entries
            if faculty_key_from_email(entry.faculty_email) == faculty_key
        ]
        history.sort(key=lambda item: item.date, reverse=True)

        rows.append(
            LeaveBalanceRow(
                faculty_id=faculty.id,
                name=faculty.name,
                email=faculty_email,
                employee_id=faculty.employee_id,
                department=faculty.department,
                entitlement=entitlement,
                availed=dict(taken),
                balance=balance,
                history=history,
            )
        )

    rows.sort(key=lambda row: row.email.lower())
    return rows
