from datetime import date

from faculty_portal.core.keys import email_from_faculty_key, faculty_key_from_email
from faculty_portal.models.faculty import Faculty
from faculty_portal.models.leave_entry import LeaveEntry, LeaveType
from faculty_portal.services.leave_balance import availed_by_faculty, build_balance_report


def make_faculty(email, **overrides):
    values = {"id": email, "name": email.split("@")[0], "faculty_email": email, "department": "CSE"}
    values.update({code: 0 for code in ("cl", "el", "hpl", "od", "ccl", "lop")})
    values.update(overrides)
    return Faculty(**values)


def make_entry(entry_id, email, leave_type, days, when):
    return LeaveEntry(id=entry_id, faculty_email=email, leave_type=leave_type, days=days, leave_date=when)


def test_faculty_key_is_unpadded_base64url_of_normalized_email():
    key = faculty_key_from_email("  Asha.Rao@College.edu ")
    assert key == "YXNoYS5yYW9AY29sbGVnZS5lZHU"
    assert "=" not in key
    assert email_from_faculty_key(key) == "asha.rao@college.edu"


def test_email_from_invalid_key_is_none():
    assert email_from_faculty_key("") is None
    assert email_from_faculty_key("%%%") is None


def test_availed_sums_days_per_faculty_and_type():
    entries = [
        make_entry("l1", "a@x.edu", LeaveType.CL, 1, date(2024, 1, 3)),
        make_entry("l2", "A@X.edu", LeaveType.CL, 0.5, date(2024, 1, 9)),
        make_entry("l3", "a@x.edu", LeaveType.EL, 2, date(2024, 2, 1)),
        make_entry("l4", "", LeaveType.CL, 1, date(2024, 2, 1)),
    ]
    availed = availed_by_faculty(entries)

    assert set(availed) == {faculty_key_from_email("a@x.edu")}
    totals = availed[faculty_key_from_email("a@x.edu")]
    assert totals["CL"] == 1.5
    assert totals["EL"] == 2
    assert totals["LOP"] == 0


def test_balance_report_rows_history_and_filters():
    master = [
        make_faculty("zoe@x.edu", cl=12, el=30),
        make_faculty("amit@x.edu", cl=10, department="ECE"),
    ]
    ledger = [
        make_entry("l1", "zoe@x.edu", LeaveType.CL, 2, date(2024, 1, 3)),
        make_entry("l2", "Zoe@x.edu", LeaveType.EL, 5, date(2024, 3, 1)),
        make_entry("l3", "amit@x.edu", LeaveType.CL, 1, date(2024, 2, 1)),
    ]

    rows = build_balance_report(master, ledger)
    assert [row.email for row in rows] == ["amit@x.edu", "zoe@x.edu"]

    zoe = rows[1]
    assert zoe.entitlement["CL"] == 12
    assert zoe.availed["CL"] == 2
    assert zoe.balance["CL"] == 10
    assert zoe.balance["EL"] == 25
    assert [item.id for item in zoe.history] == ["l2", "l1"]

    assert [row.email for row in build_balance_report(master, ledger, department="ece")] == ["amit@x.edu"]
    assert [row.email for row in build_balance_report(master, ledger, email="ZO")] == ["zoe@x.edu"]
    assert build_balance_report(master, ledger, department="MECH") == []
