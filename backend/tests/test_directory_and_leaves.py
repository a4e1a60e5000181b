from conftest import FACULTY_EMAIL


def create_faculty(client, headers, email=FACULTY_EMAIL, **overrides):
    payload = {
        "name": "Asha Rao",
        "faculty_email": email,
        "employee_id": "EMP-7",
        "department": "CSE",
        "cl": 12,
        "el": 30,
    }
    payload.update(overrides)
    response = client.post("/api/faculty/", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_faculty_directory_flow(client, admin_headers, faculty_headers):
    created = create_faculty(client, admin_headers, email="Asha.Rao@College.edu")
    assert created["faculty_email"] == "asha.rao@college.edu"
    assert created["faculty_key"] == "YXNoYS5yYW9AY29sbGVnZS5lZHU"

    duplicate = client.post(
        "/api/faculty/",
        json={"name": "Other", "faculty_email": "ASHA.RAO@college.edu"},
        headers=admin_headers,
    )
    assert duplicate.status_code == 409

    by_key = client.get(f"/api/faculty/by-key/{created['faculty_key']}", headers=admin_headers)
    assert by_key.status_code == 200
    assert by_key.json()["id"] == created["id"]

    me = client.get("/api/faculty/me", headers=faculty_headers)
    assert me.status_code == 200
    assert me.json()["employee_id"] == "EMP-7"

    updated = client.put(f"/api/faculty/{created['id']}", json={"department": "AI"}, headers=admin_headers)
    assert updated.status_code == 200
    assert updated.json()["department"] == "AI"

    listing = client.get("/api/faculty/", headers=faculty_headers)
    assert listing.status_code == 403


def test_leave_ledger_and_balance_report(client, admin_headers, faculty_headers):
    create_faculty(client, admin_headers)
    create_faculty(client, admin_headers, email="vikram@college.edu", name="Vikram", department="ECE")

    for leave_date, leave_type, days in [("2024-01-10", "cl", 1), ("2024-02-05", "EL", 3), ("2024-02-06", "CL", 0.5)]:
        response = client.post(
            "/api/leaves",
            json={"faculty_email": FACULTY_EMAIL, "date": leave_date, "leave_type": leave_type, "days": days},
            headers=admin_headers,
        )
        assert response.status_code == 201, response.text
        assert response.json()["leave_type"] == leave_type.upper()

    bad_type = client.post(
        "/api/leaves",
        json={"faculty_email": FACULTY_EMAIL, "date": "2024-02-06", "leave_type": "XYZ", "days": 1},
        headers=admin_headers,
    )
    assert bad_type.status_code == 422

    mine = client.get("/api/leaves/me", headers=faculty_headers)
    assert mine.status_code == 200
    assert [item["date"] for item in mine.json()] == ["2024-02-06", "2024-02-05", "2024-01-10"]

    report = client.get("/api/leaves/balance", headers=admin_headers)
    assert report.status_code == 200
    rows = report.json()
    assert [row["email"] for row in rows] == [FACULTY_EMAIL, "vikram@college.edu"]
    asha = rows[0]
    assert asha["availed"]["CL"] == 1.5
    assert asha["balance"]["CL"] == 10.5
    assert asha["balance"]["EL"] == 27
    assert [item["date"] for item in asha["history"]] == ["2024-02-06", "2024-02-05", "2024-01-10"]

    filtered = client.get("/api/leaves/balance", params={"department": "ece"}, headers=admin_headers)
    assert [row["email"] for row in filtered.json()] == ["vikram@college.edu"]

    forbidden = client.get("/api/leaves/balance", headers=faculty_headers)
    assert forbidden.status_code == 403


def test_invigilation_duties(client, admin_headers, faculty_headers):
    for exam_date, time in [("2024-05-03", "14:00"), ("2024-05-02", "10:00"), ("2024-05-02", "09:00")]:
        response = client.post(
            "/api/invigilation/",
            json={
                "exam_name": "Mid Semester",
                "date": exam_date,
                "time": time,
                "venue": "Hall A",
                "faculty_email": FACULTY_EMAIL.upper(),
                "subject": "Compilers",
            },
            headers=admin_headers,
        )
        assert response.status_code == 201, response.text

    listing = client.get("/api/invigilation/", headers=admin_headers)
    assert [(item["date"], item["time"]) for item in listing.json()] == [
        ("2024-05-02", "09:00"),
        ("2024-05-02", "10:00"),
        ("2024-05-03", "14:00"),
    ]

    mine = client.get("/api/invigilation/me", headers=faculty_headers)
    assert mine.status_code == 200
    assert len(mine.json()) == 3

    duty_id = listing.json()[0]["id"]
    moved = client.put(f"/api/invigilation/{duty_id}", json={"date": "2024-05-09"}, headers=admin_headers)
    assert moved.status_code == 200
    assert moved.json()["date"] == "2024-05-09"

    removed = client.delete(f"/api/invigilation/{duty_id}", headers=admin_headers)
    assert removed.status_code == 200


def test_null_entitlements_leave_faculty_unchanged(client, admin_headers):
    created = create_faculty(client, admin_headers)

    updated = client.put(
        f"/api/faculty/{created['id']}",
        json={"cl": None, "name": None, "el": 24},
        headers=admin_headers,
    )
    assert updated.status_code == 200, updated.text
    assert updated.json()["cl"] == 12
    assert updated.json()["el"] == 24
    assert updated.json()["name"] == "Asha Rao"


def test_leave_entry_can_be_corrected(client, admin_headers):
    create_faculty(client, admin_headers)
    created = client.post(
        "/api/leaves",
        json={"faculty_email": FACULTY_EMAIL, "date": "2024-03-04", "leave_type": "CL", "days": 1},
        headers=admin_headers,
    )
    assert created.status_code == 201, created.text
    entry_id = created.json()["id"]

    updated = client.put(
        f"/api/leaves/{entry_id}",
        json={"leave_type": "el", "date": "2024-03-05", "days": None, "session": "FN"},
        headers=admin_headers,
    )
    assert updated.status_code == 200, updated.text
    assert updated.json()["leave_type"] == "EL"
    assert updated.json()["date"] == "2024-03-05"
    assert updated.json()["days"] == 1
    assert updated.json()["session"] == "FN"

    report = client.get("/api/leaves/balance", headers=admin_headers)
    assert report.json()[0]["availed"]["CL"] == 0
    assert report.json()[0]["availed"]["EL"] == 1

    missing = client.put("/api/leaves/unknown", json={"days": 2}, headers=admin_headers)
    assert missing.status_code == 404


def test_null_invigilation_venue_is_stored_blank(client, admin_headers):
    created = client.post(
        "/api/invigilation/",
        json={
            "exam_name": "End Semester",
            "date": "2024-06-01",
            "time": "09:30",
            "venue": "Hall C",
            "faculty_email": FACULTY_EMAIL,
            "subject": "Compilers",
        },
        headers=admin_headers,
    )
    assert created.status_code == 201, created.text

    updated = client.put(
        f"/api/invigilation/{created.json()['id']}",
        json={"venue": None, "exam_name": None},
        headers=admin_headers,
    )
    assert updated.status_code == 200, updated.text
    assert updated.json()["venue"] == ""
    assert updated.json()["exam_name"] == "End Semester"
