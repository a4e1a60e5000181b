def create_template(client, headers, **overrides):
    payload = {
        "day": "Monday",
        "time": "09:00",
        "name": "Asha Rao",
        "faculty_email": "asha.rao@college.edu",
        "subject": "Data Structures",
        "room": "R101",
    }
    payload.update(overrides)
    response = client.post("/api/lecture-templates/", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_admin_template_crud_flow(client, admin_headers):
    created = create_template(client, admin_headers, day="wed")
    assert created["day"] == "Wednesday"
    assert created["created_by"] == "admin@college.edu"

    fetched = client.get(f"/api/lecture-templates/{created['id']}", headers=admin_headers)
    assert fetched.status_code == 200
    assert fetched.json()["subject"] == "Data Structures"

    updated = client.put(
        f"/api/lecture-templates/{created['id']}",
        json={"time": "11:15", "room": "Lab 2"},
        headers=admin_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["time"] == "11:15"
    assert updated.json()["room"] == "Lab 2"
    assert updated.json()["day"] == "Wednesday"

    deleted = client.delete(f"/api/lecture-templates/{created['id']}", headers=admin_headers)
    assert deleted.status_code == 200
    assert deleted.json() == {"success": True}

    missing = client.get(f"/api/lecture-templates/{created['id']}", headers=admin_headers)
    assert missing.status_code == 404

    logs = client.get("/api/activity/logs", headers=admin_headers)
    assert logs.status_code == 200
    actions = {item["action"] for item in logs.json()}
    assert {"lecture_template.created", "lecture_template.updated", "lecture_template.deleted"} <= actions


def test_templates_listed_in_weekday_then_time_order(client, admin_headers, faculty_headers):
    create_template(client, admin_headers, day="Friday", time="08:00")
    create_template(client, admin_headers, day="Monday", time="14:00")
    create_template(client, admin_headers, day="SUN", time="07:00")
    create_template(client, admin_headers, day="Monday", time="09:00")

    response = client.get("/api/lecture-templates/", headers=faculty_headers)
    assert response.status_code == 200
    assert [(item["day"], item["time"]) for item in response.json()] == [
        ("Monday", "09:00"),
        ("Monday", "14:00"),
        ("Friday", "08:00"),
        ("Sunday", "07:00"),
    ]


def test_template_validation_rejects_bad_day_and_time(client, admin_headers):
    bad_day = client.post(
        "/api/lecture-templates/",
        json={"day": "Mo", "time": "09:00", "faculty_email": "a@x.edu", "subject": "OS"},
        headers=admin_headers,
    )
    assert bad_day.status_code == 422

    bad_time = client.post(
        "/api/lecture-templates/",
        json={"day": "Monday", "time": "9am", "faculty_email": "a@x.edu", "subject": "OS"},
        headers=admin_headers,
    )
    assert bad_time.status_code == 422


def test_faculty_cannot_manage_templates(client, faculty_headers):
    response = client.post(
        "/api/lecture-templates/",
        json={"day": "Monday", "time": "09:00", "faculty_email": "a@x.edu", "subject": "OS"},
        headers=faculty_headers,
    )
    assert response.status_code == 403


def test_templates_require_a_token(client):
    response = client.get("/api/lecture-templates/")
    assert response.status_code in {401, 403}


def test_name_and_code_filled_from_faculty_directory(client, admin_headers):
    faculty = client.post(
        "/api/faculty/",
        json={
            "name": "Vikram Shah",
            "faculty_email": "Vikram.Shah@college.edu",
            "employee_id": "EMP-42",
            "department": "CSE",
            "cl": 12,
        },
        headers=admin_headers,
    )
    assert faculty.status_code == 201, faculty.text

    created = create_template(client, admin_headers, name="", faculty_email="vikram.shah@college.edu")
    assert created["name"] == "Vikram Shah"
    assert created["faculty_id"] == "EMP-42"


def test_null_name_and_room_are_stored_blank(client, admin_headers):
    created = create_template(client, admin_headers)

    updated = client.put(
        f"/api/lecture-templates/{created['id']}",
        json={"name": None, "room": None, "subject": None},
        headers=admin_headers,
    )
    assert updated.status_code == 200, updated.text
    assert updated.json()["name"] == ""
    assert updated.json()["room"] == ""
    assert updated.json()["subject"] == "Data Structures"


def test_changing_faculty_email_refreshes_directory_copy(client, admin_headers):
    for name, email, employee_id in [
        ("Vikram Shah", "vikram.shah@college.edu", "EMP-42"),
        ("Meera Iyer", "meera.iyer@college.edu", "EMP-43"),
    ]:
        response = client.post(
            "/api/faculty/",
            json={"name": name, "faculty_email": email, "employee_id": employee_id},
            headers=admin_headers,
        )
        assert response.status_code == 201, response.text

    created = create_template(client, admin_headers, name="", faculty_email="vikram.shah@college.edu")
    assert created["faculty_id"] == "EMP-42"

    moved = client.put(
        f"/api/lecture-templates/{created['id']}",
        json={"faculty_email": "meera.iyer@college.edu"},
        headers=admin_headers,
    )
    assert moved.status_code == 200, moved.text
    assert moved.json()["name"] == "Meera Iyer"
    assert moved.json()["faculty_id"] == "EMP-43"

    unlisted = client.put(
        f"/api/lecture-templates/{created['id']}",
        json={"faculty_email": "guest@college.edu"},
        headers=admin_headers,
    )
    assert unlisted.status_code == 200
    assert unlisted.json()["name"] == ""
    assert unlisted.json()["faculty_id"] is None

    renamed = client.put(
        f"/api/lecture-templates/{created['id']}",
        json={"faculty_email": "vikram.shah@college.edu", "name": "Dr. V. Shah"},
        headers=admin_headers,
    )
    assert renamed.json()["name"] == "Dr. V. Shah"
    assert renamed.json()["faculty_id"] == "EMP-42"
