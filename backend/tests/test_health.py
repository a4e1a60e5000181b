def test_health_endpoints(client):
    live = client.get("/api/health/live")
    assert live.status_code == 200
    assert live.json()["status"] == "ok"

    ready = client.get("/api/health/ready")
    assert ready.status_code in {200, 503}
    payload = ready.json()
    assert "database" in payload
    assert "missing_tables" in payload["database"]


def test_security_headers_are_set(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


def test_oversized_request_is_rejected(client, admin_headers):
    response = client.post(
        "/api/lecture-templates/",
        content=b"{}",
        headers={**admin_headers, "Content-Type": "application/json", "Content-Length": "999999999"},
    )
    assert response.status_code == 413
    assert response.json()["details"]["content_length"] == 999999999
