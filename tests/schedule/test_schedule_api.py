def test_healthz(client):
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.data == b"OK"


def test_profiles_lists_catalog(client):
    data = client.get("/api/profiles").get_json()

    assert data["success"] is True
    assert [p["name"] for p in data["profiles"]] == ["6x1", "5x2"]
    assert data["profiles"][0]["profile_id"] == 1
    assert data["refresh_interval_seconds"] == 60


def test_schedule_with_pinned_clock(client):
    response = client.post("/api/schedule", json={
        "date": "2026-01-05",
        "times": {"entry": "08:00"},
        "now": "08:00",
    })

    assert response.status_code == 200
    schedule = response.get_json()["schedule"]
    assert schedule["exit_range_text"] == "16:20 - 18:20"
    assert schedule["worked_current"] == "00:00"
    assert schedule["work_status_type"] == "normal"
    assert schedule["time_to_lunch_limit"] == "Lunch due in: 06:00"


def test_schedule_with_catalog_profile(client):
    response = client.post("/api/schedule", json={
        "date": "2026-01-05",
        "profile_id": 2,
        "times": {"entry": "08:00", "lunch_out": "12:00", "lunch_in": "13:00"},
        "now": "13:00",
    })

    schedule = response.get_json()["schedule"]
    assert schedule["exit_range_text"] == "17:00 - 19:00"
    assert schedule["lunch_status_text"] == "OK"


def test_schedule_errors(client):
    assert client.post("/api/schedule", data="nope", content_type="text/plain").status_code == 400
    assert client.post("/api/schedule", json={"date": "bad"}).status_code == 400
    assert client.post("/api/schedule", json={"date": "2026-01-05", "now": "25:00"}).status_code == 400

    missing = client.post("/api/schedule", json={"date": "2026-01-05", "profile_id": 99})
    assert missing.status_code == 404
    assert missing.get_json() == {"success": False, "message": "Shift profile 99 not found"}


def test_inline_profile_with_bad_id_is_a_client_error(client):
    response = client.post("/api/schedule", json={
        "date": "2026-01-05",
        "times": {"entry": "08:00"},
        "profile": {
            "profile_id": "x",
            "work_target_minutes": 440,
            "lunch_target_minutes": 100,
            "lunch_min_limit_minutes": 60,
            "max_extra_minutes": 120,
        },
    })

    assert response.status_code == 400
    assert response.get_json() == {"success": False, "message": "profile_id must be an integer"}


def test_lunch_return_endpoint(client):
    invalid = client.post("/api/schedule/lunch-return", json={"lunch_out": "12:00", "lunch_in": "11:30"})
    assert invalid.status_code == 422
    assert invalid.get_json()["message"] == "Return cannot be before departure."

    short = client.post("/api/schedule/lunch-return", json={"lunch_out": "12:00", "lunch_in": "12:40"})
    assert short.status_code == 200
    assert short.get_json()["warning"] is True


def test_board_notifications_once_per_session(client):
    body = {"records": [{"id": 1, "date": "2026-01-05", "times": {"entry": "08:00"}}], "now": "17:15"}

    first = client.post("/api/schedule/board", json=body).get_json()
    assert first["rows"][0]["notification"]["trigger"] == "warning_10min"

    second = client.post("/api/schedule/board", json=body).get_json()
    assert second["rows"][0]["schedule"]["notification_trigger"] == "warning_10min"
    assert second["rows"][0]["notification"] is None

    reset = client.post("/api/schedule/board", json={**body, "reset": True}).get_json()
    assert reset["rows"][0]["notification"]["trigger"] == "warning_10min"
