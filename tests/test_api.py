from __future__ import annotations

from datetime import date, datetime

import pytest

from src.time_tracker.time_tracker.core.enums import PeriodStatus
from src.time_tracker.time_tracker.main import create_app

NOW = datetime(2026, 2, 3, 10, 0, 0)


@pytest.fixture
def app():
    return create_app("config.testing", clock=lambda: NOW)


@pytest.fixture
def container(app):
    return app.extensions["time_tracker"]


@pytest.fixture
def client(app, container):
    container.user_service.register(username="jdoe", password="secret1", name="J Doe", employee_id="EMP100")
    return app.test_client()


@pytest.fixture
def logged_in(client):
    res = client.post("/api/auth/login", json={"username": "jdoe", "password": "secret1"})
    assert res.status_code == 200
    return client


def punch(client, punch_type: str, ts: str):
    return client.post("/api/time-entries/punch", json={"type": punch_type, "timestamp": ts})


def test_protected_routes_require_login(client):
    for path in ("/api/user/current", "/api/time-entries/today", "/api/time-entries/recent", "/api/payroll/current"):
        res = client.get(path)
        assert res.status_code == 401
        assert res.get_json() == {"message": "Authentication required"}


def test_login_and_current_user(logged_in):
    res = logged_in.get("/api/user/current")

    assert res.status_code == 200
    assert res.get_json() == {"id": 1, "username": "jdoe", "name": "J Doe", "employeeId": "EMP100"}


def test_login_with_wrong_password(client):
    res = client.post("/api/auth/login", json={"username": "jdoe", "password": "nope"})

    assert res.status_code == 401
    assert res.get_json()["message"] == "Invalid username or password"


def test_logout_clears_session(logged_in):
    assert logged_in.post("/api/auth/logout").status_code == 200
    assert logged_in.get("/api/user/current").status_code == 401


def test_register(client):
    res = client.post(
        "/api/auth/register",
        json={"username": "asmith", "password": "secret2", "name": "A Smith", "employeeId": "EMP200"},
    )

    assert res.status_code == 201
    body = res.get_json()["user"]
    assert body["username"] == "asmith"
    assert "password" not in body and "password_hash" not in body


def test_register_duplicate_username(client):
    res = client.post(
        "/api/auth/register",
        json={"username": "jdoe", "password": "secret2", "name": "Again", "employeeId": "EMP300"},
    )

    assert res.status_code == 400
    assert res.get_json()["message"] == "Username already exists"


def test_today_creates_entry(logged_in):
    res = logged_in.get("/api/time-entries/today")

    body = res.get_json()
    assert res.status_code == 200
    assert body["activity"] == "Not Clocked In"
    assert body["workedHours"] == "0.0"
    assert body["entry"]["date"] == "2026-02-03"
    assert body["entry"]["status"] == "incomplete"
    assert body["entry"]["clockIn"] is None


def test_full_punch_sequence(logged_in):
    assert punch(logged_in, "clockIn", "2026-02-03T09:00:00").status_code == 200
    assert punch(logged_in, "lunchOut", "2026-02-03T12:00:00").status_code == 200
    assert punch(logged_in, "lunchIn", "2026-02-03T12:30:00").status_code == 200
    res = punch(logged_in, "clockOut", "2026-02-03T17:00:00")

    body = res.get_json()
    assert res.status_code == 200
    assert body["totalHours"] == "7.5"
    assert body["status"] == "complete"
    assert body["flags"] == []
    assert body["clockOut"] == "2026-02-03T17:00:00"


def test_sequence_violation_returns_first_message(logged_in):
    punch(logged_in, "clockIn", "2026-02-03T09:00:00")
    punch(logged_in, "lunchOut", "2026-02-03T12:00:00")

    res = punch(logged_in, "clockOut", "2026-02-03T17:00:00")

    assert res.status_code == 400
    assert res.get_json() == {"message": "Must end break before clocking out"}
    assert logged_in.get("/api/time-entries/today").get_json()["activity"] == "On Break"


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "nap", "timestamp": "2026-02-03T09:00:00"},
        {"type": "clockIn", "timestamp": "not-a-time"},
        {"type": "clockIn"},
    ],
)
def test_malformed_punch(logged_in, payload):
    res = logged_in.post("/api/time-entries/punch", json=payload)

    assert res.status_code == 400
    assert res.get_json() == {"message": "Invalid punch data"}


def test_locked_entry_rejects_punch(logged_in, container):
    container.periods_repo.create_period(
        start_date=date(2026, 1, 19),
        end_date=date(2026, 2, 3),
        status=PeriodStatus.REVIEW,
    )

    res = punch(logged_in, "clockIn", "2026-02-03T09:00:00")

    assert res.status_code == 400
    assert res.get_json() == {"message": "Time entry is locked during reserve period"}


def test_recent_entries(logged_in):
    punch(logged_in, "clockIn", "2026-02-03T09:00:00")

    res = logged_in.get("/api/time-entries/recent")

    assert res.status_code == 200
    assert [e["date"] for e in res.get_json()] == ["2026-02-03"]


def test_payroll_current_without_period(logged_in):
    res = logged_in.get("/api/payroll/current")

    assert res.status_code == 404
    assert res.get_json() == {"message": "No active payroll period"}


def test_payroll_current_and_previous(logged_in, container):
    container.payroll_service.ensure_current_period(NOW.date())
    punch(logged_in, "clockIn", "2026-02-03T09:00:00")
    punch(logged_in, "clockOut", "2026-02-03T17:00:00")

    current = logged_in.get("/api/payroll/current").get_json()
    previous = logged_in.get("/api/payroll/previous")

    assert current["period"]["startDate"] == "2026-02-02"
    assert current["period"]["endDate"] == "2026-02-15"
    assert current["totalHours"] == "8.0"
    assert current["daysWorked"] == 1
    assert current["daysRemaining"] == 13
    assert previous.status_code == 200
    assert previous.get_json() is None
