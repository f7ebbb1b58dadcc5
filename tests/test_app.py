from __future__ import annotations

import pytest

from src.school_portal.school_portal.database.memory_storage import InMemoryStorage
from src.school_portal.school_portal.main import create_app


@pytest.fixture
def memory():
    return InMemoryStorage()


@pytest.fixture
def client(monkeypatch, memory):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(storage=memory)
    return app.test_client()


def _login(client, username, password, role):
    return client.post("/login", json={"username": username, "password": password, "role": role})


def test_login_and_me(client):
    resp = _login(client, "admin", "admin123", "admin")

    assert resp.status_code == 200
    assert resp.get_json()["user"] == {"username": "admin", "role": "admin", "name": "System Administrator"}
    assert client.get("/me").get_json()["user"]["username"] == "admin"


def test_login_failures(client):
    assert _login(client, "admin", "nope", "admin").status_code == 401
    assert _login(client, "", "", "admin").status_code == 400
    assert client.get("/me").get_json()["user"] is None


def test_pages_require_login_and_role(client):
    assert client.get("/admin/dashboard").status_code == 401

    _login(client, "student1", "student123", "student")

    resp = client.get("/admin/dashboard")
    assert resp.status_code == 403
    assert client.get("/student/dashboard").status_code == 200


def test_admin_adds_student(client):
    _login(client, "admin", "admin123", "admin")

    resp = client.post("/admin/students", json={"id": "STU010", "name": "Test User", "department": "CSE", "year": "2"})

    assert resp.status_code == 201
    assert "password" not in resp.get_json()["student"]
    assert client.get("/admin/statistics").get_json()["totalStudents"] == 6

    client.post("/logout")
    assert _login(client, "stu010", "student123", "student").status_code == 200


def test_faculty_takes_attendance_student_sees_it(client):
    _login(client, "faculty1", "faculty123", "faculty")
    resp = client.post(
        "/faculty/attendance",
        json={"subjectCode": "CS301", "date": "2026-01-31", "statuses": {"STU001": "present"}},
    )
    assert resp.status_code == 201
    assert resp.get_json()["recorded"] == 2

    _login(client, "student2", "student123", "student")
    body = client.get("/student/attendance").get_json()
    assert body["overall"]["total"] == 1
    assert body["overall"]["percentage"] == 0.0


def test_corrupt_collection_is_reported(client, memory):
    _login(client, "admin", "admin123", "admin")
    memory.set("students", "{not json")

    resp = client.get("/admin/students")

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Stored data is unreadable", "collection": "students"}


def test_announcement_with_null_subject_keeps_field(client):
    _login(client, "faculty1", "faculty123", "faculty")

    resp = client.post("/faculty/announcements", json={"title": "Notice", "message": "m", "subjectCode": None})

    assert resp.status_code == 201
    assert "subjectCode" in resp.get_json()["announcement"]
