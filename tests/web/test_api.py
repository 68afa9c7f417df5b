from __future__ import annotations

import pytest

from src.dojo_attendance.dojo_attendance.main import create_app


def _login(client, role: str):
    resp = client.post("/auth/login", json={"role": role})
    assert resp.status_code == 200
    return resp.get_json()


def test_login_logout_flow(client):
    assert client.get("/auth/me").get_json() is None

    admin = _login(client, "ADMIN")
    assert admin["id"] == "admin-1"
    assert client.get("/auth/me").get_json()["role"] == "ADMIN"

    assert client.post("/auth/logout").status_code == 204
    assert client.get("/auth/me").get_json() is None


def test_repeated_instructor_login_keeps_identity(client):
    first = _login(client, "INSTRUCTOR")
    second = _login(client, "INSTRUCTOR")

    assert first["id"] == second["id"]
    _login(client, "ADMIN")
    emails = [i["email"] for i in client.get("/instructors").get_json()]
    assert emails.count("social.login@example.com") == 1


def test_login_requires_a_known_role(client):
    assert client.post("/auth/login", json={}).status_code == 400
    assert client.post("/auth/login", json={"role": "guest"}).status_code == 400


def test_roster_requires_login_and_admin_routes_require_admin(client, student_fields):
    assert client.get("/students").status_code == 401

    _login(client, "INSTRUCTOR")
    assert client.get("/students").status_code == 200
    assert client.post("/students", json=student_fields).status_code == 403
    assert client.get("/dashboard").status_code == 403


def test_student_crud(client, student_fields):
    _login(client, "ADMIN")

    resp = client.post("/students", json=student_fields)
    assert resp.status_code == 201
    created = resp.get_json()
    assert created["belt_color"] == "Cinza"
    assert isinstance(created["age"], int)

    updated = {**student_fields, "belt_color": "Amarela"}
    assert client.put(f"/students/{created['id']}", json=updated).status_code == 204
    assert client.get(f"/students/{created['id']}").get_json()["belt_color"] == "Amarela"

    # unknown ids are silently ignored
    assert client.put("/students/stu-404", json=updated).status_code == 204
    assert client.delete("/students/stu-404").status_code == 204
    assert client.get("/students/stu-404").status_code == 404

    assert client.delete(f"/students/{created['id']}").status_code == 204
    ids = [s["id"] for s in client.get("/students").get_json()]
    assert ids == ["stu-1", "stu-2", "stu-3", "stu-4", "stu-5"]


def test_student_payload_must_be_complete(client, student_fields):
    _login(client, "ADMIN")
    del student_fields["phone"]

    resp = client.post("/students", json=student_fields)

    assert resp.status_code == 400
    assert "phone" in resp.get_json()["error"]


def test_instructor_routes(client):
    _login(client, "ADMIN")

    resp = client.post("/instructors", json={"name": "Professora Ana", "email": "ana@dojo.com", "role": "ADMIN"})
    assert resp.status_code == 201
    ana = resp.get_json()
    assert ana["role"] == "INSTRUCTOR"

    assert client.get(f"/instructors/{ana['id']}/name").get_json()["name"] == "Professora Ana"
    assert client.get("/instructors/instr-404/name").get_json()["name"] == "Desconhecido"

    assert client.put(f"/instructors/{ana['id']}", json={"name": "Ana Souza", "email": "ana@dojo.com"}).status_code == 204
    assert client.get(f"/instructors/{ana['id']}").get_json()["name"] == "Ana Souza"

    assert client.delete(f"/instructors/{ana['id']}").status_code == 204
    assert client.get(f"/instructors/{ana['id']}").status_code == 404


def test_class_routes(client):
    _login(client, "ADMIN")

    resp = client.post("/classes", json={"name": "Karatê", "day_of_week": "Monday", "time": "18:30"})
    assert resp.status_code == 201
    assert resp.get_json()["day_label"] == "Segunda-feira"

    monday = [c["id"] for c in client.get("/classes?day=Monday").get_json()]
    assert monday[0] == "cls-1" and len(monday) == 2

    today = client.get("/classes/today?date=2024-06-05").get_json()
    assert [c["id"] for c in today] == ["cls-3"]

    bad = client.post("/classes", json={"name": "Karatê", "day_of_week": "Segunda", "time": "18:30"})
    assert bad.status_code == 400


def test_attendance_roundtrip_over_http(client):
    _login(client, "INSTRUCTOR")

    resp = client.put("/attendance/2024-06-03/cls-1", json={"present_student_ids": ["stu-1", "stu-2"]})
    assert resp.status_code == 200
    assert resp.get_json()["present_student_ids"] == ["stu-1", "stu-2"]

    client.put("/attendance/2024-06-03/cls-1", json={"present_student_ids": ["stu-3"]})
    assert client.get("/attendance/2024-06-03/cls-1").get_json()["present_student_ids"] == ["stu-3"]
    assert client.get("/attendance/2024-06-04/cls-1").get_json()["present_student_ids"] == []

    assert client.put("/attendance/2024-06-03/cls-1", json={"present_student_ids": "stu-1"}).status_code == 400
    assert client.get("/attendance").status_code == 403


def test_dashboard(client):
    _login(client, "ADMIN")

    summary = client.get("/dashboard?date=2024-06-03").get_json()

    assert summary == {
        "students": 5,
        "instructors": 2,
        "classes_today": 1,
        "today": "2024-06-03",
        "weekday": "Monday",
        "weekday_label": "Segunda-feira",
    }


def test_strict_mode_maps_unknown_ids_to_404(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    client = create_app({"DEBUG": False, "STRICT_MODE": True}).test_client()
    _login(client, "ADMIN")

    resp = client.delete("/classes/cls-404")

    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Turma não encontrada"}


@pytest.mark.parametrize("path", ["/nope", "/students/stu-1/extra"])
def test_unknown_routes_are_json_404(client, path):
    resp = client.get(path)

    assert resp.status_code == 404
    assert "error" in resp.get_json()


def test_sign_in_is_per_client(app):
    admin_client = app.test_client()
    anonymous = app.test_client()
    _login(admin_client, "ADMIN")

    assert anonymous.get("/auth/me").get_json() is None
    assert anonymous.delete("/students/stu-1").status_code == 401
    assert anonymous.get("/students").status_code == 401

    ids = [s["id"] for s in admin_client.get("/students").get_json()]
    assert "stu-1" in ids


def test_instructor_client_cannot_ride_on_admin_client(app, student_fields):
    admin_client = app.test_client()
    instructor_client = app.test_client()
    _login(admin_client, "ADMIN")
    _login(instructor_client, "INSTRUCTOR")

    assert instructor_client.post("/students", json=student_fields).status_code == 403
    assert admin_client.post("/students", json=student_fields).status_code == 201

    assert instructor_client.post("/auth/logout").status_code == 204
    assert instructor_client.get("/students").status_code == 401
    assert admin_client.get("/auth/me").get_json()["id"] == "admin-1"


def test_http_sign_in_leaves_core_session_alone(app):
    container = app.extensions["dojo_attendance"]
    _login(app.test_client(), "ADMIN")

    assert container.facade.current_user is None


def test_deleted_instructor_loses_access(app):
    admin_client = app.test_client()
    instructor_client = app.test_client()
    _login(admin_client, "ADMIN")
    social = _login(instructor_client, "INSTRUCTOR")

    assert admin_client.delete(f"/instructors/{social['id']}").status_code == 204

    assert instructor_client.get("/students").status_code == 401
    assert instructor_client.get("/auth/me").get_json() is None


def test_enforced_roles_follow_each_client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app({"DEBUG": False, "ENFORCE_ROLES": True})
    admin_client = app.test_client()
    instructor_client = app.test_client()
    _login(admin_client, "ADMIN")
    _login(instructor_client, "INSTRUCTOR")

    # the instructor signed in last; the admin's request still runs as admin
    assert admin_client.delete("/classes/cls-5").status_code == 204
    resp = instructor_client.put("/attendance/2024-06-03/cls-1", json={"present_student_ids": ["stu-1"]})
    assert resp.status_code == 200
    assert resp.get_json()["present_student_ids"] == ["stu-1"]
