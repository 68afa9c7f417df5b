from __future__ import annotations

from datetime import date

import pytest

from src.dojo_attendance.dojo_attendance.container import build_container
from src.dojo_attendance.dojo_attendance.main import create_app


@pytest.fixture
def fixed_today() -> date:
    # A Monday: the demo timetable has exactly one class (cls-1) on Mondays.
    return date(2024, 6, 3)


@pytest.fixture
def container():
    return build_container(settings={"SEED_DEMO_DATA": True})


@pytest.fixture
def facade(container):
    return container.facade


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app({"DEBUG": False})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def student_fields() -> dict:
    return {
        "name": "Helena Silva",
        "birth_date": "2012-09-14",
        "join_date": "2024-02-01",
        "belt_color": "Cinza",
        "phone": "(11) 96666-6666",
        "address": "Rua F, 6",
        "neighborhood": "Bairro C",
    }
