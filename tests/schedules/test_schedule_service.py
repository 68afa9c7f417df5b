from __future__ import annotations

from dataclasses import replace
from datetime import date

import pytest

from src.dojo_attendance.dojo_attendance.core.enums import Weekday
from src.dojo_attendance.dojo_attendance.core.exceptions import NotFoundError, ValidationError
from src.dojo_attendance.dojo_attendance.database.bootstrap import create_store
from src.dojo_attendance.dojo_attendance.schedules.memory_schedule_repository import InMemoryScheduleRepository
from src.dojo_attendance.dojo_attendance.schedules.service import ScheduleService


def _service(strict: bool = False) -> ScheduleService:
    store = create_store(seed_demo_data=True)
    return ScheduleService(InMemoryScheduleRepository(store), store.ids, strict=strict)


def test_add_class_allows_same_slot_twice():
    svc = _service()

    extra = svc.add_class({"name": "Muay Thai", "day_of_week": "Monday", "time": "19:00"})

    assert extra.day_of_week == Weekday.MONDAY
    assert [c.id for c in svc.classes_for_day(Weekday.MONDAY)] == ["cls-1", extra.id]


def test_add_class_normalizes_time():
    svc = _service()

    created = svc.add_class({"name": "Judô (Manhã)", "day_of_week": "Saturday", "time": "7:05"})

    assert created.time == "07:05"


@pytest.mark.parametrize(
    "fields",
    [
        {"name": "X", "day_of_week": "Funday", "time": "19:00"},
        {"name": "X", "day_of_week": "Monday", "time": "25:00"},
        {"name": "X", "day_of_week": "Monday"},
        {"name": "", "day_of_week": "Monday", "time": "19:00"},
    ],
)
def test_add_class_rejects_bad_fields(fields):
    svc = _service()

    with pytest.raises(ValidationError):
        svc.add_class(fields)
    assert len(svc.list_classes()) == 5


def test_classes_for_day_accepts_a_calendar_date():
    svc = _service()

    # 2024-06-05 is a Wednesday
    assert [c.id for c in svc.classes_for_day(date(2024, 6, 5))] == ["cls-3"]
    assert svc.classes_for_day("Sunday") == ()


def test_update_and_delete_class():
    svc = _service()
    cls4 = svc.get_class("cls-4")

    svc.update_class(replace(cls4, time="20:00"))
    svc.delete_class("cls-2")
    svc.delete_class("cls-2")
    svc.update_class(replace(cls4, id="cls-404"))

    assert [c.id for c in svc.list_classes()] == ["cls-1", "cls-3", "cls-4", "cls-5"]
    assert svc.get_class("cls-4").time == "20:00"


def test_strict_mode_reports_unknown_ids():
    svc = _service(strict=True)

    with pytest.raises(NotFoundError):
        svc.delete_class("cls-404")
