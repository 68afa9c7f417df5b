from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Sequence, Union

from ..common.datetime_utils import parse_wall_time
from ..common.ids import IdGenerator
from ..common.validators import require_choice, require_fields
from ..core.constants import CLASS_ID_PREFIX
from ..core.enums import Weekday
from ..core.exceptions import NotFoundError
from .model import CLASS_FIELDS, ClassSchedule
from .repository import ScheduleRepository


def class_from_fields(class_id: str, fields: Mapping[str, Any]) -> ClassSchedule:
    data = require_fields(fields, CLASS_FIELDS)
    return ClassSchedule(
        id=class_id,
        name=data["name"],
        day_of_week=require_choice(data["day_of_week"], Weekday, "Dia da semana"),
        time=parse_wall_time(data["time"]),
    )


class ScheduleService:
    """Use case: manage the weekly class timetable (admin)."""

    def __init__(self, schedules: ScheduleRepository, ids: IdGenerator, *, strict: bool = False):
        self._schedules = schedules
        self._ids = ids
        self._strict = strict

    def list_classes(self) -> Sequence[ClassSchedule]:
        return self._schedules.list_all()

    def get_class(self, class_id: str) -> Optional[ClassSchedule]:
        return self._schedules.get_by_id(class_id)

    def classes_for_day(self, day: Union[Weekday, date, str]) -> Sequence[ClassSchedule]:
        if isinstance(day, date):
            day = Weekday.from_date(day)
        return self._schedules.list_for_day(require_choice(day, Weekday, "Dia da semana"))

    def add_class(self, fields: Mapping[str, Any]) -> ClassSchedule:
        schedule = class_from_fields(self._ids.next_id(CLASS_ID_PREFIX), fields)
        self._schedules.add(schedule)
        return schedule

    def update_class(self, schedule: ClassSchedule) -> None:
        if not self._schedules.replace(schedule) and self._strict:
            raise NotFoundError("Turma não encontrada")

    def delete_class(self, class_id: str) -> None:
        if not self._schedules.delete_by_id(class_id) and self._strict:
            raise NotFoundError("Turma não encontrada")
