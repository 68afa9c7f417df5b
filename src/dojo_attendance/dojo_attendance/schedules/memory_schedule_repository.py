from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Weekday
from ..database.store import InMemoryStore
from .model import ClassSchedule
from .repository import ScheduleRepository


class InMemoryScheduleRepository(ScheduleRepository):
    def __init__(self, store: InMemoryStore):
        self._table = store.classes

    def list_all(self) -> Sequence[ClassSchedule]:
        return self._table.rows()

    def list_for_day(self, day_of_week: Weekday) -> Sequence[ClassSchedule]:
        return self._table.filter(lambda c: c.day_of_week == day_of_week)

    def get_by_id(self, class_id: str) -> Optional[ClassSchedule]:
        return self._table.find(lambda c: c.id == class_id)

    def add(self, schedule: ClassSchedule) -> None:
        self._table.append(schedule)

    def replace(self, schedule: ClassSchedule) -> bool:
        return self._table.replace_first(lambda c: c.id == schedule.id, schedule)

    def delete_by_id(self, class_id: str) -> bool:
        return self._table.remove_where(lambda c: c.id == class_id)
