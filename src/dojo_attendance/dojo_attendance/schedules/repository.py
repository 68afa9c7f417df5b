from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Weekday
from .model import ClassSchedule


class ScheduleRepository(Protocol):
    def list_all(self) -> Sequence[ClassSchedule]:
        raise NotImplementedError

    def list_for_day(self, day_of_week: Weekday) -> Sequence[ClassSchedule]:
        """Classes held on ``day_of_week``, in insertion order."""

        raise NotImplementedError

    def get_by_id(self, class_id: str) -> Optional[ClassSchedule]:
        raise NotImplementedError

    def add(self, schedule: ClassSchedule) -> None:
        raise NotImplementedError

    def replace(self, schedule: ClassSchedule) -> bool:
        raise NotImplementedError

    def delete_by_id(self, class_id: str) -> bool:
        raise NotImplementedError
