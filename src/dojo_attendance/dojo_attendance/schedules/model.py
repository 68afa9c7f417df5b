from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ..core.enums import Weekday

CLASS_FIELDS = ("name", "day_of_week", "time")


@dataclass(frozen=True)
class ClassSchedule:
    id: str
    name: str
    day_of_week: Weekday
    time: str  # HH:MM, local wall clock

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "day_of_week": self.day_of_week.value,
            "day_label": self.day_of_week.label,
            "time": self.time,
        }
