from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ..core.enums import BeltColor

STUDENT_FIELDS = ("name", "birth_date", "join_date", "belt_color", "phone", "address", "neighborhood")


@dataclass(frozen=True)
class Student:
    """Domain entity: Student (roster record). Every field is required."""

    id: str
    name: str
    birth_date: str
    join_date: str
    belt_color: BeltColor
    phone: str
    address: str
    neighborhood: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "birth_date": self.birth_date,
            "join_date": self.join_date,
            "belt_color": self.belt_color.value,
            "phone": self.phone,
            "address": self.address,
            "neighborhood": self.neighborhood,
        }
