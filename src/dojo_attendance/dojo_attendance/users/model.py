from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.enums import BeltColor, Role

PROFILE_FIELDS = ("birth_date", "join_date", "belt_color", "phone", "address", "neighborhood")


@dataclass(frozen=True)
class User:
    """Domain entity: User (the Admin or an Instructor).

    Profile fields are filled in for Instructors only; the Admin record leaves
    them as None.
    """

    id: str
    name: str
    email: str
    role: Role
    birth_date: Optional[str] = None
    join_date: Optional[str] = None
    belt_color: Optional[BeltColor] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    neighborhood: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "birth_date": self.birth_date,
            "join_date": self.join_date,
            "belt_color": self.belt_color.value if self.belt_color else None,
            "phone": self.phone,
            "address": self.address,
            "neighborhood": self.neighborhood,
        }
