from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Tuple


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: who was present in one class on one day.

    Keyed by (date, class_id). Student ids are not checked against the
    roster, so ids of deleted students may remain here.
    """

    date: str  # YYYY-MM-DD
    class_id: str
    present_student_ids: FrozenSet[str]

    @property
    def key(self) -> Tuple[str, str]:
        return (self.date, self.class_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "class_id": self.class_id,
            "present_student_ids": sorted(self.present_student_ids),
        }
