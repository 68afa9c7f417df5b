from __future__ import annotations

from datetime import date
from typing import FrozenSet, Iterable, Sequence, Union

from ..common.datetime_utils import to_iso_date
from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from .model import AttendanceRecord
from .repository import AttendanceRepository


class AttendanceService:
    """Use case: per-class daily roll call.

    One record per (date, class_id). Saving replaces the whole present set;
    nothing is merged with what was stored before.
    """

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def get_attendance(self, work_date: Union[str, date], class_id: str) -> FrozenSet[str]:
        try:
            key_date = to_iso_date(work_date)
        except ValidationError:
            # Lookups never fail; a malformed date simply has no record.
            return frozenset()
        record = self._attendance.get_for_date_and_class(key_date, class_id)
        return record.present_student_ids if record else frozenset()

    def save_attendance(
        self,
        work_date: Union[str, date],
        class_id: str,
        present_student_ids: Iterable[str],
    ) -> AttendanceRecord:
        if isinstance(present_student_ids, str):
            raise ValidationError("Lista de presença inválida")

        record = AttendanceRecord(
            date=to_iso_date(work_date),
            class_id=require_non_empty(class_id, "Turma"),
            present_student_ids=frozenset(str(s) for s in present_student_ids),
        )
        self._attendance.upsert(record)
        return record

    def list_attendance(self) -> Sequence[AttendanceRecord]:
        return self._attendance.list_all()
