from __future__ import annotations

from typing import Optional, Sequence

from ..database.store import InMemoryStore
from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self, store: InMemoryStore):
        self._table = store.attendance

    def get_for_date_and_class(self, work_date: str, class_id: str) -> Optional[AttendanceRecord]:
        return self._table.find(lambda r: r.date == work_date and r.class_id == class_id)

    def upsert(self, record: AttendanceRecord) -> bool:
        return self._table.upsert(lambda r: r.key == record.key, record)

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._table.rows()
