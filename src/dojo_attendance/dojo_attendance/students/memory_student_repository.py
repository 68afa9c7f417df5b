from __future__ import annotations

from typing import Optional, Sequence

from ..database.store import InMemoryStore
from .model import Student
from .repository import StudentRepository


class InMemoryStudentRepository(StudentRepository):
    def __init__(self, store: InMemoryStore):
        self._table = store.students

    def list_all(self) -> Sequence[Student]:
        return self._table.rows()

    def get_by_id(self, student_id: str) -> Optional[Student]:
        return self._table.find(lambda s: s.id == student_id)

    def add(self, student: Student) -> None:
        self._table.append(student)

    def replace(self, student: Student) -> bool:
        return self._table.replace_first(lambda s: s.id == student.id, student)

    def delete_by_id(self, student_id: str) -> bool:
        return self._table.remove_where(lambda s: s.id == student_id)
