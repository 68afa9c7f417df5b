from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import to_iso_date
from ..common.ids import IdGenerator
from ..common.validators import require_choice, require_fields
from ..core.constants import STUDENT_ID_PREFIX
from ..core.enums import BeltColor
from ..core.exceptions import NotFoundError
from .model import STUDENT_FIELDS, Student
from .repository import StudentRepository


def student_from_fields(student_id: str, fields: Mapping[str, Any]) -> Student:
    data = require_fields(fields, STUDENT_FIELDS)
    return Student(
        id=student_id,
        name=data["name"],
        birth_date=to_iso_date(data["birth_date"]),
        join_date=to_iso_date(data["join_date"]),
        belt_color=require_choice(data["belt_color"], BeltColor, "Faixa"),
        phone=data["phone"],
        address=data["address"],
        neighborhood=data["neighborhood"],
    )


class StudentService:
    """Use case: manage the student roster (admin)."""

    def __init__(self, students: StudentRepository, ids: IdGenerator, *, strict: bool = False):
        self._students = students
        self._ids = ids
        self._strict = strict

    def list_students(self) -> Sequence[Student]:
        return self._students.list_all()

    def get_student(self, student_id: str) -> Optional[Student]:
        return self._students.get_by_id(student_id)

    def add_student(self, fields: Mapping[str, Any]) -> Student:
        # No duplicate check by name: two students may share a name.
        student = student_from_fields(self._ids.next_id(STUDENT_ID_PREFIX), fields)
        self._students.add(student)
        return student

    def update_student(self, student: Student) -> None:
        if not self._students.replace(student) and self._strict:
            raise NotFoundError("Aluno não encontrado")

    def delete_student(self, student_id: str) -> None:
        # Attendance records keep the id; lookups tolerate it.
        if not self._students.delete_by_id(student_id) and self._strict:
            raise NotFoundError("Aluno não encontrado")
