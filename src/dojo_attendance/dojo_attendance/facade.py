"""Application facade: the one API presentation code talks to.

It owns no state of its own; it only composes the session, directory and
attendance services built by the container.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, ContextManager, FrozenSet, Iterable, Mapping, Optional, Sequence, Union

from .attendance.model import AttendanceRecord
from .attendance.service import AttendanceService
from .common.datetime_utils import calculate_age, today_local
from .core.enums import Role, Weekday
from .schedules.model import ClassSchedule
from .schedules.service import ScheduleService
from .students.model import Student
from .students.service import StudentService
from .users.model import User
from .users.service import AuthService, InstructorService


@dataclass(frozen=True)
class DashboardSummary:
    students: int
    instructors: int
    classes_today: int
    today: str
    weekday: Weekday

    def to_dict(self) -> dict:
        return {
            "students": self.students,
            "instructors": self.instructors,
            "classes_today": self.classes_today,
            "today": self.today,
            "weekday": self.weekday.value,
            "weekday_label": self.weekday.label,
        }


class AppFacade:
    def __init__(
        self,
        auth: AuthService,
        instructors: InstructorService,
        students: StudentService,
        schedules: ScheduleService,
        attendance: AttendanceService,
        *,
        enforce_roles: bool = False,
    ):
        self._auth = auth
        self._instructors = instructors
        self._students = students
        self._schedules = schedules
        self._attendance = attendance
        self._enforce_roles = enforce_roles

    # Session

    @property
    def current_user(self) -> Optional[User]:
        return self._auth.current_user

    def login(self, role: Union[Role, str]) -> User:
        return self._auth.login(role)

    def logout(self) -> None:
        self._auth.logout()

    def get_user(self, user_id: str) -> Optional[User]:
        return self._auth.get_user(user_id)

    def acting_as(self, user: Optional[User]) -> ContextManager[Optional[User]]:
        return self._auth.acting_as(user)

    def _admin_only(self) -> None:
        if self._enforce_roles:
            self._auth.require_role(Role.ADMIN)

    def _staff_only(self) -> None:
        if self._enforce_roles:
            self._auth.require_role(Role.ADMIN, Role.INSTRUCTOR)

    # Directory: reads

    @property
    def users(self) -> Sequence[User]:
        return self._instructors.list_users()

    @property
    def instructors(self) -> Sequence[User]:
        return self._instructors.list_instructors()

    @property
    def students(self) -> Sequence[Student]:
        return self._students.list_students()

    @property
    def classes(self) -> Sequence[ClassSchedule]:
        return self._schedules.list_classes()

    def get_student(self, student_id: str) -> Optional[Student]:
        return self._students.get_student(student_id)

    def get_instructor(self, instructor_id: str) -> Optional[User]:
        return self._instructors.get_instructor(instructor_id)

    def get_class(self, class_id: str) -> Optional[ClassSchedule]:
        return self._schedules.get_class(class_id)

    def get_instructor_name(self, instructor_id: str) -> str:
        return self._instructors.get_instructor_name(instructor_id)

    def classes_for_day(self, day: Union[Weekday, date, str]) -> Sequence[ClassSchedule]:
        return self._schedules.classes_for_day(day)

    # Directory: students

    def add_student(self, fields: Mapping[str, Any]) -> Student:
        self._admin_only()
        return self._students.add_student(fields)

    def update_student(self, student: Student) -> None:
        self._admin_only()
        self._students.update_student(student)

    def delete_student(self, student_id: str) -> None:
        self._admin_only()
        self._students.delete_student(student_id)

    # Directory: instructors

    def add_instructor(self, fields: Mapping[str, Any]) -> User:
        self._admin_only()
        return self._instructors.add_instructor(fields)

    def update_instructor(self, instructor: User) -> None:
        self._admin_only()
        self._instructors.update_instructor(instructor)

    def delete_instructor(self, instructor_id: str) -> None:
        self._admin_only()
        self._instructors.delete_instructor(instructor_id)

    # Directory: classes

    def add_class(self, fields: Mapping[str, Any]) -> ClassSchedule:
        self._admin_only()
        return self._schedules.add_class(fields)

    def update_class(self, schedule: ClassSchedule) -> None:
        self._admin_only()
        self._schedules.update_class(schedule)

    def delete_class(self, class_id: str) -> None:
        self._admin_only()
        self._schedules.delete_class(class_id)

    # Attendance

    @property
    def attendance(self) -> Sequence[AttendanceRecord]:
        return self._attendance.list_attendance()

    def get_attendance(self, work_date: Union[str, date], class_id: str) -> FrozenSet[str]:
        return self._attendance.get_attendance(work_date, class_id)

    def save_attendance(
        self,
        work_date: Union[str, date],
        class_id: str,
        present_student_ids: Iterable[str],
    ) -> None:
        self._staff_only()
        self._attendance.save_attendance(work_date, class_id, present_student_ids)

    # Dashboard read models

    def todays_classes(self, today: Optional[date] = None) -> Sequence[ClassSchedule]:
        return self._schedules.classes_for_day(today or today_local())

    def dashboard_summary(self, today: Optional[date] = None) -> DashboardSummary:
        today = today or today_local()
        return DashboardSummary(
            students=len(self.students),
            instructors=len(self.instructors),
            classes_today=len(self.todays_classes(today)),
            today=today.strftime("%Y-%m-%d"),
            weekday=Weekday.from_date(today),
        )

    @staticmethod
    def calculate_age(birth_date: Union[str, date], today: Optional[date] = None) -> int:
        return calculate_age(birth_date, today)
