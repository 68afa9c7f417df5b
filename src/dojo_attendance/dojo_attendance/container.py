from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_SOCIAL_LOGIN_EMAIL
from .database.bootstrap import create_store
from .database.store import InMemoryStore
from .facade import AppFacade
from .schedules.memory_schedule_repository import InMemoryScheduleRepository
from .schedules.service import ScheduleService
from .students.memory_student_repository import InMemoryStudentRepository
from .students.service import StudentService
from .users.memory_user_repository import InMemoryUserRepository
from .users.service import AuthService, InstructorService


@dataclass(frozen=True)
class Container:
    store: InMemoryStore

    users_repo: InMemoryUserRepository
    students_repo: InMemoryStudentRepository
    schedules_repo: InMemoryScheduleRepository
    attendance_repo: InMemoryAttendanceRepository

    auth_service: AuthService
    instructor_service: InstructorService
    student_service: StudentService
    schedule_service: ScheduleService
    attendance_service: AttendanceService

    facade: AppFacade


def build_container(*, settings: Optional[Mapping[str, Any]] = None, store: Optional[InMemoryStore] = None) -> Container:
    settings = settings or {}
    strict = bool(settings.get("STRICT_MODE", False))

    if store is None:
        store = create_store(seed_demo_data=bool(settings.get("SEED_DEMO_DATA", True)))

    users_repo = InMemoryUserRepository(store)
    students_repo = InMemoryStudentRepository(store)
    schedules_repo = InMemoryScheduleRepository(store)
    attendance_repo = InMemoryAttendanceRepository(store)

    auth_service = AuthService(
        users_repo,
        store.ids,
        social_login_email=str(settings.get("SOCIAL_LOGIN_EMAIL") or DEFAULT_SOCIAL_LOGIN_EMAIL),
    )
    instructor_service = InstructorService(users_repo, store.ids, strict=strict)
    student_service = StudentService(students_repo, store.ids, strict=strict)
    schedule_service = ScheduleService(schedules_repo, store.ids, strict=strict)
    attendance_service = AttendanceService(attendance_repo)

    facade = AppFacade(
        auth_service,
        instructor_service,
        student_service,
        schedule_service,
        attendance_service,
        enforce_roles=bool(settings.get("ENFORCE_ROLES", False)),
    )

    return Container(
        store=store,
        users_repo=users_repo,
        students_repo=students_repo,
        schedules_repo=schedules_repo,
        attendance_repo=attendance_repo,
        auth_service=auth_service,
        instructor_service=instructor_service,
        student_service=student_service,
        schedule_service=schedule_service,
        attendance_service=attendance_service,
        facade=facade,
    )
