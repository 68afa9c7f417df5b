from __future__ import annotations

from dataclasses import dataclass, field

from ..attendance.model import AttendanceRecord
from ..common.ids import IdGenerator
from ..schedules.model import ClassSchedule
from ..students.model import Student
from ..users.model import User
from .memory_base import InMemoryTable


@dataclass
class InMemoryStore:
    """Process-lifetime state shared by every repository.

    Built once per container (see ``build_container``); nothing here is a
    module-level singleton.
    """

    users: InMemoryTable[User] = field(default_factory=InMemoryTable)
    students: InMemoryTable[Student] = field(default_factory=InMemoryTable)
    classes: InMemoryTable[ClassSchedule] = field(default_factory=InMemoryTable)
    attendance: InMemoryTable[AttendanceRecord] = field(default_factory=InMemoryTable)
    ids: IdGenerator = field(default_factory=IdGenerator)
