"""Store bootstrap: the Admin identity and the demo roster.

The Admin record always exists; the demo roster is applied only when
``SEED_DEMO_DATA`` is enabled.
"""
from __future__ import annotations

from ..core.constants import ADMIN_USER_ID
from ..core.enums import BeltColor, Role, Weekday
from ..schedules.model import ClassSchedule
from ..students.model import Student
from ..users.model import User
from .store import InMemoryStore

ADMIN_USER = User(
    id=ADMIN_USER_ID,
    name="Admin",
    email="admin@martialarts.com",
    role=Role.ADMIN,
)

DEMO_INSTRUCTORS = (
    User(
        id="instr-1",
        name="Mestre Hélio",
        email="helio@jiujitsu.com",
        role=Role.INSTRUCTOR,
        birth_date="1970-01-01",
        join_date="2010-01-01",
        belt_color=BeltColor.PRETA,
        phone="(11) 98888-1111",
        address="Rua do Tatame, 100",
        neighborhood="Centro",
    ),
    User(
        id="instr-2",
        name="Sensei Kano",
        email="kano@judo.com",
        role=Role.INSTRUCTOR,
        birth_date="1968-05-12",
        join_date="2008-03-15",
        belt_color=BeltColor.PRETA,
        phone="(21) 97777-2222",
        address="Avenida Ippon, 200",
        neighborhood="Copacabana",
    ),
)

DEMO_STUDENTS = (
    Student("stu-1", "Carlos Gracie", "1995-08-10", "2023-01-15", BeltColor.PRETA, "(11) 91111-1111", "Rua A, 1", "Bairro X"),
    Student("stu-2", "Jigoro Kano", "2005-03-22", "2023-02-20", BeltColor.PRETA, "(11) 92222-2222", "Rua B, 2", "Bairro Y"),
    Student("stu-3", "Gichin Funakoshi", "1988-11-01", "2023-03-10", BeltColor.MARROM, "(11) 93333-3333", "Rua C, 3", "Bairro Z"),
    Student("stu-4", "Masutatsu Oyama", "2000-07-15", "2023-04-05", BeltColor.ROXA, "(11) 94444-4444", "Rua D, 4", "Bairro A"),
    Student("stu-5", "Morihei Ueshiba", "2010-01-30", "2023-05-12", BeltColor.AZUL, "(11) 95555-5555", "Rua E, 5", "Bairro B"),
)

DEMO_CLASSES = (
    ClassSchedule("cls-1", "Jiu-Jitsu (Adultos)", Weekday.MONDAY, "19:00"),
    ClassSchedule("cls-2", "Judô (Kids)", Weekday.TUESDAY, "18:00"),
    ClassSchedule("cls-3", "Jiu-Jitsu (Avançado)", Weekday.WEDNESDAY, "20:00"),
    ClassSchedule("cls-4", "Judô (Adultos)", Weekday.THURSDAY, "19:30"),
    ClassSchedule("cls-5", "Jiu-Jitsu (Iniciantes)", Weekday.FRIDAY, "19:00"),
)


def ensure_admin(store: InMemoryStore) -> None:
    if store.users.find(lambda u: u.id == ADMIN_USER_ID) is None:
        store.users.append(ADMIN_USER)


def apply_demo_seed(store: InMemoryStore) -> None:
    """Add the demo roster. Idempotent: rows whose id exists are left alone."""
    for instructor in DEMO_INSTRUCTORS:
        if store.users.find(lambda u, i=instructor.id: u.id == i) is None:
            store.users.append(instructor)
    for student in DEMO_STUDENTS:
        if store.students.find(lambda s, i=student.id: s.id == i) is None:
            store.students.append(student)
    for cls in DEMO_CLASSES:
        if store.classes.find(lambda c, i=cls.id: c.id == i) is None:
            store.classes.append(cls)


def create_store(*, seed_demo_data: bool = True) -> InMemoryStore:
    store = InMemoryStore()
    ensure_admin(store)
    if seed_demo_data:
        apply_demo_seed(store)
    return store
