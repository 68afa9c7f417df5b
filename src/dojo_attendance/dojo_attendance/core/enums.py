from __future__ import annotations

from datetime import date
from enum import Enum


class Role(str, Enum):
    """Papel do usuário, usado para separar as telas de admin e instrutor."""

    ADMIN = "ADMIN"
    INSTRUCTOR = "INSTRUCTOR"


class BeltColor(str, Enum):
    """Faixas da escola, da branca à preta (apenas para exibição)."""

    BRANCA = "Branca"
    CINZA = "Cinza"
    AMARELA = "Amarela"
    LARANJA = "Laranja"
    VERDE = "Verde"
    AZUL = "Azul"
    ROXA = "Roxa"
    MARROM = "Marrom"
    PRETA = "Preta"


class Weekday(str, Enum):
    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"

    @property
    def label(self) -> str:
        return _WEEKDAY_LABELS[self]

    @classmethod
    def from_date(cls, value: date) -> "Weekday":
        # date.weekday(): Monday == 0
        return _WEEKDAYS_FROM_MONDAY[value.weekday()]


_WEEKDAY_LABELS = {
    Weekday.SUNDAY: "Domingo",
    Weekday.MONDAY: "Segunda-feira",
    Weekday.TUESDAY: "Terça-feira",
    Weekday.WEDNESDAY: "Quarta-feira",
    Weekday.THURSDAY: "Quinta-feira",
    Weekday.FRIDAY: "Sexta-feira",
    Weekday.SATURDAY: "Sábado",
}

_WEEKDAYS_FROM_MONDAY = (
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
    Weekday.SATURDAY,
    Weekday.SUNDAY,
)
