from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_iso_date(value: Union[str, date]) -> str:
    """Normalize a date or YYYY-MM-DD string to the YYYY-MM-DD form."""
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    try:
        return parse_iso_date(str(value).strip()).strftime("%Y-%m-%d")
    except ValueError:
        raise ValidationError(f"Data inválida: {value!r}")


def parse_wall_time(value: str) -> str:
    """Validate a HH:MM wall-clock time and return it zero padded."""
    try:
        return datetime.strptime(str(value).strip(), "%H:%M").strftime("%H:%M")
    except ValueError:
        raise ValidationError(f"Horário inválido: {value!r}")


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mock easier.
    """
    return date.today()


def calculate_age(birth_date: Union[str, date], today: Optional[date] = None) -> int:
    born = parse_iso_date(to_iso_date(birth_date))
    today = today or today_local()
    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age
