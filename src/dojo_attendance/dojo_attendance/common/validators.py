from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Type, TypeVar

from ..core.exceptions import ValidationError

E = TypeVar("E")


def as_text(value: Any) -> Optional[str]:
    """Stripped text form of a field value; None when blank.

    Enum members give their value and dates their ISO form, so typed
    values from Python callers read the same as raw JSON strings.
    """
    if value is None:
        return None
    if isinstance(value, Enum):
        value = value.value
    elif isinstance(value, datetime):
        value = value.date().isoformat()
    elif isinstance(value, date):
        value = value.isoformat()
    text = str(value).strip()
    return text or None


def require_non_empty(value: Any, field_name: str) -> str:
    text = as_text(value)
    if text is None:
        raise ValidationError(f"{field_name} é obrigatório")
    return text


def require_fields(fields: Mapping[str, Any], names: Iterable[str]) -> Dict[str, str]:
    """Pick `names` out of `fields`, failing on the first missing/blank one."""
    return {name: require_non_empty(fields.get(name), name) for name in names}


def optional_fields(fields: Mapping[str, Any], names: Iterable[str]) -> Dict[str, Any]:
    return {name: as_text(fields.get(name)) for name in names}


def require_choice(value: Any, enum_cls: Type[E], field_name: str) -> E:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(f"{field_name} inválido: {value!r}")
