from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..database.store import InMemoryStore
from .model import User
from .repository import UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self, store: InMemoryStore):
        self._table = store.users

    def list_all(self) -> Sequence[User]:
        return self._table.rows()

    def list_by_role(self, role: Role) -> Sequence[User]:
        return self._table.filter(lambda u: u.role == role)

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self._table.find(lambda u: u.id == user_id)

    def get_by_email(self, email: str, *, role: Optional[Role] = None) -> Optional[User]:
        return self._table.find(lambda u: u.email == email and (role is None or u.role == role))

    def add(self, user: User) -> None:
        self._table.append(user)

    def replace(self, user: User) -> bool:
        return self._table.replace_first(lambda u: u.id == user.id, user)

    def delete_by_id(self, user_id: str) -> bool:
        return self._table.remove_where(lambda u: u.id == user_id)
