from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    def list_by_role(self, role: Role) -> Sequence[User]:
        raise NotImplementedError

    def get_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str, *, role: Optional[Role] = None) -> Optional[User]:
        raise NotImplementedError

    def add(self, user: User) -> None:
        raise NotImplementedError

    def replace(self, user: User) -> bool:
        """Replace the row with ``user.id``; False when there is none."""

        raise NotImplementedError

    def delete_by_id(self, user_id: str) -> bool:
        raise NotImplementedError
