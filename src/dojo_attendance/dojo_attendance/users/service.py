from __future__ import annotations

from contextlib import contextmanager
from dataclasses import replace
from datetime import date
from typing import Any, Callable, Iterator, Mapping, Optional, Sequence, Union

from ..common.datetime_utils import to_iso_date, today_local
from ..common.ids import IdGenerator
from ..common.validators import optional_fields, require_choice, require_fields
from ..core.constants import ADMIN_USER_ID, DEFAULT_SOCIAL_LOGIN_EMAIL, INSTRUCTOR_ID_PREFIX, UNKNOWN_NAME
from ..core.enums import BeltColor, Role
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError, ValidationError
from .model import PROFILE_FIELDS, User
from .repository import UserRepository


def parse_role(value: Union[Role, str]) -> Role:
    if isinstance(value, Role):
        return value
    try:
        return Role(str(value).strip().upper())
    except ValueError:
        raise ValidationError(f"Perfil inválido: {value!r}")


def instructor_from_fields(user_id: str, fields: Mapping[str, Any]) -> User:
    """Build an Instructor from a raw field set. Any ``role`` given is ignored."""
    required = require_fields(fields, ("name", "email"))
    profile = optional_fields(fields, PROFILE_FIELDS)
    if profile["belt_color"] is not None:
        profile["belt_color"] = require_choice(profile["belt_color"], BeltColor, "Faixa")
    for key in ("birth_date", "join_date"):
        if profile[key] is not None:
            profile[key] = to_iso_date(profile[key])
    return User(id=user_id, role=Role.INSTRUCTOR, **required, **profile)


class AuthService:
    """Use case: sign in/out by role.

    Holds the single current user of this in-process session. Instructor
    login is a stub for an external provider: it always resolves the same
    external identity (``social_login_email``) and creates it on first use.
    """

    def __init__(
        self,
        users: UserRepository,
        ids: IdGenerator,
        *,
        social_login_email: str = DEFAULT_SOCIAL_LOGIN_EMAIL,
        today: Callable[[], date] = today_local,
    ):
        self._users = users
        self._ids = ids
        self._social_login_email = social_login_email
        self._today = today
        self._current_user: Optional[User] = None

    @property
    def current_user(self) -> Optional[User]:
        return self._current_user

    def login(self, role: Union[Role, str]) -> User:
        role = parse_role(role)
        if role == Role.ADMIN:
            admin = self._users.get_by_id(ADMIN_USER_ID)
            if not admin:
                raise AuthenticationError("Administrador não configurado")
            self._current_user = admin
        else:
            self._current_user = self._resolve_social_instructor()
        return self._current_user

    def logout(self) -> None:
        self._current_user = None

    def get_user(self, user_id: str) -> Optional[User]:
        return self._users.get_by_id(user_id)

    def require_role(self, *roles: Role) -> User:
        return self.check_role(self._current_user, *roles)

    @contextmanager
    def acting_as(self, user: Optional[User]) -> Iterator[Optional[User]]:
        """Temporarily make ``user`` the current user, restoring the previous one on exit.

        Lets a caller that tracks sign-in itself (one browser session per
        client) run core operations as that client without leaving the
        shared session changed.
        """
        previous = self._current_user
        self._current_user = user
        try:
            yield user
        finally:
            self._current_user = previous

    @staticmethod
    def check_role(user: Optional[User], *roles: Role) -> User:
        if not user:
            raise AuthenticationError("Faça login para continuar")
        if roles and user.role not in roles:
            raise AuthorizationError("Você não tem permissão")
        return user

    def _resolve_social_instructor(self) -> User:
        instructor = self._users.get_by_email(self._social_login_email, role=Role.INSTRUCTOR)
        if instructor:
            return instructor

        instructor = User(
            id=self._ids.next_id(INSTRUCTOR_ID_PREFIX),
            name="Instrutor Social",
            email=self._social_login_email,
            role=Role.INSTRUCTOR,
            birth_date="1990-01-01",
            join_date=to_iso_date(self._today()),
            belt_color=BeltColor.PRETA,
            phone="(00) 00000-0000",
            address="Via Login Social",
            neighborhood="Internet",
        )
        self._users.add(instructor)
        return instructor


class InstructorService:
    """Use case: manage instructors (admin).

    Instructors are the Users with role INSTRUCTOR; the Admin record is
    invisible to update/delete here.
    """

    def __init__(self, users: UserRepository, ids: IdGenerator, *, strict: bool = False):
        self._users = users
        self._ids = ids
        self._strict = strict

    def list_users(self) -> Sequence[User]:
        return self._users.list_all()

    def list_instructors(self) -> Sequence[User]:
        return self._users.list_by_role(Role.INSTRUCTOR)

    def get_instructor(self, instructor_id: str) -> Optional[User]:
        user = self._users.get_by_id(instructor_id)
        if user and user.role == Role.INSTRUCTOR:
            return user
        return None

    def get_instructor_name(self, instructor_id: str) -> str:
        instructor = self.get_instructor(instructor_id)
        return instructor.name if instructor else UNKNOWN_NAME

    def add_instructor(self, fields: Mapping[str, Any]) -> User:
        instructor = instructor_from_fields(self._ids.next_id(INSTRUCTOR_ID_PREFIX), fields)
        self._users.add(instructor)
        return instructor

    def update_instructor(self, instructor: User) -> None:
        ok = self.get_instructor(instructor.id) is not None and self._users.replace(
            replace(instructor, role=Role.INSTRUCTOR)
        )
        if not ok and self._strict:
            raise NotFoundError("Instrutor não encontrado")

    def delete_instructor(self, instructor_id: str) -> None:
        ok = self.get_instructor(instructor_id) is not None and self._users.delete_by_id(instructor_id)
        if not ok and self._strict:
            raise NotFoundError("Instrutor não encontrado")
