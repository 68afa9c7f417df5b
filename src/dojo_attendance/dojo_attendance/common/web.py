from __future__ import annotations

import traceback
from functools import wraps
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError, ValidationError
from ..users.model import User
from ..users.service import AuthService


def remember_user(user: User) -> None:
    session["user_id"] = user.id
    session["role"] = user.role.value


def session_user(container) -> Optional[User]:
    """The user signed in by this client's session cookie, if still on the roster."""
    user_id = session.get("user_id")
    if not user_id:
        return None
    user = container.facade.get_user(user_id)
    if not user:
        session.clear()
    return user


def role_required(container, *roles: Role):
    """Gate a view on the session user's role (any role when none given).

    The view then runs with that user as the core's current user, so
    role checks inside the facade see the same caller.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = AuthService.check_role(session_user(container), *roles)
            with container.facade.acting_as(user):
                return view(*args, **kwargs)

        return wrapper

    return decorator


def json_payload() -> Dict[str, Any]:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("Corpo JSON inválido")
    return payload


def register_error_handlers(app: Flask) -> None:
    def _error(message: str, status: int):
        return jsonify({"error": message}), status

    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return _error(str(e), 400)

    @app.errorhandler(AuthenticationError)
    def _authentication(e: AuthenticationError):
        return _error(str(e), 401)

    @app.errorhandler(AuthorizationError)
    def _authorization(e: AuthorizationError):
        return _error(str(e), 403)

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return _error(str(e), 404)

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        return _error(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        traceback.print_exc()
        if bool(app.config.get("DEBUG", False)):
            return _error(f"Erro interno: {e}", 500)
        return _error("Erro interno", 500)
