from __future__ import annotations

import importlib
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.web import register_error_handlers
from .container import build_container
from .schedules.controller import register as register_schedules
from .students.controller import register as register_students
from .users.controller import register as register_users

SETTING_NAMES = ("SEED_DEMO_DATA", "STRICT_MODE", "ENFORCE_ROLES", "SOCIAL_LOGIN_EMAIL")


def load_settings(settings_module: Optional[str] = None) -> dict:
    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    values = {name: getattr(settings, name) for name in SETTING_NAMES if hasattr(settings, name)}
    values["SECRET_KEY"] = getattr(settings, "SECRET_KEY")
    values["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    values["TESTING"] = bool(getattr(settings, "TESTING", False))
    return values


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = load_settings(settings_module)
    settings.update(overrides or {})

    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = settings["DEBUG"]
    app.config["TESTING"] = settings["TESTING"]

    container = build_container(settings=settings)
    app.extensions["dojo_attendance"] = container

    if app.config["DEBUG"]:
        print(
            "[dojo-attendance] settings=", settings_module,
            " seed=", settings.get("SEED_DEMO_DATA"),
            " strict=", settings.get("STRICT_MODE"),
            " enforce_roles=", settings.get("ENFORCE_ROLES"),
        )
        print(
            "[dojo-attendance] store ready "
            f"(users={len(container.store.users)}, students={len(container.store.students)}, "
            f"classes={len(container.store.classes)})"
        )

    register_error_handlers(app)
    register_users(app, container)
    register_students(app, container)
    register_schedules(app, container)
    register_attendance(app, container)

    return app

