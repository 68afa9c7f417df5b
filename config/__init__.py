from __future__ import annotations

import os
from typing import Optional

DEFAULT_SETTINGS_MODULE = "config.development"

SETTINGS_MODULES = {
    "dev": "config.development",
    "development": "config.development",
    "test": "config.testing",
    "testing": "config.testing",
    "prod": "config.production",
    "production": "config.production",
}


def get_settings_module(env: Optional[str] = None) -> str:
    """Settings module for ``env`` (default: $APP_ENV).

    Unknown names fall back to development settings.
    """
    env = env if env is not None else os.getenv("APP_ENV", "development")
    return SETTINGS_MODULES.get(env.strip().lower(), DEFAULT_SETTINGS_MODULE)
