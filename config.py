"""
Configuration classes for the task list client.

The client is a stateless BFF (backend-for-frontend). It serves
server-rendered HTML and delegates authentication and task operations to
the remote task API over HTTP. The only client-side state it keeps is the
bearer token, held in the signed session cookie.
"""

from __future__ import annotations

import os
from datetime import timedelta
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent


def _optional_float(env_var: str) -> float | None:
    """Read an optional float from the environment; blank means unset."""
    raw_value = os.environ.get(env_var, "").strip()
    if not raw_value:
        return None
    try:
        return float(raw_value)
    except ValueError as exc:
        raise RuntimeError(f"{env_var} must be a number, got '{raw_value}'.") from exc


class Config:
    """Base configuration for all client environments."""

    SECRET_KEY: str = os.environ.get(
        "SECRET_KEY", "task-client-dev-secret-change-in-production"
    )

    TASK_API_URL: str = os.environ.get("TASK_API_URL", "http://localhost:8000")
    # None leaves requests without a timeout.
    TASK_API_TIMEOUT: float | None = _optional_float("TASK_API_TIMEOUT")

    SESSION_COOKIE_HTTPONLY: bool = True
    SESSION_COOKIE_SAMESITE: str = os.environ.get("SESSION_COOKIE_SAMESITE", "Lax")
    SESSION_COOKIE_SECURE: bool = (
        os.environ.get("SESSION_COOKIE_SECURE", "false").strip().lower() == "true"
    )
    PERMANENT_SESSION_LIFETIME: timedelta = timedelta(
        days=int(os.environ.get("PERMANENT_SESSION_LIFETIME_DAYS", "365"))
    )


class DevelopmentConfig(Config):
    """Configuration for local development."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """Configuration for automated tests."""

    DEBUG: bool = True
    TESTING: bool = True

    TASK_API_URL: str = os.environ.get("TEST_TASK_API_URL", "http://task-api")
    TASK_API_TIMEOUT: float | None = _optional_float("TEST_TASK_API_TIMEOUT")


class ProductionConfig(Config):
    """Configuration for production deployments."""

    DEBUG: bool = False
    TESTING: bool = False
    SESSION_COOKIE_SECURE: bool = (
        os.environ.get("SESSION_COOKIE_SECURE", "true").strip().lower() == "true"
    )


config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Look up and return the configuration class for the given environment.

    Args:
        env: Environment name. When None, falls back to FLASK_ENV.

    Returns:
        The selected configuration class.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
