"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from datetime import timedelta
from typing import Any, Final

from dotenv import load_dotenv

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'

# Keys without which the process must not boot
REQUIRED_KEYS: Final[tuple[str, ...]] = ("MONGO_URI", "MONGO_DB_NAME", "JWT_SECRET_KEY")

TOKEN_TTL: Final[timedelta] = timedelta(days=30)


# Load .env in development (no-op when missing)
load_dotenv()


def env_first(*names: str, default: str | None = None) -> str | None:
    """Return the first non-empty environment variable among ``names``.

    Parameters
    ----------
    *names: str
        Candidate variable names, most specific first.
    default: str | None, optional
        Value returned when none of the variables is set.
    """
    for name in names:
        value = os.getenv(name)
        if value is not None and value.strip():
            return value.strip()
    return default


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    API_BASE_PREFIX: str
        Root path for registering API blueprints.
    MONGO_URI: str | None
        Connection string of the document store (``DB_URI`` accepted as alias).
    MONGO_DB_NAME: str | None
        Database holding the ``Users``, ``TaskList`` and ``ToDo`` collections
        (``DB_NAME`` accepted as alias).
    JWT_SECRET_KEY: str | None
        Secret used by ``flask-jwt-extended`` to sign bearer tokens.
    JWT_ACCESS_TOKEN_EXPIRES: datetime.timedelta
        Validity window of issued tokens (30 days).
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).

    Notes
    -----
    Secrets and connection settings have no defaults: :func:`ensure_required`
    aborts the boot when any of them is missing.
    """

    API_BASE_PREFIX = "/api"

    # Storage
    MONGO_URI = env_first("MONGO_URI", "DB_URI")
    MONGO_DB_NAME = env_first("MONGO_DB_NAME", "DB_NAME")

    # Tokens
    JWT_SECRET_KEY = env_first("JWT_SECRET_KEY")
    JWT_ACCESS_TOKEN_EXPIRES = TOKEN_TTL
    JWT_TOKEN_LOCATION = ["headers"]

    # Flask & JSON
    JSON_SORT_KEYS = False
    PROPAGATE_EXCEPTIONS = False

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    APP_VERSION = os.getenv("APP_VERSION", "dev")
    APP_COMMIT = os.getenv("APP_COMMIT", "unknown")

    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development."""

    DEBUG = True


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    Provides placeholder connection settings so the app boots without a real
    server; tests inject an in-memory storage handle instead.
    """

    TESTING = True
    DEBUG = False
    MONGO_URI = env_first("TEST_MONGO_URI", default="mongodb://localhost:27017")
    MONGO_DB_NAME = env_first("TEST_MONGO_DB_NAME", default="todolists_test")
    JWT_SECRET_KEY = env_first("JWT_SECRET_KEY", default="testing-secret-key-with-enough-bytes")
    PROPAGATE_EXCEPTIONS = False


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments."""

    DEBUG = False
    PROPAGATE_EXCEPTIONS = False


CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)


def ensure_required(config: Mapping[str, Any], keys: Iterable[str] = REQUIRED_KEYS) -> None:
    """Fail fast when a mandatory setting is missing.

    :param config: Loaded application configuration.
    :param keys: Setting names that must hold a non-empty value.
    :raises RuntimeError: Listing every missing key.
    """
    missing = [key for key in keys if not config.get(key)]
    if missing:
        raise RuntimeError(f"Missing required configuration: {', '.join(missing)}")
