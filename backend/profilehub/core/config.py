"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from dotenv import load_dotenv

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'

STORAGE_BACKENDS: Final[frozenset[str]] = frozenset({"memory", "sql", "redis", "file"})
PASSWORD_HASHERS: Final[frozenset[str]] = frozenset({"sha256", "werkzeug"})


# Load .env during development (no-op when missing)
load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def env_int(name: str, default: int) -> int:
    """Parse an integer from an environment variable, falling back to ``default``."""
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return int(val.strip())


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    API_BASE_PREFIX: str
        Root path under which the account routes are mounted.
    SERVICE_NAME: str
        Name reported by the health endpoint.
    SECRET_KEY: str
        Flask secret. Defaults to a development-safe placeholder.
    STORAGE_BACKEND: str
        Account store adapter: ``memory``, ``sql``, ``redis`` or ``file``.
    DATABASE_URL: str
        SQLAlchemy URL consumed by the relational adapter.
    SQLALCHEMY_ECHO: bool
        When ``True`` SQLAlchemy logs SQL statements for debugging.
    REDIS_URL: str
        Connection URL consumed by the document-store adapter.
    ACCOUNTS_FILE: str
        Path of the JSON file used by the file adapter.
    PASSWORD_HASHER: str
        ``sha256`` (unsalted, compatible with existing digests) or
        ``werkzeug`` (salted, slow).
    SESSION_TOKEN_LENGTH: int
        Number of hex characters kept from the session token digest.
    MAX_CONTENT_LENGTH: int
        Request body limit in bytes; larger bodies are rejected with 413.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    CORS_ORIGINS: str
        Comma-separated list of allowed origins for CORS.

    Notes
    -----
    Values are primarily sourced from environment variables, enabling
    configuration without code changes.
    """

    API_BASE_PREFIX = "/api"
    SERVICE_NAME = os.getenv("SERVICE_NAME", "linkedin-auth")

    SECRET_KEY = os.getenv("SECRET_KEY", "CHANGE_ME")

    # Storage
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory").strip().lower()
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./accounts.db")
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)
    REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    ACCOUNTS_FILE = os.getenv("ACCOUNTS_FILE", "./data/accounts.json")

    # Credentials & sessions
    PASSWORD_HASHER = os.getenv("PASSWORD_HASHER", "sha256").strip().lower()
    SESSION_TOKEN_LENGTH = env_int("SESSION_TOKEN_LENGTH", 48)

    # Flask & JSON
    JSON_SORT_KEYS = False
    PROPAGATE_EXCEPTIONS = False
    MAX_CONTENT_LENGTH = env_int("MAX_CONTENT_LENGTH", 1_000_000)

    # Logging & CORS
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development."""

    DEBUG = env_bool("FLASK_DEBUG", True)
    CORS_MAX_AGE = 600  # 10 minutes


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Forces ``TESTING`` mode and the in-memory account store.
    - Propagates nothing: error handlers stay active so HTTP tests can assert
      on problem bodies.
    """

    TESTING = True
    DEBUG = False
    STORAGE_BACKEND = "memory"
    DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")
    PASSWORD_HASHER = "sha256"
    LOG_LEVEL = "WARNING"


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments."""

    DEBUG = False
    SQLALCHEMY_ECHO = False
    PROPAGATE_EXCEPTIONS = False


# Map names -> classes (simple, explicit)
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
