"""Pytest fixtures for account stores and the Flask application.

Store-level tests receive a ``store`` parametrized over every adapter so the
same contract runs against memory, Redis (fakeredis), SQLite through
SQLAlchemy, and the JSON file store. HTTP tests build a fresh application per
test so accounts never leak between cases.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import fakeredis
import pytest
from flask import Flask
from profilehub.core.config import TestingConfig
from profilehub.factory import create_app
from profilehub.infra.file import JsonFileAccountStore
from profilehub.infra.redis import RedisAccountStore
from profilehub.infra.sql import SqlAccountStore, build_engine
from profilehub.services._shared.ports import AccountStore, InMemoryAccountStore

STORE_BACKENDS = ("memory", "redis", "sql", "file")


def _make_store(backend: str, tmp_path: Path) -> AccountStore:
    """Build a fresh, empty store for ``backend``."""
    if backend == "memory":
        return InMemoryAccountStore()
    if backend == "redis":
        return RedisAccountStore(r=fakeredis.FakeRedis(server=fakeredis.FakeServer()))
    if backend == "sql":
        store = SqlAccountStore(build_engine(f"sqlite:///{tmp_path / 'accounts.db'}"))
        store.ensure_schema()
        return store
    if backend == "file":
        return JsonFileAccountStore(tmp_path / "accounts.json")
    raise ValueError(backend)


@pytest.fixture(params=STORE_BACKENDS)
def store(request: pytest.FixtureRequest, tmp_path: Path) -> Generator[AccountStore, None, None]:
    """Yield one adapter per parametrization; SQL engines are disposed afterwards."""
    instance = _make_store(request.param, tmp_path)
    yield instance
    if isinstance(instance, SqlAccountStore):
        instance.engine.dispose()


@pytest.fixture()
def memory_store() -> InMemoryAccountStore:
    """Return an empty in-memory store for service tests."""
    return InMemoryAccountStore()


@pytest.fixture()
def app() -> Generator[Flask, None, None]:
    """Create a Flask application backed by the in-memory store."""

    os.environ.pop("DATABASE_URL", None)
    application = create_app(TestingConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(app: Flask) -> Any:
    """Return a Flask test client."""

    return app.test_client()


@pytest.fixture()
def make_app(tmp_path: Path) -> Callable[..., Flask]:
    """Factory building an application with config overrides.

    Examples
    --------
    >>> def test_sql(make_app):
    ...     app = make_app(STORAGE_BACKEND="sql")
    """

    def _factory(**overrides: Any) -> Flask:
        overrides.setdefault("ACCOUNTS_FILE", str(tmp_path / "accounts.json"))
        overrides.setdefault("DATABASE_URL", "sqlite:///:memory:")
        config = type("OverrideConfig", (TestingConfig,), overrides)
        return create_app(config)

    return _factory


@pytest.fixture()
def freeze_time() -> Callable[[str | None], Any]:
    """Factory returning :func:`freezegun.freeze_time`.

    Examples
    --------
    >>> def test_with_frozen_time(freeze_time):
    ...     with freeze_time("2024-01-01"):
    ...         ...
    """

    from freezegun import freeze_time as _freeze_time

    def _factory(target: str | None = None) -> Any:
        return _freeze_time(target or "2024-01-01")

    return _factory
