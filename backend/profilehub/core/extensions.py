"""Global Flask extension instances and initialization helpers."""

from __future__ import annotations

from typing import Any, cast

import redis  # type: ignore[import-untyped]
from flask import Flask, current_app
from flask_sqlalchemy import SQLAlchemy
from redis.exceptions import RedisError  # type: ignore[import-untyped]

from profilehub.infra import build_account_store, build_password_hasher
from profilehub.models.base import metadata
from profilehub.services._shared.errors import StorageUnavailableError
from profilehub.services._shared.ports import (
    AccountStore,
    PasswordHasher,
    SessionTokenIssuer,
    TokenIssuer,
)

# Global singletons (import-safe)
db: SQLAlchemy = SQLAlchemy(session_options={"autoflush": False}, metadata=metadata)
redis_client: redis.Redis | None = None


def init_app(app: Flask) -> None:
    """Build the account store, hasher and token issuer for ``app``.

    Parameters
    ----------
    app: flask.Flask
        Application receiving the collaborators under ``app.extensions``
        (``account_store``, ``password_hasher``, ``token_issuer``).

    Notes
    -----
    Flask-SQLAlchemy is bound only for the ``sql`` backend and the Redis client
    is created only for the ``redis`` backend, so the memory and file backends
    start without any external service.
    """
    global redis_client
    backend = str(app.config.get("STORAGE_BACKEND", "memory")).strip().lower()

    store: AccountStore
    if backend == "sql":
        app.config.setdefault("SQLALCHEMY_DATABASE_URI", app.config["DATABASE_URL"])
        db.init_app(app)

        # Ensure models are imported so metadata holds the accounts table
        from profilehub import models as _models  # noqa: F401

        with app.app_context():
            store = build_account_store(app.config, engine=db.engine)
            cast(Any, store).ensure_schema()
    elif backend == "redis":
        redis_url = app.config["REDIS_URL"]
        redis_client = redis.Redis.from_url(redis_url)
        try:
            redis_client.ping()
        except RedisError as exc:
            raise RuntimeError(f"Failed to connect to Redis at {redis_url!r}") from exc
        app.extensions["redis_client"] = redis_client
        store = build_account_store(app.config, redis_client=redis_client)
    else:
        store = build_account_store(app.config)
        if backend == "file":
            try:
                cast(Any, store).ensure_file()
            except StorageUnavailableError as exc:
                raise RuntimeError(
                    f"Accounts file {app.config['ACCOUNTS_FILE']!r} is not writable"
                ) from exc

    app.extensions["account_store"] = store
    app.extensions["password_hasher"] = build_password_hasher(app.config.get("PASSWORD_HASHER"))
    app.extensions["token_issuer"] = SessionTokenIssuer(
        length=int(app.config.get("SESSION_TOKEN_LENGTH", 48))
    )
    app.logger.info("storage.ready", extra={"backend": store.backend})


def get_account_store() -> AccountStore:
    """Return the account store bound to the current application."""
    store = current_app.extensions.get("account_store")
    if store is None:
        raise RuntimeError("Account store is not initialized. Call init_app() first.")
    return cast(AccountStore, store)


def get_password_hasher() -> PasswordHasher:
    """Return the configured password hasher."""
    return cast(PasswordHasher, current_app.extensions["password_hasher"])


def get_token_issuer() -> TokenIssuer:
    """Return the configured session token issuer."""
    return cast(TokenIssuer, current_app.extensions["token_issuer"])


def get_redis() -> redis.Redis:
    """Return the initialized Redis client."""
    if redis_client is None:
        raise RuntimeError("Redis client is not initialized. Call init_app() first.")
    return redis_client
