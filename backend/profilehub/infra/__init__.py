"""
Infrastructure adapters and the helpers that pick one from configuration.

The service layer only sees the ports in :mod:`profilehub.services._shared.ports`;
this package decides which concrete adapter backs them.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from profilehub.services._shared.ports import (
    AccountStore,
    InMemoryAccountStore,
    PasswordHasher,
    Sha256PasswordHasher,
)


def build_password_hasher(name: str | None) -> PasswordHasher:
    """Return the hasher registered under ``name`` (``sha256`` or ``werkzeug``)."""
    key = (name or "sha256").strip().lower()
    if key == "sha256":
        return Sha256PasswordHasher()
    if key == "werkzeug":
        from profilehub.infra.werkzeug import WerkzeugPasswordHasher

        return WerkzeugPasswordHasher()
    raise ValueError(f"Unknown PASSWORD_HASHER {name!r}")


def build_account_store(
    config: Mapping[str, Any],
    *,
    engine: Any | None = None,
    redis_client: Any | None = None,
) -> AccountStore:
    """
    Build the account store selected by ``config["STORAGE_BACKEND"]``.

    :param config: Flask config (or any mapping with the same keys).
    :param engine: SQLAlchemy engine for the ``sql`` backend; built from
        ``DATABASE_URL`` when omitted.
    :param redis_client: Redis client for the ``redis`` backend; built from
        ``REDIS_URL`` when omitted.
    :raises ValueError: For an unknown backend name.
    """
    backend = str(config.get("STORAGE_BACKEND", "memory")).strip().lower()

    if backend == "memory":
        return InMemoryAccountStore()

    if backend == "sql":
        from profilehub.infra.sql import SqlAccountStore, build_engine

        if engine is None:
            engine = build_engine(
                config["DATABASE_URL"], echo=bool(config.get("SQLALCHEMY_ECHO", False))
            )
        return SqlAccountStore(engine)

    if backend == "redis":
        import redis  # type: ignore[import-untyped]

        from profilehub.infra.redis import RedisAccountStore

        if redis_client is None:
            redis_client = redis.Redis.from_url(config["REDIS_URL"])
        return RedisAccountStore(redis_client)

    if backend == "file":
        from profilehub.infra.file import JsonFileAccountStore

        return JsonFileAccountStore(config["ACCOUNTS_FILE"])

    raise ValueError(f"Unknown STORAGE_BACKEND {backend!r}")


__all__ = ["build_account_store", "build_password_hasher"]
