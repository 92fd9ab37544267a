# comments in English; reST docstrings
from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime

import redis  # type: ignore[import-untyped]
from redis.exceptions import RedisError  # type: ignore[import-untyped]

from profilehub.services._shared.entities import Account, Profile
from profilehub.services._shared.errors import (
    AlreadyExistsError,
    NotFoundError,
    StorageUnavailableError,
)
from profilehub.services._shared.ports import AccountStore


@dataclass(slots=True)
class RedisAccountStore(AccountStore):
    """
    Redis-backed document store: one JSON document per account.

    :param r: A Redis client (already connected).
    :param prefix: Key namespace; documents live at ``<prefix>:<email>``.
    """

    r: redis.Redis
    prefix: str = "account"
    backend: str = "redis"

    # -------------------- helpers --------------------

    def _k(self, email: str) -> str:
        return f"{self.prefix}:{email}"

    @staticmethod
    def _decode(raw: bytes | str) -> Account:
        text = raw.decode() if isinstance(raw, bytes | bytearray) else raw
        return Account.from_document(json.loads(text))

    # -------------------- API ------------------------

    def find_by_email(self, email: str) -> Account | None:
        try:
            raw = self.r.get(self._k(email))
        except RedisError as exc:
            raise StorageUnavailableError(self.backend) from exc
        if raw is None:
            return None
        try:
            return self._decode(raw)
        except (KeyError, ValueError, TypeError) as exc:
            raise StorageUnavailableError(self.backend, "Corrupt account document") from exc

    def create_if_absent(self, account: Account) -> None:
        """
        Insert the document with ``SET NX``.

        Redis guarantees at most one ``SET NX`` succeeds per key, across every
        process sharing the server; the losers get ``None`` back.
        """
        payload = json.dumps(account.to_document())
        try:
            created = self.r.set(self._k(account.email), payload, nx=True)
        except RedisError as exc:
            raise StorageUnavailableError(self.backend) from exc
        if not created:
            raise AlreadyExistsError("Account")

    def replace_profile(self, email: str, profile: Profile, updated_at: datetime) -> None:
        """
        Overwrite the ``profile`` of an existing document.

        Uses WATCH/MULTI/EXEC (optimistic locking): the document is re-read and
        rewritten until no concurrent writer touched the key in between. A
        missing key aborts with :class:`NotFoundError` without writing.
        """
        key = self._k(email)
        try:
            while True:
                try:
                    with self.r.pipeline() as p:
                        p.watch(key)
                        raw = p.get(key)
                        if raw is None:
                            p.unwatch()
                            raise NotFoundError("Account", email)
                        current = self._decode(raw)
                        updated = current.with_profile(profile, updated_at)

                        p.multi()
                        p.set(key, json.dumps(updated.to_document()))
                        p.execute()
                    return
                except redis.WatchError:
                    # Concurrent modification detected; retry loop
                    continue
        except RedisError as exc:
            raise StorageUnavailableError(self.backend) from exc
        except (KeyError, ValueError, TypeError) as exc:
            raise StorageUnavailableError(self.backend, "Corrupt account document") from exc

    def ping(self) -> None:
        try:
            self.r.ping()
        except RedisError as exc:
            raise StorageUnavailableError(self.backend) from exc
