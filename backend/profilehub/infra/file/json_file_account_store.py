"""Flat-file account store: every account in one JSON document on disk."""

from __future__ import annotations

import json
import logging
import os
import threading
from datetime import datetime
from pathlib import Path
from typing import Any

from profilehub.services._shared.entities import Account, Profile
from profilehub.services._shared.errors import (
    AlreadyExistsError,
    NotFoundError,
    StorageUnavailableError,
)
from profilehub.services._shared.ports import AccountStore

log = logging.getLogger(__name__)


class JsonFileAccountStore(AccountStore):
    """
    Persist accounts as ``{"accounts": {<email>: <document>}}`` in one file.

    Every read-modify-write cycle holds the instance lock, so two overlapping
    sign-ups cannot both pass the uniqueness check. Writes go to a sibling
    ``.tmp`` file that is then moved over the live file with :func:`os.replace`,
    so readers see either the old or the new file, never a partial one.

    .. note::
       The lock is per process. Point each process at its own file or use the
       SQL/Redis stores when several workers share the data.
    """

    backend = "file"

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # public API

    def ensure_file(self) -> None:
        """Create an empty accounts file when none exists."""
        with self._lock:
            if not self._path.exists():
                self._write({})

    def find_by_email(self, email: str) -> Account | None:
        with self._lock:
            accounts = self._read()
        doc = accounts.get(email)
        return self._decode(doc) if doc is not None else None

    def create_if_absent(self, account: Account) -> None:
        with self._lock:
            accounts = self._read()
            if account.email in accounts:
                raise AlreadyExistsError("Account")
            accounts[account.email] = account.to_document()
            self._write(accounts)

    def replace_profile(self, email: str, profile: Profile, updated_at: datetime) -> None:
        with self._lock:
            accounts = self._read()
            doc = accounts.get(email)
            if doc is None:
                raise NotFoundError("Account", email)
            accounts[email] = self._decode(doc).with_profile(profile, updated_at).to_document()
            self._write(accounts)

    def ping(self) -> None:
        with self._lock:
            self._read()

    # ------------------------------------------------------------------
    # helpers

    def _decode(self, doc: dict[str, Any]) -> Account:
        try:
            return Account.from_document(doc)
        except (KeyError, ValueError, TypeError) as exc:
            raise StorageUnavailableError(self.backend, "Corrupt account document") from exc

    def _read(self) -> dict[str, dict[str, Any]]:
        if not self._path.exists():
            return {}
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageUnavailableError(self.backend) from exc
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except ValueError as exc:
            log.error("accounts file %s is not valid JSON", self._path)
            raise StorageUnavailableError(self.backend, "Corrupt accounts file") from exc
        accounts = data.get("accounts") if isinstance(data, dict) else None
        if not isinstance(accounts, dict):
            raise StorageUnavailableError(self.backend, "Corrupt accounts file")
        return accounts

    def _write(self, accounts: dict[str, dict[str, Any]]) -> None:
        tmp_path = Path(f"{self._path}.tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps({"accounts": accounts}, indent=2), encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as exc:
            raise StorageUnavailableError(self.backend) from exc


__all__ = ["JsonFileAccountStore"]
