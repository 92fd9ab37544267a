from __future__ import annotations

import threading
from datetime import datetime
from typing import Any, Protocol

from profilehub.services._shared.entities import Account, Profile
from profilehub.services._shared.errors import AlreadyExistsError, NotFoundError


class AccountStore(Protocol):
    """
    Persistence port for accounts, keyed by normalized email.

    Every adapter MUST expose identical observable behaviour:

    * ``find_by_email`` returns ``None`` for unknown emails.
    * ``create_if_absent`` is atomic per email: among concurrent callers racing
      on the same email exactly one succeeds, every other one gets
      :class:`AlreadyExistsError`.
    * ``replace_profile`` overwrites the whole profile or raises
      :class:`NotFoundError`; it never creates an account.
    * Backend failures surface as
      :class:`~profilehub.services._shared.errors.StorageUnavailableError`,
      never as "not found".
    """

    #: Short adapter name used in logs and error messages.
    backend: str

    def find_by_email(self, email: str) -> Account | None:
        """Fetch the account stored under ``email`` (already normalized)."""

    def create_if_absent(self, account: Account) -> None:
        """Insert ``account`` unless its email is taken. :raises AlreadyExistsError:"""

    def replace_profile(self, email: str, profile: Profile, updated_at: datetime) -> None:
        """Overwrite the profile of ``email``. :raises NotFoundError:"""

    def ping(self) -> None:
        """Check backend reachability. :raises StorageUnavailableError:"""


class InMemoryAccountStore(AccountStore):
    """
    Process-local account store.

    .. note::
       One lock guards every read and write so a lookup can never observe a
       half-applied create. Records are kept as documents and rebuilt on read,
       so callers never share mutable state with the store.
    """

    backend = "memory"

    def __init__(self) -> None:
        self._by_email: dict[str, dict[str, Any]] = {}
        self._lock = threading.Lock()

    def find_by_email(self, email: str) -> Account | None:
        with self._lock:
            doc = self._by_email.get(email)
        return Account.from_document(doc) if doc is not None else None

    def create_if_absent(self, account: Account) -> None:
        with self._lock:
            if account.email in self._by_email:
                raise AlreadyExistsError("Account")
            self._by_email[account.email] = account.to_document()

    def replace_profile(self, email: str, profile: Profile, updated_at: datetime) -> None:
        with self._lock:
            doc = self._by_email.get(email)
            if doc is None:
                raise NotFoundError("Account", email)
            updated = Account.from_document(doc).with_profile(profile, updated_at)
            self._by_email[email] = updated.to_document()

    def ping(self) -> None:
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_email)
