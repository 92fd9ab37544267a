"""
profilehub.services._shared.ports
=================================

Collection of *ports* (hexagonal interfaces) that decouple the account
services from storage engines and credential policies.

Modules
-------
- :mod:`account_store`:
    Defines :class:`~.AccountStore`, the persistence contract shared by the
    memory, Redis, SQL and JSON-file adapters, plus the in-memory adapter.

- :mod:`password_hasher`:
    Defines :class:`~.PasswordHasher` (one-way digest + verification) and
    the default unsalted SHA-256 implementation.

- :mod:`session_token_issuer`:
    Defines :class:`~.TokenIssuer` and the stateless
    :class:`~.SessionTokenIssuer`.

Design Notes
------------
Concrete durable adapters live under ``profilehub.infra`` and must satisfy the
same contract as the in-memory one.
"""

from __future__ import annotations

from .account_store import AccountStore, InMemoryAccountStore
from .password_hasher import PasswordHasher, Sha256PasswordHasher
from .session_token_issuer import DEFAULT_TOKEN_LENGTH, SessionTokenIssuer, TokenIssuer

__all__ = [
    "AccountStore",
    "InMemoryAccountStore",
    "PasswordHasher",
    "Sha256PasswordHasher",
    "TokenIssuer",
    "SessionTokenIssuer",
    "DEFAULT_TOKEN_LENGTH",
]
