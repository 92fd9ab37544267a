from __future__ import annotations

import hashlib
import hmac
from typing import Protocol


class PasswordHasher(Protocol):
    """Port for one-way credential digests."""

    def digest(self, secret: str) -> str: ...

    def verify(self, secret: str, digest: str) -> bool: ...


class Sha256PasswordHasher(PasswordHasher):
    """
    Unsalted hex SHA-256 digests.

    Deterministic and fixed-length (64 hex chars), so digests written by
    earlier deployments keep verifying. Prefer
    :class:`profilehub.infra.werkzeug.werkzeug_password_hasher.WerkzeugPasswordHasher`
    for new deployments.
    """

    def digest(self, secret: str) -> str:
        # surrogatepass: lone surrogates hash instead of raising.
        return hashlib.sha256(secret.encode("utf-8", "surrogatepass")).hexdigest()

    def verify(self, secret: str, digest: str) -> bool:
        if not digest:
            return False
        return hmac.compare_digest(self.digest(secret), digest)
