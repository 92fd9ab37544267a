from __future__ import annotations

import hashlib
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Protocol

DEFAULT_TOKEN_LENGTH = 48


class TokenIssuer(Protocol):
    """Port for per-sign-in session tokens."""

    def issue(self, email: str) -> str: ...


class SessionTokenIssuer(TokenIssuer):
    """
    Derive an opaque session token from an email and the issuance instant.

    The token is the SHA-256 hex digest of ``"<email>-<epoch millis>"``
    truncated to ``length`` characters. Nothing is stored, so tokens can be
    neither validated nor revoked later.

    :param length: Number of hex characters to keep (1..64).
    :param clock: Returns the current instant; injectable for tests.
    """

    def __init__(
        self,
        *,
        length: int = DEFAULT_TOKEN_LENGTH,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        if not 1 <= length <= 64:
            raise ValueError("Session token length must be between 1 and 64.")
        self.length = length
        self._clock = clock or (lambda: datetime.now(UTC))

    def issue(self, email: str) -> str:
        millis = int(self._clock().timestamp() * 1000)
        seed = f"{email}-{millis}".encode("utf-8", "surrogatepass")
        return hashlib.sha256(seed).hexdigest()[: self.length]
