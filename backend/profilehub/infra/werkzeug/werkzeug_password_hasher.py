from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from profilehub.services._shared.ports.password_hasher import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    """
    Salted digests from :mod:`werkzeug.security`.

    :param method: Werkzeug hashing method (``scrypt``, ``pbkdf2:sha256``...).
    """

    def __init__(self, method: str = "scrypt") -> None:
        self.method = method

    def digest(self, secret: str) -> str:
        return generate_password_hash(secret, method=self.method)

    def verify(self, secret: str, digest: str) -> bool:
        if not digest:
            return False
        # ``check_password_hash`` raises on digests it cannot parse (e.g. bare hex).
        try:
            return bool(check_password_hash(digest, secret))
        except ValueError:
            return False
