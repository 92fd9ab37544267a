from __future__ import annotations

import hashlib

import pytest
from profilehub.infra.werkzeug import WerkzeugPasswordHasher
from profilehub.services._shared.ports import Sha256PasswordHasher


class TestSha256PasswordHasher:
    def test_digest_is_unsalted_hex_sha256(self):
        hasher = Sha256PasswordHasher()

        digest = hasher.digest("s3cret!")

        assert digest == hashlib.sha256(b"s3cret!").hexdigest()
        assert len(digest) == 64
        assert hasher.digest("s3cret!") == digest

    def test_verify(self):
        hasher = Sha256PasswordHasher()
        digest = hasher.digest("s3cret!")

        assert hasher.verify("s3cret!", digest) is True
        assert hasher.verify("S3cret!", digest) is False
        assert hasher.verify("s3cret!", "") is False

    def test_lone_surrogate_hashes_instead_of_raising(self):
        hasher = Sha256PasswordHasher()

        digest = hasher.digest("pw\ud800")

        assert digest == hashlib.sha256(b"pw\xed\xa0\x80").hexdigest()
        assert hasher.verify("pw\ud800", digest) is True
        assert hasher.verify("pw", digest) is False


class TestWerkzeugPasswordHasher:
    @pytest.fixture()
    def hasher(self) -> WerkzeugPasswordHasher:
        # pbkdf2 with few iterations keeps the suite fast
        return WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")

    def test_digest_is_salted(self, hasher):
        first = hasher.digest("s3cret!")
        second = hasher.digest("s3cret!")

        assert first != second
        assert first.startswith("pbkdf2:sha256:1000$")

    def test_verify(self, hasher):
        digest = hasher.digest("s3cret!")

        assert hasher.verify("s3cret!", digest) is True
        assert hasher.verify("wrong", digest) is False

    def test_verify_rejects_foreign_or_empty_digest(self, hasher):
        legacy = Sha256PasswordHasher().digest("s3cret!")

        assert hasher.verify("s3cret!", legacy) is False
        assert hasher.verify("s3cret!", "") is False
