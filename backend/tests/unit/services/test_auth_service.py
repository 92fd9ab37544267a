# tests/unit/services/test_auth_service.py
from __future__ import annotations

from datetime import UTC, datetime

import pytest
from profilehub.services._shared.errors import InvalidCredentialsError, ValidationError
from profilehub.services._shared.ports import Sha256PasswordHasher, SessionTokenIssuer
from profilehub.services.auth.dto import SignInIn, SignInOut
from profilehub.services.auth.service import AuthService

from tests.factories.account import DEFAULT_PASSWORD, AccountFactory, ProfileFactory

FIXED_NOW = datetime(2024, 1, 1, 9, 30, tzinfo=UTC)


# ------------------------------ Fixtures ---------------------------------- #
@pytest.fixture()
def issuer() -> SessionTokenIssuer:
    """Token issuer pinned to :data:`FIXED_NOW`."""
    return SessionTokenIssuer(clock=lambda: FIXED_NOW)


@pytest.fixture()
def service(memory_store, issuer) -> AuthService:
    return AuthService(store=memory_store, hasher=Sha256PasswordHasher(), tokens=issuer)


# -------------------------------- Tests ----------------------------------- #
def test_sign_in_returns_token_account_and_profile(service, memory_store, issuer):
    account = AccountFactory(email="ari@example.com", profile=ProfileFactory())
    memory_store.create_if_absent(account)

    out = service.sign_in(SignInIn(email="ari@example.com", password=DEFAULT_PASSWORD))

    assert isinstance(out, SignInOut)
    assert out.token == issuer.issue("ari@example.com")
    assert len(out.token) == 48
    assert out.account == account.public_view()
    assert out.profile == account.profile.to_data()


def test_sign_in_normalizes_email(service, memory_store):
    memory_store.create_if_absent(AccountFactory(email="ari@example.com"))

    out = service.sign_in(SignInIn(email="  ARI@Example.com ", password=DEFAULT_PASSWORD))

    assert out.account.email == "ari@example.com"


def test_wrong_password_and_unknown_email_are_indistinguishable(service, memory_store):
    memory_store.create_if_absent(AccountFactory(email="ari@example.com"))

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        service.sign_in(SignInIn(email="ari@example.com", password="nope"))
    with pytest.raises(InvalidCredentialsError) as unknown_email:
        service.sign_in(SignInIn(email="ghost@example.com", password=DEFAULT_PASSWORD))

    assert type(wrong_password.value) is type(unknown_email.value)
    assert str(wrong_password.value) == str(unknown_email.value)


def test_password_is_case_sensitive(service, memory_store):
    memory_store.create_if_absent(AccountFactory(email="ari@example.com", password="Secret"))

    with pytest.raises(InvalidCredentialsError):
        service.sign_in(SignInIn(email="ari@example.com", password="secret"))


@pytest.mark.parametrize(
    "email,password", [(None, "x"), ("  ", "x"), ("a@example.com", None), ("a@example.com", "")]
)
def test_sign_in_requires_email_and_password(service, email, password):
    with pytest.raises(ValidationError, match="Email and password are required."):
        service.sign_in(SignInIn(email=email, password=password))


@pytest.mark.parametrize(
    "email,password", [("\ud800@x.com", DEFAULT_PASSWORD), ("ari@example.com", "pw\udfff")]
)
def test_sign_in_rejects_text_without_utf8_form(service, memory_store, email, password):
    memory_store.create_if_absent(AccountFactory(email="ari@example.com"))

    with pytest.raises(ValidationError, match="cannot be stored"):
        service.sign_in(SignInIn(email=email, password=password))
