# profilehub/services/auth/service.py
from __future__ import annotations

import logging

from profilehub.services._shared.base import BaseService
from profilehub.services._shared.errors import InvalidCredentialsError, ValidationError
from profilehub.services._shared.policies.common import normalize_email
from profilehub.services._shared.ports.account_store import AccountStore
from profilehub.services._shared.ports.password_hasher import PasswordHasher
from profilehub.services._shared.ports.session_token_issuer import TokenIssuer
from profilehub.services.auth.dto import SignInIn, SignInOut

log = logging.getLogger(__name__)


class AuthService(BaseService):
    """
    Credential verification service.

    Looks accounts up through the injected :class:`AccountStore`, verifies the
    password with a pluggable :class:`PasswordHasher` and hands out a session
    token from a :class:`TokenIssuer`. Issued tokens are not recorded.
    """

    def __init__(
        self,
        *,
        store: AccountStore,
        hasher: PasswordHasher,
        tokens: TokenIssuer,
    ) -> None:
        """
        Initialize the service with its dependencies.

        :param store: Account store adapter.
        :param hasher: Credential hasher used at registration time.
        :param tokens: Session token issuer.
        """
        super().__init__(store=store)
        self.hasher = hasher
        self.tokens = tokens

    # ------------------------------------------------------------------ #
    # Sign-in
    # ------------------------------------------------------------------ #

    def sign_in(self, dto: SignInIn) -> SignInOut:
        """
        Authenticate credentials and issue a session token.

        :param dto: Sign-in input.
        :returns: Token, public account view and stored profile data.
        :raises ValidationError: If email or password is missing
            or holds characters that cannot be stored.
        :raises InvalidCredentialsError: If the email is unknown or the
            password does not match (both raise the same error).
        """
        if not (self.require(dto.email) and self.present(dto.password)):
            raise ValidationError("Email and password are required.")
        self.ensure_storable(dto.email, dto.password)

        email = normalize_email(dto.email)
        account = self.store.find_by_email(email)
        if account is None or not self.hasher.verify(str(dto.password), account.password_digest):
            # Same log line for both branches; do not record which check failed.
            log.info("auth.sign_in_rejected", extra={"backend": self.store.backend})
            raise InvalidCredentialsError()

        token = self.tokens.issue(account.email)
        log.info("auth.sign_in", extra={"account_id": account.id})
        return SignInOut(
            token=token,
            account=account.public_view(),
            profile=account.profile.to_data(),
        )
