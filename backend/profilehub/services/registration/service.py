"""
UserRegistrationService
=======================

Process-level service that registers a new account:

- Validates the required fields and normalizes the natural key (email).
- Digests the password through the injected :class:`PasswordHasher`.
- Delegates uniqueness to the account store's atomic ``create_if_absent``;
  there is no check-then-insert step here.
"""

from __future__ import annotations

import logging
from uuid import uuid4

from profilehub.services._shared.base import BaseService
from profilehub.services._shared.entities import Account, Profile
from profilehub.services._shared.errors import AlreadyExistsError, ValidationError
from profilehub.services._shared.policies.common import normalize_email
from profilehub.services._shared.ports.account_store import AccountStore
from profilehub.services._shared.ports.password_hasher import PasswordHasher
from profilehub.services.registration.dto import UserRegistrationIn, UserRegistrationOut

log = logging.getLogger(__name__)


class UserRegistrationService(BaseService):
    """
    Orchestrates account creation.
    """

    def __init__(
        self,
        *,
        store: AccountStore,
        hasher: PasswordHasher,
    ) -> None:
        super().__init__(store=store)
        self.hasher = hasher

    def register(self, dto: UserRegistrationIn) -> UserRegistrationOut:
        """
        Create an account and return its public view.

        :param dto: Registration input.
        :type dto: :class:`UserRegistrationIn`
        :returns: Registration result payload.
        :rtype: :class:`UserRegistrationOut`
        :raises ValidationError: When name, email or password is missing,
            or when a field holds characters that cannot be stored.
        :raises AlreadyExistsError: When the normalized email is taken.
        :raises StorageUnavailableError: When the store backend fails.
        """
        if not (
            self.require(dto.full_name) and self.require(dto.email) and self.present(dto.password)
        ):
            raise ValidationError("Name, email, and password are required.")
        self.ensure_storable(dto.full_name, dto.email, dto.password, dto.headline)

        now = self.now_utc()
        account = Account(
            id=uuid4().hex,
            email=normalize_email(dto.email),
            full_name=str(dto.full_name).strip(),
            headline=(dto.headline or "").strip(),
            password_digest=self.hasher.digest(dto.password),
            created_at=now,
            updated_at=now,
            profile=Profile.empty(),
        )

        try:
            self.store.create_if_absent(account)
        except AlreadyExistsError:
            log.info("registration.duplicate", extra={"backend": self.store.backend})
            raise

        log.info(
            "registration.created",
            extra={"account_id": account.id, "backend": self.store.backend},
        )
        return UserRegistrationOut(account=account.public_view())
