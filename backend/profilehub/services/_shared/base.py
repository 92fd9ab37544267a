# profilehub/services/_shared/base.py
from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from profilehub.core import errors as api_errors
from profilehub.services._shared.errors import (
    AlreadyExistsError,
    InvalidCredentialsError,
    NotFoundError,
    ServiceError,
    StorageUnavailableError,
    ValidationError,
)
from profilehub.services._shared.policies.common import is_utf8_encodable
from profilehub.services._shared.ports.account_store import AccountStore

UNSTORABLE_TEXT_MESSAGE = "Input contains characters that cannot be stored."
USER_NOT_FOUND_MESSAGE = "User not found. Sign in again."


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Hold the injected :class:`AccountStore` (the only thing that touches
      persistence).
    * Offer shared helpers (clock, input checks).

    Notes
    -----
    - Services never know which adapter they talk to.
    - Validation and normalization live here, never in adapters.
    """

    def __init__(self, *, store: AccountStore) -> None:
        """
        Initialize the base service.

        :param store: Account store adapter.
        :type store: AccountStore
        """
        self.store = store

    # ----------------------- Validation utilities ---------------------------

    @staticmethod
    def require(value: Any) -> bool:
        """Return ``True`` when ``value`` is a non-blank string."""
        return isinstance(value, str) and bool(value.strip())

    @staticmethod
    def present(value: Any) -> bool:
        """Return ``True`` when ``value`` is a non-empty string (whitespace counts)."""
        return isinstance(value, str) and value != ""

    @staticmethod
    def ensure_storable(*values: Any) -> None:
        """
        Reject input holding strings that have no UTF-8 form (lone surrogates).

        JSON allows ``"\\ud800"`` escapes; such strings would be accepted by
        one backend and break another, so they never reach the store.

        :raises ValidationError: When any nested string cannot be encoded.
        """
        if not all(is_utf8_encodable(value) for value in values):
            raise ValidationError(UNSTORABLE_TEXT_MESSAGE)

    @staticmethod
    def now_utc() -> datetime:
        return datetime.now(UTC)


def translate_service_error(
    exc: Exception, *, not_found_message: str = USER_NOT_FOUND_MESSAGE
) -> Exception:
    """
    Map a :class:`ServiceError` onto its :class:`~profilehub.core.errors.APIError`.

    Messages are the copy shown to end users; storage failures never
    leak backend detail. Non-service exceptions are returned untouched.

    :param not_found_message: Copy for :class:`NotFoundError`; routes that
        look up something other than the signed-in user pass their own.
    """
    if isinstance(exc, ValidationError):
        # → 400 Bad Request
        return api_errors.BadRequest(str(exc))

    if isinstance(exc, AlreadyExistsError):
        # → 409 Conflict
        return api_errors.Conflict("Account already exists. Try signing in.")

    if isinstance(exc, InvalidCredentialsError):
        # → 401 Unauthorized
        return api_errors.Unauthorized("Invalid credentials. Please try again.")

    if isinstance(exc, NotFoundError):
        # → 404 Not Found
        return api_errors.NotFound(not_found_message)

    if isinstance(exc, StorageUnavailableError):
        # → 503 Service Unavailable
        return api_errors.ServiceUnavailable()

    # Any other ServiceError subclass → 400 Bad Request
    if isinstance(exc, ServiceError):
        return api_errors.APIError(message=str(exc), status_code=400, code="bad_request")

    return exc
