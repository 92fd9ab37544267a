"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask, HTTP, SQLAlchemy or Redis directly. They are the stable contract
between account store adapters and application services.

Routes turn them into ``profilehub/core/errors.py`` API errors with
``translate_service_error()`` from ``profilehub/services/_shared/base.py``.
"""

from __future__ import annotations

from dataclasses import dataclass

# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - They can be safely raised from adapters or domain logic.
    - The API layer translates them to :class:`profilehub.core.errors.APIError`.
    """

    pass


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


class ValidationError(ServiceError):
    """Raised when required input is missing or malformed."""

    def __init__(self, message: str = "Invalid input.") -> None:
        super().__init__(message)


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when an operation references an account that does not exist.

    :param entity: Entity name (e.g., "Account").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str
    """

    entity: str
    key: str

    def __str__(self) -> str:
        return f"{self.entity} not found: {self.key}"


@dataclass(slots=True)
class AlreadyExistsError(ServiceError):
    """
    Raised when an account with the same normalized email already exists.

    The message is generic; callers learn nothing beyond the
    collision itself.

    :param entity: Entity name (e.g., "Account").
    :type entity: str
    """

    entity: str = "Account"

    def __str__(self) -> str:
        return f"{self.entity} already exists"


class InvalidCredentialsError(ServiceError):
    """
    Raised for an unknown email *and* for a wrong password.

    Both cases share one message so responses never reveal whether an
    account exists.
    """

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class StorageUnavailableError(ServiceError):
    """
    Raised by account store adapters when the backend fails (I/O, network,
    query or decode errors). Always chained to the backend exception.
    """

    def __init__(self, backend: str, message: str = "Account store unavailable") -> None:
        super().__init__(f"{message} ({backend})")
        self.backend = backend
