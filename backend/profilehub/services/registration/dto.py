"""
DTOs for UserRegistrationService.

Contracts for the self-registration flow that creates one account per
normalized email.
"""

from __future__ import annotations

from dataclasses import dataclass

from profilehub.services._shared.dto import AccountPublicOut

# --------------------------------------------------------------------------- #
# Input
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class UserRegistrationIn:
    """
    Input payload for the registration process.

    :param full_name: Display name (required, trimmed).
    :type full_name: str | None
    :param email: Login email (normalized to lowercase+trim).
    :type email: str | None
    :param password: Raw password (digested before storage).
    :type password: str | None
    :param headline: Optional professional headline.
    :type headline: str | None
    """

    full_name: str | None
    email: str | None
    password: str | None
    headline: str | None = None


# --------------------------------------------------------------------------- #
# Output
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class UserRegistrationOut:
    """
    Output summary for the registration process.

    :param account: Public-safe account payload.
    :type account: :class:`AccountPublicOut`
    """

    account: AccountPublicOut
