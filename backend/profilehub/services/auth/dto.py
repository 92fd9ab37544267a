# profilehub/services/auth/dto.py
from __future__ import annotations

from dataclasses import dataclass

from profilehub.services._shared.dto import AccountPublicOut, ProfileDataOut

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class SignInIn:
    """
    Input DTO for sign-in.

    :param email: Account email (normalized by the service).
    :type email: str | None
    :param password: Raw password (to be verified).
    :type password: str | None
    """

    email: str | None
    password: str | None


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class SignInOut:
    """
    Output DTO for a successful sign-in.

    :param token: Opaque session token.
    :type token: str
    :param account: Public account view.
    :type account: AccountPublicOut
    :param profile: Stored profile sequences.
    :type profile: ProfileDataOut
    """

    token: str
    account: AccountPublicOut
    profile: ProfileDataOut
