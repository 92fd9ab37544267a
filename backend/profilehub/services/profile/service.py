"""
ProfileService
==============

Replaces and reads the professional profile attached to an account.

Updates are full overwrites (no merge): the stored profile becomes exactly
the four supplied sequences, with skill/interest tags deduplicated in
first-seen order.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from profilehub.services._shared.base import BaseService
from profilehub.services._shared.dto import ProfileDataOut
from profilehub.services._shared.entities import Profile
from profilehub.services._shared.errors import NotFoundError, ValidationError
from profilehub.services._shared.policies.common import dedupe_tags, normalize_email
from profilehub.services.profile.dto import ProfileUpdateIn

log = logging.getLogger(__name__)

# Entry keys that must be present and non-blank, per sequence.
REQUIRED_ENTRY_KEYS = {
    "workHistory": "company",
    "education": "school",
}


class ProfileService(BaseService):
    """
    Orchestrates profile replacement and lookup.
    """

    def update_profile(self, dto: ProfileUpdateIn) -> ProfileDataOut:
        """
        Replace the whole profile of an existing account.

        :param dto: Update input.
        :type dto: :class:`ProfileUpdateIn`
        :returns: The stored profile sequences.
        :rtype: :class:`ProfileDataOut`
        :raises ValidationError: When email is missing or a field is malformed.
        :raises NotFoundError: When no account uses the email.
        """
        if not self.require(dto.email):
            raise ValidationError("Email is required for profile updates.")
        self.ensure_storable(
            dto.email, dto.work_history, dto.education, dto.skills, dto.interests
        )

        email = normalize_email(dto.email)
        now = self.now_utc()
        profile = Profile(
            work_history=self._entries("workHistory", dto.work_history),
            education=self._entries("education", dto.education),
            skills=dedupe_tags(self._sequence("skills", dto.skills)),
            interests=dedupe_tags(self._sequence("interests", dto.interests)),
            updated_at=now,
        )
        # Adapter reports NotFoundError itself; it must never create the account.
        self.store.replace_profile(email, profile, now)
        log.info("profile.updated", extra={"backend": self.store.backend})
        return profile.to_data()

    def get_profile(self, email: str | None) -> ProfileDataOut:
        """
        Return the stored profile sequences for ``email``.

        :raises ValidationError: When email is missing.
        :raises NotFoundError: When no account uses the email.
        """
        if not self.require(email):
            raise ValidationError("Email is required.")
        self.ensure_storable(email)
        key = normalize_email(email)
        account = self.store.find_by_email(key)
        if account is None:
            raise NotFoundError("Account", key)
        return account.profile.to_data()

    # ------------------------------------------------------------------ #
    # Validation helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _sequence(name: str, value: Any) -> list[Any]:
        if value is None:
            return []
        if not isinstance(value, list | tuple):
            raise ValidationError(f"'{name}' must be a list.")
        return list(value)

    def _entries(self, name: str, value: Any) -> list[dict[str, Any]]:
        required = REQUIRED_ENTRY_KEYS[name]
        entries: list[dict[str, Any]] = []
        for index, entry in enumerate(self._sequence(name, value)):
            if not isinstance(entry, Mapping):
                raise ValidationError(f"'{name}[{index}]' must be an object.")
            if not self.require(entry.get(required)):
                raise ValidationError(f"'{name}[{index}].{required}' is required.")
            entries.append(dict(entry))
        return entries
