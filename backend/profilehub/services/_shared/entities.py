"""
Account and profile records exchanged between services and account stores.

Adapters persist these records through :meth:`Account.to_document` /
:meth:`Account.from_document` so every backend stores the same camelCase
document layout (``fullName``, ``passwordHash``, ``profile.workHistory`` ...).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any

from profilehub.services._shared.dto import AccountPublicOut, ProfileDataOut


def _parse_dt(value: Any) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def _format_dt(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


@dataclass(frozen=True, slots=True)
class Profile:
    """
    Editable professional profile owned by exactly one account.

    Replace-only: every update supplies all four sequences.

    :ivar work_history: Ordered ``{company, title, start, end, current}`` entries.
    :ivar education: Ordered ``{school, degree, field}`` entries.
    :ivar skills: Unique tags, first-seen order.
    :ivar interests: Unique tags, first-seen order.
    :ivar updated_at: Last replacement instant (``None`` until first update).
    """

    work_history: list[dict[str, Any]] = field(default_factory=list)
    education: list[dict[str, Any]] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)
    interests: list[str] = field(default_factory=list)
    updated_at: datetime | None = None

    @classmethod
    def empty(cls) -> Profile:
        return cls()

    def to_data(self) -> ProfileDataOut:
        """Return the four sequences as a public payload (no timestamp)."""
        return ProfileDataOut(
            work_history=[dict(entry) for entry in self.work_history],
            education=[dict(entry) for entry in self.education],
            skills=list(self.skills),
            interests=list(self.interests),
        )

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {
            "workHistory": [dict(entry) for entry in self.work_history],
            "education": [dict(entry) for entry in self.education],
            "skills": list(self.skills),
            "interests": list(self.interests),
        }
        if self.updated_at is not None:
            doc["updatedAt"] = _format_dt(self.updated_at)
        return doc

    @classmethod
    def from_document(cls, doc: Mapping[str, Any] | None) -> Profile:
        """
        Rebuild a profile from its stored document.

        Missing or empty documents (accounts created before any update) yield
        the default empty profile.
        """
        if not doc:
            return cls.empty()
        if not isinstance(doc, Mapping):
            raise ValueError("Profile document must be an object.")
        return cls(
            work_history=[dict(entry) for entry in doc.get("workHistory") or []],
            education=[dict(entry) for entry in doc.get("education") or []],
            skills=[str(tag) for tag in doc.get("skills") or []],
            interests=[str(tag) for tag in doc.get("interests") or []],
            updated_at=_parse_dt(doc.get("updatedAt")),
        )


@dataclass(frozen=True, slots=True)
class Account:
    """
    Registered identity keyed by its normalized email.

    ``email``, ``full_name`` and ``password_digest`` never change after
    creation; only ``profile`` and ``updated_at`` are replaced.
    """

    id: str
    email: str
    full_name: str
    headline: str
    password_digest: str
    created_at: datetime
    updated_at: datetime | None = None
    profile: Profile = field(default_factory=Profile.empty)

    def public_view(self) -> AccountPublicOut:
        """Return the caller-safe subset (never the password digest)."""
        return AccountPublicOut(
            id=self.id,
            full_name=self.full_name,
            email=self.email,
            headline=self.headline,
        )

    def with_profile(self, profile: Profile, updated_at: datetime) -> Account:
        return replace(self, profile=profile, updated_at=updated_at)

    def to_document(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "fullName": self.full_name,
            "headline": self.headline,
            "passwordHash": self.password_digest,
            "profile": self.profile.to_document(),
            "createdAt": _format_dt(self.created_at),
            "updatedAt": _format_dt(self.updated_at),
        }

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> Account:
        if not isinstance(doc, Mapping):
            raise ValueError("Account document must be an object.")
        created_at = _parse_dt(doc.get("createdAt"))
        if created_at is None:
            raise ValueError("Account document is missing 'createdAt'.")
        return cls(
            id=str(doc["id"]),
            email=str(doc["email"]),
            full_name=str(doc.get("fullName", "")),
            headline=str(doc.get("headline") or ""),
            password_digest=str(doc["passwordHash"]),
            created_at=created_at,
            updated_at=_parse_dt(doc.get("updatedAt")),
            profile=Profile.from_document(doc.get("profile")),
        )
