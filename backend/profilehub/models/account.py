"""Account table used by the relational account store."""

from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, ReprMixin, TimestampMixin


class AccountRecord(ReprMixin, TimestampMixin, Base):
    """
    One row per account, keyed by the normalized email.

    Fields
    ------
    email : str
        Primary key; the database rejects a second row for the same email,
        which is what makes concurrent sign-ups safe across processes.
    id : str
        Opaque surrogate (uuid4 hex), unique.
    full_name : str
        Display name.
    headline : str
        Optional headline, empty string by default.
    password_hash : str
        Digest produced by the configured password hasher.
    profile : dict | None
        Profile document (``workHistory``, ``education``, ``skills``,
        ``interests``, ``updatedAt``).
    """

    __tablename__ = "accounts"

    email: Mapped[str] = mapped_column(String(255), primary_key=True)
    id: Mapped[str] = mapped_column(String(36), nullable=False, unique=True)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    headline: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    profile: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
