"""Convenience exports for application schemas."""

from __future__ import annotations

from .accounts import (
    AccountPublicSchema,
    ProfileDataSchema,
    ProfileQuerySchema,
    ProfileUpdateSchema,
    SignInSchema,
    SignUpSchema,
)

__all__ = [
    "AccountPublicSchema",
    "ProfileDataSchema",
    "ProfileQuerySchema",
    "ProfileUpdateSchema",
    "SignInSchema",
    "SignUpSchema",
]
