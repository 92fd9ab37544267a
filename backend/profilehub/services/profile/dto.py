"""
DTOs for ProfileService.

Profiles are replace-only: an update carries all four sequences and any
omitted one is treated as empty.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ProfileUpdateIn:
    """
    Input payload for a full profile replacement.

    :param email: Owner email (normalized by the service).
    :type email: str | None
    :param work_history: Work entries or ``None`` for empty.
    :param education: Education entries or ``None`` for empty.
    :param skills: Skill tags or ``None`` for empty.
    :param interests: Interest tags or ``None`` for empty.
    """

    email: str | None
    work_history: Any = None
    education: Any = None
    skills: Any = None
    interests: Any = None
