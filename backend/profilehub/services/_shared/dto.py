# comments in English; reST docstrings strict
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class AccountPublicOut:
    """
    Caller-safe account view.

    :param id: Opaque account identifier.
    :type id: str
    :param full_name: Display name.
    :type full_name: str
    :param email: Normalized email.
    :type email: str
    :param headline: Short professional headline (may be empty).
    :type headline: str
    """

    id: str
    full_name: str
    email: str
    headline: str


@dataclass(frozen=True, slots=True)
class ProfileDataOut:
    """
    Profile sequences returned to callers.

    :param work_history: Ordered work history entries.
    :type work_history: list[dict[str, Any]]
    :param education: Ordered education entries.
    :type education: list[dict[str, Any]]
    :param skills: Unique skill tags.
    :type skills: list[str]
    :param interests: Unique interest tags.
    :type interests: list[str]
    """

    work_history: list[dict[str, Any]] = field(default_factory=list)
    education: list[dict[str, Any]] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)
    interests: list[str] = field(default_factory=list)
