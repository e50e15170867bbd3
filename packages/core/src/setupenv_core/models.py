"""Reviewer data models.

A reviewer goes through two shapes during a run:
  ReviewerSpec: the raw input string, parsed but not yet looked up
  EnvReviewer: the resolved record carrying the platform's numeric id
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ReviewerType(str, Enum):
    """Reviewer kinds accepted by the environments API (values are sent verbatim)."""

    USER = "User"
    TEAM = "Team"


@dataclass(frozen=True)
class ReviewerSpec:
    """A reviewer string split into its parts before any remote lookup."""

    raw: str
    type: ReviewerType
    name: str  # username or team slug, leading "@" removed
    org: str | None = None  # owning organization, teams only


@dataclass(frozen=True)
class EnvReviewer:
    """A reviewer resolved against the platform.

    ``team_org`` is set if and only if ``type`` is ``ReviewerType.TEAM``.
    """

    type: ReviewerType
    id: int
    name: str
    team_org: str | None = None

    def __post_init__(self):
        if (self.type is ReviewerType.TEAM) != (self.team_org is not None):
            raise ValueError(f"team_org must be set only for team reviewers (type={self.type.value!r})")

    @property
    def is_team(self) -> bool:
        return self.type is ReviewerType.TEAM

    @property
    def spec(self) -> str:
        """Render the reviewer the way a user would write it in the input list."""
        return f"{self.team_org}/{self.name}" if self.is_team else self.name

    def to_payload(self) -> dict:
        return {"type": self.type.value, "id": self.id}
