"""Abstract remote platform interface.

The three stages (resolve, adjust access, upsert environments) depend on
BasePlatform rather than PyGithub, so tests can substitute an implementation
that records calls and returns scripted responses.

Contract for every method:
  - returns normally on success
  - raises NotFoundError when the platform reports the object does not exist
  - raises PlatformError for any other failure
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from setupenv_core.models import EnvReviewer


class BasePlatform(ABC):
    """Minimal set of remote operations needed to configure environments."""

    @abstractmethod
    def get_team_id(self, org: str, team_slug: str) -> int:
        """Return the numeric id of a team looked up by organization and slug."""

    @abstractmethod
    def get_user_id(self, username: str) -> int:
        """Return the numeric id of a user looked up by login."""

    @abstractmethod
    def check_team_permission(self, org: str, team_slug: str, owner: str, repo: str) -> None:
        """Succeed if the team holds any permission on the repository.

        Raises NotFoundError when the team has no permission record.
        """

    @abstractmethod
    def grant_team_permission(self, org: str, team_slug: str, owner: str, repo: str, permission: str) -> None:
        """Grant ``permission`` on the repository to the team."""

    @abstractmethod
    def check_collaborator(self, owner: str, repo: str, username: str) -> None:
        """Succeed if the user is a collaborator on the repository."""

    @abstractmethod
    def add_collaborator(self, owner: str, repo: str, username: str, permission: str) -> None:
        """Add the user as a repository collaborator with ``permission``."""

    @abstractmethod
    def upsert_environment(self, owner: str, repo: str, environment_name: str, reviewers: Sequence[EnvReviewer]) -> None:
        """Create the environment or update it in place with exactly ``reviewers`` as required reviewers."""
