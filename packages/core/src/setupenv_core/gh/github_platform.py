"""PyGithub-backed implementation of BasePlatform."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Sequence
from urllib.parse import quote

import requests
from github import Auth, Github, GithubException, UnknownObjectException

from setupenv_core.errors import NotFoundError, PlatformError
from setupenv_core.gh.base import BasePlatform
from setupenv_core.models import EnvReviewer

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"


def _describe(error: GithubException) -> str:
    """Return a short "<status> <message>" description of a PyGithub error."""
    data = error.data if isinstance(error.data, dict) else {}
    message = data.get("message")
    if message:
        return f"{error.status} {message}"
    return str(error)


@contextmanager
def _translate_errors() -> Iterator[None]:
    """Re-raise PyGithub and transport failures as PlatformError / NotFoundError."""
    try:
        yield
    except UnknownObjectException as e:
        raise NotFoundError(_describe(e), status=e.status) from e
    except GithubException as e:
        raise PlatformError(_describe(e), status=e.status) from e
    except requests.RequestException as e:
        raise PlatformError(f"{type(e).__name__}: {e}") from e


class GithubPlatform(BasePlatform):
    """Talks to the GitHub REST API through PyGithub.

    Teams and repositories are fetched once and cached for the lifetime of
    the instance, which matches a single invocation. Constructing the client
    makes no network call.
    """

    def __init__(self, token: str, base_url: str | None = None):
        self._gh = Github(auth=Auth.Token(token), base_url=base_url or DEFAULT_API_URL)
        self._teams: dict = {}
        self._repos: dict = {}

    def _team(self, org: str, team_slug: str):
        key = (org, team_slug)
        if key not in self._teams:
            self._teams[key] = self._gh.get_organization(org).get_team_by_slug(team_slug)
        return self._teams[key]

    def _repo(self, owner: str, repo: str):
        key = f"{owner}/{repo}"
        if key not in self._repos:
            self._repos[key] = self._gh.get_repo(key)
        return self._repos[key]

    def get_team_id(self, org: str, team_slug: str) -> int:
        with _translate_errors():
            return self._team(org, team_slug).id

    def get_user_id(self, username: str) -> int:
        with _translate_errors():
            return self._gh.get_user(username).id

    def check_team_permission(self, org: str, team_slug: str, owner: str, repo: str) -> None:
        with _translate_errors():
            permissions = self._team(org, team_slug).get_repo_permission(self._repo(owner, repo))
        if permissions is None:
            raise NotFoundError(f"team {org}/{team_slug} has no permission on {owner}/{repo}")

    def grant_team_permission(self, org: str, team_slug: str, owner: str, repo: str, permission: str) -> None:
        # Team.update_team_repository() only returns False on an HTTP error, so
        # send the org-scoped PUT through the checked requester instead.
        url = f"/orgs/{org}/teams/{team_slug}/repos/{owner}/{repo}"
        with _translate_errors():
            self._gh.requester.requestJsonAndCheck("PUT", url, input={"permission": permission})

    def check_collaborator(self, owner: str, repo: str, username: str) -> None:
        with _translate_errors():
            is_collaborator = self._repo(owner, repo).has_in_collaborators(username)
        if not is_collaborator:
            raise NotFoundError(f"user {username} is not a collaborator on {owner}/{repo}")

    def add_collaborator(self, owner: str, repo: str, username: str, permission: str) -> None:
        with _translate_errors():
            self._repo(owner, repo).add_to_collaborators(username, permission=permission)

    def upsert_environment(self, owner: str, repo: str, environment_name: str, reviewers: Sequence[EnvReviewer]) -> None:
        # Repository.create_environment() also resets wait_timer and the branch
        # policy, so send a PUT carrying only the reviewers field.
        url = f"/repos/{owner}/{repo}/environments/{quote(environment_name, safe='')}"
        payload = {"reviewers": [r.to_payload() for r in reviewers]}
        logger.debug("PUT %s %s", url, payload)
        with _translate_errors():
            self._gh.requester.requestJsonAndCheck("PUT", url, input=payload)
