"""Shared fixtures: a BasePlatform substitute that records calls."""

from __future__ import annotations

import pytest

from setupenv_core.errors import NotFoundError, PlatformError
from setupenv_core.gh.base import BasePlatform


class RecordingPlatform(BasePlatform):
    """Records every call and answers from scripted dictionaries.

    - users / teams: name → id; a missing key raises NotFoundError
    - team_permissions / collaborators: sets of existing access records
    - failures: method name → exception raised by every matching call
      (or keyed by name via ``(method, name)``)
    """

    def __init__(self, users=None, teams=None, team_permissions=None, collaborators=None):
        self.users = dict(users or {})
        self.teams = dict(teams or {})
        self.team_permissions = set(team_permissions or ())
        self.collaborators = set(collaborators or ())
        self.failures: dict = {}
        self.calls: list[tuple] = []

    def _record(self, method, *args, key=None):
        self.calls.append((method, *args))
        for failure_key in ((method, key), method):
            if failure_key in self.failures:
                raise self.failures[failure_key]

    def calls_to(self, method):
        return [c[1:] for c in self.calls if c[0] == method]

    def get_team_id(self, org, team_slug):
        self._record("get_team_id", org, team_slug, key=team_slug)
        try:
            return self.teams[(org, team_slug)]
        except KeyError:
            raise NotFoundError("404 Not Found")

    def get_user_id(self, username):
        self._record("get_user_id", username, key=username)
        try:
            return self.users[username]
        except KeyError:
            raise NotFoundError("404 Not Found")

    def check_team_permission(self, org, team_slug, owner, repo):
        self._record("check_team_permission", org, team_slug, owner, repo, key=team_slug)
        if (org, team_slug) not in self.team_permissions:
            raise NotFoundError("404 Not Found")

    def grant_team_permission(self, org, team_slug, owner, repo, permission):
        self._record("grant_team_permission", org, team_slug, owner, repo, permission, key=team_slug)
        self.team_permissions.add((org, team_slug))

    def check_collaborator(self, owner, repo, username):
        self._record("check_collaborator", owner, repo, username, key=username)
        if username not in self.collaborators:
            raise NotFoundError("404 Not Found")

    def add_collaborator(self, owner, repo, username, permission):
        self._record("add_collaborator", owner, repo, username, permission, key=username)
        self.collaborators.add(username)

    def upsert_environment(self, owner, repo, environment_name, reviewers):
        self._record("upsert_environment", owner, repo, environment_name, list(reviewers), key=environment_name)


@pytest.fixture
def platform():
    return RecordingPlatform(
        users={"alice": 1, "bob": 2},
        teams={("org", "infra"): 100, ("org", "sre"): 101},
    )


@pytest.fixture
def server_error():
    return PlatformError("500 Internal Server Error", status=500)


@pytest.fixture
def make_platform():
    return RecordingPlatform
