"""Ensure every required reviewer can read the target repository.

GitHub only accepts a user or team as a required reviewer once it has at
least read access to the repository, so this runs before any environment
is touched. Existing permissions are never changed, only missing ones are
created.
"""

from __future__ import annotations

import logging
from typing import Sequence

from setupenv_core.errors import NotFoundError, PlatformError
from setupenv_core.gh.base import BasePlatform
from setupenv_core.models import EnvReviewer

logger = logging.getLogger(__name__)

READ_PERMISSION = "pull"


def _ensure_team_access(platform: BasePlatform, owner: str, repo: str, reviewer: EnvReviewer, dry_run: bool) -> bool:
    logger.debug("checking if team %s has permissions over the repository", reviewer.name)
    try:
        platform.check_team_permission(reviewer.team_org, reviewer.name, owner, repo)
    except NotFoundError:
        # Only an explicit "no permission record" means a grant is needed;
        # every other failure propagates.
        if dry_run:
            logger.info("would grant team %s read permissions over the repository", reviewer.name)
        else:
            logger.info("granting team %s read permissions over the repository", reviewer.name)
            platform.grant_team_permission(reviewer.team_org, reviewer.name, owner, repo, READ_PERMISSION)
        return True
    return False


def _ensure_user_access(platform: BasePlatform, owner: str, repo: str, reviewer: EnvReviewer, dry_run: bool) -> bool:
    logger.debug("checking if user %s has permissions over the repository", reviewer.name)
    try:
        platform.check_collaborator(owner, repo, reviewer.name)
    except PlatformError as e:
        # Any failed check counts as "not a collaborator", unlike the team path.
        logger.debug("collaborator check for %s failed: %s", reviewer.name, e)
        if dry_run:
            logger.info("would grant user %s read permissions over the repository", reviewer.name)
        else:
            logger.info("granting user %s read permissions over the repository", reviewer.name)
            platform.add_collaborator(owner, repo, reviewer.name, READ_PERMISSION)
        return True
    return False


def adjust_repo_access(
    platform: BasePlatform,
    owner: str,
    repo: str,
    reviewers: Sequence[EnvReviewer],
    dry_run: bool = False,
) -> list[EnvReviewer]:
    """Grant read access to reviewers that lack it, one reviewer at a time.

    Returns the reviewers that were (or, with ``dry_run``, would have been)
    granted access. Failures abort the run; grants already made stay in place.
    """
    granted: list[EnvReviewer] = []
    for reviewer in reviewers:
        if reviewer.is_team:
            needed = _ensure_team_access(platform, owner, repo, reviewer, dry_run)
        else:
            needed = _ensure_user_access(platform, owner, repo, reviewer, dry_run)
        if needed:
            granted.append(reviewer)
    return granted
