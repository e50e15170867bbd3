"""Create or update deployment environments with their required reviewers."""

from __future__ import annotations

import logging
from typing import Sequence

from setupenv_core.errors import PlatformError, UpsertError
from setupenv_core.gh.base import BasePlatform
from setupenv_core.models import EnvReviewer

logger = logging.getLogger(__name__)


def upsert_environments(
    platform: BasePlatform,
    owner: str,
    repo: str,
    environments: Sequence[str],
    reviewers: Sequence[EnvReviewer],
    dry_run: bool = False,
) -> list[str]:
    """Upsert each environment in order and return the names processed.

    There is no rollback: when environment N fails, environments 1..N-1 keep
    their new configuration and an UpsertError naming environment N is raised.
    """
    reviewer_list = ", ".join(r.spec for r in reviewers) or "no reviewers"
    processed: list[str] = []
    for env in environments:
        if dry_run:
            logger.info("would configure environment %s with %s", env, reviewer_list)
        else:
            try:
                platform.upsert_environment(owner, repo, env, reviewers)
            except PlatformError as e:
                raise UpsertError(f'cannot setup environment "{env}": {e}', environment=env) from e
            logger.info("configured environment %s with %s", env, reviewer_list)
        processed.append(env)
    return processed
