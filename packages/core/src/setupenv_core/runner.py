"""Top-level orchestration: resolve → adjust access → upsert environments."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from setupenv_core.access import adjust_repo_access
from setupenv_core.config import RunConfig
from setupenv_core.environments import upsert_environments
from setupenv_core.gh.base import BasePlatform
from setupenv_core.models import EnvReviewer
from setupenv_core.resolver import resolve_reviewers

logger = logging.getLogger(__name__)


@dataclass
class SetupSummary:
    """Result returned by run_setup, enough for the CLI to report what happened."""

    repository: str
    reviewers: list[EnvReviewer] = field(default_factory=list)
    granted: list[EnvReviewer] = field(default_factory=list)
    environments: list[str] = field(default_factory=list)
    dry_run: bool = False


def run_setup(config: RunConfig, platform: BasePlatform) -> SetupSummary:
    """Configure every environment in ``config`` on the target repository.

    Stages run strictly in order and any SetupEnvironmentsError aborts the
    rest of the run. Changes already applied are not rolled back.
    """
    logger.debug("repository = '%s'", config.repository)
    logger.debug("environments = '%s'", ",".join(config.environments))
    logger.debug("reviewers = '%s'", ",".join(config.reviewers))

    reviewers = resolve_reviewers(platform, config.reviewers)
    granted = adjust_repo_access(platform, config.owner, config.repo, reviewers, dry_run=config.dry_run)
    environments = upsert_environments(
        platform,
        config.owner,
        config.repo,
        config.environments,
        reviewers,
        dry_run=config.dry_run,
    )

    return SetupSummary(
        repository=config.repository,
        reviewers=reviewers,
        granted=granted,
        environments=environments,
        dry_run=config.dry_run,
    )
