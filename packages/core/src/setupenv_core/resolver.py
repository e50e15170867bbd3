"""Resolve reviewer strings into platform reviewer records.

Accepted input forms:
  username, @username   → User
  org/team, @org/team   → Team (split on the first "/")

Exactly one leading "@" is stripped for both users and teams.
"""

from __future__ import annotations

import logging
from typing import Sequence

from setupenv_core.errors import PlatformError, ResolutionError
from setupenv_core.gh.base import BasePlatform
from setupenv_core.models import EnvReviewer, ReviewerSpec, ReviewerType

logger = logging.getLogger(__name__)

# GitHub rejects environments with more than six required reviewers.
MAX_REQUIRED_REVIEWERS = 6


def parse_reviewer_spec(raw: str) -> ReviewerSpec:
    """Classify a reviewer string as a user or team without touching the network."""
    normalized = raw[1:] if raw.startswith("@") else raw

    if "/" in normalized:
        org, team_slug = normalized.split("/", 1)
        if not org or not team_slug:
            raise ResolutionError(f'cannot resolve team "{raw}": expected format org/team', reviewer=raw)
        return ReviewerSpec(raw=raw, type=ReviewerType.TEAM, name=team_slug, org=org)

    if not normalized:
        raise ResolutionError(f'cannot resolve user "{raw}": empty username', reviewer=raw)
    return ReviewerSpec(raw=raw, type=ReviewerType.USER, name=normalized)


def _resolve_one(platform: BasePlatform, spec: ReviewerSpec) -> EnvReviewer:
    if spec.type is ReviewerType.TEAM:
        try:
            team_id = platform.get_team_id(spec.org, spec.name)
        except PlatformError as e:
            raise ResolutionError(f'cannot resolve team "{spec.raw}": {e}', reviewer=spec.raw) from e
        return EnvReviewer(type=ReviewerType.TEAM, id=team_id, name=spec.name, team_org=spec.org)

    try:
        user_id = platform.get_user_id(spec.name)
    except PlatformError as e:
        raise ResolutionError(f'cannot resolve user "{spec.raw}": {e}', reviewer=spec.raw) from e
    return EnvReviewer(type=ReviewerType.USER, id=user_id, name=spec.name)


def resolve_reviewers(platform: BasePlatform, reviewers: Sequence[str]) -> list[EnvReviewer]:
    """Resolve reviewer strings in order.

    Duplicates are kept. The first failure aborts the whole call with a
    ResolutionError; no partial list is returned.
    """
    if len(reviewers) > MAX_REQUIRED_REVIEWERS:
        logger.warning(
            "%d reviewers configured; GitHub accepts at most %d required reviewers per environment.",
            len(reviewers),
            MAX_REQUIRED_REVIEWERS,
        )

    resolved: list[EnvReviewer] = []
    for raw in reviewers:
        spec = parse_reviewer_spec(raw)
        reviewer = _resolve_one(platform, spec)
        logger.debug("resolved %s %s to id %d", reviewer.type.value.lower(), reviewer.spec, reviewer.id)
        resolved.append(reviewer)
    return resolved
