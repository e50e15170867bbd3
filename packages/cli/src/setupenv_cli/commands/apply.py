"""apply command — configure environments and their required reviewers."""

from __future__ import annotations

import click

from setupenv_cli.reporting import fail, print_summary
from setupenv_cli.repo import detect_repo_from_git
from setupenv_core.config import build_run_config, merge_overrides
from setupenv_core.errors import SetupEnvironmentsError
from setupenv_core.gh.github_platform import GithubPlatform
from setupenv_core.runner import run_setup


@click.command("apply")
@click.option(
    "--repo",
    "repository",
    default=None,
    help="Repository in owner/name format. Defaults to GITHUB_REPOSITORY, then the git remote.",
)
@click.option("--environments", default=None, help="Comma-separated list of environments to configure.")
@click.option(
    "--reviewers",
    default=None,
    help='Comma-separated list of required reviewers, e.g. "org/team,user" (max 6).',
)
@click.option(
    "--dry-run",
    "dry_run",
    is_flag=True,
    help="Resolve reviewers and check access, but do not grant access or change environments.",
)
@click.pass_context
def apply_cmd(
    ctx,
    repository: str | None,
    environments: str | None,
    reviewers: str | None,
    dry_run: bool,
):
    """Create or update environments with the given required reviewers.

    Reviewers that cannot read the repository yet are granted read ("pull")
    access first, since GitHub only accepts eligible reviewers.

    \b
    Reviewer formats:
      user, @user          a GitHub user
      org/team, @org/team  a team of an organization
    """
    config = merge_overrides(
        dict(ctx.obj["config"]),
        {"repository": repository, "environments": environments, "reviewers": reviewers},
    )
    if not config.get("repository") and not config.get("context_repository"):
        config["context_repository"] = detect_repo_from_git()

    try:
        run_config = build_run_config(config, dry_run=dry_run)
    except SetupEnvironmentsError as e:
        fail(ctx, e)

    platform = GithubPlatform(run_config.token, base_url=run_config.api_url)
    try:
        summary = run_setup(run_config, platform)
    except SetupEnvironmentsError as e:
        fail(ctx, e)

    print_summary(summary)
