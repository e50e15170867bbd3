"""reviewers command — resolve reviewer strings without changing anything."""

from __future__ import annotations

import click
from rich.console import Console

from setupenv_cli.reporting import fail, reviewers_table
from setupenv_core.config import merge_overrides, parse_list, require_token
from setupenv_core.errors import SetupEnvironmentsError
from setupenv_core.gh.github_platform import GithubPlatform
from setupenv_core.resolver import resolve_reviewers

console = Console()


@click.command("reviewers")
@click.option("--reviewers", default=None, help="Comma-separated list of reviewers to resolve.")
@click.pass_context
def reviewers_cmd(ctx, reviewers: str | None):
    """Show the users and teams a reviewer list resolves to.

    Useful for checking a reviewer list before running `apply`: every
    entry is looked up on GitHub, nothing is granted or modified.
    """
    config = merge_overrides(dict(ctx.obj["config"]), {"reviewers": reviewers})

    specs = parse_list(config.get("reviewers"))
    if not specs:
        console.print("[yellow]No reviewers configured.[/yellow]")
        return

    try:
        token = require_token(config)
        resolved = resolve_reviewers(GithubPlatform(token, base_url=config.get("api_url")), specs)
    except SetupEnvironmentsError as e:
        fail(ctx, e)

    console.print(reviewers_table(resolved, title="Resolved reviewers"))
