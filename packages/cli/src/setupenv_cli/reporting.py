"""Terminal output shared by the commands: failure reporting and result tables."""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.table import Table

from setupenv_core.models import EnvReviewer
from setupenv_core.runner import SetupSummary
from setupenv_core.utils.logging import running_in_actions

console = Console()
logger = logging.getLogger(__name__)


def fail(ctx: click.Context, error: Exception):
    """Report a fatal error and exit with status 1.

    In GitHub Actions the message becomes an ``::error::`` annotation;
    locally it is printed by click as ``Error: <message>``.
    """
    if running_in_actions():
        logger.error(str(error))
        ctx.exit(1)
    raise click.ClickException(str(error))


def reviewers_table(reviewers: list[EnvReviewer], title: str = "Reviewers") -> Table:
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Type", width=6)
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Org")

    for r in reviewers:
        table.add_row(r.type.value, str(r.id), r.name, r.team_org or "")
    return table


def print_summary(summary: SetupSummary) -> None:
    title = f"Environments — {summary.repository}"
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Environment", style="bold")
    table.add_column("Required reviewers")

    reviewer_list = ", ".join(r.spec for r in summary.reviewers) or "[dim]none[/dim]"
    for env in summary.environments:
        table.add_row(env, reviewer_list)

    if summary.dry_run:
        console.print("[yellow]Dry run: no changes were made.[/yellow]")
    console.print(table)

    if summary.granted:
        verb = "Would grant" if summary.dry_run else "Granted"
        names = ", ".join(r.spec for r in summary.granted)
        console.print(f"{verb} read access to: [bold]{names}[/bold]")
