"""CLI entry point for setup-environments.

Commands:
  apply      — create/update environments and their required reviewers
  reviewers  — resolve a reviewer list without changing anything
  init       — write .setupenv.yml and an optional Actions workflow
"""

from __future__ import annotations

import importlib.metadata

import click

from setupenv_cli.commands.apply import apply_cmd
from setupenv_cli.commands.init import init_cmd
from setupenv_cli.commands.reviewers import reviewers_cmd
from setupenv_core.utils.logging import configure_logging


@click.group()
@click.version_option(
    version=importlib.metadata.version("setup-environments"),
    prog_name="setup-environments",
)
@click.option(
    "--config",
    "config_path",
    default=".setupenv.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="SETUPENV_CONFIG",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug output.")
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool):
    """Configure GitHub deployment environments and their required reviewers."""
    from setupenv_core.config import load_config
    from setupenv_cli.auth import resolve_github_token

    configure_logging(verbose=verbose)
    ctx.ensure_object(dict)

    config = load_config(config_path)

    # Resolve token early so all subcommands share the same resolution.
    token = resolve_github_token()
    if token:
        config["github_token"] = token

    ctx.obj["config"] = config


main.add_command(apply_cmd)
main.add_command(reviewers_cmd)
main.add_command(init_cmd)
