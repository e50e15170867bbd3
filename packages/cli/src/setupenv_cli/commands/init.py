"""init command — interactive setup wizard.

Writes .setupenv.yml so later runs only need `setup-environments apply`,
and can generate a GitHub Actions workflow that applies the same settings
on demand.
"""

from __future__ import annotations

from pathlib import Path

import click
import yaml
from rich.console import Console

from setupenv_cli.repo import detect_repo_from_git
from setupenv_core.config import parse_list

console = Console()

_WORKFLOW_TEMPLATE = """\
name: Setup Environments

on:
  workflow_dispatch:

jobs:
  setup-environments:
    runs-on: ubuntu-latest

    steps:
      - name: Set up Python
        uses: actions/setup-python@v5
        with:
          python-version: "3.12"

      - name: Install setup-environments
        run: pip install "setup-environments=={version}"

      - name: Configure environments
        env:
          GITHUB_TOKEN: ${{{{ secrets.{token_secret} }}}}
        run: |
          setup-environments apply \\
            --repo ${{{{ github.repository }}}} \\
            --environments "{environments}" \\
            --reviewers "{reviewers}"
"""

_TOKEN_SECRET = "SETUP_ENVIRONMENTS_TOKEN"


@click.command("init")
@click.option("--repo", default=None, help="GitHub repository (owner/name). Auto-detected from git remote.")
def init_cmd(repo: str | None):
    """Set up setup-environments for a repository.

    Creates .setupenv.yml and optionally generates a GitHub Actions workflow.
    """
    console.print("\n[bold cyan]setup-environments init[/bold cyan]\n")

    if repo is None:
        repo = detect_repo_from_git()
        if repo:
            console.print(f"[dim]Detected repository: {repo}[/dim]")
        else:
            repo = click.prompt("GitHub repository (owner/name)")

    environments = parse_list(click.prompt("Environments (comma-separated)", default="staging,production"))
    reviewers = parse_list(click.prompt("Required reviewers, e.g. org/team,user (max 6)", default="", show_default=False))

    if len(reviewers) > 6:
        console.print("[yellow]GitHub accepts at most 6 required reviewers per environment.[/yellow]")

    _write_config({"repository": repo, "environments": environments, "reviewers": reviewers})
    console.print("[green]Created .setupenv.yml[/green]")

    setup_ci = click.confirm("\nGenerate .github/workflows/setup-environments.yml for GitHub Actions?", default=True)
    if setup_ci:
        _write_workflow(environments, reviewers)
        console.print("[green]Created .github/workflows/setup-environments.yml[/green]")
        console.print(
            f"\n[yellow]The built-in GITHUB_TOKEN cannot administer repositories. Add a token with "
            f"admin rights as the [bold]{_TOKEN_SECRET}[/bold] repository secret.[/yellow]"
        )

    console.print("\n[bold green]Setup complete![/bold green]")
    console.print("Apply the configuration with: [bold]setup-environments apply[/bold]")


def _write_config(config: dict) -> None:
    """Write or update .setupenv.yml, preserving any existing keys."""
    path = Path(".setupenv.yml")
    existing: dict = {}
    if path.exists():
        existing = yaml.safe_load(path.read_text()) or {}
    existing.update(config)
    path.write_text(yaml.dump(existing, default_flow_style=False, sort_keys=False))


def _get_version() -> str:
    """Read the current version from the installed package metadata."""
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("setup-environments")
    except PackageNotFoundError:
        return "1.0.0"


def _write_workflow(environments: list[str], reviewers: list[str]) -> None:
    workflow_dir = Path(".github/workflows")
    workflow_dir.mkdir(parents=True, exist_ok=True)
    workflow_path = workflow_dir / "setup-environments.yml"
    workflow_path.write_text(
        _WORKFLOW_TEMPLATE.format(
            version=_get_version(),
            token_secret=_TOKEN_SECRET,
            environments=",".join(environments),
            reviewers=",".join(reviewers),
        )
    )
