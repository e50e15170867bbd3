import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from setupenv_core.errors import ConfigurationError

DEFAULT_CONFIG: dict = {
    "repository": None,  # None = use the current repository context
    "environments": [],
    "reviewers": [],
    "api_url": None,  # None = https://api.github.com
}

# GitHub Actions exposes action inputs as INPUT_<NAME> environment variables.
_ACTION_INPUTS = {
    "repository": "INPUT_REPOSITORY",
    "environments": "INPUT_ENVIRONMENTS",
    "reviewers": "INPUT_REVIEWERS",
}


@dataclass(frozen=True)
class RunConfig:
    """Validated, immutable settings for one invocation."""

    token: str
    owner: str
    repo: str
    environments: tuple
    reviewers: tuple = ()
    api_url: Optional[str] = None
    dry_run: bool = False

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"


def merge_overrides(config: dict, overrides: Optional[dict]) -> dict:
    """Apply overrides onto config in place, skipping None values."""
    if overrides:
        for key, value in overrides.items():
            if value is not None:
                config[key] = value
    return config


def load_config(config_path: str = ".setupenv.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .setupenv.yml in the current directory
      3. GitHub Actions inputs (INPUT_* environment variables)
      4. CLI argument overrides
    """
    config = {**DEFAULT_CONFIG, "environments": [], "reviewers": []}

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            file_config = yaml.safe_load(f) or {}
        config.update(file_config)

    # Empty action inputs mean "not provided".
    merge_overrides(config, {key: os.environ.get(var) or None for key, var in _ACTION_INPUTS.items()})
    merge_overrides(config, cli_overrides)

    # Resolve credentials and context from environment variables
    config["github_token"] = os.environ.get("INPUT_TOKEN") or os.environ.get("GITHUB_TOKEN")
    config["context_repository"] = os.environ.get("GITHUB_REPOSITORY")
    if not config.get("api_url"):
        config["api_url"] = os.environ.get("GITHUB_API_URL")

    return config


def parse_list(value) -> list[str]:
    """Split a comma-separated string (or YAML list) into trimmed, non-empty entries."""
    if value is None:
        return []
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = [str(v) for v in value]
    else:
        # Scalars such as `environments: 2024` in YAML.
        items = [str(value)]
    return [item.strip() for item in items if item.strip()]


def parse_repository(qualified: str) -> tuple[str, str]:
    """Split ``owner/repo``; anything other than two non-empty segments is rejected."""
    parts = qualified.split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ConfigurationError(f"Invalid repository '{qualified}'. Expected format {{owner}}/{{repo}}.")
    return parts[0], parts[1]


def require_token(config: dict) -> str:
    token = config.get("github_token")
    if not token:
        raise ConfigurationError(
            "No GitHub token found. Set the token input, GITHUB_TOKEN, or run `gh auth login` first."
        )
    return token


def build_run_config(config: dict, dry_run: bool = False) -> RunConfig:
    """Validate a loaded config dict and freeze it into a RunConfig.

    Runs before any client is built, so a ConfigurationError here means no
    remote call was made.
    """
    token = require_token(config)

    qualified = config.get("repository") or config.get("context_repository")
    if not qualified:
        raise ConfigurationError("No repository given and no current repository context. Use --repo owner/name.")
    owner, repo = parse_repository(qualified)

    environments = parse_list(config.get("environments"))
    if not environments:
        raise ConfigurationError("At least one environment is required.")

    return RunConfig(
        token=token,
        owner=owner,
        repo=repo,
        environments=tuple(environments),
        reviewers=tuple(parse_list(config.get("reviewers"))),
        api_url=config.get("api_url"),
        dry_run=dry_run,
    )
