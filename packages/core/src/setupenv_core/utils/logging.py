"""Logging setup for local terminals and GitHub Actions runners.

Inside Actions, log records are rendered as workflow commands
(``::debug::``, ``::warning::``, ``::error::``) so the runner can fold debug
output and annotate errors. Locally, rich's handler is used.
"""

from __future__ import annotations

import logging
import os
import sys

from rich.console import Console
from rich.logging import RichHandler

_WORKFLOW_COMMANDS = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


def running_in_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS") == "true"


def escape_command_data(data: str) -> str:
    """Escape a message so it survives as workflow command data."""
    return data.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class ActionsFormatter(logging.Formatter):
    """Format records as GitHub Actions workflow commands; INFO stays plain text."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = _WORKFLOW_COMMANDS.get(record.levelno)
        if command is None:
            return message
        return f"::{command}::{escape_command_data(message)}"


def configure_logging(verbose: bool = False) -> None:
    if running_in_actions():
        handler: logging.Handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(ActionsFormatter("%(message)s"))
        # The runner hides ::debug:: lines unless step debugging is enabled.
        level = logging.DEBUG
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
        level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(level=level, handlers=[handler], format="%(message)s", force=True)
    # PyGithub and urllib3 are noisy at DEBUG.
    for name in ("github", "urllib3"):
        logging.getLogger(name).setLevel(logging.WARNING)
