"""Error hierarchy shared by every stage.

Every failure the tool knows how to report derives from
SetupEnvironmentsError, so the CLI only has one thing to catch.
"""

from __future__ import annotations


class SetupEnvironmentsError(Exception):
    """Base class for all fatal errors raised while configuring environments."""


class ConfigurationError(SetupEnvironmentsError):
    """Missing or malformed invocation configuration."""


class ResolutionError(SetupEnvironmentsError):
    """A reviewer string could not be mapped to a user or team."""

    def __init__(self, message: str, reviewer: str):
        super().__init__(message)
        self.reviewer = reviewer


class UpsertError(SetupEnvironmentsError):
    """Creating or updating an environment failed."""

    def __init__(self, message: str, environment: str):
        super().__init__(message)
        self.environment = environment


class PlatformError(SetupEnvironmentsError):
    """A remote API call failed."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class NotFoundError(PlatformError):
    """The remote platform reported that the requested object does not exist."""

    def __init__(self, message: str, status: int | None = 404):
        super().__init__(message, status=status)
