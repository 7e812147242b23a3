from __future__ import annotations

from typing import Sequence


class BuildError(RuntimeError):
    """Base class for failures that halt the build pipeline."""


class ToolMissingError(BuildError):
    """A required external tool is not on PATH."""

    def __init__(self, tool: str, hint: str | None = None) -> None:
        self.tool = tool
        self.hint = hint
        message = f"{tool} is not installed"
        if hint:
            message = f"{message}; install it with: {hint}"
        super().__init__(message)


class CommandError(BuildError):
    """An external command could not be spawned or exited non-zero."""

    def __init__(self, argv: Sequence[str], returncode: int, rendered: str) -> None:
        self.argv = list(argv)
        self.returncode = returncode
        super().__init__(f"Command failed ({returncode}): {rendered}")


class StagingError(BuildError):
    """Filesystem operation on the build tree failed."""


class DiscoveryError(BuildError):
    """An expected boot artifact was not found."""


class ConfigError(BuildError):
    """Configuration file or package manifest is malformed."""
