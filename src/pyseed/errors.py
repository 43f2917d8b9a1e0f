"""Exception types raised while scaffolding a project."""

from __future__ import annotations

from .schema import CommandResult

__all__ = ["ExternalCommandError", "ScaffoldError", "UsageError"]


class ScaffoldError(RuntimeError):
    """Base class for failures that abort a scaffolding run."""

    exit_code: int = 1


class UsageError(ScaffoldError):
    """Raised when the project name is missing or blank."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ExternalCommandError(ScaffoldError):
    """Raised when an external tool exits with a non-zero status."""

    def __init__(self, result: CommandResult) -> None:
        self.result = result
        # Signals show up as negative return codes; the process still has to fail.
        self.exit_code = result.returncode if result.returncode > 0 else 1
        super().__init__(f"command '{result.command}' failed with exit code {result.returncode}")
