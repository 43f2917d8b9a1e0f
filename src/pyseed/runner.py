"""Execution of the external package-manager and version-control commands."""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from .schema import CommandResult

__all__ = ["CommandRunner", "SubprocessRunner"]


LOGGER = logging.getLogger(__name__)

# Shell convention for "command not found".
COMMAND_NOT_FOUND = 127


class CommandRunner(ABC):
    """Runs one external command and reports its exit status."""

    @abstractmethod
    def run(self, argv: Sequence[str], *, cwd: Path | str) -> CommandResult:
        """Execute ``argv`` inside ``cwd`` and return the outcome."""


class SubprocessRunner(CommandRunner):
    """Run commands as child processes sharing this process's stdout and stderr."""

    def run(self, argv: Sequence[str], *, cwd: Path | str) -> CommandResult:
        command = tuple(argv)
        workdir = Path(cwd)
        if not workdir.is_dir():
            raise NotADirectoryError(f"working directory does not exist: {workdir}")

        LOGGER.debug("running %s in %s", " ".join(command), workdir)
        try:
            completed = subprocess.run(command, cwd=workdir, check=False)
        except FileNotFoundError:
            LOGGER.error("executable not found: %s", command[0])
            return CommandResult(argv=command, returncode=COMMAND_NOT_FOUND, cwd=str(workdir))

        return CommandResult(argv=command, returncode=completed.returncode, cwd=str(workdir))
