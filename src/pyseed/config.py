"""Configuration shared by the project scaffolder and CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .errors import UsageError
from .naming import derive_package_name

DEFAULT_DESCRIPTION = "Production-ready python service"
DEFAULT_PYTHON_VERSION = "3.14"
DEFAULT_SCRIPT_NAME = "start"
DEFAULT_DEV_DEPENDENCIES = ("ruff", "pytest")
DEFAULT_COMMIT_MESSAGE = "Initial commit"


@dataclass(slots=True)
class ProjectConfig:
    """Identifiers and settings describing a new project.

    Attributes
    ----------
    name:
        The project name provided by the user. It names the project directory
        and is used verbatim wherever a human reads it: the README title and
        the ``name`` field of the build descriptor.
    package:
        The package identifier derived from :attr:`name`. Used for the
        ``src`` directory, import statements, and the script entry point.
    description:
        Summary written to the build descriptor.
    python_version:
        Minimum interpreter version, as ``MAJOR.MINOR``.
    script_name:
        Console script that points at ``<package>.main:main``.
    dev_dependencies:
        Development-only packages handed to the package manager.
    commit_message:
        Message of the single commit recorded after generation.
    """

    name: str
    package: str
    description: str = DEFAULT_DESCRIPTION
    python_version: str = DEFAULT_PYTHON_VERSION
    script_name: str = DEFAULT_SCRIPT_NAME
    dev_dependencies: tuple[str, ...] = DEFAULT_DEV_DEPENDENCIES
    commit_message: str = DEFAULT_COMMIT_MESSAGE

    @classmethod
    def from_name(
        cls,
        name: str | None,
        *,
        description: str = DEFAULT_DESCRIPTION,
        python_version: str = DEFAULT_PYTHON_VERSION,
    ) -> "ProjectConfig":
        """Build a :class:`ProjectConfig` from the project name.

        The name is kept exactly as given, whitespace included; only a missing
        or empty name is rejected.
        """

        if not name:
            raise UsageError("project name must not be empty")

        return cls(
            name=name,
            package=derive_package_name(name),
            description=description,
            python_version=python_version,
        )

    @property
    def python_tag(self) -> str:
        """Interpreter version in ruff's ``target-version`` form, e.g. ``py314``."""

        return "py" + self.python_version.replace(".", "")

    def context(self) -> Mapping[str, str]:
        """Return a dictionary compatible with the templating helpers."""

        return {
            "name": self.name,
            "package_name": self.package,
            "description": self.description,
            "python_version": self.python_version,
            "python_tag": self.python_tag,
            "script_name": self.script_name,
        }
