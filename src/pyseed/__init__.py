"""Scaffold new Python projects.

The package derives an import-safe package name from a project name, renders
a fixed set of template files into a fresh ``src`` layout, and hands the
result to ``uv`` and ``git`` so the new project starts with a synced
environment and a first commit.
"""

from __future__ import annotations

from .config import ProjectConfig
from .errors import ExternalCommandError, ScaffoldError, UsageError
from .naming import derive_package_name, is_importable
from .runner import CommandRunner, SubprocessRunner
from .scaffold import ProjectScaffolder
from .schema import CommandResult, TemplateFile
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "CommandResult",
    "CommandRunner",
    "ExternalCommandError",
    "ProjectConfig",
    "ProjectScaffolder",
    "ScaffoldError",
    "SubprocessRunner",
    "TemplateFile",
    "TemplateRenderer",
    "TemplateRenderingError",
    "UsageError",
    "derive_package_name",
    "is_importable",
]

__version__ = "0.1.0"
