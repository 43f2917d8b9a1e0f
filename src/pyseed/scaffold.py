"""Project scaffolding pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from .config import ProjectConfig
from .errors import ExternalCommandError
from .naming import is_importable
from .runner import CommandRunner, SubprocessRunner
from .schema import CommandResult, TemplateFile
from .template import TemplateRenderer
from .templates import TEMPLATE_FILES

__all__ = ["ProjectScaffolder"]


LOGGER = logging.getLogger(__name__)

PACKAGE_MANAGER = "uv"
VERSION_CONTROL = "git"


@dataclass(slots=True)
class ProjectScaffolder:
    """Create a Python project, install its tooling, and commit it.

    Each step runs only when every earlier step succeeded. A failure raises
    immediately and leaves whatever was already written on disk in place.
    """

    renderer: TemplateRenderer
    runner: CommandRunner
    templates: tuple[TemplateFile, ...]

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        runner: CommandRunner | None = None,
        templates: Iterable[TemplateFile] | None = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.runner = runner or SubprocessRunner()
        self.templates = tuple(templates) if templates is not None else TEMPLATE_FILES

    def create(self, config: ProjectConfig, parent_dir: str | Path = ".") -> Path:
        """Scaffold the project described by ``config`` under ``parent_dir``."""

        project_root = Path(parent_dir).expanduser() / config.name
        if not is_importable(config.package):
            LOGGER.warning(
                "package name %r is not a valid Python identifier; imports will fail",
                config.package,
            )

        LOGGER.info("scaffolding %s (package %s) in %s", config.name, config.package, project_root)
        self.create_tree(config, project_root)
        self.write_files(config, project_root)
        self.install_dependencies(config, project_root)
        self.initialize_repository(config, project_root)
        LOGGER.info("project %s created at %s", config.name, project_root)
        return project_root

    def create_tree(self, config: ProjectConfig, project_root: Path) -> list[Path]:
        """Create the directories every template file is written into."""

        directories = [
            project_root / "src" / config.package,
            project_root / "tests",
            project_root / ".vscode",
        ]
        for directory in directories:
            LOGGER.debug("creating directory %s", directory)
            directory.mkdir(parents=True, exist_ok=True)
        return directories

    def write_files(self, config: ProjectConfig, project_root: Path) -> list[Path]:
        """Render each template and write it, replacing any existing file."""

        context = config.context()
        written: list[Path] = []
        for template in self.templates:
            relative_path = self.renderer.render(template.path, context)
            destination = project_root / relative_path
            destination.parent.mkdir(parents=True, exist_ok=True)
            rendered = self.renderer.render(template.content, context)
            LOGGER.debug("writing %s", destination)
            destination.write_text(rendered, encoding="utf-8")
            written.append(destination)
        return written

    def install_dependencies(self, config: ProjectConfig, project_root: Path) -> None:
        """Declare the development dependencies and sync the environment."""

        print(f"Installing dependencies with {PACKAGE_MANAGER}...")
        self._run([PACKAGE_MANAGER, "add", "--dev", *config.dev_dependencies], project_root)
        self._run([PACKAGE_MANAGER, "sync"], project_root)

    def initialize_repository(self, config: ProjectConfig, project_root: Path) -> None:
        """Initialise a repository, stage everything, and record one commit."""

        print(f"{VERSION_CONTROL} init...")
        self._run([VERSION_CONTROL, "init", "-q"], project_root)
        self._run([VERSION_CONTROL, "add", "."], project_root)
        self._run([VERSION_CONTROL, "commit", "-m", config.commit_message, "-q"], project_root)

    def _run(self, argv: Sequence[str], cwd: Path) -> CommandResult:
        result = self.runner.run(argv, cwd=cwd)
        if not result.ok:
            raise ExternalCommandError(result)
        return result
