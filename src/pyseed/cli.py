"""Command line interface for the project scaffolder."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import ProjectConfig
from .errors import ScaffoldError, UsageError
from .runner import CommandRunner
from .scaffold import ProjectScaffolder
from .template import TemplateRenderer

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyseed",
        description="Scaffold a new Python project managed with uv and git",
    )
    # Optional at the argparse level so a missing name exits with 1, not argparse's 2.
    parser.add_argument("name", nargs="?", help="Name of the project directory to create")
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Parent directory for the new project (defaults to the current directory)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every directory, file, and command",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger("pyseed").setLevel(level)


def main(argv: Sequence[str] | None = None, runner: CommandRunner | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = ProjectConfig.from_name(args.name)
    except UsageError as exc:
        print(parser.format_usage().rstrip(), file=sys.stderr)
        print(f"error: {exc}", file=sys.stderr)
        return exc.exit_code

    parent_dir = args.directory if args.directory is not None else Path.cwd()
    scaffolder = ProjectScaffolder(TemplateRenderer(), runner)

    print(f"Scaffolding project: {config.name} (Package: {config.package})...")
    try:
        scaffolder.create(config, parent_dir)
    except ScaffoldError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return exc.exit_code
    except OSError as exc:
        LOGGER.debug("filesystem step failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print()
    print(f"Project {config.name} created successfully!")
    print(f"  cd {config.name}")
    print("  make run")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
