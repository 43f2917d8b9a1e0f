"""Pydantic models shared by the scaffolder, templates, and command runner."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TemplateFile(BaseModel):
    """A file emitted into the new project, before placeholder substitution."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str = Field(..., description="POSIX path relative to the project root; may contain placeholders.")
    content: str = Field(..., description="Template text rendered with the project context.")

    @field_validator("path")
    @classmethod
    def _path_stays_inside_project(cls, value: str) -> str:
        candidate = PurePosixPath(value)
        if not value or candidate.is_absolute() or ".." in candidate.parts:
            raise ValueError(f"template path must be relative to the project root: {value!r}")
        return value


class CommandResult(BaseModel):
    """Outcome of a single external command."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    argv: Tuple[str, ...] = Field(..., min_length=1, description="Program and arguments that were executed.")
    returncode: int = Field(..., description="Exit status reported by the process.")
    cwd: str | None = Field(None, description="Working directory the command ran in.")

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def command(self) -> str:
        return " ".join(self.argv)


__all__ = ["CommandResult", "TemplateFile"]
