"""Placeholder substitution for the built-in project templates."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
]


# Doubled braces only: single braces belong to f-strings, JSON, and ${workspaceFolder}.
_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<key>\w+)\s*(?:\|\s*(?P<filter>\w+)\s*)?}}")


class TemplateRenderingError(RuntimeError):
    """Raised when a template references an unknown value or filter."""


@dataclass(slots=True, frozen=True)
class TemplateRenderer:
    """Fill ``{{ key }}`` and ``{{ key|strip }}`` placeholders from a project context.

    Rendering is strict: a template that names a value missing from the
    context cannot produce a file.
    """

    def render(self, template: str, context: Mapping[str, str]) -> str:
        def substitute(match: re.Match[str]) -> str:
            key = match.group("key")
            if key not in context:
                raise TemplateRenderingError(f"missing value for '{key}'")

            value = str(context[key])
            filter_name = match.group("filter")
            if filter_name is None:
                return value
            if filter_name != "strip":
                raise TemplateRenderingError(f"unknown filter '{filter_name}'")
            return value.strip()

        return _PLACEHOLDER_PATTERN.sub(substitute, template)
