"""Identifier helpers for turning project names into package names."""

from __future__ import annotations

import keyword

__all__ = ["derive_package_name", "is_importable"]


def derive_package_name(project_name: str) -> str:
    """Return the package identifier for ``project_name``.

    Every hyphen becomes an underscore. No other character is altered, so a
    name that is already hyphen free is returned unchanged.
    """

    return project_name.replace("-", "_")


def is_importable(package_name: str) -> bool:
    """Return ``True`` when ``package_name`` can be used in an import statement."""

    return package_name.isidentifier() and not keyword.iskeyword(package_name)
