"""The fixed set of files written into every new project."""

from __future__ import annotations

from .schema import TemplateFile

__all__ = ["DOCKERFILE_TEMPLATE", "TEMPLATE_FILES"]


PYPROJECT_TEMPLATE = """[project]
name = "{{ name }}"
version = "0.1.0"
description = "{{ description|strip }}"
readme = "README.md"
requires-python = ">={{ python_version }}"
dependencies = []

[project.scripts]
{{ script_name }} = "{{ package_name }}.main:main"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

# --- Tool Configuration ---

[tool.ruff]
line-length = 88
target-version = "{{ python_tag }}"

[tool.ruff.lint]
select = ["E", "F", "I", "UP"]
ignore = []

[tool.pytest.ini_options]
addopts = "-ra -q"
testpaths = ["tests"]
pythonpath = ["src"]
"""

GITIGNORE_TEMPLATE = """__pycache__/
*.py[cod]
.venv/
.pytest_cache/
.ruff_cache/
.coverage
dist/
.env
"""

# Make requires tab-indented recipe lines.
MAKEFILE_TEMPLATE = """.PHONY: install format lint test run clean

install:
\tuv sync

format:
\tuv run ruff format .

lint:
\tuv run ruff check . --fix

test:
\tuv run pytest tests/

run:
\tuv run python src/{{ package_name }}/main.py

clean:
\trm -rf .venv .pytest_cache .ruff_cache __pycache__ dist
"""

INIT_TEMPLATE = "# Expose key components here\n"

MAIN_TEMPLATE = """import sys

def main():
    print("Hello from {{ name }}!")
    print(f"Python version: {sys.version}")

if __name__ == "__main__":
    main()
"""

TEST_TEMPLATE = """from {{ package_name }}.main import main


def test_imports():
    assert main is not None
"""

README_TEMPLATE = """# {{ name }}

## Setup

1. Install [uv](https://github.com/astral-sh/uv).
2. Run `make install`.

## Commands

- `make run`: Run the application.
- `make test`: Run tests.
- `make lint`: Lint and fix code style.
"""

VSCODE_SETTINGS_TEMPLATE = """{
  "python.defaultInterpreterPath": "${workspaceFolder}/.venv/bin/python",
  "python.analysis.typeCheckingMode": "basic",
  "python.analysis.autoImportCompletions": true,
  "python.analysis.extraPaths": ["${workspaceFolder}/src"],
  "[python]": {
    "editor.defaultFormatter": "charliermarsh.ruff",
    "editor.formatOnSave": true,
    "editor.codeActionsOnSave": {
      "source.fixAll": "explicit",
      "source.organizeImports": "explicit"
    }
  }
}
"""

VSCODE_EXTENSIONS_TEMPLATE = """{
  "recommendations": [
    "charliermarsh.ruff",
    "ms-python.python"
  ]
}
"""

# Disabled: kept for reference and never written by the scaffolder.
DOCKERFILE_TEMPLATE = """# Stage 1: Builder
FROM python:{{ python_version }}-slim AS builder
WORKDIR /app
COPY --from=ghcr.io/astral-sh/uv:latest /uv /bin/uv
COPY pyproject.toml uv.lock ./
RUN uv sync --frozen --no-dev --compile-bytecode
COPY src/ src/

# Stage 2: Runner
FROM python:{{ python_version }}-slim
WORKDIR /app
COPY --from=builder /app/.venv /app/.venv
COPY --from=builder /app/src /app/src
ENV PATH="/app/.venv/bin:$PATH"
RUN useradd -m appuser
USER appuser
CMD ["python", "-m", "{{ package_name }}.main"]
"""

TEMPLATE_FILES: tuple[TemplateFile, ...] = (
    TemplateFile(path="pyproject.toml", content=PYPROJECT_TEMPLATE),
    TemplateFile(path=".gitignore", content=GITIGNORE_TEMPLATE),
    TemplateFile(path="Makefile", content=MAKEFILE_TEMPLATE),
    TemplateFile(path="src/{{ package_name }}/__init__.py", content=INIT_TEMPLATE),
    TemplateFile(path="src/{{ package_name }}/main.py", content=MAIN_TEMPLATE),
    TemplateFile(path="tests/test_main.py", content=TEST_TEMPLATE),
    TemplateFile(path="README.md", content=README_TEMPLATE),
    TemplateFile(path=".vscode/settings.json", content=VSCODE_SETTINGS_TEMPLATE),
    TemplateFile(path=".vscode/extensions.json", content=VSCODE_EXTENSIONS_TEMPLATE),
)
