from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from pyseed.cli import main
from tests.fixtures.fake_runner import RecordingRunner

SRC = Path(__file__).resolve().parents[1] / "src"


@pytest.fixture(autouse=True)
def restore_package_log_level():
    logger = logging.getLogger("pyseed")
    level = logger.level
    yield
    logger.setLevel(level)


def test_cli_without_name_exits_with_usage(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["--directory", str(tmp_path)], runner=RecordingRunner())

    assert exit_code == 1
    assert "usage:" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_cli_accepts_whitespace_only_name(tmp_path: Path):
    runner = RecordingRunner()
    assert main(["   ", "-d", str(tmp_path)], runner=runner) == 0
    assert (tmp_path / "   " / "src" / "   " / "main.py").is_file()
    assert runner.programs() == ["uv", "uv", "git", "git", "git"]


def test_cli_creates_project(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    runner = RecordingRunner()
    exit_code = main(["my-app", "-d", str(tmp_path)], runner=runner)

    assert exit_code == 0
    assert (tmp_path / "my-app" / "src" / "my_app" / "main.py").is_file()
    out = capsys.readouterr().out
    assert "Scaffolding project: my-app (Package: my_app)" in out
    assert "Project my-app created successfully!" in out
    assert "cd my-app" in out
    assert "make run" in out


def test_cli_defaults_to_current_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    assert main(["demo"], runner=RecordingRunner()) == 0
    assert (tmp_path / "demo" / "pyproject.toml").is_file()


def test_cli_propagates_failed_command_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    runner = RecordingRunner(failures={("uv", "sync"): 3})
    exit_code = main(["demo", "-d", str(tmp_path)], runner=runner)

    assert exit_code == 3
    assert "git" not in runner.programs()
    captured = capsys.readouterr()
    assert "uv sync" in captured.err
    assert "created successfully" not in captured.out


def test_cli_reports_filesystem_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    (tmp_path / "demo").write_text("in the way", encoding="utf-8")
    runner = RecordingRunner()

    assert main(["demo", "-d", str(tmp_path)], runner=runner) == 1
    assert runner.calls == []
    assert "error:" in capsys.readouterr().err


def test_cli_empty_name_is_a_usage_error(tmp_path: Path):
    runner = RecordingRunner()
    assert main(["", "-d", str(tmp_path)], runner=runner) == 1
    assert runner.calls == []
    assert list(tmp_path.iterdir()) == []


def test_cli_accepts_dash_prefixed_name_after_separator(tmp_path: Path):
    assert main(["-d", str(tmp_path), "--", "-scratch"], runner=RecordingRunner()) == 0
    assert (tmp_path / "-scratch" / "src" / "_scratch" / "main.py").is_file()


def test_cli_verbose_logs_each_file(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG):
        assert main(["demo", "-d", str(tmp_path), "-v"], runner=RecordingRunner()) == 0

    assert logging.getLogger("pyseed").level == logging.DEBUG
    assert f"writing {tmp_path / 'demo' / 'pyproject.toml'}" in caplog.text


def test_cli_quiet_by_default(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG):
        assert main(["demo", "-d", str(tmp_path)], runner=RecordingRunner()) == 0

    assert logging.getLogger("pyseed").level == logging.WARNING
    assert "writing" not in caplog.text


def test_module_entry_point_reports_usage(tmp_path: Path):
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC), env.get("PYTHONPATH")]))
    completed = subprocess.run(
        [sys.executable, "-m", "pyseed"],
        cwd=tmp_path,
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )

    assert completed.returncode == 1
    assert "usage: pyseed" in completed.stderr
    assert list(tmp_path.iterdir()) == []
