from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tests.fixtures.fake_runner import RecordingRunner  # noqa: E402


@pytest.fixture()
def runner() -> RecordingRunner:
    """Runner that succeeds for every command without touching uv or git."""

    return RecordingRunner()
