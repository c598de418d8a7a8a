"""Shared test fixtures."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from file_exercises.context import AppContext
from file_exercises.settings import ExerciseSettings

# Root bypasses permission bits, so chmod-based checks are meaningless there
running_as_root = hasattr(os, "geteuid") and os.geteuid() == 0


class FakeInput:
    """InputSource double that returns a fixed answer and records prompts."""

    def __init__(self, answer: str) -> None:
        self.answer = answer
        self.prompts: list[str] = []

    def read_token(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.answer


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.create_new_file.return_value = True
    fs.exists.return_value = False
    fs.is_file.return_value = False
    fs.is_dir.return_value = False
    fs.can_read.return_value = False
    fs.can_write.return_value = False
    fs.iter_lines.return_value = iter([])
    return fs


@pytest.fixture
def make_context():
    """Build an AppContext on the real filesystem with a fixed answer for prompts."""

    def _make(answer: str = "", **settings: object) -> AppContext:
        return AppContext(
            input_source=FakeInput(answer),
            settings=ExerciseSettings(**settings),
        )

    return _make
