"""Tests for result types and path references."""

from __future__ import annotations

import pytest

from file_exercises.types import (
    ClassifyResult,
    CreateFileResult,
    CreateOutcome,
    ErrorKind,
    PathReference,
    ReadResult,
    WriteResult,
)


class TestPathReference:
    """Tests for PathReference."""

    def test_name_and_full_path(self) -> None:
        """Test name is the last component and full_path is the given path."""
        ref = PathReference("dados/meu_arquivo.txt")

        assert ref.name == "meu_arquivo.txt"
        assert ref.full_path == "dados/meu_arquivo.txt"
        assert str(ref) == "dados/meu_arquivo.txt"

    def test_full_path_keeps_leading_dot(self) -> None:
        """Test the path is reported exactly as it was given."""
        ref = PathReference("./novo.txt")

        assert ref.name == "novo.txt"
        assert ref.full_path == "./novo.txt"


class TestResultInvariants:
    """Tests for result validation."""

    def test_failed_creation_requires_error(self) -> None:
        with pytest.raises(ValueError, match="requires an error"):
            CreateFileResult(outcome=CreateOutcome.FAILED, target=PathReference("a"))

    def test_created_rejects_error(self) -> None:
        with pytest.raises(ValueError, match="error is set"):
            CreateFileResult(
                outcome=CreateOutcome.CREATED,
                target=PathReference("a"),
                error=ErrorKind.CREATION,
            )

    def test_write_failure_requires_error(self) -> None:
        with pytest.raises(ValueError):
            WriteResult(success=False, target=PathReference("a"))

    def test_read_success_rejects_error(self) -> None:
        with pytest.raises(ValueError):
            ReadResult(success=True, target=PathReference("a"), error=ErrorKind.READ)

    def test_classify_cannot_be_both(self) -> None:
        """Test a path cannot be both a file and a directory."""
        with pytest.raises(ValueError, match="both"):
            ClassifyResult(target=PathReference("a"), is_file=True, is_directory=True)
