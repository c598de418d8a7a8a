"""Shared data types for the file exercises."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

__all__ = [
    "ClassifyResult",
    "CreateFileResult",
    "CreateOutcome",
    "ErrorKind",
    "ExistenceResult",
    "PathReference",
    "PermissionsResult",
    "ReadResult",
    "WriteResult",
]


class ErrorKind(str, Enum):
    """Kind of failure an operation can report."""

    CREATION = "creation"
    WRITE = "write"
    READ = "read"


class CreateOutcome(str, Enum):
    """Outcome of an exclusive file creation."""

    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    FAILED = "failed"


@dataclass(frozen=True)
class PathReference:
    """A location on disk, not yet checked against the filesystem.

    Only the string is stored. Anything else about the path is asked of
    the filesystem when an operation needs it.
    """

    raw: str

    @property
    def path(self) -> Path:
        return Path(self.raw)

    @property
    def name(self) -> str:
        """Final path component."""
        return self.path.name

    @property
    def full_path(self) -> str:
        """The path as given, relative or absolute."""
        return self.raw

    def __str__(self) -> str:
        return self.full_path


def _check_error(success: bool, error: ErrorKind | None) -> None:
    if success and error is not None:
        raise ValueError("success=True but error is set")
    if not success and error is None:
        raise ValueError("success=False requires an error kind")


@dataclass
class CreateFileResult:
    """Result of an exclusive file creation.

    Attributes:
        outcome: Whether the file was created, already existed, or failed.
        target: Path the creation was attempted on.
        error: Error kind (None unless outcome is FAILED).
        detail: Underlying error text (None unless outcome is FAILED).
    """

    outcome: CreateOutcome
    target: PathReference
    error: ErrorKind | None = None
    detail: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        _check_error(self.success, self.error)

    @property
    def success(self) -> bool:
        return self.outcome is not CreateOutcome.FAILED

    @property
    def created(self) -> bool:
        return self.outcome is CreateOutcome.CREATED


@dataclass
class ExistenceResult:
    """Creation attempt followed by an independent existence query."""

    creation: CreateFileResult
    exists: bool

    @property
    def success(self) -> bool:
        return self.creation.success


@dataclass
class PermissionsResult:
    target: PathReference
    readable: bool
    writable: bool

    @property
    def success(self) -> bool:
        return True


@dataclass
class ClassifyResult:
    """Classification of a user-supplied path.

    Both flags are False when the path does not exist.
    """

    target: PathReference
    is_file: bool
    is_directory: bool

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.is_file and self.is_directory:
            raise ValueError("a path cannot be both a file and a directory")

    @property
    def success(self) -> bool:
        return True


@dataclass
class WriteResult:
    """Result of writing a line to a file."""

    success: bool
    target: PathReference
    error: ErrorKind | None = None
    detail: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        _check_error(self.success, self.error)


@dataclass
class ReadResult:
    """Result of reading a file line by line.

    Attributes:
        success: True if the whole file was read.
        target: Path that was read.
        line_count: Lines emitted before the read finished or failed.
        error: Error kind (None on success).
        detail: Underlying error text (None on success).
    """

    success: bool
    target: PathReference
    line_count: int = 0
    error: ErrorKind | None = None
    detail: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        _check_error(self.success, self.error)
