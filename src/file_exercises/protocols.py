"""Protocol definitions for the filesystem and interactive input.

Operations depend on these interfaces rather than on concrete classes, so
tests can substitute doubles without touching real files or stdin.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for the filesystem calls the exercises make.

    Every method consults the filesystem again; nothing is cached.
    """

    def create_new_file(self, path: Path) -> bool:
        """Atomically create an empty file if no entry exists at path.

        Args:
            path: Path of the file to create.

        Returns:
            True if the file was created, False if an entry already existed.

        Raises:
            OSError: If creation fails for any other reason.
        """
        ...

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        ...

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        ...

    def can_read(self, path: Path) -> bool:
        """Check if the current process may read the path."""
        ...

    def can_write(self, path: Path) -> bool:
        """Check if the current process may write the path."""
        ...

    def write_text(self, path: Path, content: str, encoding: str = "utf-8") -> None:
        """Write text to a file, truncating any previous content.

        Raises:
            OSError: If the file cannot be opened or written.
        """
        ...

    def iter_lines(self, path: Path, encoding: str = "utf-8") -> Iterator[str]:
        """Lazily yield the lines of a file without their terminators.

        The file is closed once the iterator is exhausted or fails.

        Raises:
            OSError: If the file cannot be opened or read.
        """
        ...


@runtime_checkable
class InputSource(Protocol):
    """Protocol for reading interactive input."""

    def read_token(self, prompt: str) -> str:
        """Show a prompt and return the first whitespace-delimited token.

        Returns:
            The token, or an empty string if nothing was entered.
        """
        ...
