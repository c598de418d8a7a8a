"""Filesystem abstraction for testability.

RealFileSystem wraps the standard library calls the exercises rely on and
satisfies the FileSystem protocol structurally.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path


class RealFileSystem:
    """Production filesystem implementation."""

    def create_new_file(self, path: Path) -> bool:
        """Create an empty file, or return False if the path is taken."""
        try:
            with path.open("x"):
                pass
        except FileExistsError:
            return False
        return True

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def can_read(self, path: Path) -> bool:
        """Check read access; False for missing paths."""
        return os.access(path, os.R_OK)

    def can_write(self, path: Path) -> bool:
        """Check write access; False for missing paths."""
        return os.access(path, os.W_OK)

    def write_text(self, path: Path, content: str, encoding: str = "utf-8") -> None:
        with path.open("w", encoding=encoding) as f:
            f.write(content)

    def iter_lines(self, path: Path, encoding: str = "utf-8") -> Iterator[str]:
        """Yield lines one at a time with the line terminator removed."""
        with path.open("r", encoding=encoding) as f:
            for line in f:
                yield line[:-1] if line.endswith("\n") else line
