"""Small exercises on creating, checking, writing and reading files."""

__version__ = "0.1.0"

# Export protocol interfaces for type hints and dependency injection
from file_exercises.protocols import (
    FileSystem,
    InputSource,
)

__all__ = [
    "__version__",
    "FileSystem",
    "InputSource",
]
