"""Application context for dependency injection.

This module separates object creation from object use. CLI commands take
an AppContext; tests build one directly with doubles in place of the real
filesystem and stdin.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from file_exercises.protocols import FileSystem, InputSource
from file_exercises.settings import ExerciseSettings


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from file_exercises.filesystem import RealFileSystem

    return RealFileSystem()


def _default_input() -> InputSource:
    """Create the default interactive input."""
    from file_exercises.console import ConsoleInput

    return ConsoleInput()


@dataclass
class AppContext:
    """Container for the dependencies an exercise needs.

    Dependencies are typed with Protocols, so test doubles can be injected
    without inheritance.
    """

    filesystem: FileSystem = field(default_factory=_default_filesystem)
    input_source: InputSource = field(default_factory=_default_input)
    settings: ExerciseSettings = field(default_factory=ExerciseSettings)


def create_context(settings_file: Path | None = None) -> AppContext:
    """Factory for application dependencies.

    Args:
        settings_file: Settings file to load instead of the default lookup.

    Returns:
        Configured AppContext.

    Raises:
        SettingsError: If the settings file is invalid.
    """
    from file_exercises.console import ConsoleInput
    from file_exercises.filesystem import RealFileSystem
    from file_exercises.settings import load_settings

    return AppContext(
        filesystem=RealFileSystem(),
        input_source=ConsoleInput(),
        settings=load_settings(settings_file),
    )
