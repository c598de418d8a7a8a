"""Settings for the file exercises.

Defaults reproduce the paths and text of the classic exercises. A JSON file
(``file-exercises.json`` in the working directory, or one passed with
``--config``) can override any of them.
"""

from __future__ import annotations

import codecs
import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

# Looked up relative to the working directory
SETTINGS_FILE = Path("file-exercises.json")

DEFAULT_NEW_FILE = "novo.txt"
DEFAULT_DATA_FILE = "meu_arquivo.txt"
DEFAULT_LINE_TEXT = "escrevendo mais uma linha ..."


class SettingsError(Exception):
    """Error loading the settings file."""

    pass


class ExerciseSettings(BaseModel):
    """Paths and text used by the exercises."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    new_file: str = Field(default=DEFAULT_NEW_FILE, alias="newFile", min_length=1)
    data_file: str = Field(default=DEFAULT_DATA_FILE, alias="dataFile", min_length=1)
    line_text: str = Field(default=DEFAULT_LINE_TEXT, alias="lineText")
    encoding: str = "utf-8"
    strict_exit: bool = Field(default=False, alias="strictExit")

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e
        return value

    @classmethod
    def from_file(cls, path: Path) -> ExerciseSettings:
        """Load settings from a JSON file.

        Args:
            path: Path to the settings file.

        Returns:
            Parsed settings.

        Raises:
            SettingsError: If the file cannot be read or is invalid.
        """
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return cls.model_validate(data)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            raise SettingsError(f"Invalid settings file {path}: {e}") from e


def load_settings(path: Path | None = None) -> ExerciseSettings:
    """Load settings, falling back to defaults.

    An explicit path must exist. Without one, the default settings file is
    used if present.

    Raises:
        SettingsError: If the file is missing (explicit path only) or invalid.
    """
    if path is not None:
        if not path.exists():
            raise SettingsError(f"Settings file not found: {path}")
        return ExerciseSettings.from_file(path)

    if SETTINGS_FILE.exists():
        logger.debug("Loading settings from %s", SETTINGS_FILE)
        return ExerciseSettings.from_file(SETTINGS_FILE)
    return ExerciseSettings()
