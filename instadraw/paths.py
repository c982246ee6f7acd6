"""Per-user directories for configuration and data, and file reading."""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_config_path, user_data_path

from .constants import PROJECT_DIRECTORY


def config_directory() -> Path:
    """Directory where options are stored."""
    return user_config_path(PROJECT_DIRECTORY, appauthor=False)


def data_directory() -> Path:
    """Directory where other persistent data is stored."""
    return user_data_path(PROJECT_DIRECTORY, appauthor=False)


def read(path: str | Path) -> str:
    """Return the whole text content of ``path``."""
    return Path(path).read_text(encoding="utf-8")