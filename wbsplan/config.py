"""Remembering the last project file that was opened or saved."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

APP_DIR_NAME = "wbsplan"
CONFIG_FILE_NAME = "config.txt"
LAST_OPENED_KEY = "LastOpenedFile="

PathLike = Union[str, "os.PathLike[str]"]


def _default_base_dir() -> Path:
    for variable in ("APPDATA", "XDG_CONFIG_HOME"):
        value = os.environ.get(variable)
        if value:
            return Path(value)
    return Path.home() / ".config"


def config_file_path(base_dir: Optional[PathLike] = None) -> Path:
    """Return the settings file path, creating its directory when needed.

    Falls back to a file in the current directory if the settings
    directory cannot be created.
    """
    base = Path(base_dir) if base_dir is not None else _default_base_dir()
    config_dir = base / APP_DIR_NAME
    try:
        config_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        return Path(CONFIG_FILE_NAME)
    return config_dir / CONFIG_FILE_NAME


def save_last_opened_file(
    file_path: PathLike, config_path: Optional[PathLike] = None
) -> None:
    """Record file_path as the last opened project; failures are ignored."""
    target = Path(config_path) if config_path is not None else config_file_path()
    try:
        with open(target, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(f"{LAST_OPENED_KEY}{os.fspath(file_path)}\n")
    except OSError:
        pass


def get_last_opened_file(config_path: Optional[PathLike] = None) -> str:
    """Return the last recorded project path, or an empty string if there is none."""
    source = Path(config_path) if config_path is not None else config_file_path()
    try:
        with open(source, encoding="utf-8") as handle:
            for line in handle:
                if line.startswith(LAST_OPENED_KEY):
                    return line[len(LAST_OPENED_KEY):].rstrip("\r\n")
    except (OSError, UnicodeDecodeError):
        pass
    return ""