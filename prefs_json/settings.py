from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .persistence.paths import (
    app_data_dir,
    coerce_json_file_name,
    validate_directory_or_file_name,
    validate_json_file_name,
)

logger = logging.getLogger(__name__)

DEFAULT_USE_APP_DATA_DIR = True
DEFAULT_DIRECTORY_PATH = "Saves/Prefs"
DEFAULT_FILE_NAME = "Prefs.json"
DEFAULT_SAVE_ON_EXIT = True
DEFAULT_APP_NAME = "PrefsJson"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Location
    use_app_data_dir: bool = DEFAULT_USE_APP_DATA_DIR
    directory_path: str = DEFAULT_DIRECTORY_PATH
    file_name: str = DEFAULT_FILE_NAME
    app_name: str = DEFAULT_APP_NAME

    # Lifecycle
    save_on_exit: bool = DEFAULT_SAVE_ON_EXIT

    def base_dir(self) -> Path | None:
        """Directory that ``directory_path`` is relative to, if any."""
        if not self.use_app_data_dir:
            return None
        return app_data_dir(self.app_name)


def get_settings() -> Settings:
    use_app_data_dir = _env_bool("PREFS_USE_APP_DATA_DIR", DEFAULT_USE_APP_DATA_DIR)
    save_on_exit = _env_bool("PREFS_SAVE_ON_EXIT", DEFAULT_SAVE_ON_EXIT)
    app_name = os.getenv("PREFS_APP_NAME", "").strip() or DEFAULT_APP_NAME

    directory_path = os.getenv("PREFS_DIRECTORY_PATH", DEFAULT_DIRECTORY_PATH).strip()
    file_name = os.getenv("PREFS_FILE_NAME", DEFAULT_FILE_NAME).strip()

    # Both halves of the location are replaced together, never mixed.
    if not directory_path or not file_name:
        logger.warning(
            "PREFS SETTINGS: empty directory path or file name, using defaults (%s, %s)",
            DEFAULT_DIRECTORY_PATH,
            DEFAULT_FILE_NAME,
        )
        directory_path, file_name = DEFAULT_DIRECTORY_PATH, DEFAULT_FILE_NAME

    # Invalid names are kept so that loading reports the unusable location.
    if not validate_directory_or_file_name(directory_path):
        logger.warning("PREFS SETTINGS: invalid directory path %r", directory_path)

    if not validate_directory_or_file_name(file_name, is_file_name=True):
        logger.warning("PREFS SETTINGS: invalid file name %r", file_name)
    elif not validate_json_file_name(file_name):
        fixed = coerce_json_file_name(file_name)
        logger.warning("PREFS SETTINGS: file name %r lacks the .json suffix, using %r", file_name, fixed)
        file_name = fixed

    return Settings(
        use_app_data_dir=use_app_data_dir,
        directory_path=directory_path,
        file_name=file_name,
        app_name=app_name,
        save_on_exit=save_on_exit,
    )
