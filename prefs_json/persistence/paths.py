from __future__ import annotations

import logging
import re
from pathlib import Path

from platformdirs import user_data_dir

logger = logging.getLogger(__name__)

JSON_SUFFIX = ".json"

# Characters rejected in directory and file names. Path separators are only
# rejected for file names.
FORBIDDEN_NAME_CHARS_RE = re.compile(r'[<>:"|?*]', re.IGNORECASE)


def app_data_dir(app_name: str) -> Path:
    return Path(user_data_dir(appname=app_name, appauthor=False))


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def validate_directory_or_file_name(name: str, *, is_file_name: bool = False) -> bool:
    if not name or not name.strip():
        return False
    if is_file_name and ("/" in name or "\\" in name):
        return False
    return FORBIDDEN_NAME_CHARS_RE.search(name) is None


def validate_json_file_name(file_name: str) -> bool:
    # ".json" alone is not a file name
    if len(file_name) <= len(JSON_SUFFIX):
        return False
    return file_name[-len(JSON_SUFFIX):] == JSON_SUFFIX


def coerce_json_file_name(file_name: str) -> str:
    if validate_json_file_name(file_name):
        return file_name
    return f"{file_name}{JSON_SUFFIX}"


def resolve_prefs_path(directory: str | Path, file_name: str, *, base_dir: Path | None = None) -> Path | None:
    """
    Validate and join the prefs directory and file name.

    ``directory`` is validated as given; ``base_dir`` (e.g. the platform data
    directory) is trusted and only prefixed. The target directory is created
    if missing. Returns None after logging the reason when the location
    cannot be used.
    """
    directory_str = str(directory)
    if not validate_directory_or_file_name(directory_str):
        logger.error("Invalid prefs directory path: %r", directory_str)
        return None

    if not validate_directory_or_file_name(file_name, is_file_name=True):
        logger.error("Invalid prefs file name: %r", file_name)
        return None

    if not validate_json_file_name(file_name):
        logger.error("Invalid prefs file name %r: expected a %s file", file_name, JSON_SUFFIX)
        return None

    target_dir = base_dir / directory_str if base_dir is not None else Path(directory_str)
    try:
        ensure_dir(target_dir)
    except OSError as e:
        logger.error("Could not create prefs directory at %s: %r", target_dir, e)
        return None

    return target_dir / file_name
