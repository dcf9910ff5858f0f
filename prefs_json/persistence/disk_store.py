from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..json_store import atomic_write_json, read_json
from .errors import CorruptPrefsFileError, PrefsLoadError
from .interfaces import KeyValueDocumentStore
from .locks import GLOBAL_PATH_LOCKS


class DiskJsonDocumentStore(KeyValueDocumentStore):
    """
    Stores a single JSON object on disk at a fixed path.

    - load() raises PrefsLoadError for unreadable files and
      CorruptPrefsFileError for anything that is not a JSON object.
    - Writes atomically.
    """

    def __init__(self, path: Path):
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> dict[str, Any]:
        lock = GLOBAL_PATH_LOCKS.lock_for(self._path)
        with lock:
            try:
                raw = read_json(self._path)
            except json.JSONDecodeError as e:
                raise CorruptPrefsFileError(f"Invalid JSON in {self._path}: {e}") from e
            except (OSError, UnicodeDecodeError) as e:
                raise PrefsLoadError(f"Could not read {self._path}: {e}") from e
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise CorruptPrefsFileError(f"Expected a JSON object in {self._path}, got {type(raw).__name__}")
        return raw

    def save(self, doc: dict[str, Any]) -> None:
        lock = GLOBAL_PATH_LOCKS.lock_for(self._path)
        with lock:
            atomic_write_json(self._path, doc)
