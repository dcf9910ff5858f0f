from __future__ import annotations

import atexit
import logging
import threading
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable

from .disk_store import DiskJsonDocumentStore
from .errors import CorruptPrefsFileError, UnsupportedValueError
from .paths import resolve_prefs_path
from .values import PrefsDocument, StoredValue

if TYPE_CHECKING:
    from ..settings import Settings

logger = logging.getLogger(__name__)

ExitHookRegistrar = Callable[..., Any]


class JsonPrefsStore:
    """
    The JSON-backed settings document and its lifecycle.

    Nothing is available until load() succeeds. After save_and_discard() the
    store is unloaded again and every call reports an access failure until the
    next load().
    """

    def __init__(self, settings: "Settings", *, register_exit_hook: ExitHookRegistrar | None = atexit.register):
        self._settings = settings
        self._register_exit_hook = register_exit_hook
        self._exit_hook_registered = False
        self._lock = threading.RLock()
        self._document: PrefsDocument | None = None
        self._disk: DiskJsonDocumentStore | None = None

    @property
    def settings(self) -> "Settings":
        return self._settings

    @property
    def is_loaded(self) -> bool:
        with self._lock:
            return self._document is not None

    @property
    def path(self) -> Path | None:
        with self._lock:
            return self._disk.path if self._disk is not None else None

    def load(self) -> bool:
        """
        Load the prefs file, creating an empty one if none exists yet.

        Returns False when the configured location is unusable. A file that
        exists but cannot be parsed raises PrefsLoadError.
        """
        path = resolve_prefs_path(
            self._settings.directory_path,
            self._settings.file_name,
            base_dir=self._settings.base_dir(),
        )
        if path is None:
            logger.error("Invalid prefs path, prefs were not loaded.")
            return False

        disk = DiskJsonDocumentStore(path)
        with self._lock:
            if not disk.exists():
                document = PrefsDocument()
                try:
                    disk.save(document.to_disk_doc())
                except OSError as e:
                    logger.error("Could not create prefs file at %s: %r", path, e)
                    return False
                logger.debug("Created prefs file at %s", path)
            else:
                try:
                    document = PrefsDocument.from_disk_doc(disk.load())
                except UnsupportedValueError as e:
                    raise CorruptPrefsFileError(f"Invalid prefs file {path}: {e}") from e
                logger.debug("Loaded %d prefs from %s", len(document.entries), path)

            self._document = document
            self._disk = disk

            if self._settings.save_on_exit and not self._exit_hook_registered and self._register_exit_hook is not None:
                self._register_exit_hook(self.flush_on_exit)
                self._exit_hook_registered = True
        return True

    def flush_on_exit(self) -> None:
        """Quit-time hook: save and discard. Never raises, so shutdown is not blocked."""
        if not self.is_loaded:
            return
        try:
            self.save_and_discard()
        except Exception:
            logger.exception("Saving prefs on exit failed")

    def get(self, key: str) -> StoredValue | None:
        with self._lock:
            if self._document is None:
                logger.error("Failed to access prefs store.")
                return None
            return self._document.entries.get(key)

    def set(self, key: str, value: StoredValue) -> bool:
        with self._lock:
            if self._document is None:
                logger.error("Failed to access prefs store.")
                return False

            current = self._document.entries.get(key)
            # Type is fixed by the first write.
            if current is not None and current.kind != value.kind:
                logger.warning(
                    "Trying to override value %r of type '%s' at key '%s' with a %s.",
                    current.value,
                    current.kind,
                    key,
                    value.kind,
                )
                return False

            self._document.entries[key] = value
            return True

    def delete(self, key: str) -> bool:
        with self._lock:
            if self._document is None:
                logger.error("Failed to access prefs store.")
                return False
            self._document.entries.pop(key, None)
            return True

    def delete_all(self) -> bool:
        with self._lock:
            if self._document is None:
                logger.error("Failed to access prefs store.")
                return False
            self._document = PrefsDocument()
            return True

    def keys(self) -> list[str]:
        with self._lock:
            if self._document is None:
                return []
            return list(self._document.entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return self._document is not None and key in self._document.entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._document.entries) if self._document is not None else 0

    def save(self) -> bool:
        """Write the document to disk. Failures are logged, never raised."""
        with self._lock:
            if self._document is None or self._disk is None:
                logger.error("Failed to access prefs store.")
                return False
            try:
                self._disk.save(self._document.to_disk_doc())
            except (OSError, TypeError, ValueError) as e:
                logger.error("PREFS SAVE: failed to write %s: %r", self._disk.path, e)
                return False
            logger.debug("PREFS SAVE: wrote %d prefs to %s", len(self._document.entries), self._disk.path)
            return True

    def save_and_discard(self) -> bool:
        with self._lock:
            saved = self.save()
            self._document = None
            self._disk = None
            return saved
