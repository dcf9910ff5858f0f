from __future__ import annotations

import os
import threading
from pathlib import Path


class PathLockRegistry:
    """
    Hands out one re-entrant lock per absolute file path, so every store
    instance pointed at the same prefs file serializes its disk I/O.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.RLock] = {}

    def lock_for(self, path: Path) -> threading.RLock:
        key = os.path.normcase(os.path.abspath(path))
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.RLock()
                self._locks[key] = lock
            return lock


GLOBAL_PATH_LOCKS = PathLockRegistry()
