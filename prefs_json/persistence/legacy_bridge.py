from __future__ import annotations

import logging
import threading
from typing import Any, Callable

from .errors import UnsupportedValueError
from .interfaces import LegacyPrefsStore
from .prefs_store import JsonPrefsStore
from .values import StoredValue

logger = logging.getLogger(__name__)

# "Not found" probes against the legacy store. A legacy value equal to its
# sentinel is indistinguishable from a missing one.
FLOAT_NOT_FOUND = 3.4028234663852886e38  # largest 32-bit float
INT_NOT_FOUND = 2**31 - 1
STRING_NOT_FOUND = ""


class LegacyBridge:
    """
    Application-facing prefs API.

    Reads hit the JSON store first and fall back to the legacy store; values
    found there are optionally migrated (copied into the JSON store, then
    deleted from the legacy store).
    """

    def __init__(self, store: JsonPrefsStore, legacy: LegacyPrefsStore) -> None:
        self._store = store
        self._legacy = legacy
        self._lock = threading.RLock()

    @property
    def store(self) -> JsonPrefsStore:
        return self._store

    @property
    def legacy(self) -> LegacyPrefsStore:
        return self._legacy

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------
    def get_float(self, key: str, default: float = 0.0, *, consult_legacy: bool = True, migrate: bool = True) -> float:
        with self._lock:
            if not self._store.is_loaded:
                logger.error("Failed to access prefs store. Returning %r.", default)
                return default

            stored = self._store.get(key)
            # Whole numbers come back from disk as ints.
            if stored is not None and stored.is_numeric:
                return float(stored.value)

            if consult_legacy:
                return self._float_from_legacy(key, default, migrate)

            logger.warning("No float value at key '%s' in prefs store. Returning %r.", key, default)
            return default

    def get_int(self, key: str, default: int = 0, *, consult_legacy: bool = True, migrate: bool = True) -> int:
        with self._lock:
            if not self._store.is_loaded:
                logger.error("Failed to access prefs store. Returning %r.", default)
                return default

            stored = self._store.get(key)
            if stored is not None:
                if stored.kind == "int":
                    return int(stored.value)
                if stored.kind == "float" and float(stored.value).is_integer():
                    return int(stored.value)

            if consult_legacy:
                return self._int_from_legacy(key, default, migrate)

            logger.warning("No int value at key '%s' in prefs store. Returning %r.", key, default)
            return default

    def get_string(self, key: str, default: str = "", *, consult_legacy: bool = True, migrate: bool = True) -> str:
        with self._lock:
            if not self._store.is_loaded:
                logger.error("Failed to access prefs store. Returning %r.", default)
                return default

            stored = self._store.get(key)
            if stored is not None and stored.kind == "string":
                if stored.value == "":
                    logger.warning("String value of key '%s' in prefs store is an empty string.", key)
                return str(stored.value)

            if consult_legacy:
                return self._string_from_legacy(key, default, migrate)

            logger.warning("No string value at key '%s' in prefs store. Returning %r.", key, default)
            return default

    def has_key(self, key: str, *, consult_legacy: bool = True, migrate: bool = True) -> bool:
        with self._lock:
            if not self._store.is_loaded:
                logger.error("Failed to access prefs store.")
                return False

            if key in self._store:
                return True

            if not consult_legacy:
                return False

            in_legacy = self._legacy.has_key(key)
            if in_legacy and migrate:
                self._copy_from_legacy(key)
                self._legacy.delete_key(key)
            return in_legacy

    # -------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------
    def set_float(self, key: str, value: float) -> bool:
        return self._set(key, StoredValue.of_float, value)

    def set_int(self, key: str, value: int) -> bool:
        return self._set(key, StoredValue.of_int, value)

    def set_string(self, key: str, value: str) -> bool:
        return self._set(key, StoredValue.of_string, value)

    def _set(self, key: str, factory: Callable[[Any], StoredValue], value: Any) -> bool:
        try:
            stored = factory(value)
        except UnsupportedValueError as e:
            logger.warning("Rejected write at key '%s': %s", key, e)
            return False
        with self._lock:
            return self._store.set(key, stored)

    def delete_key(self, key: str, *, also_delete_legacy: bool = True) -> None:
        with self._lock:
            if not self._store.is_loaded:
                logger.error("Failed to access prefs store.")
                return
            if also_delete_legacy:
                self._legacy.delete_key(key)
            self._store.delete(key)

    def delete_all(self, *, also_delete_legacy: bool = True) -> None:
        with self._lock:
            if also_delete_legacy:
                self._legacy.delete_all()
            self._store.delete_all()

    def save(self) -> bool:
        with self._lock:
            return self._store.save()

    # -------------------------------------------------------------------
    # Legacy fallback
    # -------------------------------------------------------------------
    def _migrate(self, key: str, value: StoredValue) -> None:
        if self._store.set(key, value):
            logger.debug("Migrated %s value at key '%s' from legacy store.", value.kind, key)
        self._legacy.delete_key(key)

    def _float_from_legacy(self, key: str, default: float, migrate: bool) -> float:
        value = self._legacy.get_float(key, FLOAT_NOT_FOUND)
        if value == FLOAT_NOT_FOUND:
            logger.warning("No float value at key '%s' in legacy store. Returning %r.", key, default)
            return default
        if migrate:
            self._migrate(key, StoredValue.of_float(value))
        return value

    def _int_from_legacy(self, key: str, default: int, migrate: bool) -> int:
        value = self._legacy.get_int(key, INT_NOT_FOUND)
        if value == INT_NOT_FOUND:
            logger.warning("No int value at key '%s' in legacy store. Returning %r.", key, default)
            return default
        if migrate:
            self._migrate(key, StoredValue.of_int(value))
        return value

    def _string_from_legacy(self, key: str, default: str, migrate: bool) -> str:
        value = self._legacy.get_string(key, STRING_NOT_FOUND)
        if value == STRING_NOT_FOUND:
            logger.warning("No string value at key '%s' in legacy store. Returning %r.", key, default)
            return default
        if migrate:
            self._migrate(key, StoredValue.of_string(value))
        return value

    def _copy_from_legacy(self, key: str) -> bool:
        """Copy a legacy value of unknown type. Probe order: float, int, string."""
        float_value = self._legacy.get_float(key, FLOAT_NOT_FOUND)
        if float_value != FLOAT_NOT_FOUND:
            return self._store.set(key, StoredValue.of_float(float_value))

        int_value = self._legacy.get_int(key, INT_NOT_FOUND)
        if int_value != INT_NOT_FOUND:
            return self._store.set(key, StoredValue.of_int(int_value))

        string_value = self._legacy.get_string(key, STRING_NOT_FOUND)
        if string_value != STRING_NOT_FOUND:
            return self._store.set(key, StoredValue.of_string(string_value))

        return False
