from __future__ import annotations

from .errors import CorruptPrefsFileError, PrefsLoadError, UnsupportedValueError
from .interfaces import KeyValueDocumentStore, LegacyPrefsStore
from .legacy_bridge import FLOAT_NOT_FOUND, INT_NOT_FOUND, STRING_NOT_FOUND, LegacyBridge
from .legacy_stores import InMemoryLegacyStore, NullLegacyStore
from .paths import resolve_prefs_path, validate_directory_or_file_name, validate_json_file_name
from .prefs_store import JsonPrefsStore
from .repositories import AsyncLegacyBridge
from .values import PrefsDocument, StoredValue

__all__ = [
    "CorruptPrefsFileError",
    "PrefsLoadError",
    "UnsupportedValueError",
    "KeyValueDocumentStore",
    "LegacyPrefsStore",
    "FLOAT_NOT_FOUND",
    "INT_NOT_FOUND",
    "STRING_NOT_FOUND",
    "LegacyBridge",
    "InMemoryLegacyStore",
    "NullLegacyStore",
    "resolve_prefs_path",
    "validate_directory_or_file_name",
    "validate_json_file_name",
    "JsonPrefsStore",
    "AsyncLegacyBridge",
    "PrefsDocument",
    "StoredValue",
]
