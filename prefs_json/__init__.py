from __future__ import annotations

from .bootstrap import create_prefs, prefs_session
from .persistence import (
    AsyncLegacyBridge,
    CorruptPrefsFileError,
    InMemoryLegacyStore,
    JsonPrefsStore,
    LegacyBridge,
    LegacyPrefsStore,
    NullLegacyStore,
    PrefsLoadError,
    StoredValue,
)
from .settings import Settings, get_settings

__all__ = [
    "create_prefs",
    "prefs_session",
    "AsyncLegacyBridge",
    "CorruptPrefsFileError",
    "InMemoryLegacyStore",
    "JsonPrefsStore",
    "LegacyBridge",
    "LegacyPrefsStore",
    "NullLegacyStore",
    "PrefsLoadError",
    "StoredValue",
    "Settings",
    "get_settings",
]
