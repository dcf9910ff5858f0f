from __future__ import annotations

import atexit
import contextlib
import logging
from typing import Iterator

from dotenv import load_dotenv

from .persistence.errors import PrefsLoadError
from .persistence.interfaces import LegacyPrefsStore
from .persistence.legacy_bridge import LegacyBridge
from .persistence.legacy_stores import NullLegacyStore
from .persistence.prefs_store import ExitHookRegistrar, JsonPrefsStore
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_prefs(
    legacy: LegacyPrefsStore | None = None,
    settings: Settings | None = None,
    *,
    register_exit_hook: ExitHookRegistrar | None = atexit.register,
) -> LegacyBridge:
    """
    Load-time hook: read configuration, load the prefs file and wire it to the
    legacy store.

    Load failures are logged and leave the bridge unloaded; every later call
    then reports an access failure instead of raising into the host.
    """
    if settings is None:
        load_dotenv("local.env")
        settings = get_settings()

    store = JsonPrefsStore(settings, register_exit_hook=register_exit_hook)
    try:
        store.load()
    except PrefsLoadError as e:
        logger.error("Failed to load prefs file: %s", e)

    return LegacyBridge(store, legacy if legacy is not None else NullLegacyStore())


@contextlib.contextmanager
def prefs_session(
    legacy: LegacyPrefsStore | None = None,
    settings: Settings | None = None,
) -> Iterator[LegacyBridge]:
    prefs = create_prefs(legacy, settings, register_exit_hook=None)
    try:
        yield prefs
    finally:
        prefs.store.flush_on_exit()
