from __future__ import annotations

from pathlib import Path
import sys
from typing import Any, Callable


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection
# without installing the package first.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from prefs_json.persistence.legacy_bridge import LegacyBridge  # noqa: E402
from prefs_json.persistence.legacy_stores import InMemoryLegacyStore  # noqa: E402
from prefs_json.persistence.prefs_store import JsonPrefsStore  # noqa: E402
from prefs_json.settings import Settings  # noqa: E402

PREFS_ENV_VARS = (
    "PREFS_USE_APP_DATA_DIR",
    "PREFS_DIRECTORY_PATH",
    "PREFS_FILE_NAME",
    "PREFS_SAVE_ON_EXIT",
    "PREFS_APP_NAME",
)


@pytest.fixture(autouse=True)
def clean_prefs_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in PREFS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def prefs_dir(tmp_path: Path) -> Path:
    return tmp_path / "Saves" / "Prefs"


@pytest.fixture
def prefs_settings(prefs_dir: Path) -> Settings:
    """
    Settings pointing at a temp directory so tests never touch the real app-data dir.
    """
    return Settings(
        use_app_data_dir=False,
        directory_path=str(prefs_dir),
        file_name="Prefs.json",
        save_on_exit=False,
    )


@pytest.fixture
def exit_hooks() -> list[Callable[[], Any]]:
    return []


@pytest.fixture
def make_store(prefs_settings: Settings, exit_hooks: list[Callable[[], Any]]) -> Callable[..., JsonPrefsStore]:
    def _make(settings: Settings | None = None) -> JsonPrefsStore:
        return JsonPrefsStore(settings or prefs_settings, register_exit_hook=exit_hooks.append)

    return _make


@pytest.fixture
def store(make_store: Callable[..., JsonPrefsStore]) -> JsonPrefsStore:
    s = make_store()
    assert s.load() is True
    return s


@pytest.fixture
def legacy() -> InMemoryLegacyStore:
    return InMemoryLegacyStore()


@pytest.fixture
def bridge(store: JsonPrefsStore, legacy: InMemoryLegacyStore) -> LegacyBridge:
    return LegacyBridge(store, legacy)
