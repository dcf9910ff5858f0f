from __future__ import annotations

from typing import Mapping

from .interfaces import LegacyPrefsStore


class InMemoryLegacyStore(LegacyPrefsStore):
    """
    Dict-backed legacy store with engine semantics: a typed getter only
    returns values stored with that type, otherwise the default.
    """

    def __init__(self, values: Mapping[str, float | int | str] | None = None) -> None:
        self._values: dict[str, float | int | str] = {}
        for key, value in (values or {}).items():
            if isinstance(value, bool) or not isinstance(value, (float, int, str)):
                raise TypeError(f"Unsupported legacy value at key {key!r}: {value!r}")
            self._values[key] = value

    def set_float(self, key: str, value: float) -> None:
        self._values[key] = float(value)

    def set_int(self, key: str, value: int) -> None:
        self._values[key] = int(value)

    def set_string(self, key: str, value: str) -> None:
        self._values[key] = str(value)

    def get_float(self, key: str, default: float) -> float:
        value = self._values.get(key)
        return value if isinstance(value, float) else default

    def get_int(self, key: str, default: int) -> int:
        value = self._values.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return default

    def get_string(self, key: str, default: str) -> str:
        value = self._values.get(key)
        return value if isinstance(value, str) else default

    def has_key(self, key: str) -> bool:
        return key in self._values

    def delete_key(self, key: str) -> None:
        self._values.pop(key, None)

    def delete_all(self) -> None:
        self._values.clear()

    def __len__(self) -> int:
        return len(self._values)


class NullLegacyStore(LegacyPrefsStore):
    """For hosts that have no legacy store to migrate from."""

    def get_float(self, key: str, default: float) -> float:
        return default

    def get_int(self, key: str, default: int) -> int:
        return default

    def get_string(self, key: str, default: str) -> str:
        return default

    def has_key(self, key: str) -> bool:
        return False

    def delete_key(self, key: str) -> None:
        return None

    def delete_all(self) -> None:
        return None
