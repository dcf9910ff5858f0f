from __future__ import annotations

from typing import Any, Protocol


class KeyValueDocumentStore(Protocol):
    """
    A single JSON object persisted at a fixed location.
    """

    def exists(self) -> bool:
        """Whether a document has been persisted yet."""
        ...

    def load(self) -> dict[str, Any]:
        """Load and return the full document. Raises on unreadable or invalid data."""
        ...

    def save(self, doc: dict[str, Any]) -> None:
        """Persist the full document atomically."""
        ...


class LegacyPrefsStore(Protocol):
    """
    The engine's built-in key/value preference store being replaced.

    Typed getters return ``default`` when the key is missing or holds a value
    of another type; there is no other way to tell those cases apart.
    """

    def get_float(self, key: str, default: float) -> float:
        ...

    def get_int(self, key: str, default: int) -> int:
        ...

    def get_string(self, key: str, default: str) -> str:
        ...

    def has_key(self, key: str) -> bool:
        ...

    def delete_key(self, key: str) -> None:
        ...

    def delete_all(self) -> None:
        ...
