from __future__ import annotations

import asyncio

from .legacy_bridge import LegacyBridge


class AsyncLegacyBridge:
    """
    Async wrapper around LegacyBridge.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.
    """

    def __init__(self, bridge: LegacyBridge) -> None:
        self._bridge = bridge

    @property
    def bridge(self) -> LegacyBridge:
        return self._bridge

    async def get_float(self, key: str, default: float = 0.0, *, consult_legacy: bool = True, migrate: bool = True) -> float:
        return await asyncio.to_thread(
            self._bridge.get_float, key, default, consult_legacy=consult_legacy, migrate=migrate
        )

    async def get_int(self, key: str, default: int = 0, *, consult_legacy: bool = True, migrate: bool = True) -> int:
        return await asyncio.to_thread(
            self._bridge.get_int, key, default, consult_legacy=consult_legacy, migrate=migrate
        )

    async def get_string(self, key: str, default: str = "", *, consult_legacy: bool = True, migrate: bool = True) -> str:
        return await asyncio.to_thread(
            self._bridge.get_string, key, default, consult_legacy=consult_legacy, migrate=migrate
        )

    async def has_key(self, key: str, *, consult_legacy: bool = True, migrate: bool = True) -> bool:
        return await asyncio.to_thread(self._bridge.has_key, key, consult_legacy=consult_legacy, migrate=migrate)

    async def set_float(self, key: str, value: float) -> bool:
        return await asyncio.to_thread(self._bridge.set_float, key, value)

    async def set_int(self, key: str, value: int) -> bool:
        return await asyncio.to_thread(self._bridge.set_int, key, value)

    async def set_string(self, key: str, value: str) -> bool:
        return await asyncio.to_thread(self._bridge.set_string, key, value)

    async def delete_key(self, key: str, *, also_delete_legacy: bool = True) -> None:
        await asyncio.to_thread(self._bridge.delete_key, key, also_delete_legacy=also_delete_legacy)

    async def delete_all(self, *, also_delete_legacy: bool = True) -> None:
        await asyncio.to_thread(self._bridge.delete_all, also_delete_legacy=also_delete_legacy)

    async def save(self) -> bool:
        return await asyncio.to_thread(self._bridge.save)
