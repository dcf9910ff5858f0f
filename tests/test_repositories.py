from __future__ import annotations

import asyncio

from prefs_json.persistence.repositories import AsyncLegacyBridge


def test_async_legacy_bridge_basic_flow(bridge, legacy, store):
    async def _run():
        prefs = AsyncLegacyBridge(bridge)

        assert await prefs.set_float("volume", 0.8) is True
        assert await prefs.get_float("volume") == 0.8

        legacy.set_int("lives", 3)
        assert await prefs.has_key("lives", migrate=False) is True
        assert await prefs.get_int("lives") == 3
        assert not legacy.has_key("lives")

        assert await prefs.set_string("name", "ana") is True
        assert await prefs.get_string("name") == "ana"

        await prefs.delete_key("name")
        assert await prefs.has_key("name") is False

        assert await prefs.set_int("coins", 10) is True
        assert await prefs.save() is True

        await prefs.delete_all()
        assert len(store) == 0

    asyncio.run(_run())
