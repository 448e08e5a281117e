"""A registry of buffer pools by slot."""

from __future__ import annotations

from typing import Any, Hashable, KeysView

from .pool import BuffersPool


class PoolRegistry:
    """Holds one buffer pool per slot identifier."""

    def __init__(self) -> None:
        self._pools: dict[Hashable, BuffersPool] = {}

    def register(self, slot_id: Hashable, pool_size: int, buffer_size: int) -> None:
        self._pools[slot_id] = BuffersPool(slot_id, pool_size, buffer_size)

    def get(self, slot_id: Hashable) -> BuffersPool:
        try:
            return self._pools[slot_id]
        except KeyError:
            raise KeyError(f"No pool with ID {slot_id!r} found in the registry") from None

    def buffer_ids(self) -> KeysView[Any]:
        return self._pools.keys()