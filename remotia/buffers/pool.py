"""Pools of reusable buffers, lent to frames and given back later."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional, TypeVar

from ..traits import FrameProcessor

log = logging.getLogger(__name__)

F = TypeVar("F")


class BuffersPool:
    """A fixed set of buffers for one slot of the frame."""

    def __init__(self, slot_id: Any, pool_size: int, buffer_size: int) -> None:
        if pool_size <= 0:
            raise ValueError("pool size must be positive")
        if buffer_size < 0:
            raise ValueError("buffer size cannot be negative")
        self._slot_id = slot_id
        self.buffer_size = buffer_size
        self._queue: asyncio.Queue[bytearray] = asyncio.Queue(maxsize=pool_size)
        for _ in range(pool_size):
            self._queue.put_nowait(bytearray())

    def borrower(self) -> "BufferBorrower":
        return BufferBorrower(self._slot_id, self._queue)

    def redeemer(self) -> "BufferRedeemer":
        return BufferRedeemer(self._slot_id, self._queue)


class BufferBorrower(FrameProcessor[F]):
    """Takes a buffer from the pool and pushes it into the frame.

    A normal borrower waits until a buffer is free; a soft one passes the frame
    on without a buffer when none is available.
    """

    def __init__(self, slot_id: Any, queue: asyncio.Queue) -> None:
        self._slot_id = slot_id
        self._queue = queue
        self._soft = False

    def soft(self) -> "BufferBorrower[F]":
        self._soft = True
        return self

    async def process(self, frame_data: F) -> Optional[F]:
        log.debug("Borrowing '%s' buffer...", self._slot_id)
        while True:
            try:
                buffer = self._queue.get_nowait()
            except asyncio.QueueEmpty:
                log.debug("Unable to borrow '%s' buffer: pool is empty", self._slot_id)
                await asyncio.sleep(0)
                if self._soft:
                    break
            else:
                frame_data.push(self._slot_id, buffer)
                break
        return frame_data


class BufferRedeemer(FrameProcessor[F]):
    """Pulls the buffer out of the frame, clears it and returns it to the pool.

    A normal redeemer raises KeyError when the frame holds no buffer; a soft
    one lets such frames through.
    """

    def __init__(self, slot_id: Any, queue: asyncio.Queue) -> None:
        self._slot_id = slot_id
        self._queue = queue
        self._soft = False

    def soft(self) -> "BufferRedeemer[F]":
        self._soft = True
        return self

    async def process(self, frame_data: F) -> Optional[F]:
        log.debug("Redeeming '%s' buffer (soft = %s)...", self._slot_id, self._soft)
        buffer = frame_data.pull(self._slot_id)
        if buffer is not None:
            buffer.clear()
            await self._queue.put(buffer)
            if self._soft:
                log.debug("Soft-redeemed a '%s' buffer", self._slot_id)
        elif not self._soft:
            raise KeyError(f"Missing '{self._slot_id}' buffer")
        log.debug("Redeemed '%s' buffer (soft = %s)", self._slot_id, self._soft)
        return frame_data