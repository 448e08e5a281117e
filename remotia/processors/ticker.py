"""A processor that paces frames at a fixed rate."""

from __future__ import annotations

import asyncio
import time
from typing import Optional, TypeVar

from ..traits import FrameProcessor

F = TypeVar("F")


class Ticker(FrameProcessor[F]):
    """Waits for the next tick of a fixed interval before passing each frame on.

    The first tick completes at once; missed ticks fire immediately until the
    schedule is caught up.
    """

    def __init__(self, tick_interval: int) -> None:
        if tick_interval <= 0:
            raise ValueError("tick interval must be a positive number of milliseconds")
        self._period = tick_interval / 1000
        self._next_tick = time.monotonic()

    async def process(self, frame_data: F) -> Optional[F]:
        delay = self._next_tick - time.monotonic()
        if delay > 0:
            await asyncio.sleep(delay)
        self._next_tick += self._period
        return frame_data