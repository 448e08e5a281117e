"""Processors that stamp frames with times and measure durations."""

from __future__ import annotations

import logging
import time
from typing import Any, Optional, TypeVar

from ..helpers import now_timestamp
from ..processors.containers import Sequential
from ..traits import FrameProcessor

log = logging.getLogger(__name__)

F = TypeVar("F")


class TimestampAdder(FrameProcessor[F]):
    """Stores the current Unix time in milliseconds under a property key."""

    def __init__(self, id: Any) -> None:
        self._id = id

    async def process(self, frame_data: F) -> Optional[F]:
        frame_data.set(self._id, now_timestamp())
        return frame_data


class TimestampDiffCalculator(FrameProcessor[F]):
    """Stores the milliseconds elapsed since a timestamp held by the frame."""

    def __init__(self, source_id: Any, diff_id: Any) -> None:
        self._source_id = source_id
        self._diff_id = diff_id

    async def process(self, frame_data: F) -> Optional[F]:
        source_timestamp = frame_data.get(self._source_id)
        if source_timestamp is None:
            raise KeyError(f"Missing key '{self._source_id}'")
        frame_data.set(self._diff_id, now_timestamp() - source_timestamp)
        return frame_data


class ProfiledSequential(FrameProcessor[F]):
    """Runs processors in sequence and stores how many milliseconds they took."""

    def __init__(self, property_key: Any) -> None:
        self._property_key = property_key
        self._inner_sequential: Sequential[F] = Sequential()

    def append(self, processor: FrameProcessor[F]) -> "ProfiledSequential[F]":
        self._inner_sequential.append(processor)
        return self

    async def process(self, frame_data: F) -> Optional[F]:
        start = time.perf_counter_ns()
        result = await self._inner_sequential.process(frame_data)
        elapsed_ms = (time.perf_counter_ns() - start) // 1_000_000

        log.warning("Logged time: %d", elapsed_ms)

        if result is not None:
            result.set(self._property_key, elapsed_ms)
        return result