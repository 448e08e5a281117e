"""Containers that group several processors into one."""

from __future__ import annotations

from typing import Optional, TypeVar

from ..traits import FrameProcessor

F = TypeVar("F")


class Sequential(FrameProcessor[F]):
    """Runs its processors one after another, stopping when one drops the frame."""

    def __init__(self) -> None:
        self._processors: list[FrameProcessor[F]] = []

    def append(self, processor: FrameProcessor[F]) -> "Sequential[F]":
        self._processors.append(processor)
        return self

    async def process(self, frame_data: F) -> Optional[F]:
        result: Optional[F] = frame_data
        for processor in self._processors:
            if result is None:
                break
            result = await processor.process(result)
        return result