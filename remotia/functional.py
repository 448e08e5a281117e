"""Frame processors built from plain functions."""

from __future__ import annotations

from typing import Awaitable, Callable, Optional, TypeVar

from .traits import FrameProcessor

F = TypeVar("F")


class Function(FrameProcessor[F]):
    """Processor that applies a synchronous function to each frame."""

    def __init__(self, function: Callable[[F], Optional[F]]) -> None:
        self._function = function

    async def process(self, frame_data: F) -> Optional[F]:
        return self._function(frame_data)


class Closure(Function[F]):
    """Processor that applies a callable, which may carry its own state."""


class AsyncFunction(FrameProcessor[F]):
    """Processor that awaits a coroutine function on each frame."""

    def __init__(self, function: Callable[[F], Awaitable[Optional[F]]]) -> None:
        self._function = function

    async def process(self, frame_data: F) -> Optional[F]:
        return await self._function(frame_data)