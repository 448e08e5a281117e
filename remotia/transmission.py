"""Processors that send and receive raw frame buffers over TCP streams."""

from __future__ import annotations

import asyncio
from typing import Any, Optional, TypeVar

from .traits import FrameProcessor

F = TypeVar("F")


class TcpFrameSender(FrameProcessor[F]):
    """Writes the whole buffer under a key to a stream writer."""

    def __init__(self, buffer_key: Any, writer: asyncio.StreamWriter) -> None:
        self._buffer_key = buffer_key
        self._writer = writer

    async def process(self, frame_data: F) -> Optional[F]:
        buffer = frame_data.get_ref(self._buffer_key)
        if buffer is None:
            raise KeyError(f"Missing '{self._buffer_key}' buffer")
        self._writer.write(bytes(buffer))
        await self._writer.drain()
        return frame_data


class TcpFrameReceiver(FrameProcessor[F]):
    """Fills the buffer under a key with exactly as many bytes as it holds.

    Raises :class:`asyncio.IncompleteReadError` if the stream ends first.
    """

    def __init__(self, buffer_key: Any, reader: asyncio.StreamReader) -> None:
        self._buffer_key = buffer_key
        self._reader = reader

    async def process(self, frame_data: F) -> Optional[F]:
        buffer = frame_data.get_mut_ref(self._buffer_key)
        if buffer is None:
            raise KeyError(f"Missing '{self._buffer_key}' buffer")
        data = await self._reader.readexactly(len(buffer))
        buffer[:] = data
        return frame_data