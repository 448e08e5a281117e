"""Dumps a frame buffer to a file named after one of the frame's statistics."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from ..frame_data import FrameData
from ..traits import FrameProcessor

log = logging.getLogger(__name__)


class RawFrameDumper(FrameProcessor[FrameData]):
    """Writes a writable buffer of every frame to ``<folder>/<id>.<extension>``.

    The identifier is the statistic named by :meth:`key`, by default
    ``capture_timestamp``; the extension defaults to ``raw``.
    """

    def __init__(self, buffer_id: str, folder: Union[str, Path]) -> None:
        self._folder = Path(folder)
        self._folder.mkdir(parents=True, exist_ok=True)
        self._buffer_id = buffer_id
        self._key = "capture_timestamp"
        self._extension = "raw"

    def key(self, key: str) -> "RawFrameDumper":
        self._key = key
        return self

    def extension(self, value: str) -> "RawFrameDumper":
        self._extension = value
        return self

    async def process(self, frame_data: FrameData) -> Optional[FrameData]:
        frame_id = frame_data.get(self._key)
        buffer = frame_data.get_writable_buffer(self._buffer_id)
        if buffer is None:
            raise KeyError(f"Missing writable buffer '{self._buffer_id}'")

        log.debug("Dumping frame %s", frame_id)
        file_path = self._folder / f"{frame_id}.{self._extension}"
        file_path.write_bytes(bytes(buffer))
        return frame_data