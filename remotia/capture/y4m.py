"""Captures frames from a YUV4MPEG2 (y4m) file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, BinaryIO, Optional, TypeVar, Union

from ..traits import FrameProcessor

log = logging.getLogger(__name__)

F = TypeVar("F")

_MAGIC = b"YUV4MPEG2 "
_FRAME_MAGIC = b"FRAME"
_MAX_PARAMS_SIZE = 1024

# colorspace name -> (chroma subsampling, bytes per sample)
_COLORSPACES = {
    "420": ("420", 1),
    "420jpeg": ("420", 1),
    "420paldv": ("420", 1),
    "420mpeg2": ("420", 1),
    "420p10": ("420", 2),
    "420p12": ("420", 2),
    "422": ("422", 1),
    "422p10": ("422", 2),
    "422p12": ("422", 2),
    "444": ("444", 1),
    "444p10": ("444", 2),
    "444p12": ("444", 2),
    "mono": ("mono", 1),
    "mono12": ("mono", 2),
}
_DEFAULT_COLORSPACE = "420"


def _parse_ratio(name: str, text: str) -> tuple[int, int]:
    parts = text.split(":")
    if len(parts) != 2 or not all(part.isdigit() for part in parts):
        raise ValueError(f"Invalid y4m {name} '{text}'")
    return int(parts[0]), int(parts[1])


def _parse_dimension(name: str, text: str) -> int:
    if not text.isdigit() or int(text) == 0:
        raise ValueError(f"Invalid y4m {name} '{text}'")
    return int(text)


def _read_line(stream: BinaryIO) -> bytes:
    return stream.readline(_MAX_PARAMS_SIZE + 1)


class Y4MFrameCapturer(FrameProcessor[F]):
    """Appends the Y, U and V planes of the next y4m frame to a frame buffer.

    Returns None, ending the frame, once the file holds no more complete
    frames. Raises ValueError at construction if the file header is invalid.
    """

    def __init__(self, buffer_key: Any, path: Union[str, Path]) -> None:
        self._buffer_key = buffer_key
        self._stream: BinaryIO = open(path, "rb")
        try:
            self._read_header()
        except BaseException:
            self._stream.close()
            raise

    def _read_header(self) -> None:
        line = _read_line(self._stream)
        if not line.startswith(_MAGIC):
            raise ValueError("Not a y4m stream: bad magic")
        if not line.endswith(b"\n"):
            raise ValueError("Invalid y4m header: missing end of line")

        try:
            params = line[len(_MAGIC):-1].decode("ascii")
        except UnicodeDecodeError as error:
            raise ValueError("Invalid y4m header: non-ASCII parameters") from error

        width: Optional[int] = None
        height: Optional[int] = None
        colorspace = _DEFAULT_COLORSPACE
        for param in params.split(" "):
            if not param:
                continue
            tag, value = param[0], param[1:]
            if tag == "W":
                width = _parse_dimension("width", value)
            elif tag == "H":
                height = _parse_dimension("height", value)
            elif tag == "F":
                _parse_ratio("frame rate", value)
            elif tag == "A":
                _parse_ratio("pixel aspect", value)
            elif tag == "C":
                if value not in _COLORSPACES:
                    raise ValueError(f"Unknown y4m colorspace '{value}'")
                colorspace = value

        if width is None or height is None:
            raise ValueError("Invalid y4m header: missing width or height")

        self.width = width
        self.height = height
        self.colorspace = colorspace

        subsampling, sample_size = _COLORSPACES[colorspace]
        luma = width * height * sample_size
        if subsampling == "420":
            chroma = ((width + 1) // 2) * ((height + 1) // 2) * sample_size
        elif subsampling == "422":
            chroma = ((width + 1) // 2) * height * sample_size
        elif subsampling == "444":
            chroma = luma
        else:
            chroma = 0
        self._plane_sizes = (luma, chroma, chroma)

    def _read_frame(self) -> Optional[list[bytes]]:
        line = _read_line(self._stream)
        if not line.startswith(_FRAME_MAGIC) or line[5:6] not in (b"\n", b" "):
            return None
        if not line.endswith(b"\n"):
            return None

        planes = []
        for size in self._plane_sizes:
            plane = self._stream.read(size)
            if len(plane) != size:
                return None
            planes.append(plane)
        return planes

    async def process(self, frame_data: F) -> Optional[F]:
        planes = self._read_frame()
        if planes is None:
            log.debug("No more frames to extract")
            return None

        buffer = frame_data.get_mut_ref(self._buffer_key)
        if buffer is None:
            raise KeyError(f"Missing '{self._buffer_key}' buffer")
        for plane in planes:
            buffer.extend(plane)
        return frame_data

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> "Y4MFrameCapturer[F]":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()