"""Messages exchanged over the network and as feedback."""

from __future__ import annotations

from dataclasses import dataclass

_U16_MAX = 2**16 - 1
_USIZE_MAX = 2**64 - 1
_U128_MAX = 2**128 - 1


def _require_unsigned(name: str, value: int, maximum: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} must be between 0 and {maximum}, got {value}")


@dataclass
class FrameBody:
    """A whole frame with its capture timestamp."""

    capture_timestamp: int
    frame_pixels: bytes

    def __post_init__(self) -> None:
        _require_unsigned("capture_timestamp", self.capture_timestamp, _U128_MAX)
        self.frame_pixels = bytes(self.frame_pixels)


@dataclass
class FrameHeader:
    """Announces a frame split into fragments."""

    capture_timestamp: int
    fragments_count: int

    def __post_init__(self) -> None:
        _require_unsigned("capture_timestamp", self.capture_timestamp, _U128_MAX)
        _require_unsigned("fragments_count", self.fragments_count, _USIZE_MAX)


@dataclass
class FrameFragment:
    """One fragment of a frame."""

    index: int
    data: bytes

    def __post_init__(self) -> None:
        _require_unsigned("index", self.index, _USIZE_MAX)
        self.data = bytes(self.data)


@dataclass(frozen=True)
class RemVSPFrameHeader:
    """Header carried by every RemVSP fragment."""

    frame_fragments_count: int
    fragment_size: int
    capture_timestamp: int

    def __post_init__(self) -> None:
        _require_unsigned("frame_fragments_count", self.frame_fragments_count, _U16_MAX)
        _require_unsigned("fragment_size", self.fragment_size, _U16_MAX)
        _require_unsigned("capture_timestamp", self.capture_timestamp, _U128_MAX)


@dataclass
class RemVSPFrameFragment:
    """A RemVSP fragment of a frame."""

    frame_header: RemVSPFrameHeader
    fragment_id: int
    data: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.frame_header, RemVSPFrameHeader):
            raise TypeError("frame_header must be a RemVSPFrameHeader")
        _require_unsigned("fragment_id", self.fragment_id, _U16_MAX)
        self.data = bytes(self.data)


@dataclass(frozen=True)
class HighFrameDelay:
    """Feedback reporting a high frame delay."""

    delay: int

    def __post_init__(self) -> None:
        _require_unsigned("delay", self.delay, _U128_MAX)


FeedbackMessage = HighFrameDelay