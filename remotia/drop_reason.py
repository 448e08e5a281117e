"""Reasons for which a frame can be dropped."""

from __future__ import annotations

from enum import Enum


class DropReason(Enum):
    """Why a frame was dropped; the value is its human-readable message."""

    INVALID_WHOLE_FRAME_HEADER = "Invalid whole frame header"
    INVALID_PACKET_HEADER = "Invalid packet header"
    INVALID_PACKET = "Invalid packet"
    EMPTY_FRAME = "Empty frame"
    NO_COMPLETE_FRAMES = "No frames to pull"
    NO_DECODED_FRAMES = "No decoded frames available"
    STALE_FRAME = "Stale frame"
    CONNECTION_ERROR = "Connection error"
    CODEC_ERROR = "Generic codec error"
    TIMEOUT = "Timeout"
    NO_ENCODED_FRAMES = "NoEncodedFrames"
    NO_AVAILABLE_ENCODERS = "NoAvailableEncoders"
    NO_AVAILABLE_BUFFERS = "No available buffers"

    def __str__(self) -> str:
        return self.value