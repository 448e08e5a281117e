"""Processors that mark frames as dropped by comparing statistics."""

from __future__ import annotations

import logging
from typing import Any, Generic, Optional, TypeVar

from ..traits import FrameProcessor

log = logging.getLogger(__name__)

F = TypeVar("F")
E = TypeVar("E")


def _required_stat(frame_data: Any, stat_id: str) -> Any:
    value = frame_data.get(stat_id)
    if value is None:
        raise KeyError(f"Missing key '{stat_id}'")
    return value


class ThresholdBasedFrameDropper(FrameProcessor[F], Generic[F, E]):
    """Reports an error on frames whose statistic exceeds a threshold."""

    def __init__(self, stat_id: str, threshold: Any, error: E) -> None:
        self._stat_id = stat_id
        self._threshold = threshold
        self._error = error

    async def process(self, frame_data: F) -> Optional[F]:
        value = _required_stat(frame_data, self._stat_id)
        if value > self._threshold:
            log.debug(
                "Dropping frame due to higher than threshold value %s > %s",
                value,
                self._threshold,
            )
            frame_data.report_error(self._error)
        return frame_data


class TimestampBasedFrameDropper(FrameProcessor[F], Generic[F, E]):
    """Reports an error on frames older than the newest one seen so far."""

    def __init__(self, stat_id: str, error: E) -> None:
        self._stat_id = stat_id
        self._error = error
        self._last_timestamp: Any = 0

    async def process(self, frame_data: F) -> Optional[F]:
        frame_timestamp = _required_stat(frame_data, self._stat_id)
        if frame_timestamp < self._last_timestamp:
            log.debug(
                "Dropping frame with timestamp %s (last rendered timestamp: %s)",
                frame_timestamp,
                self._last_timestamp,
            )
            frame_data.report_error(self._error)
        else:
            self._last_timestamp = frame_timestamp
        return frame_data