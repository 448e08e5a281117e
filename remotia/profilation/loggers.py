"""Processors that periodically log statistics about the frames going by."""

from __future__ import annotations

import logging
import time
from typing import Any, Hashable, Optional

from ..drop_reason import DropReason
from ..helpers import vec_avg
from ..traits import FrameProcessor

log = logging.getLogger(__name__)


def _lookup(frame_data: Any, key: Any) -> Any:
    try:
        return frame_data.get(key)
    except KeyError:
        return None


class ConsoleAverageStatsLogger(FrameProcessor[Any]):
    """Logs, once per round, the average of selected frame statistics.

    ``round_duration`` is given in seconds.
    """

    def __init__(self, round_duration: float = 1.0) -> None:
        self._header: Optional[str] = None
        self._round_duration = round_duration
        self._round_start = time.perf_counter()
        self._logged_stats: dict[Hashable, list[Any]] = {}

    def header(self, header: str) -> "ConsoleAverageStatsLogger":
        self._header = header
        return self

    def log(self, key: Hashable) -> "ConsoleAverageStatsLogger":
        self._logged_stats[key] = []
        return self

    def _print_round_stats(self) -> None:
        if self._header is not None:
            log.info("%s", self._header)
        for key, values in self._logged_stats.items():
            if not values:
                log.warning("Unable to print %r values: no frames logged in this round", key)
                continue
            log.info("Average %r: %r", key, vec_avg(values))

    def _reset_round(self) -> None:
        for values in self._logged_stats.values():
            values.clear()
        self._round_start = time.perf_counter()

    async def process(self, frame_data: Any) -> Optional[Any]:
        for key, values in self._logged_stats.items():
            value = _lookup(frame_data, key)
            if value is not None:
                values.append(value)

        if time.perf_counter() - self._round_start >= self._round_duration:
            self._print_round_stats()
            self._reset_round()
        return frame_data


class ConsoleDropReasonLogger(FrameProcessor[Any]):
    """Logs, once per round, how many frames were dropped and why.

    ``round_duration`` is given in seconds.
    """

    def __init__(self, round_duration: float = 1.0) -> None:
        self._header: Optional[str] = None
        self._types_to_log: list[DropReason] = []
        self._round_duration = round_duration
        self._round_start = time.perf_counter()
        self._logged_reasons: list[DropReason] = []

    def header(self, header: str) -> "ConsoleDropReasonLogger":
        self._header = header
        return self

    def log(self, value: DropReason) -> "ConsoleDropReasonLogger":
        self._types_to_log.append(value)
        return self

    def _print_round_stats(self) -> None:
        if self._header is not None:
            log.info("%s", self._header)

        dropped_frames_count = len(self._logged_reasons)
        if dropped_frames_count == 0:
            log.info("No successfully transmitted frames")
            return
        log.info("Dropped frames: %d", dropped_frames_count)

        for reason_type in self._types_to_log:
            count = self._logged_reasons.count(reason_type)
            if count > 0:
                log.info("%s: %d", reason_type, count)

    def _reset_round(self) -> None:
        self._logged_reasons.clear()
        self._round_start = time.perf_counter()

    async def process(self, frame_data: Any) -> Optional[Any]:
        reason = frame_data.drop_reason
        if reason is None:
            return frame_data

        log.debug("Logging frame drop reason: %r", reason)
        self._logged_reasons.append(reason)

        if time.perf_counter() - self._round_start >= self._round_duration:
            self._print_round_stats()
            self._reset_round()
        return frame_data