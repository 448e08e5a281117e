import asyncio
import logging

import pytest

from remotia.drop_reason import DropReason
from remotia.frame_data import FrameData
from remotia.profilation.loggers import ConsoleAverageStatsLogger, ConsoleDropReasonLogger

LOGGER = "remotia.profilation.loggers"


def _stats_frame(**stats):
    frame = FrameData()
    for key, value in stats.items():
        frame.set(key, value)
    return frame


def _dropped_frame(reason):
    frame = FrameData()
    frame.drop_reason = reason
    return frame


@pytest.mark.asyncio
async def test_average_logged_after_round(caplog):
    caplog.set_level(logging.INFO, logger=LOGGER)
    stats_logger = ConsoleAverageStatsLogger(round_duration=0.05).header("Stats").log("latency")
    for value in (10, 20):
        frame = _stats_frame(latency=value)
        assert await stats_logger.process(frame) is frame
    assert not any("Average" in message for message in caplog.messages)

    await asyncio.sleep(0.06)
    await stats_logger.process(_stats_frame(latency=30))
    assert "Stats" in caplog.messages
    assert "Average 'latency': 20" in caplog.messages


@pytest.mark.asyncio
async def test_rounds_are_reset(caplog):
    caplog.set_level(logging.INFO, logger=LOGGER)
    stats_logger = ConsoleAverageStatsLogger(round_duration=0.05).log("latency")
    await stats_logger.process(_stats_frame(latency=5))
    await asyncio.sleep(0.06)
    await stats_logger.process(_stats_frame(latency=5))
    caplog.clear()

    await stats_logger.process(_stats_frame(latency=100))
    await asyncio.sleep(0.06)
    await stats_logger.process(_stats_frame(latency=100))
    assert caplog.messages == ["Average 'latency': 100"]


@pytest.mark.asyncio
async def test_frames_without_key_are_skipped(caplog):
    caplog.set_level(logging.INFO, logger=LOGGER)
    stats_logger = ConsoleAverageStatsLogger(round_duration=0.05).log("latency").log("fps")
    await stats_logger.process(_stats_frame(latency=30))
    await stats_logger.process(_stats_frame())
    await asyncio.sleep(0.06)
    await stats_logger.process(_stats_frame())
    assert "Average 'latency': 30" in caplog.messages
    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert any("'fps'" in message for message in warnings)


@pytest.mark.asyncio
async def test_drop_reasons_counted_per_round(caplog):
    caplog.set_level(logging.INFO, logger=LOGGER)
    drop_logger = ConsoleDropReasonLogger(round_duration=0.05).header("Drops").log(
        DropReason.STALE_FRAME
    )
    await drop_logger.process(_dropped_frame(DropReason.STALE_FRAME))
    await drop_logger.process(_dropped_frame(DropReason.STALE_FRAME))
    await drop_logger.process(_dropped_frame(DropReason.TIMEOUT))
    await drop_logger.process(FrameData())
    assert caplog.messages == []

    await asyncio.sleep(0.06)
    frame = _dropped_frame(DropReason.STALE_FRAME)
    assert await drop_logger.process(frame) is frame
    assert caplog.messages[0] == "Drops"
    assert "Dropped frames: 4" in caplog.messages
    assert "Stale frame: 3" in caplog.messages
    assert not any(message.startswith("Timeout") for message in caplog.messages)


@pytest.mark.asyncio
async def test_frames_without_drop_reason_never_end_round(caplog):
    caplog.set_level(logging.INFO, logger=LOGGER)
    drop_logger = ConsoleDropReasonLogger(round_duration=0.0).log(DropReason.TIMEOUT)
    frame = FrameData()
    assert await drop_logger.process(frame) is frame
    assert caplog.messages == []