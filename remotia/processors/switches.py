"""Processors that divert frames into other pipelines."""

from __future__ import annotations

import copy
import logging
import random
from typing import Any, Generic, Hashable, Optional, TypeVar

from ..pipeline import Pipeline, PipelineFeeder
from ..traits import FrameProcessor

log = logging.getLogger(__name__)

F = TypeVar("F")
E = TypeVar("E")


class Switch(FrameProcessor[F]):
    """Moves every frame into another pipeline."""

    def __init__(self, destination_pipeline: Pipeline) -> None:
        self._feeder = destination_pipeline.get_feeder()

    async def process(self, frame_data: F) -> Optional[F]:
        self._feeder.feed(frame_data)
        return None


class OnErrorSwitch(FrameProcessor[F], Generic[F, E]):
    """Moves frames carrying an error into another pipeline.

    With no errors registered through :meth:`detect`, any error diverts the
    frame; otherwise only the registered ones do.
    """

    def __init__(self, destination_pipeline: Pipeline) -> None:
        self._feeder = destination_pipeline.get_feeder()
        self._detected_errors: list[E] = []

    def detect(self, error: E) -> "OnErrorSwitch[F, E]":
        self._detected_errors.append(error)
        return self

    async def process(self, frame_data: F) -> Optional[F]:
        error = frame_data.get_error()
        if error is not None and (not self._detected_errors or error in self._detected_errors):
            log.debug("Diverting frame with error %s", error)
            self._feeder.feed(frame_data)
            return None
        return frame_data


class PoolingSwitch(FrameProcessor[F]):
    """Sends each frame to a randomly chosen pipeline, recording its key."""

    def __init__(self, property_key: Any, rng: Optional[random.Random] = None) -> None:
        self._property_key = property_key
        self._rng = rng if rng is not None else random.Random()
        self._entries: list[tuple[Any, PipelineFeeder]] = []

    def entry(self, key: Any, pipeline: Pipeline) -> "PoolingSwitch[F]":
        self._entries.append((key, pipeline.get_feeder()))
        return self

    async def process(self, frame_data: F) -> Optional[F]:
        if not self._entries:
            raise RuntimeError("Pooling switch has no entries")
        key, feeder = self._rng.choice(self._entries)
        frame_data.set(self._property_key, key)
        feeder.feed(frame_data)
        return None


class DepoolingSwitch(FrameProcessor[F]):
    """Sends each frame to the pipeline named by one of its properties."""

    def __init__(self, property_key: Any) -> None:
        self._property_key = property_key
        self._entries: dict[Hashable, PipelineFeeder] = {}

    def entry(self, key: Hashable, pipeline: Pipeline) -> "DepoolingSwitch[F]":
        self._entries[key] = pipeline.get_feeder()
        return self

    async def process(self, frame_data: F) -> Optional[F]:
        key = frame_data.get(self._property_key)
        if key is None:
            raise KeyError(f"Frame has no property {self._property_key!r}")
        try:
            feeder = self._entries[key]
        except KeyError:
            raise KeyError(f"No depooling entry for key {key!r}") from None
        feeder.feed(frame_data)
        return None


class CloneSwitch(FrameProcessor[F]):
    """Sends a copy of every frame to another pipeline and passes the original on."""

    def __init__(self, destination_pipeline: Pipeline) -> None:
        self._feeder = destination_pipeline.get_feeder()

    async def process(self, frame_data: F) -> Optional[F]:
        self._feeder.feed(copy.deepcopy(frame_data))
        return frame_data