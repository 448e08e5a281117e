"""Pipelines of components connected by asynchronous queues."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional

from .frame_data import FrameData
from .functional import Closure
from .traits import FrameProcessor

log = logging.getLogger(__name__)


class PipelineFeeder:
    """Pushes frames into the head of a feedable pipeline."""

    def __init__(self, queue: asyncio.Queue) -> None:
        self._queue = queue

    def feed(self, frame_data: Any) -> None:
        self._queue.put_nowait(frame_data)


class Component:
    """A chain of processors run as one task.

    A component without an input queue creates its own frames with
    ``frame_factory``; otherwise it waits for frames from the previous one.
    """

    def __init__(self, frame_factory: Callable[[], Any] = FrameData) -> None:
        self._processors: list[FrameProcessor] = []
        self._receiver: Optional[asyncio.Queue] = None
        self._sender: Optional[asyncio.Queue] = None
        self._tag: Optional[str] = None
        self._frame_factory = frame_factory

    @classmethod
    def singleton(
        cls, processor: FrameProcessor, frame_factory: Callable[[], Any] = FrameData
    ) -> "Component":
        return cls(frame_factory).append(processor)

    def append(self, processor: FrameProcessor) -> "Component":
        self._processors.append(processor)
        return self

    def closure(self, function: Callable[[Any], Any]) -> "Component":
        """Append a processor that applies ``function`` to each frame."""
        return self.append(Closure(function))

    def tag(self, tag: str) -> "Component":
        self._tag = tag
        return self

    def _set_sender(self, queue: asyncio.Queue) -> None:
        self._sender = queue

    def _set_receiver(self, queue: asyncio.Queue) -> None:
        self._receiver = queue

    def launch(self) -> asyncio.Task:
        """Start processing frames in a task of the running event loop."""
        return asyncio.create_task(self._run())

    async def _run(self) -> None:
        while True:
            if self._receiver is not None:
                frame_data = await self._receiver.get()
            else:
                log.debug("[%s] No receiver registered, creating an empty frame", self._tag or "")
                frame_data = self._frame_factory()

            for processor in self._processors:
                frame_data = await processor.process(frame_data)
                if frame_data is None:
                    break

            if self._sender is not None and frame_data is not None:
                self._sender.put_nowait(frame_data)

            await asyncio.sleep(0)


class Pipeline:
    """An ordered chain of components, each passing frames to the next."""

    def __init__(self) -> None:
        self._components: list[Component] = []
        self._feeding_queue: Optional[asyncio.Queue] = None
        self._tag = ""
        self._bound = False
        self._to_be_feedable = False

    @classmethod
    def singleton(cls, component: Component) -> "Pipeline":
        return cls().link(component)

    def link(self, component: Component) -> "Pipeline":
        self._components.append(component)
        return self

    def tag(self, tag: str) -> "Pipeline":
        self._tag = tag
        return self

    def feedable(self) -> "Pipeline":
        """Let frames be pushed into the head component from outside."""
        self._to_be_feedable = True
        return self

    def get_feeder(self) -> PipelineFeeder:
        if self._to_be_feedable:
            self._make_feedable()
        if self._feeding_queue is None:
            raise RuntimeError(f"[{self._tag}] Pipeline is not feedable")
        return PipelineFeeder(self._feeding_queue)

    def run(self) -> list[asyncio.Task]:
        """Launch every component in the running event loop; return their tasks."""
        log.info("[%s] Launching tasks...", self._tag)
        if not self._bound:
            self._bind()
        if self._to_be_feedable:
            self._make_feedable()
        return [component.launch() for component in self._components]

    def _bind(self) -> None:
        log.info("[%s] Binding queues...", self._tag)
        if not self._components:
            raise ValueError(f"[{self._tag}] Pipeline has no components")
        for source, destination in zip(self._components, self._components[1:]):
            queue: asyncio.Queue = asyncio.Queue()
            source._set_sender(queue)
            destination._set_receiver(queue)
        self._bound = True

    def _make_feedable(self) -> None:
        if not self._components:
            raise ValueError(f"[{self._tag}] Pipeline has no components to feed")
        queue: asyncio.Queue = asyncio.Queue()
        self._feeding_queue = queue
        self._components[0]._set_receiver(queue)
        self._to_be_feedable = False