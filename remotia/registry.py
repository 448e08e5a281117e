"""A registry of named pipelines that run together."""

from __future__ import annotations

import asyncio
from typing import Any, Hashable

from .pipeline import Pipeline


class PipelineRegistry:
    """Holds pipelines by identifier and runs them all at once."""

    def __init__(self) -> None:
        self._pipelines: dict[Hashable, Pipeline] = {}

    def register_empty(self, id: Hashable) -> None:
        self._pipelines[id] = Pipeline()

    def register(self, id: Hashable, pipeline: Pipeline) -> None:
        self._pipelines[id] = pipeline

    def get(self, id: Hashable) -> Pipeline:
        try:
            return self._pipelines[id]
        except KeyError:
            raise KeyError(f"No pipeline with ID {id!r} found in the registry") from None

    async def run(self) -> None:
        """Run every registered pipeline until one of them fails.

        The registry is emptied; when a component fails, all other tasks are
        cancelled and the error is raised.
        """
        pipelines = list(self._pipelines.values())
        self._pipelines.clear()

        tasks: list[asyncio.Task[Any]] = []
        try:
            for pipeline in pipelines:
                tasks.extend(pipeline.run())
            await asyncio.gather(*tasks)
        finally:
            for task in tasks:
                task.cancel()
            if tasks:
                await asyncio.gather(*tasks, return_exceptions=True)