"""Interfaces implemented by frame processors and frame containers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

F = TypeVar("F")
K = TypeVar("K")
V = TypeVar("V")
D = TypeVar("D")
E = TypeVar("E")


class FrameProcessor(ABC, Generic[F]):
    """A pipeline stage that transforms a frame or stops it."""

    @abstractmethod
    async def process(self, frame_data: F) -> Optional[F]:
        """Process a frame; return it to pass it on, or None to stop it here."""


class FrameProperties(ABC, Generic[K, V]):
    """A frame holding values that can be set and read back."""

    @abstractmethod
    def set(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``."""

    @abstractmethod
    def get(self, key: K) -> Optional[V]:
        """Return the value under ``key``, or None if there is none."""


class PullableFrameProperties(ABC, Generic[K, V]):
    """A frame whose values can be moved in and out."""

    @abstractmethod
    def push(self, key: K, value: V) -> None:
        """Move ``value`` into the frame under ``key``."""

    @abstractmethod
    def pull(self, key: K) -> Optional[V]:
        """Remove and return the value under ``key``, or None if there is none."""


class OptionalFrameData(ABC, Generic[D]):
    """A frame that may carry a piece of data of a given kind."""

    @abstractmethod
    def find(self) -> Optional[D]:
        """Return the data, or None if the frame carries none."""


class BorrowFrameProperties(ABC, Generic[K, V]):
    """A frame that hands out its values for reading."""

    @abstractmethod
    def get_ref(self, key: K) -> Optional[V]:
        """Return the value under ``key`` without removing it."""


class BorrowMutFrameProperties(ABC, Generic[K, V]):
    """A frame that hands out its values for in-place modification."""

    @abstractmethod
    def get_mut_ref(self, key: K) -> Optional[V]:
        """Return the mutable value under ``key`` without removing it."""


class FrameError(ABC, Generic[E]):
    """A frame that can carry an error."""

    @abstractmethod
    def report_error(self, error: E) -> None:
        """Attach ``error`` to the frame."""

    @abstractmethod
    def get_error(self) -> Optional[E]:
        """Return the attached error, or None."""