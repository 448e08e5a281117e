"""Buffer allocation and buffer-map frames."""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

from ..traits import FrameProcessor, PullableFrameProperties

K = TypeVar("K")
F = TypeVar("F")
T = TypeVar("T", bound=type)

BuffersMap = dict[K, bytearray]


class BufferAllocator(FrameProcessor[F]):
    """Pushes a fresh zero-filled buffer of a fixed size into every frame."""

    def __init__(self, buffer_key: Any, size: int) -> None:
        if size < 0:
            raise ValueError("buffer size cannot be negative")
        self._buffer_key = buffer_key
        self._size = size

    def _allocate_buffer(self) -> bytearray:
        return bytearray(self._size)

    async def process(self, frame_data: F) -> Optional[F]:
        frame_data.push(self._buffer_key, self._allocate_buffer())
        return frame_data


def buffers_map(field_name: str) -> Callable[[T], T]:
    """Class decorator making the mapping in ``field_name`` the frame's buffers.

    The decorated class gains ``push`` and ``pull`` and counts as
    :class:`PullableFrameProperties`.
    """

    def decorate(cls: T) -> T:
        annotated = any(
            field_name in klass.__dict__.get("__annotations__", {}) for klass in cls.__mro__
        )
        if not annotated:
            raise TypeError(f"{cls.__name__} has no field named '{field_name}'")

        def push(self: Any, key: Any, value: bytearray) -> None:
            getattr(self, field_name)[key] = value

        def pull(self: Any, key: Any) -> Optional[bytearray]:
            return getattr(self, field_name).pop(key, None)

        cls.push = push
        cls.pull = pull
        PullableFrameProperties.register(cls)
        return cls

    return decorate