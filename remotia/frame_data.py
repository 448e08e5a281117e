"""A general-purpose frame carrying buffers, statistics and a drop reason."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from .drop_reason import DropReason


def _missing_key_msg(key: str) -> str:
    return f"Missing key '{key}'"


class FrameData:
    """Frame with read-only and writable buffers, integer stats and a drop reason."""

    def __init__(self) -> None:
        self._readonly_buffers: dict[str, bytes] = {}
        self._writable_buffers: dict[str, bytearray] = {}
        self._stats: dict[str, int] = {}
        self.drop_reason: Optional[DropReason] = None

    # Stats

    def set(self, key: str, value: int) -> None:
        """Store a statistic."""
        self._stats[key] = value

    def get(self, key: str) -> int:
        """Return a statistic; raise KeyError if it is missing."""
        try:
            return self._stats[key]
        except KeyError:
            raise KeyError(_missing_key_msg(key)) from None

    def get_opt(self, key: str) -> Optional[int]:
        """Return a statistic, or None if it is missing."""
        return self._stats.get(key)

    def has(self, key: str) -> bool:
        return key in self._stats

    @property
    def stats(self) -> Mapping[str, int]:
        """A read-only view of all statistics."""
        return MappingProxyType(self._stats)

    def merge_stats(self, other_stats: Mapping[str, int]) -> None:
        """Add ``other_stats``, overwriting statistics with the same key."""
        self._stats.update(other_stats)

    # Buffers

    def insert_readonly_buffer(self, key: str, buffer: bytes) -> None:
        self._readonly_buffers[key] = bytes(buffer)

    def extract_readonly_buffer(self, key: str) -> Optional[bytes]:
        """Remove and return a read-only buffer, or None if missing."""
        return self._readonly_buffers.pop(key, None)

    def has_readonly_buffer(self, key: str) -> bool:
        return key in self._readonly_buffers

    def get_readonly_buffer(self, key: str) -> bytes:
        """Return a read-only buffer; raise KeyError if it is missing."""
        try:
            return self._readonly_buffers[key]
        except KeyError:
            raise KeyError(_missing_key_msg(key)) from None

    def insert_writable_buffer(self, key: str, buffer: bytearray) -> None:
        self._writable_buffers[key] = buffer

    def extract_writable_buffer(self, key: str) -> Optional[bytearray]:
        """Remove and return a writable buffer, or None if missing."""
        return self._writable_buffers.pop(key, None)

    def get_writable_buffer(self, key: str) -> Optional[bytearray]:
        """Return a writable buffer for in-place use, or None if missing."""
        return self._writable_buffers.get(key)

    def has_writable_buffer(self, key: str) -> bool:
        return key in self._writable_buffers

    def writable_buffer_keys(self) -> list[str]:
        return list(self._writable_buffers)

    # Other

    def clone_without_buffers(self) -> "FrameData":
        """Return a copy holding the stats and drop reason but no buffers."""
        clone = FrameData()
        clone._stats = dict(self._stats)
        clone.drop_reason = self.drop_reason
        return clone

    def __str__(self) -> str:
        reason = self.drop_reason.name if self.drop_reason is not None else None
        return (
            f"{{ Read-only buffers: {list(self._readonly_buffers)}, "
            f"Writable buffers: {list(self._writable_buffers)}, "
            f"Stats: {self._stats}, Drop reason: {reason} }}"
        )