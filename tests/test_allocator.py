import enum
from dataclasses import dataclass, field

import pytest

from remotia.buffers.allocator import BufferAllocator, BuffersMap, buffers_map
from remotia.traits import PullableFrameProperties


class BufferType(enum.Enum):
    TEST = enum.auto()


class _TestFrameData(PullableFrameProperties):
    def __init__(self):
        self.buffers = {}

    def push(self, key, value):
        self.buffers[key] = value

    def pull(self, key):
        return self.buffers.pop(key, None)


def _plain_frame_class():
    @dataclass
    class _PlainFrame:
        buffers: BuffersMap[BufferType] = field(default_factory=dict)

    return _PlainFrame


@pytest.mark.asyncio
async def test_allocation():
    allocator = BufferAllocator(BufferType.TEST, 1024)
    dto = await allocator.process(_TestFrameData())
    buffer = dto.pull(BufferType.TEST)
    assert buffer is not None
    assert len(buffer) == 1024
    assert not any(buffer)


@pytest.mark.asyncio
async def test_each_frame_gets_its_own_buffer():
    allocator = BufferAllocator(BufferType.TEST, 16)
    first = (await allocator.process(_TestFrameData())).pull(BufferType.TEST)
    second = (await allocator.process(_TestFrameData())).pull(BufferType.TEST)
    first[0] = 7
    assert second[0] == 0


def test_negative_size_is_rejected():
    with pytest.raises(ValueError):
        BufferAllocator(BufferType.TEST, -1)


def test_buffers_map_adds_push_and_pull():
    mapped_frame = buffers_map("buffers")(_plain_frame_class())
    frame = mapped_frame()
    frame.push(BufferType.TEST, bytearray(b"abc"))
    assert frame.buffers == {BufferType.TEST: bytearray(b"abc")}
    assert frame.pull(BufferType.TEST) == bytearray(b"abc")
    assert frame.pull(BufferType.TEST) is None
    assert isinstance(frame, PullableFrameProperties)


@pytest.mark.asyncio
async def test_buffers_map_frame_works_with_allocator():
    mapped_frame = buffers_map("buffers")(_plain_frame_class())
    allocator = BufferAllocator(BufferType.TEST, 8)
    frame = await allocator.process(mapped_frame())
    assert frame.pull(BufferType.TEST) == bytearray(8)


def test_buffers_map_missing_field_raises():
    with pytest.raises(TypeError):
        buffers_map("missing")(_plain_frame_class())