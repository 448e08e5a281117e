import asyncio

import pytest

from remotia.functional import AsyncFunction, Closure, Function


@pytest.mark.asyncio
async def test_function_transforms_frame():
    processor = Function(lambda frame: frame + [1])
    assert await processor.process([0]) == [0, 1]


@pytest.mark.asyncio
async def test_function_can_drop_frame():
    processor = Function(lambda frame: None)
    assert await processor.process({"id": 1}) is None


@pytest.mark.asyncio
async def test_closure_keeps_state():
    seen = []

    def record(frame):
        seen.append(frame)
        return frame

    processor = Closure(record)
    assert await processor.process("a") == "a"
    assert await processor.process("b") == "b"
    assert seen == ["a", "b"]


@pytest.mark.asyncio
async def test_async_function_is_awaited():
    async def mark(frame):
        await asyncio.sleep(0)
        frame["marked"] = True
        return frame

    processor = AsyncFunction(mark)
    assert await processor.process({}) == {"marked": True}


@pytest.mark.asyncio
async def test_async_function_propagates_errors():
    async def fail(frame):
        raise RuntimeError("broken")

    with pytest.raises(RuntimeError, match="broken"):
        await AsyncFunction(fail).process({})