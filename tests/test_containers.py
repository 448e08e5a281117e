import pytest

from remotia.functional import Closure, Function
from remotia.processors.containers import Sequential


@pytest.mark.asyncio
async def test_empty_sequential_passes_frame_through():
    frame = {"value": 1}
    result = await Sequential().process(frame)
    assert result is frame


@pytest.mark.asyncio
async def test_processors_run_in_order():
    calls = []

    def first(frame):
        calls.append("first")
        frame.append("a")
        return frame

    def second(frame):
        calls.append("second")
        frame.append("b")
        return frame

    sequential = Sequential().append(Function(first)).append(Closure(second))
    result = await sequential.process([])
    assert result == ["a", "b"]
    assert calls == ["first", "second"]


@pytest.mark.asyncio
async def test_dropped_frame_stops_the_chain():
    calls = []

    def drop(frame):
        calls.append("drop")
        return None

    def never(frame):
        calls.append("never")
        return frame

    sequential = Sequential().append(Function(drop)).append(Function(never))
    result = await sequential.process([])
    assert result is None
    assert calls == ["drop"]


@pytest.mark.asyncio
async def test_sequential_can_nest():
    inner = Sequential().append(Function(lambda frame: frame + [1]))
    outer = Sequential().append(inner).append(Function(lambda frame: frame + [2]))
    assert await outer.process([]) == [1, 2]