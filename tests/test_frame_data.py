import pytest

from remotia.drop_reason import DropReason
from remotia.frame_data import FrameData


def test_set_and_get_stat():
    frame = FrameData()
    frame.set("capture_timestamp", 1234)
    assert frame.get("capture_timestamp") == 1234
    assert frame.has("capture_timestamp")


def test_get_missing_stat_raises():
    frame = FrameData()
    with pytest.raises(KeyError, match="Missing key 'absent'"):
        frame.get("absent")


def test_get_opt_missing_is_none():
    frame = FrameData()
    assert frame.get_opt("absent") is None
    assert not frame.has("absent")


def test_stats_view_is_read_only():
    frame = FrameData()
    frame.set("a", 1)
    assert dict(frame.stats) == {"a": 1}
    with pytest.raises(TypeError):
        frame.stats["b"] = 2


def test_merge_stats_overwrites():
    frame = FrameData()
    frame.set("a", 1)
    frame.set("b", 2)
    frame.merge_stats({"b": 20, "c": 30})
    assert dict(frame.stats) == {"a": 1, "b": 20, "c": 30}


def test_readonly_buffer_insert_and_extract():
    frame = FrameData()
    frame.insert_readonly_buffer("encoded", b"abc")
    assert frame.has_readonly_buffer("encoded")
    assert frame.get_readonly_buffer("encoded") == b"abc"
    assert frame.extract_readonly_buffer("encoded") == b"abc"
    assert frame.extract_readonly_buffer("encoded") is None
    assert not frame.has_readonly_buffer("encoded")


def test_get_missing_readonly_buffer_raises():
    frame = FrameData()
    with pytest.raises(KeyError, match="Missing key 'raw'"):
        frame.get_readonly_buffer("raw")


def test_writable_buffer_is_modified_in_place():
    frame = FrameData()
    frame.insert_writable_buffer("raw", bytearray(b"xy"))
    frame.get_writable_buffer("raw").extend(b"z")
    assert frame.extract_writable_buffer("raw") == bytearray(b"xyz")
    assert frame.get_writable_buffer("raw") is None
    assert not frame.has_writable_buffer("raw")


def test_writable_buffer_keys():
    frame = FrameData()
    frame.insert_writable_buffer("raw", bytearray())
    frame.insert_writable_buffer("encoded", bytearray())
    assert sorted(frame.writable_buffer_keys()) == ["encoded", "raw"]


def test_clone_without_buffers():
    frame = FrameData()
    frame.set("latency", 5)
    frame.drop_reason = DropReason.STALE_FRAME
    frame.insert_writable_buffer("raw", bytearray(b"data"))
    frame.insert_readonly_buffer("encoded", b"data")

    clone = frame.clone_without_buffers()
    assert clone.get("latency") == 5
    assert clone.drop_reason is DropReason.STALE_FRAME
    assert clone.writable_buffer_keys() == []
    assert not clone.has_readonly_buffer("encoded")

    clone.set("latency", 6)
    assert frame.get("latency") == 5


def test_str_lists_contents():
    frame = FrameData()
    frame.set("latency", 5)
    frame.insert_writable_buffer("raw", bytearray())
    frame.drop_reason = DropReason.TIMEOUT
    text = str(frame)
    assert "Writable buffers: ['raw']" in text
    assert "Stats: {'latency': 5}" in text
    assert "Drop reason: TIMEOUT" in text


def test_str_of_empty_frame():
    assert str(FrameData()) == (
        "{ Read-only buffers: [], Writable buffers: [], Stats: {}, Drop reason: None }"
    )