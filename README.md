# remotia

remotia lets you describe video streaming and remote rendering software as
pipelines of small, reusable processors running on `asyncio`.

- A **processor** (`remotia.traits.FrameProcessor`) has one coroutine,
  `process(frame_data)`. It does one job and returns the frame to pass it on,
  or `None` to stop it there.
- A **component** (`remotia.pipeline.Component`) runs a list of processors in
  a loop as one `asyncio` task. A component with no input queue creates a new
  frame on every turn with its `frame_factory` (by default `FrameData`).
- A **pipeline** (`remotia.pipeline.Pipeline`) links components with queues,
  so every frame that leaves one component enters the next.

A frame can be any object. Each processor only needs the few methods it calls
on it; these are described by the abstract classes in `remotia.traits`.

## Installation

```
pip install remotia
```

The package has no runtime dependencies. To run the test suite:

```
pip install "remotia[test]"
pytest
```

## A first pipeline

```python
import asyncio

from remotia.frame_data import FrameData
from remotia.pipeline import Component, Pipeline
from remotia.processors.ticker import Ticker
from remotia.profilation.timing import TimestampAdder, TimestampDiffCalculator


def report(frame):
    print("delay:", frame.get("delay"), "ms")
    return frame


async def main():
    pipeline = (
        Pipeline()
        .tag("demo")
        .link(
            Component(FrameData)
            .append(Ticker(33))
            .append(TimestampAdder("capture_timestamp"))
        )
        .link(
            Component(FrameData)
            .append(TimestampDiffCalculator("capture_timestamp", "delay"))
            .closure(report)
        )
    )
    await asyncio.gather(*pipeline.run())


asyncio.run(main())
```

`Pipeline.run()` must be called from inside a running event loop: it creates
one task per component and returns them. Components run until cancelled or
until a processor raises. To run several pipelines together, register them in
a `remotia.registry.PipelineRegistry` and await its `run()`; when one task
fails, the others are cancelled and the error is raised.

## Frames

`remotia.frame_data.FrameData` is a ready-made frame holding:

- integer statistics: `set`, `get` (raises `KeyError` when missing),
  `get_opt`, `has`, `merge_stats` and the read-only `stats` view;
- read-only buffers (`bytes`): `insert_readonly_buffer`,
  `extract_readonly_buffer`, `get_readonly_buffer`, `has_readonly_buffer`;
- writable buffers (`bytearray`): `insert_writable_buffer`,
  `extract_writable_buffer`, `get_writable_buffer`, `has_writable_buffer`,
  `writable_buffer_keys`;
- a `drop_reason` attribute, a `remotia.drop_reason.DropReason` or `None`;
- `clone_without_buffers()`, a copy with the statistics and drop reason only.

`FrameData` works with the timing processors, the loggers, the CSV serializer,
the frame dumper and the threshold and timestamp droppers as far as reading
statistics goes. Processors that need other methods (`push`/`pull`,
`get_ref`, `get_mut_ref`, `report_error`/`get_error`) expect a frame class of
your own.

For buffer slots, the `buffers_map` class decorator adds `push` and `pull`
over a mapping field and registers the class as `PullableFrameProperties`:

```python
from dataclasses import dataclass, field

from remotia.buffers.allocator import BufferAllocator, buffers_map


@buffers_map("buffers")
@dataclass
class Frame:
    buffers: dict = field(default_factory=dict)


allocator = BufferAllocator("pixels", 1024)  # pushes bytearray(1024) into each frame
```

## What is in the box

| Module | Contents |
| --- | --- |
| `remotia.traits` | `FrameProcessor`, `FrameProperties`, `PullableFrameProperties`, `BorrowFrameProperties`, `BorrowMutFrameProperties`, `FrameError`, `OptionalFrameData` |
| `remotia.frame_data` | `FrameData` |
| `remotia.drop_reason` | `DropReason`; `str()` of a member gives its message |
| `remotia.pipeline` | `Pipeline`, `Component`, `PipelineFeeder` |
| `remotia.registry` | `PipelineRegistry` |
| `remotia.functional` | `Function`, `Closure`, `AsyncFunction`: turn callables into processors |
| `remotia.processors.containers` | `Sequential`, runs processors in order until one returns `None` |
| `remotia.processors.ticker` | `Ticker`, paces frames at a fixed interval in milliseconds |
| `remotia.processors.switches` | `Switch`, `CloneSwitch`, `OnErrorSwitch`, `PoolingSwitch`, `DepoolingSwitch` |
| `remotia.buffers.allocator` | `BufferAllocator`, `buffers_map` |
| `remotia.buffers.pool` | `BuffersPool`, `BufferBorrower`, `BufferRedeemer` |
| `remotia.buffers.pool_registry` | `PoolRegistry`, one pool per slot id |
| `remotia.profilation.timing` | `TimestampAdder`, `TimestampDiffCalculator`, `ProfiledSequential` |
| `remotia.profilation.frame_drop` | `ThresholdBasedFrameDropper`, `TimestampBasedFrameDropper` |
| `remotia.profilation.loggers` | `ConsoleAverageStatsLogger`, `ConsoleDropReasonLogger` (via `logging`) |
| `remotia.profilation.csv_output` | `CSVFrameDataSerializer`, one CSV row per frame |
| `remotia.profilation.frame_dump` | `RawFrameDumper`, writes a writable buffer to `<folder>/<id>.<extension>` |
| `remotia.transmission` | `TcpFrameSender`, `TcpFrameReceiver` over asyncio streams |
| `remotia.capture.y4m` | `Y4MFrameCapturer`, appends the Y, U and V planes of each frame of a Y4M file |
| `remotia.helpers` | `now_timestamp`, `parse_canvas_resolution_str`, `vec_avg`, `field_vec` |
| `remotia.messages` | `FrameBody`, `FrameHeader`, `FrameFragment`, `RemVSPFrameHeader`, `RemVSPFrameFragment`, `HighFrameDelay` |

## Routing frames between pipelines

Switches hand frames to another pipeline through its feeder, so the target
pipeline must be made `feedable()` before the switch is built:

- `Switch` moves every frame to the target and stops it in the current component.
- `CloneSwitch` sends a deep copy to the target and passes the original on.
- `OnErrorSwitch` moves frames whose `get_error()` is not `None`; after
  `detect(error)` calls, only those errors are diverted.
- `PoolingSwitch` picks a random entry, stores its key in the frame with
  `set(property_key, key)` and sends the frame there.
- `DepoolingSwitch` reads `get(property_key)` and sends the frame to the
  matching entry; a missing property or entry raises `KeyError`.

```python
from dataclasses import dataclass
from typing import Optional

from remotia.drop_reason import DropReason
from remotia.pipeline import Component, Pipeline
from remotia.processors.switches import OnErrorSwitch


@dataclass
class Frame:
    error: Optional[DropReason] = None

    def report_error(self, error):
        self.error = error

    def get_error(self):
        return self.error


error_pipeline = Pipeline().feedable().link(Component(Frame).closure(print))
switch = OnErrorSwitch(error_pipeline).detect(DropReason.STALE_FRAME)
```

## Buffer pools

`BuffersPool(slot_id, pool_size, buffer_size)` holds `pool_size` buffers,
which start as empty `bytearray`s. Its `borrower()` pushes a free buffer into
the frame under `slot_id`, waiting for one to be redeemed; a `soft()` borrower
passes the frame on without a buffer instead. Its `redeemer()` pulls the
buffer out of the frame, clears it and returns it to the pool; without the
buffer a normal redeemer raises `KeyError`, a `soft()` one lets the frame
through. Pools must be created where an event loop can be used.

## What it does not do

remotia moves frames between processors; it does not grab the screen, show
frames in a window, encode or decode video, or serialise frame objects into
bytes. Frames enter a pipeline from a Y4M file, a TCP stream, a feeder or
your own processors, and leave it the same way.