"""Small helpers: timestamps, resolution parsing and averaging."""

from __future__ import annotations

import time
from typing import Any, Iterable, Sequence

_U32_MAX = 2**32 - 1


def now_timestamp() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def _parse_u32(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > _U32_MAX:
        raise ValueError("number too large to fit in target type")
    return value


def parse_canvas_resolution_str(arg: str) -> tuple[int, int]:
    """Parse a ``WIDTHxHEIGHT`` string into a (width, height) pair."""
    parts = arg.split("x")
    if len(parts) < 2:
        raise ValueError(f"Invalid canvas resolution '{arg}': expected WIDTHxHEIGHT")
    width_str, height_str = parts[0], parts[1]

    try:
        width = _parse_u32(width_str)
    except ValueError as error:
        raise ValueError(f"Unable to parse width '{width_str}': {error}") from error

    try:
        height = _parse_u32(height_str)
    except ValueError as error:
        raise ValueError(f"Unable to parse height '{height_str}': {error}") from error

    return width, height


def vec_avg(values: Sequence[Any]) -> Any:
    """Average of ``values``; integer division when all values are integers."""
    if not values:
        raise ValueError("cannot average an empty sequence")
    total = sum(values)
    if all(isinstance(value, int) for value in values):
        return total // len(values)
    return total / len(values)


def field_vec(items: Iterable[Any], field_name: str) -> list[Any]:
    """Collect the attribute ``field_name`` of every item."""
    return [getattr(item, field_name) for item in items]