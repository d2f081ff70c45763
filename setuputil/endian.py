"""Loading and storing fixed-width integers in a given byte order."""

from __future__ import annotations

import enum
import sys
from typing import Iterable, List

__all__ = [
    "ByteOrder",
    "byteswap",
    "load",
    "load_array",
    "store",
    "store_array",
]


class ByteOrder(enum.Enum):
    """Byte order of stored integers."""

    LITTLE = "little"
    BIG = "big"

    @classmethod
    def native(cls) -> "ByteOrder":
        """Byte order of the running machine."""
        return cls(sys.byteorder)


def _check_width(width: int) -> None:
    if width <= 0:
        raise ValueError(f"width must be a positive number of bytes, got {width}")


def _truncate(value: int, width: int) -> int:
    return value & ((1 << (8 * width)) - 1)


def byteswap(value: int, width: int, signed: bool = False) -> int:
    """Reverse the byte order of a ``width``-byte integer."""
    _check_width(width)
    raw = _truncate(value, width).to_bytes(width, "little")
    return int.from_bytes(raw, "big", signed=signed)


def load(
    buffer: bytes,
    width: int,
    order: ByteOrder = ByteOrder.LITTLE,
    signed: bool = False,
) -> int:
    """Read one ``width``-byte integer from the start of ``buffer``."""
    _check_width(width)
    if len(buffer) < width:
        raise ValueError(f"need {width} bytes, buffer holds {len(buffer)}")
    return int.from_bytes(bytes(buffer[:width]), order.value, signed=signed)


def load_array(
    buffer: bytes,
    width: int,
    count: int,
    order: ByteOrder = ByteOrder.LITTLE,
    signed: bool = False,
) -> List[int]:
    """Read ``count`` consecutive ``width``-byte integers from ``buffer``."""
    _check_width(width)
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    needed = width * count
    if len(buffer) < needed:
        raise ValueError(f"need {needed} bytes, buffer holds {len(buffer)}")
    view = memoryview(bytes(buffer[:needed]))
    return [
        int.from_bytes(view[offset:offset + width], order.value, signed=signed)
        for offset in range(0, needed, width)
    ]


def store(value: int, width: int, order: ByteOrder = ByteOrder.LITTLE) -> bytes:
    """Encode ``value`` as ``width`` bytes, truncating to the width."""
    _check_width(width)
    return _truncate(value, width).to_bytes(width, order.value)


def store_array(
    values: Iterable[int], width: int, order: ByteOrder = ByteOrder.LITTLE
) -> bytes:
    """Encode each value as ``width`` bytes, packed without padding."""
    _check_width(width)
    return b"".join(store(value, width, order) for value in values)