"""Formatting helpers for human-readable dumps of setup data."""

from __future__ import annotations

from typing import Any, Union

__all__ = [
    "BYTE_SIZE_UNITS",
    "quoted",
    "if_not_empty",
    "if_not_equal",
    "if_not_zero",
    "print_hex",
    "print_hex_bytes",
    "print_bytes",
]

BYTE_SIZE_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB")

_LONG_VALUE = 100


def _escape_char(char: str) -> str:
    code = ord(char)
    if code < 0x20 and char not in "\t\r\n":
        return f"<{code:02x}>"
    return char


def quoted(text: str) -> str:
    """Quote ``text``, showing control characters other than tab, CR and LF as ``<hh>``."""
    return '"' + "".join(_escape_char(char) for char in text) + '"'


def if_not_empty(name: str, value: str) -> str:
    """Return a ``name: value`` line, a size line for long values, or nothing if empty."""
    if len(value) > _LONG_VALUE:
        return f"{name}: {len(value)} bytes\n"
    if value:
        return f"{name}: {quoted(value)}\n"
    return ""


def if_not_equal(name: str, value: Any, excluded: Any) -> str:
    """Return a ``name: value`` line unless ``value`` equals ``excluded``."""
    if value != excluded:
        return f"{name}: {value}\n"
    return ""


def if_not_zero(name: str, value: Any) -> str:
    """Return a ``name: value`` line unless ``value`` is zero or an empty flag set."""
    if not value:
        return ""
    return f"{name}: {value}\n"


def print_hex(value: int) -> str:
    """Format a non-negative integer as ``0x`` followed by lower-case hex digits."""
    if value < 0:
        raise ValueError(f"cannot format negative value {value} as hex")
    return f"0x{value:x}"


def print_hex_bytes(data: Union[bytes, bytearray, memoryview, str]) -> str:
    """Format each byte of ``data`` as two lower-case hex digits."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return bytes(data).hex()


def print_bytes(value: Union[int, float], precision: int = 3) -> str:
    """Format a byte count with a binary unit, e.g. ``1.5 KiB``.

    ``precision`` is the number of significant digits shown when the
    number has a fractional part worth showing.
    """
    if value < 0:
        raise ValueError(f"byte count must not be negative, got {value}")
    whole = int(value)
    frac = int(1024 * (value - whole))

    unit = 0
    while whole >= 1024 and unit < len(BYTE_SIZE_UNITS) - 1:
        frac = whole % 1024
        whole //= 1024
        unit += 1

    if (
        (whole >= 100 and precision <= 3)
        or (whole >= 10 and precision <= 2)
        or precision <= 1
    ):
        number = str(whole)
    else:
        number = format(whole + frac / 1024, f".{precision}g")

    return f"{number} {BYTE_SIZE_UNITS[unit]}"