"""Integer helpers: rounding division, power-of-two checks, shifts and alignment."""

from __future__ import annotations

__all__ = [
    "ceildiv",
    "is_power_of_2",
    "mod_power_of_2",
    "safe_right_shift",
    "safe_left_shift",
    "rotl_fixed",
    "is_aligned_on",
]


def _mask(width: int) -> int:
    if width <= 0:
        raise ValueError(f"bit width must be positive, got {width}")
    return (1 << width) - 1


def ceildiv(num: int, denom: int) -> int:
    """Divide ``num`` by ``denom`` and round the result up."""
    return (num + (denom - 1)) // denom


def is_power_of_2(n: int) -> bool:
    """Return True if ``n`` is a positive power of two."""
    return n > 0 and (n & (n - 1)) == 0


def mod_power_of_2(a: int, b: int) -> int:
    """Compute ``a % b`` where ``b`` is known to be a power of two."""
    return a & (b - 1)


def safe_right_shift(value: int, bits: int, width: int) -> int:
    """Shift right, yielding 0 when ``bits`` reaches the type's ``width`` in bits."""
    mask = _mask(width)
    if bits >= width:
        return 0
    return (value & mask) >> bits


def safe_left_shift(value: int, bits: int, width: int) -> int:
    """Shift left within ``width`` bits, yielding 0 when ``bits`` reaches the width."""
    mask = _mask(width)
    if bits >= width:
        return 0
    return (value << bits) & mask


def rotl_fixed(x: int, y: int, width: int) -> int:
    """Rotate the ``width``-bit value ``x`` left by ``y`` bits."""
    mask = _mask(width)
    if not 0 <= y < width:
        raise ValueError(f"rotation {y} out of range for {width}-bit value")
    x &= mask
    if y == 0:
        return x
    return ((x << y) | (x >> (width - y))) & mask


def is_aligned_on(address: int, alignment: int) -> bool:
    """Return True if ``address`` is a multiple of ``alignment``."""
    if alignment <= 0:
        raise ValueError(f"alignment must be positive, got {alignment}")
    if alignment == 1:
        return True
    if is_power_of_2(alignment):
        return mod_power_of_2(address, alignment) == 0
    return address % alignment == 0