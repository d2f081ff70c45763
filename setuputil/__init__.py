"""Helpers for binary installer data: integer math, byte order, flag sets, ANSI parsing and output formatting."""

__version__ = "0.1.0"
__all__ = ["ansi", "endian", "flags", "mathutil", "output"]