"""Parser for ANSI CSI escape sequences in a byte stream."""

from __future__ import annotations

import enum
from typing import Iterator, List, Optional, Tuple, Union

__all__ = ["CommandType", "AnsiConsoleParser", "read_codes"]

ESC = 0x1B
CSI = ord("[")
UTF8_CSI0 = 0xC2
UTF8_CSI1 = 0x9B
SEPARATOR = b";"


class CommandType(str, enum.Enum):
    """Final character of a CSI control sequence."""

    CUU = "A"  # Cursor Up
    CUD = "B"  # Cursor Down
    CUF = "C"  # Cursor Forward
    CUB = "D"  # Cursor Back
    CNL = "E"  # Cursor Next Line
    CPL = "F"  # Cursor Previous Line
    CHA = "G"  # Cursor Horizontal Absolute
    CUP = "H"  # Cursor Position
    ED = "J"  # Erase Display
    EL = "K"  # Erase in Line
    SU = "S"  # Scroll Up
    SD = "T"  # Scroll Down
    HVP = "f"  # Horizontal and Vertical Position
    SGR = "m"  # Select Graphic Rendition
    DSR = "n"  # Device Status Report
    SCP = "s"  # Save Cursor Position
    RCP = "u"  # Restore Cursor Position


def _is_start_byte(byte: int) -> bool:
    return byte in (ESC, UTF8_CSI0)


def _is_end_byte(byte: int) -> bool:
    return 64 <= byte < 127


def _parse_code(part: bytes) -> Optional[int]:
    if not part:
        return 0
    if not part.isdigit():
        return None
    return int(part)


def read_codes(codes: bytes) -> Iterator[Optional[int]]:
    """Yield the ``;``-separated codes of a command sequence.

    An empty code counts as 0; a code that is not a number yields None.
    A sequence always holds at least one code.
    """
    for part in bytes(codes).split(SEPARATOR):
        yield _parse_code(part)


class AnsiConsoleParser:
    """Split a byte stream into plain text and CSI escape commands.

    Escape sequences may span several calls to :meth:`write`. Subclasses
    override :meth:`handle_text` and :meth:`handle_command`; the default
    handlers record what they receive in :attr:`text` and :attr:`commands`.
    """

    def __init__(self) -> None:
        self._in_command = 0
        self._command = bytearray()
        self.text = bytearray()
        self.commands: List[Tuple[Union[CommandType, str], bytes]] = []

    def handle_text(self, text: bytes) -> None:
        """Receive a run of plain text."""
        self.text.extend(text)

    def handle_command(self, command: Union[CommandType, str], codes: bytes) -> None:
        """Receive a command; ``codes`` can be split with :func:`read_codes`."""
        self.commands.append((command, codes))

    def _read_command(self, data: bytes, pos: int) -> int:
        end = len(data)
        if pos == end:
            return end

        expected = CSI if self._in_command == ESC else UTF8_CSI1
        if not self._command and data[pos] != expected:
            if self._in_command != ESC:
                self.handle_text(bytes((self._in_command, data[pos])))
            self._in_command = 0
            return pos + 1

        search_from = pos if self._command else pos + 1
        cmd = next(
            (index for index in range(search_from, end) if _is_end_byte(data[index])),
            end,
        )

        if self._command or cmd == end:
            self._command.extend(data[pos:cmd])
            sequence = bytes(self._command)
        else:
            sequence = data[pos:cmd]

        if cmd == end:
            return end

        final = chr(data[cmd])
        try:
            command: Union[CommandType, str] = CommandType(final)
        except ValueError:
            command = final

        self.handle_command(command, sequence[1:])

        self._in_command = 0
        self._command.clear()
        return cmd + 1

    def write(self, data: Union[bytes, bytearray, memoryview, str]) -> int:
        """Parse ``data`` and return the number of bytes consumed."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        data = bytes(data)
        end = len(data)
        pos = 0

        if self._in_command:
            pos = self._read_command(data, pos)

        while pos < end:
            cmd = next(
                (index for index in range(pos, end) if _is_start_byte(data[index])),
                end,
            )
            if cmd > pos:
                self.handle_text(data[pos:cmd])
            if cmd == end:
                pos = end
                break
            self._in_command = data[cmd]
            pos = self._read_command(data, cmd + 1)

        return pos