"""Type-safe sets of enum flags and name formatting for enums and flag sets."""

from __future__ import annotations

import enum
from typing import Dict, Iterator, Type, Union

__all__ = ["FlagSet", "format_enum", "format_flags"]

_EnumType = Type[enum.Enum]
_Operand = Union["FlagSet", enum.Enum]


def _bit_positions(enum_type: _EnumType) -> Dict[enum.Enum, int]:
    """Map each member of ``enum_type`` to its bit position in definition order."""
    return {member: position for position, member in enumerate(enum_type)}


def _display_name(member: enum.Enum) -> str:
    label = getattr(member, "label", None)
    return label if isinstance(label, str) else member.name


class FlagSet:
    """An immutable set of members of one enum, stored as a bit mask.

    Each member occupies the bit given by its position in the enum's
    definition order.
    """

    __slots__ = ("_enum_type", "_positions", "_mask")

    def __init__(self, enum_type: _EnumType, *args: _Operand) -> None:
        self._enum_type = enum_type
        self._positions = _bit_positions(enum_type)
        mask = 0
        for arg in args:
            mask |= self._coerce(arg)
        self._mask = mask

    @classmethod
    def _from_mask(cls, enum_type: _EnumType, mask: int) -> "FlagSet":
        result = cls(enum_type)
        result._mask = mask & result._full_mask
        return result

    @classmethod
    def from_bits(cls, enum_type: _EnumType, bits: int) -> "FlagSet":
        """Build a flag set from a raw bit mask, dropping bits beyond the enum."""
        if bits < 0:
            raise ValueError(f"bit mask must not be negative, got {bits}")
        return cls._from_mask(enum_type, bits)

    @classmethod
    def all(cls, enum_type: _EnumType) -> "FlagSet":
        """Return the set holding every member of ``enum_type``."""
        return cls._from_mask(enum_type, (1 << len(enum_type)) - 1)

    @property
    def enum_type(self) -> _EnumType:
        return self._enum_type

    @property
    def bits(self) -> int:
        """The raw bit mask."""
        return self._mask

    @property
    def _full_mask(self) -> int:
        return (1 << len(self._positions)) - 1

    def _coerce(self, other: _Operand) -> int:
        if isinstance(other, FlagSet):
            if other._enum_type is not self._enum_type:
                raise TypeError(
                    f"cannot combine flags of {other._enum_type.__name__} "
                    f"with flags of {self._enum_type.__name__}"
                )
            return other._mask
        if isinstance(other, enum.Enum):
            try:
                return 1 << self._positions[other]
            except KeyError:
                raise TypeError(
                    f"{other!r} is not a member of {self._enum_type.__name__}"
                ) from None
        raise TypeError(f"expected a {self._enum_type.__name__} flag, got {other!r}")

    def has(self, flag: enum.Enum) -> bool:
        """Return True if ``flag`` is set."""
        return bool(self._mask & self._coerce(flag))

    def has_all(self, other: _Operand) -> bool:
        """Return True if every flag in ``other`` is set."""
        wanted = self._coerce(other)
        return (self._mask & wanted) == wanted

    def __contains__(self, flag: enum.Enum) -> bool:
        return self.has(flag)

    def __bool__(self) -> bool:
        return self._mask != 0

    def __len__(self) -> int:
        return bin(self._mask).count("1")

    def __iter__(self) -> Iterator[enum.Enum]:
        for member, position in self._positions.items():
            if self._mask & (1 << position):
                yield member

    def _combine(self, other: _Operand, mask: int) -> "FlagSet":
        return FlagSet._from_mask(self._enum_type, mask)

    def __and__(self, other: _Operand) -> "FlagSet":
        try:
            bits = self._coerce(other)
        except TypeError:
            return NotImplemented
        return self._combine(other, self._mask & bits)

    def __or__(self, other: _Operand) -> "FlagSet":
        try:
            bits = self._coerce(other)
        except TypeError:
            return NotImplemented
        return self._combine(other, self._mask | bits)

    def __xor__(self, other: _Operand) -> "FlagSet":
        try:
            bits = self._coerce(other)
        except TypeError:
            return NotImplemented
        return self._combine(other, self._mask ^ bits)

    __rand__ = __and__
    __ror__ = __or__
    __rxor__ = __xor__

    def __invert__(self) -> "FlagSet":
        return FlagSet._from_mask(self._enum_type, ~self._mask & self._full_mask)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FlagSet):
            return self._enum_type is other._enum_type and self._mask == other._mask
        if isinstance(other, enum.Enum) and other in self._positions:
            return self._mask == 1 << self._positions[other]
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._enum_type, self._mask))

    def __repr__(self) -> str:
        members = ", ".join(member.name for member in self)
        return f"FlagSet({self._enum_type.__name__}: {members or 'none'})"

    def __str__(self) -> str:
        return format_flags(self)


def format_enum(enum_type: _EnumType, value: Union[enum.Enum, int]) -> str:
    """Return the display name of ``value``, or ``(unknown:N)`` if out of range.

    An integer ``value`` is taken as a position in the enum's definition order.
    """
    members = list(enum_type)
    if isinstance(value, enum.Enum):
        if value in members:
            return _display_name(value)
        raise TypeError(f"{value!r} is not a member of {enum_type.__name__}")
    if 0 <= value < len(members):
        return _display_name(members[value])
    return f"(unknown:{int(value)})"


def format_flags(flags: FlagSet) -> str:
    """Return the comma-separated names of the set flags, or ``(none)``."""
    if not flags:
        return "(none)"
    return ", ".join(_display_name(member) for member in flags)