import enum

import pytest

from setuputil.flags import FlagSet, format_enum, format_flags


class Color(enum.Enum):
    RED = 10
    GREEN = 20
    BLUE = 30


class Shape(enum.Enum):
    CIRCLE = 1
    SQUARE = 2


class Labelled(enum.Enum):
    FIRST = "first-label"
    SECOND = "second-label"

    @property
    def label(self):
        return self.value


def test_has_reports_set_members():
    flags = FlagSet(Color, Color.RED, Color.BLUE)
    assert flags.has(Color.RED)
    assert flags.has(Color.BLUE)
    assert not flags.has(Color.GREEN)


def test_empty_set_is_false():
    assert not FlagSet(Color)
    assert FlagSet(Color, Color.GREEN)


def test_or_with_member_and_set():
    flags = FlagSet(Color, Color.RED) | Color.GREEN
    assert flags == FlagSet(Color, Color.RED, Color.GREEN)
    assert (Color.BLUE | flags) == FlagSet.all(Color)


def test_and_and_xor():
    a = FlagSet(Color, Color.RED, Color.GREEN)
    b = FlagSet(Color, Color.GREEN, Color.BLUE)
    assert (a & b) == FlagSet(Color, Color.GREEN)
    assert (a ^ b) == FlagSet(Color, Color.RED, Color.BLUE)


def test_invert_is_complement_within_enum():
    flags = FlagSet(Color, Color.RED)
    inverted = ~flags
    assert inverted == FlagSet(Color, Color.GREEN, Color.BLUE)
    assert ~inverted == flags
    assert (flags | inverted) == FlagSet.all(Color)
    assert not (flags & inverted)


def test_all_contains_every_member():
    everything = FlagSet.all(Color)
    assert list(everything) == list(Color)
    assert ~everything == FlagSet(Color)


def test_has_all():
    flags = FlagSet(Color, Color.RED, Color.BLUE)
    assert flags.has_all(FlagSet(Color, Color.RED, Color.BLUE))
    assert flags.has_all(Color.RED)
    assert not flags.has_all(FlagSet(Color, Color.RED, Color.GREEN))
    assert flags.has_all(FlagSet(Color))


def test_iteration_follows_definition_order():
    flags = FlagSet(Color, Color.BLUE, Color.RED)
    assert list(flags) == [Color.RED, Color.BLUE]
    assert len(flags) == 2


def test_from_bits_round_trip():
    flags = FlagSet(Color, Color.GREEN, Color.BLUE)
    assert FlagSet.from_bits(Color, flags.bits) == flags


def test_from_bits_drops_unknown_bits():
    assert FlagSet.from_bits(Color, 1 << 7) == FlagSet(Color)


def test_mixing_enum_types_is_rejected():
    with pytest.raises(TypeError):
        FlagSet(Color, Shape.CIRCLE)
    with pytest.raises(TypeError):
        FlagSet(Color, Color.RED) | FlagSet(Shape, Shape.SQUARE)


def test_equality_distinguishes_enum_types():
    assert FlagSet(Color) != FlagSet(Shape)
    assert FlagSet(Color, Color.RED) == Color.RED


def test_format_enum_known_values():
    assert format_enum(Color, 0) == "RED"
    assert format_enum(Color, Color.BLUE) == "BLUE"


def test_format_enum_unknown_value():
    assert format_enum(Color, 5) == "(unknown:5)"
    assert format_enum(Color, -1) == "(unknown:-1)"


def test_format_enum_uses_label():
    assert format_enum(Labelled, Labelled.SECOND) == "second-label"


def test_format_flags():
    assert format_flags(FlagSet(Color, Color.RED, Color.BLUE)) == "RED, BLUE"
    assert format_flags(FlagSet(Color)) == "(none)"
    assert str(FlagSet(Labelled, Labelled.FIRST)) == "first-label"