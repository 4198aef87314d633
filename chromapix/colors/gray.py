"""1-component (gray level) colors. Bytes are ints, unit floats are floats."""
from __future__ import annotations

from ..conversions.numbers import byte, f2b, unit
from ..types.color_types import Col1b, Col1f, Col3b, Col3f, format_of
from ..types.format_type import FormatType
from ..utils.num_utils import round_half_up

BLACK_BYTE: Col1b = 0
WHITE_BYTE: Col1b = 255
GRAY_BYTE: Col1b = 128

BLACK_FLOAT: Col1f = 0.0
WHITE_FLOAT: Col1f = 1.0
GRAY_FLOAT: Col1f = 0.5


def new(value):
    """Clamp an int to a byte (447 -> 255) or a float to the unit range."""
    if isinstance(value, float):
        return unit(value)
    return byte(value)


def gray_pc(pc: float, format_type: FormatType = FormatType.FLOAT):
    """Gray level from a percentage 0..100."""
    level = unit(pc / 100.0)
    if FormatType(format_type) == FormatType.BYTE:
        return f2b(level)
    return level


def dark(col):
    """Halve the gray level."""
    if format_of(col) == FormatType.BYTE:
        return byte(round_half_up(0.5 * col))
    return 0.5 * col


def pale(col):
    """Move the gray level halfway to white."""
    if format_of(col) == FormatType.BYTE:
        return byte(round_half_up(0.5 * (WHITE_BYTE + col)))
    return 0.5 * (WHITE_FLOAT + col)


def lerp(col1: Col1f, x: float, col2: Col1f) -> Col1f:
    """Linear interpolation; x = 0.0 gives col1, x = 1.0 gives col2."""
    return col1 * (1.0 - x) + col2 * x


def to_col3(col) -> Col3b | Col3f:
    """Gray triple in the same representation."""
    return (col, col, col)


__all__ = [
    "BLACK_BYTE",
    "WHITE_BYTE",
    "GRAY_BYTE",
    "BLACK_FLOAT",
    "WHITE_FLOAT",
    "GRAY_FLOAT",
    "new",
    "gray_pc",
    "dark",
    "pale",
    "lerp",
    "to_col3",
]
