"""
3-component colors in ``rgb`` or ``bgr`` channel order.

Functions accept byte triples or unit-float triples and return the same
representation unless stated otherwise. Serialization (hex, CSS) always
writes red first, whatever the pixel format.
"""
from __future__ import annotations
import logging
from typing import Optional

from ..conversions.hsl import rgb_to_hsl, unit_to_hsl
from ..conversions.numbers import b2f, byte, f2b, f2h, parse_hex, to_colorb, to_colorf, unit
from ..errors import ContractViolation
from ..pixel_format import PixelFormat, channel_count
from ..pixel_format import b as blue_of, g as green_of, r as red_of
from ..types.color_types import Col3b, Col3f, format_of
from ..types.format_type import EPSILON, FormatType
from ..utils.num_utils import is_close, round_half_up
from .named import NamedColorTable

logger = logging.getLogger(__name__)

# FLOAT
BLACK_FLOAT_RGB: Col3f = (0.0, 0.0, 0.0)
WHITE_FLOAT_RGB: Col3f = (1.0, 1.0, 1.0)
RED_FLOAT_RGB: Col3f = (1.0, 0.0, 0.0)
GREEN_FLOAT_RGB: Col3f = (0.0, 1.0, 0.0)
BLUE_FLOAT_RGB: Col3f = (0.0, 0.0, 1.0)
YELLOW_FLOAT_RGB: Col3f = (1.0, 1.0, 0.0)
CYAN_FLOAT_RGB: Col3f = (0.0, 1.0, 1.0)
MAGENTA_FLOAT_RGB: Col3f = (1.0, 0.0, 1.0)
GRAY_FLOAT_RGB: Col3f = (0.5, 0.5, 0.5)

# BYTE
BLACK_BYTE_RGB: Col3b = (0, 0, 0)
WHITE_BYTE_RGB: Col3b = (255, 255, 255)
RED_BYTE_RGB: Col3b = (255, 0, 0)
GREEN_BYTE_RGB: Col3b = (0, 255, 0)
BLUE_BYTE_RGB: Col3b = (0, 0, 255)
YELLOW_BYTE_RGB: Col3b = (255, 255, 0)
CYAN_BYTE_RGB: Col3b = (0, 255, 255)
MAGENTA_BYTE_RGB: Col3b = (255, 0, 255)
GRAY_BYTE_RGB: Col3b = (128, 128, 128)


def _check_rgb_format(fmt: PixelFormat) -> PixelFormat:
    fmt = PixelFormat(fmt)
    if channel_count(fmt) != 3:
        msg = f"Expected a 3-channel pixel format, got '{fmt.value}'"
        logger.error(msg)
        raise ContractViolation(msg)
    return fmt


def _as_rgb(col, fmt: PixelFormat):
    """Reorder a 3-channel color to (r, g, b)."""
    fmt = _check_rgb_format(fmt)
    return red_of(col, fmt), green_of(col, fmt), blue_of(col, fmt)


def _from_rgb(rgb, fmt: PixelFormat):
    """Reorder an (r, g, b) triple to the format's channel order."""
    fmt = _check_rgb_format(fmt)
    if fmt == PixelFormat.BGR:
        return rgb[2], rgb[1], rgb[0]
    return tuple(rgb)


## Construction

def new_col3f(r: float, g: float, b: float) -> Col3f:
    """Float triple, each component clamped to [0, 1]."""
    return unit(r), unit(g), unit(b)


def new_col3b(r: int, g: int, b: int) -> Col3b:
    """Byte triple, each component clamped to [0, 255]."""
    return byte(r), byte(g), byte(b)


def gray(level):
    """Gray triple from a byte or unit-float level."""
    return level, level, level


def gray_pc(pc: float, format_type: FormatType = FormatType.FLOAT):
    """Gray triple from a percentage 0..100."""
    level = unit(pc / 100.0)
    if FormatType(format_type) == FormatType.BYTE:
        return gray(f2b(level))
    return gray(level)


def from_name(name: str, table: NamedColorTable, format_type: FormatType = FormatType.BYTE):
    """
    Resolve a color name through an explicitly supplied table.

    Raises:
        NotFound: the table does not know the name.
    """
    color = table.lookup(name)
    if FormatType(format_type) == FormatType.FLOAT:
        return to_colorf(color)
    return color


## Modify

def dark(col):
    """
    Reduce value.

    Float colors are scaled by 0.75, byte colors are halved.
    """
    if format_of(col) == FormatType.BYTE:
        return tuple(byte(round_half_up(0.5 * c)) for c in col)
    return tuple(0.75 * c for c in col)


def pale(col):
    """
    Reduce saturation by mixing towards white.

    Float colors become ``0.25 * (white + 2 * col)``, byte colors move
    halfway to white.
    """
    if format_of(col) == FormatType.BYTE:
        return tuple(byte(round_half_up(0.5 * (255 + c))) for c in col)
    return tuple(0.25 * (1.0 + 2.0 * c) for c in col)


## Conversion

def luma(col, fmt: PixelFormat = PixelFormat.RGB):
    """
    Luminance using Digital ITU BT.601:

    ``Y = 0.299 R + 0.587 G + 0.114 B``

    Returns a unit float for float colors and a byte for byte colors.
    """
    red, green, blue = to_colorf(_as_rgb(col, fmt))
    y = 0.299 * red + 0.587 * green + 0.114 * blue
    if format_of(col) == FormatType.BYTE:
        return f2b(y)
    return y


def to_gray(col, fmt: PixelFormat = PixelFormat.RGB):
    """Gray triple with the luma of the color, same representation."""
    return gray(luma(col, fmt))


def to_hex(col, fmt: PixelFormat = PixelFormat.RGB) -> str:
    """Uppercase ``#RRGGBB``; float components are converted to bytes first."""
    red, green, blue = to_colorb(_as_rgb(col, fmt))
    return f"#{red:02X}{green:02X}{blue:02X}"


def from_hex(hex_str: str, fmt: PixelFormat = PixelFormat.RGB,
             format_type: FormatType = FormatType.BYTE):
    """
    Parse ``#RRGGBB`` into a triple in the channel order of ``fmt``.

    Raises:
        ContractViolation: malformed hex string.
    """
    rgb = _from_rgb(parse_hex(hex_str, 3), fmt)
    if FormatType(format_type) == FormatType.FLOAT:
        return tuple(b2f(c) for c in rgb)
    return rgb


def to_css(col, fmt: PixelFormat = PixelFormat.RGB) -> str:
    """CSS ``rgb(r g b)`` with byte components."""
    red, green, blue = to_colorb(_as_rgb(col, fmt))
    return f"rgb({red} {green} {blue})"


def to_css_hsl(col, fmt: PixelFormat = PixelFormat.RGB) -> str:
    """CSS ``hsl(h s% l%)`` with integer degrees and percentages."""
    h, s, l = unit_to_hsl(rgb_to_hsl(*to_colorf(_as_rgb(col, fmt))))
    return f"hsl({h} {s}% {l}%)"


## Interpolation

def lerp(col1: Col3f, x: float, col2: Col3f) -> Col3f:
    """
    Linear interpolation between two float colors.

    ``x = 0.0`` gives ``col1`` and ``x = 1.0`` gives ``col2`` exactly.
    """
    return tuple(c1 * (1.0 - x) + c2 * x for c1, c2 in zip(col1, col2))


def lerp_diff(col1: Col3f, x: float, diff: tuple[float, float, float]) -> Col3f:
    """Ray form of ``lerp``: ``col1 + x * diff`` with ``diff = col2 - col1``."""
    return tuple(c + x * d for c, d in zip(col1, diff))


def equals(col1, col2, eps: Optional[float] = None) -> bool:
    """Componentwise equality within a tolerance (default ``EPSILON``)."""
    tol = EPSILON if eps is None else eps
    if len(col1) != len(col2):
        return False
    return all(is_close(c1, c2, tol) for c1, c2 in zip(col1, col2))


__all__ = [
    "BLACK_FLOAT_RGB",
    "WHITE_FLOAT_RGB",
    "RED_FLOAT_RGB",
    "GREEN_FLOAT_RGB",
    "BLUE_FLOAT_RGB",
    "YELLOW_FLOAT_RGB",
    "CYAN_FLOAT_RGB",
    "MAGENTA_FLOAT_RGB",
    "GRAY_FLOAT_RGB",
    "BLACK_BYTE_RGB",
    "WHITE_BYTE_RGB",
    "RED_BYTE_RGB",
    "GREEN_BYTE_RGB",
    "BLUE_BYTE_RGB",
    "YELLOW_BYTE_RGB",
    "CYAN_BYTE_RGB",
    "MAGENTA_BYTE_RGB",
    "GRAY_BYTE_RGB",
    "new_col3f",
    "new_col3b",
    "gray",
    "gray_pc",
    "from_name",
    "dark",
    "pale",
    "luma",
    "to_gray",
    "to_hex",
    "from_hex",
    "to_css",
    "to_css_hsl",
    "lerp",
    "lerp_diff",
    "equals",
]
