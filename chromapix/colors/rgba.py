"""4-component colors in any of the rgba, argb, bgra, abgr channel orders."""
from __future__ import annotations
import logging
from typing import Optional

from ..conversions.numbers import b2f, byte, f2b, parse_hex, to_colorb, unit
from ..errors import ContractViolation
from ..pixel_format import (
    Channel,
    PixelFormat,
    add_alpha,
    channel_count,
    channel_sequence,
    component,
    split_alpha,
)
from ..types.color_types import Col4b, Col4f, format_of, is_byte
from ..types.format_type import FormatType
from .rgb import equals as _equals

logger = logging.getLogger(__name__)

_RGBA = (Channel.R, Channel.G, Channel.B, Channel.A)


def _check_rgba_format(fmt: PixelFormat) -> PixelFormat:
    fmt = PixelFormat(fmt)
    if channel_count(fmt) != 4:
        msg = f"Expected a 4-channel pixel format, got '{fmt.value}'"
        logger.error(msg)
        raise ContractViolation(msg)
    return fmt


def _as_rgba(col, fmt: PixelFormat):
    fmt = _check_rgba_format(fmt)
    return tuple(component(col, fmt, ch) for ch in _RGBA)


def _from_rgba(rgba, fmt: PixelFormat):
    fmt = _check_rgba_format(fmt)
    by_channel = dict(zip(_RGBA, rgba))
    return tuple(by_channel[ch] for ch in channel_sequence(fmt))


## Alpha coercion

def a1b(a) -> int:
    """
    Coerce an alpha value to a byte.

    ``False``/``True`` map to 0/255, the integers 0 and 1 to 0/255,
    other bytes pass through and floats are converted with ``f2b``.
    """
    if isinstance(a, bool):
        return 255 if a else 0
    if a == 1 and not isinstance(a, float):
        return 255
    if is_byte(a):
        return int(a)
    if isinstance(a, float):
        return f2b(a)
    msg = f"Illegal alpha value {a!r}"
    logger.error(msg)
    raise ContractViolation(msg)


def a1f(a) -> float:
    """
    Coerce an alpha value to a unit float.

    ``False``/``True`` map to 0.0/1.0, the integers 0 and 1 to 0.0/1.0,
    other bytes are divided by 255 and floats are clamped.
    """
    if isinstance(a, bool):
        return 1.0 if a else 0.0
    if a == 1 and not isinstance(a, float):
        return 1.0
    if is_byte(a):
        return b2f(a)
    if isinstance(a, float):
        return unit(a)
    msg = f"Illegal alpha value {a!r}"
    logger.error(msg)
    raise ContractViolation(msg)


## Construction

def new_col4b(c1: int, c2: int, c3: int, c4: int) -> Col4b:
    return byte(c1), byte(c2), byte(c3), byte(c4)


def new_col4f(c1: float, c2: float, c3: float, c4: float) -> Col4f:
    return unit(c1), unit(c2), unit(c3), unit(c4)


def new_col4(col3, a, fmt: PixelFormat = PixelFormat.RGBA):
    """
    Add an alpha to a 3-component color.

    ``col3`` must already be in the color-channel order of ``fmt``
    (``bgr`` for ``bgra``/``abgr``). The alpha is coerced to the
    representation of ``col3``.
    """
    fmt = _check_rgba_format(fmt)
    if format_of(col3) == FormatType.BYTE:
        return add_alpha(col3, a1b(a), fmt)
    return add_alpha(col3, a1f(a), fmt)


def to_col3(col, fmt: PixelFormat = PixelFormat.RGBA):
    """Drop the alpha; the color channels keep their order."""
    return split_alpha(col, _check_rgba_format(fmt))[0]


## Serialization

def to_hex(col, fmt: PixelFormat = PixelFormat.RGBA) -> str:
    """Uppercase ``#RRGGBBAA`` whatever the channel order."""
    return "#" + "".join(f"{c:02X}" for c in to_colorb(_as_rgba(col, fmt)))


def from_hex(hex_str: str, fmt: PixelFormat = PixelFormat.RGBA,
             format_type: FormatType = FormatType.BYTE):
    """Parse ``#RRGGBBAA`` into a color in the channel order of ``fmt``."""
    col = _from_rgba(parse_hex(hex_str, 4), fmt)
    if FormatType(format_type) == FormatType.FLOAT:
        return tuple(b2f(c) for c in col)
    return col


def to_css(col, fmt: PixelFormat = PixelFormat.RGBA) -> str:
    """CSS ``rgba(r g b a)``: byte color channels, alpha as a float to 3 places."""
    red, green, blue, alpha = _as_rgba(col, fmt)
    if format_of(col) == FormatType.BYTE:
        alpha = b2f(alpha)
    red, green, blue = to_colorb((red, green, blue))
    return f"rgba({red} {green} {blue} {round(alpha, 3)})"


def equals(col1, col2, eps: Optional[float] = None) -> bool:
    return _equals(col1, col2, eps)


__all__ = [
    "a1b",
    "a1f",
    "new_col4b",
    "new_col4f",
    "new_col4",
    "to_col3",
    "to_hex",
    "from_hex",
    "to_css",
    "equals",
]
