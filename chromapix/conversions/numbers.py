"""
Component-level conversions between bytes, unit floats and hex digits.

float -> byte rounds half up after clamping to [0, 1];
byte -> float divides by 255.
"""
from __future__ import annotations
import logging
import string

import numpy as np
from numpy.typing import NDArray

from ..errors import ContractViolation
from ..types.color_types import Color, ColorB, ColorF, format_of
from ..types.format_type import FormatType, max_component
from ..utils.dimension import as_components, from_components
from ..utils.num_utils import np_unit_clamp, round_half_up

logger = logging.getLogger(__name__)

_BYTE_MAX = max_component[FormatType.BYTE]


def unit(x: float) -> float:
    """Clamp a float to the unit range [0, 1]."""
    return max(0.0, min(float(x), 1.0))


def byte(i: int) -> int:
    """Clamp an integer to the byte range [0, 255]."""
    return max(0, min(int(i), _BYTE_MAX))


def b2f(b: int) -> float:
    return b / float(_BYTE_MAX)


def f2b(f: float) -> int:
    return round_half_up(unit(f) * _BYTE_MAX)


def np_b2f(arr: NDArray) -> NDArray:
    """Vectorized: byte array to unit float array."""
    return np.asarray(arr, dtype=np.float64) / _BYTE_MAX


def np_f2b(arr: NDArray) -> NDArray:
    """Vectorized: unit float array to uint8 array (round half up)."""
    arr = np_unit_clamp(arr)
    return np.floor(arr * _BYTE_MAX + 0.5).astype(np.uint8)


def b2h(b: int) -> str:
    """Byte to two uppercase hex digits."""
    return f"{byte(b):02X}"


def f2h(f: float) -> str:
    return b2h(f2b(f))


def h2b(hex_pair: str) -> int:
    """Two hex digits to a byte."""
    if len(hex_pair) != 2 or any(c not in string.hexdigits for c in hex_pair):
        msg = f"Invalid hex byte '{hex_pair}'"
        logger.error(msg)
        raise ContractViolation(msg)
    return int(hex_pair, 16)


def h2f(hex_pair: str) -> float:
    return b2f(h2b(hex_pair))


def parse_hex(hex_str: str, ncomp: int) -> tuple[int, ...]:
    """
    Parse a '#RRGGBB'-style string into ``ncomp`` bytes, in string order.

    Raises:
        ContractViolation: missing '#', wrong length or non-hex digits.
    """
    if not isinstance(hex_str, str) or not hex_str.startswith("#") or len(hex_str) != 1 + 2 * ncomp:
        msg = f"Expected '#' followed by {2 * ncomp} hex digits, got {hex_str!r}"
        logger.error(msg)
        raise ContractViolation(msg)
    digits = hex_str[1:]
    return tuple(h2b(digits[2 * i:2 * i + 2]) for i in range(ncomp))


def to_colorf(color: Color) -> ColorF:
    """Convert any color to float components, keeping its arity and order."""
    if format_of(color) == FormatType.FLOAT:
        return color  # type: ignore[return-value]
    return from_components(tuple(b2f(c) for c in as_components(color)))


def to_colorb(color: Color) -> ColorB:
    """Convert any color to byte components, keeping its arity and order."""
    if format_of(color) == FormatType.BYTE:
        return from_components(tuple(int(c) for c in as_components(color)))
    return from_components(tuple(f2b(c) for c in as_components(color)))


def to_format(color: Color, format_type: FormatType) -> Color:
    if FormatType(format_type) == FormatType.BYTE:
        return to_colorb(color)
    return to_colorf(color)
