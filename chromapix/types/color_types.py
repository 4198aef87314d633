from __future__ import annotations
import logging
from enum import Enum
from typing import Tuple, Union

import numpy as np

from ..errors import ContractViolation
from ..utils.dimension import as_components
from .format_type import FormatType, format_valid_types

logger = logging.getLogger(__name__)

Byte = int
Unit = float
Component = Union[Byte, Unit]

Col1b = Byte
Col3b = Tuple[Byte, Byte, Byte]
Col4b = Tuple[Byte, Byte, Byte, Byte]
Col1f = Unit
Col3f = Tuple[Unit, Unit, Unit]
Col4f = Tuple[Unit, Unit, Unit, Unit]

ColorB = Union[Col1b, Tuple[Byte, Byte], Col3b, Col4b]
ColorF = Union[Col1f, Tuple[Unit, Unit], Col3f, Col4f]
Color = Union[ColorB, ColorF]

# (weight, color) pairs for mean blends
WeightedColor = Tuple[float, Color]

# (index, color) anchors for colormap gradients
ControlPoint = Tuple[int, Col3f]


class ColorSpace(str, Enum):
    """Color spaces a gradient can be interpolated in."""
    RGB = "rgb"
    HSL = "hsl"


def is_byte(value) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, format_valid_types[FormatType.BYTE]) and 0 <= value <= 255


def is_unit(value) -> bool:
    return isinstance(value, format_valid_types[FormatType.FLOAT]) and 0.0 <= value <= 1.0


def is_col3f(color) -> bool:
    return isinstance(color, tuple) and len(color) == 3 and all(is_unit(c) for c in color)


def is_col3b(color) -> bool:
    return isinstance(color, tuple) and len(color) == 3 and all(is_byte(c) for c in color)


def format_of(color: Color) -> FormatType:
    """
    Detect the component representation of a color.

    Args:
        color: Scalar or tuple color

    Returns:
        FormatType.BYTE if every component is an integer byte,
        FormatType.FLOAT if every component is a float.

    Raises:
        ContractViolation: empty colors, mixed representations,
            integers outside 0..255 and non-numeric components.
    """
    components = as_components(color)
    if not components:
        msg = "Empty color has no components"
        logger.error(msg)
        raise ContractViolation(msg)
    if all(is_byte(c) for c in components):
        return FormatType.BYTE
    if all(isinstance(c, format_valid_types[FormatType.FLOAT]) for c in components):
        return FormatType.FLOAT
    msg = f"Color {color!r} mixes representations or has non-byte integer components"
    logger.error(msg)
    raise ContractViolation(msg)
