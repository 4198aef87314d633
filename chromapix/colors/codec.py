"""
Fixed-width binary encoding of byte colors.

Each component is one byte, written in the color's own channel order; the
pixel format decides how many bytes a color takes.
"""
from __future__ import annotations
import logging
from typing import Tuple, Union

from ..errors import ContractViolation
from ..pixel_format import PixelFormat, channel_count, validate
from ..types.color_types import ColorB, format_of
from ..types.format_type import FormatType
from ..utils.dimension import as_components, from_components

logger = logging.getLogger(__name__)


def to_bin(color: ColorB, fmt: PixelFormat) -> bytes:
    return append_bin(b"", color, fmt)


def append_bin(buf: Union[bytes, bytearray], color: ColorB, fmt: PixelFormat) -> bytes:
    """Append a byte color to a buffer, returning the new buffer."""
    validate(fmt, color)
    if format_of(color) != FormatType.BYTE:
        msg = f"Only byte colors can be encoded, got {color!r}"
        logger.error(msg)
        raise ContractViolation(msg)
    return bytes(buf) + bytes(int(c) for c in as_components(color))


def from_bin(buf: Union[bytes, bytearray], fmt: PixelFormat) -> Tuple[ColorB, bytes]:
    """
    Read one color from the front of a buffer.

    Returns:
        (color, rest): the decoded color and the remaining bytes.

    Raises:
        ContractViolation: the buffer is shorter than one color.
    """
    n = channel_count(fmt)
    if len(buf) < n:
        msg = f"Buffer of {len(buf)} bytes is too short for a '{PixelFormat(fmt).value}' color"
        logger.error(msg)
        raise ContractViolation(msg)
    return from_components(tuple(buf[:n])), bytes(buf[n:])


__all__ = ["to_bin", "append_bin", "from_bin"]
