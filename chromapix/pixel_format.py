"""
Pixel formats: named channel layouts over untagged color tuples.

A pixel format fixes the number of channels, which channel sits at each
position and therefore the channel order. Colors carry no format tag; every
function here takes the color together with an explicit ``PixelFormat``.

1-channel formats (``index``, ``gray``, ``alpha``) pair with bare scalars,
all others with tuples of the matching length.
"""
from __future__ import annotations
import logging
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .errors import ContractViolation, UnsupportedChannel
from .types.color_types import Color, Component, format_of
from .utils.dimension import as_components, from_components, get_dimension

logger = logging.getLogger(__name__)


class Channel(str, Enum):
    INDEX = "index"
    GRAY = "gray"
    A = "a"
    R = "r"
    G = "g"
    B = "b"


class PixelFormat(str, Enum):
    INDEX = "index"
    GRAY = "gray"
    ALPHA = "alpha"
    GRAY_ALPHA = "gray_alpha"
    ALPHA_GRAY = "alpha_gray"
    RGB = "rgb"
    BGR = "bgr"
    RGBA = "rgba"
    ARGB = "argb"
    BGRA = "bgra"
    ABGR = "abgr"


_C = Channel

_channel_table: Mapping[PixelFormat, Tuple[Channel, ...]] = MappingProxyType({
    PixelFormat.INDEX: (_C.INDEX,),
    PixelFormat.GRAY: (_C.GRAY,),
    PixelFormat.ALPHA: (_C.A,),
    PixelFormat.GRAY_ALPHA: (_C.GRAY, _C.A),
    PixelFormat.ALPHA_GRAY: (_C.A, _C.GRAY),
    PixelFormat.RGB: (_C.R, _C.G, _C.B),
    PixelFormat.BGR: (_C.B, _C.G, _C.R),
    PixelFormat.RGBA: (_C.R, _C.G, _C.B, _C.A),
    PixelFormat.ARGB: (_C.A, _C.R, _C.G, _C.B),
    PixelFormat.BGRA: (_C.B, _C.G, _C.R, _C.A),
    PixelFormat.ABGR: (_C.A, _C.B, _C.G, _C.R),
})

_missing = set(PixelFormat) - set(_channel_table)
if _missing:
    raise RuntimeError(f"Pixel formats without a channel layout: {sorted(_missing)}")
del _missing


def channel_sequence(fmt: PixelFormat) -> Tuple[Channel, ...]:
    """Channels of a format in storage order, e.g. rgba -> (R, G, B, A)."""
    return _channel_table[PixelFormat(fmt)]


def channel_count(fmt: PixelFormat) -> int:
    return len(channel_sequence(fmt))


def channel_index(fmt: PixelFormat, channel: Channel) -> int:
    """
    Position of a channel within a format.

    Raises:
        UnsupportedChannel: the format does not carry the channel
            (e.g. alpha from rgb).
    """
    channels = channel_sequence(fmt)
    channel = Channel(channel)
    if channel not in channels:
        msg = f"Pixel format '{PixelFormat(fmt).value}' has no '{channel.value}' channel"
        logger.error(msg)
        raise UnsupportedChannel(msg)
    return channels.index(channel)


def is_alpha_bearing(fmt: PixelFormat) -> bool:
    """True for the 2- and 4-channel formats."""
    return channel_count(fmt) in (2, 4)


def color_channels(fmt: PixelFormat) -> Tuple[Channel, ...]:
    """Channel sequence with alpha removed; order is kept."""
    if not is_alpha_bearing(fmt):
        return channel_sequence(fmt)
    return tuple(c for c in channel_sequence(fmt) if c != Channel.A)


def validate(fmt: PixelFormat, color: Color) -> None:
    """Check that a color's arity matches the format's channel count."""
    expected = channel_count(fmt)
    actual = get_dimension(color)
    if actual != expected:
        msg = (
            f"Color {color!r} has {actual} components, "
            f"pixel format '{PixelFormat(fmt).value}' needs {expected}"
        )
        logger.error(msg)
        raise ContractViolation(msg)


## Component access

def component(color: Color, fmt: PixelFormat, channel: Channel) -> Component:
    validate(fmt, color)
    return as_components(color)[channel_index(fmt, channel)]


def r(color: Color, fmt: PixelFormat) -> Component:
    return component(color, fmt, Channel.R)


def g(color: Color, fmt: PixelFormat) -> Component:
    return component(color, fmt, Channel.G)


def b(color: Color, fmt: PixelFormat) -> Component:
    return component(color, fmt, Channel.B)


def a(color: Color, fmt: PixelFormat) -> Component:
    return component(color, fmt, Channel.A)


def gray(color: Color, fmt: PixelFormat) -> Component:
    return component(color, fmt, Channel.GRAY)


def index(color: Color, fmt: PixelFormat) -> Component:
    return component(color, fmt, Channel.INDEX)


## Alpha

def split_alpha(color: Color, fmt: PixelFormat) -> Tuple[Color, Optional[Component]]:
    """
    Separate the color part from the alpha.

    The color part keeps the format's own channel order, so a ``bgra``
    color splits into a ``bgr`` triple. A 2-channel color splits into a
    bare gray scalar.

    Returns:
        (color_part, alpha); alpha is None for formats without alpha.
    """
    validate(fmt, color)
    if not is_alpha_bearing(fmt):
        return color, None
    components = as_components(color)
    ia = channel_index(fmt, Channel.A)
    rest = components[:ia] + components[ia + 1:]
    return from_components(rest), components[ia]


def add_alpha(color_part: Color, alpha: Component, fmt: PixelFormat) -> Color:
    """
    Insert an alpha component into a color, producing a ``fmt`` color.

    ``color_part`` must already be in the format's color-channel order,
    and must share its representation (byte or float) with ``alpha``.
    """
    if not is_alpha_bearing(fmt):
        msg = f"Pixel format '{PixelFormat(fmt).value}' carries no alpha channel"
        logger.error(msg)
        raise UnsupportedChannel(msg)

    components = as_components(color_part)
    if len(components) != channel_count(fmt) - 1:
        msg = (
            f"Color {color_part!r} does not fit the color channels "
            f"of pixel format '{PixelFormat(fmt).value}'"
        )
        logger.error(msg)
        raise ContractViolation(msg)
    if format_of(color_part) != format_of(alpha):
        msg = f"Alpha {alpha!r} and color {color_part!r} use different representations"
        logger.error(msg)
        raise ContractViolation(msg)

    ia = channel_index(fmt, Channel.A)
    return components[:ia] + (alpha,) + components[ia:]


## Max and min

def maximum(color: Color, fmt: PixelFormat) -> Tuple[Component, Channel]:
    """Largest component and the channel holding it."""
    validate(fmt, color)
    return max(zip(as_components(color), channel_sequence(fmt)))


def minimum(color: Color, fmt: PixelFormat) -> Tuple[Component, Channel]:
    """Smallest component and the channel holding it."""
    validate(fmt, color)
    return min(zip(as_components(color), channel_sequence(fmt)))


def _componentwise(fn, c1: Color, c2: Color) -> Color:
    if get_dimension(c1) != get_dimension(c2):
        msg = f"Colors {c1!r} and {c2!r} have different arity"
        logger.error(msg)
        raise ContractViolation(msg)
    return from_components(tuple(fn(x, y) for x, y in zip(as_components(c1), as_components(c2))))


def maximum2(c1: Color, c2: Color) -> Color:
    """Componentwise maximum of two colors of equal arity."""
    return _componentwise(max, c1, c2)


def minimum2(c1: Color, c2: Color) -> Color:
    """Componentwise minimum of two colors of equal arity."""
    return _componentwise(min, c1, c2)


__all__ = [
    "Channel",
    "PixelFormat",
    "channel_count",
    "channel_sequence",
    "channel_index",
    "is_alpha_bearing",
    "color_channels",
    "validate",
    "component",
    "r",
    "g",
    "b",
    "a",
    "gray",
    "index",
    "split_alpha",
    "add_alpha",
    "maximum",
    "minimum",
    "maximum2",
    "minimum2",
]
