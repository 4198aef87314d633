"""
chromapix conversions
=====================

Component conversions (byte <-> unit float <-> hex) and the RGB <-> HSL
color model conversion, each with a scalar and a vectorized (numpy) form.

Component conversions
---------------------
    b2f(b), f2b(f)
        Byte to unit float (b / 255) and back (round half up, clamped)
    np_b2f(arr), np_f2b(arr)
        Vectorized byte <-> float
    b2h, h2b, f2h, h2f, parse_hex
        Two-digit uppercase hex helpers
    to_colorf(color), to_colorb(color), to_format(color, format_type)
        Whole-color representation change, arity and order preserved

RGB <-> HSL
-----------
    rgb_to_hsl(r, g, b), hsl_to_rgb(h, s, l)
        Scalar, all values normalized to [0, 1] (hue included)
    np_rgb_to_hsl(r, g, b), np_hsl_to_rgb(h, s, l)
        Vectorized, returns arrays of shape (..., 3)
    hsl_to_unit(hsl3i), unit_to_hsl(col3f)
        CSS integer HSL format (degrees, percent, percent)

Examples
--------
>>> from chromapix.conversions import rgb_to_hsl, hsl_to_rgb
>>> rgb_to_hsl(1.0, 0.0, 0.0)
(0.0, 1.0, 0.5)
>>> hsl_to_rgb(0.0, 1.0, 0.5)
(1.0, 0.0, 0.0)
"""

from .numbers import (
    unit,
    byte,
    b2f,
    f2b,
    np_b2f,
    np_f2b,
    b2h,
    h2b,
    f2h,
    h2f,
    parse_hex,
    to_colorf,
    to_colorb,
    to_format,
)

from .hsl import (
    rgb_to_hsl,
    hsl_to_rgb,
    hue_to_channel,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
    hsl_to_unit,
    unit_to_hsl,
)

from ..types.format_type import FormatType

__all__ = [
    # Components
    'unit',
    'byte',
    'b2f',
    'f2b',
    'np_b2f',
    'np_f2b',
    'b2h',
    'h2b',
    'f2h',
    'h2f',
    'parse_hex',
    'to_colorf',
    'to_colorb',
    'to_format',

    # RGB <-> HSL
    'rgb_to_hsl',
    'hsl_to_rgb',
    'hue_to_channel',
    'np_rgb_to_hsl',
    'np_hsl_to_rgb',
    'hsl_to_unit',
    'unit_to_hsl',

    # Types
    'FormatType',
]
