"""
chromapix compositing
=====================

OpenGL-style blending of a source color over a destination color, where
each color is paired with its own pixel format.

    alpha_blend(src, src_format, dst, dst_format, mode)

``mode`` is a ``BlendMode`` (or its raw 8-tuple form) naming the color and
alpha equations, the four factors and the optional constants.

Examples
--------
>>> from chromapix.compositing import alpha_blend, ALPHA_OVER
>>> alpha_blend((255, 0, 0, 128), "rgba", (0, 0, 255), "rgb", ALPHA_OVER)
(128, 0, 127)
"""

from .blend_mode import (
    BlendEquation,
    BlendFactor,
    BlendMode,
    REPLACE,
    ALPHA_OVER,
    ADDITIVE,
    MULTIPLY,
    SCREEN,
    DARKEN,
    LIGHTEN,
)
from .factors import Scale
from .compositor import alpha_blend

__all__ = [
    "BlendEquation",
    "BlendFactor",
    "BlendMode",
    "Scale",
    "alpha_blend",
    "REPLACE",
    "ALPHA_OVER",
    "ADDITIVE",
    "MULTIPLY",
    "SCREEN",
    "DARKEN",
    "LIGHTEN",
]
