"""
chromapix colormaps
===================

Dense index -> color lookup tables.

Construction
------------
    from_colors(colors, space)
        Colors at consecutive indices 0..len-1
    gradient_two(c1, c2, space), gradient_three(c1, c2, c3, space)
        Gradients with control points at 0, (127,) 255
    gradient_points(points, space)
        Piecewise-linear gradient through (index, color) control points

Colors are unit float triples given in RGB or HSL (``space``); the stored
table always holds RGB bytes.

Access
------
    lookup(colormap, index), validate(colormap), Colormap.to_array()

Examples
--------
>>> from chromapix.colormaps import gradient_two, lookup
>>> cmap = gradient_two((1.0, 0.0, 0.0), (0.0, 0.0, 1.0))
>>> lookup(cmap, 170)
(85, 0, 170)
"""

from .colormap import Colormap, ValueKind, lookup, validate
from .builder import from_colors, gradient_points, gradient_two, gradient_three
from . import presets

__all__ = [
    "Colormap",
    "ValueKind",
    "lookup",
    "validate",
    "from_colors",
    "gradient_points",
    "gradient_two",
    "gradient_three",
    "presets",
]
