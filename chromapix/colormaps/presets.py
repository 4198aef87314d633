"""Ready-made colormaps."""
from __future__ import annotations

from ..colors import rgb
from ..types.color_types import Col3f, ColorSpace
from .builder import gradient_three, gradient_two
from .colormap import Colormap


def dark_ramp(col: Col3f) -> Colormap:
    """Black at 0 to ``col`` at 255."""
    return gradient_two(rgb.BLACK_FLOAT_RGB, col, ColorSpace.RGB)


def sat_ramp(col: Col3f) -> Colormap:
    """White at 0 to ``col`` at 255."""
    return gradient_two(rgb.WHITE_FLOAT_RGB, col, ColorSpace.RGB)


def dark_red() -> Colormap:
    return dark_ramp(rgb.RED_FLOAT_RGB)


def dark_green() -> Colormap:
    return dark_ramp(rgb.GREEN_FLOAT_RGB)


def dark_blue() -> Colormap:
    return dark_ramp(rgb.BLUE_FLOAT_RGB)


def dark_magenta() -> Colormap:
    return dark_ramp(rgb.MAGENTA_FLOAT_RGB)


def sat_red() -> Colormap:
    return sat_ramp(rgb.RED_FLOAT_RGB)


def sat_green() -> Colormap:
    return sat_ramp(rgb.GREEN_FLOAT_RGB)


def sat_blue() -> Colormap:
    return sat_ramp(rgb.BLUE_FLOAT_RGB)


def sat_magenta() -> Colormap:
    return sat_ramp(rgb.MAGENTA_FLOAT_RGB)


def blue_white_red() -> Colormap:
    """Diverging map: pale blue, white at 127, pale red."""
    return gradient_three(
        rgb.pale(rgb.BLUE_FLOAT_RGB),
        rgb.WHITE_FLOAT_RGB,
        rgb.pale(rgb.RED_FLOAT_RGB),
        ColorSpace.RGB,
    )


__all__ = [
    "dark_ramp",
    "sat_ramp",
    "dark_red",
    "dark_green",
    "dark_blue",
    "dark_magenta",
    "sat_red",
    "sat_green",
    "sat_blue",
    "sat_magenta",
    "blue_white_red",
]
