"""
Blend factor resolution and the arithmetic on scaled terms.

Factors ``zero`` and ``one`` are not turned into numbers. They travel as the
``Scale.ZERO`` / ``Scale.ONE`` sentinels through ``scale``, ``add`` and
``subtract``, so a term multiplied by ``zero`` never touches its operand and
an unused constant is never read. ``reify_color`` and ``reify_alpha`` turn
the final term into numbers clamped to the unit range.

Color terms are float arrays of shape ``(n,)`` (``n`` = 1 for gray, 3 for
rgb/bgr). Alpha terms are plain floats.
"""
from __future__ import annotations
from enum import Enum
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from ..utils.num_utils import np_unit_clamp
from .blend_mode import BlendFactor


class Scale(Enum):
    ZERO = "zero"
    ONE = "one"


ColorTerm = Union[Scale, NDArray]
AlphaTerm = Union[Scale, float]

_F = BlendFactor


def resolve_color_factor(
    factor: BlendFactor,
    srgb: NDArray,
    sa: float,
    drgb: NDArray,
    da: float,
    const_rgb: Optional[NDArray],
    const_alpha: Optional[float],
) -> ColorTerm:
    """
    Scale vector for the color equation.

    Alpha factors become gray vectors the size of the color part.
    """
    gray = np.ones_like(srgb)
    if factor == _F.ZERO:
        return Scale.ZERO
    if factor == _F.ONE:
        return Scale.ONE
    if factor == _F.SRC_COLOR:
        return srgb
    if factor == _F.ONE_MINUS_SRC_COLOR:
        return 1.0 - srgb
    if factor == _F.DST_COLOR:
        return drgb
    if factor == _F.ONE_MINUS_DST_COLOR:
        return 1.0 - drgb
    if factor == _F.CONST_COLOR:
        return const_rgb
    if factor == _F.ONE_MINUS_CONST_COLOR:
        return 1.0 - const_rgb
    if factor == _F.SRC_ALPHA:
        return gray * sa
    if factor == _F.ONE_MINUS_SRC_ALPHA:
        return gray * (1.0 - sa)
    if factor == _F.DST_ALPHA:
        return gray * da
    if factor == _F.ONE_MINUS_DST_ALPHA:
        return gray * (1.0 - da)
    if factor == _F.CONST_ALPHA:
        return gray * const_alpha
    if factor == _F.ONE_MINUS_CONST_ALPHA:
        return gray * (1.0 - const_alpha)
    raise ValueError(f"Unknown blend factor: {factor!r}")


def resolve_alpha_factor(
    factor: BlendFactor,
    sa: float,
    da: float,
    const_alpha: Optional[float],
) -> AlphaTerm:
    """Scale for the alpha equation; color factors map to the matching alpha."""
    if factor == _F.ZERO:
        return Scale.ZERO
    if factor == _F.ONE:
        return Scale.ONE
    if factor in (_F.SRC_COLOR, _F.SRC_ALPHA):
        return sa
    if factor in (_F.ONE_MINUS_SRC_COLOR, _F.ONE_MINUS_SRC_ALPHA):
        return 1.0 - sa
    if factor in (_F.DST_COLOR, _F.DST_ALPHA):
        return da
    if factor in (_F.ONE_MINUS_DST_COLOR, _F.ONE_MINUS_DST_ALPHA):
        return 1.0 - da
    if factor in (_F.CONST_COLOR, _F.CONST_ALPHA):
        return const_alpha
    if factor in (_F.ONE_MINUS_CONST_COLOR, _F.ONE_MINUS_CONST_ALPHA):
        return 1.0 - const_alpha
    raise ValueError(f"Unknown blend factor: {factor!r}")


def scale(factor, value):
    """Multiply a term by a resolved factor. The result is ZERO or a number."""
    if factor is Scale.ZERO:
        return Scale.ZERO
    if factor is Scale.ONE:
        return value
    return factor * value


def add(x, y):
    if x is Scale.ZERO:
        return y
    if y is Scale.ZERO:
        return x
    return x + y


def subtract(x, y):
    """``x - y``; ZERO on either side is the additive identity."""
    if y is Scale.ZERO:
        return x
    if x is Scale.ZERO:
        return -y
    return x - y


def reify_color(term: ColorTerm, n: int) -> NDArray:
    """Numeric color clamped to [0, 1]; ZERO becomes black."""
    if term is Scale.ZERO:
        return np.zeros(n, dtype=np.float64)
    return np_unit_clamp(term)


def reify_alpha(term: AlphaTerm) -> float:
    """Numeric alpha clamped to [0, 1]; ZERO becomes 0.0."""
    if term is Scale.ZERO:
        return 0.0
    return float(reify_color(np.atleast_1d(term), 1)[0])


__all__ = [
    "Scale",
    "ColorTerm",
    "AlphaTerm",
    "resolve_color_factor",
    "resolve_alpha_factor",
    "scale",
    "add",
    "subtract",
    "reify_color",
    "reify_alpha",
]
