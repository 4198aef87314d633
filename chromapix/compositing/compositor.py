"""
Generalized alpha blending of one source color over one destination color.
"""
from __future__ import annotations
import logging
from typing import Union

import numpy as np
from numpy.typing import NDArray

from ..conversions.numbers import to_colorf, to_format
from ..errors import ContractViolation
from ..pixel_format import (
    PixelFormat,
    add_alpha,
    color_channels,
    is_alpha_bearing,
    split_alpha,
    validate,
)
from ..types.color_types import Color, format_of
from ..utils.default import value_or_default
from ..utils.dimension import as_components, from_components
from .blend_mode import (
    FACTORLESS_EQUATIONS,
    BlendEquation,
    BlendMode,
    BlendModeTuple,
    REPLACE,
)
from .factors import (
    add,
    reify_alpha,
    reify_color,
    resolve_alpha_factor,
    resolve_color_factor,
    scale,
    subtract,
)

logger = logging.getLogger(__name__)

DEFAULT_ALPHA = 1.0

# Formats with no color to blend
NON_BLENDABLE_FORMATS = frozenset({PixelFormat.INDEX, PixelFormat.ALPHA})


def _check_blendable(color: Color, fmt: PixelFormat, role: str) -> PixelFormat:
    fmt = PixelFormat(fmt)
    if fmt in NON_BLENDABLE_FORMATS:
        msg = f"{role} pixel format '{fmt.value}' cannot be blended"
        logger.error(msg)
        raise ContractViolation(msg)
    validate(fmt, color)
    return fmt


def _unpack(color: Color, fmt: PixelFormat) -> tuple[NDArray, float]:
    """Color part as a float array and alpha as a float (default opaque)."""
    color_part, alpha = split_alpha(color, fmt)
    rgb = np.array(as_components(to_colorf(color_part)), dtype=np.float64)
    return rgb, float(to_colorf(value_or_default(alpha, DEFAULT_ALPHA)))


def _combine(equation: BlendEquation, src_term, dst_term):
    if equation == BlendEquation.ADD:
        return add(src_term, dst_term)
    if equation == BlendEquation.SUBTRACT:
        return subtract(src_term, dst_term)
    if equation == BlendEquation.REVERSE_SUBTRACT:
        return subtract(dst_term, src_term)
    raise ValueError(f"Equation {equation!r} does not combine scaled terms")


def _blend_color(mode: BlendMode, srgb: NDArray, sa: float, drgb: NDArray, da: float,
                 const_rgb) -> NDArray:
    if mode.rgb_equation == BlendEquation.MIN:
        return np.minimum(srgb, drgb)
    if mode.rgb_equation == BlendEquation.MAX:
        return np.maximum(srgb, drgb)

    args = (srgb, sa, drgb, da, const_rgb, mode.const_alpha)
    src_term = scale(resolve_color_factor(mode.rgb_src, *args), srgb)
    dst_term = scale(resolve_color_factor(mode.rgb_dst, *args), drgb)
    return reify_color(_combine(mode.rgb_equation, src_term, dst_term), srgb.shape[0])


def _blend_alpha(mode: BlendMode, sa: float, da: float) -> float:
    if mode.alpha_equation == BlendEquation.MIN:
        return min(sa, da)
    if mode.alpha_equation == BlendEquation.MAX:
        return max(sa, da)

    src_term = scale(resolve_alpha_factor(mode.alpha_src, sa, da, mode.const_alpha), sa)
    dst_term = scale(resolve_alpha_factor(mode.alpha_dst, sa, da, mode.const_alpha), da)
    return reify_alpha(_combine(mode.alpha_equation, src_term, dst_term))


def alpha_blend(
    src: Color,
    src_format: PixelFormat,
    dst: Color,
    dst_format: PixelFormat,
    mode: Union[BlendMode, BlendModeTuple] = REPLACE,
) -> Color:
    """
    Composite ``src`` over ``dst`` with a blend mode.

    The result has the destination's pixel format and the destination's
    representation (bytes in, bytes out). Formats without alpha are opaque
    (alpha 1.0). All arithmetic happens in unit floats; results are clamped
    to [0, 1] before conversion back.

    Source, destination and the mode's constant color must use the same
    color-channel order: ``rgb``/``rgba``/``argb`` go together,
    ``bgr``/``bgra``/``abgr`` go together, and the gray formats go together.

    Args:
        src: Incoming (foreground) color
        src_format: Pixel format of ``src``
        dst: Existing (background) color
        dst_format: Pixel format of ``dst``, also the output format
        mode: ``BlendMode`` or its raw 8-tuple form

    Raises:
        ContractViolation: arity mismatch, non-blendable format (index, alpha),
            differing color-channel order or a constant color of the wrong size.
        MissingBlendConstant: a raw tuple mode references a missing constant.
    """
    if not isinstance(mode, BlendMode):
        mode = BlendMode.from_tuple(mode)

    src_format = _check_blendable(src, src_format, "Source")
    dst_format = _check_blendable(dst, dst_format, "Destination")
    if color_channels(src_format) != color_channels(dst_format):
        msg = (
            f"Source format '{src_format.value}' and destination format "
            f"'{dst_format.value}' have different color channels"
        )
        logger.error(msg)
        raise ContractViolation(msg)

    srgb, sa = _unpack(src, src_format)
    drgb, da = _unpack(dst, dst_format)

    const_rgb = None
    # min and max ignore the constant color
    if mode.const_rgb is not None and mode.rgb_equation not in FACTORLESS_EQUATIONS:
        const_rgb = np.array(as_components(mode.const_rgb), dtype=np.float64)
        if const_rgb.shape != srgb.shape:
            msg = (
                f"Constant color {mode.const_rgb!r} does not match the "
                f"{srgb.shape[0]} color channels of '{src_format.value}'"
            )
            logger.error(msg)
            raise ContractViolation(msg)

    rgb = _blend_color(mode, srgb, sa, drgb, da, const_rgb)
    color_part = from_components(tuple(float(c) for c in rgb))

    if is_alpha_bearing(dst_format):
        result = add_alpha(color_part, _blend_alpha(mode, sa, da), dst_format)
    else:
        result = color_part

    return to_format(result, format_of(dst))


__all__ = ["alpha_blend", "DEFAULT_ALPHA", "NON_BLENDABLE_FORMATS"]
