"""
Blend equations, blend factors and the ``BlendMode`` that bundles them.

The model follows the OpenGL blend stage: each side of the blend (source and
destination) is scaled by a factor, then the two scaled terms are combined by
an equation. Color and alpha have separate equations and factors.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from ..colors.rgba import a1f
from ..conversions.numbers import to_colorf
from ..errors import ContractViolation, MissingBlendConstant
from ..types.color_types import Col1f, Color, ColorF

logger = logging.getLogger(__name__)


class BlendEquation(str, Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    REVERSE_SUBTRACT = "reverse_subtract"
    MIN = "min"
    MAX = "max"


class BlendFactor(str, Enum):
    ZERO = "zero"
    ONE = "one"
    SRC_COLOR = "src_color"
    ONE_MINUS_SRC_COLOR = "one_minus_src_color"
    DST_COLOR = "dst_color"
    ONE_MINUS_DST_COLOR = "one_minus_dst_color"
    CONST_COLOR = "const_color"
    ONE_MINUS_CONST_COLOR = "one_minus_const_color"
    SRC_ALPHA = "src_alpha"
    ONE_MINUS_SRC_ALPHA = "one_minus_src_alpha"
    DST_ALPHA = "dst_alpha"
    ONE_MINUS_DST_ALPHA = "one_minus_dst_alpha"
    CONST_ALPHA = "const_alpha"
    ONE_MINUS_CONST_ALPHA = "one_minus_const_alpha"


# Equations that combine the raw terms and ignore both factors
FACTORLESS_EQUATIONS = frozenset({BlendEquation.MIN, BlendEquation.MAX})

CONST_COLOR_FACTORS = frozenset({BlendFactor.CONST_COLOR, BlendFactor.ONE_MINUS_CONST_COLOR})
CONST_ALPHA_FACTORS = frozenset({BlendFactor.CONST_ALPHA, BlendFactor.ONE_MINUS_CONST_ALPHA})

BlendModeTuple = Tuple[
    Union[BlendEquation, str],
    Union[BlendEquation, str],
    Union[BlendFactor, str],
    Union[BlendFactor, str],
    Optional[Color],
    Union[BlendFactor, str],
    Union[BlendFactor, str],
    Optional[Union[float, int]],
]


@dataclass(frozen=True)
class BlendMode:
    """
    Full description of a blend.

    Defaults describe the "replace" mode: the source overwrites the
    destination, color and alpha alike.

    The constants are optional. A mode whose factors reference a constant
    color or alpha it does not carry is rejected when it is built, so the
    compositor never has to deal with a missing constant. Constants are
    stored as unit floats; bytes are converted on construction. The
    constant alpha is coerced like any other alpha, so the integers 0 and 1
    mean fully transparent and opaque rather than bytes.

    For the alpha equation, color factors resolve to the matching alpha,
    so ``const_color`` in ``alpha_src``/``alpha_dst`` needs ``const_alpha``.
    """
    rgb_equation: BlendEquation = BlendEquation.ADD
    alpha_equation: BlendEquation = BlendEquation.ADD
    rgb_src: BlendFactor = BlendFactor.ONE
    rgb_dst: BlendFactor = BlendFactor.ZERO
    const_rgb: Optional[ColorF] = None
    alpha_src: BlendFactor = BlendFactor.ONE
    alpha_dst: BlendFactor = BlendFactor.ZERO
    const_alpha: Optional[Col1f] = None

    def __post_init__(self):
        object.__setattr__(self, "rgb_equation", BlendEquation(self.rgb_equation))
        object.__setattr__(self, "alpha_equation", BlendEquation(self.alpha_equation))
        for name in ("rgb_src", "rgb_dst", "alpha_src", "alpha_dst"):
            object.__setattr__(self, name, BlendFactor(getattr(self, name)))

        if self.const_rgb is not None:
            object.__setattr__(self, "const_rgb", to_colorf(self.const_rgb))
        if self.const_alpha is not None:
            object.__setattr__(self, "const_alpha", a1f(self.const_alpha))

        self._check_constants()

    def _check_constants(self) -> None:
        rgb_factors = set()
        if self.rgb_equation not in FACTORLESS_EQUATIONS:
            rgb_factors = {self.rgb_src, self.rgb_dst}
        alpha_factors = set()
        if self.alpha_equation not in FACTORLESS_EQUATIONS:
            alpha_factors = {self.alpha_src, self.alpha_dst}

        if rgb_factors & CONST_COLOR_FACTORS and self.const_rgb is None:
            msg = "Blend mode uses a constant color factor but no const_rgb was given"
            logger.error(msg)
            raise MissingBlendConstant(msg)

        needs_alpha = (rgb_factors & CONST_ALPHA_FACTORS) or (
            alpha_factors & (CONST_ALPHA_FACTORS | CONST_COLOR_FACTORS)
        )
        if needs_alpha and self.const_alpha is None:
            msg = "Blend mode uses a constant alpha factor but no const_alpha was given"
            logger.error(msg)
            raise MissingBlendConstant(msg)

    @classmethod
    def from_tuple(cls, mode: BlendModeTuple) -> "BlendMode":
        """Build from the raw 8-tuple ``(rgb_eq, alpha_eq, rgb_src, rgb_dst,
        const_rgb, alpha_src, alpha_dst, const_alpha)``."""
        if len(mode) != 8:
            msg = f"Blend mode tuple needs 8 entries, got {len(mode)}"
            logger.error(msg)
            raise ContractViolation(msg)
        return cls(*mode)

    def to_tuple(self) -> tuple:
        return (
            self.rgb_equation,
            self.alpha_equation,
            self.rgb_src,
            self.rgb_dst,
            self.const_rgb,
            self.alpha_src,
            self.alpha_dst,
            self.const_alpha,
        )


_E = BlendEquation
_F = BlendFactor

REPLACE = BlendMode()

ALPHA_OVER = BlendMode(
    _E.ADD, _E.ADD,
    _F.SRC_ALPHA, _F.ONE_MINUS_SRC_ALPHA, None,
    _F.ONE, _F.ONE_MINUS_SRC_ALPHA, None,
)

ADDITIVE = BlendMode(
    _E.ADD, _E.ADD,
    _F.ONE, _F.ONE, None,
    _F.ONE, _F.ONE, None,
)

MULTIPLY = BlendMode(
    _E.ADD, _E.ADD,
    _F.DST_COLOR, _F.ZERO, None,
    _F.ONE, _F.ONE_MINUS_SRC_ALPHA, None,
)

SCREEN = BlendMode(
    _E.ADD, _E.ADD,
    _F.ONE, _F.ONE_MINUS_SRC_COLOR, None,
    _F.ONE, _F.ONE_MINUS_SRC_ALPHA, None,
)

DARKEN = BlendMode(_E.MIN, _E.MIN)

LIGHTEN = BlendMode(_E.MAX, _E.MAX)


__all__ = [
    "BlendEquation",
    "BlendFactor",
    "BlendMode",
    "BlendModeTuple",
    "FACTORLESS_EQUATIONS",
    "REPLACE",
    "ALPHA_OVER",
    "ADDITIVE",
    "MULTIPLY",
    "SCREEN",
    "DARKEN",
    "LIGHTEN",
]
