"""
Mean blends of 1- or 3-component colors.

A blend takes either a list of colors (plain mean) or a list of
``(weight, color)`` pairs (weighted sum, clamped to the unit range).
Byte and float colors may be mixed across the list; each color is
converted to float before summing.
"""
from __future__ import annotations
import logging
from typing import Sequence, Union

import numpy as np

from ..conversions.numbers import np_f2b, to_colorf
from ..errors import ContractViolation
from ..types.color_types import Color, WeightedColor
from ..utils.dimension import as_components, from_components, get_dimension
from ..utils.num_utils import np_unit_clamp

logger = logging.getLogger(__name__)


def _is_weighted(item) -> bool:
    return (
        isinstance(item, tuple)
        and len(item) == 2
        and isinstance(item[0], float)
        and get_dimension(item[1]) in (1, 3)
    )


def _as_float_array(colors) -> np.ndarray:
    rows = [as_components(to_colorf(c)) for c in colors]
    if len({len(row) for row in rows}) != 1 or len(rows[0]) not in (1, 3):
        msg = "Blend needs 1- or 3-component colors of the same arity"
        logger.error(msg)
        raise ContractViolation(msg)
    return np.array(rows, dtype=np.float64)


def _mean(items: Sequence[Union[Color, WeightedColor]]) -> np.ndarray:
    if not items:
        msg = "Cannot blend an empty list of colors"
        logger.error(msg)
        raise ContractViolation(msg)

    if _is_weighted(items[0]):
        weights = np.array([w for w, _ in items], dtype=np.float64)
        colors = _as_float_array([c for _, c in items])
        return np_unit_clamp((weights[:, None] * colors).sum(axis=0))

    colors = _as_float_array(items)
    return colors.sum(axis=0) / len(items)


def mean_blend(items: Sequence[Union[Color, WeightedColor]]) -> Union[float, tuple]:
    """
    Blend colors to a unit-float color.

    Args:
        items: colors, or ``(weight, color)`` pairs. Weights should sum
            to 1.0 but this is not enforced.

    Returns:
        A float scalar for 1-component input, a float triple otherwise.
    """
    return from_components(tuple(float(c) for c in _mean(items)))


def blend(items: Sequence[Union[Color, WeightedColor]]) -> Union[int, tuple]:
    """Same as ``mean_blend`` but the result is converted to bytes."""
    return from_components(tuple(int(c) for c in np_f2b(_mean(items))))


__all__ = ["mean_blend", "blend"]
