"""
Colormap construction from color lists and piecewise-linear gradients.

Gradient colors are interpolated as unit floats, either as RGB or as HSL
coordinates (``space="hsl"``), and converted to RGB bytes only when the
table is stored. Interpolation uses ``c1 * (1 - u) + c2 * u`` so that
control points land exactly on their colors.
"""
from __future__ import annotations
import logging
from typing import Sequence, Union

import numpy as np

from ..conversions.hsl import np_hsl_to_rgb
from ..conversions.numbers import np_f2b
from ..errors import ContractViolation
from ..types.color_types import Col3f, ColorSpace, ControlPoint, is_col3f
from ..types.format_type import MAX_INDEX, MIDDLE_INDEX
from .colormap import Colormap, ValueKind

logger = logging.getLogger(__name__)

SpaceLike = Union[ColorSpace, str]


def _fail(msg: str):
    logger.error(msg)
    raise ContractViolation(msg)


def _check_colors(colors: Sequence[Col3f]) -> np.ndarray:
    for color in colors:
        if not is_col3f(color):
            _fail(f"Expected a 3-component unit float color, got {color!r}")
    return np.array(colors, dtype=np.float64).reshape(len(colors), 3)


def _to_rgb_bytes(values: np.ndarray, space: ColorSpace) -> np.ndarray:
    """Float (N, 3) colors in ``space`` to uint8 RGB rows."""
    if space == ColorSpace.HSL:
        values = np_hsl_to_rgb(values[:, 0], values[:, 1], values[:, 2])
    return np_f2b(values)


def _build(values: np.ndarray, space: ColorSpace) -> Colormap:
    rows = _to_rgb_bytes(values, space)
    table = {i: tuple(int(c) for c in row) for i, row in enumerate(rows)}
    return Colormap(table=table, value_kind=ValueKind.RGB)


def from_colors(colors: Sequence[Col3f], space: SpaceLike = ColorSpace.RGB) -> Colormap:
    """
    Colormap with ``colors[i]`` at index ``i``.

    With ``space="hsl"`` the colors are HSL and are converted to RGB.
    """
    space = ColorSpace(space)
    if len(colors) == 0:
        _fail("Cannot build a colormap from an empty color list")
    cmap = _build(_check_colors(colors), space)
    logger.debug("Built %d-entry %s colormap from a color list", len(cmap), space.value)
    return cmap


def _check_points(points: Sequence[ControlPoint]) -> None:
    if len(points) < 2:
        _fail(f"A gradient needs at least 2 control points, got {len(points)}")

    indices = [i for i, _ in points]
    for i in indices:
        if isinstance(i, bool) or not isinstance(i, (int, np.integer)):
            _fail(f"Control point index must be an integer, got {i!r}")
    if indices[0] != 0:
        _fail(f"First control point must be at index 0, got {indices[0]}")
    if indices[-1] != MAX_INDEX:
        _fail(f"Last control point must be at index {MAX_INDEX}, got {indices[-1]}")
    for i, j in zip(indices, indices[1:]):
        if j <= i:
            _fail(f"Control point indices must be strictly ascending, got {i} then {j}")


def gradient_points(points: Sequence[ControlPoint], space: SpaceLike = ColorSpace.RGB) -> Colormap:
    """
    Piecewise-linear gradient through ``(index, color)`` control points.

    Each pair of consecutive points ``(i, ci), (j, cj)`` fills the indices
    ``i..j``; neighbouring segments agree on their shared index.

    Args:
        points: ascending control points, the first at 0 and the last at 255
        space: ``"rgb"`` or ``"hsl"``, the space the colors are given
            and interpolated in

    Raises:
        ContractViolation: fewer than 2 points, bad first/last index,
            indices not strictly ascending or colors that are not unit triples.
    """
    space = ColorSpace(space)
    _check_points(points)
    colors = _check_colors([c for _, c in points])

    values = np.empty((MAX_INDEX + 1, 3), dtype=np.float64)
    for (i, _), (j, _), c1, c2 in zip(points, points[1:], colors, colors[1:]):
        u = (np.arange(i, j + 1, dtype=np.float64) - i) / (j - i)
        values[i:j + 1] = c1 * (1.0 - u)[:, None] + c2 * u[:, None]

    cmap = _build(values, space)
    logger.debug(
        "Built %d-entry %s gradient colormap from %d control points",
        len(cmap), space.value, len(points),
    )
    return cmap


def gradient_two(c1: Col3f, c2: Col3f, space: SpaceLike = ColorSpace.RGB) -> Colormap:
    return gradient_points([(0, c1), (MAX_INDEX, c2)], space)


def gradient_three(c1: Col3f, c2: Col3f, c3: Col3f, space: SpaceLike = ColorSpace.RGB) -> Colormap:
    """Two gradients meeting at index 127."""
    return gradient_points([(0, c1), (MIDDLE_INDEX, c2), (MAX_INDEX, c3)], space)


__all__ = ["from_colors", "gradient_points", "gradient_two", "gradient_three"]
