"""
Pixel functions: single-color functions tagged with their input and output
pixel formats, as ``(src_format, fn, dst_format)`` triples.

A ``dst_format`` of ``None`` means the function keeps the input format.
"""
from __future__ import annotations
import logging
from typing import Callable, Optional, Sequence, Tuple

from .errors import ContractViolation
from .pixel_format import PixelFormat
from .types.color_types import Color

logger = logging.getLogger(__name__)

PixelFunction = Tuple[PixelFormat, Callable[[Color], Color], Optional[PixelFormat]]


def _fail(msg: str):
    logger.error(msg)
    raise ContractViolation(msg)


def compile_pipeline(stages: Sequence[PixelFunction]) -> Tuple[PixelFormat, Callable[[Color], Color], PixelFormat]:
    """
    Compose a linear pipeline of pixel functions into one pixel function.

    Each stage's source format must equal the previous stage's output
    format.

    Returns:
        ``(first_src, fn, last_dst)`` where ``fn`` applies every stage in order.

    Raises:
        ContractViolation: empty pipeline, a non-callable stage or a stage
            whose source format breaks the chain.
    """
    if not stages:
        _fail("Cannot compile an empty pixel function pipeline")

    first_src = PixelFormat(stages[0][0])
    current = first_src
    funs = []
    for n, (src, fun, dst) in enumerate(stages):
        if not callable(fun):
            _fail(f"Stage {n} is not callable: {fun!r}")
        src = PixelFormat(src)
        if src != current:
            _fail(f"Stage {n} expects '{src.value}' but receives '{current.value}'")
        current = src if dst is None else PixelFormat(dst)
        funs.append(fun)

    def compiled(color: Color) -> Color:
        for fun in funs:
            color = fun(color)
        return color

    return first_src, compiled, current


__all__ = ["PixelFunction", "compile_pipeline"]
