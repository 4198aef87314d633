"""
Indexed colormaps: read-only tables from a byte index to a byte color.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

import numpy as np

from ..errors import IndexNotFound, IndexOutOfBounds, InvalidIndexRange
from ..types.color_types import ColorB, is_byte
from ..types.format_type import FormatType, MAX_INDEX, default_format_dtypes
from ..utils.dimension import as_components

logger = logging.getLogger(__name__)


class ValueKind(str, Enum):
    RGB = "rgb"
    RGBA = "rgba"
    GRAY = "gray"


@dataclass(frozen=True)
class Colormap:
    """
    A built colormap.

    The table is exposed read-only and is never patched after construction,
    so a colormap can be shared freely. Key contiguity is not enforced here;
    call ``validate`` to check it.
    """
    table: Mapping[int, ColorB] = field(default_factory=dict)
    value_kind: ValueKind = ValueKind.RGB
    domain: str = "index"

    def __post_init__(self):
        object.__setattr__(self, "table", MappingProxyType(dict(self.table)))
        object.__setattr__(self, "value_kind", ValueKind(self.value_kind))

    def __len__(self) -> int:
        return len(self.table)

    def lookup(self, index: int) -> ColorB:
        """
        Color stored at ``index``.

        Raises:
            IndexNotFound: the index is not an integer byte or not a key
                of the table.
        """
        if not is_byte(index):
            msg = f"Index {index!r} is not an integer byte"
            logger.error(msg)
            raise IndexNotFound(msg)
        try:
            return self.table[index]
        except KeyError:
            msg = f"Index {index} not found in colormap"
            logger.error(msg)
            raise IndexNotFound(msg) from None

    def validate(self) -> int:
        """
        Check that the keys are exactly ``0..max_index`` with ``max_index <= 255``.

        Sorts the keys, so keep it off hot paths.

        Returns:
            int: the maximum index

        Raises:
            InvalidIndexRange: no keys, or keys with gaps or not starting at 0
            IndexOutOfBounds: the maximum index exceeds 255
        """
        imax = len(self.table) - 1
        if imax < 0:
            msg = "Empty colormap has no index range"
            logger.error(msg)
            raise InvalidIndexRange(msg)
        keys = sorted(self.table)
        if keys != list(range(imax + 1)):
            msg = f"Invalid index keys, expecting 0..{imax}, found {keys}"
            logger.error(msg)
            raise InvalidIndexRange(msg)
        if imax > MAX_INDEX:
            msg = f"Colormap index exceeds {MAX_INDEX}, found {imax}"
            logger.error(msg)
            raise IndexOutOfBounds(msg)
        return imax

    def to_array(self) -> np.ndarray:
        """Colors in key order as an ``(N, C)`` uint8 array."""
        rows = [as_components(self.table[k]) for k in sorted(self.table)]
        return np.array(rows, dtype=default_format_dtypes[FormatType.BYTE]).reshape(len(rows), -1)


def lookup(colormap: Colormap, index: int) -> ColorB:
    return colormap.lookup(index)


def validate(colormap: Colormap) -> int:
    return colormap.validate()


__all__ = ["ValueKind", "Colormap", "lookup", "validate"]
