"""
Named colors.

A ``NamedColorTable`` is an explicit lookup object: build it once (for
example with ``NamedColorTable.basic()``) and pass it to the code that
resolves names. There is no process-wide table.
"""
from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Iterator, Mapping

from ..conversions.numbers import to_colorf
from ..errors import ContractViolation, NotFound
from ..types.color_types import Col3b, Col3f, is_col3b

logger = logging.getLogger(__name__)

_BASIC = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (255, 0, 0),
    "green": (0, 255, 0),
    "blue": (0, 0, 255),
    "yellow": (255, 255, 0),
    "cyan": (0, 255, 255),
    "magenta": (255, 0, 255),
    "gray": (128, 128, 128),
    "grey": (128, 128, 128),
}


def _normalize(name: str) -> str:
    return name.strip().lower()


class NamedColorTable:
    """Read-only mapping from lowercase color names to 3-byte RGB colors."""

    __slots__ = ("_colors",)

    def __init__(self, colors: Mapping[str, Col3b]):
        table = {}
        for name, color in colors.items():
            color = tuple(color)
            if not is_col3b(color):
                msg = f"Named color '{name}' must be a 3-byte RGB color, got {color!r}"
                logger.error(msg)
                raise ContractViolation(msg)
            table[_normalize(name)] = color
        self._colors = MappingProxyType(table)

    @classmethod
    def basic(cls) -> "NamedColorTable":
        """Primaries, secondaries, black, white and gray/grey."""
        return cls(_BASIC)

    def lookup(self, name: str) -> Col3b:
        try:
            return self._colors[_normalize(name)]
        except KeyError:
            msg = f"Color name '{name}' not found"
            logger.error(msg)
            raise NotFound(msg) from None

    def lookup_f(self, name: str) -> Col3f:
        return to_colorf(self.lookup(name))

    def names(self) -> list[str]:
        return sorted(self._colors)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _normalize(name) in self._colors

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[str]:
        return iter(self._colors)

    def __repr__(self) -> str:
        return f"NamedColorTable({len(self)} colors)"


__all__ = ["NamedColorTable"]
