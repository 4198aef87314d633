"""
Exception types raised by chromapix.

Three families, matching how callers are expected to react:

- ``ContractViolation``: the caller broke a precondition (arity mismatch,
  unsupported channel, missing blend constant, bad gradient points).
- ``LookupMiss``: a key is absent from a colormap or a named-color table.
- ``RangeInvalid``: a colormap failed ``validate``.

Each family derives from the builtin exception a Python caller would reach
for first (``ValueError`` / ``KeyError``).
"""


class ChromapixError(Exception):
    """Base class for all chromapix errors."""


class ContractViolation(ChromapixError, ValueError):
    """A color, pixel format or argument does not satisfy a precondition."""


class UnsupportedChannel(ContractViolation):
    """A pixel format does not carry the requested channel."""


class MissingBlendConstant(ContractViolation):
    """A blend factor references a constant color/alpha that was not supplied."""


class LookupMiss(ChromapixError, KeyError):
    """A key is not present in a lookup table."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class NotFound(LookupMiss):
    """A color name is not present in a named-color table."""


class IndexNotFound(LookupMiss):
    """An index is not present in a colormap."""


class RangeInvalid(ChromapixError, ValueError):
    """A colormap's index keys do not form a valid range."""


class InvalidIndexRange(RangeInvalid):
    """Colormap keys are not the contiguous range ``0..max_index``."""


class IndexOutOfBounds(RangeInvalid):
    """Colormap max index exceeds the byte range."""


__all__ = [
    "ChromapixError",
    "ContractViolation",
    "UnsupportedChannel",
    "MissingBlendConstant",
    "LookupMiss",
    "NotFound",
    "IndexNotFound",
    "RangeInvalid",
    "InvalidIndexRange",
    "IndexOutOfBounds",
]
