import math

import numpy as np
from boundednumbers import BoundType, bound_type_to_np_function

from ..types.format_type import EPSILON

_clamp_array = bound_type_to_np_function[BoundType.CLAMP]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going up (127.5 -> 128)."""
    return int(math.floor(value + 0.5))


def is_close(a: float, b: float, tol: float = EPSILON) -> bool:
    """Check if two floats are equal within a tolerance."""
    return abs(a - b) <= tol


def np_unit_clamp(arr: np.ndarray) -> np.ndarray:
    """Clamp a float array to [0, 1]."""
    return np.asarray(_clamp_array(np.asarray(arr, dtype=np.float64), 0.0, 1.0), dtype=np.float64)
