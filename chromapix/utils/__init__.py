from .dimension import get_dimension, as_components, from_components
from .num_utils import round_half_up, is_close, np_unit_clamp
from .default import value_or_default

__all__ = [
    "get_dimension",
    "as_components",
    "from_components",
    "round_half_up",
    "is_close",
    "np_unit_clamp",
    "value_or_default",
]
