from . import gray, rgb, rgba, codec
from .blend import mean_blend, blend
from .named import NamedColorTable

__all__ = [
    "gray",
    "rgb",
    "rgba",
    "codec",
    "mean_blend",
    "blend",
    "NamedColorTable",
]
