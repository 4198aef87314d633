import logging

from .types.format_type import FormatType
from .types.color_types import ColorSpace
from .errors import (
    ChromapixError,
    ContractViolation,
    UnsupportedChannel,
    MissingBlendConstant,
    LookupMiss,
    NotFound,
    IndexNotFound,
    RangeInvalid,
    InvalidIndexRange,
    IndexOutOfBounds,
)
from .pixel_format import Channel, PixelFormat
from .conversions import rgb_to_hsl, hsl_to_rgb, to_colorf, to_colorb
from .colors import NamedColorTable, mean_blend, blend
from .compositing import BlendEquation, BlendFactor, BlendMode, alpha_blend
from .colormaps import (
    Colormap,
    from_colors,
    gradient_points,
    gradient_two,
    gradient_three,
    lookup,
    validate,
)
from .pixel_functions import compile_pipeline

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "FormatType",
    "ColorSpace",
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
    "Channel",
    "PixelFormat",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "to_colorf",
    "to_colorb",
    "NamedColorTable",
    "mean_blend",
    "blend",
    "BlendEquation",
    "BlendFactor",
    "BlendMode",
    "alpha_blend",
    "Colormap",
    "from_colors",
    "gradient_points",
    "gradient_two",
    "gradient_three",
    "lookup",
    "validate",
    "compile_pipeline",
]
