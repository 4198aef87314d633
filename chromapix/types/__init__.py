from .format_type import (
    FormatType,
    max_component,
    default_format_dtypes,
    EPSILON,
    COLORMAP_SIZE,
    MAX_INDEX,
    MIDDLE_INDEX,
)
from .color_types import (
    Color,
    ColorB,
    ColorF,
    Col1b,
    Col3b,
    Col4b,
    Col1f,
    Col3f,
    Col4f,
    ColorSpace,
    ControlPoint,
    WeightedColor,
    format_of,
    is_byte,
    is_unit,
    is_col3b,
    is_col3f,
)

__all__ = [
    "FormatType",
    "max_component",
    "default_format_dtypes",
    "EPSILON",
    "COLORMAP_SIZE",
    "MAX_INDEX",
    "MIDDLE_INDEX",
    "Color",
    "ColorB",
    "ColorF",
    "Col1b",
    "Col3b",
    "Col4b",
    "Col1f",
    "Col3f",
    "Col4f",
    "ColorSpace",
    "ControlPoint",
    "WeightedColor",
    "format_of",
    "is_byte",
    "is_unit",
    "is_col3b",
    "is_col3f",
]
