# No dependencies
from enum import Enum
import numpy as np


class FormatType(str, Enum):
    BYTE = "byte"
    FLOAT = "float"


max_component = {
    FormatType.BYTE: 255,
    FormatType.FLOAT: 1.0,
}

default_format_dtypes = {
    FormatType.BYTE: np.uint8,
    FormatType.FLOAT: np.float64,
}

format_valid_types = {
    FormatType.BYTE: (int, np.integer),
    FormatType.FLOAT: (float, np.floating),
}

# Tolerance for float color comparisons
EPSILON = 1e-6

# Indexed colormaps are addressed by a single byte
COLORMAP_SIZE = 256
MAX_INDEX = COLORMAP_SIZE - 1
MIDDLE_INDEX = 127
