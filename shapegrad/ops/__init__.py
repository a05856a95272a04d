from .op00_base import Op
from .op01_reductions import Max, Sum
from .op02_movement import Expand, Permute, Reshape
from .op03_padding import Crop, Pad

__all__ = [
    "Op",
    "Sum",
    "Max",
    "Expand",
    "Reshape",
    "Permute",
    "Pad",
    "Crop",
]
