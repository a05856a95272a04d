from shapegrad.backend import (
    NumpyBackend,
    TorchBackend,
    available_backends,
    get_backend,
    set_backend,
)
from shapegrad.shape import argsort, invert_permutation, shape_to_axes
from shapegrad.tensor import Tensor

__all__ = [
    "NumpyBackend",
    "TorchBackend",
    "Tensor",
    "argsort",
    "available_backends",
    "get_backend",
    "invert_permutation",
    "set_backend",
    "shape_to_axes",
]
