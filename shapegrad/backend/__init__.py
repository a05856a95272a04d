from .base import Backend
from .config import (
    TorchBackend,
    available_backends,
    get_backend,
    set_backend,
)
from .numpy_backend import NumpyBackend

__all__ = [
    "Backend",
    "NumpyBackend",
    "TorchBackend",
    "available_backends",
    "get_backend",
    "set_backend",
]
