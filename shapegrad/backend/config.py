import logging
import os
from typing import Union

from .base import Backend
from .numpy_backend import NumpyBackend

try:  # pragma: no cover - torch is optional
    from .torch_backend import TorchBackend
except ImportError:  # pragma: no cover - keep numpy-only environments working
    TorchBackend = None

logger = logging.getLogger(__name__)

ENV_VAR = "SHAPEGRAD_BACKEND"
DEFAULT_BACKEND = "numpy"


def _from_name(backend: str) -> Backend:
    name = backend.lower()
    if name == "numpy":
        return NumpyBackend()
    if name == "torch":
        if TorchBackend is None:
            raise ImportError("Torch backend is unavailable; install torch.")
        return TorchBackend()
    raise ValueError(f"unknown backend '{backend}'")


_CURRENT_BACKEND = _from_name(os.environ.get(ENV_VAR, DEFAULT_BACKEND))


def get_backend() -> Backend:
    return _CURRENT_BACKEND


def set_backend(backend: Union[str, Backend]) -> Backend:
    """Switch the active backend by name or instance."""
    global _CURRENT_BACKEND
    if isinstance(backend, str):
        _CURRENT_BACKEND = _from_name(backend)
    elif isinstance(backend, Backend):
        _CURRENT_BACKEND = backend
    else:
        raise TypeError(
            f"backend must be name or Backend instance, got {type(backend)}"
        )
    logger.info("active backend set to %r", _CURRENT_BACKEND)
    return _CURRENT_BACKEND


def available_backends():
    backends = ["numpy"]
    if TorchBackend is not None:
        backends.append("torch")
    return backends
