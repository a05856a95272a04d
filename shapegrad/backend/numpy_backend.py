import numpy as np

from .base import Backend


class NumpyBackend(Backend):
    name = "numpy"

    def __init__(self):
        super().__init__()
        self.xp = np

    def is_array(self, x):
        return isinstance(x, np.ndarray)

    def asarray(self, data, dtype=None):
        dtype = dtype or self.float32
        return np.asarray(data, dtype=dtype)

    def ones_like(self, x):
        return np.ones_like(x)

    def copy(self, x):
        return np.array(x, copy=True)

    def add(self, x, y):
        return np.add(x, y)

    def shape(self, x):
        return tuple(int(d) for d in x.shape)

    def sum(self, x, axes):
        return np.sum(x, axis=tuple(axes), keepdims=True)

    def max(self, x, axes):
        return np.max(x, axis=tuple(axes), keepdims=True)

    def expand(self, x, shape):
        # broadcast_to returns a read-only view
        return np.array(np.broadcast_to(x, tuple(shape)))

    def reshape(self, x, shape):
        return np.reshape(x, tuple(shape))

    def permute(self, x, order):
        return np.transpose(x, tuple(order))

    def pad(self, x, padding):
        pad_width = tuple((int(a), int(b)) for a, b in padding)
        return np.pad(x, pad_width, mode="constant")

    def crop(self, x, limits):
        slices = tuple(slice(int(start), int(end)) for start, end in limits)
        return x[slices].copy()

    def elementwise_eq(self, x, y):
        return np.equal(x, y).astype(x.dtype)

    def elementwise_div(self, x, y):
        return np.divide(x, y)

    def elementwise_mul(self, x, y):
        return np.multiply(x, y)
