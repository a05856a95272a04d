from typing import Any, Iterable, Sequence, Tuple


class Backend:
    """Backend interface: every tensor op the shape primitives invoke lives here."""

    name = "base"

    def __init__(self):
        self.xp = None  # array module, e.g., numpy

    @property
    def float32(self):
        return self.xp.float32

    def is_array(self, x: Any) -> bool:
        # Used by Tensor construction to detect backend-native arrays.
        raise NotImplementedError

    def asarray(self, data: Any, dtype=None):
        # Used by tests and callers to coerce Python data into backend arrays.
        raise NotImplementedError

    def ones_like(self, x):
        # Used by Tensor.backward to seed the initial gradient.
        raise NotImplementedError

    def copy(self, x):
        # Used by Max to own clones of its input and result.
        raise NotImplementedError

    def add(self, x, y):
        # Used by Tensor.backward to accumulate gradients of shared tensors.
        raise NotImplementedError

    def shape(self, x) -> Tuple[int, ...]:
        # Used by every op to capture pre-op shapes.
        raise NotImplementedError

    def sum(self, x, axes: Sequence[int]):
        # Used by Sum forward, Expand backward and the Max tie count.
        # Reduced axes are kept with size 1; empty axes is the identity.
        raise NotImplementedError

    def max(self, x, axes: Sequence[int]):
        # Used by Max forward. Same keepdims convention as sum.
        raise NotImplementedError

    def expand(self, x, shape: Sequence[int]):
        # Used by Expand forward, Sum backward and Max backward.
        raise NotImplementedError

    def reshape(self, x, shape: Sequence[int]):
        # Used by Reshape forward/backward.
        raise NotImplementedError

    def permute(self, x, order: Sequence[int]):
        # Used by Permute forward/backward.
        raise NotImplementedError

    def pad(self, x, padding: Sequence[Tuple[int, int]]):
        # Used by Pad forward and Crop backward. Zero fill.
        raise NotImplementedError

    def crop(self, x, limits: Sequence[Tuple[int, int]]):
        # Used by Crop forward and Pad backward. Half-open [start, end).
        raise NotImplementedError

    def elementwise_eq(self, x, y):
        # Used by Max backward; 0/1 mask in x's dtype.
        raise NotImplementedError

    def elementwise_div(self, x, y):
        # Used by Max backward to split ties.
        raise NotImplementedError

    def elementwise_mul(self, x, y):
        # Used by Max backward to apply the upstream gradient.
        raise NotImplementedError

    def numel(self, shape: Iterable[int]) -> int:
        n = 1
        for d in shape:
            n *= int(d)
        return n

    def __repr__(self):
        return f"{type(self).__name__}()"
