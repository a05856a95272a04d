from ..shape import argsort, is_permutation, shape_to_axes
from .op00_base import Op


class Expand(Op):
    """broadcast size-1 axes to a new shape"""

    def forward(self, x, new_shape):
        self.save_for_backward(self.backend.shape(x))
        return self.backend.expand(x, tuple(new_shape))

    def df_dfda(self, grad):
        (x_shape,) = self._intermediate
        return self.backend.sum(grad, shape_to_axes(self.backend.shape(grad), x_shape))


class Reshape(Op):
    """reshape for flatten or view changes"""

    def forward(self, x, ns):
        self.save_for_backward(self.backend.shape(x))
        return self.backend.reshape(x, tuple(ns))

    def df_dfda(self, grad):
        (os,) = self._intermediate
        return self.backend.reshape(grad, os)


class Permute(Op):
    """axis reordering; backward applies the inverse order"""

    def forward(self, x, order):
        order = tuple(int(o) for o in order)
        rank = len(self.backend.shape(x))
        assert is_permutation(order, rank), f"{order} is not a permutation of {rank} axes"
        self.save_for_backward(order)
        return self.backend.permute(x, order)

    def df_dfda(self, grad):
        (order,) = self._intermediate
        return self.backend.permute(grad, argsort(order))
