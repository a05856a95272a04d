from ..shape import shape_to_axes
from .op00_base import Op


class Sum(Op):
    """sum over axes, reduced axes kept with size 1"""

    def forward(self, x, axes):
        self.save_for_backward(self.backend.shape(x))
        return self.backend.sum(x, tuple(axes))

    def df_dfda(self, grad):
        # d(sum)/dx is 1 everywhere: replicate, don't divide
        (x_shape,) = self._intermediate
        return self.backend.expand(grad, x_shape)


class Max(Op):
    """max over axes; ties share the gradient evenly"""

    def forward(self, x, axes):
        be = self.backend
        r = be.max(x, tuple(axes))
        self.save_for_backward(be.copy(x), be.copy(r))
        return r

    def df_dfda(self, grad):
        be = self.backend
        x, r = self._intermediate
        x_shape = be.shape(x)
        max_is_1s = be.elementwise_eq(x, be.expand(r, x_shape))
        # count of tied maxima per reduction group, never 0 when eq agrees with max
        div = be.expand(
            be.sum(max_is_1s, shape_to_axes(be.shape(max_is_1s), be.shape(grad))),
            x_shape,
        )
        max_is_amount = be.elementwise_div(max_is_1s, div)
        grad_expanded = be.expand(grad, x_shape)
        return be.elementwise_mul(max_is_amount, grad_expanded)
