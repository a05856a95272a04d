import logging

from shapegrad.backend import get_backend
from shapegrad.ops import Crop, Expand, Max, Pad, Permute, Reshape, Sum

logger = logging.getLogger(__name__)


class Tensor:
    def __init__(self, data, backend=None):
        backend = backend or get_backend()
        if not backend.is_array(data):
            raise TypeError(
                f"Tensor data must be a {backend.name} array, got {type(data)}"
            )
        self.data = data
        self.grad = None
        self.backend = backend

        self._op = None
        # The Op that produced this tensor, None for leaves.
        # It holds the parents (graph edges) and the state its df_dfda needs.

    @property
    def shape(self):
        return self.backend.shape(self.data)

    def __repr__(self):
        return f"Tensor {self.data} with grad {self.grad}"

    def _deepwalk(self):
        # post-order: every node comes after the nodes it was computed from
        order, visited = [], set()
        stack = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                order.append(node)
                continue
            if node in visited:
                continue
            visited.add(node)
            stack.append((node, True))
            if node._op is not None:
                for p in reversed(node._op.parents):
                    if p not in visited:
                        stack.append((p, False))
        return order

    def backward(self, grad=None):
        if self._op is None:
            return

        # The gradient of a value with respect to itself is 1.
        if grad is None:
            assert self.backend.numel(self.shape) == 1, (
                "implicit gradient needs a single-element tensor"
            )
            grad = self.backend.ones_like(self.data)
        assert self.backend.shape(grad) == self.shape, (
            f"grad shape must match tensor shape {self.backend.shape(grad)}, {self.shape}"
        )

        # only this pass's gradients are propagated; stored .grad never flows back again
        grads = {self: self.backend.copy(grad)}
        nodes = self._deepwalk()
        logger.debug("backward over %d tensors", len(nodes))
        for t in reversed(nodes):
            g_t = grads.get(t)
            if g_t is None:
                continue
            if t._op is None:
                # leaves sum their gradients across backward calls
                t.grad = g_t if t.grad is None else self.backend.add(t.grad, g_t)
                continue
            t.grad = g_t
            for p, g in zip(t._op.parents, t._op.backward(g_t)):
                assert self.backend.shape(g) == p.shape, (
                    f"grad shape must match tensor shape {self.backend.shape(g)}, {p.shape}"
                )
                # a tensor consumed more than once sums its gradients
                grads[p] = g if p not in grads else self.backend.add(grads[p], g)

    # shape ops:
    def sum(self, axes): return Sum.apply(self, axes, backend=self.backend)
    def max(self, axes): return Max.apply(self, axes, backend=self.backend)
    def expand(self, shape): return Expand.apply(self, shape, backend=self.backend)
    def reshape(self, shape): return Reshape.apply(self, shape, backend=self.backend)
    def permute(self, order): return Permute.apply(self, order, backend=self.backend)
    def pad(self, padding): return Pad.apply(self, padding, backend=self.backend)
    def crop(self, limits): return Crop.apply(self, limits, backend=self.backend)
