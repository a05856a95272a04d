import logging

logger = logging.getLogger(__name__)


class Op:
    def __init__(self, *tensors, backend):
        self.parents = tensors
        self.backend = backend
        self._intermediate = []  # replay state for df_dfda

    def save_for_backward(self, *x):
        self._intermediate.extend(x)

    def forward(self, x, args):
        # Computes the output and saves whatever df_dfda needs.
        raise NotImplementedError

    def df_dfda(self, grad):
        # Gradient w.r.t. the single input, from the saved state and the upstream grad.
        raise NotImplementedError

    def backward(self, grad):
        grad_x = self.df_dfda(grad)
        logger.debug(
            "%s backward: %s -> %s",
            type(self).__name__,
            self.backend.shape(grad),
            self.backend.shape(grad_x),
        )
        return [grad_x]

    @classmethod
    def f(cls, x, args, backend=None):
        """run forward on a raw array; returns (op, out), the op being the replay state"""
        from shapegrad.backend import get_backend  # late import to avoid circular deps

        if backend is None:
            backend = get_backend()
        op = cls(backend=backend)
        out = op.forward(x, args)
        return op, out

    @classmethod
    def apply(cls, x, args, backend=None):
        from shapegrad.backend import get_backend  # late import to avoid circular deps
        from shapegrad.tensor import Tensor  # late import to avoid circular deps

        if backend is None:
            backend = get_backend()
        op = cls(x, backend=backend)
        out = op.forward(x.data, args)
        logger.debug(
            "%s forward: %s -> %s",
            cls.__name__,
            backend.shape(x.data),
            backend.shape(out),
        )
        ret = Tensor(out, backend=backend)
        ret._op = op
        return ret
