import numpy as np
import torch
import torch.nn.functional as F

from .base import Backend


class TorchBackend(Backend):
    name = "torch"

    def __init__(self, device="cpu"):
        device = torch.device(device)
        if device.type == "cuda" and not torch.cuda.is_available():
            raise RuntimeError("Torch backend on cuda requires CUDA to be available")
        super().__init__()
        self.xp = np
        self.device = device

    def _normalize_dtype(self, dtype):
        if dtype is None:
            return torch.float32
        if isinstance(dtype, torch.dtype):
            return dtype
        np_dtype = np.dtype(dtype)
        mapping = {
            np.dtype(np.float16): torch.float16,
            np.dtype(np.float32): torch.float32,
            np.dtype(np.float64): torch.float64,
            np.dtype(np.int32): torch.int32,
            np.dtype(np.int64): torch.int64,
            np.dtype(np.bool_): torch.bool,
        }
        return mapping.get(np_dtype, torch.float32)

    def is_array(self, x):
        return isinstance(x, torch.Tensor)

    def asarray(self, data, dtype=None):
        dtype = self._normalize_dtype(dtype)
        if isinstance(data, torch.Tensor):
            if data.device != self.device or data.dtype != dtype:
                return data.to(device=self.device, dtype=dtype)
            return data
        return torch.as_tensor(np.asarray(data), dtype=dtype, device=self.device)

    def ones_like(self, x):
        return torch.ones_like(x)

    def copy(self, x):
        return x.detach().clone()

    def add(self, x, y):
        return torch.add(x, y)

    def shape(self, x):
        return tuple(int(d) for d in x.shape)

    def sum(self, x, axes):
        # torch treats an empty dim list as "reduce everything"
        if len(axes) == 0:
            return x.clone()
        return torch.sum(x, dim=tuple(axes), keepdim=True)

    def max(self, x, axes):
        if len(axes) == 0:
            return x.clone()
        return torch.amax(x, dim=tuple(axes), keepdim=True)

    def expand(self, x, shape):
        return x.expand(tuple(shape)).contiguous()

    def reshape(self, x, shape):
        return torch.reshape(x, tuple(shape))

    def permute(self, x, order):
        return x.permute(tuple(order)).contiguous()

    def pad(self, x, padding):
        # F.pad wants (before, after) pairs starting from the last axis
        flat = []
        for before, after in reversed(list(padding)):
            flat.extend((int(before), int(after)))
        return F.pad(x, tuple(flat), mode="constant", value=0.0)

    def crop(self, x, limits):
        slices = tuple(slice(int(start), int(end)) for start, end in limits)
        return x[slices].clone()

    def elementwise_eq(self, x, y):
        return torch.eq(x, y).to(x.dtype)

    def elementwise_div(self, x, y):
        return torch.div(x, y)

    def elementwise_mul(self, x, y):
        return torch.mul(x, y)

    def __repr__(self):
        return f"TorchBackend(device={str(self.device)!r})"
