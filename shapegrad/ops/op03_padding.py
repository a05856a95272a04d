from .op00_base import Op


class Pad(Op):
    """
    zero padding with per-axis (before, after) amounts.

    The saved state is where the original data sits in the padded result,
    (before, before + size) per axis, so backward is a crop.
    """

    def forward(self, x, padding):
        be = self.backend
        r = be.pad(x, padding)
        limits = tuple(
            (int(before), int(before) + size)
            for (before, _), size in zip(padding, be.shape(x))
        )
        self.save_for_backward(limits)
        return r

    def df_dfda(self, grad):
        # padded positions don't depend on x
        (limits,) = self._intermediate
        return self.backend.crop(grad, limits)


class Crop(Op):
    """
    per-axis [start, end) selection.

    Saves the (start, size - end) padding that restores the original extent;
    backward scatters grad into the kept region and zero-fills the rest.
    """

    def forward(self, x, limits):
        be = self.backend
        r = be.crop(x, limits)
        padding = tuple(
            (int(start), size - int(end))
            for (start, end), size in zip(limits, be.shape(x))
        )
        self.save_for_backward(padding)
        return r

    def df_dfda(self, grad):
        (padding,) = self._intermediate
        return self.backend.pad(grad, padding)
