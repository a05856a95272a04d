import numpy as np
import pytest

from shapegrad.backend import (
    NumpyBackend,
    available_backends,
    get_backend,
    set_backend,
)


def setup_module():
    global _PREV_BACKEND
    _PREV_BACKEND = get_backend()


def teardown_module():
    set_backend(_PREV_BACKEND)


def test_set_backend_by_name():
    backend = set_backend("numpy")
    assert isinstance(backend, NumpyBackend)
    assert get_backend() is backend


def test_set_backend_by_instance():
    backend = NumpyBackend()
    assert set_backend(backend) is backend


def test_set_backend_unknown_name():
    with pytest.raises(ValueError):
        set_backend("jax")


def test_set_backend_wrong_type():
    with pytest.raises(TypeError):
        set_backend(42)


def test_available_backends():
    assert "numpy" in available_backends()


def test_set_backend_torch():
    pytest.importorskip("torch")
    backend = set_backend("torch")
    assert backend.name == "torch"
    assert "torch" in available_backends()


def test_numpy_reductions_keep_rank():
    be = NumpyBackend()
    x = be.asarray(np.arange(24).reshape(2, 3, 4))
    assert be.shape(be.sum(x, (0, 2))) == (1, 3, 1)
    assert be.shape(be.max(x, (1,))) == (2, 1, 4)
    np.testing.assert_array_equal(be.sum(x, ()), x)
    np.testing.assert_array_equal(be.max(x, ()), x)


def test_numpy_eq_mask_dtype():
    be = NumpyBackend()
    x = be.asarray([1.0, 2.0, 2.0])
    mask = be.elementwise_eq(x, be.asarray([2.0]))
    assert mask.dtype == x.dtype
    np.testing.assert_array_equal(mask, [0.0, 1.0, 1.0])


def test_torch_empty_axes_is_identity():
    torch = pytest.importorskip("torch")
    from shapegrad.backend import TorchBackend

    be = TorchBackend()
    x = be.asarray(np.arange(6).reshape(2, 3))
    assert torch.equal(be.sum(x, ()), x)
    assert torch.equal(be.max(x, ()), x)
    assert be.shape(be.sum(x, (0, 1))) == (1, 1)


def test_torch_pad_matches_numpy():
    pytest.importorskip("torch")
    from shapegrad.backend import TorchBackend

    data = np.random.randn(2, 3).astype(np.float32)
    padding = ((1, 0), (2, 1))
    expected = NumpyBackend().pad(data, padding)
    be = TorchBackend()
    got = be.pad(be.asarray(data), padding)
    np.testing.assert_array_equal(got.numpy(), expected)
