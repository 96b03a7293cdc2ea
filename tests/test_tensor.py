"""Tests for the Tensor entity and TensorOperations."""

import numpy as np
import pytest

from lwtensor import (
    IndexOutOfRangeError,
    RankMismatchError,
    ShapeMismatchError,
    Tensor,
    TensorOperations,
    TensorReleasedError,
)
from lwtensor.tensor import flat_offset_np_core


@pytest.fixture(params=[True, False], ids=["numba", "numpy"])
def ops(request):
    return TensorOperations(use_numba=request.param)


@pytest.fixture(params=[True, False], ids=["numba", "numpy"])
def checked_ops(request):
    return TensorOperations(use_numba=request.param, validate=True)


def _filled(ops, *dims):
    tensor = ops.create_tensor(len(dims), *dims)
    tensor.components[:] = np.arange(1, tensor.length + 1, dtype=tensor.dtype)
    return tensor


@pytest.mark.parametrize("dims", [(), (4,), (2, 3), (2, 3, 4), (3, 1, 2, 5), (2, 0, 3)])
def test_length_is_product_of_shape(ops, dims):
    tensor = ops.create_tensor(len(dims), *dims)
    assert tensor.rank == len(dims)
    assert tensor.shape.tolist() == list(dims)
    assert ops.get_length(tensor) == int(np.prod(dims, dtype=np.int64))
    assert len(tensor.components) == tensor.length
    assert np.all(tensor.components == 0.0)


def test_rank_zero_tensor_holds_one_value(ops):
    scalar = ops.create_tensor(0)
    assert ops.get_length(scalar) == 1
    ops.set_value(scalar, 7.5)
    assert ops.get_value(scalar) == 7.5


def test_create_tensor_rejects_rank_dims_mismatch(ops):
    with pytest.raises(ValueError):
        ops.create_tensor(3, 2, 2)


def test_negative_extent_rejected():
    with pytest.raises(ValueError):
        Tensor((2, -1))


def test_unknown_precision_rejected():
    with pytest.raises(ValueError):
        Tensor((2,), precision='float16')
    with pytest.raises(ValueError):
        TensorOperations(precision='int32')


def test_addressing_is_axis_zero_fastest(ops):
    tensor = ops.create_tensor(3, 2, 3, 4)
    # offset = i0 + i1*2 + i2*2*3
    assert ops.flat_offset(tensor, 1, 0, 0) == 1
    assert ops.flat_offset(tensor, 0, 1, 0) == 2
    assert ops.flat_offset(tensor, 0, 0, 1) == 6
    assert ops.flat_offset(tensor, 1, 2, 3) == 1 + 2 * 2 + 3 * 6
    assert tensor.strides.tolist() == [1, 2, 6]


def test_set_then_get_hits_the_documented_offset(ops):
    tensor = ops.create_tensor(2, 3, 4)
    ops.set_value(tensor, 9.0, 2, 1)
    assert tensor.components[2 + 1 * 3] == 9.0
    assert ops.get_value(tensor, 2, 1) == 9.0
    assert tensor.get(2, 1) == 9.0
    assert np.count_nonzero(tensor.components) == 1


def test_numpy_view_matches_get(ops):
    tensor = _filled(ops, 2, 3, 4)
    array = tensor.to_numpy()
    assert array.shape == (2, 3, 4)
    for index in np.ndindex(2, 3, 4):
        assert array[index] == tensor.get(*index)
        assert flat_offset_np_core(tensor.shape, index) == ops.flat_offset(tensor, *index)


def test_from_numpy_roundtrip():
    array = np.arange(24, dtype=np.float64).reshape(2, 3, 4)
    tensor = Tensor.from_numpy(array)
    assert tensor.shape.tolist() == [2, 3, 4]
    assert tensor.get(1, 2, 3) == array[1, 2, 3]
    assert np.array_equal(tensor.to_numpy(), array)


def test_from_shape_adopts_shape_array(ops):
    shape = np.array([2, 5], dtype=np.int64)
    tensor = ops.create_tensor_from_shape(2, shape)
    assert tensor.shape is shape
    assert tensor.length == 10


def test_copy_is_independent(ops):
    tensor = _filled(ops, 2, 2)
    duplicate = ops.create_copy(tensor)
    ops.set_value(duplicate, -1.0, 0, 0)
    assert tensor.get(0, 0) == 1.0
    assert duplicate.get(0, 0) == -1.0
    assert duplicate.shape is not tensor.shape
    assert duplicate.components is not tensor.components


@pytest.mark.parametrize("name, expected", [
    ("sum", lambda a, b: a + b),
    ("subtract", lambda a, b: a - b),
    ("divide", lambda a, b: a / b),
    ("hadamard", lambda a, b: a * b),
])
def test_elementwise_binary(ops, name, expected):
    lhs = _filled(ops, 2, 3)
    rhs = ops.product_scalar(_filled(ops, 2, 3), 0.5)
    result = getattr(ops, name)(lhs, rhs)
    assert result.shape.tolist() == [2, 3]
    assert np.allclose(result.components, expected(lhs.components, rhs.components))


def test_binary_ops_do_not_mutate_operands(ops):
    lhs = _filled(ops, 3)
    rhs = _filled(ops, 3)
    before = lhs.components.copy()
    ops.sum(lhs, rhs)
    ops.hadamard(lhs, rhs)
    assert np.array_equal(lhs.components, before)
    assert np.array_equal(rhs.components, before)


def test_divide_by_zero_gives_ieee_values(ops):
    lhs = Tensor.from_numpy(np.array([1.0, -1.0, 0.0]))
    rhs = ops.create_tensor(1, 3)
    result = ops.divide(lhs, rhs)
    assert result.components[0] == np.inf
    assert result.components[1] == -np.inf
    assert np.isnan(result.components[2])

    scaled = ops.divide_scalar(lhs, 0.0)
    assert scaled.components[0] == np.inf


@pytest.mark.parametrize("name, scalar, expected", [
    ("sum_scalar", 2.0, lambda a: a + 2.0),
    ("subtract_scalar", 2.0, lambda a: a - 2.0),
    ("divide_scalar", 4.0, lambda a: a / 4.0),
    ("product_scalar", -3.0, lambda a: a * -3.0),
])
@pytest.mark.parametrize("dims", [(), (5,), (2, 3), (2, 2, 2)])
def test_scalar_ops_preserve_shape(ops, name, scalar, expected, dims):
    tensor = _filled(ops, *dims)
    result = getattr(ops, name)(tensor, scalar)
    assert result.rank == tensor.rank
    assert np.array_equal(result.shape, tensor.shape)
    assert np.allclose(result.components, expected(tensor.components))


def test_dot_is_commutative(ops):
    rng = np.random.default_rng(3)
    u = Tensor.from_numpy(rng.normal(size=(7,)))
    v = Tensor.from_numpy(rng.normal(size=(7,)))
    assert ops.dot(u, v) == ops.dot(v, u)
    assert ops.dot(u, v) == pytest.approx(float(np.dot(u.components, v.components)))


def test_dot_flattens_higher_rank(ops):
    a = _filled(ops, 2, 2)
    b = _filled(ops, 2, 2)
    assert ops.dot(a, b) == pytest.approx(1.0 + 4.0 + 9.0 + 16.0)


def test_float32_precision_is_kept():
    ops = TensorOperations(precision='float32')
    tensor = ops.create_tensor(1, 4)
    assert tensor.dtype == np.float32
    assert ops.sum_scalar(tensor, 1.0).dtype == np.float32
    assert ops.sum(tensor, tensor).dtype == np.float32


def test_mixed_precision_falls_back_with_warning():
    ops = TensorOperations(use_numba=True)
    single = Tensor((3,), precision='float32')
    double = Tensor((3,), precision='float64')
    with pytest.warns(RuntimeWarning):
        result = ops.sum(single, double)
    assert result.shape.tolist() == [3]


def test_operators(ops):
    a = _filled(ops, 2, 2)
    b = _filled(ops, 2, 2)
    assert (a + b).equals(ops.sum(a, b))
    assert (a - b).equals(ops.subtract(a, b))
    assert (a * b).equals(ops.hadamard(a, b))
    assert (a / 2.0).equals(ops.divide_scalar(a, 2.0))
    assert (2.0 * a).equals(ops.product_scalar(a, 2.0))
    assert np.array_equal((-a).components, -a.components)


def test_release_and_context_manager(ops):
    tensor = ops.create_tensor(1, 3)
    ops.destroy_tensor(tensor)
    assert tensor.released
    with pytest.raises(TensorReleasedError):
        tensor.get(0)
    with pytest.raises(TensorReleasedError):
        ops.destroy_tensor(tensor)
    assert "released" in repr(tensor)

    with ops.create_tensor(2, 2, 2) as scoped:
        ops.set_value(scoped, 1.0, 1, 1)
    assert scoped.released


def test_validation_is_off_by_default(ops):
    lhs = ops.create_tensor(1, 3)
    rhs = ops.create_tensor(2, 1, 3)
    # same length, different shape: accepted without validation
    assert ops.sum(lhs, rhs).shape.tolist() == [3]


def test_validation_rejects_shape_mismatch(checked_ops):
    lhs = checked_ops.create_tensor(1, 3)
    rhs = checked_ops.create_tensor(2, 1, 3)
    with pytest.raises(ShapeMismatchError):
        checked_ops.sum(lhs, rhs)
    with pytest.raises(ShapeMismatchError):
        checked_ops.dot(lhs, checked_ops.create_tensor(1, 4))


def test_validation_rejects_bad_indices(checked_ops):
    tensor = checked_ops.create_tensor(2, 2, 3)
    with pytest.raises(RankMismatchError):
        checked_ops.get_value(tensor, 1)
    with pytest.raises(IndexOutOfRangeError):
        checked_ops.set_value(tensor, 1.0, 2, 0)
    with pytest.raises(IndexError):
        checked_ops.get_value(tensor, 0, -1)
