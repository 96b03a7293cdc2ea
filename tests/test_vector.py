"""Tests for the Vector entity and VectorOperations."""

import numpy as np
import pytest

from lwtensor import RankMismatchError, ShapeMismatchError, Tensor, Vector, VectorOperations


@pytest.fixture(params=[True, False], ids=["numba", "numpy"])
def ops(request):
    return VectorOperations(use_numba=request.param)


def test_create_vector_is_zero(ops):
    vec = ops.create_vector(5)
    assert isinstance(vec, Vector)
    assert vec.rank == 1
    assert vec.shape.tolist() == [5]
    assert np.all(vec.components == 0.0)


def test_create_vector_from_three_values(ops):
    vec = ops.create_vector_from([1.0, -2.0, 3.5])
    assert vec.shape.tolist() == [3]
    assert vec.components.tolist() == [1.0, -2.0, 3.5]


def test_create_vector_from_has_fixed_arity(ops):
    with pytest.raises(ValueError):
        ops.create_vector_from([1.0, 2.0])
    with pytest.raises(ValueError):
        ops.create_vector_from([1.0, 2.0, 3.0, 4.0])


def test_vector_rank_is_enforced():
    with pytest.raises(RankMismatchError):
        Vector.from_numpy(np.zeros((2, 2)))
    with pytest.raises(RankMismatchError):
        Vector.from_shape(np.array([2, 2], dtype=np.int64))


def test_norm(ops):
    vec = ops.create_vector_from([3.0, 4.0, 12.0])
    assert ops.norm(vec) == pytest.approx(13.0)
    assert ops.norm(vec) == pytest.approx(np.sqrt(ops.dot(vec, vec)))


def test_norm_is_zero_only_for_zero_vector(ops):
    assert ops.norm(ops.create_vector(4)) == 0.0
    for i in range(4):
        vec = ops.create_vector(4)
        vec.set(1e-3, i)
        assert ops.norm(vec) > 0.0


def test_normalize(ops):
    vec = ops.create_vector_from([0.0, 3.0, 4.0])
    unit = ops.normalize(vec)
    assert isinstance(unit, Vector)
    assert np.allclose(unit.components, [0.0, 0.6, 0.8])
    assert ops.norm(unit) == pytest.approx(1.0)
    # operand untouched
    assert vec.components.tolist() == [0.0, 3.0, 4.0]


def test_normalize_zero_vector_gives_nan(ops):
    unit = ops.normalize(ops.create_vector(3))
    assert np.all(np.isnan(unit.components))


def test_cross_basis(ops):
    x = ops.create_vector_from([1.0, 0.0, 0.0])
    y = ops.create_vector_from([0.0, 1.0, 0.0])
    z = ops.create_vector_from([0.0, 0.0, 1.0])
    assert ops.cross(x, y).components.tolist() == z.components.tolist()
    assert ops.cross(y, z).components.tolist() == x.components.tolist()
    assert ops.cross(z, x).components.tolist() == y.components.tolist()


def test_cross_matches_numpy(ops):
    rng = np.random.default_rng(11)
    u = Vector.from_numpy(rng.normal(size=3))
    v = Vector.from_numpy(rng.normal(size=3))
    assert np.allclose(ops.cross(u, v).components, np.cross(u.components, v.components))


def test_cross_is_anticommutative(ops):
    u = ops.create_vector_from([1.0, 2.0, 3.0])
    v = ops.create_vector_from([-4.0, 0.5, 2.0])
    uv = ops.cross(u, v)
    vu = ops.cross(v, u)
    assert np.allclose(uv.components, -vu.components, rtol=0.0, atol=1e-12)
    # orthogonal to both operands
    assert ops.dot(uv, u) == pytest.approx(0.0)
    assert ops.dot(uv, v) == pytest.approx(0.0)


def test_cross_validation():
    ops = VectorOperations(validate=True)
    with pytest.raises(ShapeMismatchError):
        ops.cross(ops.create_vector(4), ops.create_vector(4))
    with pytest.raises(ShapeMismatchError):
        ops.cross(ops.create_vector(3), ops.create_vector(4))
    with pytest.raises(RankMismatchError):
        ops.norm(Tensor((3, 1)))


def test_vector_arithmetic_keeps_type(ops):
    u = ops.create_vector_from([1.0, 2.0, 3.0])
    v = ops.tensor_ops.sum_scalar(u, 1.0)
    assert isinstance(v, Vector)
    assert isinstance(u + v, Vector)
    assert isinstance(u.copy(), Vector)
