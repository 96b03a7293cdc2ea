from numba import njit
import numpy as np
from .constants import *

##########################################################################################
# Core numba JIT functions for tensor operations
##########################################################################################

@njit(sig_flat_offset, fastmath=True, cache=True)
def flat_offset_nb_core(
    shape,
    indices):
    """
    Flat offset of a multi-index. Axis 0 varies fastest:
    offset = sum_k i_k * prod_{j<k} shape[j]
    """
    offset = 0
    stride = 1
    for k in range(indices.shape[0]):
        offset += indices[k] * stride
        stride *= shape[k]

    return offset


@njit(sig_length, fastmath=True, cache=True)
def tensor_length_nb_core(
    shape):
    """
    Number of components, prod(shape). A rank 0 shape has length 1.
    """
    length = 1
    for k in range(shape.shape[0]):
        length *= shape[k]

    return length


@njit([sig_binary_f32, sig_binary_f64], fastmath=True, cache=True)
def tensor_sum_nb_core(
    lhs,
    rhs):
    """
    lhs[i] + rhs[i]
    """
    out = np.empty_like(lhs)
    for i in range(lhs.shape[0]):
        out[i] = lhs[i] + rhs[i]

    return out


@njit([sig_binary_f32, sig_binary_f64], fastmath=True, cache=True)
def tensor_subtract_nb_core(
    lhs,
    rhs):
    """
    lhs[i] - rhs[i]
    """
    out = np.empty_like(lhs)
    for i in range(lhs.shape[0]):
        out[i] = lhs[i] - rhs[i]

    return out


# no fastmath and numpy error model: x/0 must give inf/nan, not raise
@njit([sig_binary_f32, sig_binary_f64], error_model='numpy', cache=True)
def tensor_divide_nb_core(
    lhs,
    rhs):
    """
    lhs[i] / rhs[i]
    """
    out = np.empty_like(lhs)
    for i in range(lhs.shape[0]):
        out[i] = lhs[i] / rhs[i]

    return out


@njit([sig_binary_f32, sig_binary_f64], fastmath=True, cache=True)
def tensor_hadamard_nb_core(
    lhs,
    rhs):
    """
    lhs[i] * rhs[i]
    """
    out = np.empty_like(lhs)
    for i in range(lhs.shape[0]):
        out[i] = lhs[i] * rhs[i]

    return out


@njit([sig_scalar_f32, sig_scalar_f64], fastmath=True, cache=True)
def tensor_sum_scalar_nb_core(
    lhs,
    scalar):
    """
    lhs[i] + scalar
    """
    out = np.empty_like(lhs)
    for i in range(lhs.shape[0]):
        out[i] = lhs[i] + scalar

    return out


@njit([sig_scalar_f32, sig_scalar_f64], fastmath=True, cache=True)
def tensor_subtract_scalar_nb_core(
    lhs,
    scalar):
    """
    lhs[i] - scalar
    """
    out = np.empty_like(lhs)
    for i in range(lhs.shape[0]):
        out[i] = lhs[i] - scalar

    return out


@njit([sig_scalar_f32, sig_scalar_f64], error_model='numpy', cache=True)
def tensor_divide_scalar_nb_core(
    lhs,
    scalar):
    """
    lhs[i] / scalar
    """
    out = np.empty_like(lhs)
    for i in range(lhs.shape[0]):
        out[i] = lhs[i] / scalar

    return out


@njit([sig_scalar_f32, sig_scalar_f64], fastmath=True, cache=True)
def tensor_product_scalar_nb_core(
    lhs,
    scalar):
    """
    lhs[i] * scalar
    """
    out = np.empty_like(lhs)
    for i in range(lhs.shape[0]):
        out[i] = lhs[i] * scalar

    return out


@njit([sig_dot_f32, sig_dot_f64], fastmath=True, cache=True)
def tensor_dot_nb_core(
    lhs,
    rhs):
    """
    sum_i lhs[i] * rhs[i], both tensors viewed as flat buffers
    """
    acc = 0.0
    for i in range(lhs.shape[0]):
        acc += lhs[i] * rhs[i]

    return acc


##########################################################################################
# Core numpy functions for tensor operations
##########################################################################################


def tensor_strides_np_core(
    shape : np.ndarray) -> np.ndarray:
    """
    Per-axis strides of the flat buffer.
    Args:
        shape (np.ndarray) : (rank,) array of axis extents
    Returns:
        strides (np.ndarray) : (rank,) array, [1, shape[0], shape[0]*shape[1], ...]
    """
    rank = len(shape)
    return np.cumprod(np.concatenate(([1], shape[:-1])),
                      dtype=SHAPE_DTYPE)[:rank]


def flat_offset_np_core(
    shape : np.ndarray,
    indices) -> int:
    """
    Flat offset of a multi-index (axis 0 fastest).
    Args:
        shape (np.ndarray)  : (rank,) array of axis extents
        indices (sequence)  : one index per axis
    Returns:
        offset (int) : position of the element in the component buffer
    """
    offset = 0
    stride = 1
    for index, extent in zip(indices, shape):
        offset += int(index) * stride
        stride *= int(extent)

    return offset


def tensor_length_np_core(
    shape : np.ndarray) -> int:
    """
    Number of components of a tensor with the given shape (1 for rank 0).
    """
    return int(np.prod(shape, dtype=SHAPE_DTYPE))


def tensor_sum_np_core(
    lhs : np.ndarray,
    rhs : np.ndarray) -> np.ndarray:
    """lhs[i] + rhs[i]"""
    return lhs + rhs


def tensor_subtract_np_core(
    lhs : np.ndarray,
    rhs : np.ndarray) -> np.ndarray:
    """lhs[i] - rhs[i]"""
    return lhs - rhs


def tensor_divide_np_core(
    lhs : np.ndarray,
    rhs : np.ndarray) -> np.ndarray:
    """lhs[i] / rhs[i], IEEE semantics on zero denominators"""
    with np.errstate(divide='ignore', invalid='ignore'):
        return lhs / rhs


def tensor_hadamard_np_core(
    lhs : np.ndarray,
    rhs : np.ndarray) -> np.ndarray:
    """lhs[i] * rhs[i]"""
    return lhs * rhs


def tensor_sum_scalar_np_core(
    lhs : np.ndarray,
    scalar) -> np.ndarray:
    """lhs[i] + scalar"""
    return lhs + lhs.dtype.type(scalar)


def tensor_subtract_scalar_np_core(
    lhs : np.ndarray,
    scalar) -> np.ndarray:
    """lhs[i] - scalar"""
    return lhs - lhs.dtype.type(scalar)


def tensor_divide_scalar_np_core(
    lhs : np.ndarray,
    scalar) -> np.ndarray:
    """lhs[i] / scalar, IEEE semantics on a zero scalar"""
    with np.errstate(divide='ignore', invalid='ignore'):
        return lhs / lhs.dtype.type(scalar)


def tensor_product_scalar_np_core(
    lhs : np.ndarray,
    scalar) -> np.ndarray:
    """lhs[i] * scalar"""
    return lhs * lhs.dtype.type(scalar)


def tensor_dot_np_core(
    lhs : np.ndarray,
    rhs : np.ndarray) -> float:
    """
    Flat dot product, sum_i lhs[i] * rhs[i].
    """
    return float(np.dot(lhs, rhs))
