"""
Kernel selection and operand validation helpers shared by the tensor, vector
and matrix operations classes.
"""
import warnings
import numpy as np
from .tensor import Tensor
from ..errors import IndexOutOfRangeError, RankMismatchError, ShapeMismatchError


def numba_compatible(
    *tensors: Tensor) -> bool:
    """
    True when every operand shares one dtype, i.e. a compiled Numba signature
    exists for the call. Mixed precision falls back to the NumPy kernels.
    """
    dtypes = {tensor.dtype for tensor in tensors}
    if len(dtypes) > 1:
        warnings.warn(
            f"Mixed precision operands {sorted(str(d) for d in dtypes)}, "
            "falling back to NumPy kernels",
            RuntimeWarning,
            stacklevel=3)
        return False
    return True


def check_same_shape(
    lhs: Tensor,
    rhs: Tensor,
    operation: str) -> None:
    if not np.array_equal(lhs.shape, rhs.shape):
        raise ShapeMismatchError(
            f"{operation}: operand shapes differ, "
            f"{lhs.shape.tolist()} vs {rhs.shape.tolist()}")


def check_same_length(
    lhs: Tensor,
    rhs: Tensor,
    operation: str) -> None:
    if lhs.length != rhs.length:
        raise ShapeMismatchError(
            f"{operation}: operand lengths differ, {lhs.length} vs {rhs.length}")


def check_rank(
    tensor: Tensor,
    rank: int,
    operation: str) -> None:
    if tensor.rank != rank:
        raise RankMismatchError(
            f"{operation}: expected a rank {rank} tensor, got rank {tensor.rank}")


def check_indices(
    tensor: Tensor,
    indices) -> None:
    """
    One index per axis and 0 <= index < extent on every axis.
    """
    if len(indices) != tensor.rank:
        raise RankMismatchError(
            f"expected {tensor.rank} indices for a rank {tensor.rank} tensor, "
            f"got {len(indices)}")
    for axis, (index, extent) in enumerate(zip(indices, tensor.shape)):
        if not 0 <= index < extent:
            raise IndexOutOfRangeError(
                f"index {index} out of range for axis {axis} with extent {extent}")
