"""
LWtensor: Tensor

The Tensor entity: a flat component buffer plus the shape that addresses it.

Components are stored with axis 0 varying fastest, i.e. the element at
(i0, i1, ..., i_{r-1}) lives at

    offset = sum_k i_k * prod_{j<k} shape[j]

which is NumPy's Fortran ordering. Element-wise arithmetic lives in
TensorOperations; the operators defined here are thin NumPy shortcuts.

"""

import numpy as np
from typing import Optional, Sequence, Union
from .constants import *
from .core_functions import (
    flat_offset_np_core,
    tensor_length_np_core,
    tensor_strides_np_core,
    tensor_sum_np_core,
    tensor_subtract_np_core,
    tensor_divide_np_core,
    tensor_hadamard_np_core,
    tensor_sum_scalar_np_core,
    tensor_subtract_scalar_np_core,
    tensor_divide_scalar_np_core,
    tensor_product_scalar_np_core,
)
from ..errors import RankMismatchError, TensorReleasedError


def resolve_dtype(
    precision: str) -> type:
    """
    Map a precision name ('float32' or 'float64') to its numpy scalar type.
    """
    if precision not in PRECISIONS:
        raise ValueError(f"precision must be one of {sorted(PRECISIONS)}, got {precision!r}")
    return PRECISIONS[precision]


class Tensor:
    """
    A rank-r tensor of float32 or float64 components, zero-initialised.

    Subclasses pin the rank through the ``RANK`` class attribute; any
    construction path that would produce a different rank raises
    RankMismatchError.
    """

    RANK: Optional[int] = None

    def __init__(
        self,
        shape: Sequence[int],
        precision: str = DEFAULT_PRECISION) -> None:
        """
        Allocate a zero tensor.

        Args:
            shape (sequence of int): extent of each axis, one entry per axis
            precision (str, optional): 'float32' or 'float64'. Defaults to 'float64'.
        """
        dtype = resolve_dtype(precision)
        shape = np.array(shape, dtype=SHAPE_DTYPE).reshape(-1)
        if np.any(shape < 0):
            raise ValueError(f"shape entries must be non-negative, got {shape.tolist()}")
        self._bind(shape,
                   np.zeros(tensor_length_np_core(shape), dtype=dtype))


    def _bind(
        self,
        shape: np.ndarray,
        components: np.ndarray) -> None:
        if self.RANK is not None and len(shape) != self.RANK:
            raise RankMismatchError(
                f"{type(self).__name__} requires rank {self.RANK}, got rank {len(shape)}")
        self._shape = shape
        self._components = components


    @classmethod
    def _wrap(
        cls,
        shape: np.ndarray,
        components: np.ndarray) -> "Tensor":
        """Build a tensor around existing arrays without copying them."""
        tensor = cls.__new__(cls)
        tensor._bind(shape, components)
        return tensor


    @classmethod
    def from_shape(
        cls,
        shape: np.ndarray,
        precision: str = DEFAULT_PRECISION) -> "Tensor":
        """
        Allocate a zero tensor that adopts ``shape`` as its own shape array.

        An int64 numpy array is taken over as-is, not copied: the caller must
        not modify it afterwards.
        """
        dtype = resolve_dtype(precision)
        shape = np.asarray(shape, dtype=SHAPE_DTYPE)
        if shape.ndim != 1:
            raise ValueError("shape must be a one-dimensional sequence")
        return cls._wrap(shape,
                         np.zeros(tensor_length_np_core(shape), dtype=dtype))


    @classmethod
    def from_numpy(
        cls,
        array: np.ndarray,
        precision: Optional[str] = None) -> "Tensor":
        """
        Copy a numpy array into a new tensor so that tensor.get(i, j, ...)
        equals array[i, j, ...].

        Args:
            array (np.ndarray): source array of any rank
            precision (str, optional): target precision. Defaults to the
                array's own dtype when that is float32, otherwise float64.
        """
        array = np.asarray(array)
        if precision is None:
            precision = 'float32' if array.dtype == np.float32 else DEFAULT_PRECISION
        dtype = resolve_dtype(precision)
        shape = np.array(array.shape, dtype=SHAPE_DTYPE)
        components = np.array(array.ravel(order='F'), dtype=dtype)
        return cls._wrap(shape, components)


    def to_numpy(self) -> np.ndarray:
        """
        Copy of the components as an n-dimensional numpy array indexed like get().
        """
        return self.components.reshape(tuple(self.shape), order='F').copy()


    @property
    def released(self) -> bool:
        return self._components is None


    def _require_alive(self) -> None:
        if self._components is None:
            raise TensorReleasedError("tensor has been released")


    @property
    def shape(self) -> np.ndarray:
        self._require_alive()
        return self._shape


    @property
    def components(self) -> np.ndarray:
        self._require_alive()
        return self._components


    @property
    def rank(self) -> int:
        return len(self.shape)


    @property
    def length(self) -> int:
        return tensor_length_np_core(self.shape)


    @property
    def dtype(self) -> np.dtype:
        return self.components.dtype


    @property
    def precision(self) -> str:
        return self.components.dtype.name


    @property
    def strides(self) -> np.ndarray:
        """Flat-buffer stride of each axis, in elements."""
        return tensor_strides_np_core(self.shape)


    def get(
        self,
        *indices: int) -> float:
        """
        Read the element at the given multi-index. One index per axis; no
        bounds checking.
        """
        return self.components[flat_offset_np_core(self.shape, indices)].item()


    def set(
        self,
        value: float,
        *indices: int) -> None:
        """
        Write ``value`` at the given multi-index. One index per axis; no
        bounds checking.
        """
        self.components[flat_offset_np_core(self.shape, indices)] = value


    def copy(self) -> "Tensor":
        """Deep copy: new shape and component arrays."""
        return type(self)._wrap(self.shape.copy(), self.components.copy())


    def release(self) -> None:
        """
        Drop the shape and component buffers. The tensor is unusable afterwards
        and releasing it a second time raises TensorReleasedError.
        """
        self._require_alive()
        self._shape = None
        self._components = None


    def equals(
        self,
        other: "Tensor") -> bool:
        """Exact comparison of shape and components."""
        return (np.array_equal(self.shape, other.shape)
                and np.array_equal(self.components, other.components))


    def __enter__(self) -> "Tensor":
        return self


    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if not self.released:
            self.release()


    def __len__(self) -> int:
        return self.length


    def __repr__(self) -> str:
        if self.released:
            return f"{type(self).__name__}(<released>)"
        return (f"{type(self).__name__}(shape={self.shape.tolist()}, "
                f"components={self.components.tolist()}, precision='{self.precision}')")


    def _elementwise(
        self,
        other: Union["Tensor", float],
        tensor_core,
        scalar_core) -> "Tensor":
        if isinstance(other, Tensor):
            out = tensor_core(self.components, other.components)
        else:
            out = scalar_core(self.components, other)
        return type(self)._wrap(self.shape.copy(), out)


    def __add__(self, other):
        return self._elementwise(other, tensor_sum_np_core, tensor_sum_scalar_np_core)


    def __sub__(self, other):
        return self._elementwise(other, tensor_subtract_np_core, tensor_subtract_scalar_np_core)


    def __mul__(self, other):
        return self._elementwise(other, tensor_hadamard_np_core, tensor_product_scalar_np_core)


    def __truediv__(self, other):
        return self._elementwise(other, tensor_divide_np_core, tensor_divide_scalar_np_core)


    __radd__ = __add__
    __rmul__ = __mul__


    def __neg__(self):
        return type(self)._wrap(self.shape.copy(), -self.components)
