"""
LWtensor: Tensor Operations

Construction, element access and element-wise arithmetic on Tensor objects.
Every bulk operation has a Numba kernel and a NumPy kernel; ``use_numba``
picks one. Operations never modify their operands: each returns a newly
allocated tensor of the left operand's type.

By default no operand is validated (shape mismatches and out-of-range
indices are the caller's responsibility). With ``validate=True`` they raise
ShapeMismatchError, RankMismatchError or IndexOutOfRangeError instead.

"""

import numpy as np
from .constants import *
from .core_functions import *
from .tensor import Tensor, resolve_dtype
from .utils import check_indices, check_same_length, check_same_shape, numba_compatible


class TensorOperations:
    """
    A class to perform operations on tensors.
    No data objects. Only methods.

    """
    def __init__(
        self,
        use_numba: bool = True,
        validate: bool = False,
        precision: str = DEFAULT_PRECISION):
        """
        Initialize the TensorOperations class.

        Args:
            use_numba (bool, optional): use Numba core functions. Defaults to True.
            validate (bool, optional): check operand shapes and indices. Defaults to False.
            precision (str, optional): precision of tensors created by this object,
                'float32' or 'float64'. Defaults to 'float64'.
        """
        resolve_dtype(precision)
        self.use_numba = use_numba
        self.validate = validate
        self.precision = precision


    def _numba_for(
        self,
        *tensors: Tensor) -> bool:
        return self.use_numba and numba_compatible(*tensors)


    ##########################################################################
    # Construction
    ##########################################################################

    def create_tensor(
        self,
        rank: int,
        *dims: int) -> Tensor:
        """
        Zero tensor of the given rank; one extent per axis in ``dims``.
        """
        if rank != len(dims):
            raise ValueError(f"rank {rank} requires {rank} dimensions, got {len(dims)}")
        return Tensor(dims, precision=self.precision)


    def create_tensor_from_shape(
        self,
        rank: int,
        shape: np.ndarray) -> Tensor:
        """
        Zero tensor adopting ``shape`` as its shape array (no copy).
        """
        tensor = Tensor.from_shape(shape, precision=self.precision)
        if tensor.rank != rank:
            raise ValueError(f"rank {rank} does not match shape of length {tensor.rank}")
        return tensor


    def create_copy(
        self,
        tensor: Tensor) -> Tensor:
        return tensor.copy()


    def destroy_tensor(
        self,
        tensor: Tensor) -> None:
        tensor.release()


    ##########################################################################
    # Element access
    ##########################################################################

    def flat_offset(
        self,
        tensor: Tensor,
        *indices: int) -> int:
        """Flat buffer offset of a multi-index (axis 0 fastest)."""
        if self.validate:
            check_indices(tensor, indices)
        if self.use_numba:
            return int(flat_offset_nb_core(tensor.shape,
                                           np.array(indices, dtype=SHAPE_DTYPE)))
        return flat_offset_np_core(tensor.shape, indices)


    def get_value(
        self,
        tensor: Tensor,
        *indices: int) -> float:
        return tensor.components[self.flat_offset(tensor, *indices)].item()


    def set_value(
        self,
        tensor: Tensor,
        value: float,
        *indices: int) -> None:
        tensor.components[self.flat_offset(tensor, *indices)] = value


    def get_length(
        self,
        tensor: Tensor) -> int:
        """Number of components, prod(shape)."""
        if self.use_numba:
            return int(tensor_length_nb_core(tensor.shape))
        return tensor_length_np_core(tensor.shape)


    ##########################################################################
    # Element-wise tensor (op) tensor
    ##########################################################################

    def _binary(
        self,
        lhs: Tensor,
        rhs: Tensor,
        name: str,
        nb_core,
        np_core) -> Tensor:
        if self.validate:
            check_same_shape(lhs, rhs, name)
        if self._numba_for(lhs, rhs):
            out = nb_core(lhs.components, rhs.components)
        else:
            out = np_core(lhs.components, rhs.components)
        return type(lhs)._wrap(lhs.shape.copy(), out)


    def sum(
        self,
        lhs: Tensor,
        rhs: Tensor) -> Tensor:
        """Element-wise lhs + rhs"""
        return self._binary(lhs, rhs, "sum",
                            tensor_sum_nb_core, tensor_sum_np_core)


    def subtract(
        self,
        lhs: Tensor,
        rhs: Tensor) -> Tensor:
        """Element-wise lhs - rhs"""
        return self._binary(lhs, rhs, "subtract",
                            tensor_subtract_nb_core, tensor_subtract_np_core)


    def divide(
        self,
        lhs: Tensor,
        rhs: Tensor) -> Tensor:
        """Element-wise lhs / rhs. Zero denominators give inf/nan."""
        return self._binary(lhs, rhs, "divide",
                            tensor_divide_nb_core, tensor_divide_np_core)


    def hadamard(
        self,
        lhs: Tensor,
        rhs: Tensor) -> Tensor:
        """Element-wise lhs * rhs"""
        return self._binary(lhs, rhs, "hadamard",
                            tensor_hadamard_nb_core, tensor_hadamard_np_core)


    ##########################################################################
    # Element-wise tensor (op) scalar
    ##########################################################################

    def _scalar(
        self,
        lhs: Tensor,
        scalar: float,
        nb_core,
        np_core) -> Tensor:
        if self.use_numba:
            out = nb_core(lhs.components, lhs.dtype.type(scalar))
        else:
            out = np_core(lhs.components, scalar)
        return type(lhs)._wrap(lhs.shape.copy(), out)


    def sum_scalar(
        self,
        lhs: Tensor,
        scalar: float) -> Tensor:
        """lhs[i] + scalar"""
        return self._scalar(lhs, scalar,
                            tensor_sum_scalar_nb_core, tensor_sum_scalar_np_core)


    def subtract_scalar(
        self,
        lhs: Tensor,
        scalar: float) -> Tensor:
        """lhs[i] - scalar"""
        return self._scalar(lhs, scalar,
                            tensor_subtract_scalar_nb_core, tensor_subtract_scalar_np_core)


    def divide_scalar(
        self,
        lhs: Tensor,
        scalar: float) -> Tensor:
        """lhs[i] / scalar. A zero scalar gives inf/nan."""
        return self._scalar(lhs, scalar,
                            tensor_divide_scalar_nb_core, tensor_divide_scalar_np_core)


    def product_scalar(
        self,
        lhs: Tensor,
        scalar: float) -> Tensor:
        """lhs[i] * scalar"""
        return self._scalar(lhs, scalar,
                            tensor_product_scalar_nb_core, tensor_product_scalar_np_core)


    ##########################################################################
    # Contractions
    ##########################################################################

    def dot(
        self,
        lhs: Tensor,
        rhs: Tensor) -> float:
        """
        Dot product of two tensors viewed as flat buffers of equal length.
        """
        if self.validate:
            check_same_length(lhs, rhs, "dot")
        if self._numba_for(lhs, rhs):
            return float(tensor_dot_nb_core(lhs.components, rhs.components))
        return tensor_dot_np_core(lhs.components, rhs.components)
