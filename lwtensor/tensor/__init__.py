"""
LWtensor Tensor Module

Provides the Tensor entity (flat component buffer addressed by a shape, axis 0
fastest) and TensorOperations for construction, element access and
element-wise arithmetic.
"""

# Import main classes
from .tensor import Tensor, resolve_dtype
from .operations import TensorOperations
from .constants import DEFAULT_PRECISION, PRECISIONS


# Import core functions for advanced users
from .core_functions import (
    flat_offset_nb_core,
    tensor_length_nb_core,
    tensor_sum_nb_core,
    tensor_subtract_nb_core,
    tensor_divide_nb_core,
    tensor_hadamard_nb_core,
    tensor_sum_scalar_nb_core,
    tensor_subtract_scalar_nb_core,
    tensor_divide_scalar_nb_core,
    tensor_product_scalar_nb_core,
    tensor_dot_nb_core,
    flat_offset_np_core,
    tensor_length_np_core,
    tensor_strides_np_core,
    tensor_dot_np_core
)

# Define public API
__all__ = [
    'Tensor',
    'TensorOperations',
    'resolve_dtype',
    'DEFAULT_PRECISION',
    'PRECISIONS',
    # Core functions for advanced use
    'flat_offset_nb_core',
    'tensor_length_nb_core',
    'tensor_sum_nb_core',
    'tensor_subtract_nb_core',
    'tensor_divide_nb_core',
    'tensor_hadamard_nb_core',
    'tensor_sum_scalar_nb_core',
    'tensor_subtract_scalar_nb_core',
    'tensor_divide_scalar_nb_core',
    'tensor_product_scalar_nb_core',
    'tensor_dot_nb_core',
    'flat_offset_np_core',
    'tensor_length_np_core',
    'tensor_strides_np_core',
    'tensor_dot_np_core'
]
