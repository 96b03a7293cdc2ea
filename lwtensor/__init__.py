"""
LWtensor

A lightweight multi-dimensional array (tensor) library with rank 1 (vector)
and rank 2 (matrix) specializations: allocation, multi-index element access,
element-wise arithmetic, and dot/cross products, norm, matrix multiplication,
transpose, determinant, adjugate and inverse.

Each layer ships Numba kernels with NumPy fallbacks:

    lwtensor.tensor  - Tensor, TensorOperations
    lwtensor.vector  - Vector, VectorOperations
    lwtensor.matrix  - Matrix, MatrixOperations
"""

from .errors import (
    TensorError,
    TensorReleasedError,
    ShapeMismatchError,
    RankMismatchError,
    IndexOutOfRangeError,
    NonSquareMatrixError
)
from .tensor import Tensor, TensorOperations, DEFAULT_PRECISION
from .vector import Vector, VectorOperations
from .matrix import Matrix, MatrixOperations

# Version info
__version__ = "0.1.0"

# Define public API
__all__ = [
    'Tensor',
    'Vector',
    'Matrix',
    'TensorOperations',
    'VectorOperations',
    'MatrixOperations',
    'DEFAULT_PRECISION',
    # Errors
    'TensorError',
    'TensorReleasedError',
    'ShapeMismatchError',
    'RankMismatchError',
    'IndexOutOfRangeError',
    'NonSquareMatrixError'
]
