"""
LWtensor Matrix Module

Provides the rank 2 Matrix entity and MatrixOperations: identity, matrix
multiplication, transform, transpose, minor/cofactor/adjugate, the recursive
determinant and the inverse.
"""

# Import main classes
from .matrix import Matrix
from .operations import MatrixOperations


# Import core functions for advanced users
from .core_functions import (
    matrix_identity_nb_core,
    matrix_matmul_nb_core,
    matrix_transform_nb_core,
    matrix_transpose_nb_core,
    matrix_minor_buffer_nb_core,
    matrix_determinant_nb_core,
    matrix_minor_nb_core,
    matrix_cofactor_nb_core,
    matrix_cofactor_matrix_nb_core,
    matrix_view_np_core,
    matrix_identity_np_core,
    matrix_matmul_np_core,
    matrix_transform_np_core,
    matrix_transpose_np_core,
    matrix_minor_buffer_np_core,
    matrix_determinant_np_core,
    matrix_minor_np_core,
    matrix_cofactor_np_core,
    matrix_cofactor_matrix_np_core
)

# Define public API
__all__ = [
    'Matrix',
    'MatrixOperations',
    # Core functions for advanced use
    'matrix_identity_nb_core',
    'matrix_matmul_nb_core',
    'matrix_transform_nb_core',
    'matrix_transpose_nb_core',
    'matrix_minor_buffer_nb_core',
    'matrix_determinant_nb_core',
    'matrix_minor_nb_core',
    'matrix_cofactor_nb_core',
    'matrix_cofactor_matrix_nb_core',
    'matrix_view_np_core',
    'matrix_identity_np_core',
    'matrix_matmul_np_core',
    'matrix_transform_np_core',
    'matrix_transpose_np_core',
    'matrix_minor_buffer_np_core',
    'matrix_determinant_np_core',
    'matrix_minor_np_core',
    'matrix_cofactor_np_core',
    'matrix_cofactor_matrix_np_core'
]
