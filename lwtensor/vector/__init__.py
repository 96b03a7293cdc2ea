"""
LWtensor Vector Module

Provides the rank 1 Vector entity and VectorOperations: Euclidean norm,
normalisation and the 3D cross product.
"""

# Import main classes
from .vector import Vector
from .operations import VectorOperations


# Import core functions for advanced users
from .core_functions import (
    vector_norm_nb_core,
    vector_normalize_nb_core,
    vector_cross_product_nb_core,
    vector_norm_np_core,
    vector_normalize_np_core,
    vector_cross_product_np_core
)

# Define public API
__all__ = [
    'Vector',
    'VectorOperations',
    # Core functions for advanced use
    'vector_norm_nb_core',
    'vector_normalize_nb_core',
    'vector_cross_product_nb_core',
    'vector_norm_np_core',
    'vector_normalize_np_core',
    'vector_cross_product_np_core'
]
