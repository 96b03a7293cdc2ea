"""
    LWtensor Vector Operations Module

    This module provides vector operations such as the Euclidean norm,
    normalisation and the 3D cross product, using Numba for performance
    optimization. It can fall back to NumPy implementations when Numba is
    not used.

"""

from .constants import *
from .core_functions import *
from .vector import Vector
from ..errors import ShapeMismatchError
from ..tensor.constants import DEFAULT_PRECISION
from ..tensor.operations import TensorOperations
from ..tensor.utils import check_rank, check_same_shape, numba_compatible


class VectorOperations():
    """
    Vector Operations using Numba kernels
    """

    def __init__(
        self,
        use_numba: bool = True,
        validate: bool = False,
        precision: str = DEFAULT_PRECISION) -> None:

        self.use_numba = use_numba
        self.validate = validate
        self.precision = precision
        self.tensor_ops = TensorOperations(
            use_numba=use_numba,
            validate=validate,
            precision=precision)


    def create_vector(
        self,
        n: int) -> Vector:
        """
        Zero vector of length n
        """
        return Vector(n, precision=self.precision)


    def create_vector_from(
        self,
        values) -> Vector:
        """
        3-vector from three literal values
        """
        return Vector.from_xyz(values, precision=self.precision)


    def dot(
        self,
        u: Vector,
        v: Vector) -> float:
        """
        Vector dot product
        """
        return self.tensor_ops.dot(u, v)


    def norm(
        self,
        vec: Vector) -> float:
        """
        Euclidean norm
        """
        if self.validate:
            check_rank(vec, 1, "norm")
        if self.use_numba:
            return float(vector_norm_nb_core(vec.components))
        return vector_norm_np_core(vec.components)


    def normalize(
        self,
        vec: Vector) -> Vector:
        """
        Unit vector in the direction of vec. A zero vector gives nan components.
        """
        if self.validate:
            check_rank(vec, 1, "normalize")
        if self.use_numba:
            out = vector_normalize_nb_core(vec.components)
        else:
            out = vector_normalize_np_core(vec.components)
        return type(vec)._wrap(vec.shape.copy(), out)


    def cross(
        self,
        u: Vector,
        v: Vector) -> Vector:
        """
        Vector cross product u x v of two 3-vectors
        """
        if self.validate:
            check_rank(u, 1, "cross")
            check_same_shape(u, v, "cross")
            if u.length != CROSS_PRODUCT_LENGTH:
                raise ShapeMismatchError(
                    f"cross: defined for 3-vectors only, got length {u.length}")

        if self.use_numba and numba_compatible(u, v):
            out = vector_cross_product_nb_core(u.components, v.components)
        else:
            out = vector_cross_product_np_core(u.components, v.components)
        return type(u)._wrap(u.shape.copy(), out)
