"""
LWtensor: Matrix Operations

This module provides matrix construction, multiplication, transpose, the
cofactor family (minor, cofactor, cofactor matrix, adjugate), the recursive
determinant and the inverse, using Numba for performance optimization with
NumPy fallbacks.

The determinant is classical cofactor expansion, exponential in the matrix
size. Matrix multiplication follows this library's own index convention:

    matmul(lhs, rhs)(r, c) = sum_k rhs(k, r) * lhs(c, k)

with result shape [rhs.shape[1], lhs.shape[0]]; as 2D arrays that is
(lhs @ rhs).T.

"""

import warnings
import numpy as np
from .constants import *
from .core_functions import *
from .matrix import Matrix
from ..errors import NonSquareMatrixError, ShapeMismatchError
from ..tensor.constants import DEFAULT_PRECISION
from ..tensor.operations import TensorOperations
from ..tensor.utils import check_rank, numba_compatible
from ..vector.vector import Vector


class MatrixOperations:
    """
    A class to perform operations on matrices.
    No data objects. Only methods.

    """
    def __init__(
        self,
        use_numba: bool = True,
        validate: bool = False,
        precision: str = DEFAULT_PRECISION):
        """
        Initialize the MatrixOperations class.

        Args:
            use_numba (bool, optional): use Numba core functions. Defaults to True.
            validate (bool, optional): check operand ranks and shapes. Defaults to False.
            precision (str, optional): precision of matrices created by this object.
                Defaults to 'float64'.
        """
        self.use_numba = use_numba
        self.validate = validate
        self.precision = precision
        self.tensor_ops = TensorOperations(
            use_numba=use_numba,
            validate=validate,
            precision=precision)


    def _require_square(
        self,
        matrix: Matrix,
        operation: str) -> int:
        if self.validate:
            check_rank(matrix, 2, operation)
        rows, cols = int(matrix.shape[ROW_AXIS]), int(matrix.shape[COL_AXIS])
        if rows != cols:
            raise NonSquareMatrixError(
                f"{operation}: matrix must be square, got {rows}x{cols}")
        return rows


    ##########################################################################
    # Construction
    ##########################################################################

    def create_matrix(
        self,
        rows: int,
        cols: int) -> Matrix:
        """Zero rows x cols matrix"""
        return Matrix(rows, cols, precision=self.precision)


    def create_identity(
        self,
        n: int) -> Matrix:
        """n x n identity matrix"""
        matrix = self.create_matrix(n, n)
        if self.use_numba:
            matrix_identity_nb_core(matrix.components, n)
        else:
            matrix.components[:] = matrix_identity_np_core(n, matrix.dtype)
        return matrix


    ##########################################################################
    # Products
    ##########################################################################

    def matmul(
        self,
        lhs: Matrix,
        rhs: Matrix) -> Matrix:
        """
        Matrix product in this library's convention, result shape
        [rhs.shape[1], lhs.shape[0]].
        """
        lhs_rows, lhs_cols = int(lhs.shape[ROW_AXIS]), int(lhs.shape[COL_AXIS])
        rhs_rows, rhs_cols = int(rhs.shape[ROW_AXIS]), int(rhs.shape[COL_AXIS])

        if self.validate:
            check_rank(lhs, 2, "matmul")
            check_rank(rhs, 2, "matmul")
            if lhs_rows != rhs_cols or lhs_cols != rhs_rows:
                raise ShapeMismatchError(
                    f"matmul: {lhs_rows}x{lhs_cols} and {rhs_rows}x{rhs_cols} operands "
                    "need lhs.shape == reversed(rhs.shape)")

        if self.use_numba and numba_compatible(lhs, rhs):
            out = matrix_matmul_nb_core(lhs.components, lhs_rows, lhs_cols,
                                        rhs.components, rhs_rows, rhs_cols)
        else:
            out = matrix_matmul_np_core(lhs.components, lhs_rows, lhs_cols,
                                        rhs.components, rhs_rows, rhs_cols)
        return Matrix._wrap(np.array([rhs_cols, lhs_rows], dtype=lhs.shape.dtype), out)


    def transform(
        self,
        vec: Vector,
        matrix: Matrix) -> Vector:
        """
        Apply matrix to vec: out[r] = dot(row r of matrix, vec). The result has
        the length of vec.
        """
        rows, cols = int(matrix.shape[ROW_AXIS]), int(matrix.shape[COL_AXIS])

        if self.validate:
            check_rank(vec, 1, "transform")
            check_rank(matrix, 2, "transform")
            if cols != vec.length or rows > vec.length:
                raise ShapeMismatchError(
                    f"transform: cannot apply a {rows}x{cols} matrix "
                    f"to a vector of length {vec.length}")

        if self.use_numba and numba_compatible(vec, matrix):
            out = matrix_transform_nb_core(vec.components, matrix.components, rows, cols)
        else:
            out = matrix_transform_np_core(vec.components, matrix.components, rows, cols)
        return Vector._wrap(vec.shape.copy(), out)


    def transpose(
        self,
        matrix: Matrix) -> Matrix:
        """
        Transpose: shape reversed, result(c, r) = matrix(r, c)
        """
        if self.validate:
            check_rank(matrix, 2, "transpose")
        rows, cols = int(matrix.shape[ROW_AXIS]), int(matrix.shape[COL_AXIS])

        if self.use_numba:
            out = matrix_transpose_nb_core(matrix.components, rows, cols)
        else:
            out = matrix_transpose_np_core(matrix.components, rows, cols)
        return Matrix._wrap(matrix.shape[::-1].copy(), out)


    ##########################################################################
    # Cofactor expansion
    ##########################################################################

    def minor(
        self,
        matrix: Matrix,
        row: int,
        col: int) -> float:
        """
        Determinant of the sub-matrix without ``row`` and ``col``
        """
        n = self._require_square(matrix, "minor")
        if self.use_numba:
            return float(matrix_minor_nb_core(matrix.components, n, row, col))
        return matrix_minor_np_core(matrix.components, n, row, col)


    def cofactor(
        self,
        matrix: Matrix,
        row: int,
        col: int) -> float:
        """
        (-1)^(row+col) * minor(matrix, row, col)
        """
        n = self._require_square(matrix, "cofactor")
        if self.use_numba:
            return float(matrix_cofactor_nb_core(matrix.components, n, row, col))
        return matrix_cofactor_np_core(matrix.components, n, row, col)


    def cofactor_matrix(
        self,
        matrix: Matrix) -> Matrix:
        """
        Matrix of cofactors, result(r, c) = cofactor(matrix, r, c)
        """
        n = self._require_square(matrix, "cofactor_matrix")
        if self.use_numba:
            out = matrix_cofactor_matrix_nb_core(matrix.components, n)
        else:
            out = matrix_cofactor_matrix_np_core(matrix.components, n)
        return Matrix._wrap(matrix.shape.copy(), out)


    def adjugate_matrix(
        self,
        matrix: Matrix) -> Matrix:
        """
        Transpose of the cofactor matrix
        """
        return self.transpose(self.cofactor_matrix(matrix))


    def determinant(
        self,
        matrix: Matrix) -> float:
        """
        Determinant by Laplace expansion along column 0, with the 2x2 closed
        form as base case.

        Raises:
            NonSquareMatrixError: matrix is not square
        """
        n = self._require_square(matrix, "determinant")
        if self.use_numba:
            return float(matrix_determinant_nb_core(matrix.components, n))
        return matrix_determinant_np_core(matrix.components, n)


    def inverse(
        self,
        matrix: Matrix) -> Matrix:
        """
        Inverse as adjugate / determinant, every element scaled.

        No near-singular guard: a zero determinant yields inf/nan entries
        and a RuntimeWarning.
        """
        det = self.determinant(matrix)
        if det == 0.0:
            warnings.warn("Matrix is singular (determinant is 0), inverse is not finite",
                          RuntimeWarning,
                          stacklevel=2)

        return self.tensor_ops.divide_scalar(self.adjugate_matrix(matrix), det)


    ##########################################################################
    # Display
    ##########################################################################

    def format_matrix(
        self,
        matrix: Matrix) -> str:
        """
        Elements printed with %f in row-then-column order, one line per row.
        """
        if self.validate:
            check_rank(matrix, 2, "format_matrix")
        rows, cols = int(matrix.shape[ROW_AXIS]), int(matrix.shape[COL_AXIS])
        return "\n".join(
            " ".join(f"{self.tensor_ops.get_value(matrix, r, c):f}" for c in range(cols))
            for r in range(rows))
