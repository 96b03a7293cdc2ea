from numba import njit
import numpy as np
from .constants import *

##########################################################################################
# Core numba JIT functions for matrix operations
#
# Matrices are flat buffers addressed like every other tensor: element (r, c)
# of a rows x cols matrix sits at offset r + c*rows.
##########################################################################################

@njit([sig_identity_f32, sig_identity_f64], fastmath=True, cache=True)
def matrix_identity_nb_core(
    out,
    n):
    """
    Write 1 on the diagonal of an n x n zero buffer
    """
    for r in range(n):
        out[r + r * n] = 1.0


@njit([sig_matmul_f32, sig_matmul_f64], fastmath=True, cache=True)
def matrix_matmul_nb_core(
    lhs,
    lhs_rows,
    lhs_cols,
    rhs,
    rhs_rows,
    rhs_cols):
    """
    out(r, c) = sum_k rhs(k, r) * lhs(c, k)
    returns: (rhs_cols * lhs_rows,) buffer of shape [rhs_cols, lhs_rows]
    """
    out = np.zeros(rhs_cols * lhs_rows, dtype=lhs.dtype)

    for r in range(lhs_rows):
        for c in range(rhs_cols):
            acc = 0.0
            for k in range(lhs_cols):
                acc += rhs[k + r * rhs_rows] * lhs[c + k * lhs_rows]
            out[r + c * rhs_cols] = acc

    return out


@njit([sig_transform_f32, sig_transform_f64], fastmath=True, cache=True)
def matrix_transform_nb_core(
    vec,
    mat,
    rows,
    cols):
    """
    out[r] = sum_c mat(r, c) * vec[c]
    returns: shape of vec
    """
    out = np.zeros_like(vec)

    for r in range(rows):
        acc = 0.0
        for c in range(cols):
            acc += mat[r + c * rows] * vec[c]
        out[r] = acc

    return out


@njit([sig_transpose_f32, sig_transpose_f64], fastmath=True, cache=True)
def matrix_transpose_nb_core(
    mat,
    rows,
    cols):
    """
    out(c, r) = mat(r, c)
    returns: (rows*cols,) buffer of shape [cols, rows]
    """
    out = np.empty_like(mat)

    for r in range(rows):
        for c in range(cols):
            out[c + r * cols] = mat[r + c * rows]

    return out


# The determinant chain is self-recursive: compiled lazily and not cached.
@njit
def matrix_minor_buffer_nb_core(
    mat,
    n,
    row,
    col):
    """
    Entries of mat with r != row and c != col, copied in row-outer,
    column-inner traversal order into an (n-1)*(n-1) buffer
    """
    sub = np.empty((n - 1) * (n - 1), dtype=mat.dtype)

    index = 0
    for r in range(n):
        for c in range(n):
            if r != row and c != col:
                sub[index] = mat[r + c * n]
                index += 1

    return sub


@njit
def matrix_determinant_nb_core(
    mat,
    n):
    """
    Determinant by Laplace expansion along column 0
    mat: (n*n,) buffer of a square matrix
    """
    if n == 0:
        return 1.0

    if n == CLOSED_FORM_SIZE:
        # m(0,0) * m(1,1) - m(1,0) * m(0,1)
        return 1.0 * (mat[0] * mat[3] - mat[1] * mat[2])

    result = 0.0
    for r in range(n):
        sub = matrix_minor_buffer_nb_core(mat, n, r, 0)
        sign = 1.0 if r % 2 == 0 else -1.0
        result += mat[r] * sign * matrix_determinant_nb_core(sub, n - 1)

    return result


@njit
def matrix_minor_nb_core(
    mat,
    n,
    row,
    col):
    """
    Determinant of mat with row ``row`` and column ``col`` removed
    """
    return matrix_determinant_nb_core(
        matrix_minor_buffer_nb_core(mat, n, row, col), n - 1)


@njit
def matrix_cofactor_nb_core(
    mat,
    n,
    row,
    col):
    """
    (-1)^(row+col) * minor, sign from the parity of row + col
    """
    sign = 1.0 if (row + col) % 2 == 0 else -1.0
    return sign * matrix_minor_nb_core(mat, n, row, col)


@njit
def matrix_cofactor_matrix_nb_core(
    mat,
    n):
    """
    out(r, c) = cofactor(mat, r, c)
    """
    out = np.empty_like(mat)

    for r in range(n):
        for c in range(n):
            out[r + c * n] = matrix_cofactor_nb_core(mat, n, r, c)

    return out


##########################################################################################
# Core numpy functions for matrix operations
##########################################################################################


def matrix_view_np_core(
    mat : np.ndarray,
    rows : int,
    cols : int) -> np.ndarray:
    """
    2D view of a flat matrix buffer such that view[r, c] == get(r, c).
    """
    return mat.reshape((rows, cols), order='F')


def matrix_identity_np_core(
    n : int,
    dtype : type = np.float64) -> np.ndarray:
    """
    Flat buffer of the n x n identity matrix.
    """
    return np.eye(n, dtype=dtype).ravel(order='F')


def matrix_matmul_np_core(
    lhs : np.ndarray,
    lhs_rows : int,
    lhs_cols : int,
    rhs : np.ndarray,
    rhs_rows : int,
    rhs_cols : int) -> np.ndarray:
    """
    Compute out(r, c) = sum_k rhs(k, r) * lhs(c, k).
    Args:
        lhs (np.ndarray) : flat lhs buffer, lhs_rows x lhs_cols
        rhs (np.ndarray) : flat rhs buffer, rhs_rows x rhs_cols
    Returns:
        out (np.ndarray) : flat buffer of shape [rhs_cols, lhs_rows]. In 2D
                           array terms this is (lhs @ rhs).T
    """
    A = matrix_view_np_core(lhs, lhs_rows, lhs_cols)
    B = matrix_view_np_core(rhs, rhs_rows, rhs_cols)
    out = np.zeros((rhs_cols, lhs_rows), dtype=lhs.dtype, order='F')
    out[:lhs_rows, :rhs_cols] = np.einsum('kr,ck->rc',
                                          B[:lhs_cols, :lhs_rows],
                                          A[:rhs_cols, :lhs_cols])

    return out.ravel(order='F')


def matrix_transform_np_core(
    vec : np.ndarray,
    mat : np.ndarray,
    rows : int,
    cols : int) -> np.ndarray:
    """
    Apply a matrix to a vector, out[r] = sum_c mat(r, c) * vec[c].
    Args:
        vec (np.ndarray) : (n,) vector
        mat (np.ndarray) : flat rows x cols matrix buffer
    Returns:
        out (np.ndarray) : (n,) vector
    """
    out = np.zeros_like(vec)
    out[:rows] = matrix_view_np_core(mat, rows, cols) @ vec[:cols]

    return out


def matrix_transpose_np_core(
    mat : np.ndarray,
    rows : int,
    cols : int) -> np.ndarray:
    """
    Flat buffer of the transpose, shape [cols, rows].
    """
    return matrix_view_np_core(mat, rows, cols).T.ravel(order='F')


def matrix_minor_buffer_np_core(
    mat : np.ndarray,
    n : int,
    row : int,
    col : int) -> np.ndarray:
    """
    Entries with r != row and c != col in row-outer, column-inner traversal
    order, as a flat (n-1)*(n-1) buffer.
    """
    keep = np.ones((n, n), dtype=bool)
    keep[row, :] = False
    keep[:, col] = False

    # boolean masks select in C order: r outer, c inner
    return matrix_view_np_core(mat, n, n)[keep]


def matrix_determinant_np_core(
    mat : np.ndarray,
    n : int) -> float:
    """
    Compute the determinant by Laplace expansion along column 0.
    Args:
        mat (np.ndarray) : flat buffer of an n x n matrix
        n (int)          : matrix size
    Returns:
        det (float) : 1.0 for n == 0, ad - bc for n == 2
    """
    if n == 0:
        return 1.0

    if n == CLOSED_FORM_SIZE:
        M = matrix_view_np_core(mat, n, n)
        return float(M[0, 0] * M[1, 1] - M[1, 0] * M[0, 1])

    result = 0.0
    for r in range(n):
        result += float(mat[r]) * matrix_cofactor_np_core(mat, n, r, 0)

    return result


def matrix_minor_np_core(
    mat : np.ndarray,
    n : int,
    row : int,
    col : int) -> float:
    """Determinant of mat without row ``row`` and column ``col``."""
    return matrix_determinant_np_core(
        matrix_minor_buffer_np_core(mat, n, row, col), n - 1)


def matrix_cofactor_np_core(
    mat : np.ndarray,
    n : int,
    row : int,
    col : int) -> float:
    """(-1)^(row+col) * minor"""
    sign = 1.0 if (row + col) % 2 == 0 else -1.0
    return sign * matrix_minor_np_core(mat, n, row, col)


def matrix_cofactor_matrix_np_core(
    mat : np.ndarray,
    n : int) -> np.ndarray:
    """
    Flat buffer of the cofactor matrix, out(r, c) = cofactor(r, c).
    """
    out = np.empty_like(mat)
    for r in range(n):
        for c in range(n):
            out[r + c * n] = matrix_cofactor_np_core(mat, n, r, c)

    return out
