from numba import njit
import numpy as np
from .constants import *
from ..tensor.core_functions import tensor_dot_nb_core, tensor_dot_np_core

##########################################################################################
# Core numba JIT functions for vector operations
##########################################################################################

@njit([sig_norm_f32, sig_norm_f64], fastmath=True, cache=True)
def vector_norm_nb_core(
    vec):
    """
    Euclidean norm sqrt(v . v)
    vec: shape (n,)
    """
    return np.sqrt(tensor_dot_nb_core(vec, vec))


# zero vectors normalise to nan, so keep IEEE division
@njit([sig_normalize_f32, sig_normalize_f64], error_model='numpy', cache=True)
def vector_normalize_nb_core(
    vec):
    """
    vec / |vec|, no zero-norm guard
    vec: shape (n,)
    """
    modulo = vector_norm_nb_core(vec)
    out = vec.copy()
    for i in range(out.shape[0]):
        out[i] /= modulo

    return out


@njit([sig_cross_f32, sig_cross_f64], fastmath=True, cache=True)
def vector_cross_product_nb_core(
    u,
    v):
    """
    Cross product of two 3-vectors
    u, v: shape (3,)
    returns: shape of u
    """
    out = np.zeros_like(u)

    # Component 0: u_y * v_z - u_z * v_y
    out[X] = u[Y] * v[Z] - u[Z] * v[Y]

    # Component 1: u_z * v_x - u_x * v_z
    out[Y] = u[Z] * v[X] - u[X] * v[Z]

    # Component 2: u_x * v_y - u_y * v_x
    out[Z] = u[X] * v[Y] - u[Y] * v[X]

    return out


##########################################################################################
# Core numpy functions for vector operations
##########################################################################################


def vector_norm_np_core(
    vec : np.ndarray) -> float:
    """
    Compute the Euclidean norm of a vector.
    Args:
        vec (np.ndarray) : (n,) array of vector components
    Returns:
        |vec| (float) : square root of the dot product of vec with itself
    """
    return float(np.sqrt(tensor_dot_np_core(vec, vec)))


def vector_normalize_np_core(
    vec : np.ndarray) -> np.ndarray:
    """
    Compute the unit vector vec / |vec|.
    Args:
        vec (np.ndarray) : (n,) array of vector components
    Returns:
        unit vector (np.ndarray) : (n,) array, nan everywhere if |vec| == 0
    """
    modulo = vec.dtype.type(vector_norm_np_core(vec))
    with np.errstate(divide='ignore', invalid='ignore'):
        return vec / modulo


def vector_cross_product_np_core(
    u : np.ndarray,
    v : np.ndarray) -> np.ndarray:
    """
    Compute the cross product u x v of two 3-vectors.
    Args:
        u (np.ndarray) : (3,) array
        v (np.ndarray) : (3,) array
    Returns:
        u x v (np.ndarray) : (3,) array
    """
    out = np.zeros_like(u)
    out[X] = u[Y] * v[Z] - u[Z] * v[Y]
    out[Y] = u[Z] * v[X] - u[X] * v[Z]
    out[Z] = u[X] * v[Y] - u[Y] * v[X]

    return out
