from numba import types
import numpy as np

##############################################################################
# Global constants
##############################################################################

DEFAULT_PRECISION = 'float64'
PRECISIONS = {
    'float32': np.float32,
    'float64': np.float64,
}
SHAPE_DTYPE = np.int64


##############################################################################
# Type signatures for Numba functions
##############################################################################

# Multi-index -> flat offset, and shape -> number of components
sig_flat_offset = types.int64(
    types.int64[:],     # shape: (rank,)
    types.int64[:]      # indices: (rank,)
    )
sig_length = types.int64(
    types.int64[:]      # shape: (rank,)
    )

# Element-wise tensor (op) tensor
sig_binary_f32 = types.float32[:](
    types.float32[:],   # lhs components
    types.float32[:]    # rhs components
    )
sig_binary_f64 = types.float64[:](
    types.float64[:],
    types.float64[:]
    )

# Element-wise tensor (op) scalar
sig_scalar_f32 = types.float32[:](
    types.float32[:],   # lhs components
    types.float32       # scalar
    )
sig_scalar_f64 = types.float64[:](
    types.float64[:],
    types.float64
    )

# Flat dot product
sig_dot_f32 = types.float32(
    types.float32[:],
    types.float32[:]
    )
sig_dot_f64 = types.float64(
    types.float64[:],
    types.float64[:]
    )
