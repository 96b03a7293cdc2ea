from numba import types

##############################################################################
# Global constants
##############################################################################

# Constants
X, Y, Z = 0, 1, 2
CROSS_PRODUCT_LENGTH = 3


##############################################################################
# Type signatures for Numba functions
##############################################################################

# Euclidean norm
sig_norm_f32 = types.float32(
    types.float32[:]
    )
sig_norm_f64 = types.float64(
    types.float64[:]
    )

# Normalisation (vector / norm)
sig_normalize_f32 = types.float32[:](
    types.float32[:]
    )
sig_normalize_f64 = types.float64[:](
    types.float64[:]
    )

# Cross product of two 3-vectors
sig_cross_f32 = types.float32[:](
    types.float32[:],
    types.float32[:]
    )
sig_cross_f64 = types.float64[:](
    types.float64[:],
    types.float64[:]
    )
