from numba import types

##############################################################################
# Global constants
##############################################################################

ROW_AXIS, COL_AXIS = 0, 1
CLOSED_FORM_SIZE = 2    # determinant base case, ad - bc


##############################################################################
# Type signatures for Numba functions
##############################################################################

# Identity fill (in place)
sig_identity_f32 = types.void(
    types.float32[:],   # out: (n*n,) zero buffer
    types.int64         # n
    )
sig_identity_f64 = types.void(
    types.float64[:],
    types.int64
    )

# Matrix multiplication
sig_matmul_f32 = types.float32[:](
    types.float32[:], types.int64, types.int64,    # lhs, lhs rows, lhs cols
    types.float32[:], types.int64, types.int64     # rhs, rhs rows, rhs cols
    )
sig_matmul_f64 = types.float64[:](
    types.float64[:], types.int64, types.int64,
    types.float64[:], types.int64, types.int64
    )

# Matrix applied to a vector
sig_transform_f32 = types.float32[:](
    types.float32[:],                              # vector: (n,)
    types.float32[:], types.int64, types.int64     # matrix, rows, cols
    )
sig_transform_f64 = types.float64[:](
    types.float64[:],
    types.float64[:], types.int64, types.int64
    )

# Transpose
sig_transpose_f32 = types.float32[:](
    types.float32[:], types.int64, types.int64     # matrix, rows, cols
    )
sig_transpose_f64 = types.float64[:](
    types.float64[:], types.int64, types.int64
    )
