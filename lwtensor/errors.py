"""
LWtensor: Exceptions

Errors raised by the tensor, vector and matrix layers. The element-wise and
indexing paths only raise the shape/rank/range errors when an operations
object is created with ``validate=True``.

"""


class TensorError(Exception):
    """Base class for all LWtensor errors."""


class TensorReleasedError(TensorError):
    """Raised when a tensor is used (or released) after release()."""


class ShapeMismatchError(TensorError, ValueError):
    """Raised when the operands of an operation differ in shape."""


class RankMismatchError(TensorError, ValueError):
    """Raised when the number of indices or axes does not match the rank."""


class IndexOutOfRangeError(TensorError, IndexError, ValueError):
    """Raised when an index falls outside its axis extent."""


class NonSquareMatrixError(TensorError, ValueError):
    """Raised when a square matrix is required (determinant, minor, inverse)."""
