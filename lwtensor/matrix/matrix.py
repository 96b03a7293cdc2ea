"""
LWtensor: Matrix

A Matrix is a Tensor of rank 2. shape[0] is the row count and shape[1] the
column count; element (r, c) is stored at offset r + c*rows.

"""

from ..tensor.constants import DEFAULT_PRECISION
from ..tensor.tensor import Tensor
from .constants import ROW_AXIS, COL_AXIS


class Matrix(Tensor):
    """
    Rank 2 tensor of ``rows`` x ``cols`` zero-initialised components.
    """

    RANK = 2

    def __init__(
        self,
        rows: int,
        cols: int,
        precision: str = DEFAULT_PRECISION) -> None:
        super().__init__((rows, cols), precision=precision)


    @property
    def rows(self) -> int:
        return int(self.shape[ROW_AXIS])


    @property
    def cols(self) -> int:
        return int(self.shape[COL_AXIS])
