"""
LWtensor: Vector

A Vector is a Tensor of rank 1.

"""

from typing import Sequence
from ..tensor.constants import DEFAULT_PRECISION
from ..tensor.tensor import Tensor
from .constants import CROSS_PRODUCT_LENGTH


class Vector(Tensor):
    """
    Rank 1 tensor with ``n`` zero-initialised components.
    """

    RANK = 1

    def __init__(
        self,
        n: int,
        precision: str = DEFAULT_PRECISION) -> None:
        super().__init__((n,), precision=precision)


    @classmethod
    def from_xyz(
        cls,
        values: Sequence[float],
        precision: str = DEFAULT_PRECISION) -> "Vector":
        """
        3-vector from exactly three values.
        """
        if len(values) != CROSS_PRODUCT_LENGTH:
            raise ValueError(f"expected {CROSS_PRODUCT_LENGTH} values, got {len(values)}")
        vector = cls(CROSS_PRODUCT_LENGTH, precision=precision)
        vector.components[:] = values
        return vector
