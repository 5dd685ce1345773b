"""
Zero and identity constructors for every vector and matrix type.

Examples:
    >>> zero_vector(BigIntegerVector, 3)  # BigIntegerVector([0, 0, 0])
    >>> identity_matrix(SimpleComplexNumberMatrix, 2).identity()  # True
"""

from typing import Type, TypeVar

from ..core.errors import check_integer, check_argument
from .matrix import AbstractMatrix
from .vector import AbstractVector

V = TypeVar("V", bound=AbstractVector)
M = TypeVar("M", bound=AbstractMatrix)


def zero_vector(vector_class: Type[V], size: int) -> V:
    """Vector of ``size`` additive identities."""
    return vector_class.builder(size).put_all(vector_class.arithmetic.zero).build()


def zero_matrix(matrix_class: Type[M], row_size: int, column_size: int) -> M:
    """Matrix whose cells are all additive identities."""
    return matrix_class.builder(row_size, column_size).put_all(matrix_class.arithmetic.zero).build()


def identity_matrix(matrix_class: Type[M], size: int) -> M:
    """Square matrix with ones on the diagonal and zeros elsewhere."""
    check_integer(size, "size")
    check_argument(size > 0, "expected size > 0 but actual %s", size)
    arithmetic = matrix_class.arithmetic
    builder = matrix_class.builder(size, size)
    for index in range(1, size + 1):
        builder.put(index, index, arithmetic.one)
    return builder.fill_missing(arithmetic.zero).build()
