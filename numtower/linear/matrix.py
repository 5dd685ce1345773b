"""
Immutable matrices over integers, decimals and complex numbers.

Rows and columns are indexed from 1. Matrices are assembled by a
``MatrixBuilder`` (or from nested sequences) and never change afterwards.

Determinants are exact for every scalar type. Triangular matrices and
matrices up to 3 x 3 use closed forms; larger ones use the Leibniz expansion,
which sums n! signed products. Callers are responsible for keeping n small.
"""

from __future__ import annotations

import itertools
from decimal import Context, Decimal
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Generic, Iterable, Mapping, Optional, Sequence, Tuple, Type, TypeVar

import numpy as np

from ..core.config import get_settings
from ..core.errors import (
    InvalidArgumentError,
    MatrixNotSquareError,
    NotNullViolationError,
    check_argument,
    check_index,
    check_integer,
    check_state,
    require_not_none,
)
from ..core.logging import get_context_logger
from ..number import decimals
from ..number.complex import RealComplexNumber, SimpleComplexNumber
from ..sqrt.context import SquareRootContext
from .scalars import DECIMAL, INTEGER, REAL_COMPLEX, SIMPLE_COMPLEX, ScalarArithmetic, norm_sqrt
from .vector import (
    AbstractVector,
    BigDecimalVector,
    BigIntegerVector,
    RealComplexNumberVector,
    SimpleComplexNumberVector,
)

logger = get_context_logger(__name__)

S = TypeVar("S")
M = TypeVar("M", bound="AbstractMatrix")


def inversions(permutation: Sequence[int]) -> int:
    """Number of pairs ``i < j`` with ``permutation[i] > permutation[j]``."""
    count = 0
    for i, value in enumerate(permutation):
        for other in permutation[i + 1:]:
            if value > other:
                count += 1
    return count


class MatrixBuilder(Generic[S]):
    """
    Mutable staging area for one matrix.

    Example:
        >>> BigIntegerMatrix.builder(2, 2).put(1, 1, 1).put(2, 2, 1).fill_missing(0).build()
        BigIntegerMatrix([[1, 0], [0, 1]])
    """

    def __init__(self, matrix_class: Type[AbstractMatrix], row_size: int, column_size: int):
        check_integer(row_size, "row_size")
        check_integer(column_size, "column_size")
        check_argument(row_size > 0, "expected row size > 0 but actual %s", row_size)
        check_argument(column_size > 0, "expected column size > 0 but actual %s", column_size)
        self._matrix_class = matrix_class
        self._row_size = row_size
        self._column_size = column_size
        self._cells: Dict[Tuple[int, int], Any] = {}

    @property
    def row_size(self) -> int:
        return self._row_size

    @property
    def column_size(self) -> int:
        return self._column_size

    def _coerce(self, element: Any) -> Any:
        return self._matrix_class.arithmetic.coerce(element, "element")

    def _check_cell(self, row: int, column: int) -> None:
        check_index(row, self._row_size, "row index")
        check_index(column, self._column_size, "column index")

    def _positions(self):
        return itertools.product(range(1, self._row_size + 1), range(1, self._column_size + 1))

    def put(self, row: int, column: int, element: Any) -> MatrixBuilder[S]:
        self._check_cell(row, column)
        self._cells[(row, column)] = self._coerce(element)
        return self

    def put_all(self, element: Any) -> MatrixBuilder[S]:
        element = self._coerce(element)
        for position in self._positions():
            self._cells[position] = element
        return self

    def fill_missing(self, element: Any) -> MatrixBuilder[S]:
        element = self._coerce(element)
        for position in self._positions():
            self._cells.setdefault(position, element)
        return self

    def element(self, row: int, column: int) -> Optional[S]:
        self._check_cell(row, column)
        return self._cells.get((row, column))

    def build(self):
        """
        Freeze the staged cells into a matrix.

        Raises:
            NotNullViolationError: a cell has no element
        """
        for row, column in self._positions():
            if (row, column) not in self._cells:
                raise NotNullViolationError(
                    f"element[{row}, {column}]",
                    f"expected element at ({row}, {column}) but actual None",
                )
        return self._matrix_class(
            [
                [self._cells[(row, column)] for column in range(1, self._column_size + 1)]
                for row in range(1, self._row_size + 1)
            ]
        )


class AbstractMatrix(Generic[S]):
    """
    Matrix with cells at ``(1..row_size) x (1..column_size)``.

    Subclasses bind ``arithmetic`` to one scalar type and name their vector
    type; every algorithm is written once here.
    """

    __slots__ = ("_rows",)

    arithmetic: ClassVar[ScalarArithmetic]
    vector_class: ClassVar[Type[AbstractVector]]

    def __init__(self, rows: Iterable[Iterable[Any]]):
        require_not_none(rows, "rows")
        arithmetic = self.arithmetic
        coerced = []
        for row_index, row in enumerate(rows, 1):
            require_not_none(row, f"rows[{row_index}]")
            coerced.append(
                tuple(
                    arithmetic.coerce(element, f"element[{row_index}, {column_index}]")
                    for column_index, element in enumerate(row, 1)
                )
            )
        check_argument(len(coerced) > 0, "expected row size > 0 but actual %s", len(coerced))
        column_size = len(coerced[0])
        check_argument(column_size > 0, "expected column size > 0 but actual %s", column_size)
        for row_index, row in enumerate(coerced, 1):
            check_argument(
                len(row) == column_size,
                "expected %s columns in row %s but actual %s",
                column_size,
                row_index,
                len(row),
            )
        self._rows: Tuple[Tuple[S, ...], ...] = tuple(coerced)

    @classmethod
    def builder(cls, row_size: int, column_size: int) -> MatrixBuilder[S]:
        return MatrixBuilder(cls, row_size, column_size)

    # Accessors

    @property
    def row_size(self) -> int:
        return len(self._rows)

    @property
    def column_size(self) -> int:
        return len(self._rows[0])

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.row_size, self.column_size)

    @property
    def size(self) -> int:
        """Number of cells."""
        return self.row_size * self.column_size

    @property
    def row_indexes(self) -> range:
        return range(1, self.row_size + 1)

    @property
    def column_indexes(self) -> range:
        return range(1, self.column_size + 1)

    @property
    def cells(self) -> Mapping[Tuple[int, int], S]:
        """Read-only mapping of ``(row, column)`` to element."""
        return MappingProxyType(
            {
                (row_index, column_index): element
                for row_index, row in enumerate(self._rows, 1)
                for column_index, element in enumerate(row, 1)
            }
        )

    @property
    def elements(self) -> Tuple[S, ...]:
        """All elements, row by row."""
        return tuple(itertools.chain.from_iterable(self._rows))

    @property
    def rows(self) -> Mapping[int, AbstractVector]:
        return MappingProxyType({index: self.row(index) for index in self.row_indexes})

    @property
    def columns(self) -> Mapping[int, AbstractVector]:
        return MappingProxyType({index: self.column(index) for index in self.column_indexes})

    def element(self, row: int, column: int) -> S:
        check_index(row, self.row_size, "row index")
        check_index(column, self.column_size, "column index")
        return self._rows[row - 1][column - 1]

    def row(self, index: int) -> AbstractVector:
        check_index(index, self.row_size, "row index")
        return self.vector_class(self._rows[index - 1])

    def column(self, index: int) -> AbstractVector:
        check_index(index, self.column_size, "column index")
        return self.vector_class(row[index - 1] for row in self._rows)

    def __getitem__(self, index: Any) -> Any:
        """``m[r, c]`` is an element, ``m[r]`` a row vector; both 1-based."""
        if isinstance(index, tuple):
            row, column = index
            return self.element(row, column)
        return self.row(index)

    def to_numpy(self) -> np.ndarray:
        """Object array holding the exact elements."""
        array = np.empty(self.shape, dtype=object)
        for row_index, row in enumerate(self._rows):
            for column_index, element in enumerate(row):
                array[row_index, column_index] = element
        return array

    # Arithmetic

    def _check_type(self, other: Any, name: str) -> None:
        require_not_none(other, name)
        if not isinstance(other, type(self)):
            raise InvalidArgumentError(
                f"expected {name} of type {type(self).__name__} but actual {type(other).__name__}",
                details={"parameter": name},
            )

    def _check_same_shape(self, other: Any, name: str) -> None:
        self._check_type(other, name)
        check_argument(
            self.row_size == other.row_size,
            "expected equal row sizes but actual %s != %s",
            self.row_size,
            other.row_size,
        )
        check_argument(
            self.column_size == other.column_size,
            "expected equal column sizes but actual %s != %s",
            self.column_size,
            other.column_size,
        )

    def _require_square(self) -> None:
        if not self.square():
            raise MatrixNotSquareError(self.row_size, self.column_size)

    def _new(self, rows: Iterable[Iterable[S]]):
        return type(self)(rows)

    def add(self, summand, decimal_context: Optional[Context] = None):
        self._check_same_shape(summand, "summand")
        decimal_context = self.arithmetic.check_decimal_context(decimal_context)
        add = self.arithmetic.add
        return self._new(
            [add(a, b, decimal_context) for a, b in zip(row, other)] for row, other in zip(self._rows, summand._rows)
        )

    def subtract(self, subtrahend, decimal_context: Optional[Context] = None):
        self._check_same_shape(subtrahend, "subtrahend")
        decimal_context = self.arithmetic.check_decimal_context(decimal_context)
        subtract = self.arithmetic.subtract
        return self._new(
            [subtract(a, b, decimal_context) for a, b in zip(row, other)]
            for row, other in zip(self._rows, subtrahend._rows)
        )

    def multiply(self, factor, decimal_context: Optional[Context] = None):
        """
        Matrix product; requires ``column_size == factor.row_size``.

        With a ``decimal_context`` every product and partial sum is rounded under it.
        """
        self._check_type(factor, "factor")
        check_argument(
            self.column_size == factor.row_size,
            "expected column size == factor row size but actual %s != %s",
            self.column_size,
            factor.row_size,
        )
        arithmetic = self.arithmetic
        decimal_context = arithmetic.check_decimal_context(decimal_context)
        factor_columns = list(zip(*factor._rows))
        return self._new(
            [
                arithmetic.sum(
                    (arithmetic.multiply(a, b, decimal_context) for a, b in zip(row, column)), decimal_context
                )
                for column in factor_columns
            ]
            for row in self._rows
        )

    def multiply_vector(self, vector: AbstractVector, decimal_context: Optional[Context] = None) -> AbstractVector:
        """Matrix-vector product; requires ``column_size == vector.size``."""
        require_not_none(vector, "vector")
        if not isinstance(vector, self.vector_class):
            raise InvalidArgumentError(
                f"expected vector of type {self.vector_class.__name__} but actual {type(vector).__name__}",
                details={"parameter": "vector"},
            )
        check_argument(
            self.column_size == vector.size,
            "expected column size == vector size but actual %s != %s",
            self.column_size,
            vector.size,
        )
        arithmetic = self.arithmetic
        decimal_context = arithmetic.check_decimal_context(decimal_context)
        return self.vector_class(
            arithmetic.sum(
                (arithmetic.multiply(a, b, decimal_context) for a, b in zip(row, vector.elements)), decimal_context
            )
            for row in self._rows
        )

    def scalar_multiply(self, scalar: Any, decimal_context: Optional[Context] = None):
        scalar = self.arithmetic.coerce(scalar, "scalar")
        decimal_context = self.arithmetic.check_decimal_context(decimal_context)
        multiply = self.arithmetic.multiply
        return self._new([multiply(scalar, element, decimal_context) for element in row] for row in self._rows)

    def negate(self, decimal_context: Optional[Context] = None):
        decimal_context = self.arithmetic.check_decimal_context(decimal_context)
        negate = self.arithmetic.negate
        return self._new([negate(element, decimal_context) for element in row] for row in self._rows)

    def transpose(self):
        return self._new(zip(*self._rows))

    def trace(self, decimal_context: Optional[Context] = None) -> S:
        """
        Sum of the diagonal.

        Raises:
            MatrixNotSquareError: the matrix is not square
        """
        self._require_square()
        decimal_context = self.arithmetic.check_decimal_context(decimal_context)
        return self.arithmetic.sum((self._rows[index][index] for index in range(self.row_size)), decimal_context)

    def determinant(self, decimal_context: Optional[Context] = None) -> S:
        """
        Exact determinant, or one rounded step by step under ``decimal_context``.

        Triangular matrices use the product of the diagonal, 1 x 1 to 3 x 3
        matrices closed forms, larger ones the Leibniz expansion (O(n!)).

        Raises:
            MatrixNotSquareError: the matrix is not square
        """
        self._require_square()
        arithmetic = self.arithmetic
        decimal_context = arithmetic.check_decimal_context(decimal_context)
        size = self.row_size
        if self.triangular():
            return arithmetic.product((self._rows[index][index] for index in range(size)), decimal_context)
        if size == 2:
            (a, b), (c, d) = self._rows
            return arithmetic.subtract(
                arithmetic.multiply(a, d, decimal_context), arithmetic.multiply(b, c, decimal_context), decimal_context
            )
        if size == 3:
            return self.rule_of_sarrus(decimal_context)
        return self.leibniz_formula(decimal_context)

    def leibniz_formula(self, decimal_context: Optional[Context] = None) -> S:
        """
        Sum over all permutations σ of ``sign(σ) * Π a[σ(i), i]``.

        ``sign(σ)`` is ``(-1) ** inversions(σ)``. The sum has n! terms.
        """
        self._require_square()
        size = self.row_size
        if size > get_settings().LEIBNIZ_WARN_SIZE:
            logger.warning(
                "Leibniz expansion of a large matrix",
                extra_data={"size": size, "matrix_type": type(self).__name__},
            )
        arithmetic = self.arithmetic
        decimal_context = arithmetic.check_decimal_context(decimal_context)
        result = arithmetic.zero
        for permutation in itertools.permutations(range(size)):
            term = arithmetic.product(
                (self._rows[permutation[index]][index] for index in range(size)), decimal_context
            )
            if inversions(permutation) % 2:
                result = arithmetic.subtract(result, term, decimal_context)
            else:
                result = arithmetic.add(result, term, decimal_context)
        return result

    def rule_of_sarrus(self, decimal_context: Optional[Context] = None) -> S:
        """
        Determinant of a 3 x 3 matrix by the rule of Sarrus.

        Raises:
            MatrixNotSquareError: the matrix is not square
            IllegalStateError: the matrix is square but not 3 x 3
        """
        self._require_square()
        check_state(self.row_size == 3, "expected 3 x 3 matrix but actual %s x %s", self.row_size, self.column_size)
        arithmetic = self.arithmetic
        decimal_context = arithmetic.check_decimal_context(decimal_context)

        def product(elements):
            return arithmetic.product(elements, decimal_context)

        (a11, a12, a13), (a21, a22, a23), (a31, a32, a33) = self._rows
        positive = arithmetic.sum(
            [product([a11, a22, a33]), product([a12, a23, a31]), product([a13, a21, a32])], decimal_context
        )
        negative = arithmetic.sum(
            [product([a31, a22, a13]), product([a32, a23, a11]), product([a33, a21, a12])], decimal_context
        )
        return arithmetic.subtract(positive, negative, decimal_context)

    def laplace_expansion(self, decimal_context: Optional[Context] = None) -> S:
        """Determinant by cofactor expansion along the first row."""
        self._require_square()
        arithmetic = self.arithmetic
        decimal_context = arithmetic.check_decimal_context(decimal_context)
        if self.row_size == 1:
            return self._rows[0][0]
        result = arithmetic.zero
        for column_index, element in enumerate(self._rows[0], 1):
            cofactor = self.minor(1, column_index).laplace_expansion(decimal_context)
            term = arithmetic.multiply(element, cofactor, decimal_context)
            if column_index % 2:
                result = arithmetic.add(result, term, decimal_context)
            else:
                result = arithmetic.subtract(result, term, decimal_context)
        return result

    def minor(self, row: int, column: int):
        """
        Matrix without the given row and column.

        Rows after ``row`` move up by one and columns after ``column`` move
        left by one, so indexes stay contiguous.
        """
        check_index(row, self.row_size, "row index")
        check_index(column, self.column_size, "column index")
        return self._new(
            [element for column_index, element in enumerate(values, 1) if column_index != column]
            for row_index, values in enumerate(self._rows, 1)
            if row_index != row
        )

    # Norms

    def _absolutes(self, precision, scale, rounding_mode, context):
        arithmetic = self.arithmetic
        return [
            [arithmetic.abs(element, precision, scale, rounding_mode, context) for element in row]
            for row in self._rows
        ]

    def max_abs_column_sum_norm(self, precision: Any = None, scale: Optional[int] = None,
                                rounding_mode: Any = None, context: Optional[SquareRootContext] = None) -> Any:
        """Largest column sum of absolute values."""
        absolutes = self._absolutes(precision, scale, rounding_mode, context)
        return max(decimals.exact_sum(column) for column in zip(*absolutes))

    def max_abs_row_sum_norm(self, precision: Any = None, scale: Optional[int] = None,
                             rounding_mode: Any = None, context: Optional[SquareRootContext] = None) -> Any:
        """Largest row sum of absolute values."""
        absolutes = self._absolutes(precision, scale, rounding_mode, context)
        return max(decimals.exact_sum(row) for row in absolutes)

    def frobenius_norm_pow2(self, decimal_context: Optional[Context] = None) -> Any:
        """Sum of the squared absolute values of all cells, exact unless a ``decimal_context`` is given."""
        arithmetic = self.arithmetic
        decimal_context = arithmetic.check_decimal_context(decimal_context)
        return decimals.context_sum(
            (arithmetic.abs_pow2(element, decimal_context) for element in self.elements), decimal_context
        )

    def frobenius_norm(self, precision: Any = None, scale: Optional[int] = None, rounding_mode: Any = None,
                       context: Optional[SquareRootContext] = None) -> Decimal:
        return norm_sqrt(self.frobenius_norm_pow2(), precision, scale, rounding_mode, context)

    def max_norm(self, precision: Any = None, scale: Optional[int] = None, rounding_mode: Any = None,
                 context: Optional[SquareRootContext] = None) -> Any:
        """Largest absolute value of a cell."""
        absolutes = self._absolutes(precision, scale, rounding_mode, context)
        return max(itertools.chain.from_iterable(absolutes))

    # Classification

    def square(self) -> bool:
        return self.row_size == self.column_size

    def upper_triangular(self) -> bool:
        """Square with zeros below the diagonal."""
        is_zero = self.arithmetic.is_zero
        return self.square() and all(
            is_zero(self._rows[row][column]) for row in range(self.row_size) for column in range(row)
        )

    def lower_triangular(self) -> bool:
        """Square with zeros above the diagonal."""
        is_zero = self.arithmetic.is_zero
        return self.square() and all(
            is_zero(self._rows[row][column])
            for row in range(self.row_size)
            for column in range(row + 1, self.column_size)
        )

    def triangular(self) -> bool:
        return self.upper_triangular() or self.lower_triangular()

    def diagonal(self) -> bool:
        return self.upper_triangular() and self.lower_triangular()

    def identity(self) -> bool:
        is_one = self.arithmetic.is_one
        return self.diagonal() and all(is_one(self._rows[index][index]) for index in range(self.row_size))

    def invertible(self) -> bool:
        """
        Square with a determinant that is a unit of the scalar type.

        Integer matrices need a determinant of 1 or -1, integer complex
        matrices one of 1, -1, i or -i, decimal complex matrices 1 or -1, and
        decimal matrices any non-zero determinant.
        """
        return self.square() and self.arithmetic.is_unit(self.determinant())

    def symmetric(self) -> bool:
        return self.square() and self == self.transpose()

    def skew_symmetric(self) -> bool:
        return self.square() and self.transpose() == self.negate()

    # Operators

    def __add__(self, other: Any):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self):
        return self.negate()

    def __mul__(self, scalar: Any):
        if isinstance(scalar, (AbstractMatrix, AbstractVector)):
            return NotImplemented
        return self.scalar_multiply(scalar)

    __rmul__ = __mul__

    def __matmul__(self, other: Any):
        if isinstance(other, type(self)):
            return self.multiply(other)
        if isinstance(other, self.vector_class):
            return self.multiply_vector(other)
        return NotImplemented

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, AbstractMatrix):
            return NotImplemented
        return type(self) is type(other) and self._rows == other._rows

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._rows))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[list(row) for row in self._rows]!r})"


class BigIntegerMatrix(AbstractMatrix[int]):
    """Matrix of Python ints. Invertible means determinant 1 or -1."""

    __slots__ = ()
    arithmetic = INTEGER
    vector_class = BigIntegerVector


class BigDecimalMatrix(AbstractMatrix[Decimal]):
    """Matrix of Decimals. Invertible means determinant != 0."""

    __slots__ = ()
    arithmetic = DECIMAL
    vector_class = BigDecimalVector


class SimpleComplexNumberMatrix(AbstractMatrix[SimpleComplexNumber]):
    """Matrix of integer complex numbers. Invertible means determinant in {1, -1, i, -i}."""

    __slots__ = ()
    arithmetic = SIMPLE_COMPLEX
    vector_class = SimpleComplexNumberVector


class RealComplexNumberMatrix(AbstractMatrix[RealComplexNumber]):
    """Matrix of decimal complex numbers. Invertible means determinant 1 or -1."""

    __slots__ = ()
    arithmetic = REAL_COMPLEX
    vector_class = RealComplexNumberVector
