"""
Immutable, 1-indexed vectors over integers, decimals and complex numbers.

Vectors are assembled by a ``VectorBuilder`` (or directly from a sequence)
and never change afterwards; every operation returns a new vector.
"""

from __future__ import annotations

from decimal import Context, Decimal
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Generic, Iterable, Iterator, Mapping, Optional, Tuple, Type, TypeVar

import numpy as np

from ..core.errors import (
    InvalidArgumentError,
    NotNullViolationError,
    check_argument,
    check_index,
    check_integer,
    check_state,
    require_not_none,
)
from ..number import decimals
from ..number.complex import RealComplexNumber, SimpleComplexNumber
from ..sqrt.context import SquareRootContext
from .scalars import DECIMAL, INTEGER, REAL_COMPLEX, SIMPLE_COMPLEX, ScalarArithmetic, norm_sqrt

S = TypeVar("S")
V = TypeVar("V", bound="AbstractVector")


class VectorBuilder(Generic[S]):
    """
    Mutable staging area for one vector.

    Indexes are checked on every ``put``; ``build()`` checks that all
    ``size`` entries are present.

    Example:
        >>> BigIntegerVector.builder(3).put(1, 4).put(2, 5).fill_missing(0).build()
        BigIntegerVector([4, 5, 0])
    """

    def __init__(self, vector_class: Type[AbstractVector], size: int):
        check_integer(size, "size")
        check_argument(size > 0, "expected size > 0 but actual %s", size)
        self._vector_class = vector_class
        self._size = size
        self._entries: Dict[int, Any] = {}

    @property
    def size(self) -> int:
        return self._size

    def _coerce(self, element: Any) -> Any:
        return self._vector_class.arithmetic.coerce(element, "element")

    def put(self, index: int, element: Any) -> VectorBuilder[S]:
        """Set the element at a 1-based index."""
        check_index(index, self._size)
        self._entries[index] = self._coerce(element)
        return self

    def append(self, element: Any) -> VectorBuilder[S]:
        """Set the element at the next index after those already set."""
        element = self._coerce(element)
        index = len(self._entries) + 1
        check_state(len(self._entries) < self._size, "expected index in [1, %s] but actual %s", self._size, index)
        self._entries[index] = element
        return self

    def put_all(self, element: Any) -> VectorBuilder[S]:
        """Set every index to ``element``."""
        element = self._coerce(element)
        for index in range(1, self._size + 1):
            self._entries[index] = element
        return self

    def fill_missing(self, element: Any) -> VectorBuilder[S]:
        """Set every index that has no element yet."""
        element = self._coerce(element)
        for index in range(1, self._size + 1):
            self._entries.setdefault(index, element)
        return self

    def element(self, index: int) -> Optional[S]:
        """The element staged at ``index``, or None."""
        check_index(index, self._size)
        return self._entries.get(index)

    def build(self):
        """
        Freeze the staged elements into a vector.

        Raises:
            NotNullViolationError: an index has no element
        """
        for index in range(1, self._size + 1):
            if index not in self._entries:
                raise NotNullViolationError(
                    f"element[{index}]",
                    f"expected element at index {index} but actual None",
                )
        return self._vector_class(self._entries[index] for index in range(1, self._size + 1))


class AbstractVector(Generic[S]):
    """
    Vector with entries at indexes ``1..size``.

    Subclasses bind ``arithmetic`` to one scalar type; all algorithms live
    here. Norm results are ``int`` for integer vectors where exact, ``Decimal``
    otherwise. Euclidean norms and norms of complex vectors go through the
    square-root calculator and accept its ``precision``/``scale``/
    ``rounding_mode``/``context`` keywords.
    """

    __slots__ = ("_elements",)

    arithmetic: ClassVar[ScalarArithmetic]

    def __init__(self, elements: Iterable[Any]):
        require_not_none(elements, "elements")
        arithmetic = self.arithmetic
        values = tuple(
            arithmetic.coerce(element, f"elements[{index}]") for index, element in enumerate(elements, 1)
        )
        check_argument(len(values) > 0, "expected size > 0 but actual %s", len(values))
        self._elements: Tuple[S, ...] = values

    @classmethod
    def builder(cls, size: int) -> VectorBuilder[S]:
        return VectorBuilder(cls, size)

    @classmethod
    def of(cls: Type[V], *elements: Any) -> V:
        return cls(elements)

    @classmethod
    def _matrix_class(cls):
        raise NotImplementedError

    # Accessors

    @property
    def size(self) -> int:
        return len(self._elements)

    @property
    def elements(self) -> Tuple[S, ...]:
        return self._elements

    @property
    def entries(self) -> Mapping[int, S]:
        """Read-only mapping of index to element."""
        return MappingProxyType(dict(enumerate(self._elements, 1)))

    def element(self, index: int) -> S:
        check_index(index, self.size)
        return self._elements[index - 1]

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[S]:
        return iter(self._elements)

    def __getitem__(self, index: int) -> S:
        """1-based element access, like ``element``."""
        return self.element(index)

    def to_numpy(self) -> np.ndarray:
        """Object array holding the exact elements."""
        array = np.empty(self.size, dtype=object)
        for position, element in enumerate(self._elements):
            array[position] = element
        return array

    # Arithmetic

    def _check_compatible(self, other: Any, name: str) -> None:
        require_not_none(other, name)
        if not isinstance(other, type(self)):
            raise InvalidArgumentError(
                f"expected {name} of type {type(self).__name__} but actual {type(other).__name__}",
                details={"parameter": name},
            )
        check_argument(self.size == other.size, "expected equal sizes but actual %s != %s", self.size, other.size)

    def _new(self, elements: Iterable[S]):
        return type(self)(elements)

    def add(self, summand, decimal_context: Optional[Context] = None):
        self._check_compatible(summand, "summand")
        decimal_context = self.arithmetic.check_decimal_context(decimal_context)
        add = self.arithmetic.add
        return self._new(add(a, b, decimal_context) for a, b in zip(self._elements, summand._elements))

    def subtract(self, subtrahend, decimal_context: Optional[Context] = None):
        self._check_compatible(subtrahend, "subtrahend")
        decimal_context = self.arithmetic.check_decimal_context(decimal_context)
        subtract = self.arithmetic.subtract
        return self._new(subtract(a, b, decimal_context) for a, b in zip(self._elements, subtrahend._elements))

    def scalar_multiply(self, scalar: Any, decimal_context: Optional[Context] = None):
        scalar = self.arithmetic.coerce(scalar, "scalar")
        decimal_context = self.arithmetic.check_decimal_context(decimal_context)
        multiply = self.arithmetic.multiply
        return self._new(multiply(scalar, element, decimal_context) for element in self._elements)

    def negate(self, decimal_context: Optional[Context] = None):
        decimal_context = self.arithmetic.check_decimal_context(decimal_context)
        negate = self.arithmetic.negate
        return self._new(negate(element, decimal_context) for element in self._elements)

    def dot_product(self, other, decimal_context: Optional[Context] = None) -> S:
        """
        Sum of the products of equally indexed elements (no conjugation).

        With a ``decimal_context`` every product and partial sum is rounded under it.
        """
        self._check_compatible(other, "other")
        arithmetic = self.arithmetic
        decimal_context = arithmetic.check_decimal_context(decimal_context)
        return arithmetic.sum(
            (arithmetic.multiply(a, b, decimal_context) for a, b in zip(self._elements, other._elements)),
            decimal_context,
        )

    def orthogonal_to(self, other) -> bool:
        return self.arithmetic.is_zero(self.dot_product(other))

    def dyadic_product(self, other, decimal_context: Optional[Context] = None):
        """Matrix ``M`` with ``M[i, j] = self[i] * other[j]``."""
        self._check_compatible(other, "other")
        decimal_context = self.arithmetic.check_decimal_context(decimal_context)
        multiply = self.arithmetic.multiply
        return self._matrix_class()(
            [[multiply(a, b, decimal_context) for b in other._elements] for a in self._elements]
        )

    # Norms

    def taxicab_norm(self, precision: Any = None, scale: Optional[int] = None, rounding_mode: Any = None,
                     context: Optional[SquareRootContext] = None) -> Any:
        """Sum of the absolute values."""
        arithmetic = self.arithmetic
        return decimals.exact_sum(
            arithmetic.abs(element, precision, scale, rounding_mode, context) for element in self._elements
        )

    def taxicab_distance(self, other, precision: Any = None, scale: Optional[int] = None,
                         rounding_mode: Any = None, context: Optional[SquareRootContext] = None) -> Any:
        self._check_compatible(other, "other")
        return self.subtract(other).taxicab_norm(precision, scale, rounding_mode, context)

    def euclidean_norm_pow2(self, decimal_context: Optional[Context] = None) -> Any:
        """Sum of the squared absolute values, exact unless a ``decimal_context`` is given."""
        arithmetic = self.arithmetic
        decimal_context = arithmetic.check_decimal_context(decimal_context)
        return decimals.context_sum(
            (arithmetic.abs_pow2(element, decimal_context) for element in self._elements), decimal_context
        )

    def euclidean_distance_pow2(self, other) -> Any:
        self._check_compatible(other, "other")
        return self.subtract(other).euclidean_norm_pow2()

    def euclidean_norm(self, precision: Any = None, scale: Optional[int] = None, rounding_mode: Any = None,
                       context: Optional[SquareRootContext] = None) -> Decimal:
        """Square root of ``euclidean_norm_pow2``; exact when that is a perfect square."""
        return norm_sqrt(self.euclidean_norm_pow2(), precision, scale, rounding_mode, context)

    def euclidean_distance(self, other, precision: Any = None, scale: Optional[int] = None,
                           rounding_mode: Any = None, context: Optional[SquareRootContext] = None) -> Decimal:
        self._check_compatible(other, "other")
        return self.subtract(other).euclidean_norm(precision, scale, rounding_mode, context)

    def max_norm(self, precision: Any = None, scale: Optional[int] = None, rounding_mode: Any = None,
                 context: Optional[SquareRootContext] = None) -> Any:
        """Largest absolute value."""
        arithmetic = self.arithmetic
        return max(arithmetic.abs(element, precision, scale, rounding_mode, context) for element in self._elements)

    def max_distance(self, other, precision: Any = None, scale: Optional[int] = None,
                     rounding_mode: Any = None, context: Optional[SquareRootContext] = None) -> Any:
        self._check_compatible(other, "other")
        return self.subtract(other).max_norm(precision, scale, rounding_mode, context)

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
        if isinstance(scalar, AbstractVector):
            return NotImplemented
        return self.scalar_multiply(scalar)

    __rmul__ = __mul__

    def __matmul__(self, other: Any):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.dot_product(other)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, AbstractVector):
            return NotImplemented
        return type(self) is type(other) and self._elements == other._elements

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._elements))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._elements)!r})"


class BigIntegerVector(AbstractVector[int]):
    """Vector of Python ints. Taxicab and max norms are ints."""

    __slots__ = ()
    arithmetic = INTEGER

    @classmethod
    def _matrix_class(cls):
        from .matrix import BigIntegerMatrix

        return BigIntegerMatrix


class BigDecimalVector(AbstractVector[Decimal]):
    """Vector of Decimals with exact sums and products."""

    __slots__ = ()
    arithmetic = DECIMAL

    @classmethod
    def _matrix_class(cls):
        from .matrix import BigDecimalMatrix

        return BigDecimalMatrix


class SimpleComplexNumberVector(AbstractVector[SimpleComplexNumber]):
    """Vector of integer complex numbers. ``euclidean_norm_pow2`` is an int."""

    __slots__ = ()
    arithmetic = SIMPLE_COMPLEX

    @classmethod
    def _matrix_class(cls):
        from .matrix import SimpleComplexNumberMatrix

        return SimpleComplexNumberMatrix


class RealComplexNumberVector(AbstractVector[RealComplexNumber]):
    """Vector of decimal complex numbers."""

    __slots__ = ()
    arithmetic = REAL_COMPLEX

    @classmethod
    def _matrix_class(cls):
        from .matrix import RealComplexNumberMatrix

        return RealComplexNumberMatrix
