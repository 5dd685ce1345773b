"""
Scalar arithmetic traits for vectors and matrices.

A vector or matrix class names one ``ScalarArithmetic``; the algorithm bodies
in ``AbstractVector``/``AbstractMatrix`` only talk to the trait, so norms,
products and determinants are written once for all four scalar types.

Decimal and decimal complex elements also accept a ``decimal.Context``: every
sum, difference and product is then rounded once under it, which keeps the
digits of long products and determinants bounded.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Context, Decimal
from typing import Any, Generic, Iterable, Optional, TypeVar

from ..core.errors import InvalidArgumentError, require_not_none
from ..number import decimals
from ..number.complex import RealComplexNumber, SimpleComplexNumber
from ..sqrt.calculator import calculator_for
from ..sqrt.context import SquareRootContext

S = TypeVar("S")


class ScalarArithmetic(ABC, Generic[S]):
    """
    The operations containers need from their scalar type.

    ``abs`` returns the type norms are measured in: ``int`` for integers and
    ``Decimal`` otherwise. ``abs_pow2`` is exact for every type unless a
    ``decimal_context`` is given.
    """

    name: str = "scalar"
    supports_decimal_context: bool = False

    @property
    @abstractmethod
    def zero(self) -> S:
        ...

    @property
    @abstractmethod
    def one(self) -> S:
        ...

    @abstractmethod
    def coerce(self, element: Any, name: str = "element") -> S:
        """Validate and convert a raw element, raising on None or a foreign type."""

    @abstractmethod
    def add(self, a: S, b: S, decimal_context: Optional[Context] = None) -> S:
        ...

    @abstractmethod
    def subtract(self, a: S, b: S, decimal_context: Optional[Context] = None) -> S:
        ...

    @abstractmethod
    def multiply(self, a: S, b: S, decimal_context: Optional[Context] = None) -> S:
        ...

    @abstractmethod
    def negate(self, a: S, decimal_context: Optional[Context] = None) -> S:
        ...

    @abstractmethod
    def abs(self, a: S, precision: Any = None, scale: Optional[int] = None, rounding_mode: Any = None,
            context: Optional[SquareRootContext] = None) -> Any:
        ...

    @abstractmethod
    def abs_pow2(self, a: S, decimal_context: Optional[Context] = None) -> Any:
        ...

    @abstractmethod
    def is_unit(self, a: S) -> bool:
        """Whether a determinant of ``a`` makes a matrix invertible."""

    def check_decimal_context(self, decimal_context: Optional[Context]) -> Optional[Context]:
        """Reject a rounding context for element types that are always exact."""
        if decimal_context is None:
            return None
        if not self.supports_decimal_context:
            raise InvalidArgumentError(
                f"expected no decimal_context for {self.name} elements but actual {decimal_context!r}",
                details={"parameter": "decimal_context"},
            )
        if not isinstance(decimal_context, Context):
            raise InvalidArgumentError(
                f"expected decimal_context of type Context but actual {decimal_context!r}",
                details={"parameter": "decimal_context", "type": type(decimal_context).__name__},
            )
        return decimal_context

    def is_zero(self, a: S) -> bool:
        return a == self.zero

    def is_one(self, a: S) -> bool:
        return a == self.one

    def sum(self, elements: Iterable[S], decimal_context: Optional[Context] = None) -> S:
        result = self.zero
        for element in elements:
            result = self.add(result, element, decimal_context)
        return result

    def product(self, elements: Iterable[S], decimal_context: Optional[Context] = None) -> S:
        result = self.one
        for element in elements:
            result = self.multiply(result, element, decimal_context)
        return result

    def _reject(self, element: Any, name: str) -> InvalidArgumentError:
        return InvalidArgumentError(
            f"expected {name} of type {self.name} but actual {element!r}",
            details={"parameter": name, "type": type(element).__name__},
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class IntegerArithmetic(ScalarArithmetic[int]):
    """Python ints; units are 1 and -1."""

    name = "int"

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    def coerce(self, element: Any, name: str = "element") -> int:
        require_not_none(element, name)
        if isinstance(element, bool) or not isinstance(element, int):
            raise self._reject(element, name)
        return element

    def add(self, a: int, b: int, decimal_context=None) -> int:
        return a + b

    def subtract(self, a: int, b: int, decimal_context=None) -> int:
        return a - b

    def multiply(self, a: int, b: int, decimal_context=None) -> int:
        return a * b

    def negate(self, a: int, decimal_context=None) -> int:
        return -a

    def abs(self, a, precision=None, scale=None, rounding_mode=None, context=None) -> int:
        return abs(a)

    def abs_pow2(self, a: int, decimal_context=None) -> int:
        return a * a

    def is_unit(self, a: int) -> bool:
        return a in (1, -1)


class DecimalArithmetic(ScalarArithmetic[Decimal]):
    """Decimals with exact (or context-rounded) +, - and *; units are all non-zero values."""

    name = "Decimal"
    supports_decimal_context = True

    @property
    def zero(self) -> Decimal:
        return Decimal(0)

    @property
    def one(self) -> Decimal:
        return Decimal(1)

    def coerce(self, element: Any, name: str = "element") -> Decimal:
        require_not_none(element, name)
        if isinstance(element, (str, bool, float)) or not isinstance(element, (int, Decimal)):
            raise self._reject(element, name)
        return decimals.to_decimal(element, name)

    def add(self, a: Decimal, b: Decimal, decimal_context: Optional[Context] = None) -> Decimal:
        return decimals.apply_context(decimals.add(a, b), decimal_context)

    def subtract(self, a: Decimal, b: Decimal, decimal_context: Optional[Context] = None) -> Decimal:
        return decimals.apply_context(decimals.subtract(a, b), decimal_context)

    def multiply(self, a: Decimal, b: Decimal, decimal_context: Optional[Context] = None) -> Decimal:
        return decimals.apply_context(decimals.multiply(a, b), decimal_context)

    def negate(self, a: Decimal, decimal_context: Optional[Context] = None) -> Decimal:
        return decimals.apply_context(decimals.negate(a), decimal_context)

    def abs(self, a, precision=None, scale=None, rounding_mode=None, context=None) -> Decimal:
        return decimals.absolute(a)

    def abs_pow2(self, a: Decimal, decimal_context: Optional[Context] = None) -> Decimal:
        return self.multiply(a, a, decimal_context)

    def is_unit(self, a: Decimal) -> bool:
        return a != 0


class SimpleComplexArithmetic(ScalarArithmetic[SimpleComplexNumber]):
    """Integer complex numbers; units are 1, -1, i and -i."""

    name = "SimpleComplexNumber"

    @property
    def zero(self) -> SimpleComplexNumber:
        return SimpleComplexNumber.ZERO

    @property
    def one(self) -> SimpleComplexNumber:
        return SimpleComplexNumber.ONE

    def coerce(self, element: Any, name: str = "element") -> SimpleComplexNumber:
        require_not_none(element, name)
        if isinstance(element, SimpleComplexNumber):
            return element
        if isinstance(element, int) and not isinstance(element, bool):
            return SimpleComplexNumber(element)
        raise self._reject(element, name)

    def add(self, a, b, decimal_context=None):
        return a.add(b)

    def subtract(self, a, b, decimal_context=None):
        return a.subtract(b)

    def multiply(self, a, b, decimal_context=None):
        return a.multiply(b)

    def negate(self, a, decimal_context=None):
        return a.negate()

    def abs(self, a, precision=None, scale=None, rounding_mode=None, context=None) -> Decimal:
        return a.abs(precision, scale, rounding_mode, context)

    def abs_pow2(self, a: SimpleComplexNumber, decimal_context=None) -> int:
        return a.abs_pow2()

    def is_unit(self, a: SimpleComplexNumber) -> bool:
        return a in (
            SimpleComplexNumber.ONE,
            SimpleComplexNumber.ONE.negate(),
            SimpleComplexNumber.IMAGINARY,
            SimpleComplexNumber.IMAGINARY.negate(),
        )


class RealComplexArithmetic(ScalarArithmetic[RealComplexNumber]):
    """Decimal complex numbers; units are 1 and -1."""

    name = "RealComplexNumber"
    supports_decimal_context = True

    @property
    def zero(self) -> RealComplexNumber:
        return RealComplexNumber.ZERO

    @property
    def one(self) -> RealComplexNumber:
        return RealComplexNumber.ONE

    def coerce(self, element: Any, name: str = "element") -> RealComplexNumber:
        require_not_none(element, name)
        if isinstance(element, RealComplexNumber):
            return element
        if isinstance(element, SimpleComplexNumber):
            return RealComplexNumber.of(element)
        if isinstance(element, (int, Decimal)) and not isinstance(element, bool):
            return RealComplexNumber(element)
        raise self._reject(element, name)

    def add(self, a, b, decimal_context: Optional[Context] = None):
        return a.add(b, decimal_context)

    def subtract(self, a, b, decimal_context: Optional[Context] = None):
        return a.subtract(b, decimal_context)

    def multiply(self, a, b, decimal_context: Optional[Context] = None):
        return a.multiply(b, decimal_context)

    def negate(self, a, decimal_context: Optional[Context] = None):
        return a.negate(decimal_context)

    def abs(self, a, precision=None, scale=None, rounding_mode=None, context=None) -> Decimal:
        return a.abs(precision, scale, rounding_mode, context)

    def abs_pow2(self, a: RealComplexNumber, decimal_context: Optional[Context] = None) -> Decimal:
        return a.abs_pow2(decimal_context)

    def is_unit(self, a: RealComplexNumber) -> bool:
        return a in (RealComplexNumber.ONE, RealComplexNumber.ONE.negate())


INTEGER = IntegerArithmetic()
DECIMAL = DecimalArithmetic()
SIMPLE_COMPLEX = SimpleComplexArithmetic()
REAL_COMPLEX = RealComplexArithmetic()


def norm_sqrt(value: Any, precision: Any = None, scale: Optional[int] = None, rounding_mode: Any = None,
              context: Optional[SquareRootContext] = None) -> Decimal:
    """Square root of a sum of squares under the caller's policy."""
    return calculator_for(precision, scale, rounding_mode, context).sqrt(value)
