"""
Base MathNumber class for the scalar tower.

Concrete scalars (Fraction, SimpleComplexNumber, RealComplexNumber) inherit
from both ``BaseModel`` and ``MathNumber``:

    class Fraction(BaseModel, MathNumber): ...

MathNumber itself is abstract and does not inherit from BaseModel to avoid
MRO conflicts. It declares the named algebraic operations and maps Python's
operators onto them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..core.errors import InvalidArgumentError, require_not_none


class MathNumber(ABC):
    """
    Base class for all scalar values.

    Subclasses implement the named operations; ``+ - * / ** -x abs(x)``
    delegate to them. Operands that cannot be coerced to the receiver's type
    yield ``NotImplemented`` so Python can try the reflected operation.
    """

    @abstractmethod
    def add(self, summand: Any) -> MathNumber:
        ...

    @abstractmethod
    def subtract(self, subtrahend: Any) -> MathNumber:
        ...

    @abstractmethod
    def multiply(self, factor: Any) -> MathNumber:
        ...

    @abstractmethod
    def divide(self, divisor: Any) -> MathNumber:
        ...

    @abstractmethod
    def pow(self, exponent: int) -> MathNumber:
        ...

    @abstractmethod
    def negate(self) -> MathNumber:
        ...

    @abstractmethod
    def invert(self) -> MathNumber:
        ...

    @abstractmethod
    def invertible(self) -> bool:
        ...

    @abstractmethod
    def abs(self) -> Any:
        ...

    @classmethod
    def _coerce(cls, other: Any) -> Optional[MathNumber]:
        """Convert an operator operand to this type, or None if unsupported."""
        if isinstance(other, cls):
            return other
        return None

    def _operand(self, value: Any, name: str) -> Any:
        """Coerce the argument of a named operation, raising on None or a foreign type."""
        require_not_none(value, name)
        operand = self._coerce(value)
        if operand is None:
            raise InvalidArgumentError(
                f"expected {name} of type {type(self).__name__} but actual {value!r}",
                details={"parameter": name, "type": type(value).__name__},
            )
        return operand

    # Operators

    def __add__(self, other: Any) -> Any:
        operand = self._coerce(other)
        return NotImplemented if operand is None else self.add(operand)

    def __radd__(self, other: Any) -> Any:
        operand = self._coerce(other)
        return NotImplemented if operand is None else operand.add(self)

    def __sub__(self, other: Any) -> Any:
        operand = self._coerce(other)
        return NotImplemented if operand is None else self.subtract(operand)

    def __rsub__(self, other: Any) -> Any:
        operand = self._coerce(other)
        return NotImplemented if operand is None else operand.subtract(self)

    def __mul__(self, other: Any) -> Any:
        operand = self._coerce(other)
        return NotImplemented if operand is None else self.multiply(operand)

    def __rmul__(self, other: Any) -> Any:
        operand = self._coerce(other)
        return NotImplemented if operand is None else operand.multiply(self)

    def __truediv__(self, other: Any) -> Any:
        operand = self._coerce(other)
        return NotImplemented if operand is None else self.divide(operand)

    def __rtruediv__(self, other: Any) -> Any:
        operand = self._coerce(other)
        return NotImplemented if operand is None else operand.divide(self)

    def __pow__(self, exponent: Any) -> Any:
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> Any:
        return self.negate()

    def __pos__(self) -> Any:
        return self

    def __abs__(self) -> Any:
        return self.abs()
