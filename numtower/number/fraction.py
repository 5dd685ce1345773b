"""
Exact rational numbers.

A Fraction stores its numerator and denominator exactly as given. Results of
arithmetic are never reduced implicitly: ``reduce()`` and ``normalize()``
are explicit, pure and idempotent. Equality is structural, so
``Fraction(1, 2) != Fraction(2, 4)`` while ``Fraction(1, 2).equivalent(Fraction(2, 4))``.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import check_argument, check_integer, check_state
from . import decimals
from .value import MathNumber


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Fraction(BaseModel, MathNumber):
    """
    Fraction represents a rational number as numerator/denominator.

    Examples:
        >>> Fraction(1, 2).add(Fraction(1, 3))  # Fraction(5, 6)
        >>> Fraction(2, 4).reduce()  # Fraction(1, 2)
        >>> Fraction(1, -2).normalize()  # Fraction(-1, 2)
    """

    model_config = ConfigDict(frozen=True, strict=True)

    numerator: int = Field(description="The numerator")
    denominator: int = Field(description="The denominator, never zero")

    ZERO: ClassVar[Fraction]
    ONE: ClassVar[Fraction]

    def __init__(self, numerator: int, denominator: int = 1, **kwargs):
        """
        Create a Fraction.

        Args:
            numerator: Numerator
            denominator: Denominator (default 1), must not be zero

        Raises:
            NotNullViolationError: numerator or denominator is None
            InvalidArgumentError: a term is not an integer or the denominator is zero
        """
        check_integer(numerator, "numerator")
        check_integer(denominator, "denominator")
        check_argument(denominator != 0, "expected denominator != 0 but actual %s", denominator)
        super().__init__(numerator=numerator, denominator=denominator, **kwargs)

    @classmethod
    def of(cls, numerator: int, denominator: int = 1) -> Fraction:
        """Factory alias for the constructor."""
        return cls(numerator, denominator)

    @classmethod
    def _coerce(cls, other: Any) -> Optional[Fraction]:
        if isinstance(other, Fraction):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return cls(other)
        return None

    # Arithmetic

    def add(self, summand: Fraction) -> Fraction:
        summand = self._operand(summand, "summand")
        return Fraction(
            self.numerator * summand.denominator + self.denominator * summand.numerator,
            self.denominator * summand.denominator,
        )

    def subtract(self, subtrahend: Fraction) -> Fraction:
        subtrahend = self._operand(subtrahend, "subtrahend")
        return Fraction(
            self.numerator * subtrahend.denominator - self.denominator * subtrahend.numerator,
            self.denominator * subtrahend.denominator,
        )

    def multiply(self, factor: Fraction) -> Fraction:
        factor = self._operand(factor, "factor")
        return Fraction(self.numerator * factor.numerator, self.denominator * factor.denominator)

    def divide(self, divisor: Fraction) -> Fraction:
        """
        Divide by another fraction.

        Raises:
            InvalidArgumentError: divisor has numerator zero
        """
        divisor = self._operand(divisor, "divisor")
        check_argument(divisor.invertible(), "expected divisor to be invertible but actual %r", divisor)
        return Fraction(self.numerator * divisor.denominator, self.denominator * divisor.numerator)

    def pow(self, exponent: int) -> Fraction:
        """
        Raise to a non-negative integer power.

        ``pow(0)`` returns ``Fraction.ONE`` and ``pow(1)`` returns ``self``.
        """
        check_integer(exponent, "exponent")
        check_argument(exponent >= 0, "expected exponent >= 0 but actual %s", exponent)
        if exponent == 0:
            return Fraction.ONE
        if exponent == 1:
            return self
        return Fraction(self.numerator ** exponent, self.denominator ** exponent)

    def negate(self) -> Fraction:
        return Fraction(-self.numerator, self.denominator)

    def invert(self) -> Fraction:
        check_state(self.invertible(), "expected to be invertible but actual %r", self)
        return Fraction(self.denominator, self.numerator)

    def invertible(self) -> bool:
        return self.numerator != 0

    def abs(self) -> Fraction:
        return Fraction(abs(self.numerator), abs(self.denominator))

    def signum(self) -> int:
        return _sign(self.numerator) * _sign(self.denominator)

    # Representation

    def reduce(self) -> Fraction:
        """Divide both terms by their gcd. Signs stay where they are."""
        divisor = math.gcd(self.numerator, self.denominator)
        if divisor == 1:
            return self
        return Fraction(self.numerator // divisor, self.denominator // divisor)

    def normalize(self) -> Fraction:
        """Move the sign to the numerator so the denominator is positive."""
        signum = self.signum()
        if signum < 0:
            return Fraction(-abs(self.numerator), abs(self.denominator))
        if signum == 0:
            return Fraction.ZERO
        if self.numerator < 0:
            return self.abs()
        return self

    def equivalent(self, other: Fraction) -> bool:
        """Value equality: equal after normalizing and reducing."""
        other = self._operand(other, "other")
        return self.normalize().reduce() == other.normalize().reduce()

    # Ordering

    def compare_to(self, other: Fraction) -> int:
        """Return -1, 0 or 1 as ``self`` is less than, equal to or greater than ``other``."""
        other = self._operand(other, "other")
        left = self.normalize()
        right = other.normalize()
        return _sign(left.numerator * right.denominator - right.numerator * left.denominator)

    def less_than(self, other: Fraction) -> bool:
        return self.compare_to(other) < 0

    def less_than_or_equal_to(self, other: Fraction) -> bool:
        return self.compare_to(other) <= 0

    def greater_than(self, other: Fraction) -> bool:
        return self.compare_to(other) > 0

    def greater_than_or_equal_to(self, other: Fraction) -> bool:
        return self.compare_to(other) >= 0

    def min(self, other: Fraction) -> Fraction:
        other = self._operand(other, "other")
        return self if self.less_than_or_equal_to(other) else other

    def max(self, other: Fraction) -> Fraction:
        other = self._operand(other, "other")
        return self if self.greater_than_or_equal_to(other) else other

    def __lt__(self, other: Any) -> bool:
        operand = self._coerce(other)
        return NotImplemented if operand is None else self.less_than(operand)

    def __le__(self, other: Any) -> bool:
        operand = self._coerce(other)
        return NotImplemented if operand is None else self.less_than_or_equal_to(operand)

    def __gt__(self, other: Any) -> bool:
        operand = self._coerce(other)
        return NotImplemented if operand is None else self.greater_than(operand)

    def __ge__(self, other: Any) -> bool:
        operand = self._coerce(other)
        return NotImplemented if operand is None else self.greater_than_or_equal_to(operand)

    # Conversion

    def to_decimal(
        self,
        *,
        scale: Optional[int] = None,
        precision: Optional[int] = None,
        rounding_mode: Any = None,
    ) -> Decimal:
        """Decimal value under the same rounding policies as complex division."""
        return decimals.divide(self.numerator, self.denominator, scale=scale, precision=precision,
                               rounding_mode=rounding_mode)

    def __repr__(self) -> str:
        return f"Fraction({self.numerator}, {self.denominator})"

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


Fraction.ZERO = Fraction(0, 1)
Fraction.ONE = Fraction(1, 1)
