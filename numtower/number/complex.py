"""
Complex numbers over exact integers and over decimals.

SimpleComplexNumber keeps both parts as Python ints, so everything except
division, absolute value and polar form is exact. Division leaves the
integers, so ``SimpleComplexNumber.divide`` returns a RealComplexNumber.

RealComplexNumber keeps both parts as Decimals. Addition, subtraction and
multiplication are exact unless a ``decimal.Context`` is passed; division,
absolute value and polar form always take an explicit rounding policy
(significant digits or scale, plus a rounding mode), falling back to the
settings.
"""

from __future__ import annotations

from decimal import Context, Decimal
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.config import get_settings
from ..core.errors import check_argument, check_integer, check_state, require_not_none
from ..sqrt.calculator import calculator_for
from ..sqrt.context import SquareRootContext
from . import decimals
from .polar import PolarForm, atan2
from .value import MathNumber


def _power(number: MathNumber, one: MathNumber, exponent: int) -> Any:
    """Square-and-multiply power for exponents >= 2."""
    result = one
    factor = number
    while exponent:
        if exponent & 1:
            result = result.multiply(factor)
        exponent >>= 1
        if exponent:
            factor = factor.multiply(factor)
    return result


def _check_exponent(exponent: int) -> None:
    check_integer(exponent, "exponent")
    check_argument(exponent >= 0, "expected exponent >= 0 but actual %s", exponent)


class SimpleComplexNumber(BaseModel, MathNumber):
    """
    Complex number ``real + imaginary*i`` with integer parts.

    Examples:
        >>> SimpleComplexNumber(1, 2).multiply(SimpleComplexNumber(3, -1))  # SimpleComplexNumber(5, 5)
        >>> SimpleComplexNumber(1, 1).divide(SimpleComplexNumber(1, -1))  # RealComplexNumber(0, 1)
        >>> SimpleComplexNumber(3, 4).abs()  # Decimal('5.0000000000')
    """

    model_config = ConfigDict(frozen=True, strict=True)

    real: int = Field(description="The real part")
    imaginary: int = Field(description="The imaginary part")

    ZERO: ClassVar[SimpleComplexNumber]
    ONE: ClassVar[SimpleComplexNumber]
    IMAGINARY: ClassVar[SimpleComplexNumber]

    def __init__(self, real: int, imaginary: int = 0, **kwargs):
        check_integer(real, "real")
        check_integer(imaginary, "imaginary")
        super().__init__(real=real, imaginary=imaginary, **kwargs)

    @classmethod
    def of(cls, real: int, imaginary: int = 0) -> SimpleComplexNumber:
        return cls(real, imaginary)

    @classmethod
    def _coerce(cls, other: Any) -> Optional[SimpleComplexNumber]:
        if isinstance(other, SimpleComplexNumber):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return cls(other)
        return None

    def add(self, summand: SimpleComplexNumber) -> SimpleComplexNumber:
        summand = self._operand(summand, "summand")
        return SimpleComplexNumber(self.real + summand.real, self.imaginary + summand.imaginary)

    def subtract(self, subtrahend: SimpleComplexNumber) -> SimpleComplexNumber:
        subtrahend = self._operand(subtrahend, "subtrahend")
        return SimpleComplexNumber(self.real - subtrahend.real, self.imaginary - subtrahend.imaginary)

    def multiply(self, factor: SimpleComplexNumber) -> SimpleComplexNumber:
        factor = self._operand(factor, "factor")
        return SimpleComplexNumber(
            self.real * factor.real - self.imaginary * factor.imaginary,
            self.real * factor.imaginary + self.imaginary * factor.real,
        )

    def divide(
        self,
        divisor: Any,
        *,
        scale: Optional[int] = None,
        precision: Optional[int] = None,
        rounding_mode: Any = None,
    ) -> RealComplexNumber:
        """
        Divide by multiplying with the conjugate of the divisor.

        Args:
            divisor: Non-zero SimpleComplexNumber or RealComplexNumber
            scale: Fractional digits of both parts
            precision: Significant digits of both parts (default ``DIVISION_PRECISION``)
            rounding_mode: Default ``DEFAULT_ROUNDING_MODE``

        Raises:
            InvalidArgumentError: divisor is zero
        """
        require_not_none(divisor, "divisor")
        if isinstance(divisor, RealComplexNumber):
            return RealComplexNumber.of(self).divide(
                divisor, scale=scale, precision=precision, rounding_mode=rounding_mode
            )
        divisor = self._operand(divisor, "divisor")
        check_argument(divisor.invertible(), "expected divisor to be invertible but actual %r", divisor)
        denominator = divisor.abs_pow2()
        real = self.real * divisor.real + self.imaginary * divisor.imaginary
        imaginary = self.imaginary * divisor.real - self.real * divisor.imaginary
        return RealComplexNumber(
            decimals.divide(real, denominator, scale=scale, precision=precision, rounding_mode=rounding_mode),
            decimals.divide(imaginary, denominator, scale=scale, precision=precision, rounding_mode=rounding_mode),
        )

    def pow(self, exponent: int) -> SimpleComplexNumber:
        _check_exponent(exponent)
        if exponent == 0:
            return SimpleComplexNumber.ONE
        if exponent == 1:
            return self
        return _power(self, SimpleComplexNumber.ONE, exponent)

    def negate(self) -> SimpleComplexNumber:
        return SimpleComplexNumber(-self.real, -self.imaginary)

    def invert(
        self,
        *,
        scale: Optional[int] = None,
        precision: Optional[int] = None,
        rounding_mode: Any = None,
    ) -> RealComplexNumber:
        check_state(self.invertible(), "expected to be invertible but actual %r", self)
        return SimpleComplexNumber.ONE.divide(self, scale=scale, precision=precision, rounding_mode=rounding_mode)

    def invertible(self) -> bool:
        return self != SimpleComplexNumber.ZERO

    def conjugate(self) -> SimpleComplexNumber:
        return SimpleComplexNumber(self.real, -self.imaginary)

    def abs_pow2(self) -> int:
        """Square of the absolute value, exact."""
        return self.real * self.real + self.imaginary * self.imaginary

    def abs(
        self,
        precision: Any = None,
        scale: Optional[int] = None,
        rounding_mode: Any = None,
        context: Optional[SquareRootContext] = None,
    ) -> Decimal:
        """Absolute value through the square-root calculator."""
        return calculator_for(precision, scale, rounding_mode, context).sqrt(self.abs_pow2())

    def argument(self, precision: Optional[int] = None, rounding_mode: Any = None) -> Decimal:
        """
        Angle in (-pi, pi] to ``precision`` significant digits.

        Raises:
            IllegalStateError: self is zero
        """
        check_state(self != SimpleComplexNumber.ZERO, "expected this != 0 but actual %r", self)
        return RealComplexNumber.of(self).argument(precision, rounding_mode)

    def polar_form(self, precision: Optional[int] = None, rounding_mode: Any = None) -> PolarForm:
        check_state(self != SimpleComplexNumber.ZERO, "expected this != 0 but actual %r", self)
        return RealComplexNumber.of(self).polar_form(precision, rounding_mode)

    def matrix(self):
        """Matrix ``[[re, -im], [im, re]]`` of multiplication by this number."""
        from ..linear.matrix import BigIntegerMatrix

        return BigIntegerMatrix([[self.real, -self.imaginary], [self.imaginary, self.real]])

    def __repr__(self) -> str:
        return f"SimpleComplexNumber({self.real}, {self.imaginary})"

    def __str__(self) -> str:
        sign = "-" if self.imaginary < 0 else "+"
        return f"{self.real} {sign} {abs(self.imaginary)}i"


SimpleComplexNumber.ZERO = SimpleComplexNumber(0, 0)
SimpleComplexNumber.ONE = SimpleComplexNumber(1, 0)
SimpleComplexNumber.IMAGINARY = SimpleComplexNumber(0, 1)


class RealComplexNumber(BaseModel, MathNumber):
    """
    Complex number ``real + imaginary*i`` with Decimal parts.

    Equality compares the parts by value, so ``RealComplexNumber("1.0", 0) == RealComplexNumber(1, 0)``.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    real: Decimal = Field(description="The real part")
    imaginary: Decimal = Field(description="The imaginary part")

    ZERO: ClassVar[RealComplexNumber]
    ONE: ClassVar[RealComplexNumber]
    IMAGINARY: ClassVar[RealComplexNumber]

    def __init__(self, real: Any, imaginary: Any = 0, **kwargs):
        super().__init__(
            real=decimals.to_decimal(real, "real"),
            imaginary=decimals.to_decimal(imaginary, "imaginary"),
            **kwargs
        )

    @classmethod
    def of(cls, value: SimpleComplexNumber) -> RealComplexNumber:
        """Widen an integer complex number."""
        require_not_none(value, "value")
        return cls(value.real, value.imaginary)

    @classmethod
    def _coerce(cls, other: Any) -> Optional[RealComplexNumber]:
        if isinstance(other, RealComplexNumber):
            return other
        if isinstance(other, SimpleComplexNumber):
            return cls.of(other)
        if isinstance(other, (int, Decimal)) and not isinstance(other, bool):
            return cls(other)
        return None

    def add(self, summand: Any, decimal_context: Optional[Context] = None) -> RealComplexNumber:
        summand = self._operand(summand, "summand")
        return RealComplexNumber(
            decimals.apply_context(decimals.add(self.real, summand.real), decimal_context),
            decimals.apply_context(decimals.add(self.imaginary, summand.imaginary), decimal_context),
        )

    def subtract(self, subtrahend: Any, decimal_context: Optional[Context] = None) -> RealComplexNumber:
        subtrahend = self._operand(subtrahend, "subtrahend")
        return RealComplexNumber(
            decimals.apply_context(decimals.subtract(self.real, subtrahend.real), decimal_context),
            decimals.apply_context(decimals.subtract(self.imaginary, subtrahend.imaginary), decimal_context),
        )

    def multiply(self, factor: Any, decimal_context: Optional[Context] = None) -> RealComplexNumber:
        factor = self._operand(factor, "factor")
        real = decimals.subtract(
            decimals.multiply(self.real, factor.real), decimals.multiply(self.imaginary, factor.imaginary)
        )
        imaginary = decimals.add(
            decimals.multiply(self.real, factor.imaginary), decimals.multiply(self.imaginary, factor.real)
        )
        return RealComplexNumber(
            decimals.apply_context(real, decimal_context), decimals.apply_context(imaginary, decimal_context)
        )

    def divide(
        self,
        divisor: Any,
        *,
        scale: Optional[int] = None,
        precision: Optional[int] = None,
        rounding_mode: Any = None,
        decimal_context: Optional[Context] = None,
    ) -> RealComplexNumber:
        """
        Divide by multiplying with the conjugate of the divisor.

        The policy is either ``scale`` or ``precision`` (or the precision and
        rounding of ``decimal_context``) together with ``rounding_mode``.
        Without any policy, ``DIVISION_PRECISION`` significant digits are kept.

        Raises:
            InvalidArgumentError: divisor is zero
        """
        divisor = self._operand(divisor, "divisor")
        check_argument(divisor.invertible(), "expected divisor to be invertible but actual %r", divisor)
        if decimal_context is not None:
            precision = decimal_context.prec
            rounding_mode = decimal_context.rounding
        denominator = divisor.abs_pow2()
        real = decimals.add(
            decimals.multiply(self.real, divisor.real), decimals.multiply(self.imaginary, divisor.imaginary)
        )
        imaginary = decimals.subtract(
            decimals.multiply(self.imaginary, divisor.real), decimals.multiply(self.real, divisor.imaginary)
        )
        return RealComplexNumber(
            decimals.divide(real, denominator, scale=scale, precision=precision, rounding_mode=rounding_mode),
            decimals.divide(imaginary, denominator, scale=scale, precision=precision, rounding_mode=rounding_mode),
        )

    def pow(self, exponent: int, decimal_context: Optional[Context] = None) -> RealComplexNumber:
        _check_exponent(exponent)
        if exponent == 0:
            return RealComplexNumber.ONE
        if exponent == 1:
            return self
        result = _power(self, RealComplexNumber.ONE, exponent)
        if decimal_context is None:
            return result
        return RealComplexNumber(
            decimals.apply_context(result.real, decimal_context),
            decimals.apply_context(result.imaginary, decimal_context),
        )

    def negate(self, decimal_context: Optional[Context] = None) -> RealComplexNumber:
        return RealComplexNumber(
            decimals.apply_context(decimals.negate(self.real), decimal_context),
            decimals.apply_context(decimals.negate(self.imaginary), decimal_context),
        )

    def invert(
        self,
        *,
        scale: Optional[int] = None,
        precision: Optional[int] = None,
        rounding_mode: Any = None,
        decimal_context: Optional[Context] = None,
    ) -> RealComplexNumber:
        check_state(self.invertible(), "expected to be invertible but actual %r", self)
        return RealComplexNumber.ONE.divide(
            self, scale=scale, precision=precision, rounding_mode=rounding_mode, decimal_context=decimal_context
        )

    def invertible(self) -> bool:
        return self != RealComplexNumber.ZERO

    def conjugate(self, decimal_context: Optional[Context] = None) -> RealComplexNumber:
        return RealComplexNumber(
            decimals.apply_context(self.real, decimal_context),
            decimals.apply_context(decimals.negate(self.imaginary), decimal_context),
        )

    def abs_pow2(self, decimal_context: Optional[Context] = None) -> Decimal:
        value = decimals.add(
            decimals.multiply(self.real, self.real), decimals.multiply(self.imaginary, self.imaginary)
        )
        return decimals.apply_context(value, decimal_context)

    def abs(
        self,
        precision: Any = None,
        scale: Optional[int] = None,
        rounding_mode: Any = None,
        context: Optional[SquareRootContext] = None,
    ) -> Decimal:
        """Absolute value through the square-root calculator."""
        return calculator_for(precision, scale, rounding_mode, context).sqrt(self.abs_pow2())

    def argument(self, precision: Optional[int] = None, rounding_mode: Any = None) -> Decimal:
        """
        Angle in (-pi, pi] to ``precision`` significant digits (default ``POLAR_PRECISION``).

        Raises:
            IllegalStateError: self is zero
        """
        check_state(self.invertible(), "expected this != 0 but actual %r", self)
        return atan2(self.imaginary, self.real, precision, rounding_mode)

    def polar_form(self, precision: Optional[int] = None, rounding_mode: Any = None) -> PolarForm:
        """
        Radial part via the square-root calculator, angular part via ``argument``.

        Raises:
            IllegalStateError: self is zero
        """
        check_state(self.invertible(), "expected this != 0 but actual %r", self)
        settings = get_settings()
        digits = settings.POLAR_PRECISION if precision is None else precision
        mode = settings.DEFAULT_ROUNDING_MODE if rounding_mode is None else rounding_mode
        radial = self.abs(precision=decimals.unit(digits), scale=digits, rounding_mode=mode)
        return PolarForm(radial, self.argument(digits, mode))

    def matrix(self):
        """Matrix ``[[re, -im], [im, re]]`` of multiplication by this number."""
        from ..linear.matrix import BigDecimalMatrix

        return BigDecimalMatrix([[self.real, decimals.negate(self.imaginary)], [self.imaginary, self.real]])

    def __repr__(self) -> str:
        return f"RealComplexNumber({self.real!r}, {self.imaginary!r})"

    def __str__(self) -> str:
        sign = "-" if self.imaginary.is_signed() else "+"
        return f"{self.real} {sign} {decimals.absolute(self.imaginary)}i"


RealComplexNumber.ZERO = RealComplexNumber(0, 0)
RealComplexNumber.ONE = RealComplexNumber(1, 0)
RealComplexNumber.IMAGINARY = RealComplexNumber(0, 1)
