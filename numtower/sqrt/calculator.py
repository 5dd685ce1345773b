"""
Arbitrary-precision square roots by Heron's method.

Every Euclidean norm, distance and complex absolute value delegates here
when its result is not an integer. The computation never touches binary
floating point, so inputs far beyond the IEEE 754 range are fine.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, NamedTuple, Optional, Union

from ..core.errors import InvalidArgumentError, check_argument, check_integer, require_not_none
from ..core.logging import get_context_logger
from ..number import decimals
from .context import SquareRootContext

Radicand = Union[int, Decimal]


class ScientificNotation(NamedTuple):
    """``coefficient * 10 ** exponent`` with an even exponent and ``1 <= coefficient < 100``."""

    coefficient: Decimal
    exponent: int


def scientific_notation_for_sqrt(value: Radicand) -> ScientificNotation:
    """
    Split a positive radicand into a two-digit coefficient and an even exponent.

    The even exponent makes ``sqrt(10 ** exponent)`` an exact power of ten.
    """
    value = Decimal(value)
    check_argument(value > 0, "expected value > 0 but actual %s", value)
    adjusted = value.adjusted()
    exponent = adjusted - adjusted % 2
    return ScientificNotation(value.scaleb(-exponent, context=decimals.EXACT), exponent)


def perfect_square(value: int) -> bool:
    """Whether a non-negative integer is the square of an integer."""
    check_integer(value, "value")
    check_argument(value >= 0, "expected integer >= 0 but actual %s", value)
    root = math.isqrt(value)
    return root * root == value


def sqrt_of_perfect_square(value: int) -> int:
    """Exact integer root of a perfect square."""
    check_argument(perfect_square(value), "expected perfect square but actual %s", value)
    return math.isqrt(value)


class SquareRootCalculator:
    """
    Approximates square roots of non-negative integers and decimals.

    The calculator is immutable; construct one per rounding policy.

    Examples:
        >>> SquareRootCalculator().sqrt(2)  # Decimal('1.4142135624')
        >>> SquareRootCalculator(scale=3, rounding_mode="DOWN").sqrt(Decimal("10"))  # Decimal('3.162')
        >>> SquareRootCalculator(Decimal("1E-20"), 20, "HALF_EVEN").sqrt(3)
    """

    __slots__ = ("_context", "_logger")

    def __init__(
        self,
        precision: Any = None,
        scale: Optional[int] = None,
        rounding_mode: Any = None,
        *,
        max_iterations: Optional[int] = None,
        context: Optional[SquareRootContext] = None,
    ):
        if context is None:
            context = SquareRootContext(precision, scale, rounding_mode, max_iterations)
        else:
            context = context.derive(precision, scale, rounding_mode, max_iterations)
        self._context = context
        self._logger = get_context_logger(
            __name__,
            precision=str(context.precision),
            scale=context.scale,
            rounding_mode=context.rounding_mode.name,
        )

    @property
    def context(self) -> SquareRootContext:
        return self._context

    @property
    def precision(self) -> Decimal:
        return self._context.precision

    @property
    def scale(self) -> int:
        return self._context.scale

    @property
    def rounding_mode(self):
        return self._context.rounding_mode

    def sqrt(self, value: Radicand) -> Decimal:
        """
        Square root of ``value`` at this calculator's scale.

        Args:
            value: Non-negative int or Decimal

        Returns:
            Decimal with exactly ``scale`` fractional digits

        Raises:
            NotNullViolationError: value is None
            InvalidArgumentError: value is negative or not an int/Decimal
        """
        require_not_none(value, "value")
        if isinstance(value, bool) or not isinstance(value, (int, Decimal)):
            raise InvalidArgumentError(
                f"expected integer or Decimal but actual {value!r}",
                details={"type": type(value).__name__},
            )
        if isinstance(value, int):
            check_argument(value >= 0, "expected integer >= 0 but actual %s", value)
        else:
            check_argument(value.is_finite(), "expected finite decimal but actual %s", value)
            check_argument(value >= 0, "expected decimal >= 0 but actual %s", value)

        if value == 0:
            return decimals.set_scale(Decimal(0), self.scale, self.rounding_mode)

        integral = self._integral_value(value)
        if integral is not None and perfect_square(integral):
            return decimals.set_scale(Decimal(math.isqrt(integral)), self.scale, self.rounding_mode)

        return decimals.set_scale(self._heron(Decimal(value)), self.scale, self.rounding_mode)

    @staticmethod
    def _integral_value(value: Radicand) -> Optional[int]:
        if isinstance(value, int):
            return value
        if value == value.to_integral_value(context=decimals.EXACT):
            return int(value)
        return None

    def _working_scale(self, notation: ScientificNotation) -> int:
        # Roots of tiny radicands need precision_digits significant digits beyond their leading zeros
        root_digits = max(0, -notation.exponent // 2) + self._context.precision_digits + 2
        return max(self.scale, self._context.precision_digits, root_digits) + 2

    def _converged(self, predecessor: Decimal, successor: Decimal) -> bool:
        """Iterates differ by less than ``precision``, both absolutely and relative to ``successor``."""
        difference = decimals.absolute(decimals.subtract(successor, predecessor))
        return difference < self.precision and difference < decimals.multiply(self.precision, successor)

    def _heron(self, value: Decimal) -> Decimal:
        notation = scientific_notation_for_sqrt(value)
        seed_digit = 6 if notation.coefficient >= 10 else 2
        predecessor = Decimal((0, (seed_digit,), notation.exponent // 2))
        working_scale = self._working_scale(notation)
        mode = self.rounding_mode

        for iteration in range(1, self._context.max_iterations + 1):
            # (x_n ** 2 + value) / (2 * x_n) == (x_n + value / x_n) / 2
            successor = decimals.divide_to_scale(
                decimals.add(decimals.multiply(predecessor, predecessor), value),
                decimals.multiply(2, predecessor),
                working_scale,
                mode,
            )
            if self._converged(predecessor, successor):
                self._logger.debug(
                    "Heron iteration converged",
                    extra_data={"iterations": iteration, "seed_exponent": notation.exponent},
                )
                return successor
            predecessor = successor

        self._logger.warning(
            "Heron iteration hit the iteration limit",
            extra_data={"max_iterations": self._context.max_iterations, "value": str(value)},
        )
        return predecessor

    def __repr__(self) -> str:
        return f"SquareRootCalculator({self._context!r})"


def calculator_for(
    precision: Any = None,
    scale: Optional[int] = None,
    rounding_mode: Any = None,
    context: Optional[SquareRootContext] = None,
) -> SquareRootCalculator:
    """Calculator for the keyword policies accepted by norms and absolute values."""
    return SquareRootCalculator(precision, scale, rounding_mode, context=context)


def sqrt(
    value: Radicand,
    precision: Any = None,
    scale: Optional[int] = None,
    rounding_mode: Any = None,
    *,
    context: Optional[SquareRootContext] = None,
) -> Decimal:
    """Square root of ``value`` under the given policy (settings defaults otherwise)."""
    return calculator_for(precision, scale, rounding_mode, context).sqrt(value)
