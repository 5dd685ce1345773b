"""
Exact and explicitly rounded Decimal arithmetic.

Python's ``Decimal`` operators round silently to the thread context (28
significant digits by default). Everything here either stays exact or rounds
exactly once under a caller-supplied policy.
"""

from __future__ import annotations

import decimal
from decimal import Context, Decimal, InvalidOperation
from functools import reduce
from typing import Any, Iterable, Optional, Union

from ..core.config import get_settings
from ..core.errors import InvalidArgumentError, check_argument, check_integer, require_not_none
from ..core.rounding import RoundingMode

Number = Union[int, Decimal]

# Addition, subtraction and multiplication never round under this context.
EXACT = Context(
    prec=decimal.MAX_PREC,
    Emax=decimal.MAX_EMAX,
    Emin=decimal.MIN_EMIN,
    traps=[InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
)


def to_decimal(value: Any, name: str = "value") -> Decimal:
    """
    Convert an int, Decimal or numeric string into a finite Decimal.

    Floats and bools are rejected: binary floating point has no place in
    this numeric tower.
    """
    require_not_none(value, name)
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool) or isinstance(value, float):
        raise InvalidArgumentError(
            f"expected {name} to be an integer or Decimal but actual {value!r}",
            details={"parameter": name, "type": type(value).__name__},
        )
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as exc:
            raise InvalidArgumentError(
                f"expected {name} to be a decimal literal but actual {value!r}",
                details={"parameter": name},
            ) from exc
    else:
        raise InvalidArgumentError(
            f"expected {name} to be an integer or Decimal but actual {value!r}",
            details={"parameter": name, "type": type(value).__name__},
        )
    check_argument(result.is_finite(), "expected finite %s but actual %s", name, result)
    return result


def _both_int(a: Number, b: Number) -> bool:
    return isinstance(a, int) and isinstance(b, int)


def add(a: Number, b: Number) -> Number:
    if _both_int(a, b):
        return a + b
    return EXACT.add(Decimal(a), Decimal(b))


def subtract(a: Number, b: Number) -> Number:
    if _both_int(a, b):
        return a - b
    return EXACT.subtract(Decimal(a), Decimal(b))


def multiply(a: Number, b: Number) -> Number:
    if _both_int(a, b):
        return a * b
    return EXACT.multiply(Decimal(a), Decimal(b))


def negate(a: Number) -> Number:
    if isinstance(a, int):
        return -a
    return EXACT.minus(a)


def absolute(a: Number) -> Number:
    if isinstance(a, int):
        return abs(a)
    return EXACT.abs(a)


def power(base: Number, exponent: int) -> Number:
    """Exact non-negative integer power by repeated squaring."""
    check_integer(exponent, "exponent")
    check_argument(exponent >= 0, "expected exponent >= 0 but actual %s", exponent)
    if isinstance(base, int):
        return base ** exponent
    result: Number = Decimal(1)
    factor: Number = base
    while exponent:
        if exponent & 1:
            result = multiply(result, factor)
        exponent >>= 1
        if exponent:
            factor = multiply(factor, factor)
    return result


def exact_sum(values: Iterable[Number], start: Number = 0) -> Number:
    return reduce(add, values, start)


def context_sum(values: Iterable[Number], decimal_context: Optional[Context] = None) -> Number:
    """Sum that rounds every partial sum under ``decimal_context``, or stays exact without one."""
    if decimal_context is None:
        return exact_sum(values)
    result: Number = Decimal(0)
    for value in values:
        result = decimal_context.add(Decimal(result), Decimal(value))
    return result


def unit(scale: int) -> Decimal:
    """``10 ** -scale`` as an exact Decimal."""
    return Decimal((0, (1,), -scale))


def scale_of(value: Decimal) -> int:
    """Digits after the decimal point (negative for multiples of powers of ten)."""
    return -value.as_tuple().exponent


def set_scale(value: Number, scale: int, rounding_mode: Any = None) -> Decimal:
    """Round ``value`` to exactly ``scale`` fractional digits."""
    mode = RoundingMode.parse(rounding_mode) if rounding_mode is not None else get_settings().DEFAULT_ROUNDING_MODE
    check_integer(scale, "scale")
    return Decimal(value).quantize(unit(scale), rounding=mode.value, context=EXACT)


def apply_context(value: Number, decimal_context: Optional[Context] = None) -> Number:
    """Round an exact result once under ``decimal_context``; without one, return it unchanged."""
    if decimal_context is None:
        return value
    return decimal_context.plus(Decimal(value))


def round_to_precision(value: Number, precision: int, rounding_mode: Any = None) -> Decimal:
    """Round ``value`` to ``precision`` significant digits."""
    return context_for(precision, rounding_mode).plus(Decimal(value))


def context_for(precision: int, rounding_mode: Any = None) -> Context:
    """A decimal context with ``precision`` significant digits and the given rounding."""
    check_integer(precision, "precision")
    check_argument(precision > 0, "expected precision > 0 but actual %s", precision)
    mode = RoundingMode.parse(rounding_mode) if rounding_mode is not None else get_settings().DEFAULT_ROUNDING_MODE
    return Context(
        prec=precision,
        rounding=mode.value,
        Emax=decimal.MAX_EMAX,
        Emin=decimal.MIN_EMIN,
        traps=[InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
    )


def _round_quotient(quotient: int, remainder: int, divisor: int, negative: bool, mode: RoundingMode) -> int:
    """
    Round a truncated non-negative quotient given its remainder.

    ``quotient``, ``remainder`` and ``divisor`` are magnitudes; ``negative``
    is the sign of the exact result.
    """
    if remainder == 0:
        return quotient
    if mode is RoundingMode.DOWN:
        return quotient
    if mode is RoundingMode.UP:
        return quotient + 1
    if mode is RoundingMode.CEILING:
        return quotient if negative else quotient + 1
    if mode is RoundingMode.FLOOR:
        return quotient + 1 if negative else quotient
    if mode is RoundingMode.ZERO_FIVE_UP:
        return quotient + 1 if quotient % 10 in (0, 5) else quotient
    twice = 2 * remainder
    if twice > divisor:
        return quotient + 1
    if twice < divisor:
        return quotient
    if mode is RoundingMode.HALF_UP:
        return quotient + 1
    if mode is RoundingMode.HALF_DOWN:
        return quotient
    return quotient + 1 if quotient % 2 else quotient


def divide_to_scale(dividend: Number, divisor: Number, scale: int, rounding_mode: Any = None) -> Decimal:
    """
    ``dividend / divisor`` with exactly ``scale`` fractional digits.

    Computed on integers so the result is rounded once, whatever the size of
    the operands.
    """
    check_integer(scale, "scale")
    mode = RoundingMode.parse(rounding_mode) if rounding_mode is not None else get_settings().DEFAULT_ROUNDING_MODE
    a = Decimal(dividend).as_tuple()
    b = Decimal(divisor).as_tuple()
    a_int = int("".join(map(str, a.digits)) or "0")
    b_int = int("".join(map(str, b.digits)) or "0")
    check_argument(b_int != 0, "expected divisor != 0 but actual %s", divisor)

    # dividend / divisor * 10**scale == a_int / b_int * 10**shift
    shift = a.exponent - b.exponent + scale
    if shift >= 0:
        numerator, denominator = a_int * 10 ** shift, b_int
    else:
        numerator, denominator = a_int, b_int * 10 ** (-shift)

    negative = bool(a.sign) != bool(b.sign) and a_int != 0
    quotient, remainder = divmod(numerator, denominator)
    quotient = _round_quotient(quotient, remainder, denominator, negative, mode)
    return Decimal((1 if negative and quotient else 0, tuple(int(d) for d in str(quotient)), -scale))


def divide(
    dividend: Number,
    divisor: Number,
    *,
    scale: Optional[int] = None,
    precision: Optional[int] = None,
    rounding_mode: Any = None,
) -> Decimal:
    """
    Divide under an explicit rounding policy.

    Args:
        dividend: Integer or Decimal dividend
        divisor: Non-zero integer or Decimal divisor
        scale: Fractional digits of the result (excludes ``precision``)
        precision: Significant digits of the result; defaults to
            ``DIVISION_PRECISION`` when neither policy is given
        rounding_mode: Defaults to ``DEFAULT_ROUNDING_MODE``

    Raises:
        InvalidArgumentError: divisor is zero, or both policies are given
    """
    require_not_none(dividend, "dividend")
    require_not_none(divisor, "divisor")
    check_argument(divisor != 0, "expected divisor != 0 but actual %s", divisor)
    check_argument(
        scale is None or precision is None,
        "expected either scale or precision but actual scale=%s and precision=%s",
        scale,
        precision,
    )
    if scale is not None:
        return divide_to_scale(dividend, divisor, scale, rounding_mode)
    if precision is None:
        precision = get_settings().DIVISION_PRECISION
    return context_for(precision, rounding_mode).divide(Decimal(dividend), Decimal(divisor))
