"""
Polar form of complex numbers.

Arctangents, sines and cosines are evaluated with sympy to the requested
number of significant digits plus guard digits, then rounded once.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

import sympy
from pydantic import BaseModel, ConfigDict, Field

from ..core.config import get_settings
from ..core.errors import require_not_none
from . import decimals

GUARD_DIGITS = 10


def to_rational(value: Decimal) -> sympy.Rational:
    """Exact sympy rational of a finite Decimal."""
    numerator, denominator = Decimal(value).as_integer_ratio()
    return sympy.Rational(numerator, denominator)


def evaluate(expression: Any, precision: Optional[int] = None, rounding_mode: Any = None) -> Decimal:
    """
    Numerically evaluate a sympy expression to ``precision`` significant digits.

    Args:
        expression: Real-valued sympy expression
        precision: Significant digits (default ``POLAR_PRECISION``)
        rounding_mode: Rounding of the last digit (default ``DEFAULT_ROUNDING_MODE``)
    """
    settings = get_settings()
    digits = settings.POLAR_PRECISION if precision is None else precision
    mode = settings.DEFAULT_ROUNDING_MODE if rounding_mode is None else rounding_mode
    value = sympy.N(expression, digits + GUARD_DIGITS)
    return decimals.round_to_precision(Decimal(str(value)), digits, mode)


def atan2(imaginary: Decimal, real: Decimal, precision: Optional[int] = None, rounding_mode: Any = None) -> Decimal:
    """Angle of ``real + imaginary*i`` in (-pi, pi]."""
    return evaluate(sympy.atan2(to_rational(imaginary), to_rational(real)), precision, rounding_mode)


class PolarForm(BaseModel):
    """
    Complex number as (radial, angular) with ``z = radial * (cos(angular) + i*sin(angular))``.

    Derived on demand by ``argument``/``polar_form``; never cached on the
    complex number.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    radial: Decimal = Field(description="Distance from the origin")
    angular: Decimal = Field(description="Angle in radians")

    def __init__(self, radial: Any, angular: Any, **kwargs):
        radial = decimals.to_decimal(require_not_none(radial, "radial"), "radial")
        angular = decimals.to_decimal(require_not_none(angular, "angular"), "angular")
        super().__init__(radial=radial, angular=angular, **kwargs)

    def complex_number(self, precision: Optional[int] = None, rounding_mode: Any = None):
        """
        Convert back to a RealComplexNumber.

        Args:
            precision: Significant digits of each part (default ``POLAR_PRECISION``)
            rounding_mode: Rounding of the last digit
        """
        from .complex import RealComplexNumber

        radial = to_rational(self.radial)
        angular = to_rational(self.angular)
        return RealComplexNumber(
            evaluate(radial * sympy.cos(angular), precision, rounding_mode),
            evaluate(radial * sympy.sin(angular), precision, rounding_mode),
        )

    def __repr__(self) -> str:
        return f"PolarForm({self.radial!r}, {self.angular!r})"
