"""
Rounding policy of square-root approximation.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.config import get_settings
from ..core.errors import check_argument, check_integer
from ..core.rounding import RoundingMode
from ..number.decimals import to_decimal


class SquareRootContext(BaseModel):
    """
    Precision, scale and rounding mode of a square-root computation.

    ``precision`` bounds the difference of successive Heron iterates and must
    lie strictly inside (0, 1). ``scale`` is the number of fractional digits of
    the result. Unset values fall back to the ``SQRT_*`` settings.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    precision: Decimal = Field(description="Abort criterion, in (0, 1)")
    scale: int = Field(description="Fractional digits of the result, >= 0")
    rounding_mode: RoundingMode = Field(description="Rounding of the result")
    max_iterations: int = Field(description="Upper bound on Heron iterations")

    def __init__(
        self,
        precision: Any = None,
        scale: Optional[int] = None,
        rounding_mode: Any = None,
        max_iterations: Optional[int] = None,
        **kwargs
    ):
        settings = get_settings()
        precision = settings.SQRT_PRECISION if precision is None else to_decimal(precision, "precision")
        check_argument(
            Decimal(0) < precision < Decimal(1),
            "expected precision in (0, 1) but actual %s",
            precision,
        )
        scale = settings.SQRT_SCALE if scale is None else check_integer(scale, "scale")
        check_argument(scale >= 0, "expected scale >= 0 but actual %s", scale)
        rounding_mode = (
            settings.SQRT_ROUNDING_MODE if rounding_mode is None else RoundingMode.parse(rounding_mode)
        )
        max_iterations = (
            settings.SQRT_MAX_ITERATIONS
            if max_iterations is None
            else check_integer(max_iterations, "max_iterations")
        )
        check_argument(max_iterations > 0, "expected max iterations > 0 but actual %s", max_iterations)
        super().__init__(
            precision=precision,
            scale=scale,
            rounding_mode=rounding_mode,
            max_iterations=max_iterations,
            **kwargs
        )

    @property
    def precision_digits(self) -> int:
        """Fractional digits needed to represent ``precision``."""
        return max(0, -self.precision.as_tuple().exponent)

    def derive(
        self,
        precision: Any = None,
        scale: Optional[int] = None,
        rounding_mode: Any = None,
        max_iterations: Optional[int] = None,
    ) -> SquareRootContext:
        """Copy with the given values replaced, validated like the constructor."""
        return SquareRootContext(
            self.precision if precision is None else precision,
            self.scale if scale is None else scale,
            self.rounding_mode if rounding_mode is None else rounding_mode,
            self.max_iterations if max_iterations is None else max_iterations,
        )

    def __repr__(self) -> str:
        return (
            f"SquareRootContext(precision={self.precision}, scale={self.scale}, "
            f"rounding_mode={self.rounding_mode.name}, max_iterations={self.max_iterations})"
        )
