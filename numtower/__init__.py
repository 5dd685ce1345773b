"""
numtower: arbitrary-precision numeric tower and exact linear algebra.

Exact fractions, integer and decimal complex numbers, a Heron square-root
approximator with explicit rounding control, and immutable vectors and
matrices over those scalars.
"""

from .core import (
    IllegalStateError,
    InvalidArgumentError,
    MatrixNotSquareError,
    NotNullViolationError,
    NumTowerError,
    RoundingMode,
    get_settings,
    setup_logging,
)
from .number import Fraction, PolarForm, RealComplexNumber, SimpleComplexNumber
from .sqrt import SquareRootCalculator, SquareRootContext
from .linear import (
    BigDecimalMatrix,
    BigDecimalVector,
    BigIntegerMatrix,
    BigIntegerVector,
    RealComplexNumberMatrix,
    RealComplexNumberVector,
    SimpleComplexNumberMatrix,
    SimpleComplexNumberVector,
    identity_matrix,
    zero_matrix,
    zero_vector,
)

__version__ = "1.0.0"

__all__ = [
    "BigDecimalMatrix",
    "BigDecimalVector",
    "BigIntegerMatrix",
    "BigIntegerVector",
    "Fraction",
    "IllegalStateError",
    "InvalidArgumentError",
    "MatrixNotSquareError",
    "NotNullViolationError",
    "NumTowerError",
    "PolarForm",
    "RealComplexNumber",
    "RealComplexNumberMatrix",
    "RealComplexNumberVector",
    "RoundingMode",
    "SimpleComplexNumber",
    "SimpleComplexNumberMatrix",
    "SimpleComplexNumberVector",
    "SquareRootCalculator",
    "SquareRootContext",
    "get_settings",
    "identity_matrix",
    "setup_logging",
    "zero_matrix",
    "zero_vector",
]
