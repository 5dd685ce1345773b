"""
Scalar tower: fractions, integer and decimal complex numbers, polar forms.
"""

from ..core.rounding import RoundingMode
from . import decimals
from .value import MathNumber
from .fraction import Fraction
from .polar import PolarForm
from .complex import RealComplexNumber, SimpleComplexNumber

__all__ = [
    "Fraction",
    "MathNumber",
    "PolarForm",
    "RealComplexNumber",
    "RoundingMode",
    "SimpleComplexNumber",
    "decimals",
]
