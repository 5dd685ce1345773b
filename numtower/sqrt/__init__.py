"""
Square-root approximation shared by norms, distances and absolute values.
"""

from .context import SquareRootContext
from .calculator import (
    ScientificNotation,
    SquareRootCalculator,
    calculator_for,
    perfect_square,
    scientific_notation_for_sqrt,
    sqrt,
    sqrt_of_perfect_square,
)

__all__ = [
    "ScientificNotation",
    "SquareRootCalculator",
    "SquareRootContext",
    "calculator_for",
    "perfect_square",
    "scientific_notation_for_sqrt",
    "sqrt",
    "sqrt_of_perfect_square",
]
