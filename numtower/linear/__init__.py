"""
Vectors and matrices over the scalar tower.
"""

from .scalars import (
    DECIMAL,
    INTEGER,
    REAL_COMPLEX,
    SIMPLE_COMPLEX,
    DecimalArithmetic,
    IntegerArithmetic,
    RealComplexArithmetic,
    ScalarArithmetic,
    SimpleComplexArithmetic,
)
from .vector import (
    AbstractVector,
    BigDecimalVector,
    BigIntegerVector,
    RealComplexNumberVector,
    SimpleComplexNumberVector,
    VectorBuilder,
)
from .matrix import (
    AbstractMatrix,
    BigDecimalMatrix,
    BigIntegerMatrix,
    MatrixBuilder,
    RealComplexNumberMatrix,
    SimpleComplexNumberMatrix,
)
from .factories import identity_matrix, zero_matrix, zero_vector

__all__ = [
    "DECIMAL",
    "INTEGER",
    "REAL_COMPLEX",
    "SIMPLE_COMPLEX",
    "AbstractMatrix",
    "AbstractVector",
    "BigDecimalMatrix",
    "BigDecimalVector",
    "BigIntegerMatrix",
    "BigIntegerVector",
    "DecimalArithmetic",
    "IntegerArithmetic",
    "MatrixBuilder",
    "RealComplexArithmetic",
    "RealComplexNumberMatrix",
    "RealComplexNumberVector",
    "ScalarArithmetic",
    "SimpleComplexArithmetic",
    "SimpleComplexNumberMatrix",
    "SimpleComplexNumberVector",
    "VectorBuilder",
    "identity_matrix",
    "zero_matrix",
    "zero_vector",
]
