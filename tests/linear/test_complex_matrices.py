"""Tests for matrices over integer and decimal complex numbers."""

from decimal import Context, Decimal

import pytest

from numtower.core.errors import InvalidArgumentError
from numtower.linear import (
    RealComplexNumberMatrix,
    RealComplexNumberVector,
    SimpleComplexNumberMatrix,
    SimpleComplexNumberVector,
    identity_matrix,
)
from numtower.number import RealComplexNumber, SimpleComplexNumber

I = SimpleComplexNumber.IMAGINARY


class TestSimpleComplexNumberMatrix:
    """Test Gaussian integer matrices."""

    def test_multiply(self):
        """Test the product of complex matrices."""
        a = SimpleComplexNumberMatrix([[I, 1], [0, I]])
        assert a.multiply(a) == SimpleComplexNumberMatrix([[-1, SimpleComplexNumber(0, 2)], [0, -1]])

    def test_multiply_vector(self):
        """Test the complex matrix-vector product."""
        matrix = SimpleComplexNumberMatrix([[I, 0], [0, 1]])
        assert matrix @ SimpleComplexNumberVector.of(I, 2) == SimpleComplexNumberVector.of(-1, 2)

    def test_invertible_units(self):
        """Test determinants 1, -1, i and -i make the matrix invertible."""
        assert SimpleComplexNumberMatrix([[I, 0], [0, 1]]).invertible()
        assert SimpleComplexNumberMatrix([[I, 0], [0, I]]).invertible()
        assert SimpleComplexNumberMatrix([[I.negate(), 0], [0, 1]]).invertible()
        assert not SimpleComplexNumberMatrix([[SimpleComplexNumber(1, 1), 0], [0, 1]]).invertible()
        assert not SimpleComplexNumberMatrix([[2, 0], [0, 1]]).invertible()

    def test_symmetric_is_not_hermitian(self):
        """Test symmetry compares elements without conjugation."""
        assert SimpleComplexNumberMatrix([[1, I], [I, 1]]).symmetric()
        assert not SimpleComplexNumberMatrix([[1, I], [I.negate(), 1]]).symmetric()
        assert SimpleComplexNumberMatrix([[0, I], [I.negate(), 0]]).skew_symmetric()

    def test_norms(self):
        """Test norms use complex absolute values."""
        matrix = SimpleComplexNumberMatrix([[SimpleComplexNumber(3, 4), 0], [0, SimpleComplexNumber(0, 12)]])
        assert matrix.frobenius_norm_pow2() == 169
        assert matrix.frobenius_norm() == 13
        assert matrix.max_norm() == 12
        assert matrix.max_abs_row_sum_norm() == 12
        assert matrix.max_abs_column_sum_norm() == 12

    def test_trace_and_identity(self):
        """Test the trace and identity predicate."""
        assert SimpleComplexNumberMatrix([[I, 5], [7, I]]).trace() == SimpleComplexNumber(0, 2)
        assert identity_matrix(SimpleComplexNumberMatrix, 3).identity()

    def test_complex_matrix_embedding(self, random_simple_complex):
        """Test 2 x 2 real matrices of complex numbers multiply like the numbers."""
        for _ in range(10):
            a, b = random_simple_complex(), random_simple_complex()
            assert a.matrix() @ b.matrix() == a.multiply(b).matrix()


class TestRealComplexNumberMatrix:
    """Test decimal complex matrices."""

    def test_add_and_multiply(self):
        """Test exact arithmetic over decimal complex numbers."""
        a = RealComplexNumberMatrix([[RealComplexNumber("0.5", 1), 0], [0, 1]])
        b = RealComplexNumberMatrix([[2, 0], [0, RealComplexNumber(0, "0.5")]])
        assert a.add(b) == RealComplexNumberMatrix([[RealComplexNumber("2.5", 1), 0], [0, RealComplexNumber(1, "0.5")]])
        assert a.multiply(b) == RealComplexNumberMatrix([[RealComplexNumber(1, 2), 0], [0, RealComplexNumber(0, "0.5")]])

    def test_determinant(self):
        """Test the determinant of a 3 x 3 decimal complex matrix."""
        matrix = RealComplexNumberMatrix(
            [[RealComplexNumber(0, 1), 0, 0], [5, 2, 0], [1, 1, RealComplexNumber("0.5", 0)]]
        )
        assert matrix.determinant() == RealComplexNumber(0, 1)
        assert matrix.leibniz_formula() == matrix.laplace_expansion() == RealComplexNumber(0, 1)

    def test_invertible_units(self):
        """Test only determinants 1 and -1 count as invertible."""
        assert RealComplexNumberMatrix([[1, 0], [0, -1]]).invertible()
        assert not RealComplexNumberMatrix([[RealComplexNumber(0, 1), 0], [0, 1]]).invertible()
        assert RealComplexNumberMatrix([[Decimal("0.5"), 0], [0, 2]]).invertible()
        assert not identity_matrix(RealComplexNumberMatrix, 2).scalar_multiply(2).invertible()

    def test_multiply_vector_and_norm(self):
        """Test matrix-vector products and the Frobenius norm."""
        matrix = RealComplexNumberMatrix([[RealComplexNumber("0.6", "0.8")]])
        assert matrix @ RealComplexNumberVector.of(2) == RealComplexNumberVector.of(RealComplexNumber("1.2", "1.6"))
        assert matrix.frobenius_norm() == 1

    def test_decimal_context(self):
        """Test determinants and products round both parts under a decimal context."""
        context = Context(prec=3)
        matrix = RealComplexNumberMatrix([[RealComplexNumber("1.234", 1), 0], [0, RealComplexNumber(1, "0.5")]])
        assert matrix.determinant() == RealComplexNumber("0.734", "1.617")
        assert matrix.determinant(context) == RealComplexNumber("0.73", "1.62")
        assert matrix.trace(context) == RealComplexNumber("2.23", "1.5")
        assert matrix.multiply(matrix, context).element(1, 1) == RealComplexNumber("0.523", "2.47")
        assert matrix.frobenius_norm_pow2(context) == Decimal("3.77")
        with pytest.raises(InvalidArgumentError, match="expected no decimal_context for SimpleComplexNumber elements"):
            SimpleComplexNumberMatrix([[1, I], [I, 1]]).determinant(context)
