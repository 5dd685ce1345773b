"""Tests for BigDecimalMatrix."""

from decimal import Context, Decimal

import pytest

from numtower.core.errors import InvalidArgumentError
from numtower.linear import BigDecimalMatrix, BigDecimalVector, BigIntegerMatrix, identity_matrix
from numtower.number import decimals


@pytest.fixture
def random_matrix(random_rows, random_decimal):
    def _matrix(row_size: int = 3, column_size: int = 3) -> BigDecimalMatrix:
        return BigDecimalMatrix(random_rows(row_size, column_size, lambda: random_decimal(10, 3)))
    return _matrix


class TestBigDecimalMatrix:
    """Test exact decimal matrices."""

    def test_coercion(self):
        """Test ints become Decimals and floats are rejected."""
        matrix = BigDecimalMatrix([[1, Decimal("0.5")]])
        assert matrix.elements == (Decimal(1), Decimal("0.5"))
        with pytest.raises(InvalidArgumentError, match=r"element\[1, 2\]"):
            BigDecimalMatrix([[1, 0.5]])

    def test_multiply_is_exact(self):
        """Test products keep all digits."""
        a = BigDecimalMatrix([[Decimal("1.000000000000000000000000000001"), 0], [0, 1]])
        assert a.multiply(a).element(1, 1) == Decimal("1.000000000000000000000000000002000000000000000000000000000001")

    def test_multiply_vector(self):
        """Test the matrix-vector product over decimals."""
        matrix = BigDecimalMatrix([[Decimal("0.5"), 0], [0, 2]])
        assert matrix @ BigDecimalVector.of(2, Decimal("0.25")) == BigDecimalVector.of(1, Decimal("0.5"))

    def test_invertible_means_non_zero_determinant(self):
        """Test any non-zero determinant makes a decimal matrix invertible."""
        assert BigDecimalMatrix([[2, 0], [0, 1]]).invertible()
        assert BigDecimalMatrix([[Decimal("0.001")]]).invertible()
        assert not BigDecimalMatrix([[1, 2], [2, 4]]).invertible()
        assert not BigDecimalMatrix([[1, 2]]).invertible()

    def test_identity_with_trailing_zeros(self):
        """Test one and zero are compared by value."""
        assert BigDecimalMatrix([[Decimal("1.00"), Decimal("0.0")], [Decimal(0), Decimal("1.0")]]).identity()
        assert identity_matrix(BigDecimalMatrix, 3).identity()

    def test_norms(self):
        """Test decimal matrix norms."""
        matrix = BigDecimalMatrix([[Decimal("0.3"), Decimal("-0.4")], [0, Decimal("1.2")]])
        assert matrix.max_abs_column_sum_norm() == Decimal("1.6")
        assert matrix.max_abs_row_sum_norm() == Decimal("1.2")
        assert matrix.max_norm() == Decimal("1.2")
        assert matrix.frobenius_norm_pow2() == Decimal("1.69")
        assert matrix.frobenius_norm() == Decimal("1.3")

    def test_symmetry(self):
        """Test symmetry with value-equal decimals."""
        assert BigDecimalMatrix([[1, Decimal("0.50")], [Decimal("0.5"), 2]]).symmetric()
        assert BigDecimalMatrix([[0, Decimal("0.5")], [Decimal("-0.5"), 0]]).skew_symmetric()

    def test_laws(self, random_matrix, random_decimal):
        """Test ring laws hold exactly."""
        one = identity_matrix(BigDecimalMatrix, 3)
        for _ in range(10):
            a, b, c = random_matrix(), random_matrix(), random_matrix()
            k = random_decimal(5, 2)
            assert a.add(b) == b.add(a)
            assert a.multiply(b).multiply(c) == a.multiply(b.multiply(c))
            assert a.multiply(b.add(c)) == a.multiply(b).add(a.multiply(c))
            assert a.multiply(one) == a
            assert a.scalar_multiply(k).determinant() == decimals.multiply(decimals.power(k, 3), a.determinant())


class TestBigDecimalMatrixDecimalContext:
    """Test operations rounded step by step under a decimal context."""

    @pytest.fixture
    def context(self) -> Context:
        return decimals.context_for(3, "HALF_UP")

    def test_elementwise_operations(self, context):
        """Test add, subtract, negate and scalar_multiply round every cell."""
        a = BigDecimalMatrix([[Decimal("1.234"), Decimal("-5.678")]])
        b = BigDecimalMatrix([[Decimal("0.0005"), Decimal("0.0001")]])
        assert a.add(b, context) == BigDecimalMatrix([[Decimal("1.23"), Decimal("-5.68")]])
        assert a.subtract(b, context) == BigDecimalMatrix([[Decimal("1.23"), Decimal("-5.68")]])
        assert a.negate(context) == BigDecimalMatrix([[Decimal("-1.23"), Decimal("5.68")]])
        assert a.scalar_multiply(3, context) == BigDecimalMatrix([[Decimal("3.70"), Decimal("-17.0")]])
        assert a.negate() == BigDecimalMatrix([[Decimal("-1.234"), Decimal("5.678")]])

    def test_products(self, context):
        """Test matrix and matrix-vector products round each product and partial sum."""
        a = BigDecimalMatrix([[Decimal("1.234"), 1], [0, 1]])
        assert a.multiply(a, context).element(1, 1) == Decimal("1.52")
        assert a.multiply(a).element(1, 1) == Decimal("1.522756")
        assert a.multiply(a, context).element(1, 2) == Decimal("2.23")
        vector = BigDecimalVector.of(Decimal("1.234"), Decimal("0.001"))
        assert a.multiply_vector(vector, context) == BigDecimalVector.of(Decimal("1.52"), Decimal("0.001"))

    def test_trace_rounds_each_partial_sum(self, context):
        """Test the trace is accumulated under the context."""
        matrix = BigDecimalMatrix([[Decimal("1.234"), 0], [0, Decimal("1.001")]])
        assert matrix.trace() == Decimal("2.235")
        assert matrix.trace(context) == Decimal("2.23")

    def test_determinant_closed_forms(self, context):
        """Test the 2 x 2 form and the rule of Sarrus under a context."""
        two = BigDecimalMatrix([[Decimal("1.234"), Decimal("2.345")], [Decimal("3.456"), Decimal("4.567")]])
        assert two.determinant() == Decimal("-2.468642")
        assert two.determinant(context) == Decimal("-2.46")
        three = BigDecimalMatrix([[Decimal("1.5"), 2, 0], [0, Decimal("1.5"), 2], [2, 0, Decimal("1.5")]])
        assert three.determinant() == Decimal("11.375")
        assert three.determinant(context) == three.rule_of_sarrus(context) == Decimal("11.4")
        assert three.laplace_expansion(context) == Decimal("11.4")

    def test_determinant_by_leibniz(self, context):
        """Test larger determinants round through the Leibniz expansion."""
        matrix = BigDecimalMatrix(
            [[Decimal("1.5"), 1, 0, 0], [0, Decimal("1.5"), 1, 0], [0, 0, Decimal("1.5"), 1], [1, 0, 0, Decimal("1.5")]]
        )
        assert matrix.determinant() == Decimal("4.0625")
        assert matrix.determinant(context) == matrix.leibniz_formula(context) == Decimal("4.07")

    def test_triangular_determinant(self, context):
        """Test the diagonal product is rounded after each factor."""
        matrix = BigDecimalMatrix([[Decimal("1.5"), 7], [0, Decimal("2.25")]])
        assert matrix.determinant() == Decimal("3.375")
        assert matrix.determinant(context) == Decimal("3.38")

    def test_frobenius_norm_pow2(self, context):
        """Test squares and their sum are rounded under the context."""
        matrix = BigDecimalMatrix([[Decimal("1.234"), Decimal("2.345")]])
        assert matrix.frobenius_norm_pow2() == Decimal("7.021781")
        assert matrix.frobenius_norm_pow2(context) == Decimal("7.02")

    def test_rejected_contexts(self, context):
        """Test integer matrices take no context and other objects are not contexts."""
        with pytest.raises(InvalidArgumentError, match="expected no decimal_context for int elements"):
            BigIntegerMatrix([[1, 2], [3, 4]]).determinant(context)
        with pytest.raises(InvalidArgumentError, match="expected decimal_context of type Context but actual 3"):
            BigDecimalMatrix([[1]]).trace(3)
        assert BigIntegerMatrix([[1, 2], [3, 4]]).determinant(None) == -2
