"""Tests for BigIntegerVector, including the algebraic and norm axioms."""

from decimal import Decimal

import numpy as np
import pytest

from numtower.core.errors import InvalidArgumentError, NotNullViolationError
from numtower.linear import BigDecimalVector, BigIntegerMatrix, BigIntegerVector, zero_vector


@pytest.fixture
def random_vector(random_int):
    def _vector(size: int = 4, bound: int = 50) -> BigIntegerVector:
        return BigIntegerVector([random_int(bound) for _ in range(size)])
    return _vector


class TestBigIntegerVectorAccessors:
    """Test the read-only accessors."""

    def test_size_elements_entries(self):
        """Test size, elements and the index mapping."""
        vector = BigIntegerVector.of(4, 5, 6)
        assert vector.size == 3
        assert len(vector) == 3
        assert vector.elements == (4, 5, 6)
        assert dict(vector.entries) == {1: 4, 2: 5, 3: 6}
        assert list(vector) == [4, 5, 6]

    def test_entries_are_read_only(self):
        """Test the entries mapping cannot be modified."""
        with pytest.raises(TypeError):
            BigIntegerVector.of(1).entries[1] = 2

    def test_one_based_access(self):
        """Test element and [] are 1-based and bounds-checked."""
        vector = BigIntegerVector.of(4, 5, 6)
        assert vector.element(1) == 4
        assert vector[3] == 6
        with pytest.raises(InvalidArgumentError, match=r"expected index in \[1, 3\] but actual 0"):
            vector.element(0)
        with pytest.raises(InvalidArgumentError, match=r"expected index in \[1, 3\] but actual 4"):
            vector[4]

    def test_to_numpy(self):
        """Test the object array keeps the exact ints."""
        big = 10 ** 40
        array = BigIntegerVector.of(big, -1).to_numpy()
        assert array.dtype == object
        assert array[0] == big
        assert np.dot(array, array) == big * big + 1

    def test_equality_and_hash(self):
        """Test value equality within one vector type."""
        assert BigIntegerVector.of(1, 2) == BigIntegerVector.of(1, 2)
        assert BigIntegerVector.of(1, 2) != BigIntegerVector.of(2, 1)
        assert BigIntegerVector.of(1, 2) != BigDecimalVector.of(1, 2)
        assert len({BigIntegerVector.of(1, 2), BigIntegerVector.of(1, 2)}) == 1
        assert repr(BigIntegerVector.of(1, 2)) == "BigIntegerVector([1, 2])"


class TestBigIntegerVectorArithmetic:
    """Test arithmetic operations."""

    def test_add_subtract_negate(self):
        """Test elementwise operations."""
        a, b = BigIntegerVector.of(1, 2, 3), BigIntegerVector.of(10, 20, 30)
        assert a.add(b) == BigIntegerVector.of(11, 22, 33)
        assert b.subtract(a) == BigIntegerVector.of(9, 18, 27)
        assert a.negate() == BigIntegerVector.of(-1, -2, -3)
        assert a + b == b + a
        assert -a == a.negate()
        assert b - a == b.subtract(a)

    def test_size_mismatch_reports_both_sizes(self):
        """Test pairwise operations require equal sizes."""
        a, b = BigIntegerVector.of(1, 2), BigIntegerVector.of(1, 2, 3)
        for operation in (a.add, a.subtract, a.dot_product, a.taxicab_distance, a.euclidean_distance,
                          a.max_distance, a.euclidean_distance_pow2):
            with pytest.raises(InvalidArgumentError, match="expected equal sizes but actual 2 != 3"):
                operation(b)

    def test_none_operands(self):
        """Test None operands name the parameter."""
        vector = BigIntegerVector.of(1)
        with pytest.raises(NotNullViolationError, match="summand"):
            vector.add(None)
        with pytest.raises(NotNullViolationError, match="subtrahend"):
            vector.subtract(None)
        with pytest.raises(NotNullViolationError, match="scalar"):
            vector.scalar_multiply(None)

    def test_foreign_vector_type_rejected(self):
        """Test vectors of another scalar type are rejected."""
        with pytest.raises(InvalidArgumentError, match="BigDecimalVector"):
            BigIntegerVector.of(1).add(BigDecimalVector.of(1))

    def test_scalar_multiply(self):
        """Test scalar multiplication and its operators."""
        vector = BigIntegerVector.of(1, -2)
        assert vector.scalar_multiply(3) == BigIntegerVector.of(3, -6)
        assert 3 * vector == vector * 3 == BigIntegerVector.of(3, -6)
        with pytest.raises(InvalidArgumentError):
            vector.scalar_multiply(Decimal("0.5"))

    def test_dot_product_and_orthogonality(self):
        """Test the dot product and the orthogonality predicate."""
        a, b = BigIntegerVector.of(1, 2, 3), BigIntegerVector.of(4, -5, 6)
        assert a.dot_product(b) == 12
        assert a @ b == 12
        assert BigIntegerVector.of(1, 1).orthogonal_to(BigIntegerVector.of(1, -1))
        assert not a.orthogonal_to(b)

    def test_dyadic_product(self):
        """Test the outer product is an integer matrix."""
        result = BigIntegerVector.of(1, 2).dyadic_product(BigIntegerVector.of(3, 4))
        assert result == BigIntegerMatrix([[3, 4], [6, 8]])


class TestBigIntegerVectorNorms:
    """Test norms and distances."""

    def test_norm_values(self):
        """Test each norm on [3, -4]."""
        vector = BigIntegerVector.of(3, -4)
        assert vector.taxicab_norm() == 7
        assert isinstance(vector.taxicab_norm(), int)
        assert vector.euclidean_norm_pow2() == 25
        assert vector.euclidean_norm() == 5
        assert vector.max_norm() == 4

    def test_irrational_euclidean_norm(self):
        """Test sqrt(2) under the norm's rounding policy."""
        vector = BigIntegerVector.of(1, 1)
        assert vector.euclidean_norm() == Decimal("1.4142135624")
        assert vector.euclidean_norm(scale=3, rounding_mode="DOWN") == Decimal("1.414")

    def test_distances(self):
        """Test distances are norms of the difference."""
        a, b = BigIntegerVector.of(1, 2), BigIntegerVector.of(4, 6)
        assert a.taxicab_distance(b) == 7
        assert a.euclidean_distance_pow2(b) == 25
        assert a.euclidean_distance(b) == 5
        assert a.max_distance(b) == 4

    def test_zero_vector_norms(self):
        """Test the norms of the zero vector are zero."""
        zero = zero_vector(BigIntegerVector, 3)
        assert zero.taxicab_norm() == 0
        assert zero.euclidean_norm() == 0
        assert zero.max_norm() == 0


class TestBigIntegerVectorLaws:
    """Test algebraic laws and norm axioms on random vectors."""

    def test_addition_laws(self, random_vector):
        """Test commutativity, associativity, identity and inverse."""
        zero = zero_vector(BigIntegerVector, 4)
        for _ in range(30):
            v, w, u = random_vector(), random_vector(), random_vector()
            assert v.add(w) == w.add(v)
            assert v.add(w).add(u) == v.add(w.add(u))
            assert v.add(zero) == v
            assert v.subtract(v) == zero
            assert v.add(w).negate() == v.negate().add(w.negate())

    def test_scalar_laws(self, random_vector, random_int):
        """Test associativity and distributivity of scalar multiplication."""
        for _ in range(30):
            v, w = random_vector(), random_vector()
            c, d = random_int(), random_int()
            assert v.scalar_multiply(c * d) == v.scalar_multiply(d).scalar_multiply(c)
            assert v.add(w).scalar_multiply(c) == v.scalar_multiply(c).add(w.scalar_multiply(c))
            assert v.scalar_multiply(c + d) == v.scalar_multiply(c).add(v.scalar_multiply(d))

    @pytest.mark.parametrize("norm", ["taxicab_norm", "max_norm", "euclidean_norm_pow2"])
    def test_exact_norm_axioms(self, random_vector, random_int, norm):
        """Test non-negativity and homogeneity of the exact norms."""
        for _ in range(30):
            v, w = random_vector(), random_vector()
            c = random_int(20)
            assert getattr(v, norm)() >= 0
            if norm == "euclidean_norm_pow2":
                assert v.scalar_multiply(c).euclidean_norm_pow2() == c * c * v.euclidean_norm_pow2()
            else:
                assert getattr(v.scalar_multiply(c), norm)() == abs(c) * getattr(v, norm)()
                assert getattr(v.add(w), norm)() <= getattr(v, norm)() + getattr(w, norm)()

    def test_euclidean_norm_axioms(self, random_vector, random_int):
        """Test the approximate norm within its rounding window."""
        tolerance = Decimal("1E-9")
        for _ in range(30):
            v, w = random_vector(), random_vector()
            c = random_int(20)
            assert v.euclidean_norm() >= 0
            scaled = v.scalar_multiply(c).euclidean_norm()
            assert abs(scaled - abs(c) * v.euclidean_norm()) <= abs(c) * tolerance
            assert v.add(w).euclidean_norm() <= v.euclidean_norm() + w.euclidean_norm() + tolerance

    def test_distance_axioms(self, random_vector):
        """Test identity, symmetry and the triangle inequality."""
        for _ in range(30):
            v, w, u = random_vector(), random_vector(), random_vector()
            assert v.taxicab_distance(v) == 0
            assert v.euclidean_distance(v) == 0
            assert v.max_distance(w) == w.max_distance(v)
            assert v.euclidean_distance(w) == w.euclidean_distance(v)
            assert v.taxicab_distance(u) <= v.taxicab_distance(w) + w.taxicab_distance(u)
            assert v.max_distance(u) <= v.max_distance(w) + w.max_distance(u)
            assert v.euclidean_distance(u) <= v.euclidean_distance(w) + w.euclidean_distance(u) + Decimal("1E-9")
