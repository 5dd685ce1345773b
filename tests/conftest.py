"""
Shared pytest fixtures for the numtower test suite.

This module provides:
- Seeded generators for random scalars, vectors and matrices
- Settings isolation (the cached settings are rebuilt for every test)
- Helpers for comparing approximate decimal results
"""

import random
from decimal import Decimal
from typing import Callable

import pytest

from numtower.core.config import get_settings
from numtower.number import Fraction, RealComplexNumber, SimpleComplexNumber


@pytest.fixture(autouse=True)
def fresh_settings():
    """Rebuild cached settings before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def override_settings(monkeypatch):
    """Set NUMTOWER_* environment variables and rebuild settings."""
    def _override(**values: object):
        for key, value in values.items():
            monkeypatch.setenv(f"NUMTOWER_{key}", str(value))
        get_settings.cache_clear()
        return get_settings()
    return _override


@pytest.fixture
def rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(20240611)


@pytest.fixture
def random_int(rng) -> Callable[..., int]:
    def _int(bound: int = 100) -> int:
        return rng.randint(-bound, bound)
    return _int


@pytest.fixture
def random_decimal(rng) -> Callable[..., Decimal]:
    """Decimals with a fixed number of fractional digits."""
    def _decimal(bound: int = 100, scale: int = 2) -> Decimal:
        unscaled = rng.randint(-bound * 10 ** scale, bound * 10 ** scale)
        return Decimal(unscaled).scaleb(-scale)
    return _decimal


@pytest.fixture
def random_fraction(rng) -> Callable[..., Fraction]:
    def _fraction(bound: int = 50) -> Fraction:
        denominator = 0
        while denominator == 0:
            denominator = rng.randint(-bound, bound)
        return Fraction(rng.randint(-bound, bound), denominator)
    return _fraction


@pytest.fixture
def random_simple_complex(random_int) -> Callable[..., SimpleComplexNumber]:
    def _complex(bound: int = 20) -> SimpleComplexNumber:
        return SimpleComplexNumber(random_int(bound), random_int(bound))
    return _complex


@pytest.fixture
def random_real_complex(random_decimal) -> Callable[..., RealComplexNumber]:
    def _complex(bound: int = 20, scale: int = 2) -> RealComplexNumber:
        return RealComplexNumber(random_decimal(bound, scale), random_decimal(bound, scale))
    return _complex


@pytest.fixture
def random_rows(random_int) -> Callable[..., list]:
    """Nested lists of random ints, or of values from ``generate``."""
    def _rows(row_size: int, column_size: int, generate: Callable[[], object] = None) -> list:
        generate = generate or random_int
        return [[generate() for _ in range(column_size)] for _ in range(row_size)]
    return _rows


@pytest.fixture
def assert_close():
    """Assert two decimals differ by at most ``tolerance``."""
    def _assert_close(actual: Decimal, expected: Decimal, tolerance: Decimal) -> None:
        difference = abs(Decimal(actual) - Decimal(expected))
        assert difference <= tolerance, f"{actual} differs from {expected} by {difference} > {tolerance}"
    return _assert_close

