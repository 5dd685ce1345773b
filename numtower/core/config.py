"""
Library configuration.

Centralized defaults for rounding policies, square-root approximation and
logging, overridable through ``NUMTOWER_`` environment variables or a
``.env`` file.
"""

from decimal import Decimal, InvalidOperation
from functools import lru_cache
from typing import Any, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .rounding import RoundingMode


class Settings(BaseSettings):
    """Library settings"""

    # Square root approximation
    SQRT_PRECISION: Decimal = Decimal("1E-10")
    SQRT_SCALE: int = 10
    SQRT_ROUNDING_MODE: RoundingMode = RoundingMode.HALF_UP
    SQRT_MAX_ITERATIONS: int = 1000

    # Decimal division and polar form
    DIVISION_PRECISION: int = 34  # significant digits
    DEFAULT_ROUNDING_MODE: RoundingMode = RoundingMode.HALF_UP
    POLAR_PRECISION: int = 100

    # Determinant
    LEIBNIZ_WARN_SIZE: int = 8  # n! terms, warn above this row count

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="NUMTOWER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("SQRT_PRECISION", mode="before")
    @classmethod
    def _parse_precision(cls, value: Any) -> Decimal:
        if isinstance(value, float):
            value = repr(value)
        try:
            precision = Decimal(value)
        except (InvalidOperation, TypeError, ValueError) as exc:
            raise ValueError(f"expected decimal precision but actual {value!r}") from exc
        if not Decimal(0) < precision < Decimal(1):
            raise ValueError(f"expected precision in (0, 1) but actual {precision}")
        return precision

    @field_validator("SQRT_ROUNDING_MODE", "DEFAULT_ROUNDING_MODE", mode="before")
    @classmethod
    def _parse_rounding_mode(cls, value: Any) -> RoundingMode:
        return RoundingMode.parse(value)

    @field_validator("SQRT_SCALE")
    @classmethod
    def _check_scale(cls, value: int) -> int:
        if value < 0:
            raise ValueError(f"expected scale >= 0 but actual {value}")
        return value

    @field_validator("SQRT_MAX_ITERATIONS", "DIVISION_PRECISION", "POLAR_PRECISION", "LEIBNIZ_WARN_SIZE")
    @classmethod
    def _check_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError(f"expected value > 0 but actual {value}")
        return value


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
