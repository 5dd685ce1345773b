"""
Ambient infrastructure: settings, logging and error handling.
"""

from .errors import (
    IllegalStateError,
    InvalidArgumentError,
    MatrixNotSquareError,
    NotNullViolationError,
    NumTowerError,
)
from .rounding import RoundingMode
from .config import Settings, get_settings
from .logging import get_context_logger, get_logger, setup_logging

__all__ = [
    "IllegalStateError",
    "InvalidArgumentError",
    "MatrixNotSquareError",
    "NotNullViolationError",
    "NumTowerError",
    "RoundingMode",
    "Settings",
    "get_settings",
    "get_context_logger",
    "get_logger",
    "setup_logging",
]
