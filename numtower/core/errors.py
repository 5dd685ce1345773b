"""
Library exceptions and precondition helpers.

Every failure is raised synchronously at the point of the illegal call and
carries a message of the form ``expected <precondition> but actual <value>``.
"""

from typing import Any, Dict, Optional


class NumTowerError(Exception):
    """Base exception for numtower errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class NotNullViolationError(NumTowerError, TypeError):
    """Raised when a mandatory argument is None"""

    def __init__(self, parameter: str, message: Optional[str] = None):
        super().__init__(
            message=message or f"{parameter} must not be None",
            details={"parameter": parameter},
        )
        self.parameter = parameter


class InvalidArgumentError(NumTowerError, ValueError):
    """Raised when an argument is well-typed but illegal for the operation"""


class IllegalStateError(NumTowerError, ArithmeticError):
    """Raised when the receiver is in a state that forbids the operation"""


class MatrixNotSquareError(IllegalStateError):
    """Raised when a square matrix is required"""

    def __init__(self, row_size: int, column_size: int):
        super().__init__(
            message=f"expected square matrix but actual {row_size} x {column_size}",
            details={"row_size": row_size, "column_size": column_size},
        )


def _format(template: str, args: tuple) -> str:
    return template % args if args else template


def require_not_none(value: Any, name: str) -> Any:
    """Return ``value`` or raise :class:`NotNullViolationError` naming ``name``."""
    if value is None:
        raise NotNullViolationError(name)
    return value


def check_argument(condition: bool, template: str, *args: Any) -> None:
    """
    Raise :class:`InvalidArgumentError` unless ``condition`` holds.

    Example:
        >>> check_argument(size > 0, "expected size > 0 but actual %s", size)
    """
    if not condition:
        raise InvalidArgumentError(_format(template, args))


def check_state(condition: bool, template: str, *args: Any) -> None:
    """Raise :class:`IllegalStateError` unless ``condition`` holds."""
    if not condition:
        raise IllegalStateError(_format(template, args))


def check_integer(value: Any, name: str) -> int:
    """Require a plain int (bools are rejected)."""
    require_not_none(value, name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"expected {name} to be an integer but actual {value!r}",
            details={"parameter": name, "type": type(value).__name__},
        )
    return value


def check_index(index: Any, size: int, name: str = "index") -> int:
    """Require ``index`` to be an int in ``[1, size]``."""
    check_integer(index, name)
    check_argument(1 <= index <= size, "expected %s in [1, %s] but actual %s", name, size, index)
    return index
