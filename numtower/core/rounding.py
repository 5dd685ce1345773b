"""
Rounding modes for decimal results.

Every operation that cannot be carried out exactly (division, square roots,
arguments of complex numbers) takes one of these modes.
"""

from __future__ import annotations

import decimal
from enum import Enum
from typing import Any

from .errors import InvalidArgumentError


class RoundingMode(str, Enum):
    """Rounding modes understood by :mod:`decimal`."""

    UP = decimal.ROUND_UP
    DOWN = decimal.ROUND_DOWN
    CEILING = decimal.ROUND_CEILING
    FLOOR = decimal.ROUND_FLOOR
    HALF_UP = decimal.ROUND_HALF_UP
    HALF_DOWN = decimal.ROUND_HALF_DOWN
    HALF_EVEN = decimal.ROUND_HALF_EVEN
    ZERO_FIVE_UP = decimal.ROUND_05UP

    @classmethod
    def parse(cls, value: Any) -> RoundingMode:
        """
        Resolve a rounding mode from an enum member, its name or a decimal constant.

        Examples:
            >>> RoundingMode.parse("HALF_EVEN")
            >>> RoundingMode.parse(decimal.ROUND_FLOOR)
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key in cls.__members__:
                return cls[key]
            for member in cls:
                if member.value == key:
                    return member
        raise InvalidArgumentError(
            f"expected rounding mode in {[m.name for m in cls]} but actual {value!r}",
            details={"rounding_mode": repr(value)},
        )
