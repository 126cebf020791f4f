"""
Core arithmetic kernels
"""

from .bigint import (
    BigInt,
    DivModResult,
    divmod_or_raise,
    try_divmod,
)
from .bigint import BigIntParseError, BigIntRangeError, DivisionByZero

__all__ = [
    "BigInt",
    "DivModResult",
    "divmod_or_raise",
    "try_divmod",
    "BigIntParseError",
    "BigIntRangeError",
    "DivisionByZero",
]
