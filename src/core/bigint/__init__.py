"""`bigint`: arbitrary-precision signed integers in pure Python.

Values are sign + magnitude, the magnitude being base-2^32 words stored
least-significant first. The package provides:
- immutable, always-normalized `BigInt` values (frozen dataclass),
- truncating division (quotient toward zero, remainder follows the dividend),
- magnitude-only bitwise AND / OR and logical shifts,
- decimal text I/O.

Public API:
- `BigInt.parse(text) -> BigInt`, `str(value)`
- `try_divmod(a, b) -> DivModResult`
- `divmod_or_raise(a, b)` (raises `DivisionByZero`)
"""

from .errors import BigIntParseError, BigIntRangeError, DivisionByZero
from .integer import BigInt, DivModResult, divmod_or_raise, try_divmod
from .text import format_decimal, parse_decimal
from .words import WORD_BITS, WORD_MASK

__all__ = [
    "BigInt",
    "DivModResult",
    "try_divmod",
    "divmod_or_raise",
    "parse_decimal",
    "format_decimal",
    "WORD_BITS",
    "WORD_MASK",
    "DivisionByZero",
    "BigIntParseError",
    "BigIntRangeError",
]
