"""The ``BigInt`` value type.

A ``BigInt`` is a sign flag plus a base-2^32 magnitude (least-significant word
first). Instances are frozen and always normalized by ``__post_init__``:
no most-significant zero words, zero is ``(0,)`` and zero is never negative.
Comparison and equality rely on that canonical form.

Division is truncating: the quotient rounds toward zero and the remainder
takes the sign of the dividend. ``//`` and ``%`` on ``BigInt`` follow that
rule rather than Python's floor rule, so ``BigInt.from_int(-7) % 2 == -1``.

AND / OR act on magnitudes only and always produce a non-negative result.
Shifts move the magnitude and keep the sign.
"""

from __future__ import annotations

from dataclasses import dataclass

from .division import divmod_words
from .errors import BigIntRangeError, DivisionByZero
from .text import format_decimal, parse_decimal
from .words import (
    WORD_MASK,
    ZERO_WORDS,
    Words,
    add_words,
    and_words,
    compare_words,
    is_zero_words,
    mul_words,
    or_words,
    shl_words,
    shr_words,
    sub_words,
    trim_words,
    words_from_int,
    words_to_int,
)

INT32_MIN: int = -(1 << 31)
INT32_MAX: int = (1 << 31) - 1
UINT32_MAX: int = (1 << 32) - 1
INT64_MIN: int = -(1 << 63)
INT64_MAX: int = (1 << 63) - 1
UINT64_MAX: int = (1 << 64) - 1


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def _from_machine(cls: type[BigInt], kind: str, value: int, lo: int, hi: int) -> BigInt:
    _require_int(kind, value)
    if not lo <= value <= hi:
        raise BigIntRangeError(kind, value, lo, hi)
    return cls(value < 0, words_from_int(-value if value < 0 else value))


@dataclass(frozen=True, eq=False, repr=False)
class BigInt:
    """Immutable arbitrary-precision signed integer."""

    negative: bool = False
    words: Words = ZERO_WORDS

    def __post_init__(self) -> None:
        if not isinstance(self.negative, bool):
            raise TypeError("negative must be a bool")
        if not isinstance(self.words, (tuple, list)):
            raise TypeError("words must be a tuple of ints")
        for i, w in enumerate(self.words):
            _require_int(f"words[{i}]", w)
            if not 0 <= w <= WORD_MASK:
                raise ValueError(f"words[{i}] must be in [0, {WORD_MASK}]: {w}")
        words = trim_words(self.words)
        object.__setattr__(self, "words", words)
        if is_zero_words(words):
            object.__setattr__(self, "negative", False)

    # -- Construction --------------------------------------------------------

    @classmethod
    def zero(cls) -> BigInt:
        return cls()

    @classmethod
    def parse(cls, text: str) -> BigInt:
        """Build from decimal text matching ``-?[0-9]+``."""
        negative, words = parse_decimal(text)
        return cls(negative, words)

    @classmethod
    def from_int(cls, value: int) -> BigInt:
        _require_int("value", value)
        return cls(value < 0, words_from_int(-value if value < 0 else value))

    @classmethod
    def from_int32(cls, value: int) -> BigInt:
        return _from_machine(cls, "int32", value, INT32_MIN, INT32_MAX)

    @classmethod
    def from_uint32(cls, value: int) -> BigInt:
        return _from_machine(cls, "uint32", value, 0, UINT32_MAX)

    @classmethod
    def from_int64(cls, value: int) -> BigInt:
        return _from_machine(cls, "int64", value, INT64_MIN, INT64_MAX)

    @classmethod
    def from_uint64(cls, value: int) -> BigInt:
        return _from_machine(cls, "uint64", value, 0, UINT64_MAX)

    # -- Conversion ----------------------------------------------------------

    def to_int(self) -> int:
        mag = words_to_int(self.words)
        return -mag if self.negative else mag

    def __int__(self) -> int:
        return self.to_int()

    def __str__(self) -> str:
        return format_decimal(self.negative, self.words)

    def __repr__(self) -> str:
        return f"BigInt.parse({str(self)!r})"

    def is_zero(self) -> bool:
        return is_zero_words(self.words)

    def __bool__(self) -> bool:
        return not self.is_zero()

    # -- Unary ---------------------------------------------------------------

    def __neg__(self) -> BigInt:
        if self.is_zero():
            return self
        return BigInt(not self.negative, self.words)

    def __pos__(self) -> BigInt:
        return self

    def __abs__(self) -> BigInt:
        return BigInt(False, self.words)

    # -- Arithmetic ----------------------------------------------------------

    def __add__(self, other: object) -> BigInt:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _add(self, rhs)

    def __radd__(self, other: object) -> BigInt:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _add(lhs, self)

    def __sub__(self, other: object) -> BigInt:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _sub(self, rhs)

    def __rsub__(self, other: object) -> BigInt:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _sub(lhs, self)

    def __mul__(self, other: object) -> BigInt:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _mul(self, rhs)

    def __rmul__(self, other: object) -> BigInt:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _mul(lhs, self)

    def divmod(self, other: BigInt | int) -> tuple[BigInt, BigInt]:
        """Truncating ``(quotient, remainder)``; raises ``DivisionByZero``."""
        rhs = _coerce(other)
        if rhs is None:
            raise TypeError(f"unsupported divisor type: {type(other).__name__}")
        return _divmod(self, rhs)

    def __divmod__(self, other: object) -> tuple[BigInt, BigInt]:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _divmod(self, rhs)

    def __rdivmod__(self, other: object) -> tuple[BigInt, BigInt]:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _divmod(lhs, self)

    def __floordiv__(self, other: object) -> BigInt:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _divmod(self, rhs)[0]

    def __rfloordiv__(self, other: object) -> BigInt:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _divmod(lhs, self)[0]

    def __truediv__(self, other: object) -> BigInt:
        raise TypeError("BigInt has no true division; use // (truncating) or divmod()")

    def __rtruediv__(self, other: object) -> BigInt:
        raise TypeError("BigInt has no true division; use // (truncating) or divmod()")

    def __mod__(self, other: object) -> BigInt:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _divmod(self, rhs)[1]

    def __rmod__(self, other: object) -> BigInt:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _divmod(lhs, self)[1]

    # -- Bitwise (magnitude only) --------------------------------------------

    def __and__(self, other: object) -> BigInt:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInt(False, and_words(self.words, rhs.words))

    __rand__ = __and__

    def __or__(self, other: object) -> BigInt:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInt(False, or_words(self.words, rhs.words))

    __ror__ = __or__

    # -- Shifts --------------------------------------------------------------

    def __lshift__(self, shift: object) -> BigInt:
        if not isinstance(shift, int) or isinstance(shift, bool):
            return NotImplemented
        if shift < 0:
            raise ValueError("negative shift count")
        return BigInt(self.negative, shl_words(self.words, shift))

    def __rshift__(self, shift: object) -> BigInt:
        if not isinstance(shift, int) or isinstance(shift, bool):
            return NotImplemented
        if shift < 0:
            raise ValueError("negative shift count")
        return BigInt(self.negative, shr_words(self.words, shift))

    # -- Ordering / equality -------------------------------------------------

    def compare(self, other: BigInt | int) -> int:
        """Three-way comparison: -1, 0 or 1."""
        rhs = _coerce(other)
        if rhs is None:
            raise TypeError(f"cannot compare BigInt with {type(other).__name__}")
        if self.negative != rhs.negative:
            return -1 if self.negative else 1
        mag = compare_words(self.words, rhs.words)
        return -mag if self.negative else mag

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.negative == rhs.negative and self.words == rhs.words

    def __hash__(self) -> int:
        # Equal to hash(int) so that BigInt(n) and n collide in dicts and sets.
        return hash(self.to_int())

    def __lt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) < 0

    def __le__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) <= 0

    def __gt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) > 0

    def __ge__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) >= 0


def _coerce(value: object) -> BigInt | None:
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInt.from_int(value)
    return None


# -- Kernels -----------------------------------------------------------------

def _add(a: BigInt, b: BigInt) -> BigInt:
    if a.negative == b.negative:
        return BigInt(a.negative, add_words(a.words, b.words))
    # Opposite signs: the larger magnitude decides the sign.
    if compare_words(a.words, b.words) >= 0:
        return BigInt(a.negative, sub_words(a.words, b.words))
    return BigInt(b.negative, sub_words(b.words, a.words))


def _sub(a: BigInt, b: BigInt) -> BigInt:
    if a.negative != b.negative:
        return BigInt(a.negative, add_words(a.words, b.words))
    if compare_words(a.words, b.words) >= 0:
        return BigInt(a.negative, sub_words(a.words, b.words))
    return BigInt(not a.negative, sub_words(b.words, a.words))


def _mul(a: BigInt, b: BigInt) -> BigInt:
    return BigInt(a.negative != b.negative, mul_words(a.words, b.words))


def _divmod(a: BigInt, b: BigInt) -> tuple[BigInt, BigInt]:
    if b.is_zero():
        raise DivisionByZero()
    q, r = divmod_words(a.words, b.words)
    return BigInt(a.negative != b.negative, q), BigInt(a.negative, r)


# -- Tagged division result ----------------------------------------------------

@dataclass(frozen=True)
class DivModResult:
    """Outcome of ``try_divmod``: either both results or an error string."""

    ok: bool
    quotient: BigInt | None = None
    remainder: BigInt | None = None
    error: str | None = None


def try_divmod(a: BigInt | int, b: BigInt | int) -> DivModResult:
    """Truncating division that reports a zero divisor instead of raising."""
    lhs = _coerce(a)
    rhs = _coerce(b)
    if lhs is None or rhs is None:
        raise TypeError("try_divmod operands must be BigInt or int")
    if rhs.is_zero():
        return DivModResult(ok=False, error="division by zero")
    q, r = _divmod(lhs, rhs)
    return DivModResult(ok=True, quotient=q, remainder=r)


def divmod_or_raise(a: BigInt | int, b: BigInt | int) -> tuple[BigInt, BigInt]:
    """Like ``try_divmod`` but raises ``DivisionByZero`` on rejection."""
    result = try_divmod(a, b)
    quotient, remainder = result.quotient, result.remainder
    if not result.ok or quotient is None or remainder is None:
        raise DivisionByZero(result.error or "division by zero")
    return quotient, remainder
