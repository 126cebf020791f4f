"""Long division on magnitudes.

Two entry points:

- ``divmod_small`` divides by a single word in one pass (decimal formatting
  uses it with divisor 10).
- ``divmod_words`` is normalized schoolbook division in the style of Knuth's
  Algorithm D, without the three-word refinement of the quotient estimate.

Signs are handled by the caller; both functions see magnitudes only.
"""

from __future__ import annotations

import logging

from .errors import DivisionByZero
from .words import (
    WORD_BITS,
    WORD_MASK,
    ZERO_WORDS,
    Words,
    compare_words,
    is_zero_words,
    mul_word,
    shl_words,
    shr_words,
    sub_words,
    trim_words,
)

logger = logging.getLogger("bigint.division")

# Upper bound on quotient-estimate corrections once the divisor is normalized.
EXPECTED_MAX_CORRECTIONS: int = 2


def divmod_small(words: Words, divisor: int) -> tuple[Words, int]:
    """Divide a magnitude by one word; returns ``(quotient, remainder)``."""
    if divisor == 0:
        raise DivisionByZero()
    if not 0 < divisor <= WORD_MASK:
        raise ValueError(f"divisor must be in [1, {WORD_MASK}]: {divisor}")
    out = list(words)
    remainder = 0
    for i in range(len(out) - 1, -1, -1):
        current = (remainder << WORD_BITS) | out[i]
        out[i] = current // divisor
        remainder = current % divisor
    return trim_words(out), remainder


def normalization_shift(top_word: int) -> int:
    """Bits needed to move the top set bit of ``top_word`` to bit 31."""
    return WORD_BITS - top_word.bit_length()


def _word_at(words: Words, index: int) -> int:
    return words[index] if 0 <= index < len(words) else 0


def divmod_words(a: Words, b: Words) -> tuple[Words, Words]:
    """Truncating magnitude division; returns ``(quotient, remainder)``."""
    a = trim_words(a)
    b = trim_words(b)
    if is_zero_words(b):
        raise DivisionByZero()
    if is_zero_words(a):
        return ZERO_WORDS, ZERO_WORDS
    if compare_words(a, b) < 0:
        return ZERO_WORDS, a

    norm = normalization_shift(b[-1])
    divisor = shl_words(b, norm)
    remainder = shl_words(a, norm)

    n = len(remainder)
    m = len(divisor)
    top = divisor[-1]
    quotient = [0] * (n - m + 1)

    for i in range(n - m, -1, -1):
        numerator = (_word_at(remainder, i + m) << WORD_BITS) | _word_at(remainder, i + m - 1)
        qguess = min(numerator // top, WORD_MASK)

        trial = shl_words(mul_word(divisor, qguess), WORD_BITS * i)
        corrections = 0
        while compare_words(trial, remainder) > 0:
            qguess -= 1
            corrections += 1
            trial = shl_words(mul_word(divisor, qguess), WORD_BITS * i)
        if corrections > EXPECTED_MAX_CORRECTIONS:
            logger.debug(
                "quotient estimate corrected %d times at word %d (divisor words=%d)",
                corrections, i, m,
            )

        quotient[i] = qguess
        remainder = sub_words(remainder, trial)

    return trim_words(quotient), shr_words(remainder, norm)
