"""Word-level magnitude kernel for ``bigint``.

A magnitude is a tuple of 32-bit unsigned words, least-significant word first.
Every function here is stateless, never mutates its inputs, and returns a
normalized tuple: no most-significant zero words, and zero is ``(0,)``.

Python ints are unbounded, so the "wide accumulator" of each word step is just
an int that is masked back down to ``WORD_MASK`` before it is stored.
"""

from __future__ import annotations

WORD_BITS: int = 32
WORD_BASE: int = 1 << WORD_BITS
WORD_MASK: int = WORD_BASE - 1

Words = tuple[int, ...]

ZERO_WORDS: Words = (0,)


# -- Normalization -----------------------------------------------------------

def trim_words(words: Words | list[int]) -> Words:
    """Strip most-significant zero words, keeping at least one word."""
    end = len(words)
    while end > 1 and words[end - 1] == 0:
        end -= 1
    if end == 0:
        return ZERO_WORDS
    return tuple(words[:end])


def is_zero_words(words: Words) -> bool:
    """True for the empty magnitude and for any all-zero magnitude."""
    return all(w == 0 for w in words)


def words_from_int(value: int) -> Words:
    """Split a non-negative int into words."""
    if value < 0:
        raise ValueError(f"magnitude must be non-negative: {value}")
    out: list[int] = []
    while value:
        out.append(value & WORD_MASK)
        value >>= WORD_BITS
    return trim_words(out)


def words_to_int(words: Words) -> int:
    value = 0
    for w in reversed(words):
        value = (value << WORD_BITS) | w
    return value


# -- Comparison --------------------------------------------------------------

def compare_words(a: Words, b: Words) -> int:
    """Three-way magnitude comparison: -1, 0 or 1.

    Inputs are trimmed first, so word count decides before any word is read.
    """
    a = trim_words(a)
    b = trim_words(b)
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


# -- Addition / subtraction --------------------------------------------------

def add_words(a: Words, b: Words) -> Words:
    out: list[int] = []
    carry = 0
    n = max(len(a), len(b))
    i = 0
    while i < n or carry:
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        out.append(total & WORD_MASK)
        carry = total >> WORD_BITS
        i += 1
    return trim_words(out)


def sub_words(a: Words, b: Words) -> Words:
    """``a - b`` for magnitudes with ``a >= b``."""
    if compare_words(a, b) < 0:
        raise ValueError("sub_words requires a >= b")
    out: list[int] = []
    borrow = 0
    for i in range(len(a)):
        diff = a[i] - borrow
        if i < len(b):
            diff -= b[i]
        if diff < 0:
            diff += WORD_BASE
            borrow = 1
        else:
            borrow = 0
        out.append(diff)
    return trim_words(out)


# -- Multiplication ----------------------------------------------------------

def mul_words(a: Words, b: Words) -> Words:
    """Schoolbook product; the buffer holds ``len(a) + len(b)`` words."""
    out = [0] * (len(a) + len(b))
    for i, ai in enumerate(a):
        if ai == 0:
            continue
        carry = 0
        j = 0
        while j < len(b) or carry:
            bj = b[j] if j < len(b) else 0
            total = out[i + j] + ai * bj + carry
            out[i + j] = total & WORD_MASK
            carry = total >> WORD_BITS
            j += 1
    return trim_words(out)


def mul_word(a: Words, w: int) -> Words:
    """Product of a magnitude and a single word."""
    if not 0 <= w <= WORD_MASK:
        raise ValueError(f"word must be in [0, {WORD_MASK}]: {w}")
    out: list[int] = []
    carry = 0
    for ai in a:
        total = ai * w + carry
        out.append(total & WORD_MASK)
        carry = total >> WORD_BITS
    if carry:
        out.append(carry)
    return trim_words(out)


# -- Shifts ------------------------------------------------------------------

def shl_words(a: Words, shift: int) -> Words:
    if shift < 0:
        raise ValueError("negative shift count")
    if shift == 0 or is_zero_words(a):
        return trim_words(a)
    word_shift, bit_shift = divmod(shift, WORD_BITS)
    out = [0] * word_shift
    carry = 0
    for w in a:
        current = (w << bit_shift) | carry
        out.append(current & WORD_MASK)
        carry = current >> WORD_BITS
    if carry:
        out.append(carry)
    return trim_words(out)


def shr_words(a: Words, shift: int) -> Words:
    if shift < 0:
        raise ValueError("negative shift count")
    if shift == 0 or is_zero_words(a):
        return trim_words(a)
    word_shift, bit_shift = divmod(shift, WORD_BITS)
    if word_shift >= len(a):
        return ZERO_WORDS
    out = list(a[word_shift:])
    low_mask = (1 << bit_shift) - 1
    carry = 0
    for i in range(len(out) - 1, -1, -1):
        current = (carry << WORD_BITS) | out[i]
        out[i] = (current >> bit_shift) & WORD_MASK
        carry = current & low_mask
    return trim_words(out)


# -- Bitwise (magnitude only) ------------------------------------------------

def and_words(a: Words, b: Words) -> Words:
    # High words of the longer operand meet implicit zeros.
    n = min(len(a), len(b))
    return trim_words([a[i] & b[i] for i in range(n)])


def or_words(a: Words, b: Words) -> Words:
    n = max(len(a), len(b))
    out = []
    for i in range(n):
        x = a[i] if i < len(a) else 0
        y = b[i] if i < len(b) else 0
        out.append(x | y)
    return trim_words(out)
