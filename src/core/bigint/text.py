"""Decimal text I/O for ``bigint`` magnitudes.

Accepted grammar is ``-?[0-9]+`` (ASCII digits only). Output never carries
leading zeros and uses ``-`` only for strictly negative values.
"""

from __future__ import annotations

import re

from .division import divmod_small
from .errors import BigIntParseError
from .words import ZERO_WORDS, Words, add_words, is_zero_words, mul_word

_DECIMAL_RE = re.compile(r"-?[0-9]+")

DECIMAL_RADIX: int = 10


def parse_decimal(text: str) -> tuple[bool, Words]:
    """Parse decimal text into ``(negative, words)``.

    The magnitude is folded left-to-right as ``acc = acc * 10 + digit``.
    ``-0`` parses as non-negative zero.
    """
    if not isinstance(text, str):
        raise TypeError(f"decimal text must be a str, got {type(text).__name__}")
    if _DECIMAL_RE.fullmatch(text) is None:
        raise BigIntParseError(text)

    negative = text.startswith("-")
    digits = text[1:] if negative else text
    digits = digits.lstrip("0") or "0"

    acc: Words = ZERO_WORDS
    for ch in digits:
        acc = add_words(mul_word(acc, DECIMAL_RADIX), (ord(ch) - ord("0"),))

    if is_zero_words(acc):
        negative = False
    return negative, acc


def format_decimal(negative: bool, words: Words) -> str:
    if is_zero_words(words):
        return "0"
    digits: list[str] = []
    rest = words
    while not is_zero_words(rest):
        rest, digit = divmod_small(rest, DECIMAL_RADIX)
        digits.append(chr(ord("0") + digit))
    if negative:
        digits.append("-")
    return "".join(reversed(digits))
