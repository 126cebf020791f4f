"""Exception types for the ``bigint`` arithmetic kernel.

``DivisionByZero`` is the only arithmetic failure. The other two cover
malformed inputs at the construction boundary.
"""

from __future__ import annotations


class DivisionByZero(ZeroDivisionError):
    """Raised when the divisor of ``/``, ``%`` or ``divmod`` is zero."""

    def __init__(self, message: str = "division by zero") -> None:
        super().__init__(message)


class BigIntParseError(ValueError):
    """Raised when decimal text does not match ``-?[0-9]+``."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"invalid decimal integer literal: {text!r}")


class BigIntRangeError(OverflowError):
    """Raised when a machine-integer constructor gets a value outside its width."""

    def __init__(self, kind: str, value: int, lo: int, hi: int) -> None:
        self.kind = kind
        self.value = value
        super().__init__(f"{kind} must be in [{lo}, {hi}]: {value}")
