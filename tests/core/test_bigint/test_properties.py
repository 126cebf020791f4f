"""Property tests: BigInt arithmetic vs Python's built-in int.

Uses Hypothesis to draw integers across word boundaries and checks the
algebraic laws of the kernel. Python ints serve as the oracle, with
truncating division rebuilt from ``abs`` since ``//`` on int floors.
"""

from __future__ import annotations

import importlib.util

import pytest

if importlib.util.find_spec("hypothesis") is None:  # pragma: no cover
    pytest.skip("hypothesis not installed", allow_module_level=True)

import hypothesis.strategies as st
from hypothesis import assume, given, settings

from src.core.bigint import BigInt, DivisionByZero

# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

_EDGES = [0, 1, 2**31, 2**32 - 1, 2**32, 2**63, 2**64 - 1, 2**64, 2**96 - 1]

ints = st.one_of(
    st.integers(min_value=-(2**200), max_value=2**200),
    st.sampled_from(_EDGES + [-e for e in _EDGES]),
)
shifts = st.integers(min_value=0, max_value=200)


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


# ---------------------------------------------------------------------------
# Oracle agreement
# ---------------------------------------------------------------------------


@settings(max_examples=200, deadline=None)
@given(a=ints, b=ints)
def test_add_sub_mul_match_int(a: int, b: int) -> None:
    x, y = BigInt.from_int(a), BigInt.from_int(b)
    assert (x + y).to_int() == a + b
    assert (x - y).to_int() == a - b
    assert (x * y).to_int() == a * b


@settings(max_examples=200, deadline=None)
@given(a=ints, b=ints)
def test_divmod_matches_truncating_int(a: int, b: int) -> None:
    assume(b != 0)
    q, r = divmod(BigInt.from_int(a), BigInt.from_int(b))
    assert (q.to_int(), r.to_int()) == _trunc_divmod(a, b)


@settings(max_examples=100, deadline=None)
@given(a=ints, b=ints)
def test_bitwise_matches_magnitudes(a: int, b: int) -> None:
    x, y = BigInt.from_int(a), BigInt.from_int(b)
    assert (x & y).to_int() == abs(a) & abs(b)
    assert (x | y).to_int() == abs(a) | abs(b)


@settings(max_examples=100, deadline=None)
@given(a=ints, b=ints)
def test_ordering_matches_int(a: int, b: int) -> None:
    x, y = BigInt.from_int(a), BigInt.from_int(b)
    assert (x < y) == (a < b)
    assert (x == y) == (a == b)
    assert (x > y) == (a > b)


# ---------------------------------------------------------------------------
# Algebraic laws
# ---------------------------------------------------------------------------


@settings(max_examples=100, deadline=None)
@given(a=ints)
def test_decimal_round_trip(a: int) -> None:
    x = BigInt.from_int(a)
    text = str(x)
    assert BigInt.parse(text) == x
    assert text == str(a)
    assert text.startswith("-") == (a < 0)


@settings(max_examples=100, deadline=None)
@given(a=ints, b=ints)
def test_commutativity(a: int, b: int) -> None:
    x, y = BigInt.from_int(a), BigInt.from_int(b)
    assert x + y == y + x
    assert x * y == y * x


@settings(max_examples=100, deadline=None)
@given(a=ints)
def test_additive_inverse(a: int) -> None:
    x = BigInt.from_int(a)
    assert x + (-x) == BigInt.zero()
    assert (x - x).negative is False


@settings(max_examples=200, deadline=None)
@given(a=ints, b=ints)
def test_division_identity_and_remainder_sign(a: int, b: int) -> None:
    assume(b != 0)
    x, y = BigInt.from_int(a), BigInt.from_int(b)
    q, r = x // y, x % y
    assert q * y + r == x
    assert r.is_zero() or r.negative == x.negative
    assert abs(r) < abs(y)


@settings(max_examples=50, deadline=None)
@given(a=ints)
def test_division_by_zero_always_raises(a: int) -> None:
    x = BigInt.from_int(a)
    with pytest.raises(DivisionByZero):
        x // 0
    with pytest.raises(DivisionByZero):
        x % 0


@settings(max_examples=100, deadline=None)
@given(a=ints, b=ints)
def test_ordering_trichotomy(a: int, b: int) -> None:
    x, y = BigInt.from_int(a), BigInt.from_int(b)
    assert [x < y, x == y, x > y].count(True) == 1


@settings(max_examples=100, deadline=None)
@given(a=ints, k=shifts)
def test_shift_laws(a: int, k: int) -> None:
    x = BigInt.from_int(abs(a))
    assert (x << k) >> k == x
    assert (x << k).to_int() == abs(a) << k
    assert (x >> k).to_int() == abs(a) >> k
    assert x << 0 == x
    assert x >> 0 == x
