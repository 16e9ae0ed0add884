import pytest
from hypothesis import given, strategies as st

from fixeddsp.intrinsics import (
    Q31_MAX,
    Q31_MIN,
    clip_q63_to_q31,
    clz,
    qadd,
    qadd8,
    qadd16,
    qsub,
    qsub8,
    qsub16,
    ssat,
)

int32s = st.integers(Q31_MIN, Q31_MAX)
words = st.integers(0, 0xFFFFFFFF)


@given(st.integers(-(1 << 40), 1 << 40), st.integers(1, 32))
def test_ssat_stays_in_range(value, bits):
    result = ssat(value, bits)
    assert -(1 << (bits - 1)) <= result <= (1 << (bits - 1)) - 1
    if -(1 << (bits - 1)) <= value <= (1 << (bits - 1)) - 1:
        assert result == value


def test_ssat_saturates_byte():
    assert ssat(1000, 8) == 0x7F
    assert ssat(-1000, 8) == -0x80


@pytest.mark.parametrize("bits", [0, 33, 40])
def test_ssat_ignores_invalid_width(bits):
    assert ssat(-123456789012, bits) == -123456789012


@given(st.integers(-(1 << 63), (1 << 63) - 1))
def test_clip_q63_to_q31(value):
    result = clip_q63_to_q31(value)
    assert Q31_MIN <= result <= Q31_MAX
    if Q31_MIN <= value <= Q31_MAX:
        assert result == value
    elif value > 0:
        assert result == Q31_MAX
    else:
        assert result == Q31_MIN


def test_clz_zero_and_top_bit():
    assert clz(0) == 32
    assert clz(0x80000000) == 0
    assert clz(1) == 31


@given(st.integers(0, 31))
def test_clz_power_of_two(k):
    assert clz(1 << k) == 31 - k
    assert clz((1 << (k + 1)) - 1) == 31 - k


@given(words)
def test_qadd8_zero_identity(x):
    assert qadd8(x, 0) == x
    assert qsub8(x, 0) == x


@given(words, words)
def test_qadd8_commutative(x, y):
    assert qadd8(x, y) == qadd8(y, x)


@given(words)
def test_qsub8_self_is_zero(x):
    assert qsub8(x, x) == 0
    assert qsub16(x, x) == 0


def test_qadd8_saturates_each_lane():
    assert qadd8(0x7F7F7F7F, 0x01010101) == 0x7F7F7F7F
    assert qadd8(0x80808080, 0x80808080) == 0x80808080
    assert qsub8(0x80808080, 0x01010101) == 0x80808080


def test_qadd16_saturates_each_lane():
    assert qadd16(0x7FFF0001, 0x00017FFF) == 0x7FFF7FFF
    assert qsub16(0x80008000, 0x00010001) == 0x80008000


@given(words, words)
def test_qadd16_commutative_and_identity(x, y):
    assert qadd16(x, y) == qadd16(y, x)
    assert qadd16(x, 0) == x


def test_qadd_saturates():
    assert qadd(Q31_MAX, 1) == Q31_MAX
    assert qadd(Q31_MIN, -1) == Q31_MIN
    assert qsub(Q31_MIN, 1) == Q31_MIN
    assert qsub(Q31_MAX, -1) == Q31_MAX


@given(int32s, st.integers(Q31_MIN + 1, Q31_MAX))
def test_qsub_matches_qadd_of_negation(x, y):
    assert qsub(x, y) == qadd(x, -y)


@given(int32s, int32s)
def test_qadd_exact_when_in_range(x, y):
    total = x + y
    if Q31_MIN <= total <= Q31_MAX:
        assert qadd(x, y) == total
    else:
        assert qadd(x, y) in (Q31_MIN, Q31_MAX)