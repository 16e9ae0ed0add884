import pytest
from hypothesis import given, strategies as st

from fixeddsp.bitreversal import bitreversal_f32, bitreversal_q15, bitreversal_q31


def _bitrev(value, bits):
    result = 0
    for _ in range(bits):
        result = (result << 1) | (value & 1)
        value >>= 1
    return result


# Table laid out for a 4096-point transform, as the transform setup expects.
TABLE_4096 = [_bitrev(2 * (k + 1), 12) for k in range(1024)]


def _table_for(fft_len):
    factor = 4096 // fft_len
    return factor, TABLE_4096[factor - 1:]


def _expected_order(values, fft_len):
    bits = fft_len.bit_length() - 1
    pairs = list(zip(values[0::2], values[1::2]))
    out = [None] * fft_len
    for index, pair in enumerate(pairs):
        out[_bitrev(index, bits)] = pair
    return [v for pair in out for v in pair]


def test_four_point_swaps_middle_pairs():
    data = [0, 1, 2, 3, 4, 5, 6, 7]
    assert bitreversal_q15(data, 4, 1, []) == [0, 1, 4, 5, 2, 3, 6, 7]


@pytest.mark.parametrize("fft_len", [16, 64, 256, 1024, 4096])
def test_q31_matches_bit_reversed_permutation(fft_len):
    data = list(range(2 * fft_len))
    factor, table = _table_for(fft_len)
    assert bitreversal_q31(data, fft_len, factor, table) == _expected_order(data, fft_len)


@pytest.mark.parametrize("fft_len", [16, 64, 256])
def test_q15_matches_bit_reversed_permutation(fft_len):
    data = [(i * 37) % 60000 - 30000 for i in range(2 * fft_len)]
    factor, table = _table_for(fft_len)
    assert bitreversal_q15(data, fft_len, factor, table) == _expected_order(data, fft_len)


@pytest.mark.parametrize("fft_len", [16, 1024])
def test_f32_matches_bit_reversed_permutation(fft_len):
    data = [i * 0.5 for i in range(2 * fft_len)]
    factor, table = _table_for(fft_len)
    assert bitreversal_f32(data, fft_len, factor, table) == _expected_order(data, fft_len)


@given(st.lists(st.integers(-(2**31), 2**31 - 1), min_size=128, max_size=128))
def test_q31_is_an_involution(data):
    factor, table = _table_for(64)
    once = bitreversal_q31(data, 64, factor, table)
    assert bitreversal_q31(once, 64, factor, table) == data
    assert sorted(once) == sorted(data)


def test_input_is_left_untouched():
    data = [float(i) for i in range(32)]
    snapshot = list(data)
    factor, table = _table_for(16)
    result = bitreversal_f32(data, 16, factor, table)
    assert data == snapshot
    assert result != data


def test_wrong_data_length_raises():
    factor, table = _table_for(16)
    with pytest.raises(ValueError):
        bitreversal_q31(list(range(30)), 16, factor, table)


def test_too_small_fft_len_raises():
    with pytest.raises(ValueError):
        bitreversal_f32([0.0, 0.0, 0.0, 0.0], 2, 1, [])


def test_short_table_raises():
    with pytest.raises(ValueError):
        bitreversal_q31(list(range(128)), 64, 64, [])


def test_out_of_range_q15_sample_raises():
    data = [0] * 32
    data[5] = 40000
    factor, table = _table_for(16)
    with pytest.raises(ValueError):
        bitreversal_q15(data, 16, factor, table)