"""Bit-reversal reordering of interleaved complex vectors.

The data is a flat sequence of ``2 * fft_len`` values holding
``(real, imag)`` pairs.  The reordering is driven by a bit-reversal table in
which entry ``k`` (read with stride ``bit_rev_factor``) gives the reversed
index of the even position ``2 * (k + 1)``.  Each function returns a new
list and leaves its input untouched.
"""

from typing import List, Sequence, Tuple

from .arithmetic import _fixed


def _check_shape(data_len: int, fft_len: int, bit_rev_factor: int) -> None:
    if fft_len < 4 or fft_len % 2:
        raise ValueError(f"fft_len {fft_len} must be an even number of at least 4")
    if data_len != 2 * fft_len:
        raise ValueError(
            f"expected {2 * fft_len} interleaved values, got {data_len}"
        )
    if bit_rev_factor < 1:
        raise ValueError(f"bit_rev_factor {bit_rev_factor} must be positive")


def _table_entry(table: Sequence[int], index: int, half: int) -> int:
    if index >= len(table):
        raise ValueError(
            f"bit-reversal table holds {len(table)} entries, entry {index} is needed"
        )
    value = table[index]
    if not 0 <= value <= half - 2:
        raise ValueError(f"bit-reversal table entry {value} is out of range")
    return value


def _bit_reverse(
    values: List, fft_len: int, bit_rev_factor: int, bit_rev_table: Sequence[int]
) -> List:
    _check_shape(len(values), fft_len, bit_rev_factor)
    pairs: List[Tuple] = list(zip(values[0::2], values[1::2]))
    half = fft_len // 2
    half_plus_one = half + 1

    j = 0
    for step, i in enumerate(range(0, half - 1, 2)):
        if step:
            j = _table_entry(bit_rev_table, (step - 1) * bit_rev_factor, half)
        if i < j:
            pairs[i], pairs[j] = pairs[j], pairs[i]
            a, b = i + half_plus_one, j + half_plus_one
            pairs[a], pairs[b] = pairs[b], pairs[a]
        a, b = i + 1, j + half
        pairs[a], pairs[b] = pairs[b], pairs[a]

    return [value for pair in pairs for value in pair]


def bitreversal_q15(data, fft_len, bit_rev_factor, bit_rev_table):
    """Reorder interleaved Q15 complex samples into bit-reversed order."""
    return _bit_reverse(_fixed(data, 16), fft_len, bit_rev_factor, bit_rev_table)


def bitreversal_q31(data, fft_len, bit_rev_factor, bit_rev_table):
    """Reorder interleaved Q31 complex samples into bit-reversed order."""
    return _bit_reverse(_fixed(data, 32), fft_len, bit_rev_factor, bit_rev_table)


def bitreversal_f32(data, fft_len, bit_rev_factor, bit_rev_table):
    """Reorder interleaved float32 complex samples into bit-reversed order."""
    return _bit_reverse(list(data), fft_len, bit_rev_factor, bit_rev_table)