"""Radix-4 decimation-in-frequency butterflies for Q15 complex data.

Input is a flat sequence of ``2 * fft_len`` interleaved ``(real, imag)``
Q15 samples.  The output is scaled down by ``fft_len`` and left in
bit-reversed order.  The twiddle table holds interleaved ``(cos, sin)``
Q15 pairs; ``twid_coef_modifier`` is the stride into it.
"""

from typing import Callable, List, Sequence, Tuple

from .arithmetic import _fixed
from .intrinsics import _wrap, ssat


def _sat(value: int) -> int:
    return ssat(value, 16)


def _q15(value: int) -> int:
    return _wrap(value, 16)


def _high(value: int) -> int:
    """Keep the upper half of a 32-bit product sum as a Q15 value."""
    return _q15(_wrap(value, 32) >> 16)


def _rotate_forward(re: int, im: int, co: int, si: int) -> Tuple[int, int]:
    return _high(co * re + si * im), _high(-si * re + co * im)


def _rotate_inverse(re: int, im: int, co: int, si: int) -> Tuple[int, int]:
    return _high(co * re - si * im), _high(si * re + co * im)


def _is_power_of_four(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0 and value.bit_length() % 2 == 1


def _validate(data_len: int, fft_len: int, coef_len: int, modifier: int) -> None:
    if fft_len < 16 or not _is_power_of_four(fft_len):
        raise ValueError(f"fft_len {fft_len} must be a power of four of at least 16")
    if data_len != 2 * fft_len:
        raise ValueError(f"expected {2 * fft_len} interleaved values, got {data_len}")
    if modifier < 1:
        raise ValueError(f"twid_coef_modifier {modifier} must be positive")
    needed = 6 * (fft_len // 4 - 1) * modifier + 2
    if coef_len < needed:
        raise ValueError(f"twiddle table holds {coef_len} values, {needed} are needed")


def _butterfly(
    data: Sequence[int],
    fft_len: int,
    coef: Sequence[int],
    modifier: int,
    inverse: bool,
) -> List[int]:
    x = _fixed(data, 16)
    w = _fixed(coef, 16)
    _validate(len(x), fft_len, len(w), modifier)
    rotate: Callable[[int, int, int, int], Tuple[int, int]] = (
        _rotate_inverse if inverse else _rotate_forward
    )
    sign = -1 if inverse else 1

    # First stage: inputs are scaled down by four to leave headroom.
    n2 = fft_len >> 2
    for i0 in range(n2):
        i1, i2, i3 = i0 + n2, i0 + 2 * n2, i0 + 3 * n2
        ic = i0 * modifier

        t0, t1 = x[2 * i0] >> 2, x[2 * i0 + 1] >> 2
        s0, s1 = x[2 * i2] >> 2, x[2 * i2 + 1] >> 2
        r0, r1 = _sat(t0 + s0), _sat(t1 + s1)
        s0, s1 = _sat(t0 - s0), _sat(t1 - s1)

        t0, t1 = x[2 * i1] >> 2, x[2 * i1 + 1] >> 2
        u0, u1 = x[2 * i3] >> 2, x[2 * i3 + 1] >> 2
        t0, t1 = _sat(t0 + u0), _sat(t1 + u1)

        x[2 * i0] = _q15((r0 >> 1) + (t0 >> 1))
        x[2 * i0 + 1] = _q15((r1 >> 1) + (t1 >> 1))

        r0, r1 = _sat(r0 - t0), _sat(r1 - t1)
        out1, out2 = rotate(r0, r1, w[4 * ic], w[4 * ic + 1])

        t0, t1 = x[2 * i1] >> 2, x[2 * i1 + 1] >> 2
        x[2 * i1], x[2 * i1 + 1] = out1, out2

        u0, u1 = x[2 * i3] >> 2, x[2 * i3 + 1] >> 2
        t0, t1 = _sat(t0 - u0), _sat(t1 - u1)

        r0, r1 = _sat(s0 - sign * t1), _sat(s1 + sign * t0)
        s0, s1 = _sat(s0 + sign * t1), _sat(s1 - sign * t0)

        x[2 * i2], x[2 * i2 + 1] = rotate(s0, s1, w[2 * ic], w[2 * ic + 1])
        x[2 * i3], x[2 * i3 + 1] = rotate(r0, r1, w[6 * ic], w[6 * ic + 1])

    modifier <<= 2

    # Middle stages.
    k = fft_len // 4
    while k > 4:
        n1 = n2
        n2 >>= 2
        for j in range(n2):
            ic = j * modifier
            co1, si1 = w[2 * ic], w[2 * ic + 1]
            co2, si2 = w[4 * ic], w[4 * ic + 1]
            co3, si3 = w[6 * ic], w[6 * ic + 1]

            for i0 in range(j, fft_len, n1):
                i1, i2, i3 = i0 + n2, i0 + 2 * n2, i0 + 3 * n2

                t0, t1 = x[2 * i0], x[2 * i0 + 1]
                s0, s1 = x[2 * i2], x[2 * i2 + 1]
                r0, r1 = _sat(t0 + s0), _sat(t1 + s1)
                s0, s1 = _sat(t0 - s0), _sat(t1 - s1)

                t0, t1 = x[2 * i1], x[2 * i1 + 1]
                u0, u1 = x[2 * i3], x[2 * i3 + 1]
                t0, t1 = _sat(t0 + u0), _sat(t1 + u1)

                x[2 * i0] = _q15(((r0 >> 1) + (t0 >> 1)) >> 1)
                x[2 * i0 + 1] = _q15(((r1 >> 1) + (t1 >> 1)) >> 1)

                r0 = _q15((r0 >> 1) - (t0 >> 1))
                r1 = _q15((r1 >> 1) - (t1 >> 1))
                out1, out2 = rotate(r0, r1, co2, si2)

                t0, t1 = x[2 * i1], x[2 * i1 + 1]
                x[2 * i1], x[2 * i1 + 1] = out1, out2

                u0, u1 = x[2 * i3], x[2 * i3 + 1]
                t0, t1 = _sat(t0 - u0), _sat(t1 - u1)

                r0 = _q15((s0 >> 1) - sign * (t1 >> 1))
                r1 = _q15((s1 >> 1) + sign * (t0 >> 1))
                s0 = _q15((s0 >> 1) + sign * (t1 >> 1))
                s1 = _q15((s1 >> 1) - sign * (t0 >> 1))

                x[2 * i2], x[2 * i2 + 1] = rotate(s0, s1, co1, si1)
                x[2 * i3], x[2 * i3 + 1] = rotate(r0, r1, co3, si3)
        modifier <<= 2
        k >>= 2

    # Last stage: trivial twiddles.
    n1 = n2
    n2 >>= 2
    for i0 in range(0, fft_len - n1 + 1, n1):
        i1, i2, i3 = i0 + n2, i0 + 2 * n2, i0 + 3 * n2

        t0, t1 = x[2 * i0], x[2 * i0 + 1]
        s0, s1 = x[2 * i2], x[2 * i2 + 1]
        r0, r1 = _sat(t0 + s0), _sat(t1 + s1)
        s0, s1 = _sat(t0 - s0), _sat(t1 - s1)

        t0, t1 = x[2 * i1], x[2 * i1 + 1]
        u0, u1 = x[2 * i3], x[2 * i3 + 1]
        t0, t1 = _sat(t0 + u0), _sat(t1 + u1)

        x[2 * i0] = _q15((r0 >> 1) + (t0 >> 1))
        x[2 * i0 + 1] = _q15((r1 >> 1) + (t1 >> 1))

        r0 = _q15((r0 >> 1) - (t0 >> 1))
        r1 = _q15((r1 >> 1) - (t1 >> 1))

        t0, t1 = x[2 * i1], x[2 * i1 + 1]
        x[2 * i1], x[2 * i1 + 1] = r0, r1

        u0, u1 = x[2 * i3], x[2 * i3 + 1]
        t0, t1 = _sat(t0 - u0), _sat(t1 - u1)

        x[2 * i2] = _q15((s0 >> 1) + sign * (t1 >> 1))
        x[2 * i2 + 1] = _q15((s1 >> 1) - sign * (t0 >> 1))
        x[2 * i3] = _q15((s0 >> 1) - sign * (t1 >> 1))
        x[2 * i3 + 1] = _q15((s1 >> 1) + sign * (t0 >> 1))

    return x


def radix4_butterfly_q15(data, fft_len, coef, twid_coef_modifier):
    """Forward radix-4 butterflies; returns scaled, bit-reversed Q15 output."""
    return _butterfly(data, fft_len, coef, twid_coef_modifier, inverse=False)


def radix4_butterfly_inverse_q15(data, fft_len, coef, twid_coef_modifier):
    """Inverse radix-4 butterflies; returns scaled, bit-reversed Q15 output."""
    return _butterfly(data, fft_len, coef, twid_coef_modifier, inverse=True)