"""Radix-4 decimation-in-frequency butterflies for Q31 complex data.

Input is a flat sequence of ``2 * fft_len`` interleaved ``(real, imag)``
Q31 samples.  The output is scaled down by ``fft_len`` and left in
bit-reversed order.  The twiddle table holds interleaved ``(cos, sin)``
Q31 pairs; ``twid_coef_modifier`` is the stride into it.
"""

from typing import Callable, List, Sequence, Tuple

from .arithmetic import _fixed
from .intrinsics import _wrap

_Rotate = Callable[[int, int, int, int], Tuple[int, int]]


def _w(value: int) -> int:
    return _wrap(value, 32)


def _mulhi(a: int, b: int) -> int:
    """Upper word of a 64-bit product of two Q31 values."""
    return (a * b) >> 32


def _rotate_forward(re: int, im: int, co: int, si: int) -> Tuple[int, int]:
    return (
        _w(_mulhi(re, co) + _mulhi(im, si)),
        _w(_mulhi(im, co) - _mulhi(re, si)),
    )


def _rotate_inverse(re: int, im: int, co: int, si: int) -> Tuple[int, int]:
    return (
        _w(_mulhi(re, co) - _mulhi(im, si)),
        _w(_mulhi(im, co) + _mulhi(re, si)),
    )


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


def _twiddles(w: Sequence[int], ia1: int) -> Tuple[int, ...]:
    ia2, ia3 = 2 * ia1, 3 * ia1
    return (
        w[2 * ia1], w[2 * ia1 + 1],
        w[2 * ia2], w[2 * ia2 + 1],
        w[2 * ia3], w[2 * ia3 + 1],
    )


def _butterfly_at(
    x: List[int],
    i0: int,
    n2: int,
    tw: Tuple[int, ...],
    rotate: _Rotate,
    sign: int,
    first: bool,
) -> None:
    """One radix-4 butterfly on the points i0, i0+n2, i0+2*n2, i0+3*n2."""
    co1, si1, co2, si2, co3, si3 = tw
    i1, i2, i3 = i0 + n2, i0 + 2 * n2, i0 + 3 * n2
    pre = 4 if first else 0

    a0r, a0i = x[2 * i0] >> pre, x[2 * i0 + 1] >> pre
    a1r, a1i = x[2 * i1] >> pre, x[2 * i1 + 1] >> pre
    a2r, a2i = x[2 * i2] >> pre, x[2 * i2 + 1] >> pre
    a3r, a3i = x[2 * i3] >> pre, x[2 * i3 + 1] >> pre

    r1, r2 = _w(a0r + a2r), _w(a0r - a2r)
    s1, s2 = _w(a0i + a2i), _w(a0i - a2i)
    t1, t2 = _w(a1r + a3r), _w(a1i + a3i)

    if first:
        x[2 * i0], x[2 * i0 + 1] = _w(r1 + t1), _w(s1 + t2)
    else:
        x[2 * i0], x[2 * i0 + 1] = _w(r1 + t1) >> 2, _w(s1 + t2) >> 2

    r1, s1 = _w(r1 - t1), _w(s1 - t2)
    t1, t2 = _w(a1i - a3i), _w(a1r - a3r)

    def post(pair: Tuple[int, int]) -> Tuple[int, int]:
        if first:
            return _w(pair[0] << 1), _w(pair[1] << 1)
        return pair[0] >> 1, pair[1] >> 1

    x[2 * i1], x[2 * i1 + 1] = post(rotate(r1, s1, co2, si2))

    r1, r2 = _w(r2 + sign * t1), _w(r2 - sign * t1)
    s1, s2 = _w(s2 - sign * t2), _w(s2 + sign * t2)

    x[2 * i2], x[2 * i2 + 1] = post(rotate(r1, s1, co1, si1))
    x[2 * i3], x[2 * i3 + 1] = post(rotate(r2, s2, co3, si3))


def _butterfly(
    data: Sequence[int],
    fft_len: int,
    coef: Sequence[int],
    modifier: int,
    inverse: bool,
) -> List[int]:
    x = _fixed(data, 32)
    w = _fixed(coef, 32)
    _validate(len(x), fft_len, len(w), modifier)
    rotate: _Rotate = _rotate_inverse if inverse else _rotate_forward
    sign = -1 if inverse else 1

    # First stage: inputs are scaled down by sixteen for headroom.
    n2 = fft_len >> 2
    for i0 in range(n2):
        tw = _twiddles(w, i0 * modifier)
        _butterfly_at(x, i0, n2, tw, rotate, sign, first=True)
    modifier <<= 2

    # Middle stages.
    k = fft_len // 4
    while k > 4:
        n1 = n2
        n2 >>= 2
        for j in range(n2):
            tw = _twiddles(w, j * modifier)
            for i0 in range(j, fft_len, n1):
                _butterfly_at(x, i0, n2, tw, rotate, sign, first=False)
        modifier <<= 2
        k >>= 2

    # Last stage: groups of four neighbouring points, trivial twiddles.
    for base in range(0, 2 * fft_len, 8):
        xa, ya, xb, yb, xc, yc, xd, yd = x[base:base + 8]
        x[base:base + 8] = [
            _w(xa + xb + xc + xd),
            _w(ya + yb + yc + yd),
            _w(xa - xb + xc - xd),
            _w(ya - yb + yc - yd),
            _w(xa + sign * yb - xc - sign * yd),
            _w(ya - sign * xb - yc + sign * xd),
            _w(xa - sign * yb - xc + sign * yd),
            _w(ya + sign * xb - yc - sign * xd),
        ]

    return x


def radix4_butterfly_q31(data, fft_len, coef, twid_coef_modifier):
    """Forward radix-4 butterflies; returns scaled, bit-reversed Q31 output."""
    return _butterfly(data, fft_len, coef, twid_coef_modifier, inverse=False)


def radix4_butterfly_inverse_q31(data, fft_len, coef, twid_coef_modifier):
    """Inverse radix-4 butterflies; returns scaled, bit-reversed Q31 output."""
    return _butterfly(data, fft_len, coef, twid_coef_modifier, inverse=True)