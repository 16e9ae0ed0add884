"""Radix-4 decimation-in-frequency butterflies for float32 complex data.

Input is a flat sequence of ``2 * fft_len`` interleaved ``(real, imag)``
samples.  The forward transform is unscaled; the inverse multiplies by
``one_by_fft_len``.  Both leave their output in bit-reversed order.  The
twiddle table holds interleaved ``(cos, sin)`` pairs; ``twid_coef_modifier``
is the stride into it.  Every operation rounds to single precision.
"""

from typing import Callable, List, Sequence, Tuple

from .arithmetic import _f32

_Rotate = Callable[[float, float, float, float], Tuple[float, float]]


def _add(a: float, b: float) -> float:
    return _f32(a + b)


def _sub(a: float, b: float) -> float:
    return _f32(a - b)


def _mul(a: float, b: float) -> float:
    return _f32(a * b)


def _rotate_forward(re: float, im: float, co: float, si: float) -> Tuple[float, float]:
    return _add(_mul(re, co), _mul(im, si)), _sub(_mul(im, co), _mul(re, si))


def _rotate_inverse(re: float, im: float, co: float, si: float) -> Tuple[float, float]:
    return _sub(_mul(re, co), _mul(im, si)), _add(_mul(im, co), _mul(re, si))


def _is_power_of_four(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0 and value.bit_length() % 2 == 1


def _validate(data_len: int, fft_len: int, coef_len: int, modifier: int) -> None:
    if fft_len < 4 or not _is_power_of_four(fft_len):
        raise ValueError(f"fft_len {fft_len} must be a power of four of at least 4")
    if data_len != 2 * fft_len:
        raise ValueError(f"expected {2 * fft_len} interleaved values, got {data_len}")
    if modifier < 1:
        raise ValueError(f"twid_coef_modifier {modifier} must be positive")
    needed = 6 * (fft_len // 4 - 1) * modifier + 2
    if coef_len < needed:
        raise ValueError(f"twiddle table holds {coef_len} values, {needed} are needed")


def _floats(values: Sequence[float]) -> List[float]:
    return [_f32(float(v)) for v in values]


def _twiddled_stages(
    x: List[float],
    fft_len: int,
    w: List[float],
    modifier: int,
    rotate: _Rotate,
    sign: int,
    stop: int,
) -> int:
    """Run the stages that use twiddles while the span exceeds ``stop``.

    Returns the span ``n2`` left after the last stage run.
    """
    n2 = fft_len
    k = fft_len
    while k > stop:
        n1 = n2
        n2 >>= 2
        for j in range(n2):
            ia1 = j * modifier
            co1, si1 = w[2 * ia1], w[2 * ia1 + 1]
            co2, si2 = w[4 * ia1], w[4 * ia1 + 1]
            co3, si3 = w[6 * ia1], w[6 * ia1 + 1]

            for i0 in range(j, fft_len, n1):
                i1, i2, i3 = i0 + n2, i0 + 2 * n2, i0 + 3 * n2

                r1, r2 = _add(x[2 * i0], x[2 * i2]), _sub(x[2 * i0], x[2 * i2])
                s1 = _add(x[2 * i0 + 1], x[2 * i2 + 1])
                s2 = _sub(x[2 * i0 + 1], x[2 * i2 + 1])
                t1 = _add(x[2 * i1], x[2 * i3])
                t2 = _add(x[2 * i1 + 1], x[2 * i3 + 1])

                x[2 * i0], x[2 * i0 + 1] = _add(r1, t1), _add(s1, t2)
                r1, s1 = _sub(r1, t1), _sub(s1, t2)

                t1 = _sub(x[2 * i1 + 1], x[2 * i3 + 1])
                t2 = _sub(x[2 * i1], x[2 * i3])

                x[2 * i1], x[2 * i1 + 1] = rotate(r1, s1, co2, si2)

                r1, r2 = _add(r2, sign * t1), _sub(r2, sign * t1)
                s1, s2 = _sub(s2, sign * t2), _add(s2, sign * t2)

                x[2 * i2], x[2 * i2 + 1] = rotate(r1, s1, co1, si1)
                x[2 * i3], x[2 * i3 + 1] = rotate(r2, s2, co3, si3)
        modifier <<= 2
        k >>= 2
    return n2


def radix4_butterfly_f32(data, fft_len, coef, twid_coef_modifier):
    """Forward radix-4 butterflies; returns unscaled, bit-reversed output."""
    x = _floats(data)
    w = _floats(coef)
    _validate(len(x), fft_len, len(w), twid_coef_modifier)
    _twiddled_stages(x, fft_len, w, twid_coef_modifier, _rotate_forward, 1, stop=1)
    return x


def radix4_butterfly_inverse_f32(data, fft_len, coef, twid_coef_modifier, one_by_fft_len):
    """Inverse radix-4 butterflies; output is scaled and bit-reversed."""
    x = _floats(data)
    w = _floats(coef)
    _validate(len(x), fft_len, len(w), twid_coef_modifier)
    scale = _f32(one_by_fft_len)
    n2 = _twiddled_stages(x, fft_len, w, twid_coef_modifier, _rotate_inverse, -1, stop=4)

    # Last stage: trivial twiddles, with the scaling folded in.
    n1 = n2
    n2 >>= 2
    for i0 in range(0, fft_len - n1 + 1, n1):
        i1, i2, i3 = i0 + n2, i0 + 2 * n2, i0 + 3 * n2

        r1, r2 = _add(x[2 * i0], x[2 * i2]), _sub(x[2 * i0], x[2 * i2])
        s1 = _add(x[2 * i0 + 1], x[2 * i2 + 1])
        s2 = _sub(x[2 * i0 + 1], x[2 * i2 + 1])
        t1 = _add(x[2 * i1], x[2 * i3])
        t2 = _add(x[2 * i1 + 1], x[2 * i3 + 1])

        x[2 * i0] = _mul(_add(r1, t1), scale)
        x[2 * i0 + 1] = _mul(_add(s1, t2), scale)
        r1, s1 = _sub(r1, t1), _sub(s1, t2)

        t1 = _sub(x[2 * i1 + 1], x[2 * i3 + 1])
        t2 = _sub(x[2 * i1], x[2 * i3])

        x[2 * i1], x[2 * i1 + 1] = _mul(r1, scale), _mul(s1, scale)

        r1, r2 = _sub(r2, t1), _add(r2, t1)
        s1, s2 = _add(s2, t2), _sub(s2, t2)

        x[2 * i2], x[2 * i2 + 1] = _mul(r1, scale), _mul(s1, scale)
        x[2 * i3], x[2 * i3 + 1] = _mul(r2, scale), _mul(s2, scale)

    return x