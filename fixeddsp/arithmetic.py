"""Element-wise arithmetic on Q7, Q15, Q31 and float32 sample vectors.

Each function takes sequences of samples and returns a new list; integer
kernels saturate the way fixed-point hardware does.
"""

import math
import struct
from functools import reduce
from typing import Iterable, List, Sequence

from .intrinsics import (
    Q31_MAX,
    _wrap,
    clip_q63_to_q31,
    qadd,
    qsub,
    ssat,
)


def _f32(value: float) -> float:
    """Round a Python float to single precision."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _check(value: int, bits: int, name: str = "sample") -> int:
    low = -(1 << (bits - 1))
    high = (1 << (bits - 1)) - 1
    if not low <= value <= high:
        raise ValueError(f"{name} {value} does not fit in {bits} signed bits")
    return value


def _fixed(src: Iterable[int], bits: int) -> List[int]:
    return [_check(x, bits) for x in src]


def _pairs(src_a: Sequence[int], src_b: Sequence[int], bits: int):
    return zip(_fixed(src_a, bits), _fixed(src_b, bits), strict=True)


def _float_pairs(src_a: Sequence[float], src_b: Sequence[float]):
    return zip(src_a, src_b, strict=True)


# --- absolute value and negation -------------------------------------------------

def _abs(src: Iterable[int], bits: int) -> List[int]:
    top = (1 << (bits - 1)) - 1
    return [x if x > 0 else (top if x == -top - 1 else -x) for x in _fixed(src, bits)]


def abs_q7(src):
    """Absolute value of Q7 samples; -128 saturates to 127."""
    return _abs(src, 8)


def abs_q15(src):
    """Absolute value of Q15 samples; -32768 saturates to 32767."""
    return _abs(src, 16)


def abs_q31(src):
    """Absolute value of Q31 samples; the minimum saturates to the maximum."""
    return _abs(src, 32)


def abs_f32(src):
    """Absolute value of float32 samples."""
    return [_f32(abs(x)) for x in src]


def _negate(src: Iterable[int], bits: int) -> List[int]:
    top = (1 << (bits - 1)) - 1
    return [top if x == -top - 1 else -x for x in _fixed(src, bits)]


def negate_q7(src):
    """Negate Q7 samples with saturation."""
    return _negate(src, 8)


def negate_q15(src):
    """Negate Q15 samples with saturation."""
    return _negate(src, 16)


def negate_q31(src):
    """Negate Q31 samples with saturation."""
    return _negate(src, 32)


def negate_f32(src):
    """Negate float32 samples."""
    return [_f32(-x) for x in src]


# --- addition and subtraction ------------------------------------------------------

def add_q7(src_a, src_b):
    """Saturating element-wise sum of Q7 vectors."""
    return [ssat(a + b, 8) for a, b in _pairs(src_a, src_b, 8)]


def add_q15(src_a, src_b):
    """Saturating element-wise sum of Q15 vectors."""
    return [ssat(a + b, 16) for a, b in _pairs(src_a, src_b, 16)]


def add_q31(src_a, src_b):
    """Saturating element-wise sum of Q31 vectors."""
    return [qadd(a, b) for a, b in _pairs(src_a, src_b, 32)]


def add_f32(src_a, src_b):
    """Element-wise sum of float32 vectors."""
    return [_f32(a + b) for a, b in _float_pairs(src_a, src_b)]


def sub_q7(src_a, src_b):
    """Saturating element-wise difference of Q7 vectors."""
    return [ssat(a - b, 8) for a, b in _pairs(src_a, src_b, 8)]


def sub_q15(src_a, src_b):
    """Saturating element-wise difference of Q15 vectors."""
    return [ssat(a - b, 16) for a, b in _pairs(src_a, src_b, 16)]


def sub_q31(src_a, src_b):
    """Saturating element-wise difference of Q31 vectors."""
    return [qsub(a, b) for a, b in _pairs(src_a, src_b, 32)]


def sub_f32(src_a, src_b):
    """Element-wise difference of float32 vectors."""
    return [_f32(a - b) for a, b in _float_pairs(src_a, src_b)]


# --- multiplication ----------------------------------------------------------------

def mult_q7(src_a, src_b):
    """Element-wise Q7 product, saturated."""
    return [ssat((a * b) >> 7, 8) for a, b in _pairs(src_a, src_b, 8)]


def mult_q15(src_a, src_b):
    """Element-wise Q15 product, saturated."""
    return [ssat((a * b) >> 15, 16) for a, b in _pairs(src_a, src_b, 16)]


def mult_q31(src_a, src_b):
    """Element-wise Q31 product, saturated."""
    result = []
    for a, b in _pairs(src_a, src_b, 32):
        out = ssat((a * b) >> 32, 31)
        result.append(_wrap(out << 1, 32))
    return result


def mult_f32(src_a, src_b):
    """Element-wise float32 product."""
    return [_f32(a * b) for a, b in _float_pairs(src_a, src_b)]


# --- offset and clipping -----------------------------------------------------------

def offset_q7(src, offset):
    """Add a Q7 constant to every sample with saturation."""
    _check(offset, 8, "offset")
    return [ssat(x + offset, 8) for x in _fixed(src, 8)]


def offset_q15(src, offset):
    """Add a Q15 constant to every sample with saturation."""
    _check(offset, 16, "offset")
    return [ssat(x + offset, 16) for x in _fixed(src, 16)]


def offset_q31(src, offset):
    """Add a Q31 constant to every sample with saturation."""
    _check(offset, 32, "offset")
    return [clip_q63_to_q31(x + offset) for x in _fixed(src, 32)]


def offset_f32(src, offset):
    """Add a float32 constant to every sample."""
    return [_f32(x + offset) for x in src]


def _clip(values: Iterable, low, high) -> list:
    result = []
    for x in values:
        if x > high:
            result.append(high)
        elif x < low:
            result.append(low)
        else:
            result.append(x)
    return result


def clip_q7(src, low, high):
    """Clamp Q7 samples to ``[low, high]``."""
    return _clip(_fixed(src, 8), _check(low, 8, "low"), _check(high, 8, "high"))


def clip_q15(src, low, high):
    """Clamp Q15 samples to ``[low, high]``."""
    return _clip(_fixed(src, 16), _check(low, 16, "low"), _check(high, 16, "high"))


def clip_q31(src, low, high):
    """Clamp Q31 samples to ``[low, high]``."""
    return _clip(_fixed(src, 32), _check(low, 32, "low"), _check(high, 32, "high"))


def clip_f32(src, low, high):
    """Clamp float32 samples to ``[low, high]``."""
    return _clip(src, low, high)


# --- dot products ------------------------------------------------------------------

def dot_prod_q7(src_a, src_b):
    """Dot product of Q7 vectors in a wrapping 32-bit accumulator."""
    return _wrap(sum(a * b for a, b in _pairs(src_a, src_b, 8)), 32)


def dot_prod_q15(src_a, src_b):
    """Dot product of Q15 vectors in a wrapping 64-bit accumulator."""
    return _wrap(sum(a * b for a, b in _pairs(src_a, src_b, 16)), 64)


def dot_prod_q31(src_a, src_b):
    """Dot product of Q31 vectors, each product shifted down by 14 bits."""
    return _wrap(sum((a * b) >> 14 for a, b in _pairs(src_a, src_b, 32)), 64)


def dot_prod_f32(src_a, src_b):
    """Dot product of float32 vectors with single-precision accumulation."""
    return reduce(
        lambda acc, pair: _f32(acc + _f32(pair[0] * pair[1])),
        _float_pairs(src_a, src_b),
        0.0,
    )


# --- scaling and shifting ----------------------------------------------------------

def _scale_small(src, scale_fract, shift, bits):
    _check(scale_fract, bits, "scale_fract")
    _check(shift, 8, "shift")
    k_shift = _wrap(bits - 1 - shift, 8)
    if k_shift < 0:
        raise ValueError(f"shift {shift} exceeds {bits - 1} for {bits}-bit scaling")
    return [ssat((x * scale_fract) >> k_shift, bits) for x in _fixed(src, bits)]


def scale_q7(src, scale_fract, shift):
    """Multiply Q7 samples by ``scale_fract * 2**shift`` with saturation."""
    return _scale_small(src, scale_fract, shift, 8)


def scale_q15(src, scale_fract, shift):
    """Multiply Q15 samples by ``scale_fract * 2**shift`` with saturation."""
    return _scale_small(src, scale_fract, shift, 16)


def scale_q31(src, scale_fract, shift):
    """Multiply Q31 samples by ``scale_fract * 2**shift`` with saturation."""
    _check(scale_fract, 32, "scale_fract")
    _check(shift, 8, "shift")
    k_shift = _wrap(shift + 1, 8)
    result = []
    for x in _fixed(src, 32):
        product = (x * scale_fract) >> 32
        if k_shift >= 0:
            out = _wrap(product << k_shift, 32)
            if product != (out >> k_shift):
                out = Q31_MAX ^ (product >> 31)
        else:
            out = product >> -k_shift
        result.append(out)
    return result


def scale_f32(src, scale):
    """Multiply float32 samples by a constant."""
    return [_f32(x * scale) for x in src]


def _shift(src, shift_bits, bits, saturate):
    _check(shift_bits, 8, "shift_bits")
    values = _fixed(src, bits)
    if shift_bits >= 0:
        return [saturate(x << shift_bits) for x in values]
    return [x >> -shift_bits for x in values]


def shift_q7(src, shift_bits):
    """Shift Q7 samples left (positive) with saturation or right (negative)."""
    return _shift(src, shift_bits, 8, lambda v: ssat(v, 8))


def shift_q15(src, shift_bits):
    """Shift Q15 samples left (positive) with saturation or right (negative)."""
    return _shift(src, shift_bits, 16, lambda v: ssat(v, 16))


def shift_q31(src, shift_bits):
    """Shift Q31 samples left (positive) with saturation or right (negative)."""
    return _shift(src, shift_bits, 32, clip_q63_to_q31)