"""Saturating integer primitives shared by the fixed-point kernels.

Values are plain Python integers holding signed two's-complement quantities
of the stated width.  Packed SIMD-style words (``qadd8`` and friends) are
unsigned 32-bit integers made of signed lanes.
"""

Q7_MIN, Q7_MAX = -0x80, 0x7F
Q15_MIN, Q15_MAX = -0x8000, 0x7FFF
Q31_MIN, Q31_MAX = -0x80000000, 0x7FFFFFFF
Q63_MIN, Q63_MAX = -0x8000000000000000, 0x7FFFFFFFFFFFFFFF

_WORD_MASK = 0xFFFFFFFF


def _wrap(value: int, bits: int) -> int:
    """Reinterpret the low ``bits`` bits of ``value`` as a signed integer."""
    value &= (1 << bits) - 1
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def ssat(value: int, bits: int) -> int:
    """Saturate ``value`` to a signed ``bits``-bit range.

    Widths outside 1..32 leave the value untouched.
    """
    if 1 <= bits <= 32:
        high = (1 << (bits - 1)) - 1
        low = -1 - high
        return max(low, min(high, value))
    return value


def clip_q63_to_q31(value: int) -> int:
    """Saturate a 64-bit accumulator to the signed 32-bit range."""
    return max(Q31_MIN, min(Q31_MAX, value))


def clz(value: int) -> int:
    """Count leading zero bits of a 32-bit word; 32 for zero."""
    return 32 - (value & _WORD_MASK).bit_length()


def _lanewise(x: int, y: int, width: int, subtract: bool) -> int:
    mask = (1 << width) - 1
    result = 0
    for shift in range(0, 32, width):
        a = _wrap(x >> shift, width)
        b = _wrap(y >> shift, width)
        lane = ssat(a - b if subtract else a + b, width)
        result |= (lane & mask) << shift
    return result


def qadd8(x: int, y: int) -> int:
    """Add four signed byte lanes with saturation."""
    return _lanewise(x, y, 8, subtract=False)


def qadd16(x: int, y: int) -> int:
    """Add two signed halfword lanes with saturation."""
    return _lanewise(x, y, 16, subtract=False)


def qadd(x: int, y: int) -> int:
    """Saturating signed 32-bit addition."""
    return clip_q63_to_q31(_wrap(x, 32) + _wrap(y, 32))


def qsub8(x: int, y: int) -> int:
    """Subtract four signed byte lanes with saturation."""
    return _lanewise(x, y, 8, subtract=True)


def qsub16(x: int, y: int) -> int:
    """Subtract two signed halfword lanes with saturation."""
    return _lanewise(x, y, 16, subtract=True)


def qsub(x: int, y: int) -> int:
    """Saturating signed 32-bit subtraction."""
    return clip_q63_to_q31(_wrap(x, 32) - _wrap(y, 32))