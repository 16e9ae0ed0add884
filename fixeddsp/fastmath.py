"""Fast math helpers."""

import math

from .arithmetic import _f32


def sqrt_f32(value):
    """Single-precision square root; negative or NaN input raises ValueError."""
    if not value >= 0.0:
        raise ValueError(f"cannot take the square root of {value}")
    return _f32(math.sqrt(_f32(value)))