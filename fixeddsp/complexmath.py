"""Magnitude of interleaved complex vectors."""

import math
from typing import Iterable, List, Tuple

from .arithmetic import _f32
from .fastmath import sqrt_f32


def _interleaved(src: Iterable[float]) -> List[Tuple[float, float]]:
    values = list(src)
    if len(values) % 2:
        raise ValueError("interleaved complex data must have an even length")
    parts = iter(values)
    return list(zip(parts, parts))


def cmplx_mag_f32(src):
    """Magnitudes of interleaved (real, imag) float32 samples.

    A sum that is not a number yields 0.0.
    """
    result = []
    for real, imag in _interleaved(src):
        total = _f32(_f32(real * real) + _f32(imag * imag))
        try:
            result.append(sqrt_f32(total))
        except ValueError:
            result.append(0.0)
    return result


def cmplx_mag_f64(src):
    """Magnitudes of interleaved (real, imag) double-precision samples."""
    return [math.sqrt(real * real + imag * imag) for real, imag in _interleaved(src)]