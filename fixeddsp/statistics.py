"""Statistics over Q7, Q15, Q31 and float32 sample vectors.

``max_*`` and ``min_*`` return ``(value, index)`` with the first index on ties.
"""

from typing import Callable, List, Sequence, Tuple

from .arithmetic import _f32, _fixed
from .intrinsics import _wrap
from .fastmath import sqrt_f32


def _nonempty(values: List) -> List:
    if not values:
        raise ValueError("the input must hold at least one sample")
    return values


def _extreme(values: List, better: Callable[[object, object], bool]) -> Tuple:
    best, best_index = _nonempty(values)[0], 0
    for index, value in enumerate(values[1:], start=1):
        if better(value, best):
            best, best_index = value, index
    return best, best_index


def _greater(candidate, current) -> bool:
    return current < candidate


def _smaller(candidate, current) -> bool:
    return current > candidate


def max_q7(src):
    """Largest Q7 sample and its index."""
    return _extreme(_fixed(src, 8), _greater)


def max_q15(src):
    """Largest Q15 sample and its index."""
    return _extreme(_fixed(src, 16), _greater)


def max_q31(src):
    """Largest Q31 sample and its index."""
    return _extreme(_fixed(src, 32), _greater)


def max_f32(src):
    """Largest float32 sample and its index."""
    return _extreme(list(src), _greater)


def min_q7(src):
    """Smallest Q7 sample and its index."""
    return _extreme(_fixed(src, 8), _smaller)


def min_q15(src):
    """Smallest Q15 sample and its index."""
    return _extreme(_fixed(src, 16), _smaller)


def min_q31(src):
    """Smallest Q31 sample and its index."""
    return _extreme(_fixed(src, 32), _smaller)


def min_f32(src):
    """Smallest float32 sample and its index."""
    return _extreme(list(src), _smaller)


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def _mean_fixed(values: List[int], acc_bits: int) -> int:
    total = _wrap(sum(_nonempty(values)), acc_bits)
    return _trunc_div(total, len(values))


def mean_q7(src):
    """Mean of Q7 samples, rounded toward zero."""
    return _mean_fixed(_fixed(src, 8), 32)


def mean_q15(src):
    """Mean of Q15 samples, rounded toward zero."""
    return _mean_fixed(_fixed(src, 16), 32)


def mean_q31(src):
    """Mean of Q31 samples, rounded toward zero."""
    return _mean_fixed(_fixed(src, 32), 64)


def _f32_sum(values: Sequence[float]) -> float:
    total = 0.0
    for value in values:
        total = _f32(total + value)
    return total


def mean_f32(src):
    """Mean of float32 samples with single-precision accumulation."""
    values = _nonempty(list(src))
    return _f32(_f32_sum(values) / len(values))


def power_q7(src):
    """Sum of squares of Q7 samples in a wrapping 32-bit accumulator."""
    return _wrap(sum(x * x for x in _fixed(src, 8)), 32)


def power_q15(src):
    """Sum of squares of Q15 samples in a wrapping 64-bit accumulator."""
    return _wrap(sum(x * x for x in _fixed(src, 16)), 64)


def power_q31(src):
    """Sum of squares of Q31 samples, each shifted down by 14 bits."""
    return _wrap(sum((x * x) >> 14 for x in _fixed(src, 32)), 64)


def power_f32(src):
    """Sum of squares of float32 samples."""
    return _f32_sum([_f32(x * x) for x in src])


def rms_f32(src):
    """Root mean square of float32 samples."""
    values = _nonempty(list(src))
    total = _f32_sum([_f32(x * x) for x in values])
    return sqrt_f32(_f32(total / _f32(len(values))))