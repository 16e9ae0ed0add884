"""Copying and filling sample vectors."""

from typing import List

from .arithmetic import _check, _f32, _fixed


def _count(count: int) -> int:
    if count < 0:
        raise ValueError(f"count {count} must not be negative")
    return count


def copy_q7(src):
    """Return a copy of a Q7 vector."""
    return _fixed(src, 8)


def copy_q15(src):
    """Return a copy of a Q15 vector."""
    return _fixed(src, 16)


def copy_q31(src):
    """Return a copy of a Q31 vector."""
    return _fixed(src, 32)


def copy_f32(src):
    """Return a copy of a float32 vector."""
    return list(src)


def _fill(value: int, count: int, bits: int) -> List[int]:
    return [_check(value, bits, "value")] * _count(count)


def fill_q7(value, count):
    """Return ``count`` copies of a Q7 value."""
    return _fill(value, count, 8)


def fill_q15(value, count):
    """Return ``count`` copies of a Q15 value."""
    return _fill(value, count, 16)


def fill_q31(value, count):
    """Return ``count`` copies of a Q31 value."""
    return _fill(value, count, 32)


def fill_f32(value, count):
    """Return ``count`` copies of a float32 value."""
    return [_f32(value)] * _count(count)