"""Element-wise bitwise operations on unsigned 8, 16 and 32-bit vectors."""

import operator
from typing import Callable, Iterable, List, Sequence


def _unsigned(values: Iterable[int], bits: int) -> List[int]:
    limit = 1 << bits
    result = list(values)
    for value in result:
        if not 0 <= value < limit:
            raise ValueError(f"sample {value} does not fit in {bits} unsigned bits")
    return result


def _binary(
    src_a: Sequence[int],
    src_b: Sequence[int],
    bits: int,
    op: Callable[[int, int], int],
) -> List[int]:
    pairs = zip(_unsigned(src_a, bits), _unsigned(src_b, bits), strict=True)
    return [op(a, b) for a, b in pairs]


def _invert(src: Iterable[int], bits: int) -> List[int]:
    mask = (1 << bits) - 1
    return [mask ^ x for x in _unsigned(src, bits)]


def and_u8(src_a, src_b):
    """Bitwise AND of two unsigned 8-bit vectors."""
    return _binary(src_a, src_b, 8, operator.and_)


def and_u16(src_a, src_b):
    """Bitwise AND of two unsigned 16-bit vectors."""
    return _binary(src_a, src_b, 16, operator.and_)


def and_u32(src_a, src_b):
    """Bitwise AND of two unsigned 32-bit vectors."""
    return _binary(src_a, src_b, 32, operator.and_)


def or_u8(src_a, src_b):
    """Bitwise OR of two unsigned 8-bit vectors."""
    return _binary(src_a, src_b, 8, operator.or_)


def or_u16(src_a, src_b):
    """Bitwise OR of two unsigned 16-bit vectors."""
    return _binary(src_a, src_b, 16, operator.or_)


def or_u32(src_a, src_b):
    """Bitwise OR of two unsigned 32-bit vectors."""
    return _binary(src_a, src_b, 32, operator.or_)


def xor_u8(src_a, src_b):
    """Bitwise XOR of two unsigned 8-bit vectors."""
    return _binary(src_a, src_b, 8, operator.xor)


def xor_u16(src_a, src_b):
    """Bitwise XOR of two unsigned 16-bit vectors."""
    return _binary(src_a, src_b, 16, operator.xor)


def xor_u32(src_a, src_b):
    """Bitwise XOR of two unsigned 32-bit vectors."""
    return _binary(src_a, src_b, 32, operator.xor)


def not_u8(src):
    """Bitwise complement of an unsigned 8-bit vector."""
    return _invert(src, 8)


def not_u16(src):
    """Bitwise complement of an unsigned 16-bit vector."""
    return _invert(src, 16)


def not_u32(src):
    """Bitwise complement of an unsigned 32-bit vector."""
    return _invert(src, 32)