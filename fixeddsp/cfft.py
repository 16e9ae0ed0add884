"""Radix-4 complex FFT driven by a prepared plan.

A plan ties a supported transform length to a shared twiddle table and
bit-reversal table built for the largest (4096-point) transform.  Shorter
transforms stride through the same tables.  The twiddle table holds
interleaved ``(cos, sin)`` pairs of the sample type being transformed.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

from .bitreversal import bitreversal_f32, bitreversal_q15, bitreversal_q31
from .radix4_f32 import radix4_butterfly_f32, radix4_butterfly_inverse_f32
from .radix4_q15 import radix4_butterfly_inverse_q15, radix4_butterfly_q15
from .radix4_q31 import radix4_butterfly_inverse_q31, radix4_butterfly_q31

# fft_len -> (stride into the shared tables, first bit-reversal table entry)
_SUPPORTED = {
    4096: (1, 0),
    1024: (4, 3),
    256: (16, 15),
    64: (64, 63),
    16: (256, 255),
}


@dataclass(frozen=True)
class Radix4Parameters:
    """Table strides and scaling for one supported transform length."""

    fft_len: int
    twid_coef_modifier: int
    bit_rev_factor: int
    bit_rev_offset: int
    one_by_fft_len: float


def radix4_parameters(fft_len):
    """Return the parameters for ``fft_len``; unsupported lengths raise ValueError."""
    try:
        modifier, offset = _SUPPORTED[fft_len]
    except (KeyError, TypeError):
        supported = ", ".join(str(n) for n in sorted(_SUPPORTED))
        raise ValueError(
            f"fft_len {fft_len} is not supported; use one of {supported}"
        ) from None
    return Radix4Parameters(
        fft_len=fft_len,
        twid_coef_modifier=modifier,
        bit_rev_factor=modifier,
        bit_rev_offset=offset,
        one_by_fft_len=1.0 / fft_len,
    )


@dataclass(frozen=True)
class Radix4Plan:
    """Everything a radix-4 transform of one length and direction needs."""

    fft_len: int
    twiddle: Tuple
    bit_rev_table: Tuple[int, ...]
    inverse: bool
    bit_reverse: bool
    twid_coef_modifier: int
    bit_rev_factor: int
    one_by_fft_len: float

    @classmethod
    def from_tables(
        cls,
        fft_len: int,
        twiddle: Sequence,
        bit_rev_table: Sequence[int],
        inverse: bool = False,
        bit_reverse: bool = True,
    ) -> "Radix4Plan":
        """Build a plan from the full-size twiddle and bit-reversal tables."""
        params = radix4_parameters(fft_len)
        if len(bit_rev_table) <= params.bit_rev_offset:
            raise ValueError(
                f"bit-reversal table holds {len(bit_rev_table)} entries, "
                f"entry {params.bit_rev_offset} is needed"
            )
        return cls(
            fft_len=fft_len,
            twiddle=tuple(twiddle),
            bit_rev_table=tuple(bit_rev_table[params.bit_rev_offset:]),
            inverse=bool(inverse),
            bit_reverse=bool(bit_reverse),
            twid_coef_modifier=params.twid_coef_modifier,
            bit_rev_factor=params.bit_rev_factor,
            one_by_fft_len=params.one_by_fft_len,
        )


def cfft_radix4_q15(plan, data):
    """Transform interleaved Q15 complex samples according to ``plan``."""
    butterfly = radix4_butterfly_inverse_q15 if plan.inverse else radix4_butterfly_q15
    result = butterfly(data, plan.fft_len, plan.twiddle, plan.twid_coef_modifier)
    if plan.bit_reverse:
        result = bitreversal_q15(
            result, plan.fft_len, plan.bit_rev_factor, plan.bit_rev_table
        )
    return result


def cfft_radix4_q31(plan, data):
    """Transform interleaved Q31 complex samples according to ``plan``."""
    butterfly = radix4_butterfly_inverse_q31 if plan.inverse else radix4_butterfly_q31
    result = butterfly(data, plan.fft_len, plan.twiddle, plan.twid_coef_modifier)
    if plan.bit_reverse:
        result = bitreversal_q31(
            result, plan.fft_len, plan.bit_rev_factor, plan.bit_rev_table
        )
    return result


def cfft_radix4_f32(plan, data):
    """Transform interleaved float32 complex samples according to ``plan``."""
    if plan.inverse:
        result = radix4_butterfly_inverse_f32(
            data, plan.fft_len, plan.twiddle, plan.twid_coef_modifier, plan.one_by_fft_len
        )
    else:
        result = radix4_butterfly_f32(
            data, plan.fft_len, plan.twiddle, plan.twid_coef_modifier
        )
    if plan.bit_reverse:
        result = bitreversal_f32(
            result, plan.fft_len, plan.bit_rev_factor, plan.bit_rev_table
        )
    return result