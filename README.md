# fixeddsp

Signal-processing building blocks for Q7, Q15 and Q31 fixed-point data and
for single- and double-precision floating-point data. Fixed-point results
behave like 32-bit fixed-point hardware: values saturate, shift and wrap the
way such hardware does. Float32 results are rounded to single precision.

Samples are plain Python `int` and `float` values. Every function takes
sequences and returns a new list (or a single value); inputs are never
modified. Fixed-point samples that do not fit their type raise `ValueError`,
as do vectors of mismatched length.

## Installation

```
pip install fixeddsp
```

To run the test suite, install the `test` extra and run pytest:

```
pip install "fixeddsp[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `fixeddsp.intrinsics` | `ssat`, `clip_q63_to_q31`, `clz`, `qadd`, `qsub`, `qadd8`, `qadd16`, `qsub8`, `qsub16` |
| `fixeddsp.arithmetic` | `abs_*`, `add_*`, `sub_*`, `mult_*`, `negate_*`, `offset_*`, `clip_*`, `dot_prod_*` and `scale_*` for `q7`, `q15`, `q31` and `f32`; `shift_q7`, `shift_q15`, `shift_q31` |
| `fixeddsp.bitwise` | `and_*`, `or_*`, `xor_*`, `not_*` for `u8`, `u16` and `u32` |
| `fixeddsp.support` | `copy_*` and `fill_*` for `q7`, `q15`, `q31` and `f32` |
| `fixeddsp.fastmath` | `sqrt_f32` |
| `fixeddsp.complexmath` | `cmplx_mag_f32`, `cmplx_mag_f64` on interleaved complex data |
| `fixeddsp.statistics` | `max_*`, `min_*`, `mean_*`, `power_*` for `q7`, `q15`, `q31` and `f32`; `rms_f32` |
| `fixeddsp.bitreversal` | `bitreversal_q15`, `bitreversal_q31`, `bitreversal_f32` |
| `fixeddsp.radix4_q15`, `fixeddsp.radix4_q31`, `fixeddsp.radix4_f32` | radix-4 butterfly stages, forward and inverse |
| `fixeddsp.cfft` | `Radix4Parameters`, `radix4_parameters`, `Radix4Plan` and `cfft_radix4_q15`, `cfft_radix4_q31`, `cfft_radix4_f32` |

## Examples

Saturating fixed-point arithmetic:

```python
from fixeddsp.arithmetic import add_q15, negate_q7
from fixeddsp.intrinsics import ssat

add_q15([30000, -5], [10000, 5])   # [32767, 0]
negate_q7([-128, 3])               # [127, -3]
ssat(200, 8)                       # 127
```

`max_*` and `min_*` return the value together with its index; on ties the
first index wins. Fixed-point means round toward zero. Empty input raises
`ValueError`.

```python
from fixeddsp.statistics import max_q15, mean_q15

max_q15([3, 9, -2, 9])   # (9, 1)
mean_q15([1, 2, 4])      # 2
```

`sqrt_f32` raises `ValueError` for negative or NaN input.

## Complex FFTs

Complex data is interleaved: `[re0, im0, re1, im1, ...]`, so an `n`-point
transform takes `2 * n` values. Supported lengths are 16, 64, 256, 1024 and
4096; `radix4_parameters(n)` returns the `Radix4Parameters` for a length
(table stride, bit-reversal offset, `1 / n`) and raises `ValueError` for any
other length.

A `Radix4Plan` is built with `Radix4Plan.from_tables(fft_len, twiddle,
bit_rev_table, inverse=False, bit_reverse=True)`. Both tables are the ones for
a 4096-point transform; shorter transforms stride through them:

* `twiddle` holds interleaved `(cos, sin)` pairs of angle `2 * pi * i / 4096`
  in the sample type being transformed (floats, or Q15/Q31 integers).
* `bit_rev_table[k]` is the 12-bit reversal of `2 * (k + 1)`.

```python
import math

from fixeddsp.cfft import Radix4Plan, cfft_radix4_f32

twiddle = []
for i in range(3072):
    angle = 2 * math.pi * i / 4096
    twiddle += [math.cos(angle), math.sin(angle)]
bit_rev_table = [int(f"{2 * (k + 1):012b}"[::-1], 2) for k in range(1023)]

plan = Radix4Plan.from_tables(16, twiddle, bit_rev_table)
impulse = [1.0, 0.0] + [0.0] * 30
spectrum = cfft_radix4_f32(plan, impulse)   # every bin is (1.0, 0.0)
```

The float32 forward transform is unscaled and the inverse multiplies by
`1 / n`. The Q15 and Q31 transforms scale their output down by `n` in both
directions, so results stay inside the fixed-point range. With
`bit_reverse=False` the output is left in bit-reversed order.

The butterfly functions in `radix4_q15`, `radix4_q31` and `radix4_f32` and
the `bitreversal_*` functions can also be called directly with an explicit
stride.

## What the package does not provide

* No twiddle or bit-reversal tables are shipped; the caller builds them, as
  in the example above.
* There is no fixed-point square root, so there is no `cmplx_mag_q15`,
  `cmplx_mag_q31`, `rms_q15` or `rms_q31`; magnitude and RMS are available
  for floating-point data only.
* There is no command-line tool; this is a library only.