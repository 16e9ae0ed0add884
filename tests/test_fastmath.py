import math
import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fixeddsp.fastmath import sqrt_f32


def test_perfect_square():
    assert sqrt_f32(4.0) == 2.0


def test_negative_input_raises():
    with pytest.raises(ValueError):
        sqrt_f32(-1.0)


def test_nan_input_raises():
    with pytest.raises(ValueError):
        sqrt_f32(math.nan)