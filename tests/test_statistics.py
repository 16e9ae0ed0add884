import pytest
from hypothesis import given
from hypothesis import strategies as st

from fixeddsp import statistics
from fixeddsp.arithmetic import dot_prod_q7, dot_prod_q15, dot_prod_q31


def _fixed(bits):
    return st.lists(
        st.integers(-(1 << (bits - 1)), (1 << (bits - 1)) - 1), min_size=1, max_size=30
    )


_floats = st.lists(
    st.floats(min_value=-1e6, max_value=1e6, width=32), min_size=1, max_size=30
)


def _assert_extremes(values, maximum, minimum):
    top, top_index = maximum
    low, low_index = minimum
    assert values[top_index] == top
    assert values[low_index] == low
    assert all(v <= top for v in values)
    assert all(v >= low for v in values)
    assert top not in values[:top_index]
    assert low not in values[:low_index]


@given(_fixed(8))
def test_extremes_q7_report_first_index(values):
    _assert_extremes(values, statistics.max_q7(values), statistics.min_q7(values))


@given(_fixed(16))
def test_extremes_q15_report_first_index(values):
    _assert_extremes(values, statistics.max_q15(values), statistics.min_q15(values))


@given(_fixed(32))
def test_extremes_q31_report_first_index(values):
    _assert_extremes(values, statistics.max_q31(values), statistics.min_q31(values))


@given(_floats)
def test_extremes_f32_report_first_index(values):
    _assert_extremes(values, statistics.max_f32(values), statistics.min_f32(values))


def test_max_tie_keeps_first_index():
    assert statistics.max_q15([5, 7, 7, 1]) == (7, 1)
    assert statistics.min_q7([3, -2, 4, -2]) == (-2, 1)


@given(_fixed(8))
def test_mean_q7_lies_between_extremes(values):
    assert min(values) <= statistics.mean_q7(values) <= max(values)
    assert statistics.mean_q7([values[0]] * 3) == values[0]


@given(_fixed(16))
def test_mean_q15_lies_between_extremes(values):
    assert min(values) <= statistics.mean_q15(values) <= max(values)
    assert statistics.mean_q15([values[0]] * 3) == values[0]


@given(_fixed(32))
def test_mean_q31_lies_between_extremes(values):
    assert min(values) <= statistics.mean_q31(values) <= max(values)
    assert statistics.mean_q31([values[0]] * 3) == values[0]


def test_mean_rounds_toward_zero():
    assert statistics.mean_q15([-3, 0]) == -1


@given(_floats)
def test_mean_f32_bounds(values):
    result = statistics.mean_f32(values)
    assert min(values) - 1e-3 <= result <= max(values) + 1e-3


@pytest.mark.parametrize(
    "function",
    [
        statistics.max_q7,
        statistics.min_f32,
        statistics.mean_q31,
        statistics.mean_f32,
        statistics.rms_f32,
    ],
)
def test_empty_input_raises(function):
    with pytest.raises(ValueError):
        function([])


@given(_fixed(8))
def test_power_q7_matches_self_dot_product(values):
    assert statistics.power_q7(values) == dot_prod_q7(values, values)


@given(_fixed(16))
def test_power_q15_matches_self_dot_product(values):
    assert statistics.power_q15(values) == dot_prod_q15(values, values)


@given(_fixed(32))
def test_power_q31_matches_self_dot_product(values):
    assert statistics.power_q31(values) == dot_prod_q31(values, values)


@given(_floats)
def test_power_f32_is_non_negative(values):
    assert statistics.power_f32(values) >= 0.0


def test_power_f32_exact():
    assert statistics.power_f32([0.5, 0.5]) == 0.5


@given(st.floats(min_value=-1e6, max_value=1e6, width=32), st.integers(1, 20))
def test_rms_of_constant_is_magnitude(value, count):
    assert statistics.rms_f32([value] * count) == pytest.approx(abs(value), rel=1e-5)


def test_rejects_out_of_range_sample():
    with pytest.raises(ValueError):
        statistics.max_q7([128])
    with pytest.raises(ValueError):
        statistics.power_q15([-32769])