import math

import pytest

from hydrixkit import floatmath as fm


def test_basic_arithmetic():
    assert fm.add(1.5, 2.25) == 1.5 + 2.25
    assert fm.subtract(1.5, 2.25) == 1.5 - 2.25
    assert fm.multiply(1.5, 2.25) == 1.5 * 2.25
    assert fm.divide(1.5, 2.25) == 1.5 / 2.25


def test_divide_by_zero_is_ieee():
    assert fm.divide(1.0, 0.0) == math.inf
    assert fm.divide(-1.0, 0.0) == -math.inf
    assert math.isnan(fm.divide(0.0, 0.0))


@pytest.mark.parametrize("x", [-2.5, 0.0, 3.75])
def test_absolute(x):
    assert fm.absolute(x) == abs(x)


def test_min_max_clamp():
    assert fm.minimum(1.0, 2.0) == 1.0
    assert fm.maximum(1.0, 2.0) == 2.0
    assert fm.clamp(-4.0, -1.0, 1.0) == -1.0
    assert fm.clamp(4.0, -1.0, 1.0) == 1.0
    assert fm.clamp(0.5, -1.0, 1.0) == 0.5


def test_truncated_int():
    assert fm.to_truncated_int(-2.7) == -2


def test_sign():
    assert fm.sign(-0.1) == -1
    assert fm.sign(0.0) == 0
    assert fm.sign(0.1) == 1


def test_power_counts_up_to_ceiling():
    assert fm.power(3.0, 2.5) == fm.power(3.0, 3)
    assert fm.power(3.0, 0) == 1.0
    assert fm.power(3.0, -1) == 1.0


@pytest.mark.parametrize("x", [2.0, 9.0, 100.0])
def test_square_root(x):
    assert fm.square_root(x) == pytest.approx(math.sqrt(x), rel=1e-9)


def test_square_root_of_zero_is_nan():
    result = fm.square_root(0.0)
    assert str(result) == "nan"


def test_cube_root():
    assert fm.cube_root(27.0) == pytest.approx(27.0 ** (1 / 3), rel=1e-9)


def test_log_near_one():
    assert fm.log(1.0) == 0.0
    assert fm.log(1.1) == pytest.approx(math.log(1.1), abs=1e-9)


def test_log_ratios():
    assert fm.log10(1.2) == fm.log(1.2) / fm.log(10)
    assert fm.log2(1.2) == fm.log(1.2) / fm.log(2)
    assert fm.log1p(0.2) == fm.log(1.2)


@pytest.mark.parametrize("x", [-0.3, 0.0, 0.4])
def test_exponential_relations(x):
    assert fm.expm1(x) == fm.exponential(x) - 1
    assert fm.hyperbolic_tangent(x) == fm.hyperbolic_sine(x) / fm.hyperbolic_cosine(x)


@pytest.mark.parametrize("x", [0.1, 0.3, 0.5])
def test_trig_relations(x):
    assert fm.tangent(x) == fm.sine(x) / fm.cosine(x)
    assert fm.arc_cosine(x) == pytest.approx(math.pi / 2 - fm.arc_sine(x))
    assert fm.arc_tangent2(x, 1.0) == fm.arc_tangent(x)


def test_arc_tangent_series_small_values():
    assert fm.arc_tangent(0.2) == pytest.approx(math.atan(0.2), abs=1e-9)


@pytest.mark.parametrize("x", [1.25, 3.5, 7.75])
def test_floor_and_ceiling_definitions(x):
    assert fm.floor(x) + int(x) == pytest.approx(x)
    assert fm.ceiling(x) + x == pytest.approx(int(x) + 1)


def test_round_and_truncate_choose_branch():
    assert fm.round_value(2.25) == fm.floor(2.25)
    assert fm.round_value(2.75) == fm.ceiling(2.75)
    assert fm.truncate(-2.25) == fm.ceiling(-2.25)
    assert fm.truncate(2.25) == fm.floor(2.25)


def test_modulus_and_remainder_formulas():
    assert fm.modulus(7.5, 2.0) == 7.5 - 2.0 * fm.floor(7.5 / 2.0)
    assert fm.remainder(7.5, 2.0) == 7.5 - 2.0 * fm.round_value(7.5 / 2.0)


def test_copy_sign():
    assert fm.copy_sign(-3.0, 2.0) == 3.0
    assert fm.copy_sign(3.0, -2.0) == -3.0


def test_nan():
    result = fm.nan("tag")
    assert str(result) == "nan"


def test_next_after_steps_by_one():
    assert fm.next_after(1.0, 5.0) == 2.0
    assert fm.next_after(5.0, 1.0) == 4.0


def test_dimension():
    assert fm.dimension(1.0, 5.0) == 0.0
    assert fm.dimension(5.0, 1.5) == 5.0 - 1.5


def test_fused_multiply_add():
    assert fm.fused_multiply_add(2.0, 3.0, 4.0) == 10.0


def test_magnitudes():
    assert fm.max_magnitude(-5.0, 3.0) == -5.0
    assert fm.min_magnitude(-5.0, 3.0) == 3.0


def test_hypotenuse():
    assert fm.hypotenuse(3.0, 4.0) == pytest.approx(math.hypot(3.0, 4.0))


def test_exp2_matches_power():
    assert fm.exp2(5) == fm.power(2, 5)


@pytest.mark.parametrize("a,b", [(0.0, 10.0), (-2.0, 2.0)])
def test_lerp(a, b):
    assert fm.lerp(a, b, 0.0) == a
    assert fm.lerp(a, b, 1.0) == b
    assert fm.lerp(a, b, 0.5) == (a + b) / 2