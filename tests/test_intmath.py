import pytest

from hydrixkit import intmath


@pytest.mark.parametrize("value", [0, 1, 7, 12345])
def test_absolute_of_negation(value):
    assert intmath.absolute(-value) == value
    assert intmath.absolute(value) == value


def test_absolute_most_negative_wraps():
    most_negative = -(1 << 31)
    assert intmath.absolute(most_negative) == most_negative


@pytest.mark.parametrize("a,b", [(1, 2), (5, -3), (4, 4)])
def test_minimum_maximum(a, b):
    low = intmath.minimum(a, b)
    high = intmath.maximum(a, b)
    assert {low, high} == {a, b} or low == high == a
    assert low <= high


@pytest.mark.parametrize("x", [-10, 0, 5, 10, 20])
def test_clamp_stays_in_range(x):
    result = intmath.clamp(x, 0, 10)
    assert 0 <= result <= 10
    if 0 <= x <= 10:
        assert result == x


def test_sign():
    assert intmath.sign(-42) == -1
    assert intmath.sign(0) == 0
    assert intmath.sign(42) == 1


@pytest.mark.parametrize("x", [-3, 2, 3, 7])
def test_power_recurrence(x):
    assert intmath.power(x, 0) == 1
    assert intmath.power(x, 1) == x
    for y in range(1, 6):
        assert intmath.power(x, y + 1) == intmath.power(x, y) * x


def test_power_negative_exponent_is_one():
    assert intmath.power(5, -2) == 1


def test_power_wraps_to_int32():
    assert intmath.power(2, 31) == -(1 << 31)


def test_square_root_negative_is_zero():
    assert intmath.square_root(-9) == 0


@pytest.mark.parametrize("a,b", [(0, 10), (-5, 5), (7, 3)])
def test_lerp_endpoints(a, b):
    assert intmath.lerp(a, b, 0) == a
    assert intmath.lerp(a, b, 1) == b