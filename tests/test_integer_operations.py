import math

import pytest

from polypanda.integer_operations import gcd, lcm

PAIRS = [(12, 18), (7, 13), (0, 5), (5, 0), (-12, 18), (12, -18), (-9, -27), (1, 1)]


@pytest.mark.parametrize("a,b", PAIRS)
def test_gcd_matches_standard_library(a, b):
    assert gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,b", PAIRS)
def test_gcd_divides_both_arguments(a, b):
    value = gcd(a, b)
    assert value > 0
    assert a % value == 0
    assert b % value == 0


def test_gcd_of_zeros_is_zero():
    assert gcd(0, 0) == 0


@pytest.mark.parametrize("a,b", PAIRS)
def test_gcd_ignores_signs(a, b):
    assert gcd(a, b) == gcd(-a, b) == gcd(a, -b)


@pytest.mark.parametrize("a,b", [(4, 6), (-4, 6), (3, 7), (0, 9), (-8, -12)])
def test_lcm_matches_standard_library(a, b):
    assert lcm(a, b) == math.lcm(a, b)


@pytest.mark.parametrize("a,b", [(4, 6), (21, 6), (-10, 15)])
def test_gcd_times_lcm_is_product_magnitude(a, b):
    assert gcd(a, b) * lcm(a, b) == abs(a * b)


def test_lcm_of_zeros_raises():
    with pytest.raises(ZeroDivisionError):
        lcm(0, 0)