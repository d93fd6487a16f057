import pytest

from polypanda.magnitude import (
    LIMB_BITS,
    add_magnitudes,
    compare_magnitudes,
    divide_magnitudes,
    shift_left,
    shift_right,
    subtract_magnitudes,
    trim,
)

VALUES = [0, 1, 2, 7, 2**32 - 1, 2**32, 2**32 + 5, 2**64 + 2**31, 3**50, 10**30 + 17]


def to_limbs(value):
    limbs = []
    while True:
        limbs.append(value & ((1 << LIMB_BITS) - 1))
        value >>= LIMB_BITS
        if value == 0:
            return limbs


def from_limbs(limbs):
    return sum(limb << (LIMB_BITS * i) for i, limb in enumerate(limbs))


def test_trim_removes_leading_zero_limbs():
    assert trim([5, 0, 0]) == [5]
    assert trim([]) == [0]
    assert trim([0, 0]) == [0]


def test_shift_left_by_one_limb():
    assert shift_left([1], LIMB_BITS) == [0, 1]


def test_shift_right_by_one_limb():
    assert shift_right([0, 1], LIMB_BITS) == [1]


@pytest.mark.parametrize("value", VALUES)
@pytest.mark.parametrize("distance", [0, 1, 5, 31, 32, 33, 70])
def test_shift_round_trip(value, distance):
    shifted = shift_left(to_limbs(value), distance)
    assert from_limbs(shifted) == value << distance
    assert shift_right(shifted, distance) == to_limbs(value)


@pytest.mark.parametrize("value", VALUES)
def test_shift_right_past_end_is_zero(value):
    assert shift_right(to_limbs(value), 200) == [0]


@pytest.mark.parametrize("a", VALUES)
@pytest.mark.parametrize("b", VALUES)
def test_add_and_subtract_round_trip(a, b):
    total = add_magnitudes(to_limbs(a), to_limbs(b))
    assert from_limbs(total) == a + b
    assert subtract_magnitudes(total, to_limbs(b)) == to_limbs(a)


@pytest.mark.parametrize("a", VALUES)
@pytest.mark.parametrize("b", VALUES)
def test_compare_agrees_with_order(a, b):
    result = compare_magnitudes(to_limbs(a), to_limbs(b))
    assert result == (a > b) - (a < b)
    assert compare_magnitudes(to_limbs(b), to_limbs(a)) == -result


def test_compare_ignores_leading_zero_limbs():
    assert compare_magnitudes([3, 0, 0], [3]) == 0


def test_subtract_larger_is_rejected():
    with pytest.raises(ValueError):
        subtract_magnitudes([1], [2])


@pytest.mark.parametrize("a", VALUES)
@pytest.mark.parametrize("b", [v for v in VALUES if v != 0])
def test_division_invariant(a, b):
    quotient, remainder = divide_magnitudes(to_limbs(a), to_limbs(b))
    assert compare_magnitudes(remainder, to_limbs(b)) < 0
    product = from_limbs(quotient) * b + from_limbs(remainder)
    assert product == a


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        divide_magnitudes([5], [0])


def test_limb_out_of_range_is_rejected():
    with pytest.raises(ValueError):
        add_magnitudes([1 << LIMB_BITS], [1])


def test_negative_shift_is_rejected():
    with pytest.raises(ValueError):
        shift_left([1], -1)