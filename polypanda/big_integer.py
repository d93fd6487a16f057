"""Arbitrary precision signed integers built on 32-bit limb magnitudes."""

import operator

from polypanda.magnitude import (
    LIMB_BITS,
    add_magnitudes,
    compare_magnitudes,
    divide_magnitudes,
    shift_left,
    subtract_magnitudes,
    trim,
)

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LIMB_MASK = (1 << LIMB_BITS) - 1


def _limbs_of(value):
    limbs = []
    while value:
        limbs.append(value & _LIMB_MASK)
        value >>= LIMB_BITS
    return trim(limbs)


def _multiply_magnitudes(first, second):
    result = [0]
    shifted = list(first)
    for limb in second:
        for bit in range(LIMB_BITS):
            if limb >> bit & 1:
                result = add_magnitudes(result, shifted)
            shifted = shift_left(shifted, 1)
    return result


class BigInteger:
    """A signed integer of unlimited size, stored as sign and magnitude.

    ``/`` divides with truncation towards zero; ``//`` rounds down like
    Python integers. ``%`` is only defined for positive divisors; for a
    negative dividend the result lies in ``(0, divisor]``.
    """

    __slots__ = ("_negative", "_limbs")

    def __init__(self, value=0):
        if isinstance(value, BigInteger):
            self._negative = value._negative
            self._limbs = list(value._limbs)
            return
        if isinstance(value, bool):
            raise TypeError("a BigInteger cannot be built from a bool")
        number = operator.index(value)
        self._negative = number < 0
        self._limbs = _limbs_of(abs(number))

    @classmethod
    def _from_parts(cls, negative, limbs):
        result = cls.__new__(cls)
        result._limbs = trim(limbs)
        result._negative = negative and result._limbs != [0]
        return result

    @staticmethod
    def _coerce(other):
        if isinstance(other, BigInteger):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return BigInteger(other)
        return None

    def _is_zero(self):
        return self._limbs == [0]

    def _to_python_int(self):
        magnitude = 0
        for limb in reversed(self._limbs):
            magnitude = (magnitude << LIMB_BITS) | limb
        return -magnitude if self._negative else magnitude

    def __int__(self):
        value = self._to_python_int()
        if not _INT_MIN <= value <= _INT_MAX:
            raise ValueError("Number doesn't fit into int.")
        return value

    def __index__(self):
        return self._to_python_int()

    def _compare(self, other):
        if self._negative != other._negative:
            return -1 if self._negative else 1
        order = compare_magnitudes(self._limbs, other._limbs)
        return -order if self._negative else order

    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._negative == other._negative and self._limbs == other._limbs

    def __lt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._compare(other) >= 0

    def __hash__(self):
        return hash(self._to_python_int())

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if self._negative == other._negative:
            return self._from_parts(
                self._negative, add_magnitudes(self._limbs, other._limbs)
            )
        order = compare_magnitudes(self._limbs, other._limbs)
        if order == 0:
            return BigInteger(0)
        if order > 0:
            return self._from_parts(
                self._negative, subtract_magnitudes(self._limbs, other._limbs)
            )
        return self._from_parts(
            other._negative, subtract_magnitudes(other._limbs, self._limbs)
        )

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if self._is_zero() or other._is_zero():
            return BigInteger(0)
        return self._from_parts(
            self._negative != other._negative,
            _multiply_magnitudes(self._limbs, other._limbs),
        )

    __rmul__ = __mul__

    def _divide_truncated(self, other):
        if other._is_zero():
            raise ZeroDivisionError('Integer division by 0 in "BigInteger::operator/".')
        quotient, remainder = divide_magnitudes(self._limbs, other._limbs)
        return (
            self._from_parts(self._negative != other._negative, quotient),
            self._from_parts(self._negative, remainder),
        )

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._divide_truncated(other)[0]

    def __floordiv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        quotient, remainder = self._divide_truncated(other)
        if not remainder._is_zero() and self._negative != other._negative:
            quotient = quotient - 1
        return quotient

    def __mod__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if other._negative or other._is_zero():
            raise ValueError("Modulo in BigInteger is only defined for positive numbers.")
        _, remainder = divide_magnitudes(self._limbs, other._limbs)
        result = self._from_parts(False, remainder)
        if self._negative:
            return other - result
        return result

    def __neg__(self):
        return self._from_parts(not self._negative, self._limbs)

    def __abs__(self):
        return self._from_parts(False, self._limbs)

    def __repr__(self):
        return f"BigInteger({self._to_python_int()})"