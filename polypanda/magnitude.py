"""Arithmetic on unsigned magnitudes stored as little-endian 32-bit limbs."""

import itertools

LIMB_BITS = 32
_MASK = (1 << LIMB_BITS) - 1


def _normalized(limbs):
    result = list(limbs)
    for limb in result:
        if not 0 <= limb <= _MASK:
            raise ValueError(f"limb {limb} out of range")
    return trim(result)


def trim(limbs):
    """Return the limbs without leading zero limbs; zero is ``[0]``."""
    result = list(limbs) or [0]
    while len(result) > 1 and result[-1] == 0:
        result.pop()
    return result


def shift_left(limbs, distance):
    """Return the magnitude shifted left by ``distance`` bits."""
    if distance < 0:
        raise ValueError("shift distance must be non-negative")
    limbs = _normalized(limbs)
    if limbs == [0]:
        return [0]
    blocks, bits = divmod(distance, LIMB_BITS)
    result = [0] * blocks
    carry = 0
    for limb in limbs:
        value = (limb << bits) | carry
        result.append(value & _MASK)
        carry = value >> LIMB_BITS
    if carry:
        result.append(carry)
    return result


def shift_right(limbs, distance):
    """Return the magnitude shifted right by ``distance`` bits."""
    if distance < 0:
        raise ValueError("shift distance must be non-negative")
    blocks, bits = divmod(distance, LIMB_BITS)
    limbs = _normalized(limbs)[blocks:]
    if not limbs:
        return [0]
    result = [
        ((low >> bits) | (high << (LIMB_BITS - bits))) & _MASK
        for low, high in zip(limbs, limbs[1:] + [0])
    ]
    return trim(result)


def add_magnitudes(first, second):
    """Return the sum of two magnitudes."""
    result = []
    carry = 0
    for a, b in itertools.zip_longest(
        _normalized(first), _normalized(second), fillvalue=0
    ):
        total = a + b + carry
        result.append(total & _MASK)
        carry = total >> LIMB_BITS
    if carry:
        result.append(carry)
    return trim(result)


def subtract_magnitudes(first, second):
    """Return ``first - second``; ``first`` must not be smaller than ``second``."""
    if compare_magnitudes(first, second) < 0:
        raise ValueError("cannot subtract a larger magnitude from a smaller one")
    result = []
    borrow = 0
    for a, b in itertools.zip_longest(
        _normalized(first), _normalized(second), fillvalue=0
    ):
        difference = a - b - borrow
        borrow = 1 if difference < 0 else 0
        result.append(difference + (borrow << LIMB_BITS))
    return trim(result)


def compare_magnitudes(first, second):
    """Return -1, 0 or 1 as ``first`` is smaller, equal or greater than ``second``."""
    a = _normalized(first)
    b = _normalized(second)
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return -1 if x < y else 1
    return 0


def divide_magnitudes(dividend, divisor):
    """Return ``(quotient, remainder)`` of dividing two magnitudes."""
    dividend = _normalized(dividend)
    divisor = _normalized(divisor)
    if divisor == [0]:
        raise ZeroDivisionError("division of a magnitude by zero")
    if compare_magnitudes(dividend, divisor) < 0:
        return [0], dividend
    quotient = [0]
    remainder = [0]
    for position in reversed(range(LIMB_BITS * len(dividend))):
        block, bit = divmod(position, LIMB_BITS)
        remainder = shift_left(remainder, 1)
        quotient = shift_left(quotient, 1)
        remainder[0] |= (dividend[block] >> bit) & 1
        if compare_magnitudes(remainder, divisor) >= 0:
            remainder = subtract_magnitudes(remainder, divisor)
            quotient[0] |= 1
    return quotient, remainder