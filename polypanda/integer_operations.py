"""Greatest common divisor and least common multiple of two integers."""


def gcd(a, b):
    """Return the non-negative greatest common divisor of two integers.

    The result for ``gcd(0, 0)`` is 0.
    """
    a, b = abs(a), abs(b)
    while a != 0 and b != 0:
        if a > b:
            a %= b
        else:
            b %= a
    return b if a == 0 else a


def lcm(a, b):
    """Return the non-negative least common multiple of two integers.

    Raises ZeroDivisionError when both arguments are zero.
    """
    divisor = gcd(a, b)
    if divisor == 0:
        raise ZeroDivisionError("least common multiple of 0 and 0 is undefined")
    return abs(a) * (abs(b) // divisor)