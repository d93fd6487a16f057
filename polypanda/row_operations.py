"""Arithmetic, normalization and text output of integer rows."""

import functools
import operator

from polypanda.inequality_operations import rhs
from polypanda.integer_operations import gcd, lcm


def _check_sizes(first, second):
    if len(first) != len(second):
        raise ValueError(
            f"rows of different length: {len(first)} and {len(second)}"
        )


def _truncated_division(a, b):
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _first_nonzero(row):
    return next((index for index, entry in enumerate(row) if entry != 0), None)


def add(first, second):
    """Return the entrywise sum of two rows."""
    _check_sizes(first, second)
    return [a + b for a, b in zip(first, second)]


def subtract(first, second):
    """Return the entrywise difference of two rows."""
    _check_sizes(first, second)
    return [a - b for a, b in zip(first, second)]


def scale(row, factor):
    """Return the row multiplied by a scalar."""
    return [entry * factor for entry in row]


def divide(row, divisor):
    """Return the row divided by a scalar, each quotient truncated towards zero."""
    if divisor == 0:
        raise ZeroDivisionError("Integer division by 0 in 'row /= value'")
    if divisor == 1:
        return list(row)
    return [_truncated_division(entry, divisor) for entry in row]


def dot(first, second):
    """Return the scalar product of two rows."""
    _check_sizes(first, second)
    products = [a * b for a, b in zip(first, second)]
    if not products:
        return 0
    return functools.reduce(operator.add, products)


def normalize(row, equations):
    """Eliminate the leading variable of each equation from the row and reduce it."""
    result = list(row)
    for equation in equations:
        index = _first_nonzero(equation)
        if index is None:
            raise ValueError("an equation needs a non-zero coefficient")
        coefficient = result[index]
        if coefficient != 0:
            result = subtract(scale(result, equation[index]), scale(equation, coefficient))
    divisor = row_gcd(result)
    if divisor > 1:
        result = divide(result, divisor)
    return result


def row_gcd(row):
    """Return the greatest common divisor of all entries (0 for a zero row)."""
    entries = iter(row)
    value = 0
    for entry in entries:
        if entry != 0:
            value = abs(entry)
            break
    for entry in entries:
        if value <= 1:
            break
        value = gcd(entry, value)
    return value


def row_lcm(row):
    """Return the least common multiple of all entries (1 for an empty row)."""
    entries = iter(row)
    value = 1
    for entry in entries:
        if entry != 1:
            value = abs(entry)
            break
    for entry in entries:
        value = lcm(entry, value)
    return value


def format_row(row):
    """Return the unnamed text form of a row: each entry right-aligned after two spaces."""
    return "".join(
        (" " if entry >= 0 else "") + f" {entry}" for entry in map(int, row)
    )


def pretty_print(row, names, relation):
    """Return the named text form of a row, e.g. ``2x +y -3z <= 1``.

    Without names the unnamed form is returned.
    """
    values = [int(entry) for entry in row]
    if not names:
        return format_row(values)
    if len(values) != len(names) + 1:
        raise ValueError(
            f"row of length {len(values)} does not match {len(names)} names"
        )
    parts = []
    for value, name in zip(values, names):
        if value == 0:
            continue
        printed_something = bool(parts)
        term = " " if printed_something else ""
        if value == 1:
            if printed_something:
                term += "+"
        elif value == -1:
            term += "-"
        else:
            if value > 1 and printed_something:
                term += "+"
            term += str(value)
        parts.append(term + name)
    return f"{''.join(parts)} {relation} {rhs(values)}"


def pretty_println(row, names, relation):
    """Return the named text form of a row followed by a newline."""
    return pretty_print(row, names, relation) + "\n"


def format_fractional(vertex):
    """Return the entries of a homogenized vertex as reduced fractions.

    The last entry is the common denominator; each fraction is followed by a space.
    """
    values = [int(entry) for entry in vertex]
    if not values:
        raise ValueError("a vertex needs at least one entry")
    last = values[-1]
    if last == 0:
        raise ValueError("the denominator of a vertex must be non-zero")
    sign = -1 if last < 0 else 1
    denominator = abs(last)
    parts = []
    for value in values[:-1]:
        divisor = gcd(value, denominator)
        numerator = sign * value // divisor
        reduced = denominator // divisor
        parts.append(f"{numerator}/{reduced} " if reduced != 1 else f"{numerator} ")
    return "".join(parts)