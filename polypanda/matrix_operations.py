"""Matrix arithmetic, Gaussian elimination and extraction of equations.

A matrix is a list of rows; a row is a list of integers.
"""

import functools

from polypanda.integer_operations import gcd
from polypanda.row_operations import (
    add,
    divide,
    dot,
    format_row,
    pretty_println,
    row_gcd,
    scale,
)


def _require_rows(matrix):
    if not matrix or not matrix[-1]:
        raise ValueError("the matrix must have at least one non-empty row")


def _first_nonzero(row):
    return next((index for index, entry in enumerate(row) if entry != 0), None)


def format_matrix(matrix):
    """Return the unnamed text form of a matrix, one row per line."""
    return "".join(format_row(row) + "\n" for row in matrix)


def pretty_print_matrix(matrix, names, relation):
    """Return the named text form of a matrix, one row per line."""
    return "".join(pretty_println(row, names, relation) for row in matrix)


def multiply(matrix, vector):
    """Return the matrix-vector product."""
    if not matrix:
        raise ValueError("the matrix must not be empty")
    return [dot(row, vector) for row in matrix]


def transpose(matrix):
    """Return the transposition of a matrix."""
    _require_rows(matrix)
    return [list(column) for column in zip(*matrix)]


def dimension(matrix):
    """Return the rank of a matrix. The input is left unchanged."""
    _require_rows(matrix)
    basis = []
    pivot_columns = []
    for original in matrix:
        row = list(original)
        for basis_row, column in zip(basis, pivot_columns):
            factor = row[column]
            if factor != 0:
                row = add(scale(row, -basis_row[column]), scale(basis_row, factor))
                divisor = row_gcd(row)
                if divisor > 1:
                    row = divide(row, divisor)
        column = _first_nonzero(row)
        if column is not None:
            basis.append(row)
            pivot_columns.append(column)
    return len(pivot_columns)


def _pivot(matrix, start, used_columns):
    for row in range(start, len(matrix)):
        for column, entry in enumerate(matrix[row]):
            if entry != 0 and column not in used_columns:
                used_columns.add(column)
                return row, column
    return None


def _normalize_column(matrix, column):
    divisor = functools.reduce(gcd, (row[column] for row in matrix), 0)
    if divisor > 1:
        for row in matrix:
            row[column] //= divisor


def _eliminate_column(matrix, pivot_row, column, target):
    a = -matrix[pivot_row][column]
    b = matrix[pivot_row][target]
    for row in matrix:
        row[target] = row[target] * a + row[column] * b


def _eliminate_columns(matrix, pivot_row, column):
    for target in range(len(matrix[pivot_row])):
        if target != column and matrix[pivot_row][target] != 0:
            _eliminate_column(matrix, pivot_row, column, target)
            _normalize_column(matrix, target)


def gaussian_elimination(matrix):
    """Eliminate the matrix in place by column operations.

    Returns ``(equation_indices, used_indices)``: the pivot columns found in
    the trailing rows (as many as there are columns), and the pivot rows
    found among the leading rows.
    """
    _require_rows(matrix)
    row_count = len(matrix)
    column_count = len(matrix[-1])
    equation_indices = []
    used_indices = []
    used_columns = set()
    row = 0
    while row < row_count:
        found = _pivot(matrix, row, used_columns)
        if found is None:
            break
        row, column = found
        if row_count >= column_count and row >= row_count - column_count:
            equation_indices.append(column)
        else:
            used_indices.append(row)
        _eliminate_columns(matrix, row, column)
        row += 1
    for column in range(column_count):
        pivot_row = next((r for r in matrix if r[column] != 0), None)
        if pivot_row is not None and pivot_row[column] < 0:
            for r in matrix:
                r[column] = -r[column]
    return equation_indices, used_indices


def append_negative_identity_matrix(matrix):
    """Append the negative identity matrix below the matrix, in place."""
    _require_rows(matrix)
    size = len(matrix[-1])
    matrix.extend(
        [-1 if i == j else 0 for j in range(size)] for i in range(size)
    )


def extract_equations(matrix):
    """Return the equations satisfied by all rows (vertices) of the matrix."""
    _require_rows(matrix)
    work = [list(row) for row in matrix]
    original_size = len(work)
    append_negative_identity_matrix(work)
    equation_indices, _ = gaussian_elimination(work)
    del work[:original_size]
    work = transpose(work)
    equation_indices.sort(reverse=True)
    return extract_marked_equations(work, equation_indices)


def extract_marked_equations(matrix, indices):
    """Remove the rows at the given descending indices from the matrix and return them."""
    if not matrix:
        raise ValueError("the matrix must not be empty")
    if any(a < b for a, b in zip(indices, indices[1:])):
        raise ValueError("the indices must be sorted in descending order")
    last = len(matrix) - 1
    for offset, index in enumerate(indices):
        matrix[index], matrix[last - offset] = matrix[last - offset], matrix[index]
    start = len(matrix) - len(indices)
    equations = [list(row) for row in reversed(matrix[start:])]
    del matrix[start:]
    return equations