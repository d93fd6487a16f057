"""Fourier-Motzkin elimination on homogenized integer rows.

For homogenized vertices and rays the result is the set of facets, written
as rows ``a`` with ``a . v <= 0`` for every input row ``v``. Equations of the
affine hull are not part of the result.
"""

import copy
import sys
import time

from polypanda.bitset import Bitset
from polypanda.delayed_action import DelayedAction
from polypanda.matrix_operations import (
    append_negative_identity_matrix,
    extract_marked_equations,
    gaussian_elimination,
    multiply,
    transpose,
)
from polypanda.row_operations import divide, dot, row_gcd, scale, subtract

_PROGRESS_DELAY = 2.0


def _eliminate_zero_columns(matrix, vertices):
    """Drop columns that are zero in every matrix row, from matrix and vertices.

    Returns the dropped column indices in descending order.
    """
    width = len(matrix[-1])
    zero_columns = [
        column
        for column in reversed(range(width))
        if all(row[column] == 0 for row in matrix)
    ]
    for column in zero_columns:
        for row in matrix:
            del row[column]
        for vertex in vertices:
            del vertex[column]
    return zero_columns


def _reinsert_zero_columns(matrix, zero_columns):
    result = [list(row) for row in matrix]
    for column in reversed(zero_columns):
        for row in result:
            row.insert(column, 0)
    return result


def _prepare(matrix):
    """Run phase one: returns the initial system, the reordered vertices and the zero columns."""
    vertices = [list(row) for row in matrix]
    if not vertices:
        raise ValueError("Fourier-Motzkin elimination needs at least one row")
    original_size = len(vertices)
    work = [list(row) for row in vertices]
    append_negative_identity_matrix(work)
    equation_indices, used_indices = gaussian_elimination(work)
    del work[:original_size]
    work = transpose(work)
    equation_indices.sort(reverse=True)
    extract_marked_equations(work, equation_indices)
    if not work:
        raise ValueError("the input rows span only the zero vector")
    zero_columns = _eliminate_zero_columns(work, vertices)
    used_set = set(used_indices)
    used = [vertices[index] for index in sorted(used_indices, reverse=True)]
    rest = [vertex for index, vertex in enumerate(vertices) if index not in used_set]
    return work, used + rest, zero_columns


def _initialize_reached(matrix, vertices):
    """For every row, the set of leading vertices on which it is strictly negative."""
    leading = vertices[: len(matrix)]
    reached = []
    for row in matrix:
        bitset = Bitset(len(vertices))
        for index, vertex in enumerate(leading):
            if dot(row, vertex) < 0:
                bitset.set(index)
        reached.append(bitset)
    return reached


def _add_minimal(pairs, index_n, index_p, union, max_bit):
    """Insert a candidate pair at the front, keeping only minimal unions."""
    if any(union.contains(existing, max_bit) for _, _, existing in pairs):
        return
    pairs[:] = [(index_n, index_p, union)] + [
        entry for entry in pairs if not entry[2].contains(union, max_bit)
    ]


def _projection(matrix, reached, vertex, index):
    """Eliminate one vertex; returns the new matrix and its bitsets."""
    max_count = index + 2 - len(vertex)
    s = multiply(matrix, vertex)
    negative = [j for j, value in enumerate(s) if value < 0]
    positive = [j for j, value in enumerate(s) if value > 0]
    zero = sorted(
        (j for j, value in enumerate(s) if value == 0),
        key=lambda j: reached[j].count(index),
    )
    pairs = []
    for index_n in negative:
        r_n = reached[index_n]
        for index_p in positive:
            r_p = reached[index_p]
            if Bitset.union_count(r_n, r_p, index) > max_count:
                continue
            if any(Bitset.union_contains(r_n, r_p, reached[z], index) for z in zero):
                continue
            _add_minimal(pairs, index_n, index_p, r_n.merge(r_p, index), index)

    new_matrix = [matrix[z] for z in zero] + [matrix[n] for n in negative]
    new_reached = [reached[z] for z in zero]
    for index_n in negative:
        bitset = copy.copy(reached[index_n])
        bitset.set(index)
        new_reached.append(bitset)
    for index_n, index_p, union in pairs:
        row = subtract(scale(matrix[index_n], s[index_p]), scale(matrix[index_p], s[index_n]))
        divisor = row_gcd(row)
        if divisor > 1:
            row = divide(row, divisor)
        new_matrix.append(row)
        new_reached.append(union)
    return new_matrix, new_reached


def _remove_bad_rows(matrix):
    """Drop the trivial row ``(0, ..., 0, -1)``."""
    return [
        row
        for row in matrix
        if not (row[-1] == -1 and all(entry == 0 for entry in row[:-1]))
    ]


def _report_progress(step, total, size):
    stamp = time.strftime("%d/%m/%y %H:%M:%S", time.localtime())
    sys.stderr.write(
        f"{stamp}   Fourier-Motzkin Elimination step {step} / {total}: {size}\n"
    )


def _phase_two(matrix, vertices):
    reached = _initialize_reached(matrix, vertices)
    total = len(vertices)
    for index in range(len(matrix[-1]), total):
        with DelayedAction(
            lambda: _report_progress(index + 1, total, len(matrix)), _PROGRESS_DELAY
        ):
            matrix, reached = _projection(matrix, reached, vertices[index], index)
    return _remove_bad_rows(matrix)


def _phase_two_heuristic(matrix, vertices):
    reached = _initialize_reached(matrix, vertices)
    for index in range(len(matrix), len(vertices)):
        remaining = vertices[index:]
        facets = _remove_bad_rows(
            [row for row in matrix if all(dot(row, v) <= 0 for v in remaining)]
        )
        if facets:
            return facets
        matrix, reached = _projection(matrix, reached, vertices[index], index)
    return matrix


def fourier_motzkin_elimination(matrix):
    """Return all facets of the cone spanned by the homogenized rows.

    Applied to inequalities, the extremal vertices and rays are returned.
    The input is left unchanged.
    """
    system, vertices, zero_columns = _prepare(matrix)
    result = _phase_two(system, vertices)
    return _reinsert_zero_columns(result, zero_columns)


def fourier_motzkin_elimination_heuristic(matrix):
    """Return some facets of the cone spanned by the homogenized rows.

    Every returned row is a facet, but the set is usually incomplete.
    """
    system, vertices, zero_columns = _prepare(matrix)
    result = _phase_two_heuristic(system, vertices)
    return _reinsert_zero_columns(result, zero_columns)