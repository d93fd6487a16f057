import pytest

from polypanda.map_operations import Tag
from polypanda.rotation import rotation
from polypanda.row_operations import dot

SQUARE = [[0, 0, 1], [1, 0, 1], [0, 1, 1], [1, 1, 1]]
SQUARE_FACETS = {(-1, 0, 0), (0, -1, 0), (1, 0, -1), (0, 1, -1)}
SWAP = [[(1, 1)], [(0, 1)], [(2, 1)]]


def _is_valid_facet(row):
    values = [dot(row, vertex) for vertex in SQUARE]
    return all(value <= 0 for value in values) and values.count(0) == 2


def test_neighbours_of_left_edge():
    result = rotation(SQUARE, [-1, 0, 0], [], Tag.FACET)
    assert result == [[0, -1, 0], [0, 1, -1]]


def test_neighbours_are_valid_adjacent_facets():
    facet = [0, 1, -1]
    result = rotation(SQUARE, facet, [], Tag.FACET)
    assert len(result) == 2
    for row in result:
        assert tuple(row) in SQUARE_FACETS
        assert row != facet
        assert _is_valid_facet(row)


def test_symmetry_reduces_to_representatives():
    result = rotation(SQUARE, [-1, 0, 0], [SWAP], Tag.FACET)
    assert len(result) == 2
    for row in result:
        assert tuple(row) in SQUARE_FACETS
        assert _is_valid_facet(row)


def test_facet_without_vertices_is_rejected():
    with pytest.raises(ValueError):
        rotation(SQUARE, [0, 0, -1], [], Tag.FACET)