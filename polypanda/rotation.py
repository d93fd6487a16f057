"""Adjacent facets of a facet by the rotation algorithm."""

from polypanda.classes import classes
from polypanda.fourier_motzkin import fourier_motzkin_elimination
from polypanda.inequality_operations import (
    distance,
    furthest_vertex,
    nearest_vertex,
)
from polypanda.integer_operations import gcd
from polypanda.row_operations import divide, row_gcd, scale, subtract


def _rotate(vertices, vertex, facet, ridge):
    """Rotate a facet around a ridge until the ridge becomes a facet."""
    d_f = distance(facet, vertex)
    d_r = distance(ridge, vertex)
    while True:
        common = gcd(d_f, d_r)
        if common > 1:
            d_f //= common
            d_r //= common
        ridge = subtract(scale(ridge, d_f), scale(facet, d_r))
        divisor = row_gcd(ridge)
        if divisor == 0:
            raise ValueError("rotation produced a zero row")
        if divisor > 1:
            ridge = divide(ridge, divisor)
        vertex = nearest_vertex(vertices, ridge)
        d_f = distance(facet, vertex)
        d_r = distance(ridge, vertex)
        if d_r == 0:
            return ridge


def rotation(vertices, facet, maps, tag):
    """Return the class representatives of all facets adjacent to ``facet``."""
    vertices = [list(vertex) for vertex in vertices]
    start = furthest_vertex(vertices, facet)
    on_facet = [vertex for vertex in vertices if distance(facet, vertex) == 0]
    if not on_facet:
        raise ValueError("no vertex lies on the given facet")
    ridges = fourier_motzkin_elimination(on_facet)
    output = {tuple(_rotate(vertices, start, facet, ridge)) for ridge in ridges}
    return classes(output, maps, tag)