"""Right-hand sides and distances of inequalities with respect to vertices."""


def _scalar_product(inequality, vertex):
    if len(inequality) != len(vertex):
        raise ValueError(
            f"inequality of length {len(inequality)} and vertex of length {len(vertex)}"
        )
    total = 0
    for coefficient, entry in zip(inequality, vertex):
        total = total + coefficient * entry
    return total


def rhs(inequality):
    """Return the right-hand side of an inequality (the negated last entry)."""
    if len(inequality) == 0:
        raise ValueError("an inequality needs at least one entry")
    return -inequality[-1]


def distance(inequality, vertex):
    """Return the distance of a vertex to the face defined by an inequality.

    The value may be negative for vertices violating the inequality.
    """
    return -_scalar_product(inequality, vertex)


def _extremal_vertex(vertices, inequality, choose):
    vertices = list(vertices)
    if not vertices:
        raise ValueError("at least one vertex is needed")
    return list(choose(vertices, key=lambda vertex: distance(inequality, vertex)))


def furthest_vertex(vertices, inequality):
    """Return the first vertex of maximal distance to the inequality."""
    return _extremal_vertex(vertices, inequality, max)


def nearest_vertex(vertices, inequality):
    """Return the first vertex of minimal distance to the inequality."""
    return _extremal_vertex(vertices, inequality, min)