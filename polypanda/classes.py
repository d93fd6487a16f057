"""Equivalence classes of rows under a group of linear maps."""

from polypanda.map_operations import apply


def get_class(row, maps, tag):
    """Return the whole class of a row under the maps, sorted lexicographically.

    Facets must be normalized beforehand.
    """
    start = tuple(row)
    if not start:
        raise ValueError("a row needs at least one entry")
    members = {start}
    pending = [start]
    while pending:
        current = list(pending.pop())
        for map_ in maps:
            image = tuple(apply(map_, current, tag))
            if image not in members:
                members.add(image)
                pending.append(image)
    return [list(member) for member in sorted(members)]


def class_representative(row, maps, tag):
    """Return the unique representative of the row's class: its largest member."""
    return get_class(row, maps, tag)[-1]


def classes(rows, maps, tag):
    """Reduce rows to one representative per class.

    Classes are visited starting from the smallest remaining row.
    """
    remaining = {tuple(row) for row in rows}
    representatives = []
    while remaining:
        members = get_class(min(remaining), maps, tag)
        representatives.append(members[-1])
        remaining.difference_update(tuple(member) for member in members)
    return representatives