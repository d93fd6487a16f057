"""Linear maps on rows: normalization, application and text output.

A map holds one image per coordinate; an image is a list of terms
``(index, factor)``.
"""

import enum
import itertools

from polypanda.row_operations import divide, row_gcd


class Tag(enum.Enum):
    """Whether a row is a facet (inequality) or a vertex."""

    FACET = "facet"
    VERTEX = "vertex"


def _equation_indices(equations):
    indices = []
    for equation in equations:
        index = next((i for i, entry in enumerate(equation) if entry != 0), None)
        if index is None:
            raise ValueError("an equation needs a non-zero coefficient")
        indices.append(index)
    return indices


def _subtract_equation(map_, index, equation):
    new_map = []
    for image in map_:
        new_image = []
        for term_index, factor in image:
            if term_index == index:
                new_image.extend(
                    (j, -factor * equation[j])
                    for j in range(index + 1, len(equation))
                    if equation[j] != 0
                )
            else:
                new_image.append((term_index, factor))
        new_map.append(new_image)
    return new_map


def _simplify(map_):
    simplified = []
    for image in map_:
        merged = []
        for index, group in itertools.groupby(sorted(image), key=lambda term: term[0]):
            factor = sum(term[1] for term in group)
            if factor != 0:
                merged.append((index, factor))
        simplified.append(merged)
    return simplified


def _normalize_map(map_, equations):
    indices = _equation_indices(equations)
    result = [[tuple(term) for term in image] for image in map_]
    for index in indices:
        result[index] = []
    for index, equation in zip(indices, equations):
        result = _subtract_equation(result, index, equation)
    return _simplify(result)


def normalize_maps(maps, equations):
    """Return the maps with the variables eliminated by the equations removed."""
    return [_normalize_map(map_, equations) for map_ in maps]


def apply(map_, row, tag):
    """Apply a map to a facet or vertex row and return the reduced result."""
    if len(row) != len(map_):
        raise ValueError(
            f"row of length {len(row)} does not match map of length {len(map_)}"
        )
    result = [0] * len(row)
    for i, image in enumerate(map_):
        for index, factor in image:
            if tag is Tag.FACET:
                result[index] += factor * row[i]
            else:
                result[i] += factor * row[index]
    divisor = row_gcd(result)
    if divisor > 1:
        result = divide(result, divisor)
    return result


def _format_image(image):
    parts = []
    for position, (index, factor) in enumerate(image):
        parts.append(f"{factor}*VAR_{index}")
        if position > 0:
            parts.append(",")
    return "[" + "".join(parts) + "]"


def format_map(map_):
    """Return the text form of a map."""
    return "[" + "".join(_format_image(image) for image in map_) + "]"