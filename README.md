# polypanda

Exact integer arithmetic for convex polyhedra, written in plain Python with no
third-party dependencies.

Rows are lists of integers in homogenized form: an inequality `a·x <= b` is
stored as `[a_1, ..., a_n, -b]`, and a vertex `x` as `[x_1, ..., x_n, 1]`.
A row `a` is satisfied by a vertex `v` when `a · v <= 0`.

## Modules

- `polypanda.integer_operations`: `gcd(a, b)` (non-negative, `gcd(0, 0) == 0`)
  and `lcm(a, b)` (raises `ZeroDivisionError` for `lcm(0, 0)`).
- `polypanda.row_operations`: row arithmetic `add`, `subtract`, `scale`,
  `divide` (truncates towards zero, raises `ZeroDivisionError` for 0) and
  `dot`; `row_gcd`, `row_lcm`; `normalize(row, equations)`, which eliminates
  the leading variable of each equation and reduces the row by its gcd.
  Text output functions return strings: `format_row`, `pretty_print`
  (e.g. `2x +y -3z <= 1`), `pretty_println` and `format_fractional`.
- `polypanda.inequality_operations`: `rhs`, `distance`, `furthest_vertex`,
  `nearest_vertex`.
- `polypanda.cast`: `cast_row`, `cast_matrix` convert every entry with a given
  type, e.g. `cast_matrix(matrix, BigInteger)`.
- `polypanda.matrix_operations`: `transpose`, `multiply`, `dimension` (rank),
  `gaussian_elimination` (in place), `append_negative_identity_matrix`,
  `extract_equations` (the equations satisfied by all rows),
  `extract_marked_equations`, `format_matrix`, `pretty_print_matrix`.
- `polypanda.map_operations`: symmetry maps. A map holds one image per
  coordinate; an image is a list of `(index, factor)` terms. `Tag.FACET` or
  `Tag.VERTEX` selects how `apply` acts on a row. `normalize_maps` removes
  variables eliminated by equations; `format_map` returns a text form.
- `polypanda.classes`: `get_class` (all images of a row under the maps, sorted),
  `class_representative` (the largest member) and `classes` (one
  representative per class).
- `polypanda.bitset`: `Bitset`, a set of bit indices grouped into 32-bit words,
  with `set`, `count`, `contains`, `equals`, `merge`, `union_count` and
  `union_contains`, each limited by a highest-bit hint.
- `polypanda.delayed_action`: `DelayedAction(action, delay)`, a context manager
  that calls `action` on exit if at least `delay` seconds (a number or a
  `datetime.timedelta`) have passed since it was created, unless `dismiss()`
  was called.
- `polypanda.fourier_motzkin`: `fourier_motzkin_elimination` returns all facets
  of the cone spanned by the homogenized input rows;
  `fourier_motzkin_elimination_heuristic` returns some facets only. During long
  runs, progress lines are written to standard error.
- `polypanda.rotation`: `rotation(vertices, facet, maps, tag)` returns the class
  representatives of the facets adjacent to `facet`.
- `polypanda.concurrency`: `number_of_threads(argv)` reads `-t <n>`,
  `-t=<n>` or `--threads=<n>` from an argument list (program name first) and
  otherwise returns the number of processors.
- `polypanda.magnitude`: unsigned magnitudes as little-endian 32-bit limbs:
  `trim`, `shift_left`, `shift_right`, `add_magnitudes`, `subtract_magnitudes`,
  `compare_magnitudes`, `divide_magnitudes`.
- `polypanda.big_integer`: `BigInteger`, a signed integer of unlimited size.
  `/` truncates towards zero, `//` rounds down, `%` needs a positive divisor and
  gives a result in `(0, divisor]` for a negative dividend. `int()` raises
  `ValueError` for values outside the signed 32-bit range.

## Examples

Facets of the unit square:

```python
from polypanda.fourier_motzkin import fourier_motzkin_elimination

square = [
    [0, 0, 1],
    [1, 0, 1],
    [0, 1, 1],
    [1, 1, 1],
]
for facet in fourier_motzkin_elimination(square):
    print(facet)
```

Each printed row `a` satisfies `a · v <= 0` for every vertex `v` of the square.

Symmetry classes under a coordinate swap:

```python
from polypanda.classes import class_representative, get_class
from polypanda.map_operations import Tag

swap = [[(1, 1)], [(0, 1)], [(2, 1)]]
get_class([1, 0, 1], [swap], Tag.VERTEX)             # [[0, 1, 1], [1, 0, 1]]
class_representative([0, 1, 1], [swap], Tag.VERTEX)  # [1, 0, 1]
```

## What it does not do

This is a library only. It has no command-line program, does not read problem
files, and has no driver that runs a full adjacency decomposition or double
description across several threads or processes; `number_of_threads` only
interprets an argument list.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```