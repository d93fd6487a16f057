"""Exact integer polyhedral computations: row and matrix arithmetic, Fourier-Motzkin elimination, symmetry classes, facet rotation and big integers."""

__version__ = "0.1.0"