"""Conversion of rows and matrices between integer types."""


def cast_row(row, integer_type):
    """Return the row with every entry converted by ``integer_type``."""
    return [integer_type(entry) for entry in row]


def cast_matrix(matrix, integer_type):
    """Return the matrix with every entry converted by ``integer_type``."""
    return [cast_row(row, integer_type) for row in matrix]