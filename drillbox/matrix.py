"""Matrix transpose and element-wise addition on lists of rows."""


def _rows(matrix):
    rows = [list(row) for row in matrix]
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("matrix rows differ in length")
    return rows, width


def transpose(matrix):
    """Return the transpose of a rectangular matrix as a new list of rows."""
    rows, _ = _rows(matrix)
    return [list(column) for column in zip(*rows)]


def add_matrices(first, second):
    """Return the element-wise sum of two matrices of the same shape."""
    a, width_a = _rows(first)
    b, width_b = _rows(second)
    if len(a) != len(b) or width_a != width_b:
        raise ValueError("matrices must have the same shape")
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]