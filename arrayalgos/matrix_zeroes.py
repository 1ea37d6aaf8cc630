"""Zero out every row and column containing a zero, in place."""

from typing import List

Matrix = List[List[int]]


def set_zeroes_brute(matrix: Matrix) -> None:
    """Mark rows and columns in a copy, then replace the matrix contents."""
    if not matrix:
        return
    width = len(matrix[0])
    result = [row[:] for row in matrix]
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if value == 0:
                result[i] = [0] * width
                for other in result:
                    other[j] = 0
    matrix[:] = result


def set_zeroes_marked(matrix: Matrix) -> None:
    """Record zero rows and columns in sets, then clear them."""
    zero_rows = set()
    zero_cols = set()
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if value == 0:
                zero_rows.add(i)
                zero_cols.add(j)
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if i in zero_rows or j in zero_cols:
                row[j] = 0


def set_zeroes(matrix: Matrix) -> None:
    """Use the first row and column as markers, with constant extra space."""
    if not matrix or not matrix[0]:
        return
    rows, cols = len(matrix), len(matrix[0])
    first_col = any(row[0] == 0 for row in matrix)
    first_row = any(value == 0 for value in matrix[0])

    for i in range(1, rows):
        for j in range(1, cols):
            if matrix[i][j] == 0:
                matrix[i][0] = 0
                matrix[0][j] = 0

    for i in range(1, rows):
        for j in range(1, cols):
            if matrix[i][0] == 0 or matrix[0][j] == 0:
                matrix[i][j] = 0

    if first_row:
        matrix[0][:] = [0] * cols
    if first_col:
        for row in matrix:
            row[0] = 0