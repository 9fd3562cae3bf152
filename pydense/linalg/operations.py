"""
Matrix operations.

Free functions over Matrix values. Every function returns a new Matrix and
leaves its operands untouched. The Matrix operators (+, -, *, @) and
Matrix.transpose() delegate here.
"""

from __future__ import annotations

from typing import Any

from pydense.core.exceptions import DimensionError
from pydense.core.rounding import (
    RoundingMode,
    check_decimals,
    check_rounding_mode,
    round_convert,
)
from pydense.core.scalars import resolve_scalar
from pydense.core.validation import check_same_dtype, check_same_shape
from pydense.linalg.matrix import Matrix
from pydense.linalg.vector import Vector


def _check_matrix(value: Any, name: str) -> None:
    if not isinstance(value, Matrix):
        raise TypeError(f"{name}: expected Matrix, got {type(value).__name__}")


def add(left: Matrix, right: Matrix) -> Matrix:
    """
    Adds two matrices together.

    Raises:
        DimensionError: If the shapes differ
    """
    _check_matrix(left, 'left')
    _check_matrix(right, 'right')
    check_same_shape(left.shape, right.shape, 'add')
    check_same_dtype(left.dtype, right.dtype, 'add')
    op = left.dtype.add
    grid = [
        [op(a, b) for a, b in zip(row_a, row_b)]
        for row_a, row_b in zip(left.to_list(), right.to_list())
    ]
    return Matrix._wrap(grid, left.dtype, cols=left.cols)


def sub(left: Matrix, right: Matrix) -> Matrix:
    """
    Subtracts the second matrix from the first.

    Raises:
        DimensionError: If the shapes differ
    """
    _check_matrix(left, 'left')
    _check_matrix(right, 'right')
    check_same_shape(left.shape, right.shape, 'sub')
    check_same_dtype(left.dtype, right.dtype, 'sub')
    op = left.dtype.sub
    grid = [
        [op(a, b) for a, b in zip(row_a, row_b)]
        for row_a, row_b in zip(left.to_list(), right.to_list())
    ]
    return Matrix._wrap(grid, left.dtype, cols=left.cols)


def multiply(left: Matrix, right: Any) -> Matrix:
    """
    Matrix product, or scalar product when right is not a Matrix.

    The product is built from dot products of left's rows against right's
    columns:  result[i, j] = sum_k left[i, k] * right[k, j].

    Raises:
        DimensionError: If left.cols != right.rows
    """
    _check_matrix(left, 'left')
    if not isinstance(right, Matrix):
        return scale(left, right)

    if left.cols != right.rows:
        raise DimensionError(
            "multiply: result of multiplication is defined if and only if the number "
            "of columns in left matrix equals the number of rows in right matrix "
            f"(got {left.rows}x{left.cols} and {right.rows}x{right.cols})",
            expected=left.cols,
            actual=right.rows,
        )
    check_same_dtype(left.dtype, right.dtype, 'multiply')

    left_rows = Vector.rows_of(left)
    right_cols = Vector.columns_of(right)
    grid = [[row * col for col in right_cols] for row in left_rows]
    return Matrix._wrap(grid, left.dtype, cols=right.cols)


def scale(matrix: Matrix, scalar: Any) -> Matrix:
    """Multiply every cell by a scalar, row by row."""
    _check_matrix(matrix, 'matrix')
    grid = [(row * scalar).to_list() for row in Vector.rows_of(matrix)]
    return Matrix._wrap(grid, matrix.dtype, cols=matrix.cols)


def transpose(matrix: Matrix) -> Matrix:
    """New matrix with swapped dimensions: result[j, i] = matrix[i, j]."""
    _check_matrix(matrix, 'matrix')
    grid = matrix.to_list()
    transposed = [[row[j] for row in grid] for j in range(matrix.cols)]
    return Matrix._wrap(transposed, matrix.dtype, cols=matrix.rows)


def round_matrix(
    matrix: Matrix,
    decimals: int,
    mode: RoundingMode = 'half_even',
    dtype: Any = None,
) -> Matrix:
    """
    Round every cell to ``decimals`` fractional digits.

    Args:
        matrix: Source matrix
        decimals: Number of fractional digits to keep (>= 0)
        mode: 'half_even' (default; ties go to the even neighbour) or
              'half_away_from_zero'
        dtype: Scalar type of the result; defaults to the source type.
               Rounding a float matrix to decimals=0 with dtype=int yields
               an integer matrix.

    Returns:
        New matrix of scalar type dtype

    Raises:
        ValueError: If mode is unknown
        ValidationError: If decimals is negative
        NumericalError: If a NaN/Inf cell cannot be represented in dtype
    """
    _check_matrix(matrix, 'matrix')
    check_decimals(decimals)
    check_rounding_mode(mode)
    source = matrix.dtype
    target = source if dtype is None else resolve_scalar(dtype)

    grid = [
        [round_convert(v, decimals, mode, source, target) for v in row]
        for row in matrix.to_list()
    ]
    return Matrix._wrap(grid, target, cols=matrix.cols)


__all__ = [
    'add',
    'sub',
    'multiply',
    'scale',
    'transpose',
    'round_matrix',
]
