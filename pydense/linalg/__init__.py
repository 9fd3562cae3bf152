"""
Dense vector and matrix containers.

Public API:
    Vector: fixed-length sequence of scalars with +, -, scalar * and dot
    Matrix: rows x cols grid with +, -, *, @, transpose, identity
    add, sub, multiply, scale, transpose, round_matrix: matrix operations

Example:
    >>> from pydense.linalg import Matrix, round_matrix
    >>> A = Matrix.parse(["1 2", "3 4"])
    >>> print(A * A.transpose())
    5.0 11.0
    11.0 25.0
"""

from pydense.linalg.vector import Vector
from pydense.linalg.matrix import Matrix
from pydense.linalg.operations import (
    add,
    sub,
    multiply,
    scale,
    transpose,
    round_matrix,
)

__all__ = [
    "Vector",
    "Matrix",
    "add",
    "sub",
    "multiply",
    "scale",
    "transpose",
    "round_matrix",
]
