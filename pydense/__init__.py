"""
pydense: dense vectors, dense matrices and Gauss-Jordan elimination.

Generic containers over pluggable scalar types (int, float, Fraction,
Decimal, numpy floating dtypes) with arithmetic operators, and a
full-pivoting Gauss-Jordan engine that computes an inverse and solves
several linear systems in one pass.

Submodules:
    core: scalar types, number formats, rounding, exceptions, validation
    linalg: Vector, Matrix and matrix operations
    elimination: Gauss-Jordan solver
"""

__version__ = "0.1.0"

from pydense.core.exceptions import (
    PyDenseError,
    ValidationError,
    ParseError,
    DimensionError,
    TypeMismatchError,
    IndexOutOfRangeError,
    NumericalError,
    SingularMatrixError,
)
from pydense.core.scalars import INT, FLOAT, FRACTION, DECIMAL, FLOAT32
from pydense.linalg import Vector, Matrix, round_matrix
from pydense.elimination import gauss_jordan, inverse, solve

__all__ = [
    "__version__",
    # Containers
    "Vector",
    "Matrix",
    "round_matrix",
    # Elimination
    "gauss_jordan",
    "inverse",
    "solve",
    # Scalar types
    "INT",
    "FLOAT",
    "FRACTION",
    "DECIMAL",
    "FLOAT32",
    # Exceptions
    "PyDenseError",
    "ValidationError",
    "ParseError",
    "DimensionError",
    "TypeMismatchError",
    "IndexOutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
]
