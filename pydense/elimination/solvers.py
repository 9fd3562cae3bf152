"""
Solver dispatch for Gauss-Jordan elimination.

This module provides gauss_jordan(), inverse() and solve() (public API) and
backend selection.
"""

import warnings
from typing import Literal

from pydense.core.scalars import FLOAT
from pydense.elimination.design import EliminationDesign
from pydense.elimination.solution import EliminationSolution
from pydense.elimination.backends.cpu import CPUGaussJordanBackend
from pydense.elimination.backends.generic import GenericGaussJordanBackend
from pydense.linalg.matrix import Matrix


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'generic']


def gauss_jordan(
    a: Matrix,
    b: Matrix | None = None,
    *,
    backend: BackendChoice = 'auto',
) -> EliminationSolution:
    """
    Invert A and solve A X = B by full-pivoting Gauss-Jordan elimination.

    All right-hand sides (the columns of B) are solved in the same pass
    that computes the inverse. The caller's matrices are never modified.

    Args:
        a: Coefficient matrix (n x n)
        b: Right-hand sides (n x m, m >= 1). Defaults to identity(n),
           in which case only the inverse is of interest.
        backend: Computational backend to use:
            - 'auto': 'cpu' for float matrices, 'generic' otherwise
            - 'cpu': numpy float64 kernel
            - 'generic': scalar-generic kernel (float, fraction, decimal, ...)

    Returns:
        EliminationSolution; unpacks as (inverse, solved)

    Raises:
        ValidationError: If a or b is not a Matrix
        DimensionError: If a is not square or b's row count differs from a's
        SingularMatrixError: If a has no inverse

    Example:
        >>> from pydense import Matrix, gauss_jordan
        >>> A = Matrix.parse(["1 1 1", "4 2 1", "9 3 1"])
        >>> B = Matrix.parse(["0", "1", "3"])
        >>> inv, x = gauss_jordan(A, B)
    """
    # === Validate and copy ===
    # This is the boundary - validate here, trust everywhere else
    design = EliminationDesign.build(a, b)

    # === Select Backend ===
    backend_impl = _get_backend(backend, design)

    # === Solve ===
    result = backend_impl.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    return EliminationSolution(_result=result, _design=design)


def inverse(a: Matrix, *, backend: BackendChoice = 'auto') -> Matrix:
    """
    Inverse of a square matrix by Gauss-Jordan elimination.

    Raises:
        DimensionError: If a is not square
        SingularMatrixError: If a has no inverse
    """
    return gauss_jordan(a, backend=backend).inverse


def solve(a: Matrix, b: Matrix, *, backend: BackendChoice = 'auto') -> Matrix:
    """
    Solution X of A X = B by Gauss-Jordan elimination.

    Raises:
        DimensionError: If a is not square or b's row count differs from a's
        SingularMatrixError: If a has no inverse
    """
    return gauss_jordan(a, b, backend=backend).solved


def _get_backend(choice: BackendChoice, design: EliminationDesign):
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice == 'auto':
        if design.dtype == FLOAT:
            return CPUGaussJordanBackend()
        return GenericGaussJordanBackend()

    elif choice == 'cpu':
        return CPUGaussJordanBackend()

    elif choice == 'generic':
        return GenericGaussJordanBackend()

    else:
        raise ValueError(f"Unknown backend: {choice!r}")
