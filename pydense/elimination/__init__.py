"""
Gauss-Jordan elimination.

Computes a matrix inverse and solves any number of linear systems against
the same coefficient matrix in a single full-pivoting pass.

Public API:
    gauss_jordan(A, B=None, ...) -> EliminationSolution
    inverse(A, ...) -> Matrix
    solve(A, B, ...) -> Matrix

The gauss_jordan() function is the main entry point. It handles:
    - Input validation (square A, matching B)
    - Private copies of the inputs
    - Backend selection
    - Result wrapping

Example:
    >>> from pydense.elimination import gauss_jordan
    >>> inv, x = gauss_jordan(A, B)
    >>> print(x)
"""

from pydense.elimination.design import EliminationDesign
from pydense.elimination.solution import EliminationSolution, EliminationParams
from pydense.elimination.solvers import gauss_jordan, inverse, solve

__all__ = [
    "gauss_jordan",
    "inverse",
    "solve",
    "EliminationDesign",
    "EliminationSolution",
    "EliminationParams",
]
