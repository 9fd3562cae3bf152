"""
Elimination Design.

Validated, privately owned copies of the coefficient matrix A and the
right-hand sides B. Everything a backend needs is checked here, before
elimination begins, so backends can trust their input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydense.core.exceptions import DimensionError, ValidationError
from pydense.core.scalars import FLOAT
from pydense.core.validation import check_same_dtype, check_square
from pydense.linalg.matrix import Matrix


@dataclass(frozen=True)
class EliminationDesign:
    """
    Gauss-Jordan problem specification.

    Holds A (n x n) and B (n x m). Immutable after construction; the
    matrices are copies, so the caller's inputs are never touched.

    Construction:
        EliminationDesign.build(A)       # B = identity(n)
        EliminationDesign.build(A, B)    # m right-hand sides
    """
    _a: Matrix
    _b: Matrix
    _n: int
    _m: int
    _identity_rhs: bool

    @classmethod
    def build(cls, a: Any, b: Any = None) -> EliminationDesign:
        """
        Validate A and B and take private copies.

        Integer matrices (A or B) are promoted to float before their scalar
        types are compared, since elimination divides.

        Raises:
            ValidationError: If A or B is not a Matrix
            DimensionError: If A is not square, B has a different row count,
                or B has no columns
            TypeMismatchError: If A and B have different scalar types
        """
        if not isinstance(a, Matrix):
            raise ValidationError(f"a: expected Matrix, got {type(a).__name__}")
        check_square(a.shape, 'a')
        n = a.rows

        identity_rhs = b is None
        if identity_rhs:
            b = Matrix.identity(n, dtype=a.dtype)
        elif not isinstance(b, Matrix):
            raise ValidationError(f"b: expected Matrix, got {type(b).__name__}")
        else:
            if b.rows != n:
                raise DimensionError(
                    f"b: must have the same number of rows as a ({n}), got {b.rows}",
                    expected=n,
                    actual=b.rows,
                )
            if b.cols < 1:
                raise DimensionError(
                    "b: must have at least one column (right-hand side)",
                    expected=1,
                    actual=b.cols,
                )
        a = a.astype(FLOAT) if not a.dtype.is_field else a.copy()
        b = b.astype(FLOAT) if not b.dtype.is_field else b.copy()
        if not identity_rhs:
            check_same_dtype(a.dtype, b.dtype, 'gauss_jordan')

        return cls(_a=a, _b=b, _n=n, _m=b.cols, _identity_rhs=identity_rhs)

    @property
    def a(self) -> Matrix:
        return self._a

    @property
    def b(self) -> Matrix:
        return self._b

    @property
    def n(self) -> int:
        return self._n

    @property
    def n_rhs(self) -> int:
        return self._m

    @property
    def dtype(self):
        return self._a.dtype

    @property
    def identity_rhs(self) -> bool:
        """True when B was defaulted to the identity (inverse only)."""
        return self._identity_rhs

    def __repr__(self) -> str:
        return (
            f"EliminationDesign(n={self._n}, n_rhs={self._m}, "
            f"dtype={self.dtype.name!r})"
        )
