"""
CPU numpy backend for Gauss-Jordan elimination.

Vectorizes the pivot search and the row updates over float64 numpy arrays.
Pivot order and per-cell floating-point operations are the same as in the
generic backend, so both return bit-identical results on float matrices.
"""

import numpy as np

from pydense.core.compute.timing import Timer
from pydense.core.exceptions import ValidationError
from pydense.core.result import Result
from pydense.core.scalars import FLOAT
from pydense.elimination._common import (
    build_info,
    near_singular_warnings,
    singular_matrix_error,
)
from pydense.elimination.design import EliminationDesign
from pydense.elimination.solution import EliminationParams
from pydense.linalg.matrix import Matrix


class CPUGaussJordanBackend:
    """
    Numpy float64 backend.

    Implements the Backend protocol for EliminationDesign -> EliminationParams.
    Accepts FLOAT designs only.
    """

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    def solve(self, design: EliminationDesign) -> Result[EliminationParams]:
        """
        Invert A and solve A X = B in one pass.

        Raises:
            ValidationError: If the design's scalar type is not float
            SingularMatrixError: If a pivot is exactly zero
        """
        if design.dtype != FLOAT:
            raise ValidationError(
                f"backend 'cpu' supports float matrices only, got {design.dtype.name}; "
                f"use backend='generic'"
            )

        timer = Timer()
        timer.start()

        n, m = design.n, design.n_rhs
        a = np.array(design.a.to_list(), dtype=np.float64).reshape(n, n)
        b = np.array(design.b.to_list(), dtype=np.float64).reshape(n, m)

        pivot_used = np.zeros(n, dtype=np.int64)
        row_of_pivot = [0] * n
        col_of_pivot = [0] * n
        pivot_magnitudes: list[float] = []
        swaps = 0
        irow = icol = 0

        for i in range(n):
            # === Pivot search ===
            with timer.section('pivot_search'):
                mags = np.abs(a)
                usable = (
                    (pivot_used != 1)[:, None]
                    & (pivot_used == 0)[None, :]
                    & ~np.isnan(mags)
                )
                if usable.any():
                    flat = np.where(usable, mags, -1.0).ravel()
                    # Last cell holding the maximum, in row-major order
                    last = int(np.flatnonzero(flat == flat.max())[-1])
                    irow, icol = divmod(last, n)

            pivot_used[icol] += 1
            if irow != icol:
                a[[irow, icol]] = a[[icol, irow]]
                b[[irow, icol]] = b[[icol, irow]]
                swaps += 1
            row_of_pivot[i] = irow
            col_of_pivot[i] = icol

            pivot = a[icol, icol]
            if pivot == 0.0:
                raise singular_matrix_error(i, irow, icol)
            pivot_magnitudes.append(float(abs(pivot)))

            # === Normalize and eliminate ===
            with timer.section('elimination'):
                pivinv = 1.0 / pivot
                a[icol, icol] = 1.0
                a[icol] *= pivinv
                b[icol] *= pivinv

                others = np.arange(n) != icol
                dum = a[others, icol].copy()
                a[others, icol] = 0.0
                a[others] -= np.outer(dum, a[icol])
                b[others] -= np.outer(dum, b[icol])

        # === Undo column permutation ===
        with timer.section('unscramble'):
            for step in range(n - 1, -1, -1):
                r, c = row_of_pivot[step], col_of_pivot[step]
                if r != c:
                    a[:, [r, c]] = a[:, [c, r]]

        timer.stop()

        pivots = list(zip(row_of_pivot, col_of_pivot))
        params = EliminationParams(
            inverse=Matrix._wrap(a.tolist(), FLOAT, cols=n),
            solved=Matrix._wrap(b.tolist(), FLOAT, cols=m),
            pivots=tuple(pivots),
        )

        return Result(
            params=params,
            info=build_info(n, m, pivots, swaps, pivot_magnitudes),
            timing=timer.result(),
            backend_name=self.name,
            warnings=near_singular_warnings(pivot_magnitudes, FLOAT, n),
        )
