"""
Generic Gauss-Jordan backend.

Runs full-pivoting Gauss-Jordan elimination through the Scalar protocol, so
it works for every field scalar type (float, fraction, decimal, numpy
floating). This is the reference implementation; the numpy backend must
reproduce its pivot sequence exactly.
"""

from pydense.core.compute.timing import Timer
from pydense.core.result import Result
from pydense.elimination._common import (
    build_info,
    near_singular_warnings,
    singular_matrix_error,
)
from pydense.elimination.design import EliminationDesign
from pydense.elimination.solution import EliminationParams
from pydense.linalg.matrix import Matrix


class GenericGaussJordanBackend:
    """
    Scalar-generic backend.

    Implements the Backend protocol for EliminationDesign -> EliminationParams.
    """

    @property
    def name(self) -> str:
        return 'generic_gauss_jordan'

    def solve(self, design: EliminationDesign) -> Result[EliminationParams]:
        """
        Invert A and solve A X = B in one pass.

        Algorithm (the inverse is assembled in place inside A):
            1. Pick the largest-magnitude cell among unused rows/columns;
               ties go to the last cell in row-major order
            2. Swap it onto the diagonal (rows of A and B)
            3. Scale the pivot row by 1/pivot, eliminate the pivot column
               from every other row
            4. Undo the column permutation in reverse step order

        Raises:
            SingularMatrixError: If a pivot is exactly zero
        """
        timer = Timer()
        timer.start()

        dtype = design.dtype
        n = design.n
        a = design.a.to_list()
        b = design.b.to_list()

        zero, one = dtype.from_int(0), dtype.from_int(1)
        sub, mul, equal, magnitude = dtype.sub, dtype.mul, dtype.equal, dtype.magnitude

        pivot_used = [0] * n
        row_of_pivot = [0] * n
        col_of_pivot = [0] * n
        pivot_magnitudes: list[float] = []
        swaps = 0
        irow = icol = 0

        for i in range(n):
            # === Pivot search ===
            with timer.section('pivot_search'):
                big = 0.0
                for j in range(n):
                    if pivot_used[j] != 1:
                        for k in range(n):
                            if pivot_used[k] == 0:
                                mag = magnitude(a[j][k])
                                if mag >= big:
                                    big = mag
                                    irow = j
                                    icol = k

            pivot_used[icol] += 1
            if irow != icol:
                a[irow], a[icol] = a[icol], a[irow]
                b[irow], b[icol] = b[icol], b[irow]
                swaps += 1
            row_of_pivot[i] = irow
            col_of_pivot[i] = icol

            pivot = a[icol][icol]
            if equal(pivot, zero):
                raise singular_matrix_error(i, irow, icol)
            pivot_magnitudes.append(magnitude(pivot))

            # === Normalize and eliminate ===
            with timer.section('elimination'):
                pivinv = dtype.div(one, pivot)
                a[icol][icol] = one
                a[icol] = [mul(v, pivinv) for v in a[icol]]
                b[icol] = [mul(v, pivinv) for v in b[icol]]

                pivot_a = a[icol]
                pivot_b = b[icol]
                for ll in range(n):
                    if ll != icol:
                        dum = a[ll][icol]
                        a[ll][icol] = zero
                        a[ll] = [sub(x, mul(p, dum)) for x, p in zip(a[ll], pivot_a)]
                        b[ll] = [sub(x, mul(p, dum)) for x, p in zip(b[ll], pivot_b)]

        # === Undo column permutation ===
        with timer.section('unscramble'):
            for step in range(n - 1, -1, -1):
                r, c = row_of_pivot[step], col_of_pivot[step]
                if r != c:
                    for row in a:
                        row[r], row[c] = row[c], row[r]

        timer.stop()

        pivots = list(zip(row_of_pivot, col_of_pivot))
        params = EliminationParams(
            inverse=Matrix._wrap(a, dtype, cols=n),
            solved=Matrix._wrap(b, dtype, cols=design.n_rhs),
            pivots=tuple(pivots),
        )

        return Result(
            params=params,
            info=build_info(n, design.n_rhs, pivots, swaps, pivot_magnitudes),
            timing=timer.result(),
            backend_name=self.name,
            warnings=near_singular_warnings(pivot_magnitudes, dtype, n),
        )
