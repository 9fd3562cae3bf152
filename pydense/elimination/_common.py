"""
Shared helpers for the Gauss-Jordan backends.
"""

import math
from typing import Any

from pydense.core.compute.tolerances import NEAR_SINGULAR_EPS_FACTOR, machine_epsilon
from pydense.core.exceptions import SingularMatrixError
from pydense.core.protocols import Scalar


def singular_matrix_error(step: int, pivot_row: int, pivot_col: int) -> SingularMatrixError:
    return SingularMatrixError(
        f"gauss_jordan: singular matrix (zero pivot at step {step}, "
        f"row {pivot_row}, column {pivot_col})",
        matrix_name='a',
        step=step,
        pivot_row=pivot_row,
        pivot_col=pivot_col,
    )


def near_singular_warnings(
    pivot_magnitudes: list[float],
    dtype: Scalar,
    n: int,
) -> tuple[str, ...]:
    """
    Flag a floating elimination whose pivots span more than n * eps.

    Exact scalar types never warn: a nonzero pivot is exact.
    """
    eps = machine_epsilon(dtype)
    if eps == 0.0 or not pivot_magnitudes:
        return ()
    largest = max(pivot_magnitudes)
    smallest = min(pivot_magnitudes)
    if largest == 0.0 or math.isnan(largest) or math.isnan(smallest):
        return ()
    ratio = smallest / largest
    threshold = NEAR_SINGULAR_EPS_FACTOR * n * eps
    if ratio < threshold:
        return (
            f"matrix is nearly singular: pivot magnitude ratio {ratio:.3e} "
            f"is below {threshold:.3e}; the inverse may be inaccurate",
        )
    return ()


def build_info(
    n: int,
    n_rhs: int,
    pivots: list[tuple[int, int]],
    swaps: int,
    pivot_magnitudes: list[float],
) -> dict[str, Any]:
    return {
        'method': 'gauss_jordan',
        'pivoting': 'full',
        'n': n,
        'n_rhs': n_rhs,
        'pivots': list(pivots),
        'swaps': swaps,
        'min_pivot_magnitude': min(pivot_magnitudes) if pivot_magnitudes else None,
        'max_pivot_magnitude': max(pivot_magnitudes) if pivot_magnitudes else None,
    }
