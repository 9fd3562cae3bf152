"""
Tolerance tiers for numerical comparison.

Defines precision expectations for floating scalar types:
- float64, well-conditioned: near machine precision
- float64, ill-conditioned or long operation chains: relaxed
- float32: relaxed for single-precision arithmetic

Used by Matrix.isclose(), the test suite, and the near-singular pivot check
in the elimination backends. Exact scalar types (fraction, decimal, int)
compare with ``==`` and never need a tier.
"""

from dataclasses import dataclass

import numpy as np

from pydense.core.protocols import Scalar


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FLOAT64_TIGHT = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='float64_tight',
    description='Double precision, well-conditioned input',
)

FLOAT64_LOOSE = ToleranceTier(
    rtol=1e-6,
    atol=1e-9,
    name='float64_loose',
    description='Double precision, ill-conditioned input or long chains',
)

FLOAT32_RELAXED = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='float32_relaxed',
    description='Single precision',
)

# Smallest/largest pivot magnitude ratio, in units of n * eps, below which
# elimination warns that the matrix is nearly singular
NEAR_SINGULAR_EPS_FACTOR = 1.0


def machine_epsilon(dtype: Scalar) -> float:
    """
    Machine epsilon of a floating scalar type, 0.0 for exact types.
    """
    if not dtype.is_floating:
        return 0.0
    numpy_dtype = getattr(dtype, 'numpy_dtype', np.float64)
    return float(np.finfo(numpy_dtype).eps)


def select_tolerance(
    dtype: Scalar,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a scalar type."""
    if machine_epsilon(dtype) > float(np.finfo(np.float64).eps):
        return FLOAT32_RELAXED
    if is_ill_conditioned:
        return FLOAT64_LOOSE
    return FLOAT64_TIGHT
