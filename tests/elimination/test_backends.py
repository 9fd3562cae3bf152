"""
Tests for the Gauss-Jordan backends and the elimination design.

Validates:
    - Backend selection ('auto', 'cpu', 'generic')
    - cpu and generic backends agree bit for bit on float input
    - Pivot order, including the last-candidate tie-break
    - EliminationDesign validation and private copies
"""

from fractions import Fraction

import numpy as np
import pytest

from pydense import FLOAT, FRACTION, Matrix, gauss_jordan
from pydense.core.exceptions import SingularMatrixError, ValidationError
from pydense.core.protocols import Backend
from pydense.elimination.backends import CPUGaussJordanBackend, GenericGaussJordanBackend
from pydense.elimination.design import EliminationDesign


# ═══════════════════════════════════════════════════════════════════════
# Backend selection
# ═══════════════════════════════════════════════════════════════════════


class TestBackendSelection:
    """'auto' picks the numpy kernel for float matrices only."""

    def test_protocol(self):
        assert isinstance(CPUGaussJordanBackend(), Backend)
        assert isinstance(GenericGaussJordanBackend(), Backend)

    def test_auto_float(self, invertible_3x3):
        assert gauss_jordan(invertible_3x3).backend_name == 'cpu_gauss_jordan'

    def test_auto_fraction(self, invertible_3x3):
        result = gauss_jordan(invertible_3x3.astype(FRACTION))
        assert result.backend_name == 'generic_gauss_jordan'

    def test_explicit_generic(self, invertible_3x3):
        result = gauss_jordan(invertible_3x3, backend='generic')
        assert result.backend_name == 'generic_gauss_jordan'

    def test_cpu_rejects_fraction(self, invertible_3x3):
        with pytest.raises(ValidationError, match="generic"):
            gauss_jordan(invertible_3x3.astype(FRACTION), backend='cpu')


# ═══════════════════════════════════════════════════════════════════════
# Backend agreement
# ═══════════════════════════════════════════════════════════════════════


class TestBackendAgreement:
    """Both kernels perform the same floating-point operations."""

    @pytest.mark.parametrize("n", [1, 2, 4, 9, 25])
    def test_identical_results(self, rng, n):
        A = Matrix(rng.standard_normal((n, n)))
        B = Matrix(rng.standard_normal((n, 2)))
        cpu = gauss_jordan(A, B, backend='cpu')
        generic = gauss_jordan(A, B, backend='generic')
        assert cpu.pivots == generic.pivots
        assert cpu.inverse.to_list() == generic.inverse.to_list()
        assert cpu.solved.to_list() == generic.solved.to_list()
        assert cpu.info['swaps'] == generic.info['swaps']

    def test_identical_with_ties(self):
        A = Matrix.parse(["1 2 2", "2 1 2", "2 2 1"])
        cpu = gauss_jordan(A, backend='cpu')
        generic = gauss_jordan(A, backend='generic')
        assert cpu.pivots == generic.pivots
        assert cpu.inverse.to_list() == generic.inverse.to_list()

    @pytest.mark.parametrize("backend", ['cpu', 'generic'])
    def test_both_raise_on_singular(self, singular_3x3, backend):
        with pytest.raises(SingularMatrixError) as exc_info:
            gauss_jordan(singular_3x3, backend=backend)
        assert exc_info.value.step == 2


# ═══════════════════════════════════════════════════════════════════════
# Pivot order
# ═══════════════════════════════════════════════════════════════════════


class TestPivotOrder:
    """Largest magnitude wins; ties go to the last cell in row-major order."""

    @pytest.mark.parametrize("backend", ['cpu', 'generic'])
    def test_largest_magnitude_first(self, backend):
        A = Matrix([[1.0, 2.0], [-7.0, 3.0]])
        result = gauss_jordan(A, backend=backend)
        assert result.pivots[0] == (1, 0)

    @pytest.mark.parametrize("backend", ['cpu', 'generic'])
    def test_tie_on_diagonal(self, backend):
        result = gauss_jordan(Matrix([[2.0, 1.0], [1.0, 2.0]]), backend=backend)
        assert result.pivots == ((1, 1), (0, 0))
        assert result.info['swaps'] == 0

    @pytest.mark.parametrize("backend", ['cpu', 'generic'])
    def test_tie_off_diagonal(self, backend):
        result = gauss_jordan(Matrix([[1.0, 2.0], [2.0, 1.0]]), backend=backend)
        assert result.pivots == ((1, 0), (1, 1))
        assert result.info['swaps'] == 1

    def test_tie_off_diagonal_exact_inverse(self):
        A = Matrix([[1, 2], [2, 1]], dtype=FRACTION)
        result = gauss_jordan(A)
        third = Fraction(1, 3)
        assert result.inverse == Matrix([[-third, 2 * third], [2 * third, -third]])
        assert result.solved == result.inverse

    def test_all_equal_magnitudes(self):
        A = Matrix([[1.0, -1.0], [1.0, 1.0]])
        result = gauss_jordan(A, backend='generic')
        assert result.pivots[0] == (1, 1)
        np.testing.assert_allclose(
            result.inverse.to_numpy(),
            np.linalg.inv(A.to_numpy()),
            rtol=1e-12,
        )


# ═══════════════════════════════════════════════════════════════════════
# Design
# ═══════════════════════════════════════════════════════════════════════


class TestEliminationDesign:
    """Validated private copies of A and B."""

    def test_defaults_to_identity(self, invertible_3x3):
        design = EliminationDesign.build(invertible_3x3)
        assert design.identity_rhs
        assert design.b == Matrix.identity(3)
        assert design.n == 3
        assert design.n_rhs == 3

    def test_copies_inputs(self, parabola_system):
        A, B = parabola_system
        design = EliminationDesign.build(A, B)
        A[0, 0] = 100.0
        B[0, 0] = 100.0
        assert design.a[0, 0] == 1.0
        assert design.b[0, 0] == 0.0
        assert not design.identity_rhs

    def test_int_promoted(self):
        design = EliminationDesign.build(Matrix([[1, 2], [3, 4]]))
        assert design.dtype == FLOAT
        assert design.b.dtype == FLOAT

    def test_int_promoted_before_dtype_check(self):
        design = EliminationDesign.build(Matrix([[1, 2], [3, 4]]), Matrix([[1.0], [2.0]]))
        assert design.dtype == FLOAT
        assert design.b.dtype == FLOAT

    def test_fraction_kept(self):
        design = EliminationDesign.build(Matrix([[1, 2], [3, 4]], dtype=FRACTION))
        assert design.dtype == FRACTION

    def test_frozen(self, invertible_3x3):
        design = EliminationDesign.build(invertible_3x3)
        with pytest.raises(AttributeError):
            design._n = 4

    def test_repr(self, invertible_3x3):
        assert repr(EliminationDesign.build(invertible_3x3)) == (
            "EliminationDesign(n=3, n_rhs=3, dtype='float')"
        )

    def test_backend_solves_design_directly(self, invertible_3x3):
        design = EliminationDesign.build(invertible_3x3)
        result = GenericGaussJordanBackend().solve(design)
        assert result.backend_name == 'generic_gauss_jordan'
        assert result.params.inverse.isclose(
            Matrix([[-24.0, 20.0, -5.0], [18.0, -15.0, 4.0], [5.0, -4.0, 1.0]])
        )
