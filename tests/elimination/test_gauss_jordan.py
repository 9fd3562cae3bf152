"""
Tests for the Gauss-Jordan solver API.

Validates:
    - Inverse and simultaneous solution of linear systems
    - Known-answer matrices and random well-conditioned matrices
    - Singular matrices
    - Input validation at the API boundary
    - Exact scalar types
    - Near-singular warnings
"""

import warnings
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from pydense import (
    DECIMAL,
    FLOAT,
    FLOAT32,
    FRACTION,
    Matrix,
    gauss_jordan,
    inverse,
    round_matrix,
    solve,
)
from pydense.core.exceptions import (
    DimensionError,
    SingularMatrixError,
    TypeMismatchError,
    ValidationError,
)
from pydense.elimination import EliminationSolution


# ═══════════════════════════════════════════════════════════════════════
# Known answers
# ═══════════════════════════════════════════════════════════════════════


class TestKnownAnswers:
    """Small systems with hand-checked results."""

    def test_inverse_rounds_to_exact(self, invertible_3x3):
        inv = inverse(invertible_3x3)
        rounded = round_matrix(inv, 0, 'half_away_from_zero')
        assert invertible_3x3 * rounded == Matrix.identity(3)

    def test_product_rounds_to_identity(self, invertible_3x3):
        product = invertible_3x3 * gauss_jordan(invertible_3x3).inverse
        assert round_matrix(product, 0, 'half_away_from_zero') == Matrix.identity(3)

    def test_inverse_values(self, invertible_3x3):
        expected = Matrix([[-24.0, 20.0, -5.0], [18.0, -15.0, 4.0], [5.0, -4.0, 1.0]])
        assert inverse(invertible_3x3).isclose(expected)

    def test_parabola_fit(self, parabola_system):
        A, B = parabola_system
        result = gauss_jordan(A, B)
        rounded = round_matrix(result.solved, 1, 'half_away_from_zero')
        assert rounded == Matrix([[0.5], [-0.5], [0.0]])

    def test_unpacks_as_pair(self, parabola_system):
        A, B = parabola_system
        inv, x = gauss_jordan(A, B)
        assert inv.shape == (3, 3)
        assert x.shape == (3, 1)

    def test_solve_matches_inverse_product(self, parabola_system):
        A, B = parabola_system
        assert solve(A, B).isclose(inverse(A) * B)

    def test_default_rhs_is_identity(self, invertible_3x3):
        result = gauss_jordan(invertible_3x3)
        assert result.solved.isclose(result.inverse)

    def test_several_right_hand_sides(self, rng):
        A = Matrix(rng.standard_normal((4, 4)) + 4 * np.eye(4))
        B = Matrix(rng.standard_normal((4, 3)))
        x = solve(A, B)
        assert x.shape == (4, 3)
        np.testing.assert_allclose(
            x.to_numpy(),
            np.linalg.solve(A.to_numpy(), B.to_numpy()),
            rtol=1e-10,
            atol=1e-12,
        )

    def test_one_by_one(self):
        assert inverse(Matrix([[4.0]])) == Matrix([[0.25]])

    def test_empty_matrix(self):
        assert inverse(Matrix()).shape == (0, 0)

    def test_int_matrix_promoted_to_float(self):
        inv = inverse(Matrix([[2, 0], [0, 4]]))
        assert inv.dtype == FLOAT
        assert inv == Matrix([[0.5, 0.0], [0.0, 0.25]])


# ═══════════════════════════════════════════════════════════════════════
# Random matrices
# ═══════════════════════════════════════════════════════════════════════


class TestRandomMatrices:
    """A * inverse(A) rounds to the identity."""

    @pytest.mark.parametrize("n", [1, 2, 5, 17, 50])
    def test_product_rounds_to_identity(self, random_invertible, n):
        A = random_invertible(n)
        product = A * inverse(A)
        assert round_matrix(product, 0) == Matrix.identity(n)

    @pytest.mark.parametrize("n", [3, 10])
    def test_matches_numpy(self, random_invertible, n):
        A = random_invertible(n)
        np.testing.assert_allclose(
            inverse(A).to_numpy(),
            np.linalg.inv(A.to_numpy()),
            rtol=1e-10,
            atol=1e-12,
        )

    def test_inverse_of_inverse(self, random_invertible):
        A = random_invertible(6)
        assert inverse(inverse(A)).isclose(A)


# ═══════════════════════════════════════════════════════════════════════
# Singular matrices
# ═══════════════════════════════════════════════════════════════════════


class TestSingular:
    """A zero pivot aborts elimination."""

    def test_zero_row(self, singular_3x3):
        with pytest.raises(SingularMatrixError) as exc_info:
            inverse(singular_3x3)
        err = exc_info.value
        assert err.matrix_name == 'a'
        assert err.step == 2
        assert err.pivot_row == 1
        assert err.pivot_col == 1

    def test_dependent_rows(self):
        with pytest.raises(SingularMatrixError):
            inverse(Matrix([[1.0, 2.0], [2.0, 4.0]]))

    def test_zero_matrix(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            inverse(Matrix.zeros(3, 3))
        assert exc_info.value.step == 0

    def test_singular_fraction(self):
        A = Matrix([[1, 2], [3, 6]], dtype=FRACTION)
        with pytest.raises(SingularMatrixError):
            gauss_jordan(A)

    def test_singular_with_rhs(self, singular_3x3):
        B = Matrix([[1.0], [2.0], [3.0]])
        with pytest.raises(SingularMatrixError):
            solve(singular_3x3, B)


# ═══════════════════════════════════════════════════════════════════════
# Validation
# ═══════════════════════════════════════════════════════════════════════


class TestValidation:
    """Shape and type checks run before elimination begins."""

    def test_not_square(self):
        with pytest.raises(DimensionError, match="square"):
            inverse(Matrix.zeros(2, 3))

    def test_rhs_row_mismatch(self, invertible_3x3):
        with pytest.raises(DimensionError) as exc_info:
            solve(invertible_3x3, Matrix.zeros(2, 1))
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2

    def test_rhs_without_columns(self, invertible_3x3):
        with pytest.raises(DimensionError, match="at least one column"):
            solve(invertible_3x3, Matrix.zeros(3, 0))

    def test_a_not_matrix(self):
        with pytest.raises(ValidationError):
            inverse([[1.0, 0.0], [0.0, 1.0]])

    def test_b_not_matrix(self, invertible_3x3):
        with pytest.raises(ValidationError):
            solve(invertible_3x3, [[1.0], [2.0], [3.0]])

    def test_dtype_mismatch(self, invertible_3x3):
        B = Matrix([[1], [2], [3]], dtype=FRACTION)
        with pytest.raises(TypeMismatchError):
            solve(invertible_3x3, B)

    def test_int_a_with_float_b(self):
        A = Matrix([[1, 1, 1], [4, 2, 1], [9, 3, 1]])
        B = Matrix([[0.0], [1.0], [3.0]])
        x = solve(A, B)
        assert x.dtype == FLOAT
        assert round_matrix(x, 1, 'half_away_from_zero') == Matrix([[0.5], [-0.5], [0.0]])

    def test_float_a_with_int_b(self, invertible_3x3):
        x = solve(invertible_3x3, Matrix([[1], [2], [3]]))
        assert x.dtype == FLOAT
        assert x.isclose(inverse(invertible_3x3) * Matrix([[1.0], [2.0], [3.0]]))

    def test_unknown_backend(self, invertible_3x3):
        with pytest.raises(ValueError, match="Unknown backend"):
            inverse(invertible_3x3, backend='gpu')

    def test_inputs_not_mutated(self, parabola_system):
        A, B = parabola_system
        A_before, B_before = A.copy(), B.copy()
        gauss_jordan(A, B)
        assert A == A_before
        assert B == B_before


# ═══════════════════════════════════════════════════════════════════════
# Scalar types
# ═══════════════════════════════════════════════════════════════════════


class TestScalarTypes:
    """Elimination over exact and reduced-precision scalar types."""

    def test_fraction_exact(self, invertible_3x3):
        A = invertible_3x3.astype(FRACTION)
        inv = inverse(A)
        assert inv.dtype == FRACTION
        assert inv == Matrix(
            [[-24, 20, -5], [18, -15, 4], [5, -4, 1]], dtype=FRACTION
        )
        assert A * inv == Matrix.identity(3, dtype=FRACTION)

    def test_fraction_system(self, parabola_system):
        A, B = parabola_system
        x = solve(A.astype(FRACTION), B.astype(FRACTION))
        assert x.to_list() == [[Fraction(1, 2)], [Fraction(-1, 2)], [Fraction(0)]]

    def test_fraction_hilbert(self):
        n = 5
        H = Matrix(
            [[Fraction(1, i + j + 1) for j in range(n)] for i in range(n)],
            dtype=FRACTION,
        )
        assert H * inverse(H) == Matrix.identity(n, dtype=FRACTION)

    def test_decimal(self):
        inv = inverse(Matrix([[2, 0], [0, 4]], dtype=DECIMAL))
        assert inv.dtype == DECIMAL
        assert inv.to_list() == [[Decimal("0.5"), Decimal(0)], [Decimal(0), Decimal("0.25")]]

    def test_float32(self):
        A = Matrix(np.array([[2.0, 1.0], [1.0, 3.0]], dtype=np.float32))
        inv = inverse(A)
        assert inv.dtype == FLOAT32
        assert isinstance(inv[0, 0], np.float32)
        np.testing.assert_allclose(
            inv.to_numpy(),
            np.linalg.inv(A.to_numpy().astype(np.float64)),
            rtol=1e-5,
        )


# ═══════════════════════════════════════════════════════════════════════
# Diagnostics and warnings
# ═══════════════════════════════════════════════════════════════════════


class TestDiagnostics:
    """Result envelope, info dict and near-singular warnings."""

    def test_solution_type(self, invertible_3x3):
        assert isinstance(gauss_jordan(invertible_3x3), EliminationSolution)

    def test_info(self, parabola_system):
        A, B = parabola_system
        result = gauss_jordan(A, B)
        assert result.info['method'] == 'gauss_jordan'
        assert result.info['n'] == 3
        assert result.info['n_rhs'] == 1
        assert len(result.info['pivots']) == 3
        assert result.info['min_pivot_magnitude'] > 0.0
        assert result.n == 3

    def test_timing_sections(self, invertible_3x3):
        timing = gauss_jordan(invertible_3x3).timing
        assert {'total_seconds', 'pivot_search', 'elimination', 'unscramble'} <= set(timing)

    def test_near_singular_warns(self):
        A = Matrix([[1.0, 0.0], [0.0, 1e-20]])
        with pytest.warns(RuntimeWarning, match="nearly singular"):
            result = gauss_jordan(A)
        assert result.warnings
        assert any("nearly singular" in w for w in result.warnings)
        assert result.inverse.isclose(Matrix([[1.0, 0.0], [0.0, 1e20]]))

    def test_well_conditioned_is_silent(self, invertible_3x3):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = gauss_jordan(invertible_3x3)
        assert result.warnings == ()

    def test_exact_types_never_warn(self):
        A = Matrix([[1, 0], [0, Fraction(1, 10**20)]], dtype=FRACTION)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            inv = inverse(A)
        assert inv[1, 1] == Fraction(10**20)

    def test_summary(self, invertible_3x3):
        text = gauss_jordan(invertible_3x3).summary()
        assert "Gauss-Jordan" in text
        assert "cpu_gauss_jordan" in text

    def test_repr(self, invertible_3x3):
        assert repr(gauss_jordan(invertible_3x3)) == (
            "EliminationSolution(n=3, n_rhs=3, backend='cpu_gauss_jordan')"
        )
