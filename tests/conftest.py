"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pydense import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def invertible_3x3():
    """Integer-valued matrix whose inverse is also integer-valued."""
    return Matrix.parse(["1 0 5", "2 1 6", "3 4 0"])


@pytest.fixture
def parabola_system():
    """
    Fit y = a x^2 + b x + c through (1, 0), (2, 1), (3, 3).

    Solution: a = 0.5, b = -0.5, c = 0.
    """
    A = Matrix.parse(["1 1 1", "4 2 1", "9 3 1"])
    B = Matrix.parse(["0", "1", "3"])
    return A, B


@pytest.fixture
def singular_3x3():
    """Matrix with a zero row (no inverse)."""
    return Matrix.parse(["1 2 3", "0 0 0", "4 5 6"])


@pytest.fixture
def random_invertible(rng):
    """Factory for well-conditioned random float matrices."""
    def make(n):
        # Diagonally dominant, so comfortably invertible
        X = rng.standard_normal((n, n)) + n * np.eye(n)
        return Matrix(X)
    return make
