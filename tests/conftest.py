"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def diagonal_matrix():
    """2x2 diagonal matrix with a known, exactly representable inverse."""
    return np.array([[2.0, 0.0], [0.0, 2.0]])


@pytest.fixture
def singular_matrix():
    """2x2 matrix of equal rows (rank 1)."""
    return np.array([[1.0, 1.0], [1.0, 1.0]])


@pytest.fixture
def well_conditioned_matrix(rng):
    """Random 10x10 matrix shifted to be strongly diagonally dominant."""
    n = 10
    return rng.standard_normal((n, n)) + n * np.eye(n)
