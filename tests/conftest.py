"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def m2x3():
    """Non-square 2x3 matrix with distinct integer cells."""
    return Matrix.from_grid([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def singular3():
    """Rank-2 3x3 matrix (rows in arithmetic progression)."""
    return Matrix.from_grid([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


@pytest.fixture
def invertible3():
    """Well-conditioned 3x3 matrix with an integer inverse."""
    return Matrix.from_grid([[7, 2, 1], [0, 3, -1], [-3, 4, -2]])
