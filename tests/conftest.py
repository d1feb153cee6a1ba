"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatx import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def a23():
    """2x3 float matrix [[1, 2, 3], [4, 5, 6]]."""
    return Matrix.from_rows([
        [1.0, 2.0, 3.0],
        [4.0, 5.0, 6.0],
    ])


@pytest.fixture
def b32():
    """3x2 float matrix [[7, 8], [9, 10], [11, 12]]."""
    return Matrix.from_rows([
        [7.0, 8.0],
        [9.0, 10.0],
        [11.0, 12.0],
    ])


@pytest.fixture
def grid5():
    """5x5 matrix, row i filled with i + 1 except a 3.0 at (1, 2)."""
    return Matrix.from_rows([
        [1.0] * 5,
        [2.0, 2.0, 3.0, 2.0, 2.0],
        [3.0] * 5,
        [4.0] * 5,
        [5.0] * 5,
    ])
