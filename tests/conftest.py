"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatcalc import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def write_file(tmp_path):
    """Write text to a file under tmp_path and return its path."""
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write


@pytest.fixture
def square_3x3():
    """3x3 matrix with det = -306 and hand-computed cofactors."""
    return Matrix.from_array([
        [6.0, 1.0, 1.0],
        [4.0, -2.0, 5.0],
        [2.0, 8.0, 7.0],
    ])


@pytest.fixture
def singular_3x3():
    """Third row is the sum of the first two (det = 0)."""
    return Matrix.from_array([
        [1.0, 2.0, 3.0],
        [4.0, 5.0, 6.0],
        [5.0, 7.0, 9.0],
    ])


@pytest.fixture
def random_square(rng):
    """Diagonally dominant (invertible) random matrices of size 1..6."""
    def _make(n):
        A = rng.standard_normal((n, n)) + n * np.eye(n)
        return Matrix.from_array(A)
    return _make
