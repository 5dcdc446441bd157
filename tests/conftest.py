"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinsolve.elimination import AugmentedMatrix, Row


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def three_by_three():
    """Plain 3x3 matrix used by the row primitive tests."""
    return AugmentedMatrix([
        Row([1.0, 2.0, 3.0], 4.0),
        Row([5.0, 6.0, 7.0], 8.0),
        Row([9.0, 10.0, 11.0], 12.0),
    ])


@pytest.fixture
def textbook_system():
    """x + 2y = 5, z = 3, 2x + y = 4  ->  x=1, y=2, z=3 (needs a row swap)."""
    return AugmentedMatrix([
        Row([1.0, 2.0, 0.0], 5.0),
        Row([0.0, 0.0, 1.0], 3.0),
        Row([2.0, 1.0, 0.0], 4.0),
    ])


@pytest.fixture
def random_system(rng):
    """Well-conditioned 6x6 system with a known solution."""
    n = 6
    A = rng.standard_normal((n, n)) + n * np.eye(n)
    x_true = rng.standard_normal(n)
    b = A @ x_true
    return A, b, x_true
