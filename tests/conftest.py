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
def random_int_rows(rng):
    """5x5 integer rows with small entries (exact determinant territory)."""
    return rng.integers(-9, 10, size=(5, 5)).tolist()
