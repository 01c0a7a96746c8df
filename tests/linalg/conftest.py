"""
Shared fixtures for matrix tests.
"""

import pytest

from pymtrs.linalg import Matrix


@pytest.fixture
def m2x3():
    """[[1, 2, 3], [4, 5, 6]] over int."""
    return Matrix.from_slice((2, 3), [1, 2, 3, 4, 5, 6])


@pytest.fixture
def m3x3():
    """Non-symmetric 3x3 integer matrix."""
    return Matrix.from_rows([[3, 4, 7], [1, 2, 6], [9, 5, 7]])


@pytest.fixture
def singular_4x4():
    """1..16 in row-major order: rank 2."""
    return Matrix.from_vec((4, 4), list(range(1, 17)))


@pytest.fixture
def det30_4x4():
    """Integer matrix with determinant 30 (needs a row swap to pivot)."""
    return Matrix.from_rows([
        [1, 0, 2, -1],
        [3, 0, 0, 5],
        [2, 1, 4, -3],
        [1, 0, 5, 0],
    ])
