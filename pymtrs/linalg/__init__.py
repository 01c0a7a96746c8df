"""
Dense matrix module.

Provides a generic row-major matrix with elementwise and linear arithmetic
and an exact, fraction-free determinant.

Public API:
    Matrix          - storage core, constructors, operators
    matrix(values)  - literal construction
    determinant(m)  - exact determinant (None if non-square)
    inverse(m)      - m / det(m) (None if non-square or singular)
    transpose(m)    - in-place transpose
"""

from pymtrs.linalg.matrix import Matrix
from pymtrs.linalg.construct import matrix
from pymtrs.linalg._arithmetic import add, product, sub, transpose
from pymtrs.linalg._determinant import determinant, inverse
from pymtrs.linalg._format import format_matrix

__all__ = [
    "Matrix",
    "matrix",
    "add",
    "sub",
    "product",
    "transpose",
    "determinant",
    "inverse",
    "format_matrix",
]
