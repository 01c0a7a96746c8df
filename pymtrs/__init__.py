"""
pymtrs: dense generic matrices with exact determinants.

A row-major matrix container over any field-like element type (int, float,
complex, Fraction, Decimal, NumPy scalars), with arithmetic operators and a
fraction-free determinant that stays exact for integers.

Submodules:
    core: Exceptions, protocols, dimensions, validation, tolerances
    linalg: Matrix storage, arithmetic, determinant and inverse
    benchmarks: Micro-benchmarks of the core operations
"""

__version__ = "0.1.0"

from pymtrs.core.size import Dim, dim
from pymtrs.core.exceptions import (
    MtrsError,
    ValidationError,
    DimensionError,
    OutOfBoundsError,
)
from pymtrs.linalg import Matrix, matrix, determinant, inverse

__all__ = [
    "__version__",
    "Matrix",
    "matrix",
    "determinant",
    "inverse",
    "Dim",
    "dim",
    "MtrsError",
    "ValidationError",
    "DimensionError",
    "OutOfBoundsError",
]
