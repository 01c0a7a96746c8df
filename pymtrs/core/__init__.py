"""
Core infrastructure for pymtrs.

This module provides shared abstractions and utilities used by the matrix
layer.

Key components:
    protocols: Size, Scalar protocols
    size: Dimension normalization
    elements: Element-type identities and division semantics
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerances and timing
"""

from pymtrs.core.protocols import Scalar, Size
from pymtrs.core.size import Dim, dim
from pymtrs.core.exceptions import (
    MtrsError,
    ValidationError,
    DimensionError,
    OutOfBoundsError,
)

__all__ = [
    # Protocols
    "Size",
    "Scalar",
    # Dimensions
    "Dim",
    "dim",
    # Exceptions
    "MtrsError",
    "ValidationError",
    "DimensionError",
    "OutOfBoundsError",
]
