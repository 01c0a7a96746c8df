"""
Input validation utilities for pymtrs.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently truncating,
padding, or making assumptions about caller intent.

Design principles:
    - No silent reshaping of data
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from pymtrs.core.exceptions import DimensionError, ValidationError


def check_data_length(
    data: Sequence[Any],
    size: tuple[int, int],
    name: str,
) -> None:
    """
    Verify a flat row-major sequence holds exactly height * width values.

    Args:
        data: Flat element sequence
        size: Target (height, width)
        name: Parameter name for error messages

    Raises:
        DimensionError: If the length does not match
    """
    height, width = size
    if len(data) != height * width:
        raise DimensionError(
            f"{name}: expected {height * width} values for a {height}x{width} matrix, "
            f"got {len(data)}"
        )


def check_rectangular(rows: Sequence[Sequence[Any]], name: str) -> None:
    """
    Verify every row of a nested sequence has the same length.

    Args:
        rows: Row sequences
        name: Parameter name for error messages

    Raises:
        DimensionError: If rows are ragged
    """
    if len(rows) < 2:
        return

    lengths = [len(row) for row in rows]
    if len(set(lengths)) > 1:
        raise DimensionError(f"{name}: ragged rows with lengths {lengths}")


def check_same_size(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical (height, width).

    Args:
        left: Size of the left operand
        right: Size of the right operand
        operation: Operation name for error messages

    Raises:
        DimensionError: If the sizes differ
    """
    if left != right:
        raise DimensionError(
            f"{operation}: incompatible dimensions {left[0]}x{left[1]} and {right[0]}x{right[1]}"
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, int],
) -> None:
    """
    Verify left.width == right.height for a matrix product.

    Raises:
        DimensionError: If the inner dimensions differ
    """
    if left[1] != right[0]:
        raise DimensionError(
            f"product: left width {left[1]} does not match right height {right[0]} "
            f"({left[0]}x{left[1]} * {right[0]}x{right[1]})"
        )


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_numeric(array: NDArray[Any], name: str) -> None:
    """
    Verify array has a numeric dtype.

    Raises:
        ValidationError: If the dtype is object, string, bool, etc.
    """
    if array.dtype == object:
        raise ValidationError(
            f"{name}: object dtype, convert elements with Matrix.from_rows instead"
        )
    if not np.issubdtype(array.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {array.dtype}, expected numeric data"
        )
