"""
Literal matrix construction.

``matrix()`` is the convenience front door for writing matrices inline. It
only reshapes its arguments into a flat row-major list and hands them to
the storage core, so the same dimension checks apply.

    matrix([[1, 2], [3, 4]])                      2x2 from rows
    matrix([1, 2, 3, 4], size=(2, 2))             2x2 from flat values
    matrix([[1, 2], [3, 4.1]], dtype='float32')   every value cast
"""

from __future__ import annotations

from typing import Any, Sequence

from pymtrs.core.size import SizeLike, dim
from pymtrs.core.validation import check_rectangular, check_same_size
from pymtrs.linalg.matrix import Matrix


def _is_nested(values: Sequence[Any]) -> bool:
    return len(values) > 0 and isinstance(values[0], (list, tuple))


def matrix(
    values: Sequence[Any],
    *,
    size: SizeLike | None = None,
    dtype: Any = None,
) -> Matrix:
    """
    Build a matrix from literal values.

    Parameters
    ----------
    values : sequence
        Nested rows, or flat row-major values when ``size`` is given.
    size : int or (height, width), optional
        Required for flat values. With nested rows it must agree with the
        rows' shape.
    dtype : type, optional
        Element type every value is converted to.

    Raises
    ------
    DimensionError
        If the values do not fill the requested size exactly, or rows are
        ragged.
    """
    if size is None:
        return Matrix.from_rows(values, dtype=dtype)

    if _is_nested(values):
        check_rectangular(values, "values")
        check_same_size((len(values), len(values[0])), dim(size), "values")
        flat = [value for row in values for value in row]
    else:
        flat = list(values)
    return Matrix.from_vec(size, flat, dtype=dtype)
