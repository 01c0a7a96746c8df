"""
Text rendering for matrices.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pymtrs.linalg.matrix import Matrix


def format_matrix(matrix: 'Matrix') -> str:
    """
    One line per row, each element followed by a space.

    Examples:
        >>> format_matrix(Matrix.from_rows([[1, 2], [3, 4]]))
        '1 2 \\n3 4 \\n'
    """
    return "".join(
        "".join(f"{value} " for value in row) + "\n"
        for row in matrix.as_vec()
    )


def repr_matrix(matrix: 'Matrix') -> str:
    height, width = matrix.size()
    return (
        f"{type(matrix).__name__}({height}, {width}, "
        f"dtype={matrix.dtype.__name__}, data={matrix.as_vec()!r})"
    )
