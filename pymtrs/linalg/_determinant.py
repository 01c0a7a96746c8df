"""
Fraction-free determinant and determinant-based inverse.

The determinant is computed by Gaussian elimination that never divides
during row reduction. Eliminating column i below the pivot replaces row j
with ``diag * row_j - row_j[i] * pivot_row``, which scales row j by the
pivot value ``diag``. Every such scale factor is multiplied into ``total``;
the product of the eliminated diagonal is therefore ``det(A) * total`` and
the single division ``det / total`` at the end is exact, even for integer
element types.

For an n x n matrix, step i scales n - 1 - i rows by the same pivot, so

    total = prod_i diag_i ** (n - 1 - i)

and the diagonal of the reduced matrix carries exactly that factor.

Intermediate values grow with the pivots: fixed-width NumPy integers can
overflow on larger matrices where Python ints cannot.
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Any

from pymtrs.core import elements
from pymtrs.linalg import _arithmetic

if TYPE_CHECKING:
    from pymtrs.linalg.matrix import Matrix


def determinant(matrix: 'Matrix') -> Any | None:
    """
    Exact determinant of a square matrix.

    Parameters
    ----------
    matrix : Matrix
        Any element type with + - * / and zero/one identities.

    Returns
    -------
    The determinant as an element of the matrix's type, or None when the
    matrix is not square. The determinant of a 0 x 0 matrix is one.

    Examples
    --------
    >>> m = Matrix.from_rows([[1, 0, 2, -1], [3, 0, 0, 5], [2, 1, 4, -3], [1, 0, 5, 0]])
    >>> determinant(m)
    30
    """
    height, width = matrix.size()
    if height != width:
        return None

    n = height
    zero = elements.zero(matrix.dtype)
    det = elements.one(matrix.dtype)
    total = elements.one(matrix.dtype)
    mat = matrix.as_slice()

    for i in range(n):
        # Pivot search: first row at or below i with a non-zero entry in column i
        index = i
        while index < n and mat[index * n + i] == zero:
            index += 1

        if index == n:
            # Column is zero from row i down; the diagonal product will be zero
            continue

        if index != i:
            # Any single row swap flips the sign, whatever the distance between rows
            for k in range(n):
                mat[index * n + k], mat[i * n + k] = mat[i * n + k], mat[index * n + k]
            det = zero - det

        temp = mat[i * n:(i + 1) * n]
        diag = temp[i]

        for j in range(i + 1, n):
            row = mat[j * n + i]
            for k in range(n):
                mat[j * n + k] = diag * mat[j * n + k] - row * temp[k]
            total = total * diag

    for i in range(n):
        det = det * mat[i * n + i]

    return elements.divide(det, total)


def inverse(matrix: 'Matrix') -> 'Matrix' | None:
    """
    Matrix scaled by the reciprocal of its determinant.

    Parameters
    ----------
    matrix : Matrix
        Square matrix. Only floating-point-like element types give a
        meaningful result; integral types truncate and emit a UserWarning.

    Returns
    -------
    ``matrix / determinant(matrix)``, or None when the matrix is not
    square or its determinant is zero.
    """
    det = determinant(matrix)
    if det is None or det == elements.zero(matrix.dtype):
        return None

    if elements.is_integral(matrix.dtype):
        warnings.warn(
            f"inverse() on integral element type {matrix.dtype.__name__} "
            f"truncates; use a floating element type",
            UserWarning,
            stacklevel=3,
        )

    return _arithmetic.scalar_div(matrix, det)
