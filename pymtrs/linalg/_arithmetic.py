"""
Elementwise and linear arithmetic on matrices.

Every function here is built on the storage-core primitives (``size``,
``as_slice``, ``as_vec``, ``cols``) and returns a new matrix, except
``transpose`` which rewrites its argument in place.

Shape mismatches raise DimensionError: they are programmer errors, not
conditions to branch on.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from pymtrs.core import elements
from pymtrs.core.validation import check_inner_dimensions, check_same_size

if TYPE_CHECKING:
    from pymtrs.linalg.matrix import Matrix


def _elementwise(
    left: 'Matrix',
    right: 'Matrix',
    op: Callable[[Any, Any], Any],
    operation: str,
) -> 'Matrix':
    check_same_size(left.size(), right.size(), operation)
    data = [op(a, b) for a, b in zip(left.as_slice(), right.as_slice())]
    return left._spawn(left.size(), data)


def _map(matrix: 'Matrix', op: Callable[[Any], Any]) -> 'Matrix':
    return matrix._spawn(matrix.size(), [op(x) for x in matrix.as_slice()])


def add(left: 'Matrix', right: 'Matrix') -> 'Matrix':
    """
    Elementwise sum.

    Raises:
        DimensionError: If the sizes differ
    """
    return _elementwise(left, right, lambda a, b: a + b, "add")


def sub(left: 'Matrix', right: 'Matrix') -> 'Matrix':
    """
    Elementwise difference.

    Raises:
        DimensionError: If the sizes differ
    """
    return _elementwise(left, right, lambda a, b: a - b, "sub")


def product(left: 'Matrix', right: 'Matrix') -> 'Matrix':
    """
    Matrix product.

    Cell (i, j) is the inner product of left's row i and right's column j,
    accumulated from the element type's zero.

    Returns:
        Matrix of shape (left.height, right.width)

    Raises:
        DimensionError: If left.width != right.height
    """
    check_inner_dimensions(left.size(), right.size())

    zero = elements.zero(left.dtype)
    columns = right.cols()
    data = []
    for row in left.as_vec():
        for col in columns:
            total = zero
            for a, b in zip(row, col):
                total = total + a * b
            data.append(total)

    return left._spawn((left.height, right.width), data)


def scalar_add(matrix: 'Matrix', value: Any) -> 'Matrix':
    return _map(matrix, lambda x: x + value)


def scalar_sub(matrix: 'Matrix', value: Any) -> 'Matrix':
    return _map(matrix, lambda x: x - value)


def scalar_mul(matrix: 'Matrix', value: Any) -> 'Matrix':
    return _map(matrix, lambda x: x * value)


def scalar_div(matrix: 'Matrix', value: Any) -> 'Matrix':
    """Divide every element, with integer truncation for integral types."""
    return _map(matrix, lambda x: elements.divide(x, value))


def negate(matrix: 'Matrix') -> 'Matrix':
    zero = elements.zero(matrix.dtype)
    return _map(matrix, lambda x: zero - x)


def transpose(matrix: 'Matrix') -> None:
    """
    Transpose in place.

    Swaps height and width and reorders the data so that the element
    formerly at (r, c) is at (c, r). Returns None.
    """
    height, width = matrix.size()
    data = matrix.as_slice()
    transposed = [data[row * width + col] for col in range(width) for row in range(height)]
    matrix._replace((width, height), transposed)
