"""
Dimension abstraction.

Normalizes a size value into the (height, width) pair used everywhere else.
A bare integer ``n`` denotes the square size ``(n, n)``; a pair is taken as
``(height, width)``; any object implementing the ``Size`` protocol is asked
for its ``dim()``.
"""

from __future__ import annotations

from numbers import Integral
from typing import NamedTuple, Union

from pymtrs.core.exceptions import ValidationError
from pymtrs.core.protocols import Size


class Dim(NamedTuple):
    """Explicit (height, width) pair implementing the Size protocol."""
    height: int
    width: int

    def dim(self) -> tuple[int, int]:
        return (self.height, self.width)


SizeLike = Union[int, tuple[int, int], Size]


def _check_extent(value, name: str) -> int:
    # bool is an Integral subclass but never a meaningful extent
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__} {value!r}"
        )
    value = int(value)
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return value


def dim(size: SizeLike) -> tuple[int, int]:
    """
    Normalize a size value to a (height, width) pair.

    Args:
        size: A non-negative integer (square), a (height, width) pair, or
              an object implementing ``dim()``

    Returns:
        (height, width) as plain ints

    Raises:
        ValidationError: If the value cannot be interpreted as a size

    Examples:
        >>> dim(3)
        (3, 3)
        >>> dim((2, 4))
        (2, 4)
    """
    if isinstance(size, Dim):
        pair = size.dim()
    elif isinstance(size, tuple):
        if len(size) != 2:
            raise ValidationError(
                f"size: expected a (height, width) pair, got {len(size)} values"
            )
        pair = size
    elif isinstance(size, Size) and not isinstance(size, Integral):
        pair = size.dim()
    else:
        extent = _check_extent(size, "size")
        return (extent, extent)

    height, width = pair
    return (_check_extent(height, "height"), _check_extent(width, "width"))
