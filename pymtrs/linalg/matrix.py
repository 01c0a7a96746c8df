"""
Matrix: dense, generic, row-major matrix container.

Owns a flat list of elements in row-major order plus the height and width.
The element at logical position (r, c) lives at flat index ``r * width + c``
and the list always holds exactly ``height * width`` elements.

Arithmetic is pure and returns new matrices. ``set``, ``resize``,
``transpose`` and ``erase`` mutate the receiver in place; callers needing
a transposed copy must ``copy()`` first.
"""

from __future__ import annotations

from numbers import Number
from typing import Any, Generic, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymtrs.core import elements
from pymtrs.core.compute.tolerances import select_tolerance
from pymtrs.core.exceptions import OutOfBoundsError, ValidationError
from pymtrs.core.protocols import T
from pymtrs.core.size import SizeLike, dim
from pymtrs.core.validation import (
    check_2d,
    check_data_length,
    check_numeric,
    check_rectangular,
)
from pymtrs.linalg import _arithmetic, _determinant
from pymtrs.linalg._format import format_matrix, repr_matrix


class Matrix(Generic[T]):
    """
    Dense row-major matrix over a field-like element type.

    Construction:
        Matrix.zeros(size)            all additive identities
        Matrix.ones(size)             all multiplicative identities
        Matrix.identity(n)            n x n identity
        Matrix.diag(values)           square diagonal matrix
        Matrix.from_vec(size, data)   wrap a flat row-major list
        Matrix.from_slice(size, data) copy a flat row-major sequence
        Matrix.from_rows(rows)        nested rows
        Matrix.from_numpy(array)      2D NumPy array

    ``size`` is anything accepted by ``pymtrs.core.size.dim``: an int ``n``
    for ``(n, n)`` or a ``(height, width)`` pair.

    Examples:
        >>> m = Matrix.from_slice((2, 3), [1, 2, 3, 4, 5, 6])
        >>> m.size()
        (2, 3)
        >>> m[(1, 2)]
        6
    """

    __hash__ = None  # mutable

    def __init__(self, size: SizeLike, data: list[T], dtype: Any = None):
        height, width = dim(size)
        if not isinstance(data, list):
            data = list(data)
        check_data_length(data, (height, width), "data")
        if dtype is None:
            dtype = elements.infer_dtype(data)
        else:
            dtype = elements.normalize_dtype(dtype)
            data = elements.cast(data, dtype)

        self._height = height
        self._width = width
        self._data = data
        self._dtype = dtype

    # --- Construction ---

    @classmethod
    def zeros(cls, size: SizeLike, dtype: Any = None) -> Matrix:
        """Matrix of the given size filled with ``dtype(0)``."""
        dtype = elements.normalize_dtype(dtype)
        height, width = dim(size)
        return cls((height, width), [elements.zero(dtype)] * (height * width), dtype)

    @classmethod
    def ones(cls, size: SizeLike, dtype: Any = None) -> Matrix:
        """Matrix of the given size filled with ``dtype(1)``."""
        dtype = elements.normalize_dtype(dtype)
        height, width = dim(size)
        return cls((height, width), [elements.one(dtype)] * (height * width), dtype)

    @classmethod
    def identity(cls, n: int, dtype: Any = None) -> Matrix:
        """
        Square identity matrix.

        Args:
            n: Side length, or a square (n, n) size
            dtype: Element type (default float)

        Raises:
            ValidationError: If a non-square size is given

        Examples:
            >>> Matrix.identity(2, dtype=int).as_slice()
            [1, 0, 0, 1]
        """
        dtype = elements.normalize_dtype(dtype)
        side, width = dim(n)
        if side != width:
            raise ValidationError(f"identity: size must be square, got {side}x{width}")
        zero, one = elements.zero(dtype), elements.one(dtype)
        data = [one if row == col else zero for row in range(side) for col in range(side)]
        return cls(side, data, dtype)

    @classmethod
    def diag(cls, values: Sequence[T], dtype: Any = None) -> Matrix:
        """Square matrix with ``values[i]`` at (i, i) and zero elsewhere."""
        values = list(values)
        if dtype is None:
            dtype = elements.infer_dtype(values)
        dtype = elements.normalize_dtype(dtype)
        side = len(values)
        zero = elements.zero(dtype)
        data = [zero] * (side * side)
        for i, value in enumerate(values):
            data[i * side + i] = value
        return cls(side, data, dtype)

    @classmethod
    def from_vec(cls, size: SizeLike, data: list[T], dtype: Any = None) -> Matrix:
        """
        Wrap a flat row-major list without copying it.

        The matrix takes ownership of ``data``; the caller should not keep
        mutating it. When ``dtype`` is given the values are converted,
        which necessarily builds a new list.

        Raises:
            DimensionError: If len(data) != height * width
        """
        return cls(size, data, dtype)

    @classmethod
    def from_slice(cls, size: SizeLike, data: Sequence[T], dtype: Any = None) -> Matrix:
        """
        Copy a flat row-major sequence into a new matrix.

        Raises:
            DimensionError: If len(data) != height * width
        """
        return cls(size, list(data), dtype)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]], dtype: Any = None) -> Matrix:
        """
        Build a matrix from nested rows.

        Raises:
            DimensionError: If the rows are ragged
        """
        rows = [list(row) for row in rows]
        check_rectangular(rows, "rows")
        height = len(rows)
        width = len(rows[0]) if rows else 0
        data = [value for row in rows for value in row]
        return cls((height, width), data, dtype)

    @classmethod
    def from_numpy(cls, array: ArrayLike) -> Matrix:
        """
        Build a matrix from a 2D numeric NumPy array.

        Elements keep the array's scalar type (``numpy.float32`` stays
        ``numpy.float32``).

        Raises:
            DimensionError: If the array is not 2D
            ValidationError: If the array is not numeric
        """
        array = np.asarray(array)
        check_2d(array, "array")
        check_numeric(array, "array")
        height, width = array.shape
        return cls((height, width), list(array.ravel(order='C')), array.dtype.type)

    # --- Shape and metadata ---

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def dtype(self) -> type:
        """Element type."""
        return self._dtype

    def size(self) -> tuple[int, int]:
        """Dimensions as (height, width)."""
        return (self._height, self._width)

    def _spawn(self, size: tuple[int, int], data: list) -> Matrix:
        """New matrix sharing this one's class, typed from its data (no casting)."""
        spawned = type(self)(size, data)
        spawned._dtype = elements.infer_dtype(data, self._dtype)
        return spawned

    def _replace(self, size: tuple[int, int], data: list) -> None:
        """Swap in new dimensions and storage together."""
        check_data_length(data, size, "data")
        self._height, self._width = size
        self._data = data

    # --- Element access ---

    def get(self, loc: SizeLike) -> T | None:
        """
        Checked read.

        ``loc`` goes through ``dim``, so ``get(1)`` reads (1, 1). Only the
        resolved flat index is checked: ``None`` is returned when
        ``row * width + col`` falls outside the data.
        """
        row, col = dim(loc)
        index = row * self._width + col
        if index >= len(self._data):
            return None
        return self._data[index]

    def set(self, loc: SizeLike, value: T) -> None:
        """
        Checked write.

        Raises:
            OutOfBoundsError: If the row is >= height or the column is
                >= width. Each axis is checked on its own, so (0, width)
                fails even though its flat index may exist. The matrix is
                unchanged on failure.
        """
        row, col = dim(loc)
        if self._height <= row or self._width <= col:
            raise OutOfBoundsError(
                f"location ({row}, {col}) is outside a {self._height}x{self._width} matrix",
                location=(row, col),
                size=self.size(),
            )
        self._data[row * self._width + col] = value

    def __getitem__(self, loc: SizeLike) -> T:
        row, col = dim(loc)
        if row >= self._height or col >= self._width:
            raise IndexError(
                f"matrix index ({row}, {col}) out of range for {self._height}x{self._width}"
            )
        return self._data[row * self._width + col]

    def __setitem__(self, loc: SizeLike, value: T) -> None:
        self.set(loc, value)

    # --- Views and extraction ---

    def as_slice(self) -> list[T]:
        """Copy of the flat row-major data."""
        return list(self._data)

    def to_list(self) -> list[T]:
        return self.as_slice()

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def as_vec(self) -> list[list[T]]:
        """
        Rows as nested lists (height outer, width inner).

        Examples:
            >>> Matrix.from_vec(2, [2, 1, 4, 3]).as_vec()
            [[2, 1], [4, 3]]
        """
        width = self._width
        return [self._data[row * width:(row + 1) * width] for row in range(self._height)]

    def get_row(self, index: int) -> list[T] | None:
        """Row ``index``, or None when index >= height."""
        if not 0 <= index < self._height:
            return None
        return self._data[index * self._width:(index + 1) * self._width]

    def rows(self) -> list[list[T]]:
        return self.as_vec()

    def get_col(self, index: int) -> list[T] | None:
        """Column ``index``, or None when index >= width."""
        if not 0 <= index < self._width:
            return None
        return self._data[index::self._width]

    def cols(self) -> list[list[T]]:
        """Every column, in column order."""
        return [self.get_col(i) for i in range(self._width)]

    # --- In-place mutation ---

    def resize(self, new_size: SizeLike) -> None:
        """
        Grow or shrink the matrix in place.

        Height is adjusted first by appending or dropping whole rows of
        zeros, then width by rebuilding each row (padding with zero or
        truncating). Existing elements keep their (row, col) position.

        Examples:
            >>> m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
            >>> m.resize((2, 2))
            >>> m.as_vec()
            [[1, 2], [4, 5]]
        """
        new_height, new_width = dim(new_size)
        zero = elements.zero(self._dtype)
        width = self._width
        data = self._data

        if new_height > self._height:
            data.extend([zero] * ((new_height - self._height) * width))
        else:
            del data[new_height * width:]

        if new_width != width:
            rebuilt = []
            for row in range(new_height):
                current = data[row * width:(row + 1) * width]
                if new_width < width:
                    rebuilt.extend(current[:new_width])
                else:
                    rebuilt.extend(current)
                    rebuilt.extend([zero] * (new_width - width))
            data = rebuilt

        self._replace((new_height, new_width), data)

    def erase(self) -> None:
        """Reset every element to the additive identity."""
        zero = elements.zero(self._dtype)
        for i in range(len(self._data)):
            self._data[i] = zero

    def transpose(self) -> None:
        """
        Transpose in place; returns None.

        Examples:
            >>> m = Matrix.from_rows([[1, 2], [3, 4]])
            >>> m.transpose()
            >>> m.as_vec()
            [[1, 3], [2, 4]]
        """
        _arithmetic.transpose(self)

    def copy(self) -> Matrix:
        return type(self)(self.size(), list(self._data), self._dtype)

    def __copy__(self) -> Matrix:
        return self.copy()

    # --- Arithmetic ---

    def scalar_add(self, value: T) -> Matrix:
        """Add ``value`` to every element."""
        return _arithmetic.scalar_add(self, value)

    def scalar_sub(self, value: T) -> Matrix:
        """Subtract ``value`` from every element."""
        return _arithmetic.scalar_sub(self, value)

    def scalar_mul(self, value: T) -> Matrix:
        """Multiply every element by ``value``."""
        return _arithmetic.scalar_mul(self, value)

    def scalar_div(self, value: T) -> Matrix:
        """Divide every element by ``value`` (integers truncate toward zero)."""
        return _arithmetic.scalar_div(self, value)

    def determinant(self) -> T | None:
        """Exact determinant, or None if the matrix is not square."""
        return _determinant.determinant(self)

    def inverse(self) -> Matrix | None:
        """Matrix divided by its determinant, or None if non-square or singular."""
        return _determinant.inverse(self)

    def __add__(self, other):
        if isinstance(other, Matrix):
            return _arithmetic.add(self, other)
        if isinstance(other, Number):
            return _arithmetic.scalar_add(self, other)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, Number):
            return _arithmetic.scalar_add(self, other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Matrix):
            return _arithmetic.sub(self, other)
        if isinstance(other, Number):
            return _arithmetic.scalar_sub(self, other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return _arithmetic.product(self, other)
        if isinstance(other, Number):
            return _arithmetic.scalar_mul(self, other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Number):
            return _arithmetic.scalar_mul(self, other)
        return NotImplemented

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            return _arithmetic.product(self, other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Number):
            return _arithmetic.scalar_div(self, other)
        return NotImplemented

    def __neg__(self) -> Matrix:
        return _arithmetic.negate(self)

    # --- Comparison ---

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.size() == other.size() and self._data == other._data

    def allclose(
        self,
        other: Matrix,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Approximate equality within a tolerance tier.

        Tolerances default to the looser of the tiers selected for the two
        element types (exact for integers and rationals). Matrices of
        different sizes are never close.
        """
        if self.size() != other.size():
            return False

        tiers = [select_tolerance(self._dtype), select_tolerance(other.dtype)]
        if rtol is None:
            rtol = max(tier.rtol for tier in tiers)
        if atol is None:
            atol = max(tier.atol for tier in tiers)

        is_complex = any(
            issubclass(dtype, (complex, np.complexfloating))
            for dtype in (self._dtype, other.dtype)
        )
        target = np.complex128 if is_complex else np.float64
        return bool(np.allclose(
            self.to_numpy(target), other.to_numpy(target), rtol=rtol, atol=atol
        ))

    # --- Interop and display ---

    def to_numpy(self, dtype: Any = None) -> NDArray[Any]:
        """
        Copy into a 2D NumPy array of shape (height, width).

        Without ``dtype``, NumPy scalar element types are kept and Python
        types are left to NumPy's inference (``Fraction`` becomes object).
        """
        if dtype is None and issubclass(self._dtype, np.generic):
            dtype = self._dtype
        if dtype is None and not self._data:
            dtype = np.float64
        return np.array(self._data, dtype=dtype).reshape(self._height, self._width)

    def __str__(self) -> str:
        return format_matrix(self)

    def __repr__(self) -> str:
        return repr_matrix(self)
