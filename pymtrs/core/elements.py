"""
Element-type helpers.

A matrix carries its element type at runtime so that it can produce the
additive and multiplicative identities (``dtype(0)`` and ``dtype(1)``) and
pick the right division semantics. Element types are Python number types
(``int``, ``float``, ``complex``, ``Fraction``, ``Decimal``) or NumPy scalar
types; NumPy dtype objects and dtype strings are normalized to their scalar
type.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, Sequence

import numpy as np

from pymtrs.core.exceptions import ValidationError
from pymtrs.core.protocols import Scalar

# Element type used when nothing else determines one (matches NumPy)
DEFAULT_DTYPE: type = float


def normalize_dtype(dtype: Any) -> type:
    """
    Normalize a dtype specification to a concrete scalar type.

    Args:
        dtype: A Python type, a NumPy dtype, or a NumPy dtype string

    Returns:
        The scalar type used to build zero/one and cast values

    Raises:
        ValidationError: If the type cannot hold field-like numbers
    """
    if dtype is None:
        return DEFAULT_DTYPE
    if not isinstance(dtype, type):
        try:
            dtype = np.dtype(dtype).type
        except TypeError as e:
            raise ValidationError(f"dtype: cannot interpret {dtype!r}: {e}") from e
    elif issubclass(dtype, np.generic) and not issubclass(dtype, np.number):
        raise ValidationError(f"dtype: non-numeric NumPy type {dtype.__name__}")

    if dtype is bool:
        raise ValidationError("dtype: bool is not a field-like element type")

    try:
        zero = dtype(0)
        dtype(1)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"dtype: {dtype.__name__} cannot produce identities from 0 and 1: {e}"
        ) from e

    if not isinstance(zero, Scalar):
        raise ValidationError(
            f"dtype: {dtype.__name__} does not support + - * /"
        )
    return dtype


def infer_dtype(data: Sequence[Any], fallback: type | None = None) -> type:
    """
    Element type of a data sequence.

    Homogeneous data yields its single type. Plain ints defer to whatever
    they are mixed with (int and Fraction gives Fraction), and builtin
    numbers widen the way Python arithmetic does (float, then complex).
    Any other mix yields the type of the first value. Empty data yields
    ``fallback``.
    """
    if len(data) == 0:
        return normalize_dtype(fallback)

    types = {type(value) for value in data}
    if len(types) > 1:
        types.discard(int)
    if len(types) == 1:
        return types.pop()
    for wider in (complex, float):
        if wider in types:
            return wider
    return type(data[0])


def zero(dtype: type) -> Any:
    """Additive identity of ``dtype``."""
    return dtype(0)


def one(dtype: type) -> Any:
    """Multiplicative identity of ``dtype``."""
    return dtype(1)


def is_integral(dtype: type) -> bool:
    """Whether ``dtype`` is an integer type (Python or NumPy)."""
    return issubclass(dtype, (Integral, np.integer))


def cast(values: Sequence[Any], dtype: type) -> list[Any]:
    """Convert every value to ``dtype``."""
    return [dtype(v) for v in values]


def divide(numerator: Any, denominator: Any) -> Any:
    """
    Divide two elements with the element type's own semantics.

    Integers divide with truncation toward zero, which keeps integer
    matrices integral and is exact whenever the division is exact (the
    determinant's final step). Every other type uses true division.

    Raises:
        ZeroDivisionError: From the element type, when dividing by zero
    """
    if isinstance(numerator, (Integral, np.integer)) and isinstance(
        denominator, (Integral, np.integer)
    ):
        if denominator == 0:
            raise ZeroDivisionError("integer division by zero")
        quotient = numerator // denominator
        # floor division rounds toward -inf; step back toward zero
        if quotient < 0 and quotient * denominator != numerator:
            quotient += 1
        return quotient
    return numerator / denominator
