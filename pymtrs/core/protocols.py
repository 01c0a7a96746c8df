"""
Core protocols for pymtrs.

These define structural interfaces the matrix layer relies on. We use
Protocol (structural typing) rather than ABC (nominal typing) so that any
user type with the right shape works without registration.

Design Principles:
    - Minimal contracts: prescribe only what the matrix layer actually calls
    - Runtime checkable: validators can use isinstance() at the API boundary
"""

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar('T')  # Element type


@runtime_checkable
class Size(Protocol):
    """
    Anything that can be normalized to a (height, width) pair.

    Plain ``int`` and ``(height, width)`` tuples are accepted directly by
    ``pymtrs.core.size.dim``; other types opt in by implementing ``dim()``.
    """

    def dim(self) -> tuple[int, int]:
        """Return the (height, width) pair this value denotes."""
        ...


@runtime_checkable
class Scalar(Protocol):
    """
    Field-like element type.

    Elements must support addition, subtraction, multiplication and
    division, and the element type must produce its additive and
    multiplicative identities from ``T(0)`` and ``T(1)``.

    Division only needs to be exact where the caller relies on it: the
    determinant's final division is exact by construction, while
    ``inverse`` requires a type with real reciprocals (floating point,
    ``Fraction``).
    """

    def __add__(self, other): ...

    def __sub__(self, other): ...

    def __mul__(self, other): ...

    def __truediv__(self, other): ...
