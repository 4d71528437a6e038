"""Capability interface shared by every scalar the matrix algorithms accept.

A ring element only needs the operations listed on :class:`Ring`. Division
is used by the Bareiss algorithm, the Gaussian elimination family and LU;
for those to be sound it must be exact (``Integer`` raises when it is not,
``Rational`` is always exact, ``Real`` rounds).

The zero test always goes through ``is_zero(tolerance)``: exact types
ignore the tolerance, inexact types treat ``|x| <= tolerance`` as zero.
"""

from __future__ import annotations

from typing import Any, Protocol, Self, runtime_checkable


class StructureError(ValueError):
    """Raised when a scalar operation has no result in its structure."""


@runtime_checkable
class Ring(Protocol):
    """Scalar usable as a matrix coefficient.

    Implemented by ``Integer``, ``Rational``, ``Real`` and ``Complex``.
    """

    def __add__(self, other: Self) -> Self: ...

    def __sub__(self, other: Self) -> Self: ...

    def __mul__(self, other: Self) -> Self: ...

    def __truediv__(self, other: Self) -> Self: ...

    def __neg__(self) -> Self: ...

    def __abs__(self) -> Any: ...

    def zero(self) -> Self:
        """Additive identity in the same structure (and precision) as self."""
        ...

    def one(self) -> Self:
        """Multiplicative identity in the same structure as self."""
        ...

    def is_zero(self, tolerance: float) -> bool:
        """Whether self is zero, within ``tolerance`` for inexact types."""
        ...

    def equals(self, other: Self, tolerance: float) -> bool:
        """Equality within ``tolerance`` for inexact types."""
        ...


__all__ = ["Ring", "StructureError"]
