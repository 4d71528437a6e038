"""Parity of the row permutation applied during pivoting."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from algebra_lab.structures.ring import Ring


class Signature(Enum):
    """Sign of a permutation: ``EVEN`` (+1) or ``ODD`` (-1).

    Members are immutable, so ``change()`` returns the flipped member:

        >>> sign = Signature.EVEN
        >>> sign = sign.change()
        >>> sign
        <Signature.ODD: -1>
    """

    EVEN = 1
    ODD = -1

    @classmethod
    def from_sign(cls, sign: int) -> Signature:
        """Map ``+1``/``-1`` to a member.

        Any other value is a programming error and raises ``ValueError``.
        """
        if sign == 1:
            return cls.EVEN
        if sign == -1:
            return cls.ODD
        raise ValueError(f"Invalid sign: {sign}")

    def change(self) -> Signature:
        return Signature.ODD if self is Signature.EVEN else Signature.EVEN

    def as_number(self, unit: Ring) -> Ring:
        """``unit.one()`` for EVEN, ``-unit.one()`` for ODD."""
        one = unit.one()
        return one if self is Signature.EVEN else -one


__all__ = ["Signature"]
