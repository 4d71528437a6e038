"""Exact rational numbers."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from functools import total_ordering
from typing import Any

from algebra_lab.structures.integers import Integer
from algebra_lab.structures.ring import StructureError


@total_ordering
@dataclass(frozen=True, slots=True, eq=False, init=False)
class Rational:
    """Field element ``numerator / denominator`` kept in lowest terms.

    Backed by :class:`fractions.Fraction`, so every operation is exact and
    the tolerance passed to ``is_zero``/``equals`` is ignored.

    Example:
        >>> Rational(2, 4)
        Rational(1, 2)
        >>> str(Rational(3) / Rational(6))
        '1/2'
    """

    value: Fraction

    def __init__(self, numerator: Any = 0, denominator: Any = 1) -> None:
        if isinstance(numerator, Integer):
            numerator = numerator.value
        if isinstance(denominator, Integer):
            denominator = denominator.value
        if denominator == 0:
            raise ZeroDivisionError(f"Rational({numerator}, 0)")
        object.__setattr__(self, "value", Fraction(numerator) / Fraction(denominator))

    @classmethod
    def parse(cls, text: str) -> Rational:
        """Parse ``"n"``, ``"n/d"`` or a decimal such as ``"0.25"``."""
        try:
            return cls(Fraction(text.strip()))
        except (ValueError, ZeroDivisionError) as exc:
            raise StructureError(f"Invalid rational: '{text}'") from exc

    @property
    def numerator(self) -> int:
        return self.value.numerator

    @property
    def denominator(self) -> int:
        return self.value.denominator

    def zero(self) -> Rational:
        return Rational(0)

    def one(self) -> Rational:
        return Rational(1)

    def is_zero(self, tolerance: float = 0.0) -> bool:
        return self.value == 0

    def equals(self, other: Rational, tolerance: float = 0.0) -> bool:
        return self == other

    def __add__(self, other: Rational | int | Fraction) -> Rational:
        return Rational(self.value + _fraction_value(other))

    def __radd__(self, other: int | Fraction) -> Rational:
        return Rational(_fraction_value(other) + self.value)

    def __sub__(self, other: Rational | int | Fraction) -> Rational:
        return Rational(self.value - _fraction_value(other))

    def __rsub__(self, other: int | Fraction) -> Rational:
        return Rational(_fraction_value(other) - self.value)

    def __mul__(self, other: Rational | int | Fraction) -> Rational:
        return Rational(self.value * _fraction_value(other))

    def __rmul__(self, other: int | Fraction) -> Rational:
        return Rational(_fraction_value(other) * self.value)

    def __truediv__(self, other: Rational | int | Fraction) -> Rational:
        return Rational(self.value, _fraction_value(other))

    def __neg__(self) -> Rational:
        return Rational(-self.value)

    def __abs__(self) -> Rational:
        return Rational(abs(self.value))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Rational):
            return self.value == other.value
        if isinstance(other, (int, Fraction, Integer)):
            return self.value == _fraction_value(other)
        return NotImplemented

    def __lt__(self, other: Rational | int | Fraction) -> bool:
        return self.value < _fraction_value(other)

    def __hash__(self) -> int:
        return hash(self.value)

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        if self.denominator == 1:
            return f"Rational({self.numerator})"
        return f"Rational({self.numerator}, {self.denominator})"


def _fraction_value(other: Any) -> Fraction:
    if isinstance(other, Rational):
        return other.value
    if isinstance(other, Integer):
        return Fraction(other.value)
    if isinstance(other, (int, Fraction)):
        return Fraction(other)
    raise TypeError(f"Cannot combine Rational with {type(other).__name__}")


__all__ = ["Rational"]
