"""Exact integers of arbitrary size."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from functools import total_ordering
from typing import Any

from algebra_lab.structures.ring import StructureError


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Integer:
    """Integer ring element backed by a Python ``int``.

    Division is only defined when it is exact, which is all the Bareiss
    algorithm needs. Tolerances are accepted and ignored.

    Example:
        >>> Integer(6) / Integer(3)
        Integer(2)
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            # numpy integers and other integral types
            object.__setattr__(self, "value", operator.index(self.value))

    @classmethod
    def parse(cls, text: str) -> Integer:
        try:
            return cls(int(text.strip()))
        except ValueError as exc:
            raise StructureError(f"Error parsing integer: '{text}'") from exc

    def zero(self) -> Integer:
        return Integer(0)

    def one(self) -> Integer:
        return Integer(1)

    def is_zero(self, tolerance: float = 0.0) -> bool:
        return self.value == 0

    def equals(self, other: Integer, tolerance: float = 0.0) -> bool:
        return self == other

    def __add__(self, other: Integer | int) -> Integer:
        return Integer(self.value + _int_value(other))

    def __radd__(self, other: int) -> Integer:
        return Integer(other + self.value)

    def __sub__(self, other: Integer | int) -> Integer:
        return Integer(self.value - _int_value(other))

    def __rsub__(self, other: int) -> Integer:
        return Integer(other - self.value)

    def __mul__(self, other: Integer | int) -> Integer:
        return Integer(self.value * _int_value(other))

    def __rmul__(self, other: int) -> Integer:
        return Integer(other * self.value)

    def __truediv__(self, other: Integer | int) -> Integer:
        divisor = _int_value(other)
        quotient, remainder = divmod(self.value, divisor)
        if remainder != 0:
            raise StructureError(
                f"Inexact integer division: {self.value} / {divisor}"
            )
        return Integer(quotient)

    def __mod__(self, other: Integer | int) -> Integer:
        return Integer(self.value % _int_value(other))

    def __neg__(self) -> Integer:
        return Integer(-self.value)

    def __abs__(self) -> Integer:
        return Integer(abs(self.value))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Integer):
            return self.value == other.value
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __lt__(self, other: Integer | int) -> bool:
        return self.value < _int_value(other)

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Integer({self.value})"


def _int_value(other: Any) -> int:
    if isinstance(other, Integer):
        return other.value
    if isinstance(other, int):
        return other
    raise TypeError(f"Cannot combine Integer with {type(other).__name__}")


__all__ = ["Integer"]
