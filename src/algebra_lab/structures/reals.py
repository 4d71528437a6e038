"""Floating-point reals with a per-instance comparison tolerance."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Any

import numpy as np

from algebra_lab.structures.integers import Integer
from algebra_lab.structures.precision_types import (
    PrecisionFormat,
    get_dtype,
    get_tolerance,
    parse_format,
)
from algebra_lab.structures.rationals import Rational
from algebra_lab.structures.ring import StructureError


@total_ordering
@dataclass(frozen=True, slots=True, eq=False, init=False)
class Real:
    """Inexact real number stored as a numpy scalar.

    The value is held in the dtype of ``precision`` (fp64 by default). Every
    instance carries its own ``tolerance``; ``==`` compares within the larger
    tolerance of the two operands, while ``is_zero``/``equals`` use the
    tolerance passed by the caller. Results of arithmetic keep the precision
    and the larger tolerance of the operands.

    Example:
        >>> Real(0.1) + Real(0.2) == Real(0.3)
        True
        >>> Real(1e-13).is_zero(1e-12)
        True
    """

    value: np.floating
    tolerance: float
    precision: PrecisionFormat

    def __init__(
        self,
        value: Any,
        tolerance: float | None = None,
        precision: PrecisionFormat | str = PrecisionFormat.FP64,
    ) -> None:
        if isinstance(precision, str):
            precision = parse_format(precision)
        if isinstance(value, (Integer, Rational)):
            value = float(value)
        if tolerance is None:
            tolerance = get_tolerance(precision)
        object.__setattr__(self, "value", get_dtype(precision)(value))  # type: ignore[operator]
        object.__setattr__(self, "tolerance", float(tolerance))
        object.__setattr__(self, "precision", precision)

    @classmethod
    def parse(
        cls,
        text: str,
        tolerance: float | None = None,
        precision: PrecisionFormat | str = PrecisionFormat.FP64,
    ) -> Real:
        try:
            return cls(float(text.strip()), tolerance, precision)
        except ValueError as exc:
            raise StructureError(f"Invalid real: '{text}'") from exc

    def _like(self, value: Any, other: Real | None = None) -> Real:
        tolerance = self.tolerance
        if other is not None:
            tolerance = max(tolerance, other.tolerance)
        return Real(value, tolerance, self.precision)

    def zero(self) -> Real:
        return self._like(0.0)

    def one(self) -> Real:
        return self._like(1.0)

    def is_zero(self, tolerance: float | None = None) -> bool:
        if tolerance is None:
            tolerance = self.tolerance
        return bool(abs(self.value) <= tolerance)

    def equals(self, other: Real | float, tolerance: float | None = None) -> bool:
        if tolerance is None:
            tolerance = self.tolerance
        return bool(abs(self.value - _real_value(other)) <= tolerance)

    def sqrt(self) -> Real:
        return self._like(np.sqrt(self.value))

    def __add__(self, other: Real | float) -> Real:
        other = self._coerce(other)
        return self._like(self.value + other.value, other)

    def __radd__(self, other: float) -> Real:
        return self + other

    def __sub__(self, other: Real | float) -> Real:
        other = self._coerce(other)
        return self._like(self.value - other.value, other)

    def __rsub__(self, other: float) -> Real:
        return self._coerce(other) - self

    def __mul__(self, other: Real | float) -> Real:
        other = self._coerce(other)
        return self._like(self.value * other.value, other)

    def __rmul__(self, other: float) -> Real:
        return self * other

    def __truediv__(self, other: Real | float) -> Real:
        other = self._coerce(other)
        if other.value == 0:
            raise ZeroDivisionError(f"Real division by zero: {self} / {other}")
        return self._like(self.value / other.value, other)

    def __rtruediv__(self, other: float) -> Real:
        return self._coerce(other) / self

    def __neg__(self) -> Real:
        return self._like(-self.value)

    def __abs__(self) -> Real:
        return self._like(abs(self.value))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Real):
            tolerance = max(self.tolerance, other.tolerance)
            return bool(abs(self.value - other.value) <= tolerance)
        if isinstance(other, (int, float, Integer, Rational, np.number)):
            return self.equals(_real_value(other))
        return NotImplemented

    def __lt__(self, other: Real | float) -> bool:
        return bool(self.value < _real_value(other))

    # Tolerant equality is not transitive, so instances are unhashable.
    __hash__ = None  # type: ignore[assignment]

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return str(float(self.value))

    def __repr__(self) -> str:
        return f"Real({float(self.value)!r}, tolerance={self.tolerance:g})"

    def _coerce(self, other: Any) -> Real:
        if isinstance(other, Real):
            return other
        return self._like(_real_value(other))


def _real_value(other: Any) -> Any:
    if isinstance(other, Real):
        return other.value
    if isinstance(other, (Integer, Rational)):
        return float(other)
    if isinstance(other, (int, float, np.number)):
        return other
    raise TypeError(f"Cannot combine Real with {type(other).__name__}")


__all__ = ["Real"]
