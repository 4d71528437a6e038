"""Complex numbers built from two :class:`Real` parts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from algebra_lab.structures.reals import Real
from algebra_lab.structures.ring import StructureError


@dataclass(frozen=True, slots=True, eq=False, init=False)
class Complex:
    """Complex field element ``re + im·i``.

    There is no ordering; pivot selection compares ``abs()``, which is the
    modulus as a :class:`Real`.
    """

    re: Real
    im: Real

    def __init__(self, re: Any = 0.0, im: Any = 0.0, tolerance: float | None = None) -> None:
        if isinstance(re, complex):
            re, im = re.real, re.imag
        if not isinstance(re, Real):
            re = Real(re, tolerance)
        if not isinstance(im, Real):
            im = Real(im, tolerance if tolerance is not None else re.tolerance)
        object.__setattr__(self, "re", re)
        object.__setattr__(self, "im", im)

    @classmethod
    def parse(cls, text: str, tolerance: float | None = None) -> Complex:
        """Parse ``"1+2i"``, ``"-3i"``, ``"4"`` (``j`` is accepted for ``i``)."""
        normalized = text.strip().replace(" ", "").replace("i", "j")
        try:
            value = complex(normalized)
        except ValueError as exc:
            raise StructureError(f"Invalid complex number: '{text}'") from exc
        return cls(value.real, value.imag, tolerance)

    @property
    def tolerance(self) -> float:
        return max(self.re.tolerance, self.im.tolerance)

    def conjugate(self) -> Complex:
        return Complex(self.re, -self.im)

    def modulus(self) -> Real:
        return (self.re * self.re + self.im * self.im).sqrt()

    def zero(self) -> Complex:
        return Complex(self.re.zero(), self.im.zero())

    def one(self) -> Complex:
        return Complex(self.re.one(), self.im.zero())

    def is_zero(self, tolerance: float | None = None) -> bool:
        return self.re.is_zero(tolerance) and self.im.is_zero(tolerance)

    def equals(self, other: Complex, tolerance: float | None = None) -> bool:
        other = _coerce(other)
        return self.re.equals(other.re, tolerance) and self.im.equals(other.im, tolerance)

    def __add__(self, other: Complex | complex | float) -> Complex:
        other = _coerce(other)
        return Complex(self.re + other.re, self.im + other.im)

    __radd__ = __add__

    def __sub__(self, other: Complex | complex | float) -> Complex:
        other = _coerce(other)
        return Complex(self.re - other.re, self.im - other.im)

    def __rsub__(self, other: complex | float) -> Complex:
        return _coerce(other) - self

    def __mul__(self, other: Complex | complex | float) -> Complex:
        other = _coerce(other)
        return Complex(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    __rmul__ = __mul__

    def __truediv__(self, other: Complex | complex | float) -> Complex:
        other = _coerce(other)
        denominator = other.re * other.re + other.im * other.im
        numerator = self * other.conjugate()
        return Complex(numerator.re / denominator, numerator.im / denominator)

    def __neg__(self) -> Complex:
        return Complex(-self.re, -self.im)

    def __abs__(self) -> Real:
        return self.modulus()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Complex, complex, int, float)):
            other = _coerce(other)
            return self.re == other.re and self.im == other.im
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __complex__(self) -> complex:
        return complex(float(self.re), float(self.im))

    def __str__(self) -> str:
        re, im = float(self.re), float(self.im)
        if self.im.is_zero():
            return f"{re}"
        if self.re.is_zero():
            return f"{im}i"
        return f"{re}{im:+}i"

    def __repr__(self) -> str:
        return f"Complex({float(self.re)!r}, {float(self.im)!r})"


def _coerce(other: Any) -> Complex:
    if isinstance(other, Complex):
        return other
    if isinstance(other, complex):
        return Complex(other.real, other.imag)
    if isinstance(other, (int, float, Real)):
        return Complex(other, 0.0)
    raise TypeError(f"Cannot combine Complex with {type(other).__name__}")


__all__ = ["Complex"]
