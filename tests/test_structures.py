"""Tests for the scalar structures (Integer, Rational, Real, Complex)."""

from fractions import Fraction

import numpy as np
import pytest

from algebra_lab.structures import (
    SCALAR_KINDS,
    Complex,
    Integer,
    Rational,
    Real,
    Ring,
    StructureError,
)


class TestRingProtocol:
    """Every scalar satisfies the Ring protocol."""

    @pytest.mark.parametrize("value", [Integer(2), Rational(1, 2), Real(0.5), Complex(1, 2)])
    def test_is_ring(self, value: object) -> None:
        """Runtime protocol check."""
        assert isinstance(value, Ring)

    @pytest.mark.parametrize("value", [Integer(7), Rational(3, 4), Real(2.5), Complex(1, -1)])
    def test_identities(self, value: Ring) -> None:
        """x + 0 == x and x * 1 == x."""
        assert value + value.zero() == value
        assert value * value.one() == value
        assert (value - value).is_zero(1e-12)

    def test_scalar_kinds_registry(self) -> None:
        """CLI names map to the classes."""
        assert SCALAR_KINDS == {
            "integer": Integer,
            "rational": Rational,
            "real": Real,
            "complex": Complex,
        }


class TestInteger:
    """Tests for Integer."""

    def test_arbitrary_precision(self) -> None:
        """Products never overflow."""
        big = Integer(2**64)
        assert big * big == Integer(2**128)

    def test_exact_division(self) -> None:
        """Exact quotients are allowed."""
        assert Integer(12) / Integer(4) == Integer(3)
        assert Integer(-12) / 4 == -3

    def test_inexact_division_raises(self) -> None:
        """Non-integer quotients raise StructureError."""
        with pytest.raises(StructureError, match="Inexact integer division"):
            Integer(7) / Integer(2)

    def test_division_by_zero(self) -> None:
        """Zero divisor raises ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            Integer(1) / Integer(0)

    def test_is_zero_ignores_tolerance(self) -> None:
        """Integers are exact."""
        assert Integer(0).is_zero(0.5)
        assert not Integer(1).is_zero(10.0)

    def test_compares_with_int(self) -> None:
        """Plain ints compare and combine."""
        assert Integer(3) == 3
        assert Integer(3) + 1 == Integer(4)
        assert 10 - Integer(3) == Integer(7)
        assert Integer(-2) < 1
        assert abs(Integer(-5)) == Integer(5)

    @pytest.mark.parametrize("text,expected", [("42", 42), (" -7 ", -7), ("0", 0)])
    def test_parse(self, text: str, expected: int) -> None:
        """Parses decimal integers."""
        assert Integer.parse(text) == Integer(expected)

    def test_parse_error(self) -> None:
        """Invalid text raises StructureError."""
        with pytest.raises(StructureError):
            Integer.parse("1.5")

    def test_str_and_repr(self) -> None:
        """Display forms."""
        assert str(Integer(-3)) == "-3"
        assert repr(Integer(-3)) == "Integer(-3)"


class TestRational:
    """Tests for Rational."""

    def test_normalised(self) -> None:
        """Stored in lowest terms with a positive denominator."""
        r = Rational(4, -6)
        assert (r.numerator, r.denominator) == (-2, 3)

    def test_arithmetic_exact(self) -> None:
        """Field operations are exact."""
        assert Rational(1, 3) + Rational(1, 6) == Rational(1, 2)
        assert Rational(2, 3) * Rational(3, 4) == Rational(1, 2)
        assert Rational(1, 2) / Rational(1, 4) == 2
        assert Rational(1) - Fraction(1, 3) == Rational(2, 3)

    def test_zero_denominator(self) -> None:
        """Rational(n, 0) is rejected."""
        with pytest.raises(ZeroDivisionError):
            Rational(1, 0)

    @pytest.mark.parametrize(
        "text,expected",
        [("3", Rational(3)), ("-1/2", Rational(-1, 2)), ("0.25", Rational(1, 4))],
    )
    def test_parse(self, text: str, expected: Rational) -> None:
        """Integers, fractions and decimals parse."""
        assert Rational.parse(text) == expected

    @pytest.mark.parametrize("text", ["1/0", "abc", ""])
    def test_parse_error(self, text: str) -> None:
        """Invalid text raises StructureError."""
        with pytest.raises(StructureError, match="Invalid rational"):
            Rational.parse(text)

    def test_display(self) -> None:
        """Shown as n or n/d."""
        assert str(Rational(6, 3)) == "2"
        assert str(Rational(-3, 9)) == "-1/3"

    def test_compares_with_integer(self) -> None:
        """Rationals and Integers interoperate."""
        assert Rational(4, 2) == Integer(2)
        assert Rational(Integer(3), Integer(6)) == Rational(1, 2)
        assert Rational(1, 3) < Rational(1, 2)


class TestReal:
    """Tests for Real."""

    def test_default_tolerance_from_precision(self) -> None:
        """fp64 → 1e-12, fp32 → 1e-5."""
        assert Real(1.0).tolerance == 1e-12
        assert Real(1.0, precision="fp32").tolerance == 1e-5

    def test_stored_in_precision_dtype(self) -> None:
        """Values keep the numpy dtype of their format."""
        assert isinstance(Real(1.0, precision="fp16").value, np.float16)
        assert isinstance((Real(1.0, precision="fp32") * 3).value, np.float32)

    def test_tolerant_equality(self) -> None:
        """== compares within the instance tolerance."""
        assert Real(0.1) + Real(0.2) == Real(0.3)
        assert Real(1.0) != Real(1.0 + 1e-9)
        assert Real(1.0, 1e-6) == Real(1.0 + 1e-9)

    def test_is_zero_uses_given_tolerance(self) -> None:
        """|x| <= tolerance counts as zero."""
        assert Real(1e-13).is_zero(1e-12)
        assert not Real(1e-11).is_zero(1e-12)
        assert Real(1e-3).is_zero(1e-2)

    def test_arithmetic_keeps_larger_tolerance(self) -> None:
        """Results inherit the looser tolerance."""
        result = Real(1.0, 1e-9) + Real(2.0, 1e-6)
        assert result.tolerance == 1e-6
        assert result == 3

    def test_division_by_zero(self) -> None:
        """Exact zero divisor raises."""
        with pytest.raises(ZeroDivisionError):
            Real(1.0) / Real(0.0)

    def test_compares_with_python_numbers(self) -> None:
        """Ints, floats, Integer and Rational compare by value."""
        assert Real(14.0) == 14
        assert Real(0.5) == Rational(1, 2)
        assert Real(2.0) == Integer(2)
        assert Real(-1.0) < 0

    def test_parse(self) -> None:
        """Parses floats and rejects junk."""
        assert Real.parse("2.5") == Real(2.5)
        with pytest.raises(StructureError, match="Invalid real"):
            Real.parse("two")


class TestComplex:
    """Tests for Complex."""

    def test_multiplication(self) -> None:
        """(1+2i)(3-i) = 5+5i."""
        assert Complex(1, 2) * Complex(3, -1) == Complex(5, 5)

    def test_division(self) -> None:
        """(5+5i)/(3-i) = 1+2i."""
        assert Complex(5, 5) / Complex(3, -1) == Complex(1, 2)

    def test_abs_is_modulus(self) -> None:
        """|3+4i| = 5 as a Real."""
        modulus = abs(Complex(3, 4))
        assert isinstance(modulus, Real)
        assert modulus == 5

    def test_is_zero(self) -> None:
        """Both parts must be near zero."""
        assert Complex(1e-14, -1e-14).is_zero(1e-12)
        assert not Complex(0, 1).is_zero(1e-12)

    @pytest.mark.parametrize(
        "text,expected",
        [("1+2i", Complex(1, 2)), ("-3i", Complex(0, -3)), ("4", Complex(4, 0)), ("1-1j", Complex(1, -1))],
    )
    def test_parse(self, text: str, expected: Complex) -> None:
        """Accepts i or j as the imaginary unit."""
        assert Complex.parse(text) == expected

    def test_parse_error(self) -> None:
        """Invalid text raises StructureError."""
        with pytest.raises(StructureError):
            Complex.parse("1+")

    def test_from_python_complex(self) -> None:
        """Python complex numbers unpack into both parts."""
        assert Complex(2 - 3j) == Complex(2, -3)
        assert complex(Complex(2, -3)) == 2 - 3j

    def test_display_roundtrips_through_parse(self) -> None:
        """str() output is accepted by parse()."""
        value = Complex(1.5, -2)
        assert Complex.parse(str(value)) == value
