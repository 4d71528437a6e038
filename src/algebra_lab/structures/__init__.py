"""Scalar structures usable as matrix coefficients."""

from algebra_lab.structures.complex import Complex
from algebra_lab.structures.integers import Integer
from algebra_lab.structures.precision_types import (
    DEFAULT_TOLERANCE,
    PrecisionFormat,
    PrecisionSpec,
    get_dtype,
    get_eps,
    get_spec,
    get_tolerance,
    list_available_formats,
)
from algebra_lab.structures.rationals import Rational
from algebra_lab.structures.reals import Real
from algebra_lab.structures.ring import Ring, StructureError

SCALAR_KINDS: dict[str, type] = {
    "integer": Integer,
    "rational": Rational,
    "real": Real,
    "complex": Complex,
}
"""CLI-facing names of the scalar structures."""

__all__ = [
    "DEFAULT_TOLERANCE",
    "SCALAR_KINDS",
    "Complex",
    "Integer",
    "PrecisionFormat",
    "PrecisionSpec",
    "Rational",
    "Real",
    "Ring",
    "StructureError",
    "get_dtype",
    "get_eps",
    "get_spec",
    "get_tolerance",
    "list_available_formats",
]
