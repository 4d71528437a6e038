"""Algebra Lab: exact and floating-point determinants over generic rings."""

__version__ = "0.1.0"

from algebra_lab.algorithms import DeterminantMethod, compare_methods
from algebra_lab.matrix import MatrixError, Signature, SquareMatrix
from algebra_lab.structures import (
    Complex,
    Integer,
    PrecisionFormat,
    Rational,
    Real,
    StructureError,
)

__all__ = [
    "__version__",
    "Complex",
    "DeterminantMethod",
    "Integer",
    "MatrixError",
    "PrecisionFormat",
    "Rational",
    "Real",
    "Signature",
    "SquareMatrix",
    "StructureError",
    "compare_methods",
]
