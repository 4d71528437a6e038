"""Determinant and elimination algorithms.

This module contains implementations of:
- Determinant dispatch (triangle rule, Bareiss, Laplace/Montante, Gaussian)
- Bareiss fraction-free elimination
- Row echelon form, LU with and without pivoting, Gauss-Jordan inverse
- Timed comparison of determinant methods
"""

from algebra_lab.algorithms.bareiss import bareiss_determinant
from algebra_lab.algorithms.determinant import (
    CONCRETE_METHODS,
    DeterminantMethod,
    MethodResult,
    compare_methods,
    determinant,
    gaussian_determinant,
    laplace_expansion,
    select_method,
    triangle_rule,
)
from algebra_lab.algorithms.elimination import (
    RowEchelonResult,
    gaussian_elimination,
    inverse,
    lu,
    lup,
    row_echelon,
)

__all__ = [
    # Determinant
    "CONCRETE_METHODS",
    "DeterminantMethod",
    "MethodResult",
    "bareiss_determinant",
    "compare_methods",
    "determinant",
    "gaussian_determinant",
    "laplace_expansion",
    "select_method",
    "triangle_rule",
    # Elimination
    "RowEchelonResult",
    "gaussian_elimination",
    "inverse",
    "lu",
    "lup",
    "row_echelon",
]
