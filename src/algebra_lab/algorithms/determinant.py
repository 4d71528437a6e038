"""Determinant algorithms and method selection.

Implements the closed-form triangle rule (n ≤ 3), Laplace/Montante cofactor
expansion along the first row, the Gaussian-elimination determinant and
dispatch to the Bareiss algorithm, plus a timed comparison of all of them
on the same matrix.

Complexity:
- Triangle rule: O(1), dimensions 1 to 3 only
- Bareiss, Gaussian elimination: O(n³)
- Laplace expansion: O(n!), for validation and small matrices

References:
- https://en.wikipedia.org/wiki/Laplace_expansion
- https://mathworld.wolfram.com/LaplaceExpansion.html
- https://en.wikipedia.org/wiki/Rule_of_Sarrus
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from algebra_lab.algorithms.bareiss import bareiss_determinant
from algebra_lab.algorithms.elimination import row_echelon
from algebra_lab.matrix.errors import InvalidDimensionError, MatrixError
from algebra_lab.matrix.signature import Signature
from algebra_lab.structures.precision_types import DEFAULT_TOLERANCE
from algebra_lab.structures.ring import StructureError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from algebra_lab.matrix.square import SquareMatrix

logger = logging.getLogger(__name__)


class DeterminantMethod(Enum):
    """Determinant algorithm selector."""

    TRIANGLE = "triangle"
    BAREISS = "bareiss"
    LAPLACE = "laplace"
    GAUSSIAN = "gaussian"
    OPTIMIZE = "optimize"

    @classmethod
    def parse(cls, name: DeterminantMethod | str) -> DeterminantMethod:
        """Parse a method name (``"bareiss"``, ``"Laplace"``, ``"montante"``...)."""
        if isinstance(name, DeterminantMethod):
            return name
        normalized = name.strip().lower()
        if normalized == "montante":
            return cls.LAPLACE
        for method in cls:
            if method.value == normalized:
                return method
        valid = [m.value for m in cls]
        raise ValueError(f"Unknown determinant method: '{name}'. Valid: {valid}")


CONCRETE_METHODS: tuple[DeterminantMethod, ...] = (
    DeterminantMethod.TRIANGLE,
    DeterminantMethod.BAREISS,
    DeterminantMethod.LAPLACE,
    DeterminantMethod.GAUSSIAN,
)
"""Every method except the OPTIMIZE policy."""

TRIANGLE_LIMIT: int = 4
"""OPTIMIZE uses the triangle rule below this dimension."""

BAREISS_LIMIT: int = 10
"""OPTIMIZE uses Bareiss below this dimension and Laplace from it on."""

MAX_COMPARE_LAPLACE_DIMENSION: int = 8
"""compare_methods leaves Laplace out by default above this dimension."""


# =============================================================================
# DISPATCH
# =============================================================================


def select_method(dimension: int) -> DeterminantMethod:
    """Method chosen by the OPTIMIZE policy for a given dimension.

    The thresholds are a heuristic: from dimension 10 on the policy falls
    back to the factorial-time Laplace expansion, which is logged as a
    warning.
    """
    if dimension < TRIANGLE_LIMIT:
        return DeterminantMethod.TRIANGLE
    if dimension < BAREISS_LIMIT:
        return DeterminantMethod.BAREISS
    logger.warning(
        "Optimize selected Laplace expansion for dimension %d; this is O(n!)",
        dimension,
    )
    return DeterminantMethod.LAPLACE


def determinant(
    matrix: SquareMatrix[Any],
    method: DeterminantMethod | str = DeterminantMethod.OPTIMIZE,
    tolerance: float = DEFAULT_TOLERANCE,
) -> Any:
    """Determinant of ``matrix`` with the requested method.

    Args:
        matrix: Input matrix; never mutated.
        method: Algorithm, or OPTIMIZE to pick one from the dimension.
        tolerance: Zero threshold for pivots (Bareiss, Gaussian).

    Raises:
        InvalidDimensionError: For an empty matrix, or the triangle rule
            beyond dimension 3.
    """
    method = DeterminantMethod.parse(method)
    if matrix.dimension == 0:
        raise InvalidDimensionError(0)
    if method is DeterminantMethod.OPTIMIZE:
        method = select_method(matrix.dimension)
    logger.debug("Determinant of %dx%d matrix via %s", matrix.dimension, matrix.dimension, method.value)

    if method is DeterminantMethod.TRIANGLE:
        return triangle_rule(matrix)
    if method is DeterminantMethod.BAREISS:
        return bareiss_determinant(matrix, tolerance)
    if method is DeterminantMethod.LAPLACE:
        return laplace_expansion(matrix)
    return gaussian_determinant(matrix, tolerance)


# =============================================================================
# ALGORITHMS
# =============================================================================


def triangle_rule(matrix: SquareMatrix[Any]) -> Any:
    """Closed-form determinant for dimensions 1, 2 and 3 (rule of Sarrus).

    Raises:
        InvalidDimensionError: For any other dimension.
    """
    n = matrix.dimension
    a = matrix.rows()
    if n == 1:
        return a[0][0]
    if n == 2:
        return a[0][0] * a[1][1] - a[0][1] * a[1][0]
    if n == 3:
        (p, q, r), (s, t, u), (v, w, x) = a
        return p * t * x + q * u * v + r * s * w - r * t * v - q * s * x - p * u * w
    raise InvalidDimensionError(n)


def laplace_expansion(matrix: SquareMatrix[Any]) -> Any:
    """Cofactor expansion along the first row (Montante's method).

    Materialises a fresh minor for every cofactor, so the cost is O(n!).

    Example:
        >>> laplace_expansion(SquareMatrix.of(Integer, [[1, 2, 3], [1, -2, 0], [0, 1, 5]]))
        Integer(-17)
    """
    if matrix.dimension == 0:
        raise InvalidDimensionError(0)
    if matrix.dimension == 1:
        return matrix[0, 0]

    first_row = matrix.rows()[0]
    total = first_row[0].zero()
    # change() runs before each term, so starting at ODD makes column 0 positive
    sign = Signature.ODD
    for column, entry in enumerate(first_row):
        sign = sign.change()
        if entry.is_zero(0.0):
            continue
        term = entry * laplace_expansion(matrix.minor(0, column))
        total = total + term if sign is Signature.EVEN else total - term
    return total


def gaussian_determinant(matrix: SquareMatrix[Any], tolerance: float = DEFAULT_TOLERANCE) -> Any:
    """Product of the row echelon diagonal times the parity of the row swaps.

    A rank-deficient matrix (some column without a pivot) has determinant
    zero.
    """
    if matrix.dimension == 0:
        raise InvalidDimensionError(0)
    result = row_echelon(matrix, tolerance)
    zero = result.rows[0][0].zero()
    if result.rank < matrix.dimension:
        logger.debug("Gaussian determinant: rank %d < %d, matrix is singular", result.rank, matrix.dimension)
        return zero

    value = result.sign.as_number(zero)
    for i in range(matrix.dimension):
        value = value * result.rows[i][i]
    return value


# =============================================================================
# METHOD COMPARISON
# =============================================================================


@dataclass(frozen=True, slots=True)
class MethodResult:
    """Outcome of one determinant method in :func:`compare_methods`."""

    method: DeterminantMethod
    """Method that was run."""

    value: Any
    """Determinant, or None when the method failed."""

    elapsed: float
    """Wall-clock time (seconds)."""

    error: str | None = None
    """Error message when the method raised."""

    @property
    def ok(self) -> bool:
        return self.error is None


def compare_methods(
    matrix: SquareMatrix[Any],
    methods: Iterable[DeterminantMethod | str] | None = None,
    tolerance: float = DEFAULT_TOLERANCE,
) -> list[MethodResult]:
    """Run several determinant methods on the same matrix and time each.

    By default every concrete method runs, except Laplace expansion above
    ``MAX_COMPARE_LAPLACE_DIMENSION``. A method that raises ``MatrixError``
    or ``StructureError`` (e.g. the triangle rule on a 4×4 matrix, or an
    inexact ``Integer`` division) is recorded with its message.

    Example:
        >>> results = compare_methods(SquareMatrix.of(Rational, [[2, 1], [1, 3]]))
        >>> {r.method.value: str(r.value) for r in results}
        {'triangle': '5', 'bareiss': '5', 'laplace': '5', 'gaussian': '5'}
    """
    if not methods:
        selected = [
            m
            for m in CONCRETE_METHODS
            if m is not DeterminantMethod.LAPLACE or matrix.dimension <= MAX_COMPARE_LAPLACE_DIMENSION
        ]
    else:
        selected = [DeterminantMethod.parse(m) for m in methods]

    results = []
    for method in selected:
        start = time.perf_counter()
        try:
            value = determinant(matrix, method, tolerance)
        except (MatrixError, StructureError) as exc:
            elapsed = time.perf_counter() - start
            logger.debug("%s failed: %s", method.value, exc)
            results.append(MethodResult(method=method, value=None, elapsed=elapsed, error=str(exc)))
            continue
        elapsed = time.perf_counter() - start
        results.append(MethodResult(method=method, value=value, elapsed=elapsed))
    return results


__all__ = [
    "BAREISS_LIMIT",
    "CONCRETE_METHODS",
    "MAX_COMPARE_LAPLACE_DIMENSION",
    "TRIANGLE_LIMIT",
    "DeterminantMethod",
    "MethodResult",
    "compare_methods",
    "determinant",
    "gaussian_determinant",
    "laplace_expansion",
    "select_method",
    "triangle_rule",
]
