"""Gaussian elimination, LU factorisations and Gauss-Jordan inversion.

All routines take a ``SquareMatrix`` and return new matrices; the input is
copied first and never mutated. Every division goes through the ring's
``/``, so these routines need a field (``Rational``, ``Real``, ``Complex``)
or inputs whose quotients happen to be exact over ``Integer``.

Key Features:
- Row echelon form with partial pivoting by absolute value, skipping
  rank-deficient columns
- Doolittle LU without pivoting (unit lower triangular L)
- LU with partial pivoting returning the permutation matrix
- Gauss-Jordan inverse with partial pivoting

References:
- Golub & Van Loan: "Matrix Computations" (4th ed.), §3.2 and §3.4
- Higham: "Accuracy and Stability of Numerical Algorithms" (2nd ed.), Ch. 9
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from algebra_lab.matrix.errors import MatrixError
from algebra_lab.matrix.signature import Signature
from algebra_lab.matrix.square import SquareMatrix
from algebra_lab.structures.precision_types import DEFAULT_TOLERANCE

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RowEchelonResult:
    """Row echelon form plus the bookkeeping the determinant needs."""

    rows: list[list[Any]]
    """Reduced rows; entries below each pivot are exact zeros."""

    sign: Signature
    """Parity of the row swaps performed."""

    rank: int
    """Number of pivots found."""


def _pivot_row(rows: list[list[Any]], column: int, start: int) -> int:
    """Index of the row at or below ``start`` with the largest ``abs()`` in ``column``."""
    best = start
    best_value = abs(rows[start][column])
    for i in range(start + 1, len(rows)):
        value = abs(rows[i][column])
        if value > best_value:
            best, best_value = i, value
    return best


def _eliminate_below(rows: list[list[Any]], pivot_row: int, column: int, tolerance: float) -> list[Any]:
    """Clear ``column`` below ``pivot_row``; return the multipliers used."""
    pivot_values = rows[pivot_row]
    pivot = pivot_values[column]
    zero = pivot.zero()
    factors = []
    for i in range(pivot_row + 1, len(rows)):
        row = rows[i]
        if row[column].is_zero(tolerance):
            factors.append(zero)
            row[column] = zero
            continue
        factor = row[column] / pivot
        factors.append(factor)
        row[column] = zero
        for j in range(column + 1, len(row)):
            row[j] = row[j] - factor * pivot_values[j]
    return factors


def row_echelon(matrix: SquareMatrix[Any], tolerance: float = DEFAULT_TOLERANCE) -> RowEchelonResult:
    """Reduce to row echelon form, tracking swap parity and rank.

    The pivot row and column advance together. When the best candidate in
    a column is zero within ``tolerance`` the column is skipped and the
    pivot row stays where it is.
    """
    rows = matrix.rows()
    n = matrix.dimension
    sign = Signature.EVEN
    pivot = 0

    for column in range(n):
        if pivot >= n:
            break
        best = _pivot_row(rows, column, pivot)
        if rows[best][column].is_zero(tolerance):
            logger.debug("Elimination: column %d has no pivot, skipping", column)
            continue
        if best != pivot:
            logger.debug("Elimination: swapping rows %d and %d", pivot, best)
            rows[pivot], rows[best] = rows[best], rows[pivot]
            sign = sign.change()
        _eliminate_below(rows, pivot, column, tolerance)
        pivot += 1

    return RowEchelonResult(rows=rows, sign=sign, rank=pivot)


def gaussian_elimination(matrix: SquareMatrix[Any], tolerance: float = DEFAULT_TOLERANCE) -> SquareMatrix[Any]:
    """Row echelon form of ``matrix`` with partial pivoting.

    Example:
        >>> m = SquareMatrix.of(Rational, [[0, 2], [1, 1]])
        >>> str(gaussian_elimination(m))
        '{{1,1},{0,2}}'
    """
    result = row_echelon(matrix, tolerance)
    return SquareMatrix(matrix.dimension, result.rows)


def lu(
    matrix: SquareMatrix[Any], tolerance: float = 0.0
) -> tuple[SquareMatrix[Any], SquareMatrix[Any]]:
    """Doolittle LU factorisation without pivoting: ``A = L · U``.

    ``L`` is unit lower triangular and ``U`` upper triangular. There is no
    row exchange, so a zero pivot that has entries to eliminate below it
    makes the factorisation undefined; use :func:`lup` for general input.

    Raises:
        MatrixError: If a pivot that must be divided by is zero within
            ``tolerance``.
    """
    n = matrix.dimension
    u = matrix.rows()
    if n == 0:
        return SquareMatrix(0, []), SquareMatrix(0, [])
    lower = SquareMatrix.identity(n, u[0][0]).rows()

    for k in range(n - 1):
        if u[k][k].is_zero(tolerance):
            if all(u[i][k].is_zero(tolerance) for i in range(k + 1, n)):
                continue
            msg = f"Zero pivot at position {k}: LU without pivoting is undefined"
            raise MatrixError(msg)
        for i, factor in enumerate(_eliminate_below(u, k, k, tolerance), start=k + 1):
            lower[i][k] = factor

    return SquareMatrix(n, lower), SquareMatrix(n, u)


def lup(
    matrix: SquareMatrix[Any], tolerance: float = DEFAULT_TOLERANCE
) -> tuple[SquareMatrix[Any], SquareMatrix[Any], SquareMatrix[Any]]:
    """LU factorisation with partial pivoting: ``P · A = L · U``.

    A column whose candidates are all zero within ``tolerance`` is left as
    is, so singular matrices factor without error (``U`` then has a zero on
    its diagonal).

    Returns:
        ``(P, L, U)`` with ``P`` a permutation matrix.
    """
    n = matrix.dimension
    u = matrix.rows()
    if n == 0:
        empty: SquareMatrix[Any] = SquareMatrix(0, [])
        return empty, empty.copy(), empty.copy()
    unit = u[0][0]
    lower = SquareMatrix.identity(n, unit).rows()
    order = list(range(n))

    for k in range(n - 1):
        best = _pivot_row(u, k, k)
        if best != k:
            logger.debug("LUP: swapping rows %d and %d", k, best)
            u[k], u[best] = u[best], u[k]
            order[k], order[best] = order[best], order[k]
            lower[k][:k], lower[best][:k] = lower[best][:k], lower[k][:k]
        if u[k][k].is_zero(tolerance):
            logger.debug("LUP: column %d has no pivot, skipping", k)
            continue
        for i, factor in enumerate(_eliminate_below(u, k, k, tolerance), start=k + 1):
            lower[i][k] = factor

    one, zero = unit.one(), unit.zero()
    p = SquareMatrix.from_fn(n, lambda i, j: one if order[i] == j else zero)
    return p, SquareMatrix(n, lower), SquareMatrix(n, u)


def inverse(matrix: SquareMatrix[Any], tolerance: float = DEFAULT_TOLERANCE) -> SquareMatrix[Any]:
    """Inverse by Gauss-Jordan elimination with partial pivoting.

    Raises:
        MatrixError: If the matrix is singular (a pivot column is zero
            within ``tolerance``).
    """
    n = matrix.dimension
    a = matrix.rows()
    if n == 0:
        return SquareMatrix(0, [])
    b = SquareMatrix.identity(n, a[0][0]).rows()

    for k in range(n):
        best = _pivot_row(a, k, k)
        if a[best][k].is_zero(tolerance):
            logger.debug("Inverse: column %d has no pivot", k)
            raise MatrixError("Matrix is not invertible")
        if best != k:
            a[k], a[best] = a[best], a[k]
            b[k], b[best] = b[best], b[k]

        pivot = a[k][k]
        a[k] = [x / pivot for x in a[k]]
        b[k] = [x / pivot for x in b[k]]
        for i in range(n):
            if i == k or a[i][k].is_zero(0.0):
                continue
            factor = a[i][k]
            a[i] = [x - factor * y for x, y in zip(a[i], a[k], strict=True)]
            b[i] = [x - factor * y for x, y in zip(b[i], b[k], strict=True)]

    return SquareMatrix(n, b)


__all__ = [
    "RowEchelonResult",
    "gaussian_elimination",
    "inverse",
    "lu",
    "lup",
    "row_echelon",
]
