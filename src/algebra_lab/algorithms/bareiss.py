"""Bareiss fraction-free elimination.

Every intermediate entry after step k is a (k+1)×(k+1) minor of the input,
so the division by the previous pivot is exact whenever the input entries
are integers. The algorithm therefore computes integer determinants with
``Integer`` arithmetic only, in O(n³) operations.

Singular input is not an error: if a pivot column holds only zeros (within
``tolerance``) the determinant is the ring zero.

References:
- Bareiss: "Sylvester's Identity and Multistep Integer-Preserving Gaussian
  Elimination", Math. Comp. 22 (1968), 565-578
- https://en.wikipedia.org/wiki/Bareiss_algorithm
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from algebra_lab.matrix.errors import InvalidDimensionError
from algebra_lab.matrix.signature import Signature
from algebra_lab.structures.precision_types import DEFAULT_TOLERANCE

if TYPE_CHECKING:
    from algebra_lab.matrix.square import SquareMatrix

logger = logging.getLogger(__name__)


def bareiss_determinant(matrix: SquareMatrix[Any], tolerance: float = DEFAULT_TOLERANCE) -> Any:
    """Determinant of ``matrix`` by Bareiss elimination.

    Args:
        matrix: Input matrix; it is copied, never mutated.
        tolerance: Threshold under which a pivot counts as zero.

    Returns:
        The determinant, in the ring of the entries.

    Raises:
        InvalidDimensionError: For a 0×0 matrix.

    Example:
        >>> m = SquareMatrix.of(Integer, [[0, 1], [1, 0]])
        >>> bareiss_determinant(m)
        Integer(-1)
    """
    n = matrix.dimension
    if n == 0:
        raise InvalidDimensionError(0)
    a = matrix.rows()
    sign = Signature.EVEN
    previous = a[0][0].one()

    for k in range(n - 1):
        if a[k][k].is_zero(tolerance):
            swap = next((i for i in range(k + 1, n) if not a[i][k].is_zero(tolerance)), None)
            if swap is None:
                logger.debug("Bareiss: column %d has no non-zero pivot, matrix is singular", k)
                return a[k][k].zero()
            logger.debug("Bareiss: swapping rows %d and %d", k, swap)
            a[k], a[swap] = a[swap], a[k]
            sign = sign.change()

        pivot = a[k][k]
        pivot_row = a[k]
        for i in range(k + 1, n):
            row = a[i]
            factor = row[k]
            for j in range(k + 1, n):
                row[j] = (row[j] * pivot - factor * pivot_row[j]) / previous
            row[k] = pivot.zero()
        previous = pivot

    return a[n - 1][n - 1] * sign.as_number(a[n - 1][n - 1])


__all__ = ["bareiss_determinant"]
