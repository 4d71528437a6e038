"""Matrix generation utilities for determinant experiments.

This module builds reproducible square matrices over any of the scalar
structures, for tests, benchmarks and the ``compare`` command.

Key Features:
- Reproducible generation with seed control (numpy ``default_rng``)
- Banded 0/1 matrices whose Bareiss cost is O(n³) but whose cofactor
  expansion is factorial
- Singular matrices with a known zero determinant
- Matrix fingerprinting for experiment verification

References:
- Bareiss: "Sylvester's Identity and Multistep Integer-Preserving
  Gaussian Elimination", Math. Comp. 22 (1968)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from algebra_lab.matrix.square import SquareMatrix
from algebra_lab.structures.integers import Integer
from algebra_lab.structures.reals import Real

DEFAULT_SEED: int = 42
"""Default random seed for reproducible experiments."""


@dataclass(frozen=True, slots=True)
class MatrixFingerprint:
    """Fingerprint for matrix identification and verification.

    Used to check that different runs compare methods on identical input.
    """

    dimension: int
    """Matrix dimension n."""

    kind: str
    """Generator name: 'banded', 'random', 'singular' or 'given'."""

    seed: int | None
    """Random seed used for generation (None for deterministic generators)."""

    frobenius_norm: float
    """||A||_F, computed in fp64."""

    reference_determinant: float
    """``numpy.linalg.det`` of the fp64 conversion, as an independent oracle."""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "dimension": self.dimension,
            "kind": self.kind,
            "random_seed": self.seed,
            "frobenius_norm": self.frobenius_norm,
            "reference_determinant": self.reference_determinant,
        }


def create_banded_matrix(
    n: int,
    *,
    bandwidth: int = 3,
    element_type: type = Integer,
    **options: Any,
) -> SquareMatrix[Any]:
    """Create the 0/1 band matrix with ones where ``|i - j| < bandwidth``.

    With the default bandwidth this is the classic benchmark input for the
    Bareiss algorithm: it finishes quickly for n = 100, while cofactor
    expansion on the same input is infeasible.

    Args:
        n: Matrix dimension.
        bandwidth: Number of diagonals on each side of (and including) the
            main diagonal that hold ones.
        element_type: Scalar structure of the entries.
        **options: Extra constructor arguments (e.g. ``tolerance`` for Real).

    Example:
        >>> str(create_banded_matrix(3, bandwidth=2))
        '{{1,1,0},{1,1,1},{0,1,1}}'
    """
    one = element_type(1, **options)
    zero = element_type(0, **options)
    return SquareMatrix.from_fn(n, lambda i, j: one if abs(i - j) < bandwidth else zero)


def create_random_integer_matrix(
    n: int,
    *,
    low: int = -9,
    high: int = 9,
    element_type: type = Integer,
    seed: int | None = None,
    **options: Any,
) -> SquareMatrix[Any]:
    """Create a matrix of uniform random integers in ``[low, high]``.

    The values are wrapped in ``element_type`` so the same draw can be used
    over Integer, Rational or Real.
    """
    rng = np.random.default_rng(seed)
    values = rng.integers(low, high, size=(n, n), endpoint=True)
    return SquareMatrix.of(element_type, values.tolist(), **options)


def create_random_real_matrix(
    n: int,
    *,
    seed: int | None = None,
    tolerance: float | None = None,
    precision: str = "fp64",
) -> SquareMatrix[Real]:
    """Create a matrix of standard normal Real entries."""
    rng = np.random.default_rng(seed)
    values = rng.standard_normal((n, n))
    return SquareMatrix.of(Real, values.tolist(), tolerance=tolerance, precision=precision)


def create_singular_matrix(
    n: int,
    *,
    low: int = -9,
    high: int = 9,
    element_type: type = Integer,
    seed: int | None = None,
    **options: Any,
) -> SquareMatrix[Any]:
    """Create a random integer matrix whose last row repeats its first row.

    Two identical rows make the determinant exactly zero.
    """
    if n < 2:
        msg = f"A singular matrix with repeated rows needs n >= 2, got {n}"
        raise ValueError(msg)
    rng = np.random.default_rng(seed)
    values = rng.integers(low, high, size=(n, n), endpoint=True)
    values[-1] = values[0]
    return SquareMatrix.of(element_type, values.tolist(), **options)


def compute_fingerprint(
    matrix: SquareMatrix[Any],
    *,
    seed: int | None = None,
    kind: str = "given",
) -> MatrixFingerprint:
    """Compute fingerprint for matrix identification.

    Args:
        matrix: Input matrix (any real-convertible structure).
        seed: Random seed used for generation.
        kind: Generator name.

    Returns:
        MatrixFingerprint for verification.
    """
    values = matrix.to_numpy()
    reference = float(np.linalg.det(values)) if matrix.dimension else 1.0
    return MatrixFingerprint(
        dimension=matrix.dimension,
        kind=kind,
        seed=seed,
        frobenius_norm=float(np.linalg.norm(values, "fro")),
        reference_determinant=reference,
    )


__all__ = [
    "DEFAULT_SEED",
    "MatrixFingerprint",
    "compute_fingerprint",
    "create_banded_matrix",
    "create_random_integer_matrix",
    "create_random_real_matrix",
    "create_singular_matrix",
]
