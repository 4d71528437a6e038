"""Square matrix container, its errors and the brace grammar."""

from algebra_lab.matrix.errors import (
    ColumnOutOfBoundsError,
    InvalidDimensionError,
    MatrixError,
    NonSquareMatrixError,
    ParseError,
    RowOutOfBoundsError,
)
from algebra_lab.matrix.generators import (
    DEFAULT_SEED,
    MatrixFingerprint,
    compute_fingerprint,
    create_banded_matrix,
    create_random_integer_matrix,
    create_random_real_matrix,
    create_singular_matrix,
)
from algebra_lab.matrix.signature import Signature
from algebra_lab.matrix.square import SquareMatrix

__all__ = [
    "DEFAULT_SEED",
    "ColumnOutOfBoundsError",
    "InvalidDimensionError",
    "MatrixError",
    "MatrixFingerprint",
    "NonSquareMatrixError",
    "ParseError",
    "RowOutOfBoundsError",
    "Signature",
    "SquareMatrix",
    "compute_fingerprint",
    "create_banded_matrix",
    "create_random_integer_matrix",
    "create_random_real_matrix",
    "create_singular_matrix",
]
