"""Square matrices over an arbitrary ring.

``SquareMatrix`` owns a dense row-major grid of ring elements whose shape is
fixed at construction. The determinant, elimination and decomposition
methods delegate to :mod:`algebra_lab.algorithms`; every one of them works
on a copy, so the receiver is never mutated by an algorithm.

Only ``set``/``__setitem__`` and ``swap_rows``/``swap_rows_with_zero_pivot``
mutate in place.

References:
    - Golub & Van Loan: "Matrix Computations" (4th ed.), Chapter 3
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import numpy as np

from algebra_lab.matrix.errors import (
    ColumnOutOfBoundsError,
    InvalidDimensionError,
    NonSquareMatrixError,
    RowOutOfBoundsError,
)
from algebra_lab.matrix.parser import parse_rows, serialize_rows
from algebra_lab.structures.precision_types import DEFAULT_TOLERANCE
from algebra_lab.structures.rationals import Rational
from algebra_lab.structures.reals import Real

if TYPE_CHECKING:
    from numpy.typing import DTypeLike, NDArray

    from algebra_lab.algorithms.determinant import DeterminantMethod

R = TypeVar("R")


class SquareMatrix(Generic[R]):
    """``dimension × dimension`` grid of ring elements.

    Example:
        >>> m = SquareMatrix.of(Integer, [[1, 2], [3, 4]])
        >>> m.determinant()
        Integer(-2)
        >>> str(m.minor(0, 0))
        '{{4}}'
    """

    __slots__ = ("_data", "_dimension")

    def __init__(self, dimension: int, data: list[list[R]]) -> None:
        """Wrap ``data`` without validation; the caller guarantees the shape."""
        self._dimension = dimension
        self._data = data

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def try_from(cls, rows: Sequence[Sequence[R]]) -> SquareMatrix[R]:
        """Build from nested rows, checking every row is ``len(rows)`` long.

        Raises:
            NonSquareMatrixError: If any row length differs from the row count.
        """
        dimension = len(rows)
        for row in rows:
            if len(row) != dimension:
                raise NonSquareMatrixError
        return cls(dimension, [list(row) for row in rows])

    @classmethod
    def of(cls, element_type: type, rows: Sequence[Sequence[Any]], **options: Any) -> SquareMatrix[Any]:
        """Build from plain numbers, wrapping each with ``element_type(x, **options)``.

        Elements that already are ``element_type`` instances are kept as is.

        Example:
            >>> SquareMatrix.of(Real, [[1, 2], [3, 4]], tolerance=1e-9)[1, 0]
            Real(3.0, tolerance=1e-09)
        """
        return cls.try_from(
            [[x if isinstance(x, element_type) else element_type(x, **options) for x in row] for row in rows]
        )

    @classmethod
    def from_fn(cls, dimension: int, f: Callable[[int, int], R]) -> SquareMatrix[R]:
        """Evaluate ``f(row, col)`` for every cell, row-major."""
        return cls(dimension, [[f(i, j) for j in range(dimension)] for i in range(dimension)])

    @classmethod
    def identity(cls, dimension: int, unit: R) -> SquareMatrix[R]:
        """Identity matrix in the structure of ``unit`` (any element of the ring)."""
        one, zero = unit.one(), unit.zero()  # type: ignore[attr-defined]
        return cls.from_fn(dimension, lambda i, j: one if i == j else zero)

    @classmethod
    def parse(cls, text: str, element_type: type = Rational, **options: Any) -> SquareMatrix[Any]:
        """Read the ``{{a,b},{c,d}}`` grammar with ``element_type.parse``.

        Raises:
            ParseError: On malformed text or an element that does not parse.
            NonSquareMatrixError: If the rows do not form a square.
        """
        rows = parse_rows(text, lambda cell: element_type.parse(cell, **options))
        return cls.try_from(rows)

    @classmethod
    def from_numpy(cls, array: NDArray[Any], element_type: type = Real, **options: Any) -> SquareMatrix[Any]:
        values = np.asarray(array)
        if values.ndim != 2 or values.shape[0] != values.shape[1]:
            raise NonSquareMatrixError
        return cls.of(element_type, values.tolist(), **options)

    def to_numpy(self, dtype: DTypeLike = np.float64) -> NDArray[Any]:
        """Convert through ``float()`` (or ``complex()`` for complex dtypes)."""
        return np.array(self._data, dtype=object).reshape(self._dimension, self._dimension).astype(dtype)

    def copy(self) -> SquareMatrix[R]:
        return type(self)(self._dimension, self.rows())

    # =========================================================================
    # ACCESS
    # =========================================================================

    @property
    def dimension(self) -> int:
        return self._dimension

    def rows(self) -> list[list[R]]:
        """Copy of the underlying rows; elements themselves are immutable."""
        return [list(row) for row in self._data]

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self._dimension:
            raise RowOutOfBoundsError(row)

    def _check_column(self, column: int) -> None:
        if not 0 <= column < self._dimension:
            raise ColumnOutOfBoundsError(column)

    def get(self, row: int, column: int) -> R:
        self._check_row(row)
        self._check_column(column)
        return self._data[row][column]

    def set(self, row: int, column: int, value: R) -> None:
        self._check_row(row)
        self._check_column(column)
        self._data[row][column] = value

    def __getitem__(self, index: tuple[int, int]) -> R:
        row, column = index
        return self.get(row, column)

    def __setitem__(self, index: tuple[int, int], value: R) -> None:
        row, column = index
        self.set(row, column, value)

    def diagonal(self) -> list[R]:
        return [self._data[i][i] for i in range(self._dimension)]

    def diagonal_is_zero(self, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """True if any diagonal entry is zero within ``tolerance``."""
        return any(x.is_zero(tolerance) for x in self.diagonal())  # type: ignore[attr-defined]

    # =========================================================================
    # ROW OPERATIONS AND SUBMATRICES
    # =========================================================================

    def swap_rows(self, first: int, second: int) -> None:
        self._check_row(first)
        self._check_row(second)
        if first != second:
            self._data[first], self._data[second] = self._data[second], self._data[first]

    def swap_rows_with_zero_pivot(self, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Swap the first zero pivot with the first row below it that is non-zero in that column.

        Returns True if a swap happened. False means either that no diagonal
        entry is zero, or that the first zero pivot has only zeros below it
        (the matrix is singular).

        Example:
            {{0,1,2},{1,2,3},{2,3,4}} becomes {{1,2,3},{0,1,2},{2,3,4}}.
        """
        for k in range(self._dimension):
            if self._data[k][k].is_zero(tolerance):  # type: ignore[attr-defined]
                for i in range(k + 1, self._dimension):
                    if not self._data[i][k].is_zero(tolerance):  # type: ignore[attr-defined]
                        self.swap_rows(k, i)
                        return True
                return False
        return False

    def minor(self, row: int, column: int) -> SquareMatrix[R]:
        """Submatrix with ``row`` and ``column`` removed, order preserved.

        Raises:
            RowOutOfBoundsError: If ``row`` is not a valid row index.
            ColumnOutOfBoundsError: If ``column`` is not a valid column index.
        """
        self._check_row(row)
        self._check_column(column)
        data = [
            [x for j, x in enumerate(values) if j != column]
            for i, values in enumerate(self._data)
            if i != row
        ]
        return type(self)(self._dimension - 1, data)

    def leading_principal_minor(self, k: int) -> SquareMatrix[R]:
        """Top-left ``k × k`` submatrix.

        Raises:
            InvalidDimensionError: If ``k`` is negative or exceeds the dimension.
        """
        if not 0 <= k <= self._dimension:
            raise InvalidDimensionError(k)
        return type(self)(k, [list(values[:k]) for values in self._data[:k]])

    def transpose(self) -> SquareMatrix[R]:
        n = self._dimension
        return type(self)(n, [[self._data[j][i] for j in range(n)] for i in range(n)])

    # =========================================================================
    # ALGORITHMS
    # =========================================================================

    def determinant(
        self,
        method: DeterminantMethod | str = "optimize",
        tolerance: float = DEFAULT_TOLERANCE,
    ) -> R:
        from algebra_lab.algorithms.determinant import determinant

        return determinant(self, method, tolerance)

    def cofactor(
        self,
        row: int,
        column: int,
        method: DeterminantMethod | str = "optimize",
        tolerance: float = DEFAULT_TOLERANCE,
    ) -> R:
        """Signed minor ``(-1)^(row+column) · det(minor(row, column))``."""
        sub = self.minor(row, column)
        if sub.dimension == 0:
            return self._data[0][0].one()  # type: ignore[attr-defined]
        value = sub.determinant(method, tolerance)
        return value if (row + column) % 2 == 0 else -value  # type: ignore[operator]

    def gaussian_elimination(self, tolerance: float = DEFAULT_TOLERANCE) -> SquareMatrix[R]:
        from algebra_lab.algorithms.elimination import gaussian_elimination

        return gaussian_elimination(self, tolerance)

    def lu(self, tolerance: float = 0.0) -> tuple[SquareMatrix[R], SquareMatrix[R]]:
        from algebra_lab.algorithms.elimination import lu

        return lu(self, tolerance)

    def lup(
        self, tolerance: float = DEFAULT_TOLERANCE
    ) -> tuple[SquareMatrix[R], SquareMatrix[R], SquareMatrix[R]]:
        from algebra_lab.algorithms.elimination import lup

        return lup(self, tolerance)

    def inverse(self, tolerance: float = DEFAULT_TOLERANCE) -> SquareMatrix[R]:
        from algebra_lab.algorithms.elimination import inverse

        return inverse(self, tolerance)

    # =========================================================================
    # COMPARISON AND ARITHMETIC
    # =========================================================================

    def equals(self, other: SquareMatrix[R], tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Element-wise ``equals`` within ``tolerance``."""
        if self._dimension != other.dimension:
            return False
        return all(
            a.equals(b, tolerance)  # type: ignore[attr-defined]
            for mine, theirs in zip(self._data, other._data, strict=True)
            for a, b in zip(mine, theirs, strict=True)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self._dimension == other._dimension and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def _check_same_dimension(self, other: SquareMatrix[R]) -> None:
        if other.dimension != self._dimension:
            raise InvalidDimensionError(other.dimension)

    def __add__(self, other: SquareMatrix[R]) -> SquareMatrix[R]:
        self._check_same_dimension(other)
        return type(self)(
            self._dimension,
            [[a + b for a, b in zip(x, y, strict=True)] for x, y in zip(self._data, other._data, strict=True)],
        )

    def __sub__(self, other: SquareMatrix[R]) -> SquareMatrix[R]:
        self._check_same_dimension(other)
        return type(self)(
            self._dimension,
            [[a - b for a, b in zip(x, y, strict=True)] for x, y in zip(self._data, other._data, strict=True)],
        )

    def __neg__(self) -> SquareMatrix[R]:
        return type(self)(self._dimension, [[-x for x in row] for row in self._data])  # type: ignore[operator]

    def __matmul__(self, other: SquareMatrix[R]) -> SquareMatrix[R]:
        self._check_same_dimension(other)
        n = self._dimension
        columns = other.transpose()._data
        data = []
        for row in self._data:
            out = []
            for column in columns:
                total = row[0] * column[0]  # type: ignore[operator]
                for k in range(1, n):
                    total = total + row[k] * column[k]  # type: ignore[operator]
                out.append(total)
            data.append(out)
        return type(self)(n, data)

    def __mul__(self, other: SquareMatrix[R] | R) -> SquareMatrix[R]:
        """Matrix product, or scaling when ``other`` is a ring element."""
        if isinstance(other, SquareMatrix):
            return self @ other
        return type(self)(self._dimension, [[x * other for x in row] for row in self._data])  # type: ignore[operator]

    # =========================================================================
    # DISPLAY
    # =========================================================================

    def __str__(self) -> str:
        return serialize_rows(self._data)

    def __repr__(self) -> str:
        return f"SquareMatrix({self._dimension}, {self._data!r})"


__all__ = ["SquareMatrix"]
