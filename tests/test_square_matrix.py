"""Tests for the SquareMatrix container."""

import numpy as np
import pytest

from algebra_lab.matrix import (
    ColumnOutOfBoundsError,
    InvalidDimensionError,
    NonSquareMatrixError,
    RowOutOfBoundsError,
    SquareMatrix,
)
from algebra_lab.structures import Complex, Integer, Rational, Real


@pytest.fixture
def m3() -> SquareMatrix[Integer]:
    """3×3 integer matrix used by several tests."""
    return SquareMatrix.of(Integer, [[1, 2, 3], [4, 5, 6], [7, 8, 9]])


class TestConstruction:
    """Tests for the constructors."""

    def test_new_trusts_data(self) -> None:
        """The plain constructor does not validate."""
        matrix = SquareMatrix(2, [[Integer(1), Integer(2)], [Integer(3), Integer(4)]])
        assert matrix.dimension == 2

    def test_try_from_square(self) -> None:
        """Square nested rows are accepted."""
        matrix = SquareMatrix.try_from([[Integer(1), Integer(2)], [Integer(3), Integer(4)]])
        assert matrix.dimension == 2
        assert matrix[1, 0] == Integer(3)

    @pytest.mark.parametrize(
        "rows",
        [
            [[1, 2, 3], [4, 5, 6]],
            [[1, 2], [3, 4], [5, 6]],
            [[1, 2], [3]],
            [[1]] * 2,
        ],
    )
    def test_try_from_non_square(self, rows: list[list[int]]) -> None:
        """Any shape disagreement raises NonSquareMatrixError."""
        with pytest.raises(NonSquareMatrixError):
            SquareMatrix.of(Integer, rows)

    def test_try_from_copies_rows(self) -> None:
        """Mutating the input afterwards does not affect the matrix."""
        rows = [[Integer(1), Integer(2)], [Integer(3), Integer(4)]]
        matrix = SquareMatrix.try_from(rows)
        rows[0][0] = Integer(99)
        assert matrix[0, 0] == Integer(1)

    def test_from_fn_row_major(self) -> None:
        """f(i, j) fills cell (i, j)."""
        matrix = SquareMatrix.from_fn(3, lambda i, j: Integer(10 * i + j))
        assert matrix.rows() == [
            [Integer(0), Integer(1), Integer(2)],
            [Integer(10), Integer(11), Integer(12)],
            [Integer(20), Integer(21), Integer(22)],
        ]

    @pytest.mark.parametrize("unit", [Integer(5), Rational(1, 3), Real(2.0), Complex(0, 1)])
    def test_identity(self, unit: object) -> None:
        """Ones on the diagonal, zeros elsewhere, in the unit's structure."""
        identity = SquareMatrix.identity(3, unit)
        for i in range(3):
            for j in range(3):
                expected = unit.one() if i == j else unit.zero()
                assert identity[i, j] == expected

    def test_of_keeps_existing_elements(self) -> None:
        """Elements already of the target type are not re-wrapped."""
        half = Rational(1, 2)
        matrix = SquareMatrix.of(Rational, [[half, 1], [2, 3]])
        assert matrix[0, 0] is half
        assert matrix[0, 1] == Rational(1)

    def test_numpy_roundtrip(self) -> None:
        """from_numpy / to_numpy preserve values."""
        array = np.array([[1.5, -2.0], [0.25, 4.0]])
        matrix = SquareMatrix.from_numpy(array)
        assert isinstance(matrix[0, 0], Real)
        assert np.array_equal(matrix.to_numpy(), array)

    def test_from_numpy_rejects_rectangular(self) -> None:
        """Only square 2-D arrays convert."""
        with pytest.raises(NonSquareMatrixError):
            SquareMatrix.from_numpy(np.zeros((2, 3)))

    def test_to_numpy_complex(self) -> None:
        """Complex entries convert with a complex dtype."""
        matrix = SquareMatrix.of(Complex, [[1 + 2j, 0], [0, 1]])
        assert matrix.to_numpy(np.complex128)[0, 0] == 1 + 2j


class TestAccess:
    """Tests for get/set and bounds checking."""

    def test_get_and_index(self, m3: SquareMatrix[Integer]) -> None:
        """get(i, j) and m[i, j] agree."""
        assert m3.get(1, 2) == m3[1, 2] == Integer(6)

    def test_set(self, m3: SquareMatrix[Integer]) -> None:
        """set writes in place."""
        m3[2, 2] = Integer(0)
        assert m3.get(2, 2) == Integer(0)

    @pytest.mark.parametrize("row", [3, 10, -1])
    def test_row_out_of_bounds(self, m3: SquareMatrix[Integer], row: int) -> None:
        """Row index outside [0, n) raises."""
        with pytest.raises(RowOutOfBoundsError, match=f"Row out of bounds: {row}"):
            m3.get(row, 0)

    @pytest.mark.parametrize("col", [3, -1])
    def test_column_out_of_bounds(self, m3: SquareMatrix[Integer], col: int) -> None:
        """Column index outside [0, n) raises."""
        with pytest.raises(ColumnOutOfBoundsError, match=f"Column out of bounds: {col}"):
            m3[0, col] = Integer(1)

    def test_rows_is_a_copy(self, m3: SquareMatrix[Integer]) -> None:
        """Mutating rows() output leaves the matrix alone."""
        rows = m3.rows()
        rows[0][0] = Integer(100)
        assert m3[0, 0] == Integer(1)

    def test_diagonal(self, m3: SquareMatrix[Integer]) -> None:
        """Diagonal entries in order."""
        assert m3.diagonal() == [Integer(1), Integer(5), Integer(9)]

    def test_diagonal_is_zero(self) -> None:
        """True if any diagonal entry is zero within tolerance."""
        assert SquareMatrix.of(Integer, [[1, 2], [3, 0]]).diagonal_is_zero(1e-12)
        assert not SquareMatrix.of(Integer, [[1, 0], [0, 1]]).diagonal_is_zero(1e-12)
        assert SquareMatrix.of(Real, [[1e-13, 1], [1, 1]]).diagonal_is_zero(1e-12)


class TestRowOperations:
    """Tests for swap_rows and swap_rows_with_zero_pivot."""

    def test_swap_rows(self, m3: SquareMatrix[Integer]) -> None:
        """Two rows are exchanged in place."""
        m3.swap_rows(0, 2)
        assert m3.rows()[0] == [Integer(7), Integer(8), Integer(9)]
        assert m3.rows()[2] == [Integer(1), Integer(2), Integer(3)]

    def test_swap_same_row_is_noop(self, m3: SquareMatrix[Integer]) -> None:
        """Swapping a row with itself changes nothing."""
        before = m3.copy()
        m3.swap_rows(1, 1)
        assert m3 == before

    def test_swap_out_of_bounds(self, m3: SquareMatrix[Integer]) -> None:
        """Either index out of range raises."""
        with pytest.raises(RowOutOfBoundsError):
            m3.swap_rows(0, 3)

    def test_swap_rows_with_zero_pivot(self) -> None:
        """The first zero pivot is swapped with the first non-zero row below."""
        matrix = SquareMatrix.of(Integer, [[0, 1, 2], [1, 2, 3], [2, 3, 4]])
        assert matrix.swap_rows_with_zero_pivot(1e-12)
        assert matrix == SquareMatrix.of(Integer, [[1, 2, 3], [0, 1, 2], [2, 3, 4]])

    def test_swap_rows_with_zero_pivot_singular(self) -> None:
        """A zero pivot with only zeros below reports False."""
        matrix = SquareMatrix.of(Integer, [[1, 2, 3], [0, 0, 1], [0, 0, 4]])
        assert not matrix.swap_rows_with_zero_pivot(1e-12)

    def test_swap_rows_with_zero_pivot_nothing_to_do(self, m3: SquareMatrix[Integer]) -> None:
        """No zero pivot, no swap."""
        assert not m3.swap_rows_with_zero_pivot(1e-12)


class TestSubmatrices:
    """Tests for minor, leading_principal_minor and transpose."""

    def test_minor(self, m3: SquareMatrix[Integer]) -> None:
        """Row 1 and column 2 removed, order preserved."""
        assert m3.minor(1, 2) == SquareMatrix.of(Integer, [[1, 2], [7, 8]])

    def test_minor_does_not_mutate(self, m3: SquareMatrix[Integer]) -> None:
        """The receiver keeps its dimension."""
        m3.minor(0, 0)
        assert m3.dimension == 3

    def test_minor_out_of_bounds(self, m3: SquareMatrix[Integer]) -> None:
        """Row checked before column."""
        with pytest.raises(RowOutOfBoundsError):
            m3.minor(3, 0)
        with pytest.raises(ColumnOutOfBoundsError):
            m3.minor(0, 3)

    def test_leading_principal_minor(self) -> None:
        """Top-left 2×2 of [[1,2,3],[1,-2,0],[0,1,5]] is [[1,2],[1,-2]]."""
        matrix = SquareMatrix.of(Integer, [[1, 2, 3], [1, -2, 0], [0, 1, 5]])
        assert matrix.leading_principal_minor(2) == SquareMatrix.of(Integer, [[1, 2], [1, -2]])

    def test_leading_principal_minor_full(self, m3: SquareMatrix[Integer]) -> None:
        """k == dimension returns an equal matrix."""
        assert m3.leading_principal_minor(3) == m3

    def test_leading_principal_minor_too_large(self, m3: SquareMatrix[Integer]) -> None:
        """k > dimension raises InvalidDimensionError."""
        with pytest.raises(InvalidDimensionError, match="Invalid dimension: 4"):
            m3.leading_principal_minor(4)

    def test_transpose(self, m3: SquareMatrix[Integer]) -> None:
        """Rows become columns."""
        assert m3.transpose() == SquareMatrix.of(Integer, [[1, 4, 7], [2, 5, 8], [3, 6, 9]])
        assert m3.transpose().transpose() == m3


class TestArithmetic:
    """Tests for equality and matrix arithmetic."""

    def test_add_sub(self) -> None:
        """Element-wise + and -."""
        a = SquareMatrix.of(Integer, [[1, 2], [3, 4]])
        b = SquareMatrix.of(Integer, [[4, 3], [2, 1]])
        assert a + b == SquareMatrix.of(Integer, [[5, 5], [5, 5]])
        assert a - a == SquareMatrix.of(Integer, [[0, 0], [0, 0]])
        assert -a == SquareMatrix.of(Integer, [[-1, -2], [-3, -4]])

    def test_product(self) -> None:
        """* and @ are the matrix product."""
        a = SquareMatrix.of(Integer, [[1, 2], [3, 4]])
        b = SquareMatrix.of(Integer, [[0, 1], [1, 0]])
        expected = SquareMatrix.of(Integer, [[2, 1], [4, 3]])
        assert a @ b == expected
        assert a * b == expected

    def test_product_matches_numpy(self) -> None:
        """Product agrees with numpy on random data."""
        rng = np.random.default_rng(42)
        x, y = rng.integers(-5, 5, size=(2, 4, 4))
        a = SquareMatrix.of(Integer, x.tolist())
        b = SquareMatrix.of(Integer, y.tolist())
        assert np.array_equal((a @ b).to_numpy(), (x @ y).astype(float))

    def test_scalar_multiplication(self) -> None:
        """A ring element on the right scales every entry."""
        a = SquareMatrix.of(Rational, [[1, 2], [3, 4]])
        assert a * Rational(1, 2) == SquareMatrix.of(Rational, [[Rational(1, 2), 1], [Rational(3, 2), 2]])

    def test_dimension_mismatch(self) -> None:
        """Different dimensions raise InvalidDimensionError."""
        a = SquareMatrix.of(Integer, [[1, 2], [3, 4]])
        b = SquareMatrix.of(Integer, [[1]])
        with pytest.raises(InvalidDimensionError):
            a + b
        with pytest.raises(InvalidDimensionError):
            a @ b

    def test_equals_with_tolerance(self) -> None:
        """equals() uses the caller tolerance, == the instance tolerances."""
        a = SquareMatrix.of(Real, [[1.0, 0.0], [0.0, 1.0]])
        b = SquareMatrix.of(Real, [[1.0 + 1e-8, 0.0], [0.0, 1.0]])
        assert a != b
        assert a.equals(b, 1e-6)
        assert not a.equals(SquareMatrix.of(Real, [[1.0]]), 1.0)

    def test_unhashable(self, m3: SquareMatrix[Integer]) -> None:
        """Matrices are mutable, hence unhashable."""
        with pytest.raises(TypeError):
            hash(m3)

    def test_cofactor(self, m3: SquareMatrix[Integer]) -> None:
        """C(0, 1) = -det([[4, 6], [7, 9]]) = 6."""
        assert m3.cofactor(0, 1) == Integer(6)

    def test_cofactor_of_1x1(self) -> None:
        """The cofactor of a 1×1 matrix is one."""
        assert SquareMatrix.of(Integer, [[5]]).cofactor(0, 0) == Integer(1)


class TestDisplay:
    """Tests for str/repr."""

    def test_str(self) -> None:
        """Brace grammar."""
        assert str(SquareMatrix.of(Integer, [[1, -2], [3, 4]])) == "{{1,-2},{3,4}}"

    def test_repr(self) -> None:
        """Shows dimension and element reprs."""
        assert repr(SquareMatrix.of(Integer, [[1]])) == "SquareMatrix(1, [[Integer(1)]])"
