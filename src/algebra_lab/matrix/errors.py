"""Errors raised by matrix construction, access and algorithms.

The ``str()`` of every error is part of the public contract: bindings and
the CLI show it to users verbatim.
"""

from __future__ import annotations


class MatrixError(ValueError):
    """Base class, also used directly for algorithm-level failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class RowOutOfBoundsError(MatrixError):
    def __init__(self, index: int) -> None:
        super().__init__(f"Row out of bounds: {index}")
        self.index = index


class ColumnOutOfBoundsError(MatrixError):
    def __init__(self, index: int) -> None:
        super().__init__(f"Column out of bounds: {index}")
        self.index = index


class InvalidDimensionError(MatrixError):
    def __init__(self, dimension: int) -> None:
        super().__init__(f"Invalid dimension: {dimension}")
        self.dimension = dimension


class NonSquareMatrixError(MatrixError):
    def __init__(self) -> None:
        super().__init__("Matrix is not square")


class ParseError(MatrixError):
    def __init__(self, message: str) -> None:
        super().__init__(f"Parse error: {message}")


__all__ = [
    "ColumnOutOfBoundsError",
    "InvalidDimensionError",
    "MatrixError",
    "NonSquareMatrixError",
    "ParseError",
    "RowOutOfBoundsError",
]
