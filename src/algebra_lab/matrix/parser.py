"""Brace grammar for matrices: ``{{a,b,c},{d,e,f}}``.

Whitespace anywhere in the input is ignored. Rows are separated by ``},{``
and cells by ``,``. The grammar is shape-agnostic: checking that the rows
form a square is the job of :meth:`SquareMatrix.try_from`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from algebra_lab.matrix.errors import ParseError
from algebra_lab.structures.ring import StructureError


def split_rows(text: str) -> list[list[str]]:
    """Split a brace-grammar string into rows of raw cell strings.

    Raises:
        ParseError: If the braces are unbalanced or a cell is empty.

    Example:
        >>> split_rows("{{1, 2}, {3, 4}}")
        [['1', '2'], ['3', '4']]
    """
    compact = "".join(text.split())
    if not compact.startswith("{{") or not compact.endswith("}}"):
        raise ParseError(f"expected '{{{{...}}}}', got '{text.strip()}'")

    inner = compact[2:-2]
    rows: list[list[str]] = []
    for row_text in inner.split("},{"):
        if "{" in row_text or "}" in row_text:
            raise ParseError(f"unbalanced braces in row '{row_text}'")
        cells = row_text.split(",")
        if any(cell == "" for cell in cells):
            raise ParseError(f"empty element in row '{{{row_text}}}'")
        rows.append(cells)
    return rows


def parse_rows(text: str, parse_cell: Callable[[str], Any]) -> list[list[Any]]:
    """Parse a brace-grammar string, converting each cell with ``parse_cell``.

    A ``StructureError`` (or ``ValueError``) raised by ``parse_cell`` is
    reported as a ``ParseError`` naming the offending cell.
    """
    rows: list[list[Any]] = []
    for cells in split_rows(text):
        row = []
        for cell in cells:
            try:
                row.append(parse_cell(cell))
            except (StructureError, ValueError) as exc:
                raise ParseError(f"invalid element '{cell}'") from exc
        rows.append(row)
    return rows


def serialize_rows(rows: Iterable[Sequence[Any]]) -> str:
    """Inverse of :func:`parse_rows`, using ``str()`` of every element."""
    return "{" + ",".join("{" + ",".join(str(x) for x in row) + "}" for row in rows) + "}"


__all__ = ["parse_rows", "serialize_rows", "split_rows"]
