"""Square matrix helpers."""

from __future__ import annotations

from collections.abc import Sequence


def transpose(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return the transpose of a square matrix given as a sequence of rows."""
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("transpose needs a square matrix")
    return [list(column) for column in zip(*rows)]