"""
JSON serialization for Matrix.

Format:
    {"rows": 2, "cols": 3, "data": [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]}

Floats are written with Python's shortest round-trip repr, so
deserialize(serialize(m)) reproduces every cell exactly. "rows" and
"cols" are optional on input but must agree with the grid when present;
they are required to recover matrices with a zero dimension, whose grid
alone is empty.
"""

from __future__ import annotations

import json
from typing import Any

from pymatrix.core.exceptions import ShapeError, ValidationError
from pymatrix.core.validation import check_dimension, check_grid
from pymatrix.matrix.matrix import Matrix


def serialize(matrix: Matrix) -> str:
    """Encode a Matrix as JSON text."""
    if not isinstance(matrix, Matrix):
        raise ValidationError(
            f"serialize: expected a Matrix, got {type(matrix).__name__}"
        )
    payload = {
        'rows': matrix.rows,
        'cols': matrix.cols,
        'data': matrix.to_list(),
    }
    return json.dumps(payload)


def _declared_shape(payload: dict[str, Any]) -> tuple[int | None, int | None]:
    rows = payload.get('rows')
    cols = payload.get('cols')
    if rows is not None:
        rows = check_dimension(rows, "rows")
    if cols is not None:
        cols = check_dimension(cols, "cols")
    return rows, cols


def deserialize(text: str) -> Matrix:
    """
    Decode JSON text produced by serialize().

    Raises
    ------
    ValidationError
        If text is not valid JSON or lacks a "data" grid.
    ShapeError
        If the grid is ragged, or disagrees with "rows"/"cols".
    """
    try:
        payload = json.loads(text)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"deserialize: invalid JSON: {e}") from e

    if not isinstance(payload, dict) or 'data' not in payload:
        raise ValidationError(
            "deserialize: expected a JSON object with a 'data' grid"
        )

    rows, cols = _declared_shape(payload)
    grid = payload['data']

    if not isinstance(grid, list):
        raise ValidationError(
            f"deserialize: 'data' must be a list of rows, got {type(grid).__name__}"
        )

    # Zero-size matrices: the grid is [] or a list of empty rows.
    if all(isinstance(row, list) and not row for row in grid):
        n = len(grid) if rows is None else rows
        p = 0 if cols is None else cols
        if len(grid) != n or (n > 0 and p != 0) or (n == 0 and rows is None):
            raise ShapeError(
                f"deserialize: empty grid of {len(grid)} rows cannot have "
                f"shape ({rows}, {cols})",
                expected=(rows, cols) if rows is not None and cols is not None else None,
            )
        return Matrix(n, p)

    array = check_grid(grid, "data")
    actual = (array.shape[0], array.shape[1])
    if (rows is not None and rows != actual[0]) or (cols is not None and cols != actual[1]):
        raise ShapeError(
            f"deserialize: declared shape ({rows}, {cols}) does not match "
            f"grid shape {actual}",
            actual=actual,
        )
    return Matrix._wrap(array)
