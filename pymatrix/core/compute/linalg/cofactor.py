"""
Determinant by recursive cofactor expansion along the first row.

Minors are never materialized: each recursion level is described by the
row it starts at and the tuple of column indices that survive. Cost is
O(n!), so this is only suitable for small matrices, but integer-valued
inputs of moderate magnitude give exact results.
"""

import warnings
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import ExpensiveComputationWarning
from pymatrix.core.tolerances import COFACTOR_WARNING_DIMENSION
from pymatrix.core.validation import check_square


def _expand(
    A: NDArray[np.floating[Any]],
    row: int,
    columns: tuple[int, ...],
) -> float:
    """Determinant of the minor made of rows row.. and the given columns."""
    n = len(columns)
    if n == 1:
        return float(A[row, columns[0]])
    if n == 2:
        a, b = columns
        return float(A[row, a] * A[row + 1, b] - A[row + 1, a] * A[row, b])

    total = 0.0
    for i, col in enumerate(columns):
        sign = -1.0 if i % 2 else 1.0
        minor = columns[:i] + columns[i + 1:]
        total += sign * float(A[row, col]) * _expand(A, row + 1, minor)
    return total


def cofactor_determinant(A: NDArray[np.floating[Any]]) -> float:
    """
    Determinant of a square matrix by cofactor expansion.

    Args:
        A: Square matrix (n x n). A 0 x 0 matrix has determinant 1.0.

    Returns:
        The determinant as a Python float

    Raises:
        ShapeError: If A is not square
    """
    check_square(A.shape, "determinant")

    n = A.shape[0]
    if n == 0:
        return 1.0

    if n > COFACTOR_WARNING_DIMENSION:
        warnings.warn(
            f"Cofactor expansion of a {n}x{n} matrix is O(n!) and may take "
            f"a very long time",
            ExpensiveComputationWarning,
            stacklevel=3,
        )

    return _expand(A, 0, tuple(range(n)))
