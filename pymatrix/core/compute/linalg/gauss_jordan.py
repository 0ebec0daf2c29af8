"""
Gauss-Jordan inversion.

Inverts a square matrix by reducing the augmented system [A | I] to
[I | A^-1]. A row swap happens only when the current diagonal entry is
exactly zero; the replacement row is the first one below with a non-zero
entry in that column.

Singularity is decided by that exact-zero test alone. Near-singular
inputs are inverted anyway and reported with an IllConditionedWarning.
"""

import warnings
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import IllConditionedWarning, SingularMatrixError
from pymatrix.core.tolerances import PIVOT_WARNING_RATIO
from pymatrix.core.validation import check_square


@dataclass(frozen=True)
class GaussJordanResult:
    """
    Result of Gauss-Jordan inversion.

    Attributes:
        inverse: The inverse matrix (n x n), freshly allocated
        swaps: Row swaps (i, ii) performed, in order
    """
    inverse: NDArray[np.floating[Any]]
    swaps: tuple[tuple[int, int], ...]


def _swap_rows(a: NDArray[np.floating[Any]], i: int, ii: int) -> None:
    a[[i, ii]] = a[[ii, i]]


def gauss_jordan_inverse(A: NDArray[np.floating[Any]]) -> GaussJordanResult:
    """
    Invert A by Gauss-Jordan elimination.

    A itself is never modified; elimination runs on independent copies
    of A and of the identity.

    Args:
        A: Square matrix (n x n)

    Returns:
        GaussJordanResult with the inverse and the row swaps performed

    Raises:
        ShapeError: If A is not square
        SingularMatrixError: If some column has no non-zero pivot
    """
    check_square(A.shape, "inverse")

    n = A.shape[0]
    mc = np.array(A, dtype=np.float64, copy=True)
    mi = np.eye(n, dtype=np.float64)
    swaps = []

    scale = float(np.max(np.abs(A))) if A.size else 0.0

    for i in range(n):
        if mc[i, i] == 0:
            for ii in range(i + 1, n):
                if mc[ii, i] != 0:
                    _swap_rows(mc, i, ii)
                    _swap_rows(mi, i, ii)
                    swaps.append((i, ii))
                    break
            else:
                raise SingularMatrixError(
                    f"Matrix is singular: no non-zero pivot in column {i} "
                    f"of {n}x{n} matrix",
                    pivot_index=i,
                    dimension=n,
                )

        pivot = mc[i, i]
        if abs(pivot) < PIVOT_WARNING_RATIO * scale:
            warnings.warn(
                f"Pivot {pivot:.3e} in column {i} is tiny relative to the "
                f"largest entry {scale:.3e}; the inverse may be inaccurate",
                IllConditionedWarning,
                stacklevel=3,
            )

        mc[i] = mc[i] / pivot
        mi[i] = mi[i] / pivot

        for ii in range(n):
            if ii == i:
                continue
            factor = mc[ii, i]
            mc[ii] -= factor * mc[i]
            mi[ii] -= factor * mi[i]

    return GaussJordanResult(inverse=mi, swaps=tuple(swaps))
