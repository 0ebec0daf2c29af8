"""
Shared compute infrastructure for PyMatrix.

This module contains the NUMERIC kernels that operate on raw NumPy arrays.
The Matrix class in pymatrix.matrix wraps them; nothing here knows about it.

Submodules:
    linalg: Inversion and determinant kernels
"""

from pymatrix.core.compute.linalg import (
    GaussJordanResult,
    gauss_jordan_inverse,
    cofactor_determinant,
)

__all__ = [
    "GaussJordanResult",
    "gauss_jordan_inverse",
    "cofactor_determinant",
]
