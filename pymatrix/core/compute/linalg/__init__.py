"""
Linear algebra kernels for PyMatrix.

All functions follow these conventions:
    - Inputs are float64 NumPy arrays; inputs are never modified
    - Outputs are freshly allocated
    - Errors are raised immediately with clear messages

Submodules:
    gauss_jordan: Inversion by Gauss-Jordan elimination
    cofactor: Determinant by cofactor expansion
"""

from pymatrix.core.compute.linalg.gauss_jordan import (
    GaussJordanResult,
    gauss_jordan_inverse,
)
from pymatrix.core.compute.linalg.cofactor import cofactor_determinant

__all__ = [
    # Inversion
    "GaussJordanResult",
    "gauss_jordan_inverse",
    # Determinant
    "cofactor_determinant",
]
