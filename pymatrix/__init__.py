"""
PyMatrix: dense numeric matrices for Python.

A small, explicit matrix type over float64 grids: construction, elementwise
and algebraic operations, inversion by Gauss-Jordan elimination, determinant
by cofactor expansion, and exact JSON round-tripping.

Submodules:
    matrix: The Matrix class and its serialization
    core: Exceptions, validation, tolerances and numerical kernels
"""

__version__ = "0.1.0"

from pymatrix.matrix import Matrix, square, serialize, deserialize
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    ShapeError,
    NumericalError,
    SingularMatrixError,
    PyMatrixWarning,
    IllConditionedWarning,
    ExpensiveComputationWarning,
)

__all__ = [
    "__version__",
    "Matrix",
    "square",
    "serialize",
    "deserialize",
    "PyMatrixError",
    "ValidationError",
    "ShapeError",
    "NumericalError",
    "SingularMatrixError",
    "PyMatrixWarning",
    "IllConditionedWarning",
    "ExpensiveComputationWarning",
]
