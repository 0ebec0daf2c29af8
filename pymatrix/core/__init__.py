"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the
Matrix class.

Key components:
    exceptions: Exception and warning hierarchy
    validation: Input validators
    tolerances: Equality tolerances and numeric thresholds
    compute: Inversion and determinant kernels
"""

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
from pymatrix.core.tolerances import ToleranceTier, EXACT, APPROXIMATE

__all__ = [
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "ShapeError",
    "NumericalError",
    "SingularMatrixError",
    # Warnings
    "PyMatrixWarning",
    "IllConditionedWarning",
    "ExpensiveComputationWarning",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "APPROXIMATE",
]
