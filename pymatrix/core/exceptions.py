"""
Exception and warning hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Callers distinguish the kinds by class, never
by parsing messages.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs (dimensions, grids, scalars,
    tolerances, serialized text) fail validation checks.
    """
    pass


class ShapeError(ValidationError):
    """
    Matrix shapes are incorrect or inconsistent.

    Raised when an operation's dimensional precondition is violated:
    mismatched shapes for elementwise operations or equality, incompatible
    inner dimensions for multiplication, non-square input where a square
    matrix is required, or a ragged/empty grid.

    Attributes:
        expected: Expected shape, if a single one applies
        actual: Shape that was received, if known
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | None = None,
        actual: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised by inversion when no non-zero pivot can be found for some
    column during elimination.

    Attributes:
        pivot_index: Column for which no non-zero pivot exists
        dimension: Dimension n of the n x n matrix
    """

    def __init__(
        self,
        message: str,
        pivot_index: int | None = None,
        dimension: int | None = None
    ):
        super().__init__(message)
        self.pivot_index = pivot_index
        self.dimension = dimension


class PyMatrixWarning(UserWarning):
    """Base category for non-fatal PyMatrix diagnostics."""
    pass


class IllConditionedWarning(PyMatrixWarning):
    """A pivot was tiny relative to the input; the inverse may be inaccurate."""
    pass


class ExpensiveComputationWarning(PyMatrixWarning):
    """The requested algorithm scales badly at this size."""
    pass
