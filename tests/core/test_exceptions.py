"""
Tests for PyMatrix exception and warning hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatrixError)
    - ShapeError and SingularMatrixError are distinguishable by class
    - Diagnostic attributes on ShapeError and SingularMatrixError
    - Default attribute values (None for optional attributes)
    - Warning categories derive from UserWarning
"""

import pytest

from pymatrix.core.exceptions import (
    ExpensiveComputationWarning,
    IllConditionedWarning,
    NumericalError,
    PyMatrixError,
    PyMatrixWarning,
    ShapeError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatrixError."""

    def test_validation_error_is_pymatrix_error(self):
        with pytest.raises(PyMatrixError):
            raise ValidationError("bad input")

    def test_shape_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise ShapeError("wrong shape")

    def test_numerical_error_is_pymatrix_error(self):
        with pytest.raises(PyMatrixError):
            raise NumericalError("computation failed")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_shape_and_singular_are_disjoint(self):
        """Callers can tell the two failure kinds apart by class."""
        assert not isinstance(ShapeError("x"), SingularMatrixError)
        assert not isinstance(SingularMatrixError("x"), ValidationError)

    def test_warnings_are_user_warnings(self):
        assert issubclass(PyMatrixWarning, UserWarning)
        assert issubclass(IllConditionedWarning, PyMatrixWarning)
        assert issubclass(ExpensiveComputationWarning, PyMatrixWarning)


# ═══════════════════════════════════════════════════════════════════════
# ShapeError
# ═══════════════════════════════════════════════════════════════════════


class TestShapeError:
    """ShapeError carries the shapes involved."""

    def test_all_attributes(self):
        err = ShapeError("add: shapes do not match", expected=(2, 3), actual=(3, 2))
        assert str(err) == "add: shapes do not match"
        assert err.expected == (2, 3)
        assert err.actual == (3, 2)

    def test_defaults_are_none(self):
        err = ShapeError("ragged")
        assert err.expected is None
        assert err.actual is None


# ═══════════════════════════════════════════════════════════════════════
# SingularMatrixError
# ═══════════════════════════════════════════════════════════════════════


class TestSingularMatrixError:
    """SingularMatrixError carries pivot diagnostics."""

    def test_all_attributes(self):
        err = SingularMatrixError("singular", pivot_index=2, dimension=3)
        assert str(err) == "singular"
        assert err.pivot_index == 2
        assert err.dimension == 3

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.pivot_index is None
        assert err.dimension is None

    def test_catchable_with_attributes(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            raise SingularMatrixError("singular", pivot_index=0, dimension=1)
        assert exc_info.value.pivot_index == 0
