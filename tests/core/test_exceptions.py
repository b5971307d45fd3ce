"""
Tests for PyOptimize exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyOptimizeError)
    - Diagnostic attributes on SingularMatrixError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pyoptimize.core.exceptions import (
    DimensionError,
    NumericalError,
    PyOptimizeError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyOptimizeError."""

    def test_validation_error_is_pyoptimize_error(self):
        with pytest.raises(PyOptimizeError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_numerical_error_is_pyoptimize_error(self):
        with pytest.raises(PyOptimizeError):
            raise NumericalError("computation failed")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_not_a_builtin_value_error(self):
        assert not issubclass(ValidationError, ValueError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestSingularMatrixError:

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.condition_number is None
        assert err.step is None

    def test_attributes_stored(self):
        err = SingularMatrixError(
            "Hessian singular", matrix_name="hessian",
            condition_number=1e18, step=2,
        )
        assert err.matrix_name == "hessian"
        assert err.condition_number == 1e18
        assert err.step == 2
        assert str(err) == "Hessian singular"
