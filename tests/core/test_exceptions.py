"""
Tests for matcache exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via MatCacheError)
    - NonInvertibleInputError is recoverable (a ValidationError)
    - ComputationError is fatal (a NumericalError, not a ValidationError)
    - Diagnostic attributes and their None defaults
"""

import pytest

from matcache.core.exceptions import (
    ComputationError,
    DimensionError,
    MatCacheError,
    NonInvertibleInputError,
    NumericalError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via MatCacheError."""

    def test_validation_error_is_matcache_error(self):
        with pytest.raises(MatCacheError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_non_invertible_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise NonInvertibleInputError("singular")

    def test_non_invertible_is_not_numerical_error(self):
        err = NonInvertibleInputError("singular")
        assert not isinstance(err, NumericalError)

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_computation_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise ComputationError("solve failed")

    def test_computation_error_is_not_validation_error(self):
        """Fatal errors are kept apart from recoverable input errors."""
        err = ComputationError("solve failed")
        assert not isinstance(err, ValidationError)

    def test_computation_error_is_matcache_error(self):
        with pytest.raises(MatCacheError):
            raise ComputationError("solve failed")


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestNonInvertibleInputError:
    """NonInvertibleInputError carries shape and reason."""

    def test_all_attributes(self):
        err = NonInvertibleInputError(
            "y: matrix is singular",
            shape=(2, 2),
            reason="singular",
            rank=1,
        )
        assert str(err) == "y: matrix is singular"
        assert err.shape == (2, 2)
        assert err.reason == "singular"
        assert err.rank == 1

    def test_defaults_are_none(self):
        err = NonInvertibleInputError("bad")
        assert err.shape is None
        assert err.reason is None
        assert err.rank is None


class TestSingularMatrixError:

    def test_all_attributes(self):
        err = SingularMatrixError(
            "A is singular",
            matrix_name="A",
            rank=3,
            expected_rank=5,
        )
        assert str(err) == "A is singular"
        assert err.matrix_name == "A"
        assert err.rank == 3
        assert err.expected_rank == 5

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.rank is None
        assert err.expected_rank is None


class TestComputationError:

    def test_shape_attribute(self):
        err = ComputationError("failed", shape=(3, 3))
        assert err.shape == (3, 3)

    def test_default_shape_is_none(self):
        assert ComputationError("failed").shape is None

    def test_catchable_with_cause(self):
        cause = SingularMatrixError("singular", rank=1, expected_rank=2)
        with pytest.raises(ComputationError) as exc_info:
            raise ComputationError("failed", shape=(2, 2)) from cause
        assert exc_info.value.__cause__ is cause
