"""
Tests for pydense exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyDenseError)
    - Builtin compatibility (ValueError, TypeError, IndexError)
    - Diagnostic attributes on ParseError, DimensionError,
      IndexOutOfRangeError, SingularMatrixError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pydense.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    NumericalError,
    ParseError,
    PyDenseError,
    SingularMatrixError,
    TypeMismatchError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyDenseError."""

    @pytest.mark.parametrize("exc_type", [
        ValidationError,
        ParseError,
        DimensionError,
        TypeMismatchError,
        IndexOutOfRangeError,
        NumericalError,
        SingularMatrixError,
    ])
    def test_is_pydense_error(self, exc_type):
        with pytest.raises(PyDenseError):
            raise exc_type("boom")

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            raise ValidationError("empty input")

    def test_parse_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise ParseError("bad token")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_type_mismatch_is_type_error(self):
        with pytest.raises(TypeError):
            raise TypeMismatchError("wrong type")

    def test_index_error_is_builtin_index_error(self):
        with pytest.raises(IndexError):
            raise IndexOutOfRangeError("out of range")

    def test_index_error_is_not_validation_error(self):
        assert not isinstance(IndexOutOfRangeError("x"), ValidationError)

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_matrix_error_is_not_value_error(self):
        assert not isinstance(SingularMatrixError("singular"), ValueError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestParseError:
    """ParseError carries the offending token."""

    def test_all_attributes(self):
        err = ParseError("bad", token="a", position=1, dtype_name="int")
        assert str(err) == "bad"
        assert err.token == "a"
        assert err.position == 1
        assert err.dtype_name == "int"

    def test_defaults_are_none(self):
        err = ParseError("bad")
        assert err.token is None
        assert err.position is None
        assert err.dtype_name is None


class TestDimensionError:
    """DimensionError carries expected and actual dimensions."""

    def test_all_attributes(self):
        err = DimensionError("mismatch", expected=(2, 3), actual=(3, 2))
        assert err.expected == (2, 3)
        assert err.actual == (3, 2)

    def test_defaults_are_none(self):
        err = DimensionError("mismatch")
        assert err.expected is None
        assert err.actual is None


class TestIndexOutOfRangeError:
    """IndexOutOfRangeError carries the index and axis."""

    def test_all_attributes(self):
        err = IndexOutOfRangeError("oops", index=10, size=3, axis="row")
        assert err.index == 10
        assert err.size == 3
        assert err.axis == "row"


class TestSingularMatrixError:
    """SingularMatrixError carries pivot diagnostics."""

    def test_all_attributes(self):
        err = SingularMatrixError(
            "singular",
            matrix_name="a",
            step=2,
            pivot_row=1,
            pivot_col=1,
        )
        assert str(err) == "singular"
        assert err.matrix_name == "a"
        assert err.step == 2
        assert err.pivot_row == 1
        assert err.pivot_col == 1

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.step is None
        assert err.pivot_row is None
        assert err.pivot_col is None

    def test_catchable_with_attributes(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            raise SingularMatrixError("singular", matrix_name="A", step=0)
        assert exc_info.value.matrix_name == "A"
        assert exc_info.value.step == 0
