"""
Tests for PyMatCalc exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatCalcError)
    - Diagnostic attributes on DimensionError, MatrixFormatError,
      MatrixIOError, SingularMatrixError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pymatcalc.core.exceptions import (
    DimensionError,
    MatrixFormatError,
    MatrixIOError,
    NumericalError,
    PyMatCalcError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatCalcError."""

    def test_validation_error_is_pymatcalc_error(self):
        with pytest.raises(PyMatCalcError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_format_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise MatrixFormatError("a.txt", 1, "x", "bad")

    def test_io_error_is_not_validation_error(self):
        err = MatrixIOError("cannot open")
        assert isinstance(err, PyMatCalcError)
        assert not isinstance(err, ValidationError)

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_matrix_error_is_pymatcalc_error(self):
        with pytest.raises(PyMatCalcError):
            raise SingularMatrixError("singular")


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionError:

    def test_attributes(self):
        err = DimensionError("not square", operation="inverse", shapes=((2, 3),))
        assert str(err) == "not square"
        assert err.operation == "inverse"
        assert err.shapes == ((2, 3),)

    def test_defaults_are_none(self):
        err = DimensionError("wrong shape")
        assert err.operation is None
        assert err.shapes is None


class TestMatrixFormatError:

    def test_all_attributes(self):
        err = MatrixFormatError("m.txt", 4, "abc", "Matrix element is invalid.")
        assert err.source_name == "m.txt"
        assert err.line_number == 4
        assert err.token == "abc"
        assert err.reason == "Matrix element is invalid."

    def test_message_locates_problem(self):
        err = MatrixFormatError("m.txt", 4, "abc", "Matrix element is invalid.")
        msg = str(err)
        assert "m.txt" in msg
        assert "line 4" in msg
        assert "'abc'" in msg
        assert "Matrix element is invalid." in msg

    def test_missing_token(self):
        err = MatrixFormatError("m.txt", 7, None, "Could not find the end of the file.")
        assert err.token is None
        assert "<missing>" in str(err)


class TestMatrixIOError:

    def test_defaults_are_none(self):
        err = MatrixIOError("cannot open")
        assert err.source_name is None
        assert err.line_number is None

    def test_attributes(self):
        err = MatrixIOError("too long", source_name="big.txt", line_number=2)
        assert err.source_name == "big.txt"
        assert err.line_number == 2


class TestSingularMatrixError:

    def test_all_attributes(self):
        err = SingularMatrixError("det is 0", matrix_name="A", determinant=0.0)
        assert str(err) == "det is 0"
        assert err.matrix_name == "A"
        assert err.determinant == 0.0

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.determinant is None
