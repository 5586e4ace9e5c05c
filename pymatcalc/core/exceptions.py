"""
Exception hierarchy for PyMatCalc.

All exceptions inherit from PyMatCalcError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages locate the problem (file, line, token, shape)
    - Never catch and re-raise with less information
"""


class PyMatCalcError(Exception):
    """Base exception for all PyMatCalc errors."""
    pass


class ValidationError(PyMatCalcError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect for the requested operation.

    Raised when a square matrix is required but not given, or when the
    operands of a product do not share an inner dimension.

    Attributes:
        operation: Name of the operation that rejected the shapes
        shapes: Shapes of the offending operands, as (rows, cols) tuples
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        shapes: tuple[tuple[int, int], ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.shapes = shapes


class MatrixFormatError(ValidationError):
    """
    A matrix text source violates the file format.

    Attributes:
        source_name: Name of the file or stream being parsed
        line_number: Physical line (1-based) where the violation was found
        token: The offending token, or None if a token was missing
        reason: Which format rule was violated
    """

    def __init__(
        self,
        source_name: str,
        line_number: int,
        token: str | None,
        reason: str,
    ):
        shown = token if token is not None else '<missing>'
        super().__init__(
            f"{source_name} is an invalid matrix file. {reason} "
            f"(line {line_number}, token {shown!r})"
        )
        self.source_name = source_name
        self.line_number = line_number
        self.token = token
        self.reason = reason


class MatrixIOError(PyMatCalcError):
    """
    A matrix source or destination could not be read or written.

    Attributes:
        source_name: Name of the file or stream involved
        line_number: Line being read when the failure happened, if any
    """

    def __init__(
        self,
        message: str,
        source_name: str | None = None,
        line_number: int | None = None,
    ):
        super().__init__(message)
        self.source_name = source_name
        self.line_number = line_number


class NumericalError(PyMatCalcError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when a matrix operation requires invertibility but the
    determinant is exactly zero.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that was computed
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
