"""
Core infrastructure for PyMatCalc.

This module provides shared abstractions and utilities used by the
parser (io), the algebra engine (algebra) and the command line.

Key components:
    matrix: Immutable Matrix value type
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    limits: Parsing limits
    compute: Timing and tolerance tiers
"""

from pymatcalc.core.matrix import Matrix
from pymatcalc.core.result import Result
from pymatcalc.core.limits import ParseLimits, DEFAULT_LIMITS
from pymatcalc.core.exceptions import (
    PyMatCalcError,
    ValidationError,
    DimensionError,
    MatrixFormatError,
    MatrixIOError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Value type
    "Matrix",
    # Result
    "Result",
    # Limits
    "ParseLimits",
    "DEFAULT_LIMITS",
    # Exceptions
    "PyMatCalcError",
    "ValidationError",
    "DimensionError",
    "MatrixFormatError",
    "MatrixIOError",
    "NumericalError",
    "SingularMatrixError",
]
