"""
PyMatCalc: matrix calculations from text matrix files.

Reads matrices from a small line-oriented text format and computes the
Frobenius norm, transpose, product, determinant, cofactor matrix, adjoint
and inverse by cofactor expansion.

Submodules:
    core: Matrix value type, exceptions, result envelope, validation
    io: Matrix text format reader and writer
    algebra: Algebra engine and operation dispatch
    cli: Command line interface (matcalc)
"""

__version__ = "1.0.1"
__revision_date__ = "30-Oct-2019"

from pymatcalc.core import (
    Matrix,
    ParseLimits,
    DEFAULT_LIMITS,
    PyMatCalcError,
    ValidationError,
    DimensionError,
    MatrixFormatError,
    MatrixIOError,
    NumericalError,
    SingularMatrixError,
)
from pymatcalc import io
from pymatcalc import algebra
from pymatcalc.io import read_matrix, parse_matrix, parse_matrix_string, write_matrix
from pymatcalc.algebra import calculate

__all__ = [
    "__version__",
    "io",
    "algebra",
    "Matrix",
    "ParseLimits",
    "DEFAULT_LIMITS",
    "read_matrix",
    "parse_matrix",
    "parse_matrix_string",
    "write_matrix",
    "calculate",
    "PyMatCalcError",
    "ValidationError",
    "DimensionError",
    "MatrixFormatError",
    "MatrixIOError",
    "NumericalError",
    "SingularMatrixError",
]
