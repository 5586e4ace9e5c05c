"""
Matrix text parser.

Reads a matrix definition of the form

    # optional comments and blank lines anywhere
    matrix <rows> <cols>
    <row 0 col 0> ... <row 0 col C-1>
    ...
    <row R-1 col 0> ... <row R-1 col C-1>
    end

and returns a fully populated Matrix, or raises MatrixFormatError naming
the line, token and rule that failed. A partially read matrix is never
returned.

Usage:
    from pymatcalc.io import read_matrix, parse_matrix_string

    A = read_matrix("matrix_1.txt")
    B = parse_matrix_string("matrix 2 2\\n1 2\\n3 4\\nend\\n")
"""

from __future__ import annotations

import io
import re
from pathlib import Path
from typing import Iterable, TextIO
import numpy as np

from pymatcalc.core.exceptions import MatrixIOError
from pymatcalc.core.limits import ParseLimits, DEFAULT_LIMITS
from pymatcalc.core.matrix import Matrix
from pymatcalc.io.context import ParseContext

MATRIX_KEYWORD = 'matrix'
END_KEYWORD = 'end'

_INTEGER = re.compile(r'[+-]?\d+', re.ASCII)
_DECIMAL = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII)

# Diagnostic reasons, one per format rule
MISSING_DECLARATION = "Missing matrix declaration."
INVALID_DIMENSION = "Stated rows or columns are invalid."
DIMENSION_TOO_LARGE = "Rows or columns of the matrix are bigger than the maximum value allowed."
UNEXPECTED_HEADER_CONTENT = "There are unexpected characters in the file."
COLUMN_MISMATCH = "Number of stated columns does not match file."
ROW_MISMATCH = "Number of stated rows does not match file."
INVALID_ELEMENT = "Matrix element is invalid."
UNEXPECTED_CONTENT = "Unexpected characters in the file."
MISSING_END = "Could not find the end of the file."


def _parse_dimension(token: str | None, context: ParseContext) -> int:
    """Parse a positive row/column count no larger than the configured maximum."""
    if token is None or not _INTEGER.fullmatch(token):
        raise context.error(INVALID_DIMENSION)

    negative = token.startswith('-')
    digits = token.lstrip('+-').lstrip('0')
    # Compare digit counts first; int() refuses very long digit strings
    if len(digits) > len(str(context.limits.max_dimension)):
        raise context.error(INVALID_DIMENSION if negative else DIMENSION_TOO_LARGE)

    value = int(digits or '0')
    if negative or value < 1:
        raise context.error(INVALID_DIMENSION)
    if value > context.limits.max_dimension:
        raise context.error(DIMENSION_TOO_LARGE)
    return value


def _parse_element(token: str, context: ParseContext) -> float:
    """Parse one matrix element in decimal or exponential notation."""
    if not _DECIMAL.fullmatch(token):
        raise context.error(INVALID_ELEMENT)

    value = float(token)
    # Exponent overflow, e.g. 1e999
    if not np.isfinite(value):
        raise context.error(INVALID_ELEMENT)
    return value


def _read_header(context: ParseContext) -> tuple[int, int]:
    """Read 'matrix R C' from the first significant line."""
    if context.next_line() != MATRIX_KEYWORD:
        raise context.error(MISSING_DECLARATION)

    rows = _parse_dimension(context.next_token(), context)
    cols = _parse_dimension(context.next_token(), context)

    if context.next_token() is not None:
        raise context.error(UNEXPECTED_HEADER_CONTENT)
    return rows, cols


def _read_rows(context: ParseContext, rows: int, cols: int) -> np.ndarray:
    """Read exactly `rows` lines of exactly `cols` elements each."""
    values = np.empty((rows, cols), dtype=np.float64)

    for i in range(rows):
        token = context.next_line()
        if token is None:
            raise context.error(ROW_MISMATCH)

        for j in range(cols):
            if j > 0:
                token = context.next_token()
            if token is None:
                raise context.error(COLUMN_MISMATCH)
            if token == END_KEYWORD:
                raise context.error(ROW_MISMATCH)
            values[i, j] = _parse_element(token, context)

        if context.next_token() is not None:
            raise context.error(UNEXPECTED_CONTENT)

    return values


def _read_terminator(context: ParseContext) -> None:
    """Read the closing 'end' line."""
    if context.next_line() != END_KEYWORD:
        raise context.error(MISSING_END)

    if context.next_token() is not None:
        raise context.error(UNEXPECTED_CONTENT)


def parse_matrix(
    source: TextIO | Iterable[str],
    *,
    source_name: str = '<stream>',
    limits: ParseLimits = DEFAULT_LIMITS,
) -> Matrix:
    """
    Parse a matrix from an open text stream or any iterable of lines.

    Parameters
    ----------
    source : text stream or iterable of str
        Lines of the matrix definition. Lines after the 'end' terminator
        are not read.
    source_name : str
        Name used in diagnostics.
    limits : ParseLimits
        Maximum dimension and line length.

    Returns
    -------
    Matrix

    Raises
    ------
    MatrixFormatError
        If the text violates the format. Carries source_name, line_number,
        token and reason.
    MatrixIOError
        If a line is longer than limits.max_line_length.
    """
    context = ParseContext(source_name=source_name, lines=iter(source), limits=limits)

    rows, cols = _read_header(context)
    values = _read_rows(context, rows, cols)
    _read_terminator(context)

    return Matrix.from_array(values)


def parse_matrix_string(
    text: str,
    *,
    source_name: str = '<string>',
    limits: ParseLimits = DEFAULT_LIMITS,
) -> Matrix:
    """Parse a matrix from a string holding the whole definition."""
    return parse_matrix(io.StringIO(text), source_name=source_name, limits=limits)


def read_matrix(path: str | Path, *, limits: ParseLimits = DEFAULT_LIMITS) -> Matrix:
    """
    Open and parse a matrix file.

    Raises
    ------
    MatrixIOError
        If the file cannot be opened or decoded, or a line is too long.
    MatrixFormatError
        If the file violates the format.
    """
    path = Path(path)
    try:
        with path.open('r', encoding='utf-8') as f:
            return parse_matrix(f, source_name=str(path), limits=limits)
    except OSError as e:
        raise MatrixIOError(f"Error opening the file {path}.", source_name=str(path)) from e
    except UnicodeDecodeError as e:
        raise MatrixIOError(
            f"{path} is not a readable text file: {e.reason}", source_name=str(path)
        ) from e
