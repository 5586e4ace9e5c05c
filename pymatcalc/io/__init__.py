"""
Matrix text format: reading and writing.

Public API:
    read_matrix(path)           - Parse a matrix file
    parse_matrix(stream)        - Parse from an open stream or lines
    parse_matrix_string(text)   - Parse from a string
    format_matrix(matrix)       - Render a matrix as text
    write_matrix(matrix, dest)  - Write a matrix to a path or stream
"""

from pymatcalc.io.context import ParseContext
from pymatcalc.io.parser import (
    read_matrix,
    parse_matrix,
    parse_matrix_string,
)
from pymatcalc.io.writer import format_matrix, write_matrix

__all__ = [
    "read_matrix",
    "parse_matrix",
    "parse_matrix_string",
    "format_matrix",
    "write_matrix",
    "ParseContext",
]
