"""
Matrix text writer.

Serializes a Matrix into the same format the parser reads, so any
written result can be fed back in as an input.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, TextIO

from pymatcalc.core.exceptions import MatrixIOError
from pymatcalc.core.matrix import Matrix
from pymatcalc.io.parser import MATRIX_KEYWORD, END_KEYWORD

ELEMENT_FORMAT = '%.12g'


def format_matrix(matrix: Matrix, *, header: Iterable[str] = ()) -> str:
    """
    Render a matrix as text.

    Each header string becomes a '# ' comment line ahead of the
    declaration. Every element is printed with 12 significant digits and
    followed by a tab.
    """
    lines = [f"# {line}" for line in header]
    lines.append(f"{MATRIX_KEYWORD} {matrix.rows} {matrix.cols}")
    for row in matrix.data:
        lines.append(''.join(f"{ELEMENT_FORMAT % value}\t" for value in row))
    lines.append(END_KEYWORD)
    return '\n'.join(lines) + '\n'


def write_matrix(
    matrix: Matrix,
    destination: str | Path | TextIO,
    *,
    header: Iterable[str] = (),
) -> None:
    """
    Write a matrix to a path or an open text stream.

    Raises:
        MatrixIOError: If the destination path cannot be opened or written
    """
    text = format_matrix(matrix, header=header)

    if not isinstance(destination, (str, Path)):
        destination.write(text)
        return

    path = Path(destination)
    try:
        with path.open('w', encoding='utf-8') as f:
            f.write(text)
    except OSError as e:
        raise MatrixIOError(f"Error opening the file {path}.", source_name=str(path)) from e
