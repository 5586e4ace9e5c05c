"""
PyMatCalc Command Line Interface

Usage:
    matcalc <operation> input_file [input_file_2] [output_file]
    python -m pymatcalc <operation> ...

Operations:
    -f  Frobenius norm      matcalc -f input_file
    -t  Transpose           matcalc -t input_file [output_file]
    -m  Matrix product      matcalc -m input_file_1 input_file_2 [output_file]
    -d  Determinant         matcalc -d input_file
    -c  Cofactor matrix     matcalc -c input_file [output_file]
    -a  Adjoint             matcalc -a input_file [output_file]
    -i  Inverse             matcalc -i input_file [output_file]

Scalar results are printed to stdout. Matrix results are written to the
output file, or to stdout if none is given, in the same format as the
input files, preceded by comment lines recording the invocation and the
program version.

Exit codes:
    0  success
    1  incorrect operation or arguments
    3  a file could not be opened, read or written
    4  an input file is not a valid matrix file
    5  the matrix is unsuitable for the operation (shape, singular)
"""

from __future__ import annotations

import argparse
import sys
import warnings
from enum import IntEnum
from typing import NoReturn

from pymatcalc import __version__, __revision_date__
from pymatcalc.core.exceptions import (
    MatrixFormatError,
    MatrixIOError,
    NumericalError,
    ValidationError,
)
from pymatcalc.io import read_matrix, write_matrix
from pymatcalc.algebra import calculate

PROG = 'matcalc'


class ExitCode(IntEnum):
    """Process exit status for each failure class."""
    NO_ERROR = 0
    INCORRECT_ARGUMENTS = 1
    FILE_OPEN_ERROR = 3
    INVALID_FILE = 4
    INVALID_MATRIX = 5


# flag -> (operation, number of input files, accepts an output file)
OPERATIONS: dict[str, tuple[str, int, bool]] = {
    'f': ('norm', 1, False),
    't': ('transpose', 1, True),
    'm': ('product', 2, True),
    'd': ('determinant', 1, False),
    'c': ('cofactors', 1, True),
    'a': ('adjoint', 1, True),
    'i': ('inverse', 1, True),
}

HELP_TEXT = """\
Please choose one of the following operations and enter the correct command line arguments:
'-f': Frobenius Norm : matcalc -f input_file
'-t': Transpose : matcalc -t input_file (output_file)
'-m': Matrix Product : matcalc -m input_file_1 input_file_2 (output_file)
'-d': Determinant : matcalc -d input_file
'-c': Cofactors : matcalc -c input_file (output_file)
'-a': Adjoint : matcalc -a input_file (output_file)
'-i': Inverse : matcalc -i input_file (output_file)

The (output file) is optional. If no file is given the matrix will be written to stdout.
"""


class UsageError(Exception):
    """Command line could not be parsed."""
    pass


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting, so main() owns the exit code."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """Parser with one required operation flag and the file arguments."""
    parser = _ArgumentParser(
        prog=PROG,
        description="Matrix calculator for matrix text files",
        epilog=HELP_TEXT,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    group = parser.add_mutually_exclusive_group(required=True)
    for flag, (operation, _, _) in OPERATIONS.items():
        group.add_argument(
            f'-{flag}',
            dest='flag',
            action='store_const',
            const=flag,
            help=operation,
        )
    parser.add_argument(
        '--version',
        action='version',
        version=f"%(prog)s {__version__} ({__revision_date__})",
    )
    parser.add_argument('files', nargs='+', help='input file(s), then optional output file')
    return parser


def _usage(reason: str) -> ExitCode:
    print(f"Incorrect operation or incorrect command line arguments: {reason}\n", file=sys.stderr)
    print(HELP_TEXT, file=sys.stderr)
    return ExitCode.INCORRECT_ARGUMENTS


def _report_format_error(e: MatrixFormatError) -> None:
    token = e.token if e.token is not None else '(missing)'
    print(f"{e.source_name} is an invalid matrix file. {e.reason}", file=sys.stderr)
    print(f"The invalid string in line {e.line_number} of the file is\n{token}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """
    Run the calculator.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        ExitCode value
    """
    argv = sys.argv[1:] if argv is None else list(argv)

    try:
        args = build_parser().parse_args(argv)
    except UsageError as e:
        return _usage(str(e))

    operation, n_inputs, accepts_output = OPERATIONS[args.flag]
    max_files = n_inputs + (1 if accepts_output else 0)
    if not n_inputs <= len(args.files) <= max_files:
        return _usage(
            f"-{args.flag} takes {n_inputs} input file(s)"
            + (" and an optional output file" if accepts_output else "")
            + f", got {len(args.files)} file argument(s)"
        )

    inputs = args.files[:n_inputs]
    output = args.files[n_inputs] if len(args.files) > n_inputs else None

    try:
        matrices = []
        for path in inputs:
            print(f"Processing file {path}...", file=sys.stderr)
            matrices.append(read_matrix(path))

        # Warnings are reported below from the solution itself
        with warnings.catch_warnings():
            warnings.simplefilter('ignore')
            solution = calculate(operation, *matrices)
    except MatrixIOError as e:
        print(str(e), file=sys.stderr)
        return ExitCode.FILE_OPEN_ERROR
    except MatrixFormatError as e:
        _report_format_error(e)
        return ExitCode.INVALID_FILE
    except (ValidationError, NumericalError) as e:
        print(str(e), file=sys.stderr)
        return ExitCode.INVALID_MATRIX

    for message in solution.warnings:
        print(message, file=sys.stderr)

    if solution.scalar is not None:
        print(solution.summary())
        return ExitCode.NO_ERROR

    header = (
        " ".join([PROG, *argv]),
        f"Version = {__version__}, Revision date = {__revision_date__}",
    )
    try:
        write_matrix(solution.matrix, output if output is not None else sys.stdout, header=header)
    except MatrixIOError as e:
        print(str(e), file=sys.stderr)
        return ExitCode.FILE_OPEN_ERROR

    print(f"Output matrix has been printed to {output or 'stdout'}.", file=sys.stderr)
    return ExitCode.NO_ERROR


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
