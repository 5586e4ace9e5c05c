"""
Solver dispatch for the algebra engine.

calculate() is the single entry point used by the command line: it
validates the request, runs the backend and surfaces non-fatal issues
as Python warnings.
"""

from __future__ import annotations

import warnings
from typing import Literal
from numpy.typing import ArrayLike

from pymatcalc.core.exceptions import ValidationError
from pymatcalc.core.matrix import Matrix
from pymatcalc.algebra.design import AlgebraDesign, Operation
from pymatcalc.algebra.solution import AlgebraSolution
from pymatcalc.algebra.backends.cpu import CPUAlgebraBackend


BackendChoice = Literal['auto', 'cpu']


def _get_backend(backend: BackendChoice):
    """Select backend based on preference."""
    if backend in ('auto', 'cpu'):
        return CPUAlgebraBackend()

    raise ValidationError(f"Unknown backend: {backend!r}")


def calculate(
    operation: Operation,
    *operands: Matrix | ArrayLike,
    backend: BackendChoice = 'auto',
) -> AlgebraSolution:
    """
    Run one algebra operation.

    Parameters
    ----------
    operation : str
        'norm', 'transpose', 'product', 'determinant', 'cofactors',
        'adjoint' or 'inverse'.
    *operands : Matrix or array-like
        One matrix, or two for 'product'. Product operands that are
        incompatible as given but compatible in reverse are swapped, and
        the solution reports it.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    AlgebraSolution

    Raises
    ------
    ValidationError
        Unknown operation or backend, or wrong operand count.
    DimensionError
        Shapes unsuitable for the operation.
    SingularMatrixError
        Inverse of a matrix with zero determinant.
    """
    design = AlgebraDesign.build(operation, *operands)
    be = _get_backend(backend)

    result = be.solve(design)

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    return AlgebraSolution(_result=result, _design=design)
