"""
Matrix algebra module.

Pure operations on Matrix values, computed by cofactor expansion with no
external linear-algebra routines.

Public API:
    norm(A)                 - Frobenius norm
    transpose(A)            - Transpose
    multiply(A, B)          - Product (strict operand order)
    determinant(A)          - Determinant
    minor(A, i, j)          - Minor submatrix
    cofactors(A)            - Cofactor matrix
    adjoint(A)              - Adjoint
    inverse(A)              - Inverse
    calculate(op, *mats)    - Validated, timed dispatch of one operation
"""

from pymatcalc.algebra.operations import (
    norm,
    transpose,
    multiply,
    determinant,
    minor,
    cofactors,
    adjoint,
    inverse,
)
from pymatcalc.algebra.design import AlgebraDesign
from pymatcalc.algebra.solution import AlgebraParams, AlgebraSolution
from pymatcalc.algebra.solvers import calculate

__all__ = [
    "norm",
    "transpose",
    "multiply",
    "determinant",
    "minor",
    "cofactors",
    "adjoint",
    "inverse",
    "calculate",
    "AlgebraDesign",
    "AlgebraParams",
    "AlgebraSolution",
]
