"""
Matrix algebra engine.

Pure functions over Matrix values. Inputs are never modified; every
matrix result is a newly allocated Matrix.

    norm(A)          - Frobenius norm
    transpose(A)     - A^T
    multiply(A, B)   - A B, strict shape check (never swaps operands)
    determinant(A)   - cofactor expansion along the first row
    minor(A, i, j)   - A without row i and column j
    cofactors(A)     - signed minor determinants
    adjoint(A)       - transpose of the cofactor matrix ([[1]] for 1x1)
    inverse(A)       - adjoint(A) / determinant(A)
"""

from __future__ import annotations

import numpy as np

from pymatcalc.core.exceptions import NumericalError, SingularMatrixError
from pymatcalc.core.matrix import Matrix
from pymatcalc.core.validation import check_square, check_product_compatible
from pymatcalc.algebra._cofactor import (
    minor_array,
    determinant_array,
    cofactor_array,
)


def _checked_result(array: np.ndarray, operation: str) -> Matrix:
    """Wrap a computed array, rejecting elements that overflowed float64."""
    if not np.isfinite(array).all():
        raise NumericalError(f"{operation}: result overflows float64")
    return Matrix.from_array(array)


def norm(matrix: Matrix) -> float:
    """
    Frobenius norm: square root of the sum of squared elements.

    Squares are taken in row-major order and summed with NumPy's pairwise
    summation.
    """
    return float(np.sqrt(np.sum(np.square(matrix.data))))


def transpose(matrix: Matrix) -> Matrix:
    """Transpose. result[j, i] = A[i, j]; never fails."""
    return Matrix.from_array(matrix.data.T)


def multiply(left: Matrix, right: Matrix) -> Matrix:
    """
    Matrix product.

    result[k, i] = sum_j left[k, j] * right[j, i], accumulated in
    ascending j for every element.

    Raises:
        DimensionError: If left.cols != right.rows
        NumericalError: If an element of the product overflows float64
    """
    check_product_compatible(left, right)

    out = np.zeros((left.rows, right.cols), dtype=np.float64)
    with np.errstate(over='ignore', invalid='ignore'):
        for j in range(left.cols):
            out += np.outer(left.data[:, j], right.data[j, :])
    return _checked_result(out, 'product')


def determinant(matrix: Matrix) -> float:
    """
    Determinant by recursive cofactor expansion.

    Raises:
        DimensionError: If the matrix is not square
    """
    check_square(matrix, 'determinant')
    return determinant_array(matrix.data)


def minor(matrix: Matrix, row: int, col: int) -> Matrix:
    """
    Submatrix with one row and one column deleted.

    Raises:
        DimensionError: If the matrix has a single row or column
        IndexError: If row or col is out of range
    """
    if not (0 <= row < matrix.rows and 0 <= col < matrix.cols):
        raise IndexError(
            f"minor: index ({row}, {col}) out of range for {matrix.rows}x{matrix.cols} matrix"
        )
    return Matrix.from_array(minor_array(matrix.data, row, col))


def cofactors(matrix: Matrix) -> Matrix:
    """
    Cofactor matrix: entry (i, j) is (-1)^(i+j) * det(minor(A, i, j)).

    Raises:
        DimensionError: If the matrix is not square
    """
    check_square(matrix, 'cofactors')
    with np.errstate(over='ignore', invalid='ignore'):
        out = cofactor_array(matrix.data)
    return _checked_result(out, 'cofactors')


def adjoint(matrix: Matrix) -> Matrix:
    """
    Adjoint (adjugate): transpose of the cofactor matrix.

    The adjoint of any 1x1 matrix is [[1]].

    Raises:
        DimensionError: If the matrix is not square
    """
    check_square(matrix, 'adjoint')
    if matrix.rows == 1:
        return Matrix.identity(1)
    with np.errstate(over='ignore', invalid='ignore'):
        out = cofactor_array(matrix.data).T
    return _checked_result(out, 'adjoint')


def inverse(matrix: Matrix) -> Matrix:
    """
    Inverse via the adjoint: every element of adjoint(A) divided by det(A).

    Raises:
        DimensionError: If the matrix is not square
        SingularMatrixError: If the determinant is exactly zero
        NumericalError: If the determinant or an element of the inverse
            overflows float64
    """
    check_square(matrix, 'inverse')
    with np.errstate(over='ignore', invalid='ignore'):
        det = determinant_array(matrix.data)
    if det == 0:
        raise SingularMatrixError(
            "The determinant is 0, so the inverse of the matrix could not be found.",
            matrix_name=f"{matrix.rows}x{matrix.cols} matrix",
            determinant=det,
        )
    if not np.isfinite(det):
        raise NumericalError("inverse: determinant overflows float64")

    with np.errstate(over='ignore', invalid='ignore'):
        out = adjoint(matrix).data / det
    return _checked_result(out, 'inverse')
