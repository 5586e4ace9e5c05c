"""
Input validation utilities for PyMatCalc.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter or operation names included in all error messages
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatcalc.core.exceptions import ValidationError, DimensionError

if TYPE_CHECKING:
    from pymatcalc.core.matrix import Matrix


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_positive_shape(rows: int, cols: int, name: str) -> None:
    """
    Verify both dimensions of a matrix are at least 1.

    Raises:
        DimensionError: If rows or cols is smaller than 1
    """
    if rows < 1 or cols < 1:
        raise DimensionError(
            f"{name}: rows and columns must be at least 1, got {rows}x{cols}",
            shapes=((rows, cols),),
        )


def check_square(matrix: Matrix, operation: str) -> None:
    """
    Verify a matrix is square.

    Args:
        matrix: Matrix to check
        operation: Operation requiring the square matrix, for error messages

    Raises:
        DimensionError: If rows != cols
    """
    if matrix.rows != matrix.cols:
        raise DimensionError(
            f"{operation}: matrix is not square ({matrix.rows}x{matrix.cols}), "
            f"thus the {operation} cannot be found",
            operation=operation,
            shapes=(matrix.shape,),
        )


def check_product_compatible(left: Matrix, right: Matrix) -> None:
    """
    Verify the columns of the left operand match the rows of the right.

    Raises:
        DimensionError: If left.cols != right.rows
    """
    if left.cols != right.rows:
        raise DimensionError(
            f"product: cannot multiply {left.rows}x{left.cols} by "
            f"{right.rows}x{right.cols} (inner dimensions {left.cols} != {right.rows})",
            operation='product',
            shapes=(left.shape, right.shape),
        )
