"""
Cofactor expansion kernels.

Work on raw (n, n) float64 arrays so the recursion does not pay for
Matrix validation at every level. Every minor is a fresh array produced
by np.delete; no recursive call writes to, or aliases, its parent's
buffer.

Cost is O(n!) in the dimension. There is no pivoting, memoization or
LU shortcut.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray


def minor_array(values: NDArray[np.floating[Any]], row: int, col: int) -> NDArray[np.floating[Any]]:
    """Copy of `values` with one row and one column removed."""
    return np.delete(np.delete(values, row, axis=0), col, axis=1)


def determinant_array(values: NDArray[np.floating[Any]]) -> float:
    """
    Determinant by recursive expansion along the first row.

    1x1 and 2x2 are closed-form base cases. For n > 2 the terms
    (-1)^c * a[0, c] * det(minor(0, c)) are summed for c = 0 .. n-1 in
    ascending order.
    """
    n = values.shape[0]
    if n == 1:
        return float(values[0, 0])
    if n == 2:
        return float(values[0, 0] * values[1, 1] - values[0, 1] * values[1, 0])

    det = 0.0
    for col in range(n):
        sign = 1.0 if col % 2 == 0 else -1.0
        det += sign * float(values[0, col]) * determinant_array(minor_array(values, 0, col))
    return det


def cofactor_array(values: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Matrix of signed minor determinants, same shape as `values`.

    The minor of a 1x1 matrix is empty and its determinant is taken as 1.
    """
    n = values.shape[0]
    if n == 1:
        return np.ones((1, 1), dtype=np.float64)

    out = np.empty((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(n):
            sign = 1.0 if (i + j) % 2 == 0 else -1.0
            out[i, j] = sign * determinant_array(minor_array(values, i, j))
    return out
