"""
Matrix: the value type shared by the parser, the algebra engine and the writer.

A Matrix owns a dense, row-major, read-only float64 buffer. Every
constructor copies its input, so no two matrices ever share storage and
no operation can modify a matrix after it is built.

Usage:
    from pymatcalc import Matrix

    A = Matrix.from_values(2, 2, [1.0, 2.0, 3.0, 4.0])
    B = Matrix.from_array([[1, 0], [0, 1]])
    I = Matrix.identity(3)

    A.shape       # (2, 2)
    A[1, 0]       # 3.0
    A.values      # (1.0, 2.0, 3.0, 4.0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatcalc.core.exceptions import DimensionError
from pymatcalc.core.validation import (
    check_array,
    check_finite,
    check_2d,
    check_positive_shape,
)


@dataclass(frozen=True, eq=False)
class Matrix:
    """
    Immutable dense matrix of float64 values.

    Construct via the factory classmethods, not directly.
    """
    _data: NDArray[np.floating[Any]]

    # === Factory Methods ===

    @classmethod
    def from_values(cls, rows: int, cols: int, values: Sequence[float]) -> Matrix:
        """
        Build a matrix from a flat row-major sequence.

        Raises:
            DimensionError: If the shape is not positive or the number of
                values is not rows * cols
        """
        check_positive_shape(rows, cols, "matrix")
        flat = check_array(values, "values")
        if flat.ndim != 1 or flat.size != rows * cols:
            raise DimensionError(
                f"values: expected {rows * cols} elements for a {rows}x{cols} "
                f"matrix, got {flat.size}",
                shapes=((rows, cols),),
            )
        return cls._build(flat.reshape(rows, cols))

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """Build a matrix from a 2D array-like. 1D input becomes a single row."""
        data = check_array(array, "array")
        if data.ndim == 1:
            data = data.reshape(1, -1)
        return cls._build(data)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        check_positive_shape(n, n, "identity")
        return cls._build(np.eye(n, dtype=np.float64))

    @classmethod
    def _build(cls, data: NDArray) -> Matrix:
        """Internal builder: validates, copies and freezes the buffer."""
        check_2d(data, "matrix")
        check_positive_shape(data.shape[0], data.shape[1], "matrix")
        check_finite(data, "matrix")
        owned = np.array(data, dtype=np.float64, order='C', copy=True)
        owned.flags.writeable = False
        return cls(_data=owned)

    # === Properties ===

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Read-only (rows, cols) view of the elements."""
        return self._data

    @property
    def values(self) -> tuple[float, ...]:
        """Elements as a flat row-major tuple."""
        return tuple(float(v) for v in self._data.ravel())

    # === Access ===

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        return float(self._data[i, j])

    def to_list(self) -> list[list[float]]:
        """Nested lists, one per row."""
        return self._data.tolist()

    def allclose(self, other: Matrix, rtol: float = 1e-10, atol: float = 1e-12) -> bool:
        """Same shape and all elements equal within tolerance."""
        return self.shape == other.shape and bool(
            np.allclose(self._data, other._data, rtol=rtol, atol=atol)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols})"
