"""
Algebra solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pymatcalc.core.matrix import Matrix
from pymatcalc.core.result import Result

if TYPE_CHECKING:
    from pymatcalc.algebra.design import AlgebraDesign


@dataclass(frozen=True)
class AlgebraParams:
    """
    Parameter payload for an algebra operation.

    Exactly one of `matrix` and `scalar` is set: norm and determinant
    produce a scalar, every other operation a matrix.
    """
    matrix: Matrix | None = None
    scalar: float | None = None
    swapped: bool = False


@dataclass
class AlgebraSolution:
    """
    User-facing algebra results.

    Wraps Result[AlgebraParams] and provides convenient accessors.
    """
    _result: Result[AlgebraParams]
    _design: 'AlgebraDesign'

    @property
    def operation(self) -> str:
        return self._design.operation

    @property
    def matrix(self) -> Matrix | None:
        """Result matrix, or None for scalar operations."""
        return self._result.params.matrix

    @property
    def scalar(self) -> float | None:
        """Result scalar, or None for matrix operations."""
        return self._result.params.scalar

    @property
    def value(self) -> Matrix | float:
        """Whichever of matrix or scalar was computed."""
        params = self._result.params
        return params.scalar if params.matrix is None else params.matrix

    @property
    def swapped(self) -> bool:
        """Whether the product operands were reversed to make them compatible."""
        return self._result.params.swapped

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Human-readable description of the result."""
        if self.scalar is not None:
            label = 'frobenius norm' if self.operation == 'norm' else self.operation
            return f"The {label} of the matrix is {self.scalar:.10g}."

        m = self.matrix
        lines = [f"{self.operation}: {m.rows}x{m.cols} matrix"]
        for row in m.data:
            lines.append("  " + "  ".join(f"{v:.12g}" for v in row))
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        if self.scalar is not None:
            return f"AlgebraSolution(operation={self.operation}, scalar={self.scalar:.10g})"
        m = self.matrix
        return f"AlgebraSolution(operation={self.operation}, shape={m.rows}x{m.cols})"
