"""
AlgebraDesign: a validated request for one algebra operation.

Checks the operation name, the operand count and the operand shapes
before any computation runs, and settles the operand order of a product.
Follows the pymatcalc Design pattern.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal
from numpy.typing import ArrayLike

from pymatcalc.core.exceptions import DimensionError, ValidationError
from pymatcalc.core.matrix import Matrix
from pymatcalc.core.validation import check_square


Operation = Literal[
    'norm', 'transpose', 'product', 'determinant', 'cofactors', 'adjoint', 'inverse',
]

OPERAND_COUNTS: dict[str, int] = {
    'norm': 1,
    'transpose': 1,
    'product': 2,
    'determinant': 1,
    'cofactors': 1,
    'adjoint': 1,
    'inverse': 1,
}

SQUARE_OPERATIONS = frozenset({'determinant', 'cofactors', 'adjoint', 'inverse'})

SCALAR_OPERATIONS = frozenset({'norm', 'determinant'})


@dataclass(frozen=True)
class AlgebraDesign:
    """
    Design for a single algebra operation.

    Immutable after construction. For 'product' the operands are stored in
    the order they will be multiplied; `swapped` records whether that is
    the reverse of the order given.

    Construction:
        AlgebraDesign.build('inverse', A)
        AlgebraDesign.build('product', A, B)
    """
    _operation: str
    _operands: tuple[Matrix, ...]
    _swapped: bool = False

    @classmethod
    def build(cls, operation: Operation, *operands: Matrix | ArrayLike) -> AlgebraDesign:
        """
        Validate an operation request.

        Parameters
        ----------
        operation : str
            One of OPERAND_COUNTS.
        *operands : Matrix or array-like
            One matrix, or two for 'product'. Array-likes are converted.

        Raises
        ------
        ValidationError
            Unknown operation or wrong number of operands.
        DimensionError
            Non-square matrix for a square-only operation, or product
            operands incompatible in both orders.
        """
        if operation not in OPERAND_COUNTS:
            raise ValidationError(
                f"Unknown operation: {operation!r}. "
                f"Must be one of {sorted(OPERAND_COUNTS)}."
            )

        expected = OPERAND_COUNTS[operation]
        if len(operands) != expected:
            raise ValidationError(
                f"{operation}: requires {expected} matrix operand(s), got {len(operands)}"
            )

        matrices = tuple(
            op if isinstance(op, Matrix) else Matrix.from_array(op) for op in operands
        )

        if operation in SQUARE_OPERATIONS:
            check_square(matrices[0], operation)
            return cls(_operation=operation, _operands=matrices)

        if operation == 'product':
            return cls._build_product(matrices[0], matrices[1])

        return cls(_operation=operation, _operands=matrices)

    @classmethod
    def _build_product(cls, left: Matrix, right: Matrix) -> AlgebraDesign:
        """Keep the given order if it is compatible, otherwise try the reverse."""
        if left.cols == right.rows:
            return cls(_operation='product', _operands=(left, right))

        if right.cols == left.rows:
            return cls(_operation='product', _operands=(right, left), _swapped=True)

        raise DimensionError(
            f"product: it is not possible to find the matrix product of a "
            f"{left.rows}x{left.cols} and a {right.rows}x{right.cols} matrix in either order",
            operation='product',
            shapes=(left.shape, right.shape),
        )

    @property
    def operation(self) -> str:
        return self._operation

    @property
    def operands(self) -> tuple[Matrix, ...]:
        """Operands in evaluation order."""
        return self._operands

    @property
    def swapped(self) -> bool:
        """Whether product operands were reversed from the order given."""
        return self._swapped

    @property
    def returns_scalar(self) -> bool:
        return self._operation in SCALAR_OPERATIONS

    def __repr__(self) -> str:
        shapes = ", ".join(f"{m.rows}x{m.cols}" for m in self._operands)
        swapped = ", swapped" if self._swapped else ""
        return f"AlgebraDesign(operation={self._operation}, operands=[{shapes}]{swapped})"
