"""
CPU reference backend for the algebra engine.

Evaluates an AlgebraDesign with the cofactor-expansion kernels and wraps
the output in a Result with timing, shape metadata and warnings.
"""

from __future__ import annotations

from typing import Any, Callable

from pymatcalc.core.matrix import Matrix
from pymatcalc.core.result import Result
from pymatcalc.core.compute.timing import Timer
from pymatcalc.core.compute.tolerances import CONDITION_THRESHOLD, select_tolerance
from pymatcalc.algebra.design import AlgebraDesign
from pymatcalc.algebra.solution import AlgebraParams
from pymatcalc.algebra import operations

SWAP_WARNING = (
    "The input order of these two matrices was swapped in order to find their product."
)

_MATRIX_OPERATIONS: dict[str, Callable[..., Matrix]] = {
    'transpose': operations.transpose,
    'product': operations.multiply,
    'cofactors': operations.cofactors,
    'adjoint': operations.adjoint,
    'inverse': operations.inverse,
}

_SCALAR_OPERATIONS: dict[str, Callable[..., float]] = {
    'norm': operations.norm,
    'determinant': operations.determinant,
}


class CPUAlgebraBackend:
    """CPU reference backend for matrix algebra."""

    @property
    def name(self) -> str:
        return 'cpu_cofactor'

    def solve(self, design: AlgebraDesign) -> Result[AlgebraParams]:
        """
        Compute the operation described by `design`.

        Parameters
        ----------
        design : AlgebraDesign
            Validated operation and operands.

        Returns
        -------
        Result[AlgebraParams]
            info carries 'operation' and 'shapes'; an inverse also carries
            'condition_number', 'identity_residual' and 'tolerance_tier'.
        """
        timer = Timer()
        timer.start()

        operation = design.operation
        operands = design.operands
        warnings_list: list[str] = []
        info: dict[str, Any] = {
            'operation': operation,
            'shapes': tuple(m.shape for m in operands),
        }

        if design.swapped:
            warnings_list.append(SWAP_WARNING)

        matrix = None
        scalar = None

        with timer.section(operation):
            if operation in _SCALAR_OPERATIONS:
                scalar = _SCALAR_OPERATIONS[operation](*operands)
            else:
                matrix = _MATRIX_OPERATIONS[operation](*operands)

        if operation == 'inverse':
            with timer.section('identity_check'):
                warning = self._check_inverse(operands[0], matrix, info)
            if warning is not None:
                warnings_list.append(warning)

        timer.stop()

        return Result(
            params=AlgebraParams(matrix=matrix, scalar=scalar, swapped=design.swapped),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _check_inverse(
        self,
        matrix: Matrix,
        inv: Matrix,
        info: dict[str, Any],
    ) -> str | None:
        """
        Measure how far A @ A^-1 is from the identity.

        Records the Frobenius condition number and the largest absolute
        deviation from I in `info`. Returns a warning if the deviation
        exceeds the tolerance tier for the problem's conditioning.
        """
        condition = operations.norm(matrix) * operations.norm(inv)
        tier = select_tolerance(is_ill_conditioned=condition > CONDITION_THRESHOLD)

        product = operations.multiply(matrix, inv)
        identity = Matrix.identity(matrix.rows)
        residual = float(abs(product.data - identity.data).max())

        info['condition_number'] = condition
        info['identity_residual'] = residual
        info['tolerance_tier'] = tier.name

        if residual > tier.atol:
            return (
                f"A @ inverse(A) deviates from the identity by {residual:.3g} "
                f"(tolerance {tier.atol:g}, condition number {condition:.3g}); "
                f"the matrix is ill-conditioned"
            )
        return None
