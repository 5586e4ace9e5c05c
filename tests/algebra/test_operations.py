"""
Tests for the algebra engine operations.

Hand-computed values for small matrices, algebraic identities for random
ones, and the failure modes (shape, singularity).
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pymatcalc import Matrix
from pymatcalc.algebra import (
    adjoint,
    cofactors,
    determinant,
    inverse,
    minor,
    multiply,
    norm,
    transpose,
)
from pymatcalc.core.compute.tolerances import CPU_FP64
from pymatcalc.core.exceptions import DimensionError, NumericalError, SingularMatrixError


# ═══════════════════════════════════════════════════════════════════════
# Frobenius norm
# ═══════════════════════════════════════════════════════════════════════


class TestNorm:

    def test_three_four_five(self):
        assert norm(Matrix.from_array([[3.0, 4.0]])) == 5.0

    def test_square(self):
        assert norm(Matrix.from_values(2, 2, [1, 2, 3, 4])) == pytest.approx(np.sqrt(30.0))

    def test_sign_independent(self):
        A = Matrix.from_array([[-1.0, 2.0], [3.0, -4.0]])
        assert norm(A) == pytest.approx(np.sqrt(30.0))

    def test_zero(self):
        assert norm(Matrix.from_array([[0.0, 0.0]])) == 0.0


# ═══════════════════════════════════════════════════════════════════════
# Transpose
# ═══════════════════════════════════════════════════════════════════════


class TestTranspose:

    def test_rectangular(self):
        A = Matrix.from_values(2, 3, [1, 2, 3, 4, 5, 6])
        T = transpose(A)
        assert T.shape == (3, 2)
        assert T.to_list() == [[1, 4], [2, 5], [3, 6]]

    def test_involution(self, rng):
        for shape in [(1, 1), (1, 5), (4, 1), (3, 3), (2, 6)]:
            A = Matrix.from_array(rng.standard_normal(shape))
            assert transpose(transpose(A)) == A

    def test_input_unchanged(self):
        A = Matrix.from_values(1, 2, [1, 2])
        transpose(A)
        assert A.to_list() == [[1.0, 2.0]]


# ═══════════════════════════════════════════════════════════════════════
# Product
# ═══════════════════════════════════════════════════════════════════════


class TestMultiply:

    def test_hand_computed(self):
        A = Matrix.from_values(2, 3, [1, 2, 3, 4, 5, 6])
        B = Matrix.from_values(3, 2, [7, 8, 9, 10, 11, 12])
        assert multiply(A, B).to_list() == [[58, 64], [139, 154]]

    def test_row_times_column(self):
        row = Matrix.from_array([[1.0, 2.0, 3.0]])
        col = Matrix.from_array([[4.0], [5.0], [6.0]])
        assert multiply(row, col).to_list() == [[32.0]]
        assert multiply(col, row).shape == (3, 3)

    def test_identity(self, rng):
        A = Matrix.from_array(rng.standard_normal((3, 4)))
        assert multiply(Matrix.identity(3), A) == A
        assert multiply(A, Matrix.identity(4)) == A

    def test_matches_numpy(self, rng):
        A = rng.standard_normal((4, 5))
        B = rng.standard_normal((5, 3))
        result = multiply(Matrix.from_array(A), Matrix.from_array(B))
        assert_allclose(result.data, A @ B, rtol=1e-12, atol=1e-12)

    def test_associative(self, rng):
        A = Matrix.from_array(rng.standard_normal((2, 3)))
        B = Matrix.from_array(rng.standard_normal((3, 4)))
        C = Matrix.from_array(rng.standard_normal((4, 2)))
        left = multiply(multiply(A, B), C)
        right = multiply(A, multiply(B, C))
        assert_allclose(left.data, right.data, rtol=CPU_FP64.rtol, atol=CPU_FP64.atol)

    def test_incompatible(self):
        A = Matrix.from_values(2, 3, [1, 2, 3, 4, 5, 6])
        with pytest.raises(DimensionError) as exc_info:
            multiply(A, A)
        assert exc_info.value.operation == "product"
        assert exc_info.value.shapes == ((2, 3), (2, 3))

    def test_never_swaps(self):
        """(3x1)(2x3) is incompatible even though (2x3)(3x1) is fine."""
        A = Matrix.from_array([[1.0], [2.0], [3.0]])
        B = Matrix.from_values(2, 3, [1, 2, 3, 4, 5, 6])
        with pytest.raises(DimensionError):
            multiply(A, B)

    def test_overflow(self):
        A = Matrix.from_array([[1e200, 1e200]])
        B = Matrix.from_array([[1e200], [1e200]])
        with pytest.raises(NumericalError, match="product: result overflows float64"):
            multiply(A, B)


# ═══════════════════════════════════════════════════════════════════════
# Determinant and minors
# ═══════════════════════════════════════════════════════════════════════


class TestDeterminant:

    def test_1x1(self):
        assert determinant(Matrix.from_array([[-7.5]])) == -7.5

    def test_2x2(self):
        a, b, c, d = 3.0, 8.0, 4.0, 6.0
        assert determinant(Matrix.from_values(2, 2, [a, b, c, d])) == a * d - b * c

    def test_3x3(self, square_3x3):
        assert determinant(square_3x3) == pytest.approx(-306.0)

    def test_singular(self, singular_3x3):
        assert determinant(singular_3x3) == 0.0

    def test_identity(self):
        for n in range(1, 7):
            assert determinant(Matrix.identity(n)) == 1.0

    def test_triangular_is_product_of_diagonal(self):
        A = Matrix.from_array([
            [2.0, 1.0, 4.0, 3.0],
            [0.0, 3.0, 5.0, 1.0],
            [0.0, 0.0, -1.0, 2.0],
            [0.0, 0.0, 0.0, 0.5],
        ])
        assert determinant(A) == pytest.approx(-3.0)

    def test_matches_numpy(self, rng):
        for n in range(1, 7):
            A = rng.standard_normal((n, n))
            assert determinant(Matrix.from_array(A)) == pytest.approx(np.linalg.det(A), rel=1e-9, abs=1e-12)

    def test_transpose_invariant(self, rng):
        A = Matrix.from_array(rng.standard_normal((5, 5)))
        assert determinant(transpose(A)) == pytest.approx(determinant(A), rel=1e-10, abs=1e-12)

    def test_not_square(self):
        with pytest.raises(DimensionError, match="not square"):
            determinant(Matrix.from_values(2, 3, [1, 2, 3, 4, 5, 6]))


class TestMinor:

    def test_removes_row_and_column(self, square_3x3):
        assert minor(square_3x3, 1, 2).to_list() == [[6.0, 1.0], [2.0, 8.0]]

    def test_fresh_buffer(self, square_3x3):
        M = minor(square_3x3, 0, 0)
        assert not np.shares_memory(M.data, square_3x3.data)

    def test_out_of_range(self, square_3x3):
        with pytest.raises(IndexError):
            minor(square_3x3, 3, 0)

    def test_of_1x1(self):
        with pytest.raises(DimensionError):
            minor(Matrix.identity(1), 0, 0)


# ═══════════════════════════════════════════════════════════════════════
# Cofactors, adjoint, inverse
# ═══════════════════════════════════════════════════════════════════════


class TestCofactors:

    def test_3x3(self, square_3x3):
        expected = [
            [-54.0, -18.0, 36.0],
            [1.0, 40.0, -46.0],
            [7.0, -26.0, -16.0],
        ]
        assert_allclose(cofactors(square_3x3).data, expected, atol=1e-12)

    def test_2x2(self):
        C = cofactors(Matrix.from_values(2, 2, [1, 2, 3, 4]))
        assert C.to_list() == [[4.0, -3.0], [-2.0, 1.0]]

    def test_1x1(self):
        assert cofactors(Matrix.from_array([[9.0]])).to_list() == [[1.0]]

    def test_laplace_along_any_row(self, rng):
        A = Matrix.from_array(rng.standard_normal((4, 4)))
        C = cofactors(A)
        det = determinant(A)
        for i in range(4):
            assert float(np.dot(A.data[i], C.data[i])) == pytest.approx(det, rel=1e-10, abs=1e-12)

    def test_not_square(self):
        with pytest.raises(DimensionError):
            cofactors(Matrix.from_array([[1.0, 2.0]]))


class TestAdjoint:

    def test_3x3(self, square_3x3):
        expected = [
            [-54.0, 1.0, 7.0],
            [-18.0, 40.0, -26.0],
            [36.0, -46.0, -16.0],
        ]
        assert_allclose(adjoint(square_3x3).data, expected, atol=1e-12)

    def test_1x1_is_one(self):
        assert adjoint(Matrix.from_array([[42.0]])).to_list() == [[1.0]]

    def test_a_times_adjoint_is_det_identity(self, rng):
        A = Matrix.from_array(rng.standard_normal((4, 4)))
        product = multiply(A, adjoint(A))
        assert_allclose(product.data, determinant(A) * np.eye(4), atol=1e-10)

    def test_not_square(self):
        with pytest.raises(DimensionError):
            adjoint(Matrix.from_array([[1.0], [2.0]]))


class TestInverse:

    def test_2x2(self):
        inv = inverse(Matrix.from_values(2, 2, [4, 7, 2, 6]))
        assert_allclose(inv.data, [[0.6, -0.7], [-0.2, 0.4]], atol=1e-15)

    def test_1x1(self):
        assert inverse(Matrix.from_array([[4.0]])).to_list() == [[0.25]]

    def test_3x3(self, square_3x3):
        expected = np.array([
            [-54.0, 1.0, 7.0],
            [-18.0, 40.0, -26.0],
            [36.0, -46.0, -16.0],
        ]) / -306.0
        assert_allclose(inverse(square_3x3).data, expected, rtol=1e-12)

    def test_product_is_identity(self, random_square):
        for n in range(1, 7):
            A = random_square(n)
            product = multiply(A, inverse(A))
            assert_allclose(product.data, np.eye(n), rtol=0, atol=CPU_FP64.atol)

    def test_singular(self, singular_3x3):
        with pytest.raises(SingularMatrixError, match="determinant is 0") as exc_info:
            inverse(singular_3x3)
        assert exc_info.value.determinant == 0.0

    def test_singular_1x1(self):
        with pytest.raises(SingularMatrixError):
            inverse(Matrix.from_array([[0.0]]))

    def test_singular_2x2(self):
        with pytest.raises(SingularMatrixError):
            inverse(Matrix.from_values(2, 2, [1, 2, 2, 4]))

    def test_not_square(self):
        with pytest.raises(DimensionError):
            inverse(Matrix.from_values(2, 3, [1, 2, 3, 4, 5, 6]))

    def test_reciprocal_overflow(self):
        """Nonzero determinant whose reciprocal is not representable."""
        with pytest.raises(NumericalError, match="inverse: result overflows float64"):
            inverse(Matrix.from_array([[1e-320]]))

    def test_determinant_overflow(self):
        A = Matrix.from_values(2, 2, [1e200, 0, 0, 1e200])
        with pytest.raises(NumericalError, match="inverse: determinant overflows"):
            inverse(A)

    def test_input_unchanged(self, square_3x3):
        before = square_3x3.values
        inverse(square_3x3)
        assert square_3x3.values == before
