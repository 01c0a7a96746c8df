"""
Tests for the fraction-free determinant and the determinant-based inverse.

Validates:
    - Known determinants for integer, float, Fraction and NumPy element types
    - Exactness: integer results stay integers with no rounding
    - Algebraic properties: identity, zero/repeated rows, row swaps,
      row-addition invariance
    - Absence (None) for non-square and singular inputs
    - inverse() divides by the determinant and warns for integer types
"""

import warnings
from fractions import Fraction

import numpy as np
import pytest

from pymtrs.linalg import Matrix, determinant, inverse


def _swap_rows(rows, i, j):
    rows = [list(row) for row in rows]
    rows[i], rows[j] = rows[j], rows[i]
    return rows


# ═══════════════════════════════════════════════════════════════════════
# Known values
# ═══════════════════════════════════════════════════════════════════════


class TestKnownDeterminants:

    def test_2x2(self):
        assert Matrix.from_rows([[1, 2], [3, 4]]).determinant() == -2

    def test_3x3_singular(self):
        assert Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]]).determinant() == 0

    def test_4x4_rank_deficient(self, singular_4x4):
        assert singular_4x4.determinant() == 0

    def test_4x4_needs_pivot_swap(self, det30_4x4):
        result = det30_4x4.determinant()
        assert result == 30
        assert type(result) is int

    def test_float_2x2(self):
        m = Matrix.from_rows([[-1, 1.5], [1, -1]])
        assert m.determinant() == -0.5

    def test_float32(self):
        m = Matrix.from_rows([[-1, 1.5], [1, -1]], dtype=np.float32)
        result = m.determinant()
        assert result == np.float32(-0.5)
        assert isinstance(result, np.float32)

    def test_numpy_int64(self, det30_4x4):
        m = Matrix.from_rows(det30_4x4.as_vec(), dtype=np.int64)
        result = m.determinant()
        assert result == 30
        assert isinstance(result, np.integer)

    def test_fraction(self):
        m = Matrix.from_rows([[Fraction(1, 2), Fraction(1, 3)], [Fraction(1, 4), Fraction(1, 5)]])
        assert m.determinant() == Fraction(1, 10) - Fraction(1, 12)

    def test_1x1(self):
        assert Matrix.from_rows([[7]]).determinant() == 7

    def test_0x0_is_one(self):
        assert Matrix.zeros(0, dtype=int).determinant() == 1

    def test_function_form(self, det30_4x4):
        assert determinant(det30_4x4) == 30

    def test_matches_numpy_on_random_integers(self, random_int_rows):
        m = Matrix.from_rows(random_int_rows)
        expected = round(np.linalg.det(np.array(random_int_rows, dtype=float)))
        assert m.determinant() == expected

    def test_large_entries_stay_exact(self):
        """Python ints never overflow, so intermediate growth is harmless."""
        big = 10 ** 12
        m = Matrix.from_rows([[big, 1, 0], [1, big, 1], [0, 1, big]])
        assert m.determinant() == big ** 3 - 2 * big

    def test_source_data_untouched(self, det30_4x4):
        before = det30_4x4.as_slice()
        det30_4x4.determinant()
        assert det30_4x4.as_slice() == before


# ═══════════════════════════════════════════════════════════════════════
# Properties
# ═══════════════════════════════════════════════════════════════════════


class TestDeterminantProperties:

    @pytest.mark.parametrize("n", [1, 2, 3, 5, 8])
    def test_identity_is_one(self, n):
        assert Matrix.identity(n, dtype=int).determinant() == 1
        assert Matrix.identity(n).determinant() == 1.0

    def test_zero_row(self, m3x3):
        m3x3.set((1, 0), 0)
        m3x3.set((1, 1), 0)
        m3x3.set((1, 2), 0)
        assert m3x3.determinant() == 0

    def test_leading_zero_column(self):
        assert Matrix.from_rows([[0, 1], [0, 2]]).determinant() == 0

    def test_repeated_row(self):
        assert Matrix.from_rows([[2, 7, 1], [3, 3, 3], [2, 7, 1]]).determinant() == 0

    @pytest.mark.parametrize("i,j", [(0, 1), (0, 2), (1, 3), (0, 3)])
    def test_row_swap_negates_at_any_distance(self, det30_4x4, i, j):
        swapped = Matrix.from_rows(_swap_rows(det30_4x4.as_vec(), i, j))
        assert swapped.determinant() == -30

    def test_permutation_matrix(self):
        """Anti-diagonal 3x3 is a single transposition of rows 0 and 2."""
        m = Matrix.from_rows([[0, 0, 1], [0, 1, 0], [1, 0, 0]])
        assert m.determinant() == -1

    def test_three_cycle_takes_two_swaps(self):
        """Pivot search swaps twice; each swap flips the sign once."""
        m = Matrix.from_rows([[0, 1, 0], [0, 0, 1], [1, 0, 0]])
        assert m.determinant() == 1

    def test_row_addition_invariant(self, det30_4x4):
        rows = det30_4x4.as_vec()
        rows[2] = [a + 3 * b for a, b in zip(rows[2], rows[0])]
        assert Matrix.from_rows(rows).determinant() == 30

    def test_random_row_swaps(self, random_int_rows):
        base = Matrix.from_rows(random_int_rows).determinant()
        swapped = Matrix.from_rows(_swap_rows(random_int_rows, 0, 4)).determinant()
        assert swapped == -base


# ═══════════════════════════════════════════════════════════════════════
# Absence
# ═══════════════════════════════════════════════════════════════════════


class TestNotApplicable:

    def test_non_square_determinant(self, m2x3):
        assert m2x3.determinant() is None

    def test_non_square_inverse(self, m2x3):
        assert m2x3.inverse() is None

    def test_singular_inverse(self):
        m = Matrix.from_rows([[1.0, 2.0], [2.0, 4.0]])
        assert m.inverse() is None


# ═══════════════════════════════════════════════════════════════════════
# inverse
# ═══════════════════════════════════════════════════════════════════════


class TestInverse:

    def test_divides_by_determinant(self):
        m = Matrix.from_rows([[-1, 1.5], [1, -1]])
        assert m.inverse() == Matrix.from_rows([[2.0, -3.0], [-2.0, 2.0]])

    def test_float32(self):
        m = Matrix.from_rows([[-1, 1.5], [1, -1]], dtype=np.float32)
        expected = Matrix.from_rows([[2, -3], [-2, 2]], dtype=np.float32)
        assert m.inverse() == expected

    def test_function_form(self):
        m = Matrix.from_rows([[-1, 1.5], [1, -1]])
        assert inverse(m) == m.inverse()

    def test_scales_by_reciprocal_not_adjugate(self):
        """The result is m / det(m); it is not the classical inverse."""
        m = Matrix.from_rows([[2.0, 0.0], [0.0, 4.0]])
        assert m.inverse() == Matrix.from_rows([[0.25, 0.0], [0.0, 0.5]])

    def test_identity_inverts_to_itself(self):
        ident = Matrix.identity(3)
        assert ident.inverse() == ident

    def test_receiver_unchanged(self):
        m = Matrix.from_rows([[-1, 1.5], [1, -1]])
        m.inverse()
        assert m == Matrix.from_rows([[-1, 1.5], [1, -1]])

    def test_integer_type_warns(self, det30_4x4):
        with pytest.warns(UserWarning, match="integral element type int"):
            det30_4x4.inverse()

    def test_float_type_does_not_warn(self):
        m = Matrix.from_rows([[2.0, 0.0], [0.0, 2.0]])
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            m.inverse()
