"""
Tests for the augmented matrix store.

Validates:
    - Construction from rows, pairs and arrays, with the equal-length check
    - Bounds-checked accessors
    - row_switch / multiply_row / add_multiplied_row, exact results and
      their inverses
    - Copy independence and equality
"""

import numpy as np
import pytest

from pylinsolve.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    RowsNotOfEqualLengthError,
    SameRowError,
)
from pylinsolve.elimination import AugmentedMatrix, Row


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_three_equal_rows(self, three_by_three):
        assert three_by_three.width == 3
        assert three_by_three.height == 3
        assert three_by_three.rows() == [
            Row((1.0, 2.0, 3.0), 4.0),
            Row((5.0, 6.0, 7.0), 8.0),
            Row((9.0, 10.0, 11.0), 12.0),
        ]

    def test_unequal_rows_rejected(self):
        with pytest.raises(RowsNotOfEqualLengthError) as exc_info:
            AugmentedMatrix([
                Row([1.0, 2.0], 4.0),
                Row([5.0, 6.0, 7.0], 8.0),
                Row([9.0, 10.0, 11.0], 12.0),
            ])
        err = exc_info.value
        assert err.expected_width == 2
        assert err.row_index == 1
        assert err.actual_width == 3

    def test_unequal_later_row_reported(self):
        with pytest.raises(RowsNotOfEqualLengthError) as exc_info:
            AugmentedMatrix([Row([1, 2], 3), Row([4, 5], 6), Row([7], 8)])
        assert exc_info.value.row_index == 2

    def test_empty_is_zero_by_zero(self):
        matrix = AugmentedMatrix([])
        assert matrix.width == 0
        assert matrix.height == 0
        assert matrix.rows() == []

    def test_default_is_empty(self):
        assert AugmentedMatrix() == AugmentedMatrix([])

    def test_rows_with_only_sums(self):
        matrix = AugmentedMatrix([Row([], 0.0), Row([], 0.0)])
        assert matrix.shape == (2, 0)

    def test_from_pairs(self):
        matrix = AugmentedMatrix.from_rows([([1, 2], 3), ([4, 5], 6)])
        assert matrix.row(1) == Row((4.0, 5.0), 6.0)

    def test_from_arrays(self):
        matrix = AugmentedMatrix.from_arrays([[1, 2], [3, 4]], [5, 6])
        assert matrix.shape == (2, 2)
        assert matrix.get_sum(1) == 6.0

    def test_from_arrays_column_vector_sums(self):
        matrix = AugmentedMatrix.from_arrays(np.eye(2), np.array([[1.0], [2.0]]))
        np.testing.assert_array_equal(matrix.sums, [1.0, 2.0])

    def test_from_arrays_height_mismatch(self):
        with pytest.raises(DimensionError, match="Inconsistent lengths"):
            AugmentedMatrix.from_arrays(np.eye(3), [1.0, 2.0])

    def test_from_arrays_empty(self):
        assert AugmentedMatrix.from_arrays([], []).shape == (0, 0)

    def test_from_arrays_does_not_alias_input(self):
        A = np.eye(2)
        matrix = AugmentedMatrix.from_arrays(A, [1.0, 1.0])
        matrix.multiply_row(0, 5.0)
        assert A[0, 0] == 1.0

    def test_from_augmented(self):
        matrix = AugmentedMatrix.from_augmented([[1, 2, 3], [4, 5, 6]])
        assert matrix.shape == (2, 2)
        assert matrix.row(0) == Row((1.0, 2.0), 3.0)

    def test_from_augmented_needs_2d(self):
        with pytest.raises(DimensionError):
            AugmentedMatrix.from_augmented([1.0, 2.0, 3.0])

    def test_from_augmented_no_columns(self):
        with pytest.raises(DimensionError, match="sums"):
            AugmentedMatrix.from_augmented(np.zeros((2, 0)))

    def test_row_values_are_floats(self):
        row = Row([1, 2], 3)
        assert row.elements == (1.0, 2.0)
        assert isinstance(row.sum, float)
        assert row.width == 2

    def test_to_array_round_trip(self, three_by_three):
        arr = three_by_three.to_array()
        assert arr.shape == (3, 4)
        assert AugmentedMatrix.from_augmented(arr) == three_by_three

    def test_to_array_empty(self):
        assert AugmentedMatrix().to_array().shape == (0, 1)


# ═══════════════════════════════════════════════════════════════════════
# Accessors
# ═══════════════════════════════════════════════════════════════════════


class TestAccessors:

    def test_get_element(self, three_by_three):
        assert three_by_three.get_element(1, 2) == 7.0
        assert isinstance(three_by_three.get_element(0, 0), float)

    def test_get_sum(self, three_by_three):
        assert three_by_three.get_sum(2) == 12.0

    @pytest.mark.parametrize("row, col", [(3, 0), (0, 3), (-1, 0), (0, -1)])
    def test_get_element_out_of_bounds(self, three_by_three, row, col):
        with pytest.raises(IndexOutOfBoundsError):
            three_by_three.get_element(row, col)

    def test_get_element_reports_axis(self, three_by_three):
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            three_by_three.get_element(0, 5)
        assert exc_info.value.axis == 'column'
        assert exc_info.value.index == 5
        assert exc_info.value.size == 3

    def test_get_sum_out_of_bounds(self, three_by_three):
        with pytest.raises(IndexOutOfBoundsError):
            three_by_three.get_sum(3)

    def test_empty_matrix_has_no_rows(self):
        with pytest.raises(IndexOutOfBoundsError):
            AugmentedMatrix().get_sum(0)

    def test_float_index_rejected(self, three_by_three):
        with pytest.raises(TypeError):
            three_by_three.get_sum(1.0)

    def test_numpy_integer_index(self, three_by_three):
        assert three_by_three.get_sum(np.int64(1)) == 8.0

    def test_coefficients_are_copies(self, three_by_three):
        three_by_three.coefficients[0, 0] = 99.0
        three_by_three.sums[0] = 99.0
        assert three_by_three.get_element(0, 0) == 1.0
        assert three_by_three.get_sum(0) == 4.0


# ═══════════════════════════════════════════════════════════════════════
# Row primitives
# ═══════════════════════════════════════════════════════════════════════


class TestRowSwitch:

    def test_swap(self, three_by_three):
        three_by_three.row_switch(0, 1)
        assert three_by_three == AugmentedMatrix([
            Row([5.0, 6.0, 7.0], 8.0),
            Row([1.0, 2.0, 3.0], 4.0),
            Row([9.0, 10.0, 11.0], 12.0),
        ])

    def test_switch_is_its_own_inverse(self, three_by_three):
        original = three_by_three.copy()
        three_by_three.row_switch(0, 2)
        assert three_by_three != original
        three_by_three.row_switch(0, 2)
        assert three_by_three == original

    def test_same_row_is_noop(self, three_by_three):
        original = three_by_three.copy()
        three_by_three.row_switch(1, 1)
        assert three_by_three == original

    def test_out_of_bounds(self, three_by_three):
        with pytest.raises(IndexOutOfBoundsError):
            three_by_three.row_switch(0, 3)

    def test_same_row_out_of_bounds(self, three_by_three):
        with pytest.raises(IndexOutOfBoundsError):
            three_by_three.row_switch(3, 3)


class TestMultiplyRow:

    def test_scale(self, three_by_three):
        three_by_three.multiply_row(2, 2.0)
        assert three_by_three.row(2) == Row((18.0, 20.0, 22.0), 24.0)
        assert three_by_three.row(1) == Row((5.0, 6.0, 7.0), 8.0)

    @pytest.mark.parametrize("k", [2.0, 4.0, 0.5, -8.0])
    def test_reciprocal_restores_exactly(self, three_by_three, k):
        original = three_by_three.copy()
        three_by_three.multiply_row(1, k)
        three_by_three.multiply_row(1, 1.0 / k)
        assert three_by_three == original

    def test_zero_factor_accepted(self, three_by_three):
        three_by_three.multiply_row(0, 0.0)
        assert three_by_three.row(0) == Row((0.0, 0.0, 0.0), 0.0)

    def test_out_of_bounds(self, three_by_three):
        with pytest.raises(IndexOutOfBoundsError):
            three_by_three.multiply_row(-1, 2.0)


class TestAddMultipliedRow:

    def test_add(self, three_by_three):
        three_by_three.add_multiplied_row(1, 2, 2.0)
        assert three_by_three == AugmentedMatrix([
            Row([1.0, 2.0, 3.0], 4.0),
            Row([5.0, 6.0, 7.0], 8.0),
            Row([19.0, 22.0, 25.0], 28.0),
        ])

    def test_source_unchanged(self, three_by_three):
        three_by_three.add_multiplied_row(0, 1, -3.0)
        assert three_by_three.row(0) == Row((1.0, 2.0, 3.0), 4.0)
        assert three_by_three.row(1) == Row((2.0, 0.0, -2.0), -4.0)

    @pytest.mark.parametrize("k", [2.0, -1.0, 0.25, 3.0])
    def test_negated_factor_restores_exactly(self, three_by_three, k):
        original = three_by_three.copy()
        three_by_three.add_multiplied_row(0, 2, k)
        three_by_three.add_multiplied_row(0, 2, -k)
        assert three_by_three == original

    @pytest.mark.parametrize("row", [0, 1, 2])
    def test_same_row_rejected(self, three_by_three, row):
        original = three_by_three.copy()
        with pytest.raises(SameRowError) as exc_info:
            three_by_three.add_multiplied_row(row, row, 2.0)
        assert exc_info.value.row == row
        assert three_by_three == original

    def test_out_of_bounds_checked_before_aliasing(self, three_by_three):
        with pytest.raises(IndexOutOfBoundsError):
            three_by_three.add_multiplied_row(5, 5, 1.0)

    def test_target_below_source(self, three_by_three):
        three_by_three.add_multiplied_row(2, 0, -1.0)
        assert three_by_three.row(0) == Row((-8.0, -8.0, -8.0), -8.0)


# ═══════════════════════════════════════════════════════════════════════
# Copy / equality / repr
# ═══════════════════════════════════════════════════════════════════════


class TestCopyAndEquality:

    def test_copy_is_independent(self, three_by_three):
        clone = three_by_three.copy()
        clone.multiply_row(0, 10.0)
        assert three_by_three.get_element(0, 0) == 1.0

    def test_shape_matters_for_equality(self):
        assert AugmentedMatrix([Row([], 0.0)]) != AugmentedMatrix()

    def test_not_equal_to_other_types(self, three_by_three):
        assert three_by_three != three_by_three.to_array().tolist()

    def test_unhashable(self, three_by_three):
        with pytest.raises(TypeError):
            hash(three_by_three)

    def test_repr_shows_rows(self, three_by_three):
        text = repr(three_by_three)
        assert "height=3, width=3" in text
        assert "| 12.0" in text
