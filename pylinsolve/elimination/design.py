"""
Augmented matrix store.

An AugmentedMatrix holds a linear system A x = b as rows of coefficients
plus one right-hand-side value ("sum") per row. It validates its input once,
at construction, and afterwards only changes through the three elementary
row operations the elimination engine is built from:

    row_switch(r1, r2)                      swap two rows
    multiply_row(r, k)                      row r *= k
    add_multiplied_row(src, dst, k)         row dst += k * row src

Storage is one float64 block of coefficients (height x width) and a float64
vector of sums, addressed by position. Two-row operations therefore never
need two live references into the same container.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Iterable, Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinsolve.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    RowsNotOfEqualLengthError,
    SameRowError,
)
from pylinsolve.core.validation import check_array, check_1d, check_2d, check_consistent_length


@dataclass(frozen=True)
class Row:
    """
    One equation: coefficients plus the augmented value.

    Rows are values. The matrix copies them in on construction and hands
    out fresh copies from row() / rows(); a Row is never a view into a
    matrix.
    """
    elements: tuple[float, ...]
    sum: float

    def __post_init__(self):
        object.__setattr__(self, 'elements', tuple(float(e) for e in self.elements))
        object.__setattr__(self, 'sum', float(self.sum))

    @property
    def width(self) -> int:
        """Number of coefficients (the sum is not counted)."""
        return len(self.elements)


class AugmentedMatrix:
    """
    Augmented matrix with dimension invariants and row primitives.

    Invariants (checked at construction, assumed afterwards):
        - every row has exactly `width` elements
        - `height` equals the number of rows
        - no rows means width = 0 and height = 0

    Construction:
        AugmentedMatrix([Row([1, 2], 3), Row([4, 5], 6)])
        AugmentedMatrix.from_rows([([1, 2], 3), ([4, 5], 6)])
        AugmentedMatrix.from_arrays(A, b)
        AugmentedMatrix.from_augmented([[1, 2, 3], [4, 5, 6]])

    Raises:
        RowsNotOfEqualLengthError: If rows disagree on their element count
    """

    def __init__(self, rows: Iterable[Row | tuple[Sequence[float], float]] = ()):
        rows = [_coerce_row(row) for row in rows]
        height = len(rows)

        if height == 0:
            self._set_blocks(np.zeros((0, 0)), np.zeros(0))
            return

        width = rows[0].width
        for index, row in enumerate(rows):
            if row.width != width:
                raise RowsNotOfEqualLengthError(
                    f"Row {index} has {row.width} elements, expected {width} "
                    f"(width is set by row 0)",
                    expected_width=width,
                    row_index=index,
                    actual_width=row.width,
                )

        coefficients = np.array([row.elements for row in rows], dtype=np.float64)
        sums = np.array([row.sum for row in rows], dtype=np.float64)
        self._set_blocks(coefficients.reshape(height, width), sums)

    # === Construction ===

    @classmethod
    def from_rows(cls, rows: Iterable[Row | tuple[Sequence[float], float]]) -> AugmentedMatrix:
        """Build from Row objects or (elements, sum) pairs."""
        return cls(rows)

    @classmethod
    def from_arrays(cls, coefficients: ArrayLike, sums: ArrayLike) -> AugmentedMatrix:
        """
        Build from a coefficient matrix and a right-hand-side vector.

        Args:
            coefficients: (height, width) array-like
            sums: (height,) array-like

        Raises:
            ValidationError: If either input is not real numeric data
            DimensionError: If shapes are wrong or heights disagree
        """
        A = check_array(coefficients, 'coefficients')
        b = check_array(sums, 'sums')
        if b.ndim == 2 and b.shape[1] == 1:
            b = b.ravel()
        if A.ndim == 1 and A.size == 0:
            A = A.reshape(0, 0)

        check_2d(A, 'coefficients')
        check_1d(b, 'sums')
        check_consistent_length(A, b, names=('coefficients', 'sums'))
        if A.shape[0] == 0:
            return cls()
        return cls._from_blocks(A.copy(), b.copy())

    @classmethod
    def from_augmented(cls, augmented: ArrayLike) -> AugmentedMatrix:
        """
        Build from a single (height, width + 1) array; the last column holds the sums.

        Raises:
            DimensionError: If the array is not 2D or has no sum column
        """
        M = check_array(augmented, 'augmented')
        if M.ndim == 1 and M.size == 0:
            return cls()

        check_2d(M, 'augmented')
        if M.shape[0] == 0:
            return cls()
        if M.shape[1] < 1:
            raise DimensionError(
                f"augmented: needs at least one column for the sums, got shape {M.shape}"
            )
        return cls._from_blocks(M[:, :-1].copy(), M[:, -1].copy())

    @classmethod
    def _from_blocks(cls, coefficients: NDArray, sums: NDArray) -> AugmentedMatrix:
        """Wrap already validated float64 blocks without copying."""
        matrix = cls.__new__(cls)
        matrix._set_blocks(coefficients, sums)
        return matrix

    def _set_blocks(self, coefficients: NDArray, sums: NDArray) -> None:
        self._coefficients = coefficients
        self._sums = sums
        self._height, self._width = coefficients.shape

    def copy(self) -> AugmentedMatrix:
        """Independent deep copy."""
        return AugmentedMatrix._from_blocks(self._coefficients.copy(), self._sums.copy())

    # === Properties ===

    @property
    def width(self) -> int:
        """Number of unknowns (elements per row, sum not included)."""
        return self._width

    @property
    def height(self) -> int:
        """Number of equations (rows)."""
        return self._height

    @property
    def shape(self) -> tuple[int, int]:
        """(height, width)."""
        return (self._height, self._width)

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Copy of the coefficient block (height x width)."""
        return self._coefficients.copy()

    @property
    def sums(self) -> NDArray[np.floating[Any]]:
        """Copy of the sum column (height,)."""
        return self._sums.copy()

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Augmented copy: coefficients with the sums appended as the last column."""
        return np.column_stack([self._coefficients, self._sums]).reshape(
            self._height, self._width + 1
        )

    # === Read accessors ===

    def get_element(self, row: int, col: int) -> float:
        """
        Element `col` of `row`.

        Raises:
            IndexOutOfBoundsError: If row >= height or col >= width
        """
        row = self._check_row(row)
        col = self._check_col(col)
        return float(self._coefficients[row, col])

    def get_sum(self, row: int) -> float:
        """
        Augmented value of `row`.

        Raises:
            IndexOutOfBoundsError: If row >= height
        """
        row = self._check_row(row)
        return float(self._sums[row])

    def row(self, row: int) -> Row:
        """Copy of one row."""
        row = self._check_row(row)
        return Row(tuple(self._coefficients[row].tolist()), float(self._sums[row]))

    def rows(self) -> list[Row]:
        """Copies of all rows, top to bottom."""
        return [self.row(i) for i in range(self._height)]

    # === Row primitives ===

    def row_switch(self, row1: int, row2: int) -> None:
        """
        Swap two rows in place. row1 == row2 is allowed and changes nothing.

        Raises:
            IndexOutOfBoundsError: If either row is out of range
        """
        row1 = self._check_row(row1)
        row2 = self._check_row(row2)
        if row1 == row2:
            return

        # Fancy indexing on the right-hand side copies, so this is a true swap
        self._coefficients[[row1, row2]] = self._coefficients[[row2, row1]]
        self._sums[[row1, row2]] = self._sums[[row2, row1]]

    def multiply_row(self, row: int, factor: float) -> None:
        """
        Scale every element and the sum of `row` by `factor`.

        A zero factor is accepted; the engine just never uses one.

        Raises:
            IndexOutOfBoundsError: If row is out of range
        """
        row = self._check_row(row)
        factor = float(factor)
        self._coefficients[row] *= factor
        self._sums[row] *= factor

    def add_multiplied_row(self, source_row: int, target_row: int, factor: float) -> None:
        """
        target_row += source_row * factor, on every element and on the sum.

        Raises:
            IndexOutOfBoundsError: If either row is out of range
            SameRowError: If source_row == target_row
        """
        source_row = self._check_row(source_row)
        target_row = self._check_row(target_row)
        if source_row == target_row:
            raise SameRowError(
                f"add_multiplied_row: source and target are both row {source_row}",
                row=source_row,
            )

        factor = float(factor)
        self._coefficients[target_row] += self._coefficients[source_row] * factor
        self._sums[target_row] += self._sums[source_row] * factor

    # === Index checks ===

    def _check_row(self, row: int) -> int:
        index = operator.index(row)
        if not 0 <= index < self._height:
            raise IndexOutOfBoundsError(
                f"Row index {index} out of range for matrix with {self._height} rows",
                index=index,
                size=self._height,
                axis='row',
            )
        return index

    def _check_col(self, col: int) -> int:
        index = operator.index(col)
        if not 0 <= index < self._width:
            raise IndexOutOfBoundsError(
                f"Column index {index} out of range for matrix with {self._width} columns",
                index=index,
                size=self._width,
                axis='column',
            )
        return index

    # === Dunder ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AugmentedMatrix):
            return NotImplemented
        return (
            self.shape == other.shape
            and bool(np.array_equal(self._coefficients, other._coefficients))
            and bool(np.array_equal(self._sums, other._sums))
        )

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        lines = [
            f"  {self._coefficients[i].tolist()} | {float(self._sums[i])!r}"
            for i in range(self._height)
        ]
        body = "\n".join(lines)
        return f"AugmentedMatrix(height={self._height}, width={self._width})" + (
            f"\n{body}" if body else ""
        )


def _coerce_row(row: Row | tuple[Sequence[float], float]) -> Row:
    """Accept a Row or an (elements, sum) pair."""
    if isinstance(row, Row):
        return row
    elements, total = row
    return Row(tuple(elements), total)
