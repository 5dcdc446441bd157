"""
CPU Gauss-Jordan backend.

Reduces an AugmentedMatrix to reduced row-echelon form using nothing but
the matrix's own row primitives, column by column:

    1. pivot      first row at/below k with a non-zero in column k is
                  swapped into row k (no magnitude-based choice)
    2. normalize  row k is multiplied by 1 / pivot
    3. eliminate  column k is cleared in every other row, above and below

After all columns the left width x width block is the identity, so row i's
sum is variable i. Rows beyond width must have reduced to 0 = 0.

Zero tests are exact (== 0.0) unless a zero tolerance is configured.
Errors from the row primitives (IndexOutOfBoundsError, SameRowError) are
not caught here: the loop bounds make them unreachable, and if one shows
up it is a bug.
"""

import warnings
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinsolve.core.result import Result
from pylinsolve.core.exceptions import SystemUnsolvableError
from pylinsolve.core.compute.timing import Timer
from pylinsolve.core.compute.tolerances import ROUNDOFF_WARNING_THRESHOLD, is_zero
from pylinsolve.elimination.design import AugmentedMatrix
from pylinsolve.elimination.solution import SolutionParams


def reorder_row(matrix: AugmentedMatrix, iteration: int, zero_tolerance: float = 0.0) -> int:
    """
    Move a usable pivot for column `iteration` into row `iteration`.

    Scans rows iteration .. height-1 in order and swaps the first one with
    a non-zero element in that column into place.

    Returns:
        Index of the row that was chosen (== iteration when no swap was needed)

    Raises:
        SystemUnsolvableError: reason='no_pivot' if the column is zero from
            row `iteration` down
    """
    for row in range(iteration, matrix.height):
        if not is_zero(matrix.get_element(row, iteration), zero_tolerance):
            matrix.row_switch(iteration, row)
            return row

    raise SystemUnsolvableError(
        f"No pivot for column {iteration}: rows {iteration}..{matrix.height - 1} "
        f"are all zero in that column",
        reason='no_pivot',
        column=iteration,
    )


def make_leading_one(matrix: AugmentedMatrix, iteration: int) -> float:
    """
    Scale row `iteration` by the reciprocal of its pivot.

    Returns:
        The pivot value before scaling
    """
    pivot = matrix.get_element(iteration, iteration)
    matrix.multiply_row(iteration, 1.0 / pivot)
    return pivot


def clean_column(matrix: AugmentedMatrix, iteration: int) -> None:
    """Zero column `iteration` in every row except the pivot row."""
    for row in range(matrix.height):
        if row == iteration:
            continue
        factor = -matrix.get_element(row, iteration)
        matrix.add_multiplied_row(iteration, row, factor)


def first_inconsistent_row(matrix: AugmentedMatrix, zero_tolerance: float = 0.0) -> int | None:
    """Index of the first extra row (index >= width) whose sum is not zero, else None."""
    for row in range(matrix.width, matrix.height):
        if not is_zero(matrix.get_sum(row), zero_tolerance):
            return row
    return None


def is_solved(matrix: AugmentedMatrix, zero_tolerance: float = 0.0) -> bool:
    """True if every equation beyond the unknown count reduced to 0 = 0."""
    return first_inconsistent_row(matrix, zero_tolerance) is None


def get_solution(matrix: AugmentedMatrix) -> NDArray[np.floating[Any]]:
    """Sums of rows 0 .. width-1, i.e. the solution of a reduced matrix."""
    return np.array([matrix.get_sum(row) for row in range(matrix.width)], dtype=np.float64)


class GaussJordanBackend:
    """
    CPU backend using Gauss-Jordan elimination.

    Implements the Backend protocol for AugmentedMatrix -> SolutionParams.

    solve() consumes its argument: the matrix is reduced in place. Pass a
    copy if you still need the original (the public solve() does).
    """

    def __init__(self, zero_tolerance: float = 0.0):
        """
        Args:
            zero_tolerance: Absolute threshold below which a pivot candidate
                or a residual sum counts as zero. 0.0 means exact comparison.
        """
        self._zero_tolerance = zero_tolerance

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    @property
    def zero_tolerance(self) -> float:
        return self._zero_tolerance

    def solve(self, matrix: AugmentedMatrix) -> Result[SolutionParams]:
        """
        Reduce the matrix and read off the solution.

        Args:
            matrix: The system to solve; modified in place

        Returns:
            Result containing SolutionParams

        Raises:
            SystemUnsolvableError: If there are more unknowns than equations,
                a column has no pivot, or an extra equation is contradictory
        """
        width, height = matrix.width, matrix.height

        if width > height:
            raise SystemUnsolvableError(
                f"System has {width} unknowns but only {height} equations; "
                f"no unique solution",
                reason='underdetermined',
            )

        timer = Timer()
        timer.start()

        pivots: list[float] = []
        row_swaps = 0
        issues: list[str] = []

        for iteration in range(width):
            with timer.section('pivot'):
                chosen = reorder_row(matrix, iteration, self._zero_tolerance)
            if chosen != iteration:
                row_swaps += 1

            with timer.section('normalize'):
                pivot = make_leading_one(matrix, iteration)
            pivots.append(float(pivot))

            if abs(pivot) < ROUNDOFF_WARNING_THRESHOLD:
                message = (
                    f"Pivot for column {iteration} is {pivot:.3e}; "
                    f"result may be dominated by rounding"
                )
                issues.append(message)
                warnings.warn(message, RuntimeWarning, stacklevel=2)

            with timer.section('eliminate'):
                clean_column(matrix, iteration)

        with timer.section('consistency'):
            bad_row = first_inconsistent_row(matrix, self._zero_tolerance)

        if bad_row is not None:
            residual = float(matrix.get_sum(bad_row))
            message = (
                f"Inconsistent system: equation {bad_row} reduced to 0 = {residual!r}"
            )
            if abs(residual) < ROUNDOFF_WARNING_THRESHOLD:
                message += " (likely rounding; consider a non-zero zero_tolerance)"
            raise SystemUnsolvableError(
                message,
                reason='inconsistent',
                row=bad_row,
                residual=residual,
            )

        with timer.section('extract'):
            values = get_solution(matrix)

        timer.stop()

        params = SolutionParams(
            values=values,
            pivots=tuple(pivots),
            row_swaps=row_swaps,
        )

        info: dict[str, Any] = {
            'method': 'gauss_jordan',
            'width': width,
            'height': height,
            'row_swaps': row_swaps,
            'zero_tolerance': self._zero_tolerance,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(issues),
        )
