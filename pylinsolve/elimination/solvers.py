"""
Solver dispatch for linear systems.

This module provides the solve() function (public API) and backend selection.
"""

from typing import Literal, Sequence
from numpy.typing import ArrayLike

from pylinsolve.core.exceptions import DimensionError
from pylinsolve.core.compute.tolerances import ToleranceTier, resolve_zero_tolerance
from pylinsolve.elimination.design import AugmentedMatrix, Row
from pylinsolve.elimination.solution import LinearSystemSolution
from pylinsolve.elimination.backends.cpu import GaussJordanBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'cpu_gauss_jordan']


def solve(
    system: 'AugmentedMatrix | Sequence[Row] | ArrayLike',
    sums: ArrayLike | None = None,
    *,
    backend: BackendChoice = 'auto',
    zero_tolerance: 'float | str | ToleranceTier' = 'exact',
) -> LinearSystemSolution:
    """
    Solve a linear system by Gauss-Jordan elimination.

    This is the primary public API. Input conversion, configuration,
    backend selection and result wrapping all happen here. The caller's
    matrix is never modified; elimination runs on a private copy.

    Args:
        system: One of
            - an AugmentedMatrix
            - a sequence of Row objects or (elements, sum) pairs
            - a coefficient array (height x width), together with `sums`
            - an augmented array (height x (width + 1)) when `sums` is None
        sums: Right-hand side (height,), only with a coefficient array
        backend: Computational backend to use:
            - 'auto' / 'cpu' / 'cpu_gauss_jordan': CPU Gauss-Jordan
        zero_tolerance: 'exact' (default), 'roundoff', a ToleranceTier, or a
            non-negative float. Values with |v| <= tolerance count as zero
            in pivot selection and in the consistency check.

    Returns:
        LinearSystemSolution with one value per unknown

    Raises:
        RowsNotOfEqualLengthError: If rows disagree on their length
        ValidationError: If inputs or configuration are invalid
        SystemUnsolvableError: If the system has no unique solution

    Example:
        >>> from pylinsolve import solve, Row
        >>> solution = solve([
        ...     Row([1, 2, 0], 5),
        ...     Row([0, 0, 1], 3),
        ...     Row([2, 1, 0], 4),
        ... ])
        >>> solution.to_list()
        [1.0, 2.0, 3.0]
    """
    # === Configuration ===
    atol = resolve_zero_tolerance(zero_tolerance)

    # === Construct Matrix ===
    # This is the boundary - validate here, trust everywhere else
    design = _as_matrix(system, sums)

    # === Select Backend ===
    backend_impl = _get_backend(backend, atol)

    # === Solve ===
    result = backend_impl.solve(design.copy())

    # === Wrap and Return ===
    return LinearSystemSolution(_result=result, _design=design)


def _as_matrix(
    system: 'AugmentedMatrix | Sequence[Row] | ArrayLike',
    sums: ArrayLike | None,
) -> AugmentedMatrix:
    """Normalize the accepted input forms into an AugmentedMatrix."""
    if isinstance(system, AugmentedMatrix):
        if sums is not None:
            raise ValueError("sums must be None when passing an AugmentedMatrix")
        return system.copy()

    if sums is not None:
        return AugmentedMatrix.from_arrays(system, sums)

    if hasattr(system, 'shape'):
        return AugmentedMatrix.from_augmented(system)

    return AugmentedMatrix.from_rows(_as_row(item, i) for i, item in enumerate(system))


def _as_row(item, index: int) -> Row:
    """
    Interpret one row-like item.

    Row objects pass through, an (elements, sum) pair is unpacked, and any
    other flat sequence of numbers is an augmented row whose last value is
    the sum.
    """
    if isinstance(item, Row):
        return item

    values = list(item)
    if len(values) == 2 and hasattr(values[0], '__len__'):
        return Row(tuple(values[0]), values[1])
    if not values:
        raise DimensionError(f"Row {index} is empty; expected at least the sum")
    return Row(tuple(values[:-1]), values[-1])


def _get_backend(choice: BackendChoice, zero_tolerance: float) -> GaussJordanBackend:
    """
    Select and instantiate the appropriate backend.

    Args:
        choice: User's backend preference
        zero_tolerance: Resolved absolute zero threshold

    Returns:
        Backend instance ready to solve

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_gauss_jordan'):
        return GaussJordanBackend(zero_tolerance=zero_tolerance)

    raise ValueError(f"Unknown backend: {choice!r}")
