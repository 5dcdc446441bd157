"""
Exception hierarchy for PyLinSolve.

All exceptions inherit from PyLinSolveError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information

Two tiers:
    - ValidationError / NumericalError subclasses are expected failures
      that callers handle (bad input, unsolvable system).
    - MatrixContractError subclasses signal a broken primitive contract.
      They are only reachable through programmer error and are not part
      of the user-facing taxonomy.
"""


class PyLinSolveError(Exception):
    """Base exception for all PyLinSolve errors."""
    pass


class ValidationError(PyLinSolveError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class RowsNotOfEqualLengthError(DimensionError):
    """
    Rows of an augmented matrix disagree on their coefficient count.

    The first row defines the width; the first row that differs is reported.

    Attributes:
        expected_width: Coefficient count of the first row
        row_index: Index of the first offending row
        actual_width: Coefficient count of the offending row
    """

    def __init__(
        self,
        message: str,
        expected_width: int | None = None,
        row_index: int | None = None,
        actual_width: int | None = None,
    ):
        super().__init__(message)
        self.expected_width = expected_width
        self.row_index = row_index
        self.actual_width = actual_width


class ParseError(ValidationError):
    """
    A line of text could not be turned into a row of numbers.

    Attributes:
        line: The offending line (stripped)
        token: The token that failed to parse, if known
    """

    def __init__(self, message: str, line: str | None = None, token: str | None = None):
        super().__init__(message)
        self.line = line
        self.token = token


class NumericalError(PyLinSolveError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SystemUnsolvableError(NumericalError):
    """
    The linear system has no unique solution.

    Attributes:
        reason: 'underdetermined' (more unknowns than equations),
            'no_pivot' (a column is zero from the pivot row down), or
            'inconsistent' (an extra equation reduced to 0 = nonzero)
        column: Column without a pivot, for reason='no_pivot'
        row: Row that failed the consistency check, for reason='inconsistent'
        residual: The non-zero sum of that row, for reason='inconsistent'
    """

    def __init__(
        self,
        message: str,
        reason: str,
        column: int | None = None,
        row: int | None = None,
        residual: float | None = None,
    ):
        super().__init__(message)
        self.reason = reason
        self.column = column
        self.row = row
        self.residual = residual


class MatrixContractError(PyLinSolveError):
    """
    A matrix primitive was called in violation of its contract.

    Never raised for valid external input; seeing one means the caller
    (usually the elimination engine) has a bug.
    """
    pass


class IndexOutOfBoundsError(MatrixContractError, IndexError):
    """
    Row or column index outside the matrix.

    Attributes:
        index: The offending index
        size: Number of rows (axis='row') or columns (axis='column')
        axis: 'row' or 'column'
    """

    def __init__(self, message: str, index: int, size: int, axis: str):
        super().__init__(message)
        self.index = index
        self.size = size
        self.axis = axis


class SameRowError(MatrixContractError):
    """
    A two-row operation was given the same row as source and target.

    Attributes:
        row: The row index passed twice
    """

    def __init__(self, message: str, row: int):
        super().__init__(message)
        self.row = row
