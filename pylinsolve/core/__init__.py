"""
Core infrastructure for PyLinSolve.

This module provides shared abstractions and utilities used by the
domain-specific submodules (elimination, ...).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance configuration
"""

from pylinsolve.core.protocols import Backend
from pylinsolve.core.result import Result
from pylinsolve.core.exceptions import (
    PyLinSolveError,
    ValidationError,
    DimensionError,
    RowsNotOfEqualLengthError,
    ParseError,
    NumericalError,
    SystemUnsolvableError,
    MatrixContractError,
    IndexOutOfBoundsError,
    SameRowError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLinSolveError",
    "ValidationError",
    "DimensionError",
    "RowsNotOfEqualLengthError",
    "ParseError",
    "NumericalError",
    "SystemUnsolvableError",
    "MatrixContractError",
    "IndexOutOfBoundsError",
    "SameRowError",
]
