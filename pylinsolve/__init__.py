"""
PyLinSolve: exact-pivot Gauss-Jordan elimination for linear systems.

Submodules:
    elimination: Augmented matrix store and the Gauss-Jordan solver
    io: Text and file input, solution formatting
    cli: Command-line front end
"""

__version__ = "0.1.0"

from pylinsolve import elimination
from pylinsolve.elimination import solve, AugmentedMatrix, Row, LinearSystemSolution
from pylinsolve.core.exceptions import (
    PyLinSolveError,
    RowsNotOfEqualLengthError,
    SystemUnsolvableError,
)

__all__ = [
    "__version__",
    "elimination",
    "solve",
    "AugmentedMatrix",
    "Row",
    "LinearSystemSolution",
    "PyLinSolveError",
    "RowsNotOfEqualLengthError",
    "SystemUnsolvableError",
]
