"""
Linear systems by Gauss-Jordan elimination.

Public API:
    solve(system, ...) -> LinearSystemSolution

The solve() function is the only entry point. It handles:
    - Input conversion and validation
    - Configuration (zero tolerance)
    - Backend selection
    - Result wrapping

Example:
    >>> from pylinsolve.elimination import solve, AugmentedMatrix
    >>> matrix = AugmentedMatrix.from_augmented([[2, 0, 4], [0, 4, 2]])
    >>> solve(matrix).to_list()
    [2.0, 0.5]
"""

from pylinsolve.elimination.design import AugmentedMatrix, Row
from pylinsolve.elimination.solution import LinearSystemSolution, SolutionParams
from pylinsolve.elimination.solvers import solve

__all__ = [
    "solve",
    "AugmentedMatrix",
    "Row",
    "LinearSystemSolution",
    "SolutionParams",
]
