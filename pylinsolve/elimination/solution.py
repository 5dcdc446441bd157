"""
Linear system solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinsolve.core.result import Result

if TYPE_CHECKING:
    from pylinsolve.elimination.design import AugmentedMatrix


@dataclass(frozen=True)
class SolutionParams:
    """
    Parameter payload for a solved linear system.

    This is the immutable data computed by backends.
    """
    values: NDArray[np.floating[Any]]
    pivots: tuple[float, ...]
    row_swaps: int


@dataclass
class LinearSystemSolution:
    """
    User-facing solution of A x = b.

    Wraps the backend Result and the system as it was before elimination.
    Behaves as a read-only sequence of floats: ``solution[i]`` is variable i.
    """
    _result: Result[SolutionParams]
    _design: 'AugmentedMatrix'

    # Cached computations
    _residuals: NDArray[np.floating[Any]] | None = None

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.values

    def to_list(self) -> list[float]:
        return [float(x) for x in self.values]

    @property
    def pivots(self) -> tuple[float, ...]:
        """Pivot values in column order, before each was scaled to 1."""
        return self._result.params.pivots

    @property
    def row_swaps(self) -> int:
        return self._result.params.row_swaps

    @property
    def width(self) -> int:
        return self._design.width

    @property
    def height(self) -> int:
        return self._design.height

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        """
        A x - b against the original system, one entry per equation.

        Rounding in the elimination shows up here; the solver itself
        never looks at these.
        """
        if self._residuals is None:
            self._residuals = self._design.coefficients @ self.values - self._design.sums
        return self._residuals

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> float:
        return float(self.values[index])

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_list())

    def summary(self) -> str:
        """Text report: dimensions, one 'X{i} = value' line per unknown, backend."""
        lines = [
            "Gauss-Jordan Elimination Results",
            "=" * 60,
            f"Equations: {self.height}",
            f"Unknowns: {self.width}",
            f"Row swaps: {self.row_swaps}",
            "-" * 60,
        ]
        lines.extend(f"X{i} = {x}" for i, x in enumerate(self.to_list()))
        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.6f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSystemSolution(height={self.height}, width={self.width}, "
            f"values={self.to_list()})"
        )
