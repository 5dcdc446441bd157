"""
Generic result container for all PyLinSolve computations.

The Result class provides a standardized envelope that every solver
returns. This enables shared tooling for timing, warnings and reporting
while allowing each domain to define its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, dimensions, row swaps)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for solver computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (solution vector, etc.)
        info: Structured metadata (method, dimensions, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=SolutionParams(values=x, row_swaps=1),
        ...     info={'method': 'gauss_jordan', 'width': 3, 'height': 3},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_gauss_jordan'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
