"""
Core protocols for PyLinSolve.

These define structural interfaces that domain-specific implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so a
backend only has to look right, not inherit from anything.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pylinsolve.core.result import Result

# Type variables for generic payloads
P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Input container type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a domain-specific input container and
    produce a domain-specific parameter payload.

    Backends hold only their construction-time configuration (e.g. a zero
    tolerance) and keep no state between solves. This makes them easy to
    test and swap.

    Type Parameters:
        D: The input type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Example: 'cpu_gauss_jordan'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.

        Args:
            design: Domain-specific input container

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            NumericalError: If numerical issues prevent a solution
            ValidationError: If the input is invalid for this backend
        """
        ...
