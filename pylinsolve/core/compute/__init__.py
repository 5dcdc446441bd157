"""
Shared compute infrastructure for PyLinSolve.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Zero-tolerance tiers for pivot and consistency checks
"""

from pylinsolve.core.compute.timing import Timer, timed
from pylinsolve.core.compute.tolerances import (
    ToleranceTier,
    EXACT,
    ROUNDOFF,
    resolve_zero_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "ROUNDOFF",
    "resolve_zero_tolerance",
]
