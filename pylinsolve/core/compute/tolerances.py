"""
Zero-tolerance tiers for the elimination engine.

The engine decides "is this pivot / residual zero?" in two places. By
default the answer is exact IEEE equality with 0.0, which means rounding
can leave a tiny non-zero residual and turn a solvable system into an
unsolvable verdict (or pick a rounding-noise pivot). A non-zero tolerance
treats |value| <= atol as zero instead. It is opt-in only.
"""

import math
import numbers
from dataclasses import dataclass

from pylinsolve.core.exceptions import ValidationError


@dataclass(frozen=True)
class ToleranceTier:
    """Absolute zero threshold for pivot and consistency checks."""
    atol: float
    name: str
    description: str


# Default: exact comparison against 0.0
EXACT = ToleranceTier(
    atol=0.0,
    name='exact',
    description='Exact IEEE comparison with 0.0',
)

# Absorbs rounding residue of well-scaled systems
ROUNDOFF = ToleranceTier(
    atol=1e-12,
    name='roundoff',
    description='|value| <= 1e-12 counts as zero',
)

TIERS = {tier.name: tier for tier in (EXACT, ROUNDOFF)}

# Pivots smaller than this in exact mode produce a RuntimeWarning.
ROUNDOFF_WARNING_THRESHOLD = 1e-10


def resolve_zero_tolerance(value: 'float | str | ToleranceTier') -> float:
    """
    Turn a tolerance setting into an absolute threshold.

    Args:
        value: A tier name ('exact', 'roundoff'), a ToleranceTier, or a
            non-negative finite float

    Returns:
        The absolute threshold as a float

    Raises:
        ValidationError: For unknown names, negative or non-finite values
    """
    if isinstance(value, ToleranceTier):
        return value.atol

    if isinstance(value, str):
        tier = TIERS.get(value)
        if tier is None:
            raise ValidationError(
                f"zero_tolerance: unknown tier {value!r}, expected one of {sorted(TIERS)}"
            )
        return tier.atol

    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"zero_tolerance: expected a tier name or a number, got {type(value).__name__}"
        )

    atol = float(value)
    if not math.isfinite(atol) or atol < 0.0:
        raise ValidationError(
            f"zero_tolerance: must be a finite non-negative number, got {atol}"
        )
    return atol


def is_zero(value: float, atol: float) -> bool:
    """Exact ``value == 0.0`` when atol is 0, else ``abs(value) <= atol``."""
    if atol == 0.0:
        return value == 0.0
    return abs(value) <= atol
