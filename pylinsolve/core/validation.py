"""
Input validation utilities for PyLinSolve.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinsolve.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or ragged data),
    non-numeric dtypes, and complex numbers.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or ragged rows"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype} is not supported")

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")
