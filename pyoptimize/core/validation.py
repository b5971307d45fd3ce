"""
Input validation utilities for PyOptimize.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyoptimize.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


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


def check_bounds_ordered(
    lower: NDArray[np.floating[Any]],
    upper: NDArray[np.floating[Any]],
) -> None:
    """
    Verify lower[i] <= upper[i] elementwise.

    Raises:
        ValidationError: If any lower bound exceeds its upper bound
    """
    bad = np.where(lower > upper)[0]
    if len(bad) > 0:
        i = int(bad[0])
        raise ValidationError(
            f"lower/upper: lower > upper at {len(bad)} position(s), "
            f"first at index {i} (lower={lower[i]}, upper={upper[i]})"
        )


def check_callable(obj: Any, name: str) -> None:
    """
    Verify an object is callable.

    Raises:
        ValidationError: If obj is None or not callable
    """
    if obj is None or not callable(obj):
        raise ValidationError(
            f"{name}: expected a callable, got {type(obj).__name__}"
        )


def check_count(value: Any, minimum: int, name: str) -> int:
    """
    Verify value is an integer no smaller than ``minimum``.

    Returns:
        The value as a Python int

    Raises:
        ValidationError: If value is not integral or is below minimum
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__} ({value!r})"
        )
    if value < minimum:
        raise ValidationError(f"{name}: must be >= {minimum}, got {value}")
    return int(value)


def check_sample_size(n: Any) -> float:
    """
    Verify a sample size is positive, or infinite.

    ``math.inf`` is the sentinel for "no sample size"; it suppresses the
    sample-size-dependent information criteria.

    Returns:
        The sample size as a float

    Raises:
        ValidationError: If n is NaN, non-numeric, or not positive
    """
    try:
        value = float(n)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"n: expected a number or inf, got {n!r}") from e
    if math.isnan(value):
        raise ValidationError("n: sample size is NaN; use math.inf for none")
    if value <= 0:
        raise ValidationError(f"n: sample size must be positive, got {value}")
    return value
