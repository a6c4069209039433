"""
Input validation utilities for trialstats.

These validators enforce the record-level contract before data enters the
statistical routines: inputs must be numeric, one-dimensional, of matching
length, and within their domain (non-negative times, binary flags, scores
in [0, 1]). Violations raise immediately with clear messages.

Missing values are NOT a contract violation. ``None`` and NaN are accepted
here and filtered by the domain Design classes, because empty or partially
missing samples must produce neutral results rather than errors.

Design principles:
    - No silent coercion of non-numeric data (strings are rejected)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from numbers import Real
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from trialstats.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Booleans and integers are promoted to float. ``None`` entries become
    NaN. Anything else that is not a real number (strings, dicts, nested
    sequences of unequal length) is rejected.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        flat = result.ravel()
        bad = [v for v in flat if v is not None and not isinstance(v, (Real, np.bool_))]
        if bad:
            raise ValidationError(
                f"{name}: contains non-numeric values, first offending "
                f"value {bad[0]!r} of type {type(bad[0]).__name__}"
            )
        converted = np.array(
            [np.nan if v is None else float(v) for v in flat],
            dtype=np.float64,
        )
        return converted.reshape(result.shape)

    if result.dtype == np.bool_:
        return result.astype(np.float64)

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return result.astype(np.float64)


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

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


def check_non_negative(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every non-missing value is >= 0.

    Raises:
        ValidationError: If any value is negative
    """
    negative = array[~np.isnan(array)] < 0
    if np.any(negative):
        raise ValidationError(
            f"{name}: must be non-negative, got {int(np.sum(negative))} "
            f"negative value(s) (min {float(np.nanmin(array))})"
        )


def check_binary(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every non-missing value is 0 or 1 (False or True).

    Raises:
        ValidationError: If any value is outside {0, 1}
    """
    present = array[~np.isnan(array)]
    unique = np.unique(present)
    if not np.all(np.isin(unique, [0.0, 1.0])):
        raise ValidationError(
            f"{name}: must contain only 0/1 or False/True, "
            f"got unique values: {unique}"
        )


def check_unit_interval(
    array: NDArray[np.floating[Any]],
    name: str,
    *,
    open_interval: bool = False,
) -> None:
    """
    Verify every non-missing value lies in [0, 1] (or (0, 1) if open).

    Raises:
        ValidationError: If any value is outside the interval
    """
    present = array[~np.isnan(array)]
    if open_interval:
        outside = (present <= 0.0) | (present >= 1.0)
        bounds = "(0, 1)"
    else:
        outside = (present < 0.0) | (present > 1.0)
        bounds = "[0, 1]"
    if np.any(outside):
        raise ValidationError(
            f"{name}: values must lie in {bounds}, got "
            f"{int(np.sum(outside))} outside (e.g. {float(present[outside][0])})"
        )


def check_scalar(value: Any, name: str) -> float:
    """
    Validate a configuration scalar (threshold, restriction time).

    Returns:
        The value as a float

    Raises:
        ValidationError: If value is not a finite real number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    value = float(value)
    if not np.isfinite(value):
        raise ValidationError(f"{name}: must be finite, got {value}")
    return value
