"""
Input validation utilities for PyStatLab.

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
from enum import Enum

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any, TypeVar

from pystatlab.core.exceptions import (
    DimensionError,
    EmptyDataError,
    InvalidParameterError,
    LengthMismatchError,
    ValidationError,
)

E = TypeVar('E', bound=Enum)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like. Rejects inputs that result in object dtype
    (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

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

    # bool is not a number for statistical purposes
    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64, copy=True)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

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


def check_nonempty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one element.

    Raises:
        EmptyDataError: If array is empty
    """
    if array.size == 0:
        raise EmptyDataError(f"{name}: sample is empty", name=name)


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
        LengthMismatchError: If arrays have inconsistent lengths
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
        raise LengthMismatchError(
            f"Inconsistent lengths: {details}",
            lengths=dict(zip(names, lengths)),
        )


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        EmptyDataError: If array is empty
        ValidationError: If array has fewer than min_samples
    """
    check_nonempty(array, name)
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


# --- Scalar parameter checks ---

def _check_real(value: float, name: str) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(
            f"{name} must be a real number, got {value!r}", name=name, value=value,
        ) from e
    if not math.isfinite(v):
        raise InvalidParameterError(
            f"{name} must be finite, got {v}", name=name, value=value,
        )
    return v


def check_open_unit(value: float, name: str) -> float:
    """
    Verify value lies strictly inside (0, 1).

    Used for confidence levels, significance levels and type II error rates.

    Raises:
        InvalidParameterError: If value is outside (0, 1)
    """
    v = _check_real(value, name)
    if not (0.0 < v < 1.0):
        raise InvalidParameterError(
            f"{name} must be in (0, 1), got {v}", name=name, value=value,
        )
    return v


def check_probability(value: float, name: str) -> float:
    """
    Verify value lies in the closed interval [0, 1].

    Raises:
        InvalidParameterError: If value is outside [0, 1]
    """
    v = _check_real(value, name)
    if not (0.0 <= v <= 1.0):
        raise InvalidParameterError(
            f"{name} must be in [0, 1], got {v}", name=name, value=value,
        )
    return v


def check_positive(value: float, name: str) -> float:
    """
    Verify value is finite and strictly positive.

    Raises:
        InvalidParameterError: If value <= 0
    """
    v = _check_real(value, name)
    if v <= 0.0:
        raise InvalidParameterError(
            f"{name} must be positive, got {v}", name=name, value=value,
        )
    return v


def check_finite_scalar(value: float, name: str) -> float:
    """Verify value is a finite real number and return it as float."""
    return _check_real(value, name)


def check_choice(enum_cls: type[E], value: E | str, name: str) -> E:
    """
    Coerce value to a member of a str-valued Enum.

    Raises:
        ValidationError: If value matches no member
    """
    try:
        return enum_cls(value)
    except ValueError:
        valid = tuple(m.value for m in enum_cls)
        raise ValidationError(
            f"{name} must be one of {valid}, got {value!r}"
        ) from None


def check_non_negative_int(value: int, name: str) -> int:
    """
    Verify value is a non-negative integer (integral floats accepted).

    Raises:
        InvalidParameterError: If value is negative or not integral
    """
    v = _check_real(value, name)
    if v < 0 or v != math.floor(v):
        raise InvalidParameterError(
            f"{name} must be a non-negative integer, got {value!r}",
            name=name, value=value,
        )
    return int(v)
