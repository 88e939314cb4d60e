"""
Error function, its inverse, and the standard normal distribution.

All functions accept a scalar or an array. Scalars come back as Python
floats, arrays as float64 ndarrays of the same shape.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystatlab.core.exceptions import InvalidParameterError


# Abramowitz & Stegun 7.1.26
_ERF_A1 = 0.254829592
_ERF_A2 = -0.284496736
_ERF_A3 = 1.421413741
_ERF_A4 = -1.453152027
_ERF_A5 = 1.061405429
_ERF_P = 0.3275911

# Closed-form inverse constant
ERF_INV_A = 0.140012

# Abramowitz & Stegun 26.2.23
_NINV_C = (2.515517, 0.802853, 0.010328)
_NINV_D = (1.432788, 0.189269, 0.001308)

_SQRT2 = math.sqrt(2.0)
_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


def _out(arr: NDArray[np.floating[Any]]) -> float | NDArray[np.floating[Any]]:
    return float(arr) if arr.ndim == 0 else arr


def erf(x: ArrayLike) -> float | NDArray[np.floating[Any]]:
    """
    Error function.

    Abramowitz & Stegun formula 7.1.26, maximum absolute error 1.5e-7.
    The polynomial is evaluated on |x| and the sign restored afterwards,
    so erf(-x) == -erf(x) exactly and erf(0) == 0.

    Parameters
    ----------
    x : float or array-like

    Returns
    -------
    float or ndarray
    """
    arr = np.asarray(x, dtype=np.float64)
    ax = np.abs(arr)
    t = 1.0 / (1.0 + _ERF_P * ax)
    poly = ((((_ERF_A5 * t + _ERF_A4) * t + _ERF_A3) * t + _ERF_A2) * t + _ERF_A1) * t
    y = 1.0 - poly * np.exp(-ax * ax)
    return _out(np.sign(arr) * y)


def normal_cdf(x: ArrayLike) -> float | NDArray[np.floating[Any]]:
    """Standard normal CDF, 0.5 * (1 + erf(x / sqrt(2)))."""
    arr = np.asarray(x, dtype=np.float64)
    return _out(0.5 * (1.0 + np.asarray(erf(arr / _SQRT2))))


def normal_pdf(x: ArrayLike) -> float | NDArray[np.floating[Any]]:
    """Standard normal density."""
    arr = np.asarray(x, dtype=np.float64)
    return _out(_INV_SQRT_2PI * np.exp(-0.5 * arr * arr))


def erf_inv(x: ArrayLike) -> float | NDArray[np.floating[Any]]:
    """
    Inverse error function, closed-form approximation.

    Uses

        erfinv(x) ~ sign(x) * sqrt( sqrt(c^2 - L/a) - c ),
        L = ln(1 - x^2),  c = 2/(pi*a) + L/2,  a = 0.140012

    which is accurate to a few parts in a thousand over (-1, 1).

    Arguments with |x| >= 1 return a signed infinity instead of raising.
    Callers that derive critical values rely on this boundary policy.

    Parameters
    ----------
    x : float or array-like

    Returns
    -------
    float or ndarray
    """
    arr = np.asarray(x, dtype=np.float64)
    at_boundary = np.abs(arr) >= 1.0

    with np.errstate(divide='ignore', invalid='ignore'):
        log_term = np.log1p(-arr * arr)
        c = 2.0 / (math.pi * ERF_INV_A) + 0.5 * log_term
        inner = np.sqrt(c * c - log_term / ERF_INV_A) - c
        mag = np.sqrt(np.maximum(inner, 0.0))

    result = np.where(at_boundary, np.inf, mag)
    return _out(np.copysign(result, arr))


def normal_inv(p: ArrayLike) -> float | NDArray[np.floating[Any]]:
    """
    Standard normal quantile, rational approximation.

    Abramowitz & Stegun 26.2.23, |error| < 4.5e-4. Used for plotting
    positions, where that accuracy is ample.

    Parameters
    ----------
    p : float or array-like
        Probabilities strictly inside (0, 1).

    Returns
    -------
    float or ndarray

    Raises
    ------
    InvalidParameterError
        If any p is outside (0, 1).
    """
    arr = np.asarray(p, dtype=np.float64)
    if np.any(~((arr > 0.0) & (arr < 1.0))):
        raise InvalidParameterError(
            "normal_inv: p must be in (0, 1)", name="p", value=p,
        )

    tail = np.where(arr < 0.5, arr, 1.0 - arr)
    t = np.sqrt(-2.0 * np.log(tail))
    c0, c1, c2 = _NINV_C
    d1, d2, d3 = _NINV_D
    z = t - (c0 + c1 * t + c2 * t * t) / (1.0 + d1 * t + d2 * t * t + d3 * t * t * t)
    return _out(np.where(arr < 0.5, -z, z))
