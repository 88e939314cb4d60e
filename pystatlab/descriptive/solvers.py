"""
Descriptive statistics.

Provides describe() as the comprehensive entry point, plus individual
functions: mean(), median(), mode(), variance(), std(), std_dev(),
skewness(), kurtosis(), quartiles(), histogram().

Every function accepts an array-like or a DescriptiveDesign. Passing a
design lets several statistics share one sorted copy of the sample.
"""

from __future__ import annotations

import math

from numpy.typing import ArrayLike

from pystatlab.core.exceptions import InvalidParameterError
from pystatlab.descriptive.design import DescriptiveDesign
from pystatlab.descriptive.solution import DescriptiveSolution
from pystatlab.descriptive.backends.cpu import CPUDescriptiveBackend
from pystatlab.descriptive._moments import (
    HistogramBin,
    Quartiles,
    compute_histogram,
    compute_kurtosis,
    compute_median,
    compute_mode,
    compute_quartiles,
    compute_sample_std,
    compute_skewness,
    compute_std,
)


def _ensure_design(data: ArrayLike | DescriptiveDesign) -> DescriptiveDesign:
    """Convert raw array to DescriptiveDesign if needed."""
    if isinstance(data, DescriptiveDesign):
        return data
    return DescriptiveDesign.from_array(data)


def describe(
    data: ArrayLike | DescriptiveDesign,
    *,
    conf_level: float = 0.95,
) -> DescriptiveSolution:
    """
    Compute the full set of descriptive statistics.

    Parameters
    ----------
    data : array-like or DescriptiveDesign
        1D sample, at least one value.
    conf_level : float
        Confidence level for the attached mean interval. Default 0.95.

    Returns
    -------
    DescriptiveSolution
        count, mean, median, mode, variance, std, std_dev, skewness,
        kurtosis, min, max, range, q1, q3, iqr and a confidence interval
        for the mean.

    Raises
    ------
    EmptyDataError
        If the sample is empty.
    """
    design = _ensure_design(data)
    result = CPUDescriptiveBackend().solve(design, conf_level=conf_level)
    return DescriptiveSolution(_result=result, _design=design)


def mean(data: ArrayLike | DescriptiveDesign) -> float:
    """Arithmetic mean."""
    return _ensure_design(data).mean


def median(data: ArrayLike | DescriptiveDesign) -> float:
    """Median; the average of the two middle values when n is even."""
    return compute_median(_ensure_design(data))


def mode(data: ArrayLike | DescriptiveDesign) -> tuple[float, ...]:
    """
    All values tied at the highest frequency.

    Returns
    -------
    tuple of float
        The modal values in ascending order. Every value is returned when
        all frequencies are equal.
    """
    return compute_mode(_ensure_design(data))


def variance(data: ArrayLike | DescriptiveDesign) -> float:
    """Population variance, sum((x - mean)^2) / n."""
    return _ensure_design(data).variance


def std(data: ArrayLike | DescriptiveDesign) -> float:
    """Population standard deviation, sqrt(variance(data))."""
    return compute_std(_ensure_design(data))


def std_dev(data: ArrayLike | DescriptiveDesign) -> float:
    """
    Sample standard deviation, dividing by n - 1.

    Not the same as std(), which divides by n. Requires n >= 2.

    Raises
    ------
    ValidationError
        If fewer than two observations are given.
    """
    return compute_sample_std(_ensure_design(data).require(2))


def skewness(data: ArrayLike | DescriptiveDesign) -> float:
    """Third standardized moment (divide by n); 0 for a constant sample."""
    return compute_skewness(_ensure_design(data))


def kurtosis(data: ArrayLike | DescriptiveDesign) -> float:
    """Excess kurtosis: fourth standardized moment (divide by n) minus 3."""
    return compute_kurtosis(_ensure_design(data))


def quartiles(data: ArrayLike | DescriptiveDesign) -> Quartiles:
    """
    Nearest-rank quartiles.

    q1 = sorted[floor(0.25 n)], q3 = sorted[floor(0.75 n)], no interpolation.
    """
    return compute_quartiles(_ensure_design(data))


def histogram(
    data: ArrayLike | DescriptiveDesign,
    n_bins: int | None = None,
) -> tuple[HistogramBin, ...]:
    """
    Equal-width histogram.

    Parameters
    ----------
    data : array-like or DescriptiveDesign
    n_bins : int or None
        Number of bins. Default ceil(sqrt(n)).

    Returns
    -------
    tuple of HistogramBin
        start, end, count and an "a.aa-b.bb" label per bin. The last bin
        includes the maximum so counts sum to n.
    """
    design = _ensure_design(data)
    if n_bins is None:
        n_bins = math.ceil(math.sqrt(design.n))
    if int(n_bins) != n_bins or n_bins < 1:
        raise InvalidParameterError(
            f"n_bins must be a positive integer, got {n_bins!r}",
            name="n_bins", value=n_bins,
        )
    return compute_histogram(design, int(n_bins))
