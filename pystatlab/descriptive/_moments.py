"""
Moment and order statistics over a DescriptiveDesign.

Population (divide-by-n) forms throughout, except sample_std which
divides by n - 1. Skewness and kurtosis are not bias-corrected.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from pystatlab.descriptive.design import DescriptiveDesign


@dataclass(frozen=True)
class Quartiles:
    """Nearest-rank quartiles and interquartile range."""
    q1: float
    q3: float
    iqr: float


@dataclass(frozen=True)
class HistogramBin:
    """One equal-width histogram bin, [start, end) except the last."""
    start: float
    end: float
    count: int
    label: str


def compute_median(design: DescriptiveDesign) -> float:
    s = design.sorted
    n = design.n
    mid = n // 2
    if n % 2 == 0:
        return float((s[mid - 1] + s[mid]) / 2.0)
    return float(s[mid])


def compute_mode(design: DescriptiveDesign) -> tuple[float, ...]:
    """All values sharing the highest frequency, ascending."""
    values, counts = np.unique(design.data, return_counts=True)
    top = counts.max()
    return tuple(float(v) for v in values[counts == top])


def compute_std(design: DescriptiveDesign) -> float:
    return math.sqrt(design.variance)


def compute_sample_std(design: DescriptiveDesign) -> float:
    """Sample standard deviation (n - 1). Caller guarantees n >= 2."""
    n = design.n
    return math.sqrt(design.variance * n / (n - 1))


def _standardized_moment(design: DescriptiveDesign, order: int) -> float:
    std = compute_std(design)
    if std == 0.0:
        return 0.0
    dev = design.data - design.mean
    return float(np.mean(dev ** order)) / std ** order


def compute_skewness(design: DescriptiveDesign) -> float:
    return _standardized_moment(design, 3)


def compute_kurtosis(design: DescriptiveDesign) -> float:
    """Excess kurtosis; 0 for a constant sample."""
    if compute_std(design) == 0.0:
        return 0.0
    return _standardized_moment(design, 4) - 3.0


def compute_quartiles(design: DescriptiveDesign) -> Quartiles:
    s = design.sorted
    n = design.n
    q1 = float(s[math.floor(n * 0.25)])
    q3 = float(s[math.floor(n * 0.75)])
    return Quartiles(q1=q1, q3=q3, iqr=q3 - q1)


def compute_histogram(design: DescriptiveDesign, n_bins: int) -> tuple[HistogramBin, ...]:
    """
    Equal-width bins over [min, max].

    Bins are half-open except the last, which also holds the maximum,
    so the counts always sum to n. A constant sample yields one bin.
    """
    lo, hi = design.min, design.max
    n = design.n
    if hi == lo:
        return (HistogramBin(lo, hi, n, _bin_label(lo, hi)),)

    width = (hi - lo) / n_bins
    idx = np.floor((design.data - lo) / width).astype(np.int64)
    idx = np.clip(idx, 0, n_bins - 1)
    counts = np.bincount(idx, minlength=n_bins)

    bins = []
    for i in range(n_bins):
        start = lo + i * width
        end = hi if i == n_bins - 1 else lo + (i + 1) * width
        bins.append(HistogramBin(start, end, int(counts[i]), _bin_label(start, end)))
    return tuple(bins)


def _bin_label(start: float, end: float) -> str:
    return f"{start:.2f}-{end:.2f}"
