"""
Descriptive statistics module.

Public API:
    describe(data)   - all statistics at once
    mean, median, mode, variance, std, std_dev, skewness, kurtosis,
    quartiles, histogram

variance() and std() are population forms (divide by n); std_dev() is
the sample form (divide by n - 1).
"""

from pystatlab.descriptive.solvers import (
    describe,
    mean,
    median,
    mode,
    variance,
    std,
    std_dev,
    skewness,
    kurtosis,
    quartiles,
    histogram,
)
from pystatlab.descriptive.design import DescriptiveDesign
from pystatlab.descriptive.solution import DescriptiveParams, DescriptiveSolution
from pystatlab.descriptive._moments import Quartiles, HistogramBin

__all__ = [
    "describe",
    "mean",
    "median",
    "mode",
    "variance",
    "std",
    "std_dev",
    "skewness",
    "kurtosis",
    "quartiles",
    "histogram",
    "DescriptiveDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
    "Quartiles",
    "HistogramBin",
]
