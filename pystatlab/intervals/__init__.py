"""
Confidence interval module.

Public API:
    confidence_interval(data)                         - one mean (z or t)
    two_sample_confidence_interval(d1, d2)            - pooled / Welch / paired
    proportion_confidence_interval(x, n)              - Wald / Wilson
    two_proportion_confidence_interval(x1, n1, x2, n2) - Wald / continuity
    sample_size_for_mean(level, E, ...)               - n for a target margin
    sample_size_for_proportion(level, E, ...)
"""

from pystatlab.intervals.solvers import (
    confidence_interval,
    two_sample_confidence_interval,
    proportion_confidence_interval,
    two_proportion_confidence_interval,
    sample_size_for_mean,
    sample_size_for_proportion,
)
from pystatlab.intervals.design import IntervalDesign
from pystatlab.intervals._common import (
    CIParams,
    IntervalType,
    TwoSampleMethod,
    ProportionMethod,
    TwoProportionMethod,
)
from pystatlab.intervals.solution import CISolution

__all__ = [
    "confidence_interval",
    "two_sample_confidence_interval",
    "proportion_confidence_interval",
    "two_proportion_confidence_interval",
    "sample_size_for_mean",
    "sample_size_for_proportion",
    "IntervalDesign",
    "CIParams",
    "IntervalType",
    "TwoSampleMethod",
    "ProportionMethod",
    "TwoProportionMethod",
    "CISolution",
]
