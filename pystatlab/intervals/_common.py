"""
Shared types for confidence intervals.

CIParams is the immutable payload every interval backend returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pystatlab.core.tails import TailType


class IntervalType(str, Enum):
    MEAN = "mean"
    TWO_SAMPLE = "two_sample"
    PROPORTION = "proportion"
    TWO_PROPORTION = "two_proportion"


class TwoSampleMethod(str, Enum):
    """Standard error and df for a difference of two means."""
    POOLED = "pooled"
    WELCH = "welch"
    PAIRED = "paired"


class ProportionMethod(str, Enum):
    WALD = "wald"
    WILSON = "wilson"


class TwoProportionMethod(str, Enum):
    WALD = "wald"
    CONTINUITY = "continuity"


# Method labels for single-mean intervals
METHOD_Z_KNOWN = "Z-distribution (known variance)"
METHOD_T = "t distribution (normal, unknown variance)"
METHOD_Z_LARGE_SAMPLE = "Z-distribution (non-normal, large sample, unknown variance)"

#: Sample size above which a non-normal mean interval uses z instead of t
LARGE_SAMPLE_N = 30


@dataclass(frozen=True)
class CIParams:
    """
    Parameter payload for a confidence interval.

    lower is -inf for left-tailed mean intervals and upper is +inf for
    right-tailed ones. Proportion intervals are clamped to their domain
    instead ([0, 1], or [-1, 1] for a difference).

    Attributes:
        lower, upper: Interval bounds
        estimate: Point estimate the interval is built around
        margin_of_error: critical_value * standard_error, or the clamped
            half-width for proportion intervals
        critical_value: z or t critical value actually used
        standard_error: Standard error of the estimate
        df: Degrees of freedom when a t critical value was used
        method: Human-readable method label
        conf_level: Confidence level
        tail: Tail type
        estimates: Named component estimates (e.g. both sample means)
    """
    lower: float
    upper: float
    estimate: float
    margin_of_error: float
    critical_value: float
    standard_error: float
    df: float | None
    method: str
    conf_level: float
    tail: TailType
    estimates: dict[str, float] | None = None
