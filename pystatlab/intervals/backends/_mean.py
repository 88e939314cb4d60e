"""
Intervals for one mean and for a difference of two means.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from pystatlab.core.tails import TailType
from pystatlab.descriptive.design import DescriptiveDesign
from pystatlab.descriptive._moments import compute_sample_std
from pystatlab.intervals._common import (
    CIParams,
    LARGE_SAMPLE_N,
    METHOD_T,
    METHOD_Z_KNOWN,
    METHOD_Z_LARGE_SAMPLE,
    TwoSampleMethod,
)
from pystatlab.special.critical import t_critical_value, z_critical_value

if TYPE_CHECKING:
    from pystatlab.intervals.design import IntervalDesign


def tail_bounds(center: float, margin: float, tail: TailType) -> tuple[float, float]:
    """Bounds of center +/- margin with the open side set to infinity."""
    if tail is TailType.LEFT:
        return -math.inf, center + margin
    if tail is TailType.RIGHT:
        return center - margin, math.inf
    return center - margin, center + margin


def mean_interval(design: IntervalDesign) -> tuple[CIParams, list[str]]:
    """
    Interval for a single mean.

    Known variance uses z. Otherwise t with n - 1 df when the data are
    declared normal or n <= 30, and a large-sample z interval beyond that.
    """
    x = design.x
    n = x.n
    tail = design.tail
    conf_level = design.conf_level
    warnings_list: list[str] = []

    if design.known_variance:
        se = math.sqrt(design.population_variance / n)
        crit = z_critical_value(conf_level, tail)
        df = None
        method = METHOD_Z_KNOWN
    elif design.is_normal or n <= LARGE_SAMPLE_N:
        se = compute_sample_std(x) / math.sqrt(n)
        df = float(n - 1)
        crit = t_critical_value(df, conf_level, tail)
        method = METHOD_T
    else:
        se = compute_sample_std(x) / math.sqrt(n)
        crit = z_critical_value(conf_level, tail)
        df = None
        method = METHOD_Z_LARGE_SAMPLE
        warnings_list.append(
            f"n={n} > {LARGE_SAMPLE_N} and normality not assumed: "
            f"using the large-sample z approximation"
        )

    if se == 0.0:
        warnings_list.append("data are essentially constant")

    margin = crit * se
    lower, upper = tail_bounds(x.mean, margin, tail)

    return CIParams(
        lower=lower,
        upper=upper,
        estimate=x.mean,
        margin_of_error=margin,
        critical_value=crit,
        standard_error=se,
        df=df,
        method=method,
        conf_level=conf_level,
        tail=tail,
        estimates={"mean": x.mean},
    ), warnings_list


def _welch_df(v1: float, n1: int, v2: float, n2: int) -> float | None:
    a = v1 / n1
    b = v2 / n2
    denom = a * a / (n1 - 1) + b * b / (n2 - 1)
    if denom == 0.0:
        return None
    return float(max(1, math.floor((a + b) ** 2 / denom)))


def two_sample_interval(design: IntervalDesign) -> tuple[CIParams, list[str]]:
    """Interval for mean(data1) - mean(data2): pooled, Welch or paired."""
    x = design.x
    y = design.y
    method = design.method
    tail = design.tail
    conf_level = design.conf_level
    warnings_list: list[str] = []

    if method is TwoSampleMethod.PAIRED:
        diffs = DescriptiveDesign.from_array(x.data - y.data, name="differences")
        n = diffs.n
        estimate = diffs.mean
        se = compute_sample_std(diffs) / math.sqrt(n)
        df = float(n - 1)
        label = "Paired t interval"
    else:
        n1, n2 = x.n, y.n
        v1 = compute_sample_std(x) ** 2
        v2 = compute_sample_std(y) ** 2
        estimate = x.mean - y.mean
        if method is TwoSampleMethod.POOLED:
            pooled = ((n1 - 1) * v1 + (n2 - 1) * v2) / (n1 + n2 - 2)
            se = math.sqrt(pooled * (1.0 / n1 + 1.0 / n2))
            df = float(n1 + n2 - 2)
            label = "Pooled two-sample t interval"
        else:
            se = math.sqrt(v1 / n1 + v2 / n2)
            df = _welch_df(v1, n1, v2, n2)
            if df is None:
                df = float(n1 + n2 - 2)
                warnings_list.append(
                    "both samples are constant: Welch df undefined, using n1 + n2 - 2"
                )
            label = "Welch two-sample t interval"

    if se == 0.0:
        warnings_list.append("data are essentially constant")

    crit = t_critical_value(df, conf_level, tail)
    margin = crit * se
    lower, upper = tail_bounds(estimate, margin, tail)

    return CIParams(
        lower=lower,
        upper=upper,
        estimate=estimate,
        margin_of_error=margin,
        critical_value=crit,
        standard_error=se,
        df=df,
        method=label,
        conf_level=conf_level,
        tail=tail,
        estimates={
            "mean of data1": x.mean,
            "mean of data2": y.mean,
            "difference": estimate,
        },
    ), warnings_list
