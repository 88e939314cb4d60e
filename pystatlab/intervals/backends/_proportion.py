"""
Intervals for one proportion and for a difference of two proportions.

Both clamp their bounds to the parameter's domain: [0, 1] for a
proportion and [-1, 1] for a difference. A one-sided interval takes the
domain edge as its open side.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from pystatlab.core.tails import TailType
from pystatlab.intervals._common import (
    CIParams,
    ProportionMethod,
    TwoProportionMethod,
)
from pystatlab.special.critical import z_critical_value

if TYPE_CHECKING:
    from pystatlab.intervals.design import IntervalDesign


def _clamped_bounds(
    center: float,
    half_width: float,
    tail: TailType,
    lo: float,
    hi: float,
) -> tuple[float, float, float]:
    """Return (lower, upper, margin_of_error) clamped to [lo, hi]."""
    lower = max(lo, center - half_width)
    upper = min(hi, center + half_width)
    if tail is TailType.LEFT:
        return lo, upper, upper - center
    if tail is TailType.RIGHT:
        return lower, hi, center - lower
    return lower, upper, (upper - lower) / 2.0


def proportion_interval(design: IntervalDesign) -> tuple[CIParams, list[str]]:
    """Wald or Wilson score interval for successes / trials."""
    x = design.successes
    n = design.trials
    tail = design.tail
    conf_level = design.conf_level
    warnings_list: list[str] = []

    p_hat = x / n
    z = z_critical_value(conf_level, tail)

    if design.method is ProportionMethod.WILSON:
        z2 = z * z
        denom = n + z2
        center = (x + z2 / 2.0) / denom
        half = z * math.sqrt(n * p_hat * (1.0 - p_hat) + z2 / 4.0) / denom
        se = math.sqrt(p_hat * (1.0 - p_hat) / n)
        label = "Wilson score interval"
    else:
        center = p_hat
        se = math.sqrt(p_hat * (1.0 - p_hat) / n)
        half = z * se
        label = "Wald interval"
        if x == 0 or x == n:
            warnings_list.append(
                "Wald interval has zero width when successes is 0 or trials"
            )

    lower, upper, margin = _clamped_bounds(center, half, tail, 0.0, 1.0)

    return CIParams(
        lower=lower,
        upper=upper,
        estimate=p_hat,
        margin_of_error=margin,
        critical_value=z,
        standard_error=se,
        df=None,
        method=label,
        conf_level=conf_level,
        tail=tail,
        estimates={"proportion": p_hat},
    ), warnings_list


def two_proportion_interval(design: IntervalDesign) -> tuple[CIParams, list[str]]:
    """Wald or continuity-adjusted interval for p1 - p2."""
    x1, n1 = design.successes, design.trials
    x2, n2 = design.successes2, design.trials2
    tail = design.tail
    conf_level = design.conf_level

    if design.method is TwoProportionMethod.CONTINUITY:
        p1 = (x1 + 0.5) / n1
        p2 = (x2 + 0.5) / n2
        label = "Continuity-corrected two-proportion interval"
    else:
        p1 = x1 / n1
        p2 = x2 / n2
        label = "Wald two-proportion interval"

    diff = p1 - p2
    # (x + 0.5) / n can exceed 1 when x == n; keep the variance non-negative
    var = max(p1 * (1.0 - p1), 0.0) / n1 + max(p2 * (1.0 - p2), 0.0) / n2
    se = math.sqrt(var)
    z = z_critical_value(conf_level, tail)

    lower, upper, margin = _clamped_bounds(diff, z * se, tail, -1.0, 1.0)

    return CIParams(
        lower=lower,
        upper=upper,
        estimate=diff,
        margin_of_error=margin,
        critical_value=z,
        standard_error=se,
        df=None,
        method=label,
        conf_level=conf_level,
        tail=tail,
        estimates={
            "proportion1": p1,
            "proportion2": p2,
            "proportion_diff": diff,
        },
    ), []
