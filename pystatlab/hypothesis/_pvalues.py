"""
p-values and rejection rules shared by the z and t tests.
"""

from __future__ import annotations

from pystatlab.core.tails import TailType, resolve_tail
from pystatlab.special import normal_cdf, t_cdf


def z_test_p_value(z: float, tail: TailType | str) -> float:
    """p-value of a standard normal statistic."""
    tail = resolve_tail(tail)
    if tail is TailType.LEFT:
        return normal_cdf(z)
    if tail is TailType.RIGHT:
        return 1.0 - normal_cdf(z)
    return 2.0 * (1.0 - normal_cdf(abs(z)))


def t_test_p_value(t: float, df: float, tail: TailType | str) -> float:
    """
    p-value of a t statistic under the t_cdf approximation.

    Two-tailed: 2 * min(F, 1 - F); left-tailed: F; right-tailed: 1 - F,
    with F = t_cdf(t, df).
    """
    tail = resolve_tail(tail)
    f = t_cdf(t, df)
    if tail is TailType.LEFT:
        return f
    if tail is TailType.RIGHT:
        return 1.0 - f
    return 2.0 * min(f, 1.0 - f)


def rejects(statistic: float, critical_value: float, tail: TailType) -> bool:
    """Strict comparison of the statistic with the positive critical value."""
    if tail is TailType.LEFT:
        return statistic < -critical_value
    if tail is TailType.RIGHT:
        return statistic > critical_value
    return abs(statistic) > critical_value
