"""
One-sample z-test with known population standard deviation.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from pystatlab.core.tails import TailType
from pystatlab.hypothesis._common import HTestParams
from pystatlab.hypothesis._pvalues import rejects, z_test_p_value
from pystatlab.special.critical import z_critical_value

if TYPE_CHECKING:
    from pystatlab.hypothesis.design import HypothesisDesign


def z_one_sample(design: HypothesisDesign) -> tuple[HTestParams, list[str]]:
    """One-sample z-test: H0: mean(x) = mu0, sigma known."""
    x = design.x
    mu0 = design.mu0
    alpha = design.alpha
    tail = design.tail
    warnings_list: list[str] = []

    n = x.n
    mean_x = x.mean
    se = design.sigma / math.sqrt(n)
    z = (mean_x - mu0) / se

    crit = z_critical_value(1.0 - alpha, tail)
    p_value = z_test_p_value(z, tail)

    # companion interval is always two-sided
    half = z_critical_value(1.0 - alpha, TailType.TWO) * se
    conf_int = (mean_x - half, mean_x + half)

    return HTestParams(
        statistic=z,
        statistic_name="z",
        critical_value=crit,
        p_value=p_value,
        reject=rejects(z, crit, tail),
        alpha=alpha,
        conf_int=conf_int,
        estimate={"mean": mean_x},
        null_value={"mean": mu0},
        parameter=None,
        standard_error=se,
        tail=tail,
        method="One Sample z-test",
        data_name=design.data_name,
        extras={"sigma": design.sigma, "n": n},
    ), warnings_list
