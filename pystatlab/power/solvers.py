"""
Power and sample size for one-sample location tests.

Power uses the normal model for the test statistic under the
alternative:

    two-tailed:   Phi(-c + |d|/SE) + Phi(-c - |d|/SE)
    right-tailed: Phi(-c + d/SE)
    left-tailed:  Phi(-c - d/SE)

with d = mu1 - mu0 and SE = sigma / sqrt(n). The t variant only swaps
in the t critical value; it does not evaluate the noncentral t
distribution.
"""

from __future__ import annotations

import math
from enum import Enum

from pystatlab.core.exceptions import InvalidParameterError
from pystatlab.core.tails import TailType, resolve_tail
from pystatlab.core.validation import (
    check_choice,
    check_finite_scalar,
    check_open_unit,
    check_positive,
)
from pystatlab.power._curve import PowerCurve
from pystatlab.special import normal_cdf
from pystatlab.special.critical import normal_quantile, t_critical_value

#: Default half-width of a power curve, in units of sigma
CURVE_HALF_WIDTH_SIGMAS = 3.0
#: Default power curve step, in units of sigma
CURVE_STEP_SIGMAS = 0.1


class PowerTest(str, Enum):
    Z = "z"
    T = "t"


def _z_alpha(alpha: float, tail: TailType) -> float:
    q = 1.0 - alpha / 2.0 if tail is TailType.TWO else 1.0 - alpha
    return normal_quantile(q)


def _check_n(n: float, minimum: int) -> float:
    n = check_finite_scalar(n, "n")
    if n < minimum:
        raise InvalidParameterError(
            f"n must be at least {minimum}, got {n}", name="n", value=n,
        )
    return n


def _power(delta: float, se: float, crit: float, tail: TailType) -> float:
    shift = delta / se
    if tail is TailType.TWO:
        shift = abs(shift)
        power = normal_cdf(-crit + shift) + normal_cdf(-crit - shift)
    elif tail is TailType.RIGHT:
        power = normal_cdf(-crit + shift)
    else:
        power = normal_cdf(-crit - shift)
    return min(max(power, 0.0), 1.0)


def z_test_power(
    mu1: float,
    mu0: float,
    sigma: float,
    n: float,
    *,
    alpha: float = 0.05,
    tail: TailType | str = TailType.TWO,
) -> float:
    """
    Power of the one-sample z-test against the true mean mu1.

    Parameters
    ----------
    mu1 : float
        True mean under the alternative.
    mu0 : float
        Hypothesized mean.
    sigma : float
        Population standard deviation, > 0.
    n : float
        Sample size, >= 1.
    alpha : float
        Significance level in (0, 1).
    tail : TailType or str

    Returns
    -------
    float
        Power in [0, 1]. Equals alpha (up to the quantile approximation)
        when mu1 == mu0.
    """
    tail = resolve_tail(tail)
    alpha = check_open_unit(alpha, "alpha")
    sigma = check_positive(sigma, "sigma")
    n = _check_n(n, 1)
    delta = check_finite_scalar(mu1, "mu1") - check_finite_scalar(mu0, "mu0")
    return _power(delta, sigma / math.sqrt(n), _z_alpha(alpha, tail), tail)


def t_test_power(
    mu1: float,
    mu0: float,
    sigma: float,
    n: float,
    *,
    alpha: float = 0.05,
    tail: TailType | str = TailType.TWO,
) -> float:
    """
    Approximate power of the one-sample t-test.

    Same normal model as z_test_power, but with the t critical value at
    df = n - 1. This is a simplification: the exact power needs the
    noncentral t distribution.

    Raises
    ------
    InvalidParameterError
        If n < 2, sigma <= 0 or alpha is outside (0, 1).
    """
    tail = resolve_tail(tail)
    alpha = check_open_unit(alpha, "alpha")
    sigma = check_positive(sigma, "sigma")
    n = _check_n(n, 2)
    delta = check_finite_scalar(mu1, "mu1") - check_finite_scalar(mu0, "mu0")
    crit = t_critical_value(n - 1, 1.0 - alpha, tail)
    return _power(delta, sigma / math.sqrt(n), crit, tail)


def sample_size_for_power(
    mu1: float,
    mu0: float,
    sigma: float,
    *,
    alpha: float = 0.05,
    beta: float = 0.2,
    tail: TailType | str = TailType.TWO,
) -> int:
    """
    Smallest n giving the z-test power 1 - beta against mu1.

    n = ((z_alpha + z_beta) * sigma / (mu1 - mu0))^2, rounded up, with
    z_alpha taken at alpha/2 for a two-tailed test.

    If z_test_power at that n still falls short of 1 - beta (the
    quantiles are approximate), n is raised to the first size that
    reaches it. A one-sided test pointed away from mu1 keeps the closed
    form, since no n gives it power.

    Raises
    ------
    InvalidParameterError
        If mu1 == mu0, sigma <= 0, or alpha/beta are outside (0, 1).
    """
    tail = resolve_tail(tail)
    alpha = check_open_unit(alpha, "alpha")
    beta = check_open_unit(beta, "beta")
    sigma = check_positive(sigma, "sigma")
    delta = check_finite_scalar(mu1, "mu1") - check_finite_scalar(mu0, "mu0")
    if delta == 0.0:
        raise InvalidParameterError(
            "mu1 must differ from mu0 to size a test for power",
            name="mu1", value=mu1,
        )

    z_a = _z_alpha(alpha, tail)
    z_b = normal_quantile(1.0 - beta)
    n = max(1, math.ceil(((z_a + z_b) * sigma / delta) ** 2))

    # a one-sided test against the wrong direction never gains power
    if (tail is TailType.RIGHT and delta < 0) or (tail is TailType.LEFT and delta > 0):
        return n

    # the closed form uses approximate quantiles; move up to the first
    # n whose power actually reaches the target (power grows with n)
    def reaches(m: int) -> bool:
        return _power(delta, sigma / math.sqrt(m), z_a, tail) >= 1.0 - beta

    if reaches(n):
        return n
    lo, step = n, 1
    while not reaches(n + step):
        lo = n + step
        step *= 2
    hi = n + step
    while hi - lo > 1:
        mid = (lo + hi) // 2
        if reaches(mid):
            hi = mid
        else:
            lo = mid
    return hi


def power_curve(
    mu0: float,
    sigma: float,
    n: float,
    *,
    alpha: float = 0.05,
    tail: TailType | str = TailType.TWO,
    test: PowerTest | str = PowerTest.Z,
    start: float | None = None,
    end: float | None = None,
    step: float | None = None,
) -> PowerCurve:
    """
    Power as a function of the true mean.

    Parameters
    ----------
    mu0, sigma, n, alpha, tail
        As for z_test_power.
    test : {'z', 't'}
        Which power function to evaluate.
    start, end : float, optional
        Range of true means. Default mu0 -/+ 3 sigma.
    step : float, optional
        Grid spacing, > 0. Default sigma / 10.

    Returns
    -------
    PowerCurve
        Restartable iterable of PowerPoint(mu, power); 61 points with
        the defaults.
    """
    tail = resolve_tail(tail)
    test = check_choice(PowerTest, test, "test")
    mu0 = check_finite_scalar(mu0, "mu0")
    sigma = check_positive(sigma, "sigma")

    start = mu0 - CURVE_HALF_WIDTH_SIGMAS * sigma if start is None else check_finite_scalar(start, "start")
    end = mu0 + CURVE_HALF_WIDTH_SIGMAS * sigma if end is None else check_finite_scalar(end, "end")
    step = CURVE_STEP_SIGMAS * sigma if step is None else check_positive(step, "step")
    if end < start:
        raise InvalidParameterError(
            f"end ({end}) must not be less than start ({start})",
            name="end", value=end,
        )

    power_fn = z_test_power if test is PowerTest.Z else t_test_power
    # validate once up front so iteration cannot fail halfway
    power_fn(mu0, mu0, sigma, n, alpha=alpha, tail=tail)

    def _at(mu: float) -> float:
        return power_fn(mu, mu0, sigma, n, alpha=alpha, tail=tail)

    return PowerCurve(start=start, end=end, step=step, _power=_at)
