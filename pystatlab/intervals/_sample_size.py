"""
Sample size needed to reach a target margin of error.
"""

from __future__ import annotations

import math

from pystatlab.core.exceptions import ConvergenceError, InvalidParameterError
from pystatlab.core.validation import check_open_unit, check_positive, check_probability
from pystatlab.special.critical import t_critical_value, z_critical_value

MAX_ITERATIONS = 1000
#: Successive estimates closer than this are considered converged
CONVERGENCE_TOL = 0.5


def sample_size_for_mean(
    conf_level: float,
    margin_of_error: float,
    *,
    population_std: float | None = None,
    estimated_std: float | None = None,
    use_t: bool = False,
) -> int:
    """
    Smallest n whose two-sided mean interval has the requested half-width.

    Parameters
    ----------
    conf_level : float
        Confidence level in (0, 1).
    margin_of_error : float
        Target half-width E, > 0.
    population_std : float, optional
        Known population standard deviation.
    estimated_std : float, optional
        Pilot estimate, used when population_std is not given.
    use_t : bool
        Refine n using the t critical value with df = n - 1. Iterates
        until successive estimates differ by at most 0.5, or settles on
        the larger value when n alternates across a t table row. Ignored
        when population_std is given.

    Returns
    -------
    int
        ceil(n).

    Raises
    ------
    InvalidParameterError
        If margin_of_error <= 0, or neither standard deviation is given.
    ConvergenceError
        If the t refinement has not settled after 1000 iterations.
    """
    conf_level = check_open_unit(conf_level, "conf_level")
    e = check_positive(margin_of_error, "margin_of_error")
    if population_std is not None:
        sigma = check_positive(population_std, "population_std")
    elif estimated_std is not None:
        sigma = check_positive(estimated_std, "estimated_std")
    else:
        raise InvalidParameterError(
            "one of population_std or estimated_std is required",
            name="population_std", value=None,
        )

    z = z_critical_value(conf_level)
    n = (z * sigma / e) ** 2
    # a known sigma keeps the z answer
    if not use_t or population_std is not None:
        return max(1, math.ceil(n))

    previous = math.nan
    change = math.inf
    for _ in range(MAX_ITERATIONS):
        df = max(1, math.floor(n) - 1)
        t = t_critical_value(df, conf_level)
        n_new = (t * sigma / e) ** 2
        change = abs(n_new - n)
        if change <= CONVERGENCE_TOL:
            return max(1, math.ceil(n_new))
        # n straddles a t table row boundary and alternates between two
        # values; the larger one meets the margin under either row
        if abs(n_new - previous) <= CONVERGENCE_TOL:
            return max(1, math.ceil(max(n, n_new)))
        previous, n = n, n_new

    raise ConvergenceError(
        "sample_size_for_mean: t refinement did not converge",
        iterations=MAX_ITERATIONS,
        final_change=change,
        reason='max_iterations',
        threshold=CONVERGENCE_TOL,
    )


def sample_size_for_proportion(
    conf_level: float,
    margin_of_error: float,
    *,
    estimated_proportion: float | None = None,
) -> int:
    """
    Smallest n whose Wald proportion interval has the requested half-width.

    n = z^2 p (1 - p) / E^2, rounded up. Without an estimate the
    conservative p = 0.5 is used.

    Raises
    ------
    InvalidParameterError
        If margin_of_error <= 0 or estimated_proportion is outside [0, 1].
    """
    conf_level = check_open_unit(conf_level, "conf_level")
    e = check_positive(margin_of_error, "margin_of_error")
    if estimated_proportion is None:
        p = 0.5
    else:
        p = check_probability(estimated_proportion, "estimated_proportion")

    z = z_critical_value(conf_level)
    return max(1, math.ceil(z * z * p * (1.0 - p) / (e * e)))
