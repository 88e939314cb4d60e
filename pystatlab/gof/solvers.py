"""
Solver dispatch for goodness-of-fit tests.

Provides ks_test(), chisq_test(), anderson_darling_test(),
jarque_bera_test(), the gof_test() driver and qq_points().
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystatlab.core.validation import check_choice
from pystatlab.descriptive.design import DescriptiveDesign
from pystatlab.distributions.families import Distribution, resolve_distribution
from pystatlab.gof._common import DEFAULT_ALPHA, GoFTestType
from pystatlab.gof.design import GoFDesign, ParametersArg, require_family, resolve_parameters
from pystatlab.gof.solution import GoFSolution
from pystatlab.gof.backends.cpu import CPUGoFBackend
from pystatlab.special import normal_inv

#: Blom plotting-position offset, p_i = (i - a) / (n + 1 - 2a)
BLOM_OFFSET = 0.375


def _run(design: GoFDesign) -> GoFSolution:
    result = CPUGoFBackend().solve(design)
    return GoFSolution(_result=result, _design=design)


def ks_test(
    data: ArrayLike | DescriptiveDesign,
    distribution: Distribution | str = Distribution.NORMAL,
    parameters: ParametersArg = None,
    *,
    alpha: float = DEFAULT_ALPHA,
) -> GoFSolution:
    """
    One-sample Kolmogorov-Smirnov test.

    Parameters
    ----------
    data : array-like or DescriptiveDesign
        Sample, at least 5 observations.
    distribution : Distribution or str
        normal, uniform, exponential, poisson, gamma or binomial.
    parameters : DistributionParams, mapping or None
        Hypothesized parameters. None estimates them from the data
        (MLE; binomial uses n = max(x), p = mean / n).
    alpha : float
        Significance level, reported alongside the decision.

    Returns
    -------
    GoFSolution
        reject is statistic > 1.36 / sqrt(n).

    Raises
    ------
    UnsupportedDistributionError
        For beta or an unknown family.
    InvalidParameterError
        If the parameters are outside the family's domain.
    """
    return _run(GoFDesign.for_ks(data, distribution, parameters, alpha=alpha))


def chisq_test(
    data: ArrayLike | DescriptiveDesign,
    distribution: Distribution | str = Distribution.NORMAL,
    parameters: ParametersArg = None,
    *,
    alpha: float = DEFAULT_ALPHA,
    n_bins: int | None = None,
) -> GoFSolution:
    """
    Chi-square goodness-of-fit test on equal-width bins.

    Parameters
    ----------
    data, distribution, parameters, alpha
        As for ks_test.
    n_bins : int, optional
        Initial bin count. Default ceil(sqrt(n)).

    Returns
    -------
    GoFSolution
        df = bins - 1 - k after merging, with k = 2 for normal and gamma
        and 1 otherwise. extras holds the merged bins and their
        observed/expected counts. When df <= 0 the result carries a
        warning, p_value = 1 and no critical value.
    """
    return _run(GoFDesign.for_chi_square(
        data, distribution, parameters, alpha=alpha, n_bins=n_bins,
    ))


def anderson_darling_test(
    data: ArrayLike | DescriptiveDesign,
    distribution: Distribution | str = Distribution.NORMAL,
    parameters: ParametersArg = None,
    *,
    alpha: float = DEFAULT_ALPHA,
) -> GoFSolution:
    """
    Anderson-Darling test for normality.

    The reported statistic is the small-sample adjusted A*; the raw A^2
    is in extras['a2']. reject is p_value < alpha. A critical value is
    reported only for alpha in {0.10, 0.05, 0.025, 0.01}.

    Raises
    ------
    UnsupportedDistributionError
        For any family other than normal.
    """
    return _run(GoFDesign.for_anderson_darling(
        data, distribution, parameters, alpha=alpha,
    ))


def jarque_bera_test(
    data: ArrayLike | DescriptiveDesign,
    *,
    alpha: float = DEFAULT_ALPHA,
) -> GoFSolution:
    """
    Jarque-Bera test for normality.

    JB = (n/6)(S^2 + K^2/4) with S the skewness and K the excess
    kurtosis; p-value from chi-square with 2 df. reject is
    p_value < alpha.
    """
    return _run(GoFDesign.for_jarque_bera(data, alpha=alpha))


def gof_test(
    data: ArrayLike | DescriptiveDesign,
    test_type: GoFTestType | str,
    distribution: Distribution | str = Distribution.NORMAL,
    *,
    alpha: float = DEFAULT_ALPHA,
    parameters: ParametersArg = None,
    n_bins: int | None = None,
) -> GoFSolution:
    """
    Run one goodness-of-fit test by name.

    Parameters
    ----------
    data : array-like or DescriptiveDesign
        Sample, at least 5 observations.
    test_type : GoFTestType or str
        'kolmogorov-smirnov' ('ks'), 'chi-square' ('chisq'),
        'anderson-darling' ('ad') or 'jarque-bera' ('jb').
    distribution : Distribution or str
        Hypothesized family. Jarque-Bera accepts only normal.
    alpha : float
        Significance level.
    parameters : DistributionParams, mapping or None
        Ignored by Jarque-Bera.
    n_bins : int, optional
        Chi-square only.

    Returns
    -------
    GoFSolution
        With sample_size, significance_level and reject set. KS and
        chi-square decide by statistic > critical value; Anderson-Darling
        and Jarque-Bera by p_value < alpha.
    """
    test_type = check_choice(GoFTestType, test_type, "test_type")
    if test_type is GoFTestType.KS:
        design = GoFDesign.for_ks(data, distribution, parameters, alpha=alpha)
    elif test_type is GoFTestType.CHI_SQUARE:
        design = GoFDesign.for_chi_square(
            data, distribution, parameters, alpha=alpha, n_bins=n_bins,
        )
    elif test_type is GoFTestType.ANDERSON_DARLING:
        design = GoFDesign.for_anderson_darling(data, distribution, parameters, alpha=alpha)
    else:
        design = GoFDesign.for_jarque_bera(data, distribution, alpha=alpha)
    return _run(design)


def qq_points(
    data: ArrayLike | DescriptiveDesign,
    distribution: Distribution | str = Distribution.NORMAL,
    parameters: ParametersArg = None,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Normal Q-Q plot coordinates.

    Theoretical quantiles are mean + std * normal_inv(p_i) at the Blom
    positions p_i = (i - 0.375) / (n + 0.25).

    Returns
    -------
    (theoretical, sample) : tuple of ndarray
        sample is the sorted data.

    Raises
    ------
    UnsupportedDistributionError
        For any family other than normal.
    """
    x = data if isinstance(data, DescriptiveDesign) else DescriptiveDesign.from_array(data, name="data")
    x.require(2)
    dist = resolve_distribution(distribution)
    require_family(dist, (Distribution.NORMAL,), "Q-Q plot")
    params = resolve_parameters(x, dist, parameters)

    n = x.n
    i = np.arange(1, n + 1)
    positions = (i - BLOM_OFFSET) / (n + 1.0 - 2.0 * BLOM_OFFSET)
    theoretical = params.mean + params.std * np.asarray(normal_inv(positions))
    return theoretical, np.array(x.sorted)
