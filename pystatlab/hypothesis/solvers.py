"""
Solver dispatch for hypothesis tests.

Provides z_test() and t_test(). Also re-exports t_test_p_value() for
callers that already have a t statistic.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pystatlab.core.tails import TailType
from pystatlab.descriptive.design import DescriptiveDesign
from pystatlab.hypothesis._common import DEFAULT_ALPHA
from pystatlab.hypothesis.design import HypothesisDesign
from pystatlab.hypothesis.solution import HTestSolution
from pystatlab.hypothesis.backends.cpu import CPUHypothesisBackend
from pystatlab.hypothesis._pvalues import t_test_p_value  # re-export


def z_test(
    data: ArrayLike | DescriptiveDesign | HypothesisDesign,
    mu0: float = 0.0,
    sigma: float | None = None,
    *,
    alpha: float = DEFAULT_ALPHA,
    tail: TailType | str = TailType.TWO,
) -> HTestSolution:
    """
    One-sample z-test with known population standard deviation.

    Parameters
    ----------
    data : array-like, DescriptiveDesign or HypothesisDesign
        Sample data.
    mu0 : float
        Hypothesized mean. Default 0.
    sigma : float
        Known population standard deviation, > 0.
    alpha : float
        Significance level in (0, 1). Default 0.05.
    tail : TailType or str
        'two-tailed' (default), 'left-tailed' or 'right-tailed'.

    Returns
    -------
    HTestSolution
        statistic, critical_value, p_value, reject and a two-sided
        (1 - alpha) confidence interval for the mean. H0 is rejected when
        the statistic lies strictly beyond the critical value.

    Raises
    ------
    InvalidParameterError
        If sigma is missing or not positive, or alpha is outside (0, 1).
    """
    if isinstance(data, HypothesisDesign):
        design = data
    else:
        design = HypothesisDesign.for_z_test(
            data, mu0, sigma, alpha=alpha, tail=tail,
        )
    result = CPUHypothesisBackend().solve(design)
    return HTestSolution(_result=result, _design=design)


def t_test(
    data: ArrayLike | DescriptiveDesign | HypothesisDesign,
    mu0: float = 0.0,
    *,
    alpha: float = DEFAULT_ALPHA,
    tail: TailType | str = TailType.TWO,
) -> HTestSolution:
    """
    One-sample Student's t-test.

    Parameters
    ----------
    data : array-like, DescriptiveDesign or HypothesisDesign
        Sample data, at least two observations.
    mu0 : float
        Hypothesized mean. Default 0.
    alpha : float
        Significance level in (0, 1). Default 0.05.
    tail : TailType or str

    Returns
    -------
    HTestSolution
        df = n - 1. The p-value uses the t_cdf approximation; the
        critical value comes from the t table.

    Raises
    ------
    NumericalError
        If the data are constant (zero standard error).
    """
    if isinstance(data, HypothesisDesign):
        design = data
    else:
        design = HypothesisDesign.for_t_test(data, mu0, alpha=alpha, tail=tail)
    result = CPUHypothesisBackend().solve(design)
    return HTestSolution(_result=result, _design=design)
