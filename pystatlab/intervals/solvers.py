"""
Solver dispatch for confidence intervals.

Provides confidence_interval(), two_sample_confidence_interval(),
proportion_confidence_interval() and two_proportion_confidence_interval().

Also re-exports the margin-of-error sample size helpers.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pystatlab.core.tails import TailType
from pystatlab.descriptive.design import DescriptiveDesign
from pystatlab.intervals._common import (
    ProportionMethod,
    TwoProportionMethod,
    TwoSampleMethod,
)
from pystatlab.intervals.design import IntervalDesign
from pystatlab.intervals.solution import CISolution
from pystatlab.intervals.backends.cpu import CPUIntervalBackend
from pystatlab.intervals._sample_size import (  # re-export
    sample_size_for_mean,
    sample_size_for_proportion,
)


def _solve(design: IntervalDesign) -> CISolution:
    result = CPUIntervalBackend().solve(design)
    return CISolution(_result=result, _design=design)


def confidence_interval(
    data: ArrayLike | DescriptiveDesign | IntervalDesign,
    conf_level: float = 0.95,
    *,
    is_normal: bool = False,
    known_variance: bool = False,
    population_variance: float | None = None,
    tail: TailType | str = TailType.TWO,
) -> CISolution:
    """
    Confidence interval for a single mean.

    Parameters
    ----------
    data : array-like, DescriptiveDesign or IntervalDesign
        The sample.
    conf_level : float
        Confidence level in (0, 1). Default 0.95.
    is_normal : bool
        Treat the population as normal: always use t with n - 1 df.
    known_variance : bool
        Use z with the supplied population_variance.
    population_variance : float, optional
        Required when known_variance is True.
    tail : TailType or str
        'two-tailed' (default), 'left-tailed' -> (-inf, upper],
        'right-tailed' -> [lower, inf).

    Returns
    -------
    CISolution
        Without known variance, non-normal samples with n > 30 use the
        large-sample z approximation; the method label says so.
    """
    if isinstance(data, IntervalDesign):
        design = data
    else:
        design = IntervalDesign.for_mean(
            data, conf_level,
            is_normal=is_normal,
            known_variance=known_variance,
            population_variance=population_variance,
            tail=tail,
        )
    return _solve(design)


def two_sample_confidence_interval(
    data1: ArrayLike | DescriptiveDesign,
    data2: ArrayLike | DescriptiveDesign,
    conf_level: float = 0.95,
    *,
    method: TwoSampleMethod | str = TwoSampleMethod.WELCH,
    tail: TailType | str = TailType.TWO,
) -> CISolution:
    """
    Confidence interval for mean(data1) - mean(data2).

    Parameters
    ----------
    data1, data2 : array-like or DescriptiveDesign
        Samples of at least two observations each.
    conf_level : float
        Confidence level in (0, 1).
    method : {'welch', 'pooled', 'paired'}
        'pooled' assumes equal variances (df = n1 + n2 - 2), 'welch' uses
        the Welch-Satterthwaite df floored to an integer, 'paired' works
        on data1 - data2 (df = n - 1).
    tail : TailType or str

    Raises
    ------
    LengthMismatchError
        For method='paired' with samples of different length.
    """
    design = IntervalDesign.for_two_sample(
        data1, data2, conf_level, method=method, tail=tail,
    )
    return _solve(design)


def proportion_confidence_interval(
    successes: int,
    trials: int,
    conf_level: float = 0.95,
    *,
    method: ProportionMethod | str = ProportionMethod.WALD,
    tail: TailType | str = TailType.TWO,
) -> CISolution:
    """
    Confidence interval for a single proportion.

    Parameters
    ----------
    successes : int
        0 <= successes <= trials.
    trials : int
        > 0.
    conf_level : float
    method : {'wald', 'wilson'}
    tail : TailType or str

    Returns
    -------
    CISolution
        Bounds clamped to [0, 1].

    Raises
    ------
    InvalidParameterError
        If trials <= 0, successes is out of range or conf_level is
        outside (0, 1).
    """
    design = IntervalDesign.for_proportion(
        successes, trials, conf_level, method=method, tail=tail,
    )
    return _solve(design)


def two_proportion_confidence_interval(
    successes1: int,
    trials1: int,
    successes2: int,
    trials2: int,
    conf_level: float = 0.95,
    *,
    method: TwoProportionMethod | str = TwoProportionMethod.WALD,
    tail: TailType | str = TailType.TWO,
) -> CISolution:
    """
    Confidence interval for p1 - p2.

    method='continuity' replaces each proportion by (x + 0.5) / n.
    Bounds are clamped to [-1, 1].
    """
    design = IntervalDesign.for_two_proportion(
        successes1, trials1, successes2, trials2, conf_level,
        method=method, tail=tail,
    )
    return _solve(design)
