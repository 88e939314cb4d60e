"""
Point estimation of distribution parameters.

mle() and mom() both work from the population mean and variance of the
sample. They differ only for the uniform family (MLE takes the sample
range; MoM matches the first two moments). The gamma MLE has no closed
form and uses the moment estimate as its surrogate.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable

from numpy.typing import ArrayLike

from pystatlab.core.exceptions import NumericalError, UnsupportedDistributionError
from pystatlab.core.validation import check_choice
from pystatlab.descriptive.design import DescriptiveDesign
from pystatlab.distributions.families import (
    BetaParams,
    Distribution,
    DistributionParams,
    ExponentialParams,
    GammaParams,
    NormalParams,
    PoissonParams,
    UniformParams,
    resolve_distribution,
)

#: Lower bound applied to the gamma shape estimate
MIN_GAMMA_SHAPE = 0.001


class EstimationMethod(str, Enum):
    MLE = "mle"
    MOM = "mom"


def _design(data: ArrayLike | DescriptiveDesign) -> DescriptiveDesign:
    if isinstance(data, DescriptiveDesign):
        return data
    return DescriptiveDesign.from_array(data)


def _nonzero(value: float, what: str, family: Distribution) -> None:
    if value == 0.0:
        raise NumericalError(
            f"Cannot estimate {family.value} parameters: {what} is zero"
        )


def _normal(d: DescriptiveDesign) -> NormalParams:
    return NormalParams(mean=d.mean, std=math.sqrt(d.variance))


def _uniform_range(d: DescriptiveDesign) -> UniformParams:
    return UniformParams(a=d.min, b=d.max)


def _uniform_moments(d: DescriptiveDesign) -> UniformParams:
    half_width = math.sqrt(12.0 * d.variance) / 2.0
    return UniformParams(a=d.mean - half_width, b=d.mean + half_width)


def _exponential(d: DescriptiveDesign) -> ExponentialParams:
    _nonzero(d.mean, "the sample mean", Distribution.EXPONENTIAL)
    return ExponentialParams(lam=1.0 / d.mean)


def _poisson(d: DescriptiveDesign) -> PoissonParams:
    return PoissonParams(lam=d.mean)


def _gamma(d: DescriptiveDesign) -> GammaParams:
    _nonzero(d.mean, "the sample mean", Distribution.GAMMA)
    _nonzero(d.variance, "the sample variance", Distribution.GAMMA)
    shape = max(d.mean ** 2 / d.variance, MIN_GAMMA_SHAPE)
    return GammaParams(shape=shape, scale=d.variance / d.mean)


def _beta(d: DescriptiveDesign) -> BetaParams:
    _nonzero(d.variance, "the sample variance", Distribution.BETA)
    m = d.mean
    s = m * (1.0 - m) / d.variance - 1.0
    return BetaParams(alpha=m * s, beta=(1.0 - m) * s)


_Estimator = Callable[[DescriptiveDesign], DistributionParams]

_MLE: dict[Distribution, _Estimator] = {
    Distribution.NORMAL: _normal,
    Distribution.UNIFORM: _uniform_range,
    Distribution.EXPONENTIAL: _exponential,
    Distribution.POISSON: _poisson,
    Distribution.GAMMA: _gamma,
    Distribution.BETA: _beta,
}

_MOM: dict[Distribution, _Estimator] = {
    **_MLE,
    Distribution.UNIFORM: _uniform_moments,
}


def _lookup(table: dict[Distribution, _Estimator], distribution, method: str) -> _Estimator:
    dist = resolve_distribution(distribution)
    try:
        return table[dist]
    except KeyError:
        supported = tuple(d.value for d in table)
        raise UnsupportedDistributionError(
            f"{method} is not available for the {dist.value} distribution. "
            f"Supported: {', '.join(supported)}",
            distribution=dist.value,
            supported=supported,
        ) from None


def mle(
    data: ArrayLike | DescriptiveDesign,
    distribution: Distribution | str = Distribution.NORMAL,
) -> DistributionParams:
    """
    Maximum likelihood estimates for a distribution family.

    Parameters
    ----------
    data : array-like or DescriptiveDesign
        Sample data.
    distribution : Distribution or str
        One of normal, uniform, exponential, poisson, gamma, beta.

    Returns
    -------
    DistributionParams
        The family's parameter dataclass, e.g. NormalParams(mean, std).
        std is the population (divide by n) standard deviation.

    Raises
    ------
    UnsupportedDistributionError
        If the family has no estimator (binomial, or an unknown name).
    NumericalError
        If a required mean or variance is zero.
    """
    estimator = _lookup(_MLE, distribution, "MLE")
    return estimator(_design(data))


def mom(
    data: ArrayLike | DescriptiveDesign,
    distribution: Distribution | str = Distribution.NORMAL,
) -> DistributionParams:
    """
    Method-of-moments estimates for a distribution family.

    Same families and errors as mle(). Only the uniform family differs:
    a, b = mean -/+ sqrt(12 * var) / 2.
    """
    estimator = _lookup(_MOM, distribution, "MoM")
    return estimator(_design(data))


def estimate(
    data: ArrayLike | DescriptiveDesign,
    distribution: Distribution | str = Distribution.NORMAL,
    method: EstimationMethod | str = EstimationMethod.MLE,
) -> DistributionParams:
    """Dispatch to mle() or mom()."""
    method = check_choice(EstimationMethod, method, "method")
    if method is EstimationMethod.MLE:
        return mle(data, distribution)
    return mom(data, distribution)
