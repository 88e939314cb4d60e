"""
GoFDesign: validated inputs for one goodness-of-fit test.

Uses a factory classmethod per test type. Parameter resolution (default
estimates, mappings, dataclasses) happens here, so every backend kernel
receives a validated DistributionParams.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping

from numpy.typing import ArrayLike

from pystatlab.core.exceptions import (
    InvalidParameterError,
    UnsupportedDistributionError,
)
from pystatlab.core.validation import check_open_unit
from pystatlab.descriptive._moments import compute_sample_std
from pystatlab.descriptive.design import DescriptiveDesign
from pystatlab.distributions.families import (
    BinomialParams,
    Distribution,
    DistributionParams,
    NormalParams,
    params_from_mapping,
    resolve_distribution,
)
from pystatlab.estimation.solvers import mle
from pystatlab.gof._common import DEFAULT_ALPHA, MIN_GOF_SAMPLES, GoFTestType

ParametersArg = DistributionParams | Mapping[str, float] | None

_KS_FAMILIES = (
    Distribution.NORMAL,
    Distribution.UNIFORM,
    Distribution.EXPONENTIAL,
    Distribution.POISSON,
    Distribution.GAMMA,
    Distribution.BINOMIAL,
)


def _as_design(data: ArrayLike | DescriptiveDesign) -> DescriptiveDesign:
    if isinstance(data, DescriptiveDesign):
        return data.require(MIN_GOF_SAMPLES)
    return DescriptiveDesign.from_array(data, name="data").require(MIN_GOF_SAMPLES)


def require_family(
    dist: Distribution,
    supported: tuple[Distribution, ...],
    label: str,
) -> None:
    if dist not in supported:
        names = tuple(d.value for d in supported)
        raise UnsupportedDistributionError(
            f"{label} does not support the {dist.value} "
            f"distribution. Supported: {', '.join(names)}",
            distribution=dist.value,
            supported=names,
        )


def default_parameters(x: DescriptiveDesign, dist: Distribution) -> DistributionParams:
    """
    Parameters estimated from the sample when the caller gives none.

    MLE for every family except binomial, which takes n = max(x) and
    p = mean / n.
    """
    if dist is Distribution.BINOMIAL:
        n_trials = int(round(x.max))
        p = x.mean / n_trials if n_trials > 0 else math.nan
        return BinomialParams(n=n_trials, p=p)
    return mle(x, dist)


def resolve_parameters(
    x: DescriptiveDesign,
    dist: Distribution,
    parameters: ParametersArg,
) -> DistributionParams:
    """Turn the caller's parameters argument into validated parameters."""
    if parameters is None:
        params = default_parameters(x, dist)
    elif isinstance(parameters, DistributionParams):
        if parameters.distribution is not dist:
            raise InvalidParameterError(
                f"parameters are for the {parameters.distribution.value} "
                f"distribution, expected {dist.value}",
                name="parameters", value=parameters,
            )
        params = parameters
    else:
        params = params_from_mapping(dist, parameters)
    params.validate()
    return params


@dataclass(frozen=True)
class GoFDesign:
    """
    Design for goodness-of-fit tests.

    The `test_type` field selects the backend kernel. Do not construct
    directly; use the factory classmethods.
    """
    test_type: GoFTestType
    _x: DescriptiveDesign
    _distribution: Distribution = Distribution.NORMAL
    _parameters: DistributionParams | None = None
    _alpha: float = DEFAULT_ALPHA
    _n_bins: int | None = None

    # --- Properties ---

    @property
    def x(self) -> DescriptiveDesign:
        return self._x

    @property
    def n(self) -> int:
        return self._x.n

    @property
    def distribution(self) -> Distribution:
        return self._distribution

    @property
    def parameters(self) -> DistributionParams | None:
        return self._parameters

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def n_bins(self) -> int:
        """Number of chi-square bins, ceil(sqrt(n)) unless given."""
        if self._n_bins is not None:
            return self._n_bins
        return max(1, math.ceil(math.sqrt(self.n)))

    # --- Factory classmethods ---

    @classmethod
    def for_ks(
        cls,
        data: ArrayLike | DescriptiveDesign,
        distribution: Distribution | str = Distribution.NORMAL,
        parameters: ParametersArg = None,
        *,
        alpha: float = DEFAULT_ALPHA,
    ) -> GoFDesign:
        """Build design for the one-sample Kolmogorov-Smirnov test."""
        x = _as_design(data)
        dist = resolve_distribution(distribution)
        require_family(dist, _KS_FAMILIES, GoFTestType.KS.value + " test")
        return cls(
            test_type=GoFTestType.KS,
            _x=x,
            _distribution=dist,
            _parameters=resolve_parameters(x, dist, parameters),
            _alpha=check_open_unit(alpha, "alpha"),
        )

    @classmethod
    def for_chi_square(
        cls,
        data: ArrayLike | DescriptiveDesign,
        distribution: Distribution | str = Distribution.NORMAL,
        parameters: ParametersArg = None,
        *,
        alpha: float = DEFAULT_ALPHA,
        n_bins: int | None = None,
    ) -> GoFDesign:
        """Build design for the chi-square goodness-of-fit test."""
        x = _as_design(data)
        dist = resolve_distribution(distribution)
        require_family(dist, _KS_FAMILIES, GoFTestType.CHI_SQUARE.value + " test")
        if x.min == x.max:
            raise InvalidParameterError(
                "chi-square test needs a non-constant sample to form bins",
                name="data", value=x.min,
            )
        if n_bins is not None:
            if isinstance(n_bins, bool) or int(n_bins) != n_bins or n_bins < 1:
                raise InvalidParameterError(
                    f"n_bins must be a positive integer, got {n_bins!r}",
                    name="n_bins", value=n_bins,
                )
            n_bins = int(n_bins)
        return cls(
            test_type=GoFTestType.CHI_SQUARE,
            _x=x,
            _distribution=dist,
            _parameters=resolve_parameters(x, dist, parameters),
            _alpha=check_open_unit(alpha, "alpha"),
            _n_bins=n_bins,
        )

    @classmethod
    def for_anderson_darling(
        cls,
        data: ArrayLike | DescriptiveDesign,
        distribution: Distribution | str = Distribution.NORMAL,
        parameters: ParametersArg = None,
        *,
        alpha: float = DEFAULT_ALPHA,
    ) -> GoFDesign:
        """
        Build design for the Anderson-Darling normality test.

        Default parameters use the sample (n - 1) standard deviation.
        """
        x = _as_design(data)
        dist = resolve_distribution(distribution)
        require_family(dist, (Distribution.NORMAL,), GoFTestType.ANDERSON_DARLING.value + " test")
        if parameters is None:
            parameters = NormalParams(mean=x.mean, std=compute_sample_std(x))
        return cls(
            test_type=GoFTestType.ANDERSON_DARLING,
            _x=x,
            _distribution=dist,
            _parameters=resolve_parameters(x, dist, parameters),
            _alpha=check_open_unit(alpha, "alpha"),
        )

    @classmethod
    def for_jarque_bera(
        cls,
        data: ArrayLike | DescriptiveDesign,
        distribution: Distribution | str = Distribution.NORMAL,
        *,
        alpha: float = DEFAULT_ALPHA,
    ) -> GoFDesign:
        """Build design for the Jarque-Bera normality test."""
        x = _as_design(data)
        dist = resolve_distribution(distribution)
        require_family(dist, (Distribution.NORMAL,), GoFTestType.JARQUE_BERA.value + " test")
        return cls(
            test_type=GoFTestType.JARQUE_BERA,
            _x=x,
            _distribution=dist,
            _alpha=check_open_unit(alpha, "alpha"),
        )

    def __repr__(self) -> str:
        return (
            f"GoFDesign(test_type={self.test_type.value!r}, n={self.n}, "
            f"distribution={self._distribution.value!r})"
        )
