"""
Tests for maximum likelihood and method-of-moments estimation.
"""

import math

import numpy as np
import pytest

from pystatlab.core.exceptions import (
    NumericalError,
    UnsupportedDistributionError,
    ValidationError,
)
from pystatlab.descriptive import DescriptiveDesign
from pystatlab.distributions import (
    BetaParams,
    ExponentialParams,
    GammaParams,
    NormalParams,
    PoissonParams,
    UniformParams,
)
from pystatlab.estimation import MIN_GAMMA_SHAPE, EstimationMethod, estimate, mle, mom


# ═══════════════════════════════════════════════════════════════════════
# Closed-form estimates
# ═══════════════════════════════════════════════════════════════════════


class TestMle:
    """Estimates built from the population mean and variance."""

    def test_normal_population_std(self, normal_sample):
        params = mle(normal_sample)
        assert isinstance(params, NormalParams)
        assert params.mean == pytest.approx(np.mean(normal_sample))
        assert params.std == pytest.approx(np.std(normal_sample, ddof=0))

    def test_normal_one_to_five(self, one_to_five):
        params = mle(one_to_five, "normal")
        assert params.mean == 3.0
        assert params.std == pytest.approx(math.sqrt(2.0))

    def test_uniform_range(self, uniform_sample):
        params = mle(uniform_sample, "uniform")
        assert isinstance(params, UniformParams)
        assert params.a == uniform_sample.min()
        assert params.b == uniform_sample.max()

    def test_exponential(self, exponential_sample):
        params = mle(exponential_sample, "exponential")
        assert isinstance(params, ExponentialParams)
        assert params.lam == pytest.approx(1.0 / np.mean(exponential_sample))
        assert params.lam == pytest.approx(0.5, rel=0.2)

    def test_poisson(self, poisson_sample):
        params = mle(poisson_sample, "poisson")
        assert isinstance(params, PoissonParams)
        assert params.lam == pytest.approx(np.mean(poisson_sample))

    def test_gamma(self, gamma_sample):
        params = mle(gamma_sample, "gamma")
        m, v = np.mean(gamma_sample), np.var(gamma_sample)
        assert isinstance(params, GammaParams)
        assert params.shape == pytest.approx(m * m / v)
        assert params.scale == pytest.approx(v / m)
        assert params.shape == pytest.approx(3.0, rel=0.35)

    def test_beta(self, beta_sample):
        params = mle(beta_sample, "beta")
        m, v = np.mean(beta_sample), np.var(beta_sample)
        s = m * (1 - m) / v - 1
        assert isinstance(params, BetaParams)
        assert params.alpha == pytest.approx(m * s)
        assert params.beta == pytest.approx((1 - m) * s)

    def test_accepts_design(self, one_to_five):
        design = DescriptiveDesign.from_array(one_to_five)
        assert mle(design, "poisson") == PoissonParams(lam=3.0)


class TestMom:
    """Same as MLE except for the uniform family."""

    @pytest.mark.parametrize("family", ["normal", "exponential", "gamma"])
    def test_matches_mle(self, exponential_sample, family):
        assert mom(exponential_sample, family) == mle(exponential_sample, family)

    def test_uniform_moments(self, uniform_sample):
        params = mom(uniform_sample, "uniform")
        half = math.sqrt(12.0 * np.var(uniform_sample)) / 2.0
        assert params.a == pytest.approx(np.mean(uniform_sample) - half)
        assert params.b == pytest.approx(np.mean(uniform_sample) + half)
        assert params.b - params.a == pytest.approx(4.0, rel=0.1)

    def test_uniform_differs_from_mle(self, uniform_sample):
        assert mom(uniform_sample, "uniform") != mle(uniform_sample, "uniform")


class TestEstimate:

    def test_dispatch(self, uniform_sample):
        assert estimate(uniform_sample, "uniform", "mom") == mom(uniform_sample, "uniform")
        assert estimate(uniform_sample, "uniform", EstimationMethod.MLE) == mle(uniform_sample, "uniform")

    def test_default_is_normal_mle(self, one_to_five):
        assert estimate(one_to_five) == mle(one_to_five)

    def test_unknown_method(self, one_to_five):
        with pytest.raises(ValidationError):
            estimate(one_to_five, "normal", "bayes")


# ═══════════════════════════════════════════════════════════════════════
# Failures and clamping
# ═══════════════════════════════════════════════════════════════════════


class TestEstimationErrors:

    @pytest.mark.parametrize("fn", [mle, mom])
    def test_binomial_unsupported(self, fn, one_to_five):
        with pytest.raises(UnsupportedDistributionError, match="binomial") as exc:
            fn(one_to_five, "binomial")
        assert "binomial" not in exc.value.supported

    def test_unknown_family(self, one_to_five):
        with pytest.raises(UnsupportedDistributionError):
            mle(one_to_five, "cauchy")

    def test_exponential_zero_mean(self):
        with pytest.raises(NumericalError, match="mean"):
            mle([-1.0, 1.0], "exponential")

    @pytest.mark.parametrize("family", ["gamma", "beta"])
    def test_zero_variance(self, family):
        with pytest.raises(NumericalError, match="variance"):
            mle([0.5, 0.5, 0.5], family)

    def test_gamma_shape_floor(self):
        params = mle([-1000.0, 1000.001], "gamma")
        assert params.shape == MIN_GAMMA_SHAPE

    def test_empty(self):
        with pytest.raises(ValidationError):
            mle([], "normal")
