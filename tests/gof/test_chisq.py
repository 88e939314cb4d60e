"""
Tests for the chi-square goodness-of-fit test and its bin merging.
"""

import math

import numpy as np
import pytest
from scipy import stats

from pystatlab.core.compute.tolerances import CHI_SQUARE_INV, INCOMPLETE_GAMMA
from pystatlab.core.exceptions import InvalidParameterError, UnsupportedDistributionError
from pystatlab.distributions import PoissonParams
from pystatlab.gof import ChiSquareBin, chisq_test
from pystatlab.gof.backends._chisq_test import MIN_EXPECTED, merge_bins


def _bins(expected, observed=None):
    observed = observed or [1] * len(expected)
    return [
        ChiSquareBin(start=float(i), end=float(i + 1), observed=o, expected=e)
        for i, (o, e) in enumerate(zip(observed, expected))
    ]


# ═══════════════════════════════════════════════════════════════════════
# Bin merging
# ═══════════════════════════════════════════════════════════════════════


class TestMergeBins:
    """First bin merges forward, any other bin backward."""

    def test_first_merges_forward(self):
        merged = merge_bins(_bins([2.0, 10.0, 8.0], [1, 9, 7]))
        assert [b.expected for b in merged] == [12.0, 8.0]
        assert [b.observed for b in merged] == [10, 7]
        assert (merged[0].start, merged[0].end) == (0.0, 2.0)

    def test_later_merges_backward(self):
        merged = merge_bins(_bins([10.0, 6.0, 3.0]))
        assert [b.expected for b in merged] == [10.0, 9.0]
        assert (merged[1].start, merged[1].end) == (1.0, 3.0)

    def test_cascade(self):
        merged = merge_bins(_bins([2.0, 10.0, 3.0, 10.0]))
        assert [b.expected for b in merged] == [15.0, 10.0]

    def test_stops_at_one_bin(self):
        merged = merge_bins(_bins([1.0, 1.0, 1.0]))
        assert len(merged) == 1
        assert merged[0].expected == 3.0
        assert merged[0].expected < MIN_EXPECTED

    def test_nothing_to_merge(self):
        bins = _bins([5.0, 6.0])
        assert merge_bins(bins) == bins


# ═══════════════════════════════════════════════════════════════════════
# Test statistic
# ═══════════════════════════════════════════════════════════════════════


class TestChiSquare:
    """Equal-width bins over [min, max], df = bins - 1 - k."""

    def test_observed_sums_to_n(self, normal_sample):
        res = chisq_test(normal_sample)
        assert sum(res.extras["observed"]) == normal_sample.size
        assert res.extras["n_bins_initial"] == math.ceil(math.sqrt(normal_sample.size))

    def test_bins_cover_range(self, normal_sample):
        bins = chisq_test(normal_sample).extras["bins"]
        assert bins[0].start == normal_sample.min()
        assert bins[-1].end == normal_sample.max()
        for a, b in zip(bins, bins[1:]):
            assert a.end == b.start

    def test_merged_bins_meet_minimum(self, normal_sample):
        bins = chisq_test(normal_sample).extras["bins"]
        assert len(bins) > 1
        assert all(b.expected >= MIN_EXPECTED for b in bins)

    def test_statistic_and_p_value(self, normal_sample):
        res = chisq_test(normal_sample)
        obs = np.array(res.extras["observed"], dtype=float)
        exp = np.array(res.extras["expected"])
        assert res.statistic == pytest.approx(np.sum((obs - exp) ** 2 / exp))
        assert res.df == len(obs) - 1 - 2
        assert res.p_value == pytest.approx(
            stats.chi2.sf(res.statistic, res.df),
            rel=INCOMPLETE_GAMMA.rtol, abs=INCOMPLETE_GAMMA.atol,
        )
        assert res.critical_value == pytest.approx(
            stats.chi2.ppf(0.95, res.df), rel=CHI_SQUARE_INV.rtol, abs=CHI_SQUARE_INV.atol,
        )
        assert res.reject == (res.statistic > res.critical_value)

    def test_exponential_df(self, exponential_sample):
        res = chisq_test(exponential_sample, "exponential", n_bins=8)
        assert res.extras["n_bins_initial"] == 8
        assert res.df == len(res.extras["bins"]) - 1 - 1

    def test_wrong_family_rejected(self, exponential_sample):
        res = chisq_test(exponential_sample, "uniform", n_bins=10)
        assert res.reject

    def test_merge_warning(self, normal_sample):
        res = chisq_test(normal_sample, n_bins=40)
        assert len(res.extras["bins"]) < 40
        assert any("merged 40 bins" in w for w in res.warnings)


class TestChiSquareDiscrete:
    """Discrete families use the mass of the integers inside each bin."""

    def test_expected_is_integer_mass(self, poisson_sample):
        res = chisq_test(poisson_sample, "poisson", PoissonParams(4.0))
        lo, hi = poisson_sample.min(), poisson_sample.max()
        mass = stats.poisson.cdf(hi, 4.0) - stats.poisson.cdf(lo - 1, 4.0)
        assert sum(res.extras["expected"]) == pytest.approx(
            poisson_sample.size * mass, rel=1e-6,
        )
        assert sum(res.extras["observed"]) == poisson_sample.size

    def test_df_uses_one_parameter(self, poisson_sample):
        res = chisq_test(poisson_sample, "poisson")
        assert res.df == len(res.extras["bins"]) - 2


class TestChiSquareDegenerate:

    def test_no_degrees_of_freedom(self, rng):
        res = chisq_test(rng.normal(size=6))
        assert res.df <= 0
        assert res.p_value == 1.0
        assert res.critical_value is None
        assert not res.reject
        assert any("df =" in w for w in res.warnings)

    def test_constant_sample(self):
        with pytest.raises(InvalidParameterError, match="non-constant"):
            chisq_test([2.0] * 8)

    @pytest.mark.parametrize("n_bins", [0, -3, 2.5, True])
    def test_bad_n_bins(self, normal_sample, n_bins):
        with pytest.raises(InvalidParameterError):
            chisq_test(normal_sample, n_bins=n_bins)

    def test_beta_unsupported(self, beta_sample):
        with pytest.raises(UnsupportedDistributionError):
            chisq_test(beta_sample, "beta")
