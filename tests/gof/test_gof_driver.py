"""
Tests for the gof_test() driver, GoFSolution and qq_points().
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import stats

from pystatlab.core.compute.tolerances import NORMAL_INV
from pystatlab.core.exceptions import (
    UnsupportedDistributionError,
    ValidationError,
)
from pystatlab.gof import (
    GoFTestType,
    anderson_darling_test,
    chisq_test,
    gof_test,
    jarque_bera_test,
    ks_test,
    qq_points,
)


# ═══════════════════════════════════════════════════════════════════════
# Driver
# ═══════════════════════════════════════════════════════════════════════


class TestGoFTestType:
    """Canonical names plus short aliases."""

    @pytest.mark.parametrize("name, expected", [
        ("ks", GoFTestType.KS),
        ("Kolmogorov_Smirnov", GoFTestType.KS),
        ("chisq", GoFTestType.CHI_SQUARE),
        ("chi2", GoFTestType.CHI_SQUARE),
        ("chi-squared", GoFTestType.CHI_SQUARE),
        ("AD", GoFTestType.ANDERSON_DARLING),
        ("jb", GoFTestType.JARQUE_BERA),
        ("jarque-bera", GoFTestType.JARQUE_BERA),
    ])
    def test_aliases(self, name, expected):
        assert GoFTestType(name) is expected

    def test_rejection_rules(self):
        assert not GoFTestType.KS.rejects_on_p_value
        assert not GoFTestType.CHI_SQUARE.rejects_on_p_value
        assert GoFTestType.ANDERSON_DARLING.rejects_on_p_value
        assert GoFTestType.JARQUE_BERA.rejects_on_p_value


class TestGoFDriver:
    """gof_test() gives the same answer as the per-test functions."""

    def test_ks(self, normal_sample):
        a = gof_test(normal_sample, "ks")
        b = ks_test(normal_sample)
        assert a.statistic == b.statistic
        assert a.p_value == b.p_value

    def test_chi_square_passes_bins(self, exponential_sample):
        a = gof_test(exponential_sample, "chisq", "exponential", n_bins=7)
        b = chisq_test(exponential_sample, "exponential", n_bins=7)
        assert a.statistic == b.statistic
        assert a.extras["n_bins_initial"] == 7

    def test_anderson_darling(self, normal_sample):
        a = gof_test(normal_sample, GoFTestType.ANDERSON_DARLING, alpha=0.01)
        b = anderson_darling_test(normal_sample, alpha=0.01)
        assert a.statistic == b.statistic
        assert a.critical_value == b.critical_value

    def test_jarque_bera_ignores_parameters(self, normal_sample):
        a = gof_test(normal_sample, "jb", parameters={"mean": 0.0, "std": 1.0})
        b = jarque_bera_test(normal_sample)
        assert a.statistic == b.statistic

    def test_jarque_bera_normal_only(self, exponential_sample):
        with pytest.raises(UnsupportedDistributionError):
            gof_test(exponential_sample, "jb", "exponential")

    def test_unknown_test(self, normal_sample):
        with pytest.raises(ValidationError, match="test_type"):
            gof_test(normal_sample, "shapiro-wilk")

    @pytest.mark.parametrize("test_type", list(GoFTestType))
    def test_minimum_sample(self, test_type):
        with pytest.raises(ValidationError):
            gof_test([1.0, 2.0, 3.0, 4.0], test_type)

    @pytest.mark.parametrize("test_type", list(GoFTestType))
    def test_decision_follows_rule(self, exponential_sample, test_type):
        res = gof_test(exponential_sample, test_type)
        if test_type.rejects_on_p_value:
            assert res.reject == (res.p_value < res.alpha)
        elif res.critical_value is not None:
            assert res.reject == (res.statistic > res.critical_value)
        assert res.info["rejection_rule"]


class TestGoFSolution:

    def test_properties(self, normal_sample):
        res = gof_test(normal_sample, "ks", alpha=0.05)
        assert res.significance_level == res.alpha == 0.05
        assert res.sample_size == normal_sample.size
        assert res.distribution.value == "normal"
        assert "total_seconds" in res.timing

    def test_summary(self, normal_sample):
        text = chisq_test(normal_sample).summary()
        assert "Chi-square goodness-of-fit test" in text
        assert "hypothesized distribution: normal" in text
        assert "df = " in text
        assert "reject H0 at alpha = 0.05" in text

    def test_summary_without_critical_value(self, normal_sample):
        text = anderson_darling_test(normal_sample, alpha=0.2).summary()
        assert "critical value = none" in text
        assert "warning:" in text

    def test_repr(self, normal_sample):
        assert repr(jarque_bera_test(normal_sample)).startswith(
            "GoFSolution(test_type='jarque-bera'"
        )


# ═══════════════════════════════════════════════════════════════════════
# Q-Q points
# ═══════════════════════════════════════════════════════════════════════


class TestQQPoints:
    """Blom positions mapped through the fitted normal quantile."""

    def test_against_scipy(self, small_normal_sample):
        theoretical, sample = qq_points(small_normal_sample)
        n = small_normal_sample.size
        mu, sd = np.mean(small_normal_sample), np.std(small_normal_sample)
        positions = (np.arange(1, n + 1) - 0.375) / (n + 0.25)
        assert_allclose(theoretical, mu + sd * stats.norm.ppf(positions),
                        atol=sd * NORMAL_INV.atol * 2)
        assert_allclose(sample, np.sort(small_normal_sample))

    def test_sorted_and_increasing(self, normal_sample):
        theoretical, sample = qq_points(normal_sample)
        assert theoretical.shape == sample.shape == normal_sample.shape
        assert np.all(np.diff(theoretical) > 0)
        assert np.all(np.diff(sample) >= 0)

    def test_explicit_parameters(self):
        theoretical, _ = qq_points([1.0, 2.0, 3.0], parameters={"mean": 0.0, "std": 1.0})
        assert theoretical[1] == pytest.approx(0.0, abs=NORMAL_INV.atol)
        assert theoretical[0] == pytest.approx(-theoretical[2])

    def test_input_untouched(self):
        x = np.array([3.0, 1.0, 2.0])
        qq_points(x)
        np.testing.assert_array_equal(x, [3.0, 1.0, 2.0])

    def test_normal_only(self, exponential_sample):
        with pytest.raises(UnsupportedDistributionError, match="Q-Q"):
            qq_points(exponential_sample, "exponential")

    def test_needs_two(self):
        with pytest.raises(ValidationError):
            qq_points([1.0])
