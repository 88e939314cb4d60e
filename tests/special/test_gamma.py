"""
Tests for the gamma function, incomplete gamma and chi-square functions.
"""

import math
import warnings

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import special as sp
from scipy import stats

from pystatlab.core.compute.tolerances import CHI_SQUARE_INV, GAMMA, INCOMPLETE_GAMMA
from pystatlab.core.exceptions import InvalidParameterError
from pystatlab.special import (
    chi_square_cdf,
    chi_square_inv,
    chi_square_sf,
    gamma_function,
    log_gamma,
    lower_incomplete_gamma,
    regularized_gamma_p,
    regularized_gamma_q,
    upper_incomplete_gamma,
)


# ═══════════════════════════════════════════════════════════════════════
# Gamma function
# ═══════════════════════════════════════════════════════════════════════


class TestGammaFunction:
    """Lanczos approximation, reflection below 0.5."""

    @pytest.mark.parametrize("n", [1, 2, 3, 5, 8, 12])
    def test_factorials(self, n):
        assert gamma_function(n) == pytest.approx(math.factorial(n - 1), rel=GAMMA.rtol)

    def test_half(self):
        assert gamma_function(0.5) == pytest.approx(math.sqrt(math.pi), rel=GAMMA.rtol)

    def test_against_scipy(self):
        z = np.array([0.1, 0.7, 1.3, 2.5, 4.2, 9.9, 15.5])
        got = np.array([gamma_function(v) for v in z])
        assert_allclose(got, sp.gamma(z), rtol=GAMMA.rtol)

    def test_negative_non_integer(self):
        assert gamma_function(-0.5) == pytest.approx(sp.gamma(-0.5), rel=GAMMA.rtol)

    @pytest.mark.parametrize("z", [0.0, -1.0, -3.0])
    def test_poles(self, z):
        with pytest.raises(InvalidParameterError):
            gamma_function(z)

    def test_log_gamma_against_scipy(self):
        z = np.array([0.2, 0.9, 3.5, 10.0, 50.0, 171.5, 400.0])
        got = np.array([log_gamma(v) for v in z])
        assert_allclose(got, sp.gammaln(z), rtol=GAMMA.rtol, atol=1e-12)

    def test_log_gamma_domain(self):
        with pytest.raises(InvalidParameterError):
            log_gamma(0.0)


# ═══════════════════════════════════════════════════════════════════════
# Incomplete gamma
# ═══════════════════════════════════════════════════════════════════════


class TestIncompleteGamma:
    """Series for x < s + 1, continued fraction otherwise."""

    @pytest.mark.parametrize("s", [0.5, 1.0, 2.5, 7.0, 30.0])
    @pytest.mark.parametrize("x", [0.1, 1.0, 3.0, 8.0, 40.0])
    def test_p_against_scipy(self, s, x):
        assert regularized_gamma_p(s, x) == pytest.approx(
            sp.gammainc(s, x), rel=INCOMPLETE_GAMMA.rtol, abs=INCOMPLETE_GAMMA.atol,
        )

    @pytest.mark.parametrize("s", [0.5, 2.0, 10.0])
    @pytest.mark.parametrize("x", [0.5, 5.0, 25.0])
    def test_q_against_scipy(self, s, x):
        assert regularized_gamma_q(s, x) == pytest.approx(
            sp.gammaincc(s, x), rel=INCOMPLETE_GAMMA.rtol, abs=INCOMPLETE_GAMMA.atol,
        )

    @pytest.mark.parametrize("s, x", [(0.5, 0.2), (3.0, 2.0), (3.0, 6.0), (12.0, 9.0)])
    def test_p_plus_q_is_one(self, s, x):
        assert regularized_gamma_p(s, x) + regularized_gamma_q(s, x) == pytest.approx(1.0, abs=1e-12)

    def test_boundaries(self):
        assert regularized_gamma_p(2.0, 0.0) == 0.0
        assert regularized_gamma_q(2.0, 0.0) == 1.0
        assert regularized_gamma_p(2.0, math.inf) == 1.0

    def test_unregularized(self):
        s, x = 3.0, 2.0
        assert lower_incomplete_gamma(s, x) == pytest.approx(
            sp.gammainc(s, x) * sp.gamma(s), rel=INCOMPLETE_GAMMA.rtol,
        )
        assert upper_incomplete_gamma(s, x) == pytest.approx(
            sp.gammaincc(s, x) * sp.gamma(s), rel=INCOMPLETE_GAMMA.rtol,
        )

    def test_shape_must_be_positive(self):
        with pytest.raises(InvalidParameterError):
            regularized_gamma_p(0.0, 1.0)

    def test_no_warning_in_normal_range(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", RuntimeWarning)
            regularized_gamma_p(50.0, 45.0)


# ═══════════════════════════════════════════════════════════════════════
# Chi-square
# ═══════════════════════════════════════════════════════════════════════


class TestChiSquare:
    """CDF, survival function and bisection quantile."""

    @pytest.mark.parametrize("df", [1, 2, 5, 10, 30])
    def test_cdf_against_scipy(self, df):
        x = np.array([0.1, 0.5, 1.0, 3.0, 7.5, 15.0, 40.0])
        got = np.array([chi_square_cdf(v, df) for v in x])
        assert_allclose(got, stats.chi2.cdf(x, df),
                        rtol=INCOMPLETE_GAMMA.rtol, atol=INCOMPLETE_GAMMA.atol)

    def test_sf_small_tail(self):
        assert chi_square_sf(60.0, 3) == pytest.approx(stats.chi2.sf(60.0, 3), rel=1e-8)

    def test_degenerate_inputs(self):
        assert chi_square_cdf(-1.0, 3) == 0.0
        assert chi_square_cdf(2.0, 0) == 0.0
        assert chi_square_sf(0.0, 3) == 1.0

    @pytest.mark.parametrize("p", [0.05, 0.5, 0.9, 0.95, 0.99])
    @pytest.mark.parametrize("df", [1, 2, 4, 9, 25])
    def test_inv_against_scipy(self, p, df):
        assert chi_square_inv(p, df) == pytest.approx(
            stats.chi2.ppf(p, df), rel=CHI_SQUARE_INV.rtol, abs=CHI_SQUARE_INV.atol,
        )

    @pytest.mark.parametrize("p, df", [(0.1, 3), (0.6, 7), (0.975, 12)])
    def test_inv_round_trip(self, p, df):
        assert chi_square_cdf(chi_square_inv(p, df), df) == pytest.approx(p, abs=1e-9)

    @pytest.mark.parametrize("p, df", [(0.0, 2), (1.0, 2), (0.5, 0), (0.5, -1)])
    def test_inv_domain(self, p, df):
        with pytest.raises(InvalidParameterError):
            chi_square_inv(p, df)
