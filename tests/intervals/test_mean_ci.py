"""
Tests for single-mean and two-sample mean confidence intervals.
"""

import math

import numpy as np
import pytest
from scipy import stats

from pystatlab.core.exceptions import (
    InvalidParameterError,
    LengthMismatchError,
    ValidationError,
)
from pystatlab.core.tails import TailType
from pystatlab.intervals import (
    IntervalDesign,
    confidence_interval,
    two_sample_confidence_interval,
)
from pystatlab.intervals._common import METHOD_T, METHOD_Z_KNOWN, METHOD_Z_LARGE_SAMPLE
from pystatlab.special import t_critical_value


# ═══════════════════════════════════════════════════════════════════════
# Single mean
# ═══════════════════════════════════════════════════════════════════════


class TestMeanInterval:
    """t for small or normal samples, z for known variance or n > 30."""

    def test_one_to_five(self, one_to_five):
        ci = confidence_interval(one_to_five)
        se = math.sqrt(2.5) / math.sqrt(5)
        crit = t_critical_value(4, 0.95)
        assert ci.method == METHOD_T
        assert ci.df == 4
        assert ci.estimate == 3.0
        assert ci.standard_error == pytest.approx(se)
        assert ci.lower == pytest.approx(3.0 - crit * se)
        assert ci.upper == pytest.approx(3.0 + crit * se)

    def test_symmetric_two_tailed(self, small_normal_sample):
        ci = confidence_interval(small_normal_sample)
        assert ci.estimate - ci.lower == pytest.approx(ci.upper - ci.estimate)
        assert ci.margin_of_error == pytest.approx((ci.upper - ci.lower) / 2.0)

    def test_close_to_scipy(self, small_normal_sample):
        ci = confidence_interval(small_normal_sample, is_normal=True)
        lo, hi = stats.t.interval(
            0.95, small_normal_sample.size - 1,
            loc=np.mean(small_normal_sample),
            scale=stats.sem(small_normal_sample),
        )
        assert ci.lower == pytest.approx(lo, rel=1e-3)
        assert ci.upper == pytest.approx(hi, rel=1e-3)

    def test_width_grows_with_level(self, small_normal_sample):
        widths = [
            confidence_interval(small_normal_sample, level).margin_of_error
            for level in (0.80, 0.90, 0.95, 0.99)
        ]
        assert all(b > a for a, b in zip(widths, widths[1:]))

    def test_known_variance_uses_z(self, one_to_five):
        ci = confidence_interval(one_to_five, known_variance=True, population_variance=4.0)
        assert ci.method == METHOD_Z_KNOWN
        assert ci.df is None
        assert ci.critical_value == 1.96
        assert ci.standard_error == pytest.approx(2.0 / math.sqrt(5))

    def test_large_sample_uses_z(self, normal_sample):
        ci = confidence_interval(normal_sample)
        assert ci.method == METHOD_Z_LARGE_SAMPLE
        assert ci.critical_value == 1.96
        assert any("large-sample" in w for w in ci.warnings)

    def test_large_normal_sample_keeps_t(self, normal_sample):
        ci = confidence_interval(normal_sample, is_normal=True)
        assert ci.method == METHOD_T
        assert ci.df == normal_sample.size - 1

    def test_left_tailed(self, small_normal_sample):
        ci = confidence_interval(small_normal_sample, tail="left")
        assert ci.lower == -math.inf
        assert ci.upper > ci.estimate
        assert ci.tail is TailType.LEFT

    def test_right_tailed(self, small_normal_sample):
        ci = confidence_interval(small_normal_sample, tail=TailType.RIGHT)
        assert ci.upper == math.inf
        assert ci.lower < ci.estimate

    def test_one_sided_tighter_than_two_sided(self, small_normal_sample):
        two = confidence_interval(small_normal_sample)
        right = confidence_interval(small_normal_sample, tail="right")
        assert right.lower > two.lower

    def test_constant_warns(self):
        ci = confidence_interval([2.0, 2.0, 2.0])
        assert ci.lower == ci.upper == 2.0
        assert any("constant" in w for w in ci.warnings)

    def test_accepts_design(self, one_to_five):
        design = IntervalDesign.for_mean(one_to_five, 0.90)
        assert confidence_interval(design).conf_level == 0.90

    def test_summary(self, one_to_five):
        text = confidence_interval(one_to_five, tail="left").summary()
        assert "95 percent confidence interval" in text
        assert "-Inf" in text
        assert "df = 4" in text


class TestMeanValidation:

    def test_known_variance_requires_value(self, one_to_five):
        with pytest.raises(InvalidParameterError, match="population_variance"):
            confidence_interval(one_to_five, known_variance=True)

    def test_population_variance_positive(self, one_to_five):
        with pytest.raises(InvalidParameterError):
            confidence_interval(one_to_five, known_variance=True, population_variance=0.0)

    @pytest.mark.parametrize("level", [0.0, 1.0, 95])
    def test_conf_level(self, one_to_five, level):
        with pytest.raises(InvalidParameterError):
            confidence_interval(one_to_five, level)

    def test_t_needs_two(self):
        with pytest.raises(ValidationError):
            confidence_interval([1.0])

    def test_bad_tail(self, one_to_five):
        with pytest.raises(ValidationError):
            confidence_interval(one_to_five, tail="sideways")


# ═══════════════════════════════════════════════════════════════════════
# Two samples
# ═══════════════════════════════════════════════════════════════════════


@pytest.fixture
def two_groups(rng):
    a = rng.normal(10.0, 1.0, size=12)
    b = rng.normal(9.0, 2.0, size=18)
    return a, b


class TestTwoSampleInterval:
    """Pooled, Welch and paired differences of means."""

    def test_pooled(self, two_groups):
        a, b = two_groups
        ci = two_sample_confidence_interval(a, b, method="pooled")
        n1, n2 = a.size, b.size
        sp2 = ((n1 - 1) * a.var(ddof=1) + (n2 - 1) * b.var(ddof=1)) / (n1 + n2 - 2)
        se = math.sqrt(sp2 * (1 / n1 + 1 / n2))
        assert ci.df == n1 + n2 - 2
        assert ci.estimate == pytest.approx(a.mean() - b.mean())
        assert ci.standard_error == pytest.approx(se)
        assert ci.margin_of_error == pytest.approx(t_critical_value(ci.df, 0.95) * se)

    def test_welch_df_is_floored(self, two_groups):
        a, b = two_groups
        ci = two_sample_confidence_interval(a, b)
        va, vb = a.var(ddof=1) / a.size, b.var(ddof=1) / b.size
        df = (va + vb) ** 2 / (va ** 2 / (a.size - 1) + vb ** 2 / (b.size - 1))
        assert ci.df == math.floor(df)
        assert ci.standard_error == pytest.approx(math.sqrt(va + vb))
        assert "Welch" in ci.method

    def test_paired_matches_one_sample_on_differences(self, rng):
        a = rng.normal(5.0, 1.0, size=10)
        b = a + rng.normal(0.5, 0.3, size=10)
        paired = two_sample_confidence_interval(a, b, method="paired")
        direct = confidence_interval(a - b, is_normal=True)
        assert paired.lower == pytest.approx(direct.lower)
        assert paired.upper == pytest.approx(direct.upper)
        assert paired.df == 9

    def test_paired_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            two_sample_confidence_interval([1.0, 2.0, 3.0], [1.0, 2.0], method="paired")

    def test_estimates(self, two_groups):
        a, b = two_groups
        ci = two_sample_confidence_interval(a, b, method="pooled")
        assert ci.estimates["mean of data1"] == pytest.approx(a.mean())
        assert ci.estimates["mean of data2"] == pytest.approx(b.mean())

    def test_one_sided(self, two_groups):
        a, b = two_groups
        ci = two_sample_confidence_interval(a, b, tail="right")
        assert ci.upper == math.inf

    def test_constant_samples_welch(self):
        ci = two_sample_confidence_interval([1.0, 1.0, 1.0], [2.0, 2.0, 2.0])
        assert ci.df == 4
        assert ci.lower == ci.upper == -1.0

    def test_unknown_method(self, two_groups):
        a, b = two_groups
        with pytest.raises(ValidationError):
            two_sample_confidence_interval(a, b, method="bootstrap")

    def test_needs_two_each(self):
        with pytest.raises(ValidationError):
            two_sample_confidence_interval([1.0], [1.0, 2.0])
