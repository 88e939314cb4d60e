"""
Accuracy tiers for the closed-form approximations.

Every special function in pystatlab is an approximation with a known error
bound. These tiers record those bounds in one place so that the test suite
compares against reference implementations at the accuracy the formula
actually promises, and no tighter.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Exact arithmetic on the same formula: moments, closed-form estimators
EXACT = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='exact',
    description='Closed-form arithmetic, differs only by rounding',
)

# Abramowitz-Stegun 7.1.26, |error| <= 1.5e-7
ERF = ToleranceTier(
    rtol=0.0,
    atol=1.5e-7,
    name='erf',
    description='Rational approximation to erf, max absolute error 1.5e-7',
)

# normal_cdf inherits half the erf error
NORMAL_CDF = ToleranceTier(
    rtol=0.0,
    atol=7.5e-8,
    name='normal_cdf',
    description='0.5 * (1 + erf(x / sqrt(2)))',
)

# Closed-form inverse with a = 0.140012, relative error well under 0.5%
ERF_INV = ToleranceTier(
    rtol=5e-3,
    atol=1e-6,
    name='erf_inv',
    description='Closed-form inverse error function',
)

# Abramowitz-Stegun 26.2.23, |error| < 4.5e-4
NORMAL_INV = ToleranceTier(
    rtol=0.0,
    atol=4.5e-4,
    name='normal_inv',
    description='Rational approximation to the normal quantile',
)

# Lanczos g=7, 9 coefficients: close to double precision
GAMMA = ToleranceTier(
    rtol=1e-12,
    atol=0.0,
    name='gamma',
    description='Lanczos approximation to the gamma function',
)

# Series / continued fraction stopped at 1e-15 relative change
INCOMPLETE_GAMMA = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='incomplete_gamma',
    description='Regularized incomplete gamma by series or Lentz continued fraction',
)

# Bisection on chi_square_cdf
CHI_SQUARE_INV = ToleranceTier(
    rtol=1e-7,
    atol=1e-9,
    name='chi_square_inv',
    description='Chi-square quantile by bisection',
)

# Asymptotic KS p-value formula vs an exact/one-sample reference
KS_PVALUE = ToleranceTier(
    rtol=0.0,
    atol=0.05,
    name='ks_pvalue',
    description='Asymptotic Kolmogorov series with Stephens small-sample scaling',
)

# Piecewise exponential fit of the Anderson-Darling null distribution
AD_PVALUE = ToleranceTier(
    rtol=0.0,
    atol=0.02,
    name='ad_pvalue',
    description="D'Agostino-Stephens piecewise p-value approximation",
)


def tier_for(name: str) -> ToleranceTier:
    """
    Look up a tier by name.

    Raises:
        KeyError: If no tier has that name
    """
    for tier in _ALL_TIERS:
        if tier.name == name:
            return tier
    raise KeyError(
        f"Unknown tolerance tier {name!r}. "
        f"Known tiers: {[t.name for t in _ALL_TIERS]}"
    )


_ALL_TIERS = (
    EXACT, ERF, NORMAL_CDF, ERF_INV, NORMAL_INV, GAMMA,
    INCOMPLETE_GAMMA, CHI_SQUARE_INV, KS_PVALUE, AD_PVALUE,
)
