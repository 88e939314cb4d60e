"""
Special-function kernel.

Every higher-level module computes its probabilities through this one
kernel; no formula is re-derived at a call site.

Public API:
    erf(x), erf_inv(x)            - error function and its closed-form inverse
    normal_cdf(x), normal_pdf(x)  - standard normal distribution
    normal_inv(p)                 - rational normal quantile (plotting positions)
    t_cdf(x, df)                  - Student's t CDF (approximation)
    gamma_function(z), log_gamma(z)
    lower_incomplete_gamma(s, x), upper_incomplete_gamma(s, x)
    regularized_gamma_p(s, x), regularized_gamma_q(s, x)
    chi_square_cdf(x, df), chi_square_sf(x, df), chi_square_inv(p, df)
    z_critical_value(level, tail), t_critical_value(df, level, tail)
"""

from pystatlab.special._erf import erf, erf_inv, normal_cdf, normal_pdf, normal_inv
from pystatlab.special._student import t_cdf
from pystatlab.special._gamma import (
    gamma_function,
    log_gamma,
    lower_incomplete_gamma,
    upper_incomplete_gamma,
    regularized_gamma_p,
    regularized_gamma_q,
    chi_square_cdf,
    chi_square_sf,
    chi_square_inv,
)
from pystatlab.special.critical import (
    normal_quantile,
    z_critical_value,
    t_critical_value,
)

__all__ = [
    "erf",
    "erf_inv",
    "normal_cdf",
    "normal_pdf",
    "normal_inv",
    "t_cdf",
    "gamma_function",
    "log_gamma",
    "lower_incomplete_gamma",
    "upper_incomplete_gamma",
    "regularized_gamma_p",
    "regularized_gamma_q",
    "chi_square_cdf",
    "chi_square_sf",
    "chi_square_inv",
    "normal_quantile",
    "z_critical_value",
    "t_critical_value",
]
